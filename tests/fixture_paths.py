"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path
from typing import IO


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def open_fixture(relative_path: str) -> IO[str]:
    """Open a fixture file as UTF-8 text for a parser."""
    return fixture_path(relative_path).open(encoding="utf-8", newline="")
