"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Put src and the project root on sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root / "src", project_root):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear Beth Yw? environment overrides and restore default logging."""
    from core.logging_config import configure_logging

    for name in ("BETHYW_DATA_DIR", "BETHYW_JSON", "BETHYW_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    configure_logging()
