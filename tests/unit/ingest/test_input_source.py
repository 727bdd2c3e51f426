"""Unit tests for input sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import BethYwSourceError
from ingest.input_source import InputFile
from tests.fixture_paths import fixture_path


def test_input_file_open_returns_readable_stream() -> None:
    """Opening an existing file should return a readable text stream."""
    source = InputFile(fixture_path("datasets/areas.csv"))

    stream = source.open()
    first_line = stream.readline()
    source.close()

    assert first_line.startswith("Local authority code")


def test_input_file_open_raises_for_missing_file(tmp_path: Path) -> None:
    """Opening a missing file should fail with a source error."""
    source = InputFile(tmp_path / "missing.csv")

    with pytest.raises(BethYwSourceError):
        source.open()


def test_input_file_context_manager_closes_stream() -> None:
    """Leaving the context should close the stream."""
    with InputFile(fixture_path("datasets/areas.csv")) as stream:
        pass

    assert stream.closed
