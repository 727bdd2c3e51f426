"""Unit tests for the batch loader."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from structlog.testing import capture_logs

from core.datasets import BIZ, COMPLETE_POP, POPDEN
from core.errors import BethYwSourceError
from core.types import ImportFilters
from ingest.loader import load_areas, load_datasets
from store.areas import Areas
from tests.fixture_paths import fixture_path


def test_load_areas_reads_areas_table() -> None:
    """Loading areas should import every row of areas.csv."""
    areas = Areas()

    load_areas(areas, fixture_path("datasets"))

    assert len(areas) == 3


def test_load_areas_raises_for_missing_directory(tmp_path: Path) -> None:
    """A missing areas.csv should surface as a source error."""
    with pytest.raises(BethYwSourceError):
        load_areas(Areas(), tmp_path)


def test_load_datasets_continues_after_failed_dataset() -> None:
    """A missing dataset file should not stop later datasets."""
    areas = Areas()

    imported = load_datasets(areas, fixture_path("datasets"), [BIZ, COMPLETE_POP])

    assert imported == ["areas", "complete-pop"]


def test_load_datasets_continues_after_undecodable_dataset(tmp_path: Path) -> None:
    """A dataset with invalid UTF-8 should fail alone and not stop the batch."""
    for name in ("areas.csv", "complete-popu1009-pop.csv"):
        shutil.copy(fixture_path(f"datasets/{name}"), tmp_path / name)
    (tmp_path / "popu1009.json").write_bytes(b'{"value": [\xff\xfe]}')

    imported = load_datasets(Areas(), tmp_path, [POPDEN, COMPLETE_POP])

    assert imported == ["areas", "complete-pop"]


def test_load_datasets_logs_failed_dataset() -> None:
    """A failed dataset should emit a structured error event."""
    with capture_logs() as logs:
        load_datasets(Areas(), fixture_path("datasets"), [BIZ])

    failures = [entry for entry in logs if entry["event"] == "dataset_import_failed"]

    assert failures[0]["dataset"] == "biz"


def test_load_datasets_applies_filters() -> None:
    """Filters should restrict areas, measures, and years across datasets."""
    areas = Areas()
    filters = ImportFilters(
        areas=frozenset({"cardiff"}),
        measures=frozenset({"pop"}),
        years=(2015, 2015),
    )

    load_datasets(areas, fixture_path("datasets"), [POPDEN], filters)

    assert areas.to_dict() == {
        "W06000015": {
            "names": {"cym": "Caerdydd", "eng": "Cardiff"},
            "measures": {"pop": {"2015": 346100.0}},
        }
    }
