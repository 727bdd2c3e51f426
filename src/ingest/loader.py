"""Batch import of the areas table and selected datasets.

This module opens each registered file under a data directory and
populates an Areas collection. A failure in one dataset is logged
and the batch continues with the next one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from core.datasets import AREAS
from core.errors import BethYwError
from core.logging_config import get_logger
from core.types import ImportFilters, InputFileSource, StringFilterSet
from ingest.input_source import InputFile
from store.areas import Areas

_LOGGER = get_logger(__name__)


def load_areas(
    areas: Areas,
    data_dir: Path,
    areas_filter: StringFilterSet | None = None,
) -> int:
    """Import the authority code table from ``data_dir``.

    Args:
        areas: Collection to populate.
        data_dir: Directory containing ``areas.csv``.
        areas_filter: Authority codes or name fragments to keep.

    Returns:
        Number of rows merged.

    Raises:
        BethYwError: If the file is missing or malformed.
    """
    return import_source(areas, data_dir, AREAS, ImportFilters(areas=areas_filter))


def load_datasets(
    areas: Areas,
    data_dir: Path,
    datasets: Iterable[InputFileSource],
    filters: ImportFilters | None = None,
) -> list[str]:
    """Import the areas table and then every dataset, never raising.

    Args:
        areas: Collection to populate.
        data_dir: Directory containing the data files.
        datasets: Registered datasets to import, in order.
        filters: Optional area, measure, and year filters.

    Returns:
        Codes of the sources that imported without error.
    """
    filters = filters or ImportFilters()
    imported: list[str] = []
    for source in (AREAS, *datasets):
        try:
            import_source(areas, data_dir, source, filters)
        except BethYwError as error:
            _LOGGER.error(
                "dataset_import_failed",
                dataset=source.code,
                file=source.file,
                error=str(error),
                error_type=type(error).__name__,
            )
            continue
        imported.append(source.code)
    return imported


def import_source(
    areas: Areas,
    data_dir: Path,
    source: InputFileSource,
    filters: ImportFilters,
) -> int:
    """Open one registered file and populate the collection from it.

    Args:
        areas: Collection to populate.
        data_dir: Directory containing the file.
        source: Registered source to import.
        filters: Area, measure, and year filters.

    Returns:
        Number of rows or records merged.

    Raises:
        BethYwError: If the file cannot be opened or parsed.
    """
    with InputFile(Path(data_dir) / source.file) as stream:
        merged = areas.populate(
            stream,
            source.parser,
            source.cols,
            areas_filter=filters.areas,
            measures_filter=filters.measures,
            years_filter=filters.years,
        )
    _LOGGER.info("dataset_imported", dataset=source.code, file=source.file, merged_rows=merged)
    return merged
