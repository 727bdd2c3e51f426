"""Parser for single-measure authority-by-year CSV tables.

The header row names the authority code column followed by one
column per year. Each data row holds an authority code and the
measure value for every year column.
"""

from __future__ import annotations

import math
from typing import IO, TYPE_CHECKING, Any

from core.errors import BethYwMalformedInputError, BethYwOutOfRangeError
from core.types import ColumnMapping, SourceColumn, StringFilterSet, YearFilter
from ingest.stream_reader import read_csv_rows
from store.area import Area
from store.filtering import check_string_filter, check_year_filter
from store.measure import Measure

if TYPE_CHECKING:
    from store.areas import Areas

_REQUIRED_COLUMNS = (
    SourceColumn.AUTH_CODE,
    SourceColumn.SINGLE_MEASURE_CODE,
    SourceColumn.SINGLE_MEASURE_NAME,
)


def populate_from_authority_by_year_csv(
    areas: Areas,
    stream: IO[Any],
    cols: ColumnMapping,
    areas_filter: StringFilterSet | None = None,
    measures_filter: StringFilterSet | None = None,
    years_filter: YearFilter | None = None,
) -> int:
    """Import one measure per area from an authority-by-year CSV.

    Args:
        areas: Collection to merge areas into.
        stream: Open CSV stream with a header row.
        cols: Mapping with the code header and the fixed measure code/label.
        areas_filter: Authority codes or name fragments to keep.
        measures_filter: Measure codes to keep.
        years_filter: Inclusive year range to keep.

    Returns:
        Number of rows merged into the collection.

    Raises:
        BethYwMalformedInputError: If the header, a year, or a value is malformed.
        BethYwOutOfRangeError: If ``cols`` lacks a required column.
    """
    missing = [column.name for column in _REQUIRED_COLUMNS if column not in cols]
    if missing:
        raise BethYwOutOfRangeError(f"Not enough columns: mapping is missing {', '.join(missing)}.")
    rows = read_csv_rows(stream)
    if not rows:
        raise BethYwMalformedInputError(
            "Malformed file: missing header row in authority-by-year CSV."
        )
    header, data_rows = rows[0], rows[1:]
    code_header = cols[SourceColumn.AUTH_CODE]
    if header[0] != code_header:
        raise BethYwMalformedInputError(
            f"Malformed file: first header cell is '{header[0]}', expected '{code_header}'."
        )
    years = [_parse_year(cell) for cell in header[1:]]
    measure_code = cols[SourceColumn.SINGLE_MEASURE_CODE]
    measure_label = cols[SourceColumn.SINGLE_MEASURE_NAME]
    merged = 0
    for line_number, row in enumerate(data_rows, 2):
        if len(row) > len(header):
            raise BethYwMalformedInputError(
                f"Malformed file: row {line_number} has more cells than the header."
            )
        code = row[0]
        if not check_string_filter(areas_filter, code, True, areas.existing_names(code)):
            continue
        area = Area(code)
        if check_string_filter(measures_filter, measure_code):
            measure = Measure(measure_code, measure_label)
            for year, cell in zip(years, row[1:]):
                if check_year_filter(years_filter, year):
                    measure.set_value(year, _parse_value(cell, line_number, year))
            area.set_measure(measure_code, measure)
        areas.set_area(code, area)
        merged += 1
    return merged


def _parse_year(cell: str) -> int:
    """Parse a year header cell."""
    try:
        year = int(cell.strip())
    except ValueError as error:
        raise BethYwMalformedInputError(f"Malformed file: invalid year header '{cell}'.") from error
    if year < 0:
        raise BethYwMalformedInputError(f"Malformed file: negative year header '{cell}'.")
    return year


def _parse_value(cell: str, line_number: int, year: int) -> float:
    """Parse a value cell; blank, non-numeric, and non-finite cells are malformed."""
    try:
        value = float(cell)
    except ValueError as error:
        raise BethYwMalformedInputError(
            f"Malformed file: row {line_number} has invalid value '{cell}' for {year}."
        ) from error
    if not math.isfinite(value):
        raise BethYwMalformedInputError(
            f"Malformed file: row {line_number} has non-finite value '{cell}' for {year}."
        )
    return value
