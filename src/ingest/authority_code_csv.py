"""Parser for the authority code table (areas.csv).

Each data row gives an authority code with its English and Welsh
names. Only the areas filter applies to this layout.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from core.constants import ENGLISH_LANGUAGE_CODE, WELSH_LANGUAGE_CODE
from core.errors import BethYwMalformedInputError, BethYwOutOfRangeError
from core.types import ColumnMapping, StringFilterSet
from ingest.stream_reader import read_csv_rows
from store.area import Area
from store.filtering import check_string_filter

if TYPE_CHECKING:
    from store.areas import Areas

_MIN_ROW_CELLS = 3


def populate_from_authority_code_csv(
    areas: Areas,
    stream: IO[Any],
    cols: ColumnMapping,
    areas_filter: StringFilterSet | None = None,
) -> int:
    """Import areas and their names from an authority code CSV.

    Args:
        areas: Collection to merge areas into.
        stream: Open CSV stream with a header row.
        cols: Column mapping; its size must equal the header width.
        areas_filter: Authority codes or name fragments to keep.

    Returns:
        Number of rows merged into the collection.

    Raises:
        BethYwMalformedInputError: If the file or a row is malformed.
        BethYwOutOfRangeError: If the header width differs from ``cols``.
    """
    rows = read_csv_rows(stream)
    if not rows:
        raise BethYwMalformedInputError("Malformed file: missing header row in authority code CSV.")
    header, data_rows = rows[0], rows[1:]
    if len(header) != len(cols):
        raise BethYwOutOfRangeError(
            f"Column count mismatch: header has {len(header)} columns, "
            f"mapping expects {len(cols)}."
        )
    merged = 0
    for line_number, row in enumerate(data_rows, 2):
        if len(row) < _MIN_ROW_CELLS:
            raise BethYwMalformedInputError(
                f"Malformed file: row {line_number} has {len(row)} cells, "
                f"expected at least {_MIN_ROW_CELLS}."
            )
        code, english_name, welsh_name = row[0], row[1], row[2]
        if not check_string_filter(areas_filter, code, True, (english_name, welsh_name)):
            continue
        area = Area(code)
        area.set_name(ENGLISH_LANGUAGE_CODE, english_name)
        area.set_name(WELSH_LANGUAGE_CODE, welsh_name)
        areas.set_area(code, area)
        merged += 1
    return merged
