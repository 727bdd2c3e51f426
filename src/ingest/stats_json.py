"""Parser for StatsWales JSON exports.

StatsWales files hold one record per area, measure, and year under
the top-level ``value`` key. Field names come from the column mapping,
and single-measure datasets supply a fixed measure code and label.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import math
from typing import IO, TYPE_CHECKING, Any, Mapping

from core.constants import ENGLISH_LANGUAGE_CODE, STATS_JSON_RECORDS_KEY
from core.errors import BethYwMalformedInputError, BethYwOutOfRangeError
from core.types import ColumnMapping, SourceColumn, StringFilterSet, YearFilter
from ingest.stream_reader import read_text
from store.area import Area
from store.filtering import check_string_filter, check_year_filter
from store.measure import Measure

if TYPE_CHECKING:
    from store.areas import Areas


@dataclass(frozen=True)
class StatsRecord:
    """One area/measure/year observation extracted from a JSON record."""

    local_authority_code: str
    area_name: str
    measure_code: str
    measure_name: str
    year: int
    value: float


def populate_from_stats_json(
    areas: Areas,
    stream: IO[Any],
    cols: ColumnMapping,
    areas_filter: StringFilterSet | None = None,
    measures_filter: StringFilterSet | None = None,
    years_filter: YearFilter | None = None,
) -> int:
    """Import areas, measures, and yearly values from StatsWales JSON.

    An area passing the areas filter is always merged, even when the
    measures or years filter rejects its only record.

    Args:
        areas: Collection to merge areas into.
        stream: Open JSON stream.
        cols: Column mapping naming the record fields.
        areas_filter: Authority codes or name fragments to keep.
        measures_filter: Measure codes to keep.
        years_filter: Inclusive year range to keep.

    Returns:
        Number of records merged into the collection.

    Raises:
        BethYwMalformedInputError: If the JSON or a record is malformed.
        BethYwOutOfRangeError: If ``cols`` lacks a required column.
    """
    merged = 0
    for index, payload in enumerate(_load_records(stream)):
        record = parse_stats_record(payload, cols, index)
        candidate_names = areas.existing_names(record.local_authority_code)
        candidate_names.append(record.area_name)
        if not check_string_filter(
            areas_filter, record.local_authority_code, True, candidate_names
        ):
            continue
        area = Area(record.local_authority_code)
        area.set_name(ENGLISH_LANGUAGE_CODE, record.area_name)
        if check_string_filter(measures_filter, record.measure_code):
            measure = Measure(record.measure_code, record.measure_name)
            if check_year_filter(years_filter, record.year):
                measure.set_value(record.year, record.value)
            area.set_measure(record.measure_code, measure)
        areas.set_area(record.local_authority_code, area)
        merged += 1
    return merged


def parse_stats_record(
    payload: Mapping[str, Any],
    cols: ColumnMapping,
    index: int = 0,
) -> StatsRecord:
    """Extract a typed observation from one JSON record.

    Args:
        payload: Raw JSON object.
        cols: Column mapping naming the record fields.
        index: Zero-based record position, for error context.

    Returns:
        Parsed observation.

    Raises:
        BethYwMalformedInputError: If a field is missing or not parseable.
        BethYwOutOfRangeError: If ``cols`` lacks a required column.
    """
    if not isinstance(payload, Mapping):
        raise BethYwMalformedInputError(f"Malformed record {index}: expected a JSON object.")
    code = _string_field(payload, _column(cols, SourceColumn.AUTH_CODE), index)
    area_name = _string_field(payload, _column(cols, SourceColumn.AUTH_NAME_ENG), index)
    if SourceColumn.MEASURE_CODE in cols:
        measure_code = _string_field(payload, _column(cols, SourceColumn.MEASURE_CODE), index)
        measure_name = _string_field(payload, _column(cols, SourceColumn.MEASURE_NAME), index)
    else:
        measure_code = _column(cols, SourceColumn.SINGLE_MEASURE_CODE)
        measure_name = _column(cols, SourceColumn.SINGLE_MEASURE_NAME)
    year = _parse_year(_field(payload, _column(cols, SourceColumn.YEAR), index), index)
    value = _parse_value(_field(payload, _column(cols, SourceColumn.VALUE), index), index)
    return StatsRecord(
        local_authority_code=code,
        area_name=area_name,
        measure_code=measure_code,
        measure_name=measure_name,
        year=year,
        value=value,
    )


def _load_records(stream: IO[Any]) -> list[Any]:
    """Parse the JSON document and return its ``value`` array."""
    try:
        document = json.loads(read_text(stream), parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise BethYwMalformedInputError(
            f"Malformed JSON at line {error.lineno} column {error.colno}: {error.msg}."
        ) from error
    if not isinstance(document, dict):
        raise BethYwMalformedInputError("Malformed JSON: expected a top-level object.")
    records = document.get(STATS_JSON_RECORDS_KEY, [])
    if not isinstance(records, list):
        raise BethYwMalformedInputError(
            f"Malformed JSON: '{STATS_JSON_RECORDS_KEY}' must be an array of records."
        )
    return records


def _reject_constant(token: str) -> float:
    """Reject the non-standard NaN and Infinity JSON tokens."""
    raise BethYwMalformedInputError(f"Malformed JSON: non-finite number {token}.")


def _column(cols: ColumnMapping, column: SourceColumn) -> str:
    """Resolve a logical column to its field name."""
    try:
        return cols[column]
    except KeyError as error:
        raise BethYwOutOfRangeError(
            f"Not enough columns: mapping has no entry for {column.name}."
        ) from error


def _field(payload: Mapping[str, Any], key: str, index: int) -> Any:
    if key not in payload or payload[key] is None:
        raise BethYwMalformedInputError(f"Malformed record {index}: missing field '{key}'.")
    return payload[key]


def _string_field(payload: Mapping[str, Any], key: str, index: int) -> str:
    value = _field(payload, key, index)
    if not isinstance(value, str):
        raise BethYwMalformedInputError(
            f"Malformed record {index}: field '{key}' must be a string."
        )
    return value


def _parse_year(raw_value: Any, index: int) -> int:
    """Parse a year given as a decimal string or an integer."""
    if isinstance(raw_value, bool):
        raise BethYwMalformedInputError(f"Malformed record {index}: invalid year {raw_value!r}.")
    if isinstance(raw_value, int):
        year = raw_value
    else:
        try:
            year = int(str(raw_value).strip())
        except ValueError as error:
            raise BethYwMalformedInputError(
                f"Malformed record {index}: invalid year {raw_value!r}."
            ) from error
    if year < 0:
        raise BethYwMalformedInputError(f"Malformed record {index}: negative year {year}.")
    return year


def _parse_value(raw_value: Any, index: int) -> float:
    """Parse a finite numeric value, falling back to a string-encoded number."""
    if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float, str)):
        raise BethYwMalformedInputError(f"Malformed record {index}: invalid value {raw_value!r}.")
    try:
        value = float(raw_value)
    except (ValueError, OverflowError) as error:
        raise BethYwMalformedInputError(
            f"Malformed record {index}: invalid value {raw_value!r}."
        ) from error
    if not math.isfinite(value):
        raise BethYwMalformedInputError(
            f"Malformed record {index}: non-finite value {raw_value!r}."
        )
    return value
