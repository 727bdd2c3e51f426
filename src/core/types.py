"""Shared typed models.

This module defines the enums, aliases, and immutable option models
used by the ingest, store, and CLI layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Mapping

StringFilterSet = AbstractSet[str]
YearFilter = tuple[int, int]


class SourceDataType(str, Enum):
    """Recognized input layouts."""

    AUTHORITY_CODE_CSV = "authority_code_csv"
    STATS_JSON = "stats_json"
    AUTHORITY_BY_YEAR_CSV = "authority_by_year_csv"


class SourceColumn(str, Enum):
    """Logical columns a dataset mapping can name."""

    AUTH_CODE = "auth_code"
    AUTH_NAME_ENG = "auth_name_eng"
    AUTH_NAME_CYM = "auth_name_cym"
    MEASURE_CODE = "measure_code"
    MEASURE_NAME = "measure_name"
    SINGLE_MEASURE_CODE = "single_measure_code"
    SINGLE_MEASURE_NAME = "single_measure_name"
    YEAR = "year"
    VALUE = "value"


ColumnMapping = Mapping[SourceColumn, str]


@dataclass(frozen=True)
class InputFileSource:
    """A registered dataset file and how to read it.

    Attributes:
        name: Human-readable dataset name.
        code: Short code used to select the dataset on the command line.
        file: File name relative to the data directory.
        parser: Layout of the file.
        cols: Logical column to header/field name mapping.
    """

    name: str
    code: str
    file: str
    parser: SourceDataType
    cols: ColumnMapping


@dataclass(frozen=True)
class ImportFilters:
    """Optional filters applied while importing datasets.

    Attributes:
        areas: Authority codes or name fragments to keep; None keeps all.
        measures: Measure codes to keep; None keeps all.
        years: Inclusive year range; None or (0, 0) keeps all.
    """

    areas: StringFilterSet | None = None
    measures: StringFilterSet | None = None
    years: YearFilter | None = None
