"""Public SDK surface for Beth Yw?.

This module provides a stable import path for library users.
It re-exports the data model, loaders, and typed options.
"""

from __future__ import annotations

from core.config import BethYwConfig
from core.datasets import AREAS, DATASETS, find_dataset
from core.errors import (
    BethYwError,
    BethYwInvalidArgumentError,
    BethYwMalformedInputError,
    BethYwNotFoundError,
    BethYwOutOfRangeError,
    BethYwSourceError,
)
from core.types import ImportFilters, InputFileSource, SourceColumn, SourceDataType
from ingest.input_source import InputFile, InputSource
from ingest.loader import load_areas, load_datasets
from store.area import Area
from store.areas import Areas
from store.measure import Measure

__all__ = [
    "AREAS",
    "Area",
    "Areas",
    "BethYwConfig",
    "BethYwError",
    "BethYwInvalidArgumentError",
    "BethYwMalformedInputError",
    "BethYwNotFoundError",
    "BethYwOutOfRangeError",
    "BethYwSourceError",
    "DATASETS",
    "ImportFilters",
    "InputFile",
    "InputFileSource",
    "InputSource",
    "Measure",
    "SourceColumn",
    "SourceDataType",
    "find_dataset",
    "load_areas",
    "load_datasets",
]
