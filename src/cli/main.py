"""Beth Yw? CLI entry points.
This module parses dataset, area, measure, and year arguments,
imports the selected data, and prints it as tables or JSON.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import re
import sys
from typing import Sequence

from core.config import BethYwConfig
from core.constants import ALL_FILTER_KEYWORD, NO_YEAR_FILTER, YEARS_ARGUMENT_PATTERN
from core.datasets import DATASETS, find_dataset, supported_dataset_codes
from core.errors import BethYwInvalidArgumentError
from core.logging_config import configure_logging
from core.types import ImportFilters, InputFileSource, StringFilterSet, YearFilter
from ingest.loader import load_datasets
from store.areas import Areas
from store.filtering import build_filter_set, lower_all

_YEARS_ARGUMENT_RE = re.compile(YEARS_ARGUMENT_PATTERN)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="bethyw",
        description="Parse official Welsh Government statistics data files.",
    )
    parser.add_argument("--dir", help="Directory for input data files (overrides BETHYW_DATA_DIR)")
    parser.add_argument(
        "-d",
        "--datasets",
        action="extend",
        type=_split_list,
        help=(
            "Comma-separated dataset codes to import, or 'all'. "
            f"Known codes: {', '.join(supported_dataset_codes())}"
        ),
    )
    parser.add_argument(
        "-a",
        "--areas",
        action="extend",
        type=_split_list,
        help="Comma-separated authority codes or name fragments to import, or 'all'",
    )
    parser.add_argument(
        "-m",
        "--measures",
        action="extend",
        type=_split_list,
        help="Comma-separated measure codes to import, or 'all'",
    )
    parser.add_argument(
        "-y",
        "--years",
        help="A single year (YYYY) or inclusive range of years (YYYY-ZZZZ); 0 for all",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Print the output as JSON instead of tables",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Beth Yw? CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.dir)
    configure_logging(config.log_level)
    try:
        datasets = parse_datasets_arg(args.datasets)
        filters = ImportFilters(
            areas=parse_filter_arg(args.areas),
            measures=parse_filter_arg(args.measures),
            years=parse_years_arg(args.years),
        )
    except BethYwInvalidArgumentError as error:
        print(error, file=sys.stderr)
        return 1
    areas = Areas()
    load_datasets(areas, config.data_dir, datasets, filters)
    if args.json or config.json_output:
        print(areas.to_json())
    else:
        print(areas.render())
    return 0


def parse_datasets_arg(values: Sequence[str] | None) -> list[InputFileSource]:
    """Resolve dataset codes to registered sources.

    Args:
        values: Codes from the command line; None or 'all' selects every dataset.

    Returns:
        Datasets to import, in the order given.

    Raises:
        BethYwInvalidArgumentError: If a code matches no dataset.
    """
    if not values or ALL_FILTER_KEYWORD in lower_all(values):
        return list(DATASETS)
    return [find_dataset(value) for value in values]


def parse_filter_arg(values: Sequence[str] | None) -> StringFilterSet | None:
    """Build an area or measure filter; None or 'all' means no filter."""
    if not values or ALL_FILTER_KEYWORD in lower_all(values):
        return None
    return build_filter_set(values)


def parse_years_arg(value: str | None) -> YearFilter:
    """Parse a ``YYYY`` or ``YYYY-ZZZZ`` years argument.

    Args:
        value: Raw argument, or None when omitted.

    Returns:
        Inclusive ``(low, high)`` range; ``(0, 0)`` imports every year.

    Raises:
        BethYwInvalidArgumentError: If the argument is not a valid year range.
    """
    if value is None:
        return NO_YEAR_FILTER
    match = _YEARS_ARGUMENT_RE.fullmatch(value)
    if match is None:
        raise BethYwInvalidArgumentError("Invalid input for years argument")
    start_year = int(match.group(1))
    end_year = int(match.group(2)[1:]) if match.group(2) else start_year
    if start_year == 0 or end_year == 0:
        return NO_YEAR_FILTER
    return (start_year, end_year)


def _build_config(data_dir: str | None) -> BethYwConfig:
    """Build runtime config with optional data-dir override.

    Args:
        data_dir: Optional override path.

    Returns:
        Validated configuration.
    """
    config = BethYwConfig.from_env()
    if data_dir:
        config = replace(config, data_dir=Path(data_dir).expanduser().resolve())
    return config


def _split_list(raw_value: str) -> list[str]:
    """Split a comma-separated argument into its non-blank entries."""
    return [entry.strip() for entry in raw_value.split(",") if entry.strip()]
