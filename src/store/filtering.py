"""Import filter evaluation helpers.

This module decides whether a candidate area, measure, or year passes
the caller-supplied filters. Absent and empty filters never restrict.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import NO_YEAR_FILTER
from core.types import StringFilterSet, YearFilter


def check_string_filter(
    filter_set: StringFilterSet | None,
    candidate: str,
    enhanced: bool = False,
    extra: Iterable[str] = (),
) -> bool:
    """Check a candidate string against a filter set.

    Matching is case-insensitive. With ``enhanced`` set, a filter entry
    also matches when it is a substring of the candidate or of any of
    the ``extra`` strings (for example the known names of an area).

    Args:
        filter_set: Filter entries, or None for no filter.
        candidate: Value to test, such as an authority code.
        enhanced: Enable substring matching.
        extra: Additional strings searched when ``enhanced`` is set.

    Returns:
        True when the candidate passes the filter.
    """
    if not filter_set:
        return True
    candidate_lower = candidate.lower()
    extra_lower = lower_all(extra) if enhanced else []
    for entry in lower_all(filter_set):
        if entry == candidate_lower:
            return True
        if not enhanced:
            continue
        if entry in candidate_lower:
            return True
        if any(entry in value for value in extra_lower):
            return True
    return False


def check_year_filter(years_filter: YearFilter | None, year: int) -> bool:
    """Check a year against an inclusive range filter.

    Args:
        years_filter: ``(low, high)`` range, or None/``(0, 0)`` for no filter.
        year: Candidate year.

    Returns:
        True when the year passes the filter.
    """
    if years_filter is None or tuple(years_filter) == NO_YEAR_FILTER:
        return True
    low, high = years_filter
    return low <= year <= high


def lower_all(values: Iterable[str]) -> list[str]:
    """Return lower-cased copies of every value, preserving order."""
    return [value.lower() for value in values]


def build_filter_set(values: Iterable[str]) -> frozenset[str]:
    """Build an immutable filter set from raw values.

    Args:
        values: Raw filter entries, blanks allowed.

    Returns:
        Set of stripped non-empty entries.
    """
    return frozenset(value.strip() for value in values if value.strip())
