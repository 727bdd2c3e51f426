"""Top-level in-memory store of areas.

This module owns every imported Area keyed by authority code.
It dispatches input streams to the format parsers, merges parsed
areas by precedence, and exports the collection as JSON.
"""

from __future__ import annotations

import json
from typing import IO, Any, Iterable, Iterator

from core.errors import BethYwNotFoundError, BethYwSourceError
from core.logging_config import get_logger
from core.types import ColumnMapping, SourceDataType, StringFilterSet, YearFilter
from ingest.authority_by_year_csv import populate_from_authority_by_year_csv
from ingest.authority_code_csv import populate_from_authority_code_csv
from ingest.stats_json import populate_from_stats_json
from ingest.stream_reader import ensure_readable
from store.area import Area
from store.filtering import check_string_filter, check_year_filter
from store.rendering import render_areas

_LOGGER = get_logger(__name__)


class Areas:
    """Collection of areas keyed by local authority code."""

    def __init__(self) -> None:
        self._areas: dict[str, Area] = {}

    @property
    def areas(self) -> dict[str, Area]:
        """Areas in ascending authority code order."""
        return dict(sorted(self._areas.items()))

    def set_area(self, local_authority_code: str, area: Area) -> None:
        """Insert an area, merging into any existing area with the code.

        Args:
            local_authority_code: Authority code to store the area under.
            area: Area to insert or merge; its data takes precedence.
        """
        existing = self._areas.get(local_authority_code)
        if existing is None:
            self._areas[local_authority_code] = area.copy()
        else:
            existing.merge_from(area)

    def get_area(self, local_authority_code: str) -> Area:
        """Return the area stored under an authority code.

        Raises:
            BethYwNotFoundError: If no area has the code.
        """
        try:
            return self._areas[local_authority_code]
        except KeyError as error:
            raise BethYwNotFoundError(f"No area found matching {local_authority_code}") from error

    def existing_names(self, local_authority_code: str) -> list[str]:
        """Return names already known for a code, or an empty list."""
        area = self._areas.get(local_authority_code)
        if area is None:
            return []
        return list(area.names.values())

    def populate(
        self,
        stream: IO[Any],
        source_type: SourceDataType,
        cols: ColumnMapping,
        areas_filter: StringFilterSet | None = None,
        measures_filter: StringFilterSet | None = None,
        years_filter: YearFilter | None = None,
    ) -> int:
        """Parse a stream of a given layout and merge it into the collection.

        Absent and empty filters import everything. Areas merged before a
        parse error stay in the collection.

        Args:
            stream: Open, readable text or byte stream.
            source_type: Layout of the stream.
            cols: Logical column to header/field name mapping.
            areas_filter: Authority codes or name fragments to keep.
            measures_filter: Measure codes to keep.
            years_filter: Inclusive ``(low, high)`` range, ``(0, 0)`` for all.

        Returns:
            Number of rows or records merged.

        Raises:
            BethYwSourceError: If the stream is unusable or the layout unknown.
            BethYwMalformedInputError: If the content is malformed.
            BethYwOutOfRangeError: If ``cols`` lacks required columns.
        """
        ensure_readable(stream)
        if source_type == SourceDataType.AUTHORITY_CODE_CSV:
            merged = self.populate_from_authority_code_csv(stream, cols, areas_filter)
        elif source_type == SourceDataType.STATS_JSON:
            merged = self.populate_from_stats_json(
                stream, cols, areas_filter, measures_filter, years_filter
            )
        elif source_type == SourceDataType.AUTHORITY_BY_YEAR_CSV:
            merged = self.populate_from_authority_by_year_csv(
                stream, cols, areas_filter, measures_filter, years_filter
            )
        else:
            raise BethYwSourceError(f"Unexpected data type: {source_type!r}")
        _LOGGER.debug(
            "areas_populated",
            source_type=str(getattr(source_type, "value", source_type)),
            merged_rows=merged,
            area_count=len(self._areas),
        )
        return merged

    def populate_from_authority_code_csv(
        self,
        stream: IO[Any],
        cols: ColumnMapping,
        areas_filter: StringFilterSet | None = None,
    ) -> int:
        """Import the authority code table; see :mod:`ingest.authority_code_csv`."""
        return populate_from_authority_code_csv(self, stream, cols, areas_filter)

    def populate_from_stats_json(
        self,
        stream: IO[Any],
        cols: ColumnMapping,
        areas_filter: StringFilterSet | None = None,
        measures_filter: StringFilterSet | None = None,
        years_filter: YearFilter | None = None,
    ) -> int:
        """Import StatsWales JSON records; see :mod:`ingest.stats_json`."""
        return populate_from_stats_json(
            self, stream, cols, areas_filter, measures_filter, years_filter
        )

    def populate_from_authority_by_year_csv(
        self,
        stream: IO[Any],
        cols: ColumnMapping,
        areas_filter: StringFilterSet | None = None,
        measures_filter: StringFilterSet | None = None,
        years_filter: YearFilter | None = None,
    ) -> int:
        """Import an authority-by-year table; see :mod:`ingest.authority_by_year_csv`."""
        return populate_from_authority_by_year_csv(
            self, stream, cols, areas_filter, measures_filter, years_filter
        )

    @staticmethod
    def check_filter(
        filter_set: StringFilterSet | None,
        candidate: str,
        enhanced: bool = False,
        extra: Iterable[str] = (),
    ) -> bool:
        """Check a string against a filter set; see :func:`check_string_filter`."""
        return check_string_filter(filter_set, candidate, enhanced, extra)

    @staticmethod
    def check_year_filter(years_filter: YearFilter | None, year: int) -> bool:
        """Check a year against an inclusive range; see :func:`check_year_filter`."""
        return check_year_filter(years_filter, year)

    def to_dict(self) -> dict[str, dict]:
        """Return the nested export structure keyed by authority code."""
        return {code: area.to_dict() for code, area in self.areas.items()}

    def to_json(self) -> str:
        """Serialize the collection; an empty collection yields ``{}``."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)

    def render(self) -> str:
        """Render every area as text tables, or ``<no areas>``."""
        return render_areas(self.areas.values())

    def __contains__(self, local_authority_code: object) -> bool:
        return local_authority_code in self._areas

    def __iter__(self) -> Iterator[Area]:
        return iter(self.areas.values())

    def __len__(self) -> int:
        return len(self._areas)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Areas):
            return NotImplemented
        return self._areas == other._areas

    def __str__(self) -> str:
        return self.render()
