"""Single named metric with a sparse year series.

This module holds the Measure value type and its merge rule.
"""

from __future__ import annotations

import math

from core.errors import BethYwNotFoundError
from store.rendering import render_measure


class Measure:
    """A named measure, e.g. population, with one value per year."""

    def __init__(self, codename: str, label: str) -> None:
        """Create a measure.

        Args:
            codename: Identifier for the measure, stored lower-cased.
            label: Human-readable label.
        """
        self._codename = codename.lower()
        self.label = label
        self._values: dict[int, float] = {}

    @property
    def codename(self) -> str:
        """Lower-cased measure identifier."""
        return self._codename

    @property
    def values(self) -> dict[int, float]:
        """Copy of the year series in ascending year order."""
        return dict(sorted(self._values.items()))

    def set_value(self, year: int, value: float) -> None:
        """Insert or replace the value for a year."""
        self._values[year] = float(value)

    def get_value(self, year: int) -> float:
        """Return the value recorded for a year.

        Args:
            year: Year to look up.

        Returns:
            Stored value.

        Raises:
            BethYwNotFoundError: If no value exists for the year.
        """
        try:
            return self._values[year]
        except KeyError as error:
            raise BethYwNotFoundError(
                f"No value found for year {year} in measure {self._codename}"
            ) from error

    def get_difference(self) -> float:
        """Return last-year value minus first-year value, or 0."""
        if len(self._values) < 2:
            return 0.0
        first_year, last_year = min(self._values), max(self._values)
        return self._values[last_year] - self._values[first_year]

    def get_difference_as_percentage(self) -> float:
        """Return the first-to-last change as a percentage of the first value.

        Returns:
            Percentage change, 0 with fewer than two values, or the IEEE
            result (``inf``, ``-inf``, ``nan``) when the first value is 0.
        """
        if len(self._values) < 2:
            return 0.0
        difference = self.get_difference()
        first_value = self._values[min(self._values)]
        if first_value == 0:
            if difference == 0:
                return math.nan
            return math.copysign(math.inf, difference)
        return difference / first_value * 100

    def get_average(self) -> float:
        """Return the mean of all values, or 0 when empty."""
        if not self._values:
            return 0.0
        return sum(self._values.values()) / len(self._values)

    def copy(self) -> "Measure":
        """Return an independent copy of this measure."""
        duplicate = Measure(self._codename, self.label)
        duplicate.merge_from(self)
        return duplicate

    def merge_from(self, other: "Measure") -> None:
        """Merge another measure into this one, the other taking precedence.

        The label is replaced and every year of ``other`` is upserted.
        """
        self.label = other.label
        for year, value in other._values.items():
            self.set_value(year, value)

    def to_dict(self) -> dict[str, float]:
        """Return the series keyed by decimal year strings."""
        return {str(year): value for year, value in self.values.items()}

    def render(self) -> str:
        """Render the measure as a label line and a value table."""
        return render_measure(self)

    def __iadd__(self, other: "Measure") -> "Measure":
        self.merge_from(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return (
            self._codename == other._codename
            and self.label == other.label
            and self._values == other._values
        )

    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Measure(codename={self._codename!r}, label={self.label!r}, values={self.values!r})"
