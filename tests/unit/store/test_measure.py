"""Unit tests for the Measure model."""

from __future__ import annotations

import math

import pytest

from core.errors import BethYwNotFoundError
from store.measure import Measure


def test_measure_lowercases_codename() -> None:
    """Codename should always be stored lower-cased."""
    measure = Measure("POP", "Population")

    assert measure.codename == "pop"


def test_set_value_replaces_existing_year() -> None:
    """Setting a year twice should keep the latest value."""
    measure = Measure("pop", "Population")
    measure.set_value(2010, 1.0)
    measure.set_value(2010, 2.5)

    assert measure.get_value(2010) == 2.5


def test_get_value_raises_for_missing_year() -> None:
    """Looking up an absent year should fail with NotFound."""
    measure = Measure("pop", "Population")

    with pytest.raises(BethYwNotFoundError):
        measure.get_value(1999)


def test_values_iterate_in_year_order() -> None:
    """Values should be exposed year-ascending regardless of insertion order."""
    measure = Measure("pop", "Population")
    measure.set_value(2015, 3.0)
    measure.set_value(2010, 1.0)
    measure.set_value(2012, 2.0)

    assert list(measure.values) == [2010, 2012, 2015]


def test_get_difference_uses_first_and_last_year() -> None:
    """Difference should be last-year minus first-year value."""
    measure = Measure("pop", "Population")
    measure.set_value(2015, 9)
    measure.set_value(2010, 5)

    assert measure.get_difference() == 4


def test_get_difference_is_zero_for_single_value() -> None:
    """Difference needs at least two values."""
    measure = Measure("pop", "Population")
    measure.set_value(2010, 5)

    assert measure.get_difference() == 0


def test_get_difference_as_percentage() -> None:
    """Percentage difference should be relative to the first value."""
    measure = Measure("pop", "Population")
    measure.set_value(2010, 50)
    measure.set_value(2011, 75)

    assert measure.get_difference_as_percentage() == pytest.approx(50.0)


def test_get_difference_as_percentage_with_zero_first_value() -> None:
    """A zero first value should give infinity rather than raising."""
    measure = Measure("pop", "Population")
    measure.set_value(2010, 0)
    measure.set_value(2011, 3)

    assert math.isinf(measure.get_difference_as_percentage())


def test_get_average() -> None:
    """Average should be the mean of all values."""
    measure = Measure("pop", "Population")
    measure.set_value(2010, 2)
    measure.set_value(2011, 4)

    assert measure.get_average() == 3.0


def test_get_average_is_zero_when_empty() -> None:
    """An empty measure should average to zero."""
    assert Measure("pop", "Population").get_average() == 0


def test_merge_from_overrides_label_and_conflicting_years() -> None:
    """Merged measure should take the other label and values on conflicts."""
    first = Measure("pop", "Old label")
    first.set_value(2010, 1.0)
    first.set_value(2011, 2.0)
    second = Measure("pop", "New label")
    second.set_value(2011, 20.0)
    second.set_value(2012, 30.0)
    expected = Measure("pop", "New label")
    for year, value in ((2010, 1.0), (2011, 20.0), (2012, 30.0)):
        expected.set_value(year, value)

    first += second

    assert first == expected


def test_measures_with_different_labels_are_not_equal() -> None:
    """Equality should include the label."""
    assert Measure("pop", "Population") != Measure("pop", "People")


def test_render_without_values_prints_no_data() -> None:
    """A measure without values should render the no-data marker."""
    rendered = Measure("pop", "Population").render()

    assert rendered == "Population (pop)\n<no data>\n"


def test_render_aligns_summary_columns() -> None:
    """Rendered table should right-align years and summary columns."""
    measure = Measure("pop", "Population")
    measure.set_value(2010, 5)
    measure.set_value(2015, 9)

    lines = measure.render().splitlines()

    assert lines == [
        "Population (pop)",
        "    2010     2015  Average    Diff.   % Diff.",
        "5.000000 9.000000 7.000000 4.000000 80.000000",
    ]
