"""Unit tests for the Area model."""

from __future__ import annotations

import pytest

from core.errors import BethYwInvalidArgumentError, BethYwNotFoundError
from store.area import Area
from store.measure import Measure


def _measure(codename: str, label: str, values: dict[int, float]) -> Measure:
    measure = Measure(codename, label)
    for year, value in values.items():
        measure.set_value(year, value)
    return measure


@pytest.mark.parametrize("lang", ["eng", "ENG", "Cym", "fra"])
def test_set_name_round_trips_any_case(lang: str) -> None:
    """Names should be retrievable regardless of language code case."""
    area = Area("W06000011")
    area.set_name(lang, "Swansea")

    assert area.get_name(lang.swapcase()) == "Swansea"


@pytest.mark.parametrize("lang", ["xx", "abcd", "e1g", "", "en g"])
def test_set_name_rejects_invalid_language_codes(lang: str) -> None:
    """Language codes must be exactly three letters."""
    area = Area("W06000011")

    with pytest.raises(BethYwInvalidArgumentError):
        area.set_name(lang, "Swansea")


def test_names_are_stored_lower_case() -> None:
    """Language keys should be normalized to lower case."""
    area = Area("W06000011")
    area.set_name("CYM", "Abertawe")

    assert area.names == {"cym": "Abertawe"}


def test_get_name_raises_for_missing_language() -> None:
    """Looking up an absent language should fail with NotFound."""
    with pytest.raises(BethYwNotFoundError):
        Area("W06000011").get_name("eng")


def test_get_measure_is_case_insensitive() -> None:
    """Measures should be found regardless of codename case."""
    area = Area("W06000011")
    area.set_measure("POP", _measure("pop", "Population", {2010: 1.0}))

    assert area.get_measure("Pop").label == "Population"


def test_get_measure_raises_for_missing_codename() -> None:
    """Looking up an absent measure should fail with NotFound."""
    with pytest.raises(BethYwNotFoundError):
        Area("W06000011").get_measure("pop")


def test_set_measure_merges_existing_codename() -> None:
    """A second measure with the same codename should merge into the first."""
    area = Area("W06000011")
    area.set_measure("pop", _measure("pop", "Population", {2010: 1.0}))
    area.set_measure("POP", _measure("pop", "Population", {2011: 2.0}))

    assert area.get_measure("pop").values == {2010: 1.0, 2011: 2.0}


def test_set_measure_keeps_its_own_copy() -> None:
    """Mutating the caller's measure should not change the stored one."""
    area = Area("W06000011")
    measure = _measure("pop", "Population", {2010: 1.0})
    area.set_measure("pop", measure)
    measure.set_value(2011, 2.0)

    assert len(area.get_measure("pop")) == 1


def test_merge_from_is_right_biased_on_shared_keys() -> None:
    """Merging should override shared names and years and add new ones."""
    first = Area("W06000011")
    first.set_name("eng", "Swansea")
    first.set_name("cym", "Old")
    first.set_measure("pop", _measure("pop", "Population", {2010: 1.0}))
    second = Area("W06000011")
    second.set_name("cym", "Abertawe")
    second.set_measure("pop", _measure("pop", "Population", {2010: 5.0}))
    second.set_measure("dens", _measure("dens", "Density", {2010: 3.0}))

    first += second

    assert first.to_dict() == {
        "names": {"cym": "Abertawe", "eng": "Swansea"},
        "measures": {"dens": {"2010": 3.0}, "pop": {"2010": 5.0}},
    }


def test_merge_from_commutes_on_disjoint_keys() -> None:
    """Merging disjoint areas should give the same result in either order."""
    left = Area("W06000011")
    left.set_name("eng", "Swansea")
    left.set_measure("pop", _measure("pop", "Population", {2010: 1.0}))
    right = Area("W06000011")
    right.set_name("cym", "Abertawe")
    right.set_measure("dens", _measure("dens", "Density", {2011: 2.0}))
    left_then_right = left.copy()
    left_then_right.merge_from(right)
    right_then_left = right.copy()
    right_then_left.merge_from(left)

    assert left_then_right == right_then_left


def test_render_with_both_names_and_no_measures() -> None:
    """Title should show both names and the no-measures marker."""
    area = Area("W06000011")
    area.set_name("eng", "Swansea")
    area.set_name("cym", "Abertawe")

    assert area.render() == "Swansea / Abertawe (W06000011)\n<no measures>\n"


def test_render_falls_back_to_single_name() -> None:
    """Title should use the only available name."""
    area = Area("W06000011")
    area.set_name("cym", "Abertawe")

    assert area.render().splitlines()[0] == "Abertawe (W06000011)"


def test_render_unnamed_area() -> None:
    """An area without names should be titled Unnamed."""
    assert Area("W06000011").render().splitlines()[0] == "Unnamed (W06000011)"


def test_render_orders_measures_by_codename() -> None:
    """Measure blocks should appear in ascending codename order."""
    area = Area("W06000011")
    area.set_measure("pop", _measure("pop", "Population", {}))
    area.set_measure("dens", _measure("dens", "Density", {}))

    rendered = area.render()

    assert rendered.index("(dens)") < rendered.index("(pop)")


def test_to_dict_keeps_empty_measures_and_values() -> None:
    """Both export keys should be present even when nothing was imported."""
    area = Area("W06000011")
    area.set_name("eng", "Swansea")
    area.set_measure("pop", Measure("pop", "Population"))

    assert area.to_dict() == {"names": {"eng": "Swansea"}, "measures": {"pop": {}}}
    assert Area("W06000015").to_dict() == {"names": {}, "measures": {}}
