"""Plain-text presentation of measures, areas, and collections.

This module renders the table layout printed by the command line.
Every block ends with a newline so blocks can be concatenated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from core.constants import (
    ENGLISH_LANGUAGE_CODE,
    NO_AREAS_MARKER,
    NO_DATA_MARKER,
    NO_MEASURES_MARKER,
    UNNAMED_AREA_LABEL,
    WELSH_LANGUAGE_CODE,
)

if TYPE_CHECKING:
    from store.area import Area
    from store.measure import Measure


def render_measure(measure: Measure) -> str:
    """Render a measure heading followed by its value table.

    Args:
        measure: Measure to render.

    Returns:
        Heading line and either a two-row table or ``<no data>``.
    """
    heading = f"{measure.label} ({measure.codename})"
    if len(measure) == 0:
        return f"{heading}\n{NO_DATA_MARKER}\n"
    columns = [(str(year), _format_number(value)) for year, value in measure.values.items()]
    columns.append(("Average", _format_number(measure.get_average())))
    columns.append(("Diff.", _format_number(measure.get_difference())))
    columns.append(("% Diff.", _format_number(measure.get_difference_as_percentage())))
    headers, cells = _right_align_columns(columns)
    return f"{heading}\n{headers}\n{cells}\n"


def render_area(area: Area) -> str:
    """Render an area title line and all of its measures.

    Args:
        area: Area to render.

    Returns:
        Title line followed by measure blocks or ``<no measures>``.
    """
    title = f"{_display_name(area.names)} ({area.local_authority_code})"
    measures = area.measures
    if not measures:
        return f"{title}\n{NO_MEASURES_MARKER}\n"
    blocks = "".join(f"{render_measure(measure)}\n" for measure in measures.values())
    return f"{title}\n{blocks}"


def render_areas(areas: Iterable[Area]) -> str:
    """Render every area block, or ``<no areas>`` when there are none."""
    blocks = [f"{render_area(area)}\n" for area in areas]
    if not blocks:
        return f"{NO_AREAS_MARKER}\n"
    return "".join(blocks)


def _display_name(names: dict[str, str]) -> str:
    """Pick the English/Welsh display name for an area title."""
    english = names.get(ENGLISH_LANGUAGE_CODE, "")
    welsh = names.get(WELSH_LANGUAGE_CODE, "")
    if english and welsh:
        return f"{english} / {welsh}"
    return english or welsh or UNNAMED_AREA_LABEL


def _format_number(value: float) -> str:
    """Format a value with six decimal places."""
    return f"{value:f}"


def _right_align_columns(columns: list[tuple[str, str]]) -> tuple[str, str]:
    """Right-align each header/value pair to a shared column width.

    Args:
        columns: Header and value text per column.

    Returns:
        Joined header row and value row.
    """
    headers: list[str] = []
    cells: list[str] = []
    for header, cell in columns:
        width = max(len(header), len(cell))
        headers.append(header.rjust(width))
        cells.append(cell.rjust(width))
    return " ".join(headers), " ".join(cells)
