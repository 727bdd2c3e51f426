"""Geographic area with multilingual names and measures.

This module holds the Area type and its recursive merge rule.
"""

from __future__ import annotations

import re

from core.constants import LANGUAGE_CODE_PATTERN
from core.errors import BethYwInvalidArgumentError, BethYwNotFoundError
from store.measure import Measure
from store.rendering import render_area

_LANGUAGE_CODE_RE = re.compile(LANGUAGE_CODE_PATTERN)


class Area:
    """An area identified by its local authority code."""

    def __init__(self, local_authority_code: str) -> None:
        self._local_authority_code = local_authority_code
        self._names: dict[str, str] = {}
        self._measures: dict[str, Measure] = {}

    @property
    def local_authority_code(self) -> str:
        """Authority code identifying the area."""
        return self._local_authority_code

    @property
    def names(self) -> dict[str, str]:
        """Copy of the names keyed by lower-case language code."""
        return dict(sorted(self._names.items()))

    @property
    def measures(self) -> dict[str, Measure]:
        """Measures keyed by lower-case codename, in codename order."""
        return dict(sorted(self._measures.items()))

    def set_name(self, lang: str, name: str) -> None:
        """Set the area name for a language.

        Args:
            lang: Three-letter alphabetic language code, e.g. ``eng`` or ``cym``.
            name: Area name in that language.

        Raises:
            BethYwInvalidArgumentError: If ``lang`` is not three letters.
        """
        if not _LANGUAGE_CODE_RE.fullmatch(lang):
            raise BethYwInvalidArgumentError(
                f"Invalid language code '{lang}': "
                "language codes must be three alphabetical letters only."
            )
        self._names[lang.lower()] = name

    def get_name(self, lang: str) -> str:
        """Return the area name for a language, case-insensitively.

        Raises:
            BethYwNotFoundError: If no name is stored for the language.
        """
        try:
            return self._names[lang.lower()]
        except KeyError as error:
            raise BethYwNotFoundError(
                f"No name with language '{lang}' for area {self._local_authority_code}"
            ) from error

    def set_measure(self, codename: str, measure: Measure) -> None:
        """Attach a measure, merging into any existing one with the codename.

        Args:
            codename: Measure codename, stored lower-cased.
            measure: Measure to attach or merge.
        """
        key = codename.lower()
        existing = self._measures.get(key)
        if existing is None:
            self._measures[key] = measure.copy()
        else:
            existing.merge_from(measure)

    def get_measure(self, codename: str) -> Measure:
        """Return a measure by codename, case-insensitively.

        Raises:
            BethYwNotFoundError: If the area has no such measure.
        """
        try:
            return self._measures[codename.lower()]
        except KeyError as error:
            raise BethYwNotFoundError(
                f"No measure found matching {codename} in area {self._local_authority_code}"
            ) from error

    def copy(self) -> "Area":
        """Return a deep copy owning its own measures."""
        duplicate = Area(self._local_authority_code)
        duplicate.merge_from(self)
        return duplicate

    def merge_from(self, other: "Area") -> None:
        """Merge another area into this one, the other taking precedence.

        Every name of ``other`` goes through :meth:`set_name` and every
        measure through :meth:`set_measure`.
        """
        for lang, name in other._names.items():
            self.set_name(lang, name)
        for codename, measure in other._measures.items():
            self.set_measure(codename, measure)

    def to_dict(self) -> dict[str, dict]:
        """Return the export shape with ``names`` and ``measures`` keys."""
        return {
            "names": self.names,
            "measures": {
                codename: measure.to_dict() for codename, measure in self.measures.items()
            },
        }

    def render(self) -> str:
        """Render the area title and measure tables."""
        return render_area(self)

    def __iadd__(self, other: "Area") -> "Area":
        self.merge_from(other)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Area):
            return NotImplemented
        return (
            self._local_authority_code == other._local_authority_code
            and self._names == other._names
            and self._measures == other._measures
        )

    def __len__(self) -> int:
        return len(self._measures)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Area(local_authority_code={self._local_authority_code!r}, "
            f"names={self.names!r}, measures={list(self.measures)!r})"
        )
