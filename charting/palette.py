"""Palette storage and per-series color resolution.

Series styling cascades: an explicit caller value wins, then the palette slot
matching the series position, then palette entry 0 for every series past the
end of the palette.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Final

from .exceptions import ConfigurationError
from .schema import ChartVariant, ColorSet
from .validator import validate_color_set, validate_palette

DEFAULT_COLOR_SETS: Final[tuple[ColorSet, ...]] = (
    ColorSet(
        fill="rgba(220,220,220,0.2)",
        stroke="rgba(220,220,220,1)",
        point="rgba(220,220,220,1)",
        point_stroke="#fff",
    ),
    ColorSet(
        fill="rgba(0,0,0,0.2)",
        stroke="rgba(0,0,0,1)",
        point="rgba(0,0,0,1)",
        point_stroke="#000",
    ),
)


def coerce_color_set(candidate: ColorSet | Mapping[str, Any]) -> ColorSet:
    """Return a ColorSet from a ColorSet or a mapping keyed by wire field names.

    Raises:
        ConfigurationError: When a required color is missing or not a string.
    """

    result = validate_color_set(candidate)
    if not result.is_valid:
        raise ConfigurationError(result.errors)
    if isinstance(candidate, ColorSet):
        return candidate
    return ColorSet(
        fill=candidate["fill"],
        stroke=candidate["stroke"],
        point=candidate["point"],
        point_stroke=candidate["pointStroke"],
    )


def coerce_palette(candidates: Iterable[ColorSet | Mapping[str, Any]]) -> tuple[ColorSet, ...]:
    """Return validated ColorSets, rejecting the whole input on any error.

    Raises:
        ConfigurationError: When the input is empty or any entry is invalid.
    """

    materialized = list(candidates)
    result = validate_palette(materialized)
    if not result.is_valid:
        raise ConfigurationError(result.errors)
    return tuple(coerce_color_set(candidate) for candidate in materialized)


class Palette:
    """Ordered ColorSet collection rotated across chart series.

    Entry 0 is the fallback for series beyond the palette length. The palette
    can never be emptied, and a rejected update leaves it untouched.
    """

    __slots__ = ("_color_sets",)

    def __init__(self, color_sets: Iterable[ColorSet | Mapping[str, Any]] = DEFAULT_COLOR_SETS) -> None:
        self._color_sets = coerce_palette(color_sets)

    def replace(self, color_sets: Iterable[ColorSet | Mapping[str, Any]]) -> None:
        """Swap in a new palette when every entry validates."""

        self._color_sets = coerce_palette(color_sets)

    def add(self, color_set: ColorSet | Mapping[str, Any]) -> None:
        """Append a validated ColorSet to the end of the palette."""

        self._color_sets = (*self._color_sets, coerce_color_set(color_set))

    def color_set_for(self, index: int) -> ColorSet:
        """Return the ColorSet for a zero-based series index."""

        if 0 <= index < len(self._color_sets):
            return self._color_sets[index]
        return self._color_sets[0]

    def copy(self) -> Palette:
        """Return an independent palette with the same entries."""

        return Palette(self._color_sets)

    @property
    def color_sets(self) -> tuple[ColorSet, ...]:
        """Return the palette entries in order."""

        return self._color_sets

    def __len__(self) -> int:
        return len(self._color_sets)

    def __iter__(self) -> Iterator[ColorSet]:
        return iter(self._color_sets)

    def __getitem__(self, index: int) -> ColorSet:
        return self._color_sets[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._color_sets == other._color_sets

    def __repr__(self) -> str:
        return f"Palette({list(self._color_sets)!r})"


def resolve_series_colors(
    *,
    variant: ChartVariant,
    palette: Palette,
    index: int,
    options: Mapping[str, Any],
) -> dict[str, Any]:
    """Return series options completed with every color the variant requires.

    Args:
        variant: Chart variant declaring required colors and aliases.
        palette: Palette supplying default colors.
        index: Zero-based position of the series within its chart.
        options: Caller-supplied style overrides; never mutated.

    Returns:
        A new dict: caller keys first (unchanged), then missing required
        colors in `variant.required_colors` order.

    Raises:
        AssertionError: When the variant cannot resolve one of its own
            required colors (a variant definition bug).
    """

    color_set = palette.color_set_for(index)
    resolved = dict(options)
    for attribute in variant.required_colors:
        if attribute in resolved:
            continue
        color_field = variant.color_field_for(attribute)
        if color_field is None:
            raise AssertionError(
                f"ChartVariant[{variant.type}] has no ColorSet field or alias for required color {attribute!r}."
            )
        resolved[attribute] = color_set.value_for(color_field)
    return resolved
