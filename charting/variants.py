"""Built-in chart variants.

Each variant lists the Chart.js dataset color attributes it needs. Attributes
that do not map directly onto a ColorSet field borrow one through `aliases`.
"""

from __future__ import annotations

from typing import Final

from .schema import ChartVariant
from .validator import validate_variants

_POINT_COLORS: Final[tuple[str, ...]] = (
    "fillColor",
    "strokeColor",
    "pointColor",
    "pointStrokeColor",
    "pointHighlightFill",
    "pointHighlightStroke",
)


LINE: Final[ChartVariant] = ChartVariant(
    type="line",
    required_colors=_POINT_COLORS,
    aliases={"pointHighlightFill": "point", "pointHighlightStroke": "pointStroke"},
)

RADAR: Final[ChartVariant] = ChartVariant(
    type="radar",
    required_colors=_POINT_COLORS,
    aliases={"pointHighlightFill": "point", "pointHighlightStroke": "pointStroke"},
)

BAR: Final[ChartVariant] = ChartVariant(
    type="bar",
    required_colors=("fillColor", "strokeColor", "highlightFill", "highlightStroke"),
    aliases={"highlightFill": "point", "highlightStroke": "stroke"},
)


BUILTIN_VARIANTS: Final[tuple[ChartVariant, ...]] = (LINE, BAR, RADAR)


_VALIDATION = validate_variants(BUILTIN_VARIANTS)
if not _VALIDATION.is_valid:
    joined = "\n".join(_VALIDATION.errors)
    raise ValueError(f"Invalid BUILTIN_VARIANTS:\n{joined}")


VARIANTS: Final[dict[str, ChartVariant]] = {variant.type: variant for variant in BUILTIN_VARIANTS}


def get_variant(chart_type: str) -> ChartVariant:
    """Return the built-in variant registered for a Chart.js type tag.

    Raises:
        KeyError: When no built-in variant uses `chart_type`.
    """

    try:
        return VARIANTS[chart_type]
    except KeyError:
        raise KeyError(f"Unknown chart type: {chart_type!r}. Expected one of {sorted(VARIANTS)}.") from None
