"""Schema types for declarative chart assembly.

A chart is described by plain values: a ChartVariant naming the color
attributes Chart.js expects, a palette of ColorSet defaults, and the Series the
caller adds. The builder combines them into ChartData on every render.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final, Literal, TypedDict

ColorField = Literal["fill", "stroke", "point", "pointStroke"]

COLOR_FIELDS: Final[tuple[ColorField, ...]] = ("fill", "stroke", "point", "pointStroke")


@dataclass(frozen=True, slots=True)
class ColorSet:
    """A bundle of default colors applied to one series.

    Args:
        fill: Area/bar fill color.
        stroke: Line/border color.
        point: Point marker color.
        point_stroke: Point marker border color (`pointStroke` on the wire).
    """

    fill: str
    stroke: str
    point: str
    point_stroke: str

    def value_for(self, color_field: ColorField) -> str:
        """Return the color stored under a wire field name."""

        return self.to_dict()[color_field]

    def to_dict(self) -> dict[str, str]:
        """Return the color set keyed by wire field names."""

        return {
            "fill": self.fill,
            "stroke": self.stroke,
            "point": self.point,
            "pointStroke": self.point_stroke,
        }


@dataclass(frozen=True, slots=True)
class ChartVariant:
    """A concrete chart kind (line, bar, radar, ...).

    Args:
        type: Chart.js type tag emitted as `data-charts`.
        required_colors: Style attributes every dataset must carry, in output order.
        aliases: Required attributes whose short name is not a ColorSet field,
            mapped to the ColorSet field they borrow.
        color_suffix: Suffix stripped from an attribute name to find its ColorSet field.
    """

    type: str
    required_colors: tuple[str, ...]
    aliases: Mapping[str, ColorField] = field(default_factory=dict, hash=False)
    color_suffix: str = "Color"

    def short_name(self, attribute: str) -> str:
        """Return an attribute name with the color suffix removed."""

        return attribute.removesuffix(self.color_suffix) if self.color_suffix else attribute

    def color_field_for(self, attribute: str) -> ColorField | None:
        """Return the ColorSet field backing a required attribute.

        Direct fields win (`fillColor` -> `fill`); otherwise the explicit alias
        table is consulted. None means the variant cannot resolve the attribute.
        """

        short_name = self.short_name(attribute)
        for color_field in COLOR_FIELDS:
            if color_field == short_name:
                return color_field
        return self.aliases.get(attribute)


@dataclass(frozen=True, slots=True)
class Series:
    """A named data series owned by a Chart.

    Args:
        name: Unique name within the chart.
        data: Values aligned to the chart labels (None for gaps).
        options: Caller-supplied style overrides.
    """

    name: str
    data: list[Any]
    options: dict[str, Any]


class ChartData(TypedDict):
    """The Chart.js payload (labels + datasets) emitted as `data-data`."""

    labels: list[Any]
    datasets: list[dict[str, Any]]
