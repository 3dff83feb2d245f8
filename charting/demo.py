"""Sample charts rendered by the demo page."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from .builder import Chart
from .schema import ChartVariant
from .variants import BAR, LINE, RADAR

DEMO_LABELS: Final[tuple[str, ...]] = ("January", "February", "March", "April", "May", "June", "July")


def build_demo_chart(variant: ChartVariant, *, id_factory: Callable[[], str] | None = None) -> Chart:
    """Return a two-series sample chart for a variant.

    Args:
        variant: Chart variant to render.
        id_factory: Optional id source; a fixed `demo-<type>` id is used when omitted.

    Returns:
        Chart populated with labels, two series and responsive options.
    """

    chart = Chart(
        variant,
        id=None if id_factory is not None else f"demo-{variant.type}",
        height="300",
        attributes={"class": "demo-chart"},
        id_factory=id_factory,
    )
    chart.set_labels(DEMO_LABELS)
    chart.set_option("responsive", True)
    chart.add_series([65, 59, 80, 81, 56, 55, 40], {"label": "First dataset"})
    chart.add_series(
        [28, 48, 40, 19, 86, 27, None],
        {"label": "Second dataset", "fillColor": "rgba(151,187,205,0.2)"},
    )
    return chart


def build_demo_charts(*, id_factory: Callable[[], str] | None = None) -> tuple[Chart, ...]:
    """Return one sample chart per built-in variant (line, bar, radar)."""

    return tuple(build_demo_chart(variant, id_factory=id_factory) for variant in (LINE, BAR, RADAR))
