"""Views for the charting demo page."""

from __future__ import annotations

from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render

from .demo import build_demo_chart, build_demo_charts
from .variants import VARIANTS


def demo(request: HttpRequest) -> HttpResponse:
    """Render every built-in chart variant with sample data.

    Args:
        request: Current request object.

    Returns:
        Rendered demo page.
    """

    return render(request, "charting/demo.html", {"charts": build_demo_charts()})


def demo_descriptor(request: HttpRequest, chart_type: str) -> JsonResponse:
    """Return the assembled Chart.js payload of one demo chart.

    Args:
        request: Current request object.
        chart_type: Chart.js type tag of a built-in variant.

    Returns:
        JSON with the chart id, type, options and labels/datasets payload.

    Raises:
        Http404: When `chart_type` is not a built-in variant.
    """

    variant = VARIANTS.get(chart_type)
    if variant is None:
        raise Http404(f"Unknown chart type: {chart_type}")

    chart = build_demo_chart(variant)
    return JsonResponse(
        {
            "id": chart.id,
            "type": chart.variant.type,
            "options": chart.options,
            "data": chart.build_descriptor(),
        }
    )
