"""Integration tests for the charting demo page and descriptor endpoint."""

from __future__ import annotations

import pytest
from django.urls import reverse

from charting.demo import DEMO_LABELS, build_demo_charts
from charting.variants import LINE

pytestmark = pytest.mark.integration


def test_demo_page_renders_one_canvas_per_variant(client) -> None:
    """Render every built-in variant as an unescaped canvas element."""

    response = client.get(reverse("charting:demo"))

    assert response.status_code == 200
    content = response.content.decode()
    assert content.count("<canvas ") == 3
    for chart_type in ("line", "bar", "radar"):
        assert f'id="demo-{chart_type}"' in content
        assert f'data-charts="{chart_type}"' in content
    assert "&lt;canvas" not in content
    assert [chart.variant.type for chart in response.context["charts"]] == ["line", "bar", "radar"]


def test_demo_descriptor_returns_resolved_datasets(client) -> None:
    """Return labels and datasets with palette colors filled in."""

    response = client.get(reverse("charting:demo_descriptor", kwargs={"chart_type": "line"}))

    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == "demo-line"
    assert payload["type"] == "line"
    assert payload["options"] == {"responsive": True}
    assert payload["data"]["labels"] == list(DEMO_LABELS)
    first, second = payload["data"]["datasets"]
    assert set(LINE.required_colors) <= set(first)
    assert first["fillColor"] == "rgba(220,220,220,0.2)"
    assert second["fillColor"] == "rgba(151,187,205,0.2)"
    assert second["strokeColor"] == "rgba(0,0,0,1)"
    assert second["data"][-1] is None


def test_demo_descriptor_unknown_type_is_404(client) -> None:
    """Return 404 for chart types without a built-in variant."""

    response = client.get(reverse("charting:demo_descriptor", kwargs={"chart_type": "pie"}))

    assert response.status_code == 404


def test_demo_charts_accept_injected_ids(id_factory) -> None:
    """Use the injected id source instead of fixed demo ids."""

    charts = build_demo_charts(id_factory=id_factory)

    assert [chart.id for chart in charts] == ["chart-1", "chart-2", "chart-3"]
