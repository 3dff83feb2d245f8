"""Pytest fixtures shared across charting tests."""

from __future__ import annotations

import itertools
import json
from collections.abc import Callable, Sequence
from html.parser import HTMLParser
from typing import Any

import pytest


class _ElementCollector(HTMLParser):
    """Collect start tags with their (already unescaped) attributes."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.elements: list[tuple[str, list[tuple[str, str | None]]]] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self.elements.append((tag, attrs))


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Return a deterministic id source yielding `chart-1`, `chart-2`, ..."""

    counter = itertools.count(1)
    return lambda: f"chart-{next(counter)}"


@pytest.fixture
def parse_chart_markup() -> Callable[[str], dict[str, Any]]:
    """Return a parser splitting rendered chart markup into decoded attributes.

    The parsed result carries `tag`, `attributes` (ordered, unescaped strings,
    None for bare attributes), and the JSON-decoded `options` and `data`.
    """

    def parse(markup: str) -> dict[str, Any]:
        collector = _ElementCollector()
        collector.feed(str(markup))
        collector.close()
        assert len(collector.elements) == 1, f"Expected a single element: {markup!r}"
        tag, attrs = collector.elements[0]
        attributes = dict(attrs)
        return {
            "tag": tag,
            "attributes": attributes,
            "options": json.loads(attributes["data-options"] or "null"),
            "data": json.loads(attributes["data-data"] or "null"),
        }

    return parse


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django request cycle.
    - `integration`: tests touching Django views, templates, or settings.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
