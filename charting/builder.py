"""Chart assembly: labels, named series and palette into Chart.js markup.

A Chart owns its state exclusively. Nothing is cached between renders: every
call to `render()` recomputes the descriptor from the current labels, series,
options and palette.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import partial
from typing import Any
from uuid import uuid4

from django.utils.safestring import SafeString

from .conf import ChartDefaults, chart_defaults
from .exceptions import ConfigurationError
from .palette import Palette, resolve_series_colors
from .render import encode_json, render_element
from .schema import ChartData, ChartVariant, ColorSet, Series
from .variants import LINE, get_variant

logger = logging.getLogger(__name__)


def default_chart_id(prefix: str = "chart_") -> str:
    """Return a random chart id so unconfigured charts never collide on a page."""

    return f"{prefix}{uuid4().hex}"


class Chart:
    """Builder for a single Chart.js canvas element.

    Args:
        variant: ChartVariant (or its type tag, e.g. `"bar"`).
        id: Element id. Generated through `id_factory` when empty.
        width: Element width. Defaults to `100%`.
        height: Element height. Defaults to an empty string.
        attributes: Extra element attributes, rendered after the chart attributes.
        palette: Initial palette. Defaults to the project palette.
        id_factory: Zero-argument callable producing ids; inject a fixed one
            for reproducible output.
        tag: Element name. Defaults to `canvas`.
        defaults: Explicit defaults; read from Django settings when omitted.
    """

    def __init__(
        self,
        variant: ChartVariant | str = LINE,
        *,
        id: str | None = None,
        width: str | None = None,
        height: str | None = None,
        attributes: Mapping[str, object] | None = None,
        palette: Palette | Iterable[ColorSet | Mapping[str, Any]] | None = None,
        id_factory: Callable[[], str] | None = None,
        tag: str | None = None,
        defaults: ChartDefaults | None = None,
    ) -> None:
        defaults = defaults or chart_defaults()
        if id_factory is None:
            id_factory = partial(default_chart_id, defaults.id_prefix)

        self.variant = get_variant(variant) if isinstance(variant, str) else variant
        self.id = id or id_factory()
        self.width = width or defaults.width
        self.height = height or defaults.height
        self.tag = tag or defaults.tag
        self.attributes: dict[str, object] = dict(attributes or {})
        if isinstance(palette, Palette):
            self._palette = palette.copy()
        else:
            self._palette = Palette(defaults.color_sets if palette is None else palette)
        self._labels: list[Any] = []
        self._series: dict[str, Series] = {}
        self._options: dict[str, Any] = {}

    def add_label(self, label: Any) -> Chart:
        """Append a label; duplicates are allowed."""

        self._labels.append(label)
        return self

    def set_labels(self, labels: Iterable[Any]) -> Chart:
        """Replace all labels, keeping the given order."""

        self._labels = list(labels)
        return self

    @property
    def labels(self) -> list[Any]:
        """Return the current labels."""

        return list(self._labels)

    def add_series(
        self,
        data: Iterable[Any] = (),
        options: Mapping[str, Any] | None = None,
        name: str | None = None,
    ) -> str:
        """Add or replace a named data series.

        Args:
            data: Values aligned to the labels (None for gaps).
            options: Style overrides; colors left out are filled from the palette.
            name: Series name. Defaults to `set-N` where N is the new series count.

        Returns:
            The name the series was stored under. Reusing an existing name
            replaces that series in place, keeping its position.
        """

        name = name or f"set-{len(self._series) + 1}"
        self._series[name] = Series(name=name, data=list(data), options=dict(options or {}))
        return name

    push_data = add_series

    @property
    def series(self) -> dict[str, Series]:
        """Return copies of the series keyed by name, in insertion order."""

        return {
            name: Series(name=name, data=list(series.data), options=dict(series.options))
            for name, series in self._series.items()
        }

    def set_options(self, options: Mapping[str, Any]) -> Chart:
        """Replace all chart-wide Chart.js options."""

        self._options = dict(options)
        return self

    def set_option(self, key: str, value: Any) -> Chart:
        """Set a single chart-wide Chart.js option."""

        self._options[key] = value
        return self

    @property
    def options(self) -> dict[str, Any]:
        """Return the chart-wide options."""

        return dict(self._options)

    def set_palette(self, color_sets: Iterable[ColorSet | Mapping[str, Any]]) -> Chart:
        """Replace the palette atomically.

        Raises:
            ConfigurationError: When the list is empty or any entry is invalid;
                the previous palette is kept.
        """

        try:
            self._palette.replace(color_sets)
        except ConfigurationError as exc:
            logger.warning("Chart[%s] rejected palette replacement: %s", self.id, "; ".join(exc.errors))
            raise
        return self

    def add_color_set(self, color_set: ColorSet | Mapping[str, Any]) -> Chart:
        """Append a color set to the palette.

        Raises:
            ConfigurationError: When the color set is invalid; the palette is unchanged.
        """

        try:
            self._palette.add(color_set)
        except ConfigurationError as exc:
            logger.warning("Chart[%s] rejected color set: %s", self.id, "; ".join(exc.errors))
            raise
        return self

    @property
    def palette(self) -> Palette:
        """Return a copy of the current palette."""

        return self._palette.copy()

    def build_descriptor(self) -> ChartData:
        """Assemble labels and datasets with every required color resolved."""

        datasets: list[dict[str, Any]] = []
        for index, series in enumerate(self._series.values()):
            options = resolve_series_colors(
                variant=self.variant,
                palette=self._palette,
                index=index,
                options=series.options,
            )
            datasets.append({**options, "data": list(series.data)})
        return {"labels": list(self._labels), "datasets": datasets}

    def build_attributes(self) -> dict[str, object]:
        """Return element attributes in their fixed output order."""

        attributes: dict[str, object] = {
            "id": self.id,
            "height": self.height,
            "width": self.width,
            "data-charts": self.variant.type,
            "data-options": encode_json(self._options),
            "data-data": encode_json(self.build_descriptor()),
        }
        attributes.update(self.attributes)
        return attributes

    def render(self) -> SafeString:
        """Render the chart element."""

        logger.debug(
            "Rendering Chart[%s] type=%s series=%d labels=%d",
            self.id,
            self.variant.type,
            len(self._series),
            len(self._labels),
        )
        return render_element(self.tag, self.build_attributes())

    def __str__(self) -> str:
        return str(self.render())

    def __html__(self) -> SafeString:
        return self.render()

    def __repr__(self) -> str:
        return f"<Chart id={self.id!r} type={self.variant.type!r} series={list(self._series)!r}>"
