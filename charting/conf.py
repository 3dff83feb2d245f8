"""Chart defaults read from Django settings.

Settings:
    CHARTING_TAG: Element name wrapping the chart (default `canvas`).
    CHARTING_ID_PREFIX: Prefix for generated chart ids (default `chart_`).
    CHARTING_DEFAULT_WIDTH: Width used when a chart sets none (default `100%`).
    CHARTING_DEFAULT_HEIGHT: Height used when a chart sets none (default empty).
    CHARTING_DEFAULT_PALETTE: Sequence of ColorSet mappings replacing the
        built-in palette.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from django.conf import ENVIRONMENT_VARIABLE, settings
from django.core.exceptions import ImproperlyConfigured

from .exceptions import ConfigurationError
from .palette import DEFAULT_COLOR_SETS, coerce_palette
from .schema import ColorSet


@dataclass(frozen=True, slots=True)
class ChartDefaults:
    """Project-wide defaults applied to new charts."""

    tag: str
    id_prefix: str
    width: str
    height: str
    color_sets: tuple[ColorSet, ...]


BUILTIN_DEFAULTS: Final[ChartDefaults] = ChartDefaults(
    tag="canvas",
    id_prefix="chart_",
    width="100%",
    height="",
    color_sets=DEFAULT_COLOR_SETS,
)


def chart_defaults() -> ChartDefaults:
    """Return chart defaults from the active Django settings.

    Raises:
        ImproperlyConfigured: When `CHARTING_DEFAULT_PALETTE` is not a valid palette.
    """

    if not _settings_available():
        return BUILTIN_DEFAULTS

    raw_palette = getattr(settings, "CHARTING_DEFAULT_PALETTE", None)
    color_sets = DEFAULT_COLOR_SETS
    if raw_palette is not None:
        try:
            color_sets = coerce_palette(raw_palette)
        except ConfigurationError as exc:
            raise ImproperlyConfigured(f"CHARTING_DEFAULT_PALETTE is invalid: {'; '.join(exc.errors)}") from exc

    return ChartDefaults(
        tag=str(getattr(settings, "CHARTING_TAG", BUILTIN_DEFAULTS.tag)),
        id_prefix=str(getattr(settings, "CHARTING_ID_PREFIX", BUILTIN_DEFAULTS.id_prefix)),
        width=str(getattr(settings, "CHARTING_DEFAULT_WIDTH", BUILTIN_DEFAULTS.width)),
        height=str(getattr(settings, "CHARTING_DEFAULT_HEIGHT", BUILTIN_DEFAULTS.height)),
        color_sets=color_sets,
    )


def _settings_available() -> bool:
    """Return True when Django settings are configured or configurable."""

    return settings.configured or bool(os.environ.get(ENVIRONMENT_VARIABLE))
