"""App configuration for the charting Django app."""

from __future__ import annotations

from django.apps import AppConfig


class ChartingConfig(AppConfig):
    """Configuration for the `charting` app."""

    name = "charting"
    verbose_name = "Charting"
