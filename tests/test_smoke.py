"""Minimal smoke tests for project scaffolding."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


def test_charting_imports() -> None:
    """Import the chart builder and verify the public entry point exists."""

    from charting.builder import Chart

    assert callable(Chart)


def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "chartsite.settings")
    django.setup()
    assert "charting.apps.ChartingConfig" in settings.INSTALLED_APPS
