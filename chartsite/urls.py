"""URL configuration for chartsite."""

from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("charting.urls")),
]
