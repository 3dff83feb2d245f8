"""URL configuration for charting views."""

from __future__ import annotations

from django.urls import path

from charting import views

app_name = "charting"

urlpatterns = [
    path("", views.demo, name="demo"),
    path("api/demo/<str:chart_type>/", views.demo_descriptor, name="demo_descriptor"),
]
