"""Tests for built-in chart variants and variant validation."""

from __future__ import annotations

import pytest

from charting.schema import ChartVariant
from charting.validator import validate_variant, validate_variants
from charting.variants import BAR, BUILTIN_VARIANTS, LINE, RADAR, VARIANTS, get_variant

pytestmark = pytest.mark.unit


def test_builtin_variants_are_valid() -> None:
    """Every built-in variant resolves all of its required colors."""

    result = validate_variants(BUILTIN_VARIANTS)

    assert result.is_valid is True
    assert result.errors == ()


def test_get_variant_returns_registered_variants() -> None:
    """Look up built-in variants by Chart.js type tag."""

    assert get_variant("line") is LINE
    assert get_variant("bar") is BAR
    assert get_variant("radar") is RADAR
    assert sorted(VARIANTS) == ["bar", "line", "radar"]


def test_get_variant_rejects_unknown_type() -> None:
    """Raise KeyError naming the unknown type."""

    with pytest.raises(KeyError, match="doughnut"):
        get_variant("doughnut")


def test_color_field_for_prefers_direct_fields_over_aliases() -> None:
    """Map suffixed names onto ColorSet fields before consulting aliases."""

    assert LINE.color_field_for("fillColor") == "fill"
    assert LINE.color_field_for("pointStrokeColor") == "pointStroke"
    assert LINE.color_field_for("pointHighlightFill") == "point"
    assert LINE.color_field_for("unknownColor") is None


def test_validate_variant_reports_unresolvable_colors() -> None:
    """Flag required colors with neither a ColorSet field nor an alias."""

    variant = ChartVariant(type="glow", required_colors=("fillColor", "glowColor"))

    result = validate_variant(variant)

    assert result.is_valid is False
    assert any("'glowColor'" in error for error in result.errors)


def test_validate_variant_reports_alias_to_unknown_field() -> None:
    """Flag aliases that point at something other than a ColorSet field."""

    variant = ChartVariant(
        type="glow",
        required_colors=("fillColor", "glow"),
        aliases={"glow": "shine"},  # type: ignore[dict-item]
    )

    result = validate_variant(variant)

    assert result.is_valid is False
    assert any("unknown color field 'shine'" in error for error in result.errors)


def test_validate_variant_warns_on_unused_alias() -> None:
    """Warn about aliases for attributes the variant does not require."""

    variant = ChartVariant(type="plain", required_colors=("fillColor",), aliases={"extra": "point"})

    result = validate_variant(variant)

    assert result.is_valid is True
    assert result.warnings


def test_validate_variants_rejects_duplicate_types() -> None:
    """Require unique type tags across a variant collection."""

    result = validate_variants((LINE, LINE))

    assert result.is_valid is False
    assert any("Duplicate ChartVariant.type" in error for error in result.errors)


def test_builtin_variants_are_hashable() -> None:
    """Hash variants by type and required colors so they can key sets and dicts."""

    assert len({LINE, BAR, RADAR, LINE}) == 3
    assert hash(LINE) == hash(ChartVariant(type="line", required_colors=LINE.required_colors))
