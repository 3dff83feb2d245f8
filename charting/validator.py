"""Validation for color sets and chart variant definitions.

Palettes can come from settings or from callers at runtime, so color sets are
checked strictly before they are accepted. Variant definitions are code, and a
variant that cannot resolve one of its own attributes is a bug.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .schema import COLOR_FIELDS, ChartVariant, ColorSet


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a color set or chart variant."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_color_set(candidate: object, *, label: str = "ColorSet") -> ValidationResult:
    """Validate a ColorSet or a mapping keyed by ColorSet field names.

    Args:
        candidate: ColorSet instance or mapping with `fill`, `stroke`, `point`
            and `pointStroke` keys.
        label: Prefix used in error messages (e.g. `palette[2]`).

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if isinstance(candidate, ColorSet):
        values = candidate.to_dict()
    elif isinstance(candidate, Mapping):
        values = dict(candidate)
        missing = [name for name in COLOR_FIELDS if name not in values]
        if missing:
            errors.append(f"{label} is missing required colors: {missing}.")
        extra = sorted(str(key) for key in values if key not in COLOR_FIELDS)
        if extra:
            warnings.append(f"{label} ignores unknown keys: {extra}.")
    else:
        errors.append(f"{label} must be a ColorSet or a mapping, got {type(candidate).__name__}.")
        values = {}

    for name in COLOR_FIELDS:
        if name in values and not isinstance(values[name], str):
            errors.append(f"{label}.{name} must be a string, got {values[name]!r}.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_palette(candidates: Iterable[object]) -> ValidationResult:
    """Validate every entry of a candidate palette.

    Args:
        candidates: ColorSet instances or mappings, in palette order.

    Returns:
        ValidationResult covering all entries. An empty palette is invalid.
    """

    errors: list[str] = []
    warnings: list[str] = []

    count = 0
    for idx, candidate in enumerate(candidates):
        count += 1
        result = validate_color_set(candidate, label=f"palette[{idx}]")
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    if count == 0:
        errors.append("Palette must contain at least one color set.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_variant(variant: ChartVariant) -> ValidationResult:
    """Validate that a chart variant can resolve every required color.

    Args:
        variant: ChartVariant definition to check.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not variant.type.strip():
        errors.append("ChartVariant.type must be a non-empty string.")
    if not variant.required_colors:
        errors.append(f"ChartVariant[{variant.type}].required_colors must contain at least one entry.")
    if len(set(variant.required_colors)) != len(variant.required_colors):
        errors.append(f"ChartVariant[{variant.type}].required_colors contains duplicates.")

    for attribute, color_field in variant.aliases.items():
        if color_field not in COLOR_FIELDS:
            errors.append(
                f"ChartVariant[{variant.type}].aliases[{attribute!r}] points at unknown color field {color_field!r}."
            )
        if attribute not in variant.required_colors:
            warnings.append(f"ChartVariant[{variant.type}].aliases[{attribute!r}] is not a required color.")

    for attribute in variant.required_colors:
        if variant.color_field_for(attribute) is None:
            errors.append(
                f"ChartVariant[{variant.type}] cannot resolve required color {attribute!r} "
                f"(short name {variant.short_name(attribute)!r} has no ColorSet field or alias)."
            )

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_variants(variants: Iterable[ChartVariant]) -> ValidationResult:
    """Validate a collection of chart variants, enforcing unique type tags.

    Args:
        variants: ChartVariant entries to validate.

    Returns:
        ValidationResult covering all input variants.
    """

    errors: list[str] = []
    warnings: list[str] = []

    seen: set[str] = set()
    for variant in variants:
        if variant.type in seen:
            errors.append(f"Duplicate ChartVariant.type: {variant.type!r}.")
        else:
            seen.add(variant.type)
        result = validate_variant(variant)
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
