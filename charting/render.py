"""Markup rendering for assembled charts.

The element carries its whole configuration in `data-*` attributes. Values are
escaped by Django, so JSON quotes arrive as `&quot;` and are restored by the
browser before the client script parses them.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe


def encode_json(value: object) -> str:
    """Encode a chart payload as compact JSON.

    `DjangoJSONEncoder` covers Decimal, date and datetime values that commonly
    come straight out of querysets.
    """

    return json.dumps(value, cls=DjangoJSONEncoder, separators=(",", ":"))


def render_attributes(attributes: Mapping[str, object]) -> SafeString:
    """Render attributes in the given order as ` key="value"` pairs.

    Args:
        attributes: Ordered attribute mapping. `True` renders a bare attribute;
            `False` and `None` omit the attribute.

    Returns:
        Escaped attribute string with a leading space per attribute.
    """

    parts: list[str] = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(format_html(" {}", key))
            continue
        parts.append(format_html(' {}="{}"', key, value))
    return mark_safe("".join(parts))


def render_element(tag: str, attributes: Mapping[str, object]) -> SafeString:
    """Render an empty element (`<tag ...></tag>`) carrying `attributes`."""

    return format_html("<{}{}></{}>", tag, render_attributes(attributes), tag)
