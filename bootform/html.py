"""Attribute merging and tag building on top of Django's format_html."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from django.forms.utils import flatatt
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import SafeString, mark_safe


def normalize_attrs(attrs: Mapping[str, Any] | None) -> dict[str, Any]:
    """Turn option keys into HTML attribute names (underscores -> hyphens).

    E.g., ``data_role="x"`` becomes ``data-role="x"``. Key order is kept.
    """
    if not attrs:
        return {}
    return {key.replace("_", "-"): value for key, value in attrs.items()}


def merge_attrs(attrs: Mapping[str, Any] | None, defaults: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``defaults`` into ``attrs`` without overriding caller values.

    Caller keys come first in their own order, then any defaults the caller
    did not supply.
    """
    merged = dict(attrs or {})
    for key, value in defaults.items():
        merged.setdefault(key, value)
    return merged


def content_tag(tag: str, content: Any = "", attrs: Mapping[str, Any] | None = None) -> SafeString:
    """Build ``<tag attrs>content</tag>``, escaping content unless already safe.

    Attributes go through Django's ``flatatt``: ``None`` and ``False`` values
    are dropped, ``True`` renders a bare attribute.
    """
    return format_html("<{}{}>{}</{}>", tag, flatatt(dict(attrs or {})), content, tag)


def join_html(*fragments: Any) -> SafeString:
    """Concatenate markup fragments; unsafe strings are escaped, None is skipped."""
    return mark_safe(  # noqa: S308 - every fragment passes through conditional_escape
        "".join(conditional_escape(fragment) for fragment in fragments if fragment is not None)
    )
