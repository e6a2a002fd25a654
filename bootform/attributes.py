"""DOM id and input name for a form field."""

from __future__ import annotations

from django import forms


def field_id(form: forms.BaseForm, field: str) -> str:
    """Return the DOM id Django assigns to ``field``.

    Forms built with ``auto_id=False`` have no ids, so the input name is used
    instead; labels and feedback targets still need something to point at.
    """
    bound_field = form[field]
    return bound_field.auto_id or bound_field.html_name


def field_name(form: forms.BaseForm, field: str) -> str:
    """Return the (prefixed) ``name`` attribute Django uses for ``field``."""
    return form[field].html_name
