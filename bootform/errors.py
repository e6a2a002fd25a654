"""Validation error lookup for a single form field."""

from __future__ import annotations

from django import forms


def has_error(form: forms.BaseForm, field: str) -> bool:
    """Return True if ``field`` failed the form's last validation pass."""
    return bool(form[field].errors)


def get_error(form: forms.BaseForm, field: str) -> str | None:
    """Return the first error message for ``field``, or None."""
    errors = form[field].errors
    if not errors:
        return None
    return str(errors[0])
