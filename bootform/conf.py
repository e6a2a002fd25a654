"""Bootform settings: error_content_tag, label_class, feedback_attribute.

Configured through the ``BOOTFORM`` dict in Django settings::

    BOOTFORM = {
        "error_content_tag": "div",
        "label_class": "col-form-label",
    }

Renderers take an explicit ``config=`` argument; ``get_config()`` is only the
fallback when none is passed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

SETTING_NAME = "BOOTFORM"

# Valid HTML tag and attribute names
TAG_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9-]*$")
ATTRIBUTE_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:.-]*$")


@dataclass(frozen=True)
class BootformConfig:
    """Rendering settings shared by every bootform renderer."""

    error_content_tag: str = "small"
    label_class: str = "form-control-label"
    feedback_attribute: str = "data-feedback-for"

    def __post_init__(self):
        if not isinstance(self.error_content_tag, str) or not TAG_NAME_RE.match(
            self.error_content_tag
        ):
            raise ImproperlyConfigured(
                f"{SETTING_NAME}['error_content_tag'] must be an HTML tag name, "
                f"got {self.error_content_tag!r}"
            )
        if not isinstance(self.label_class, str):
            raise ImproperlyConfigured(
                f"{SETTING_NAME}['label_class'] must be a string, got {self.label_class!r}"
            )
        if not isinstance(self.feedback_attribute, str) or not ATTRIBUTE_NAME_RE.match(
            self.feedback_attribute
        ):
            raise ImproperlyConfigured(
                f"{SETTING_NAME}['feedback_attribute'] must be an HTML attribute name, "
                f"got {self.feedback_attribute!r}"
            )

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> BootformConfig:
        """Build a config from a settings dict, rejecting unknown keys."""
        valid = {f.name for f in fields(cls)}
        unknown = set(values) - valid
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown {SETTING_NAME} setting(s): {', '.join(sorted(unknown))}. "
                f"Valid keys are: {', '.join(sorted(valid))}"
            )
        return cls(**values)


def get_config() -> BootformConfig:
    """Return the config described by ``settings.BOOTFORM``.

    Settings are read on every call so ``override_settings`` takes effect
    immediately.
    """
    values = getattr(settings, SETTING_NAME, None) or {}
    if not isinstance(values, dict):
        raise ImproperlyConfigured(f"{SETTING_NAME} must be a dict, got {type(values).__name__}")
    return BootformConfig.from_dict(values)
