"""System checks for the BOOTFORM setting."""

from __future__ import annotations

from django.core import checks
from django.core.exceptions import ImproperlyConfigured

from bootform.conf import SETTING_NAME, get_config


@checks.register()
def check_bootform_settings(app_configs, **kwargs):
    """Report an invalid BOOTFORM setting at startup rather than on first render."""
    try:
        get_config()
    except ImproperlyConfigured as err:
        return [
            checks.Error(
                str(err),
                hint=f"Fix the {SETTING_NAME} dict in your settings module.",
                obj=SETTING_NAME,
                id="bootform.E001",
            )
        ]
    return []
