import os

import dj_database_url

# Set SECRET_KEY before importing base settings
# Not a real secret - tests don't need cryptographic security
os.environ.setdefault("SECRET_KEY", "test-key-not-secret")  # pragma: allowlist secret

from .base import *  # noqa

DEBUG = False

# Use DATABASE_URL if provided, otherwise in-memory SQLite
DATABASES["default"] = dj_database_url.config(  # type: ignore[assignment]
    default="sqlite://:memory:",
    conn_max_age=600,
)

# Tests pin the defaults so environment overrides can't change rendered markup
BOOTFORM = {}

# Suppress library logs during tests
LOGGING["loggers"]["bootform"]["level"] = "CRITICAL"  # type: ignore[index]  # noqa: F405
