"""Base Django settings for the bootform demo/test project."""

from __future__ import annotations

from pathlib import Path

from decouple import Csv, config

REPO_ROOT = Path(__file__).resolve().parent.parent.parent
BASE_DIR = REPO_ROOT

SECRET_KEY = config("SECRET_KEY", default="dev-secret-key")
DEBUG = config("DEBUG", default=True, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=Csv())

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "bootform",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": REPO_ROOT / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Bootform rendering settings
BOOTFORM = {
    "error_content_tag": config("BOOTFORM_ERROR_CONTENT_TAG", default="small"),
    "label_class": config("BOOTFORM_LABEL_CLASS", default="form-control-label"),
    "feedback_attribute": config("BOOTFORM_FEEDBACK_ATTRIBUTE", default="data-feedback-for"),
}

LOG_LEVEL = config("LOG_LEVEL", default="WARNING").upper()
BOOTFORM_LOG_LEVEL = config("BOOTFORM_LOG_LEVEL", default=LOG_LEVEL).upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "dev": {
            "format": "{asctime} {levelname:8} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "dev",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "bootform": {
            "handlers": ["console"],
            "level": BOOTFORM_LOG_LEVEL,
            "propagate": False,
        },
    },
}
