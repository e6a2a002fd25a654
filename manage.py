#!/usr/bin/env python
"""Command-line entry point for the bootform demo project.

Usage:
    python manage.py test bootform
"""

import os
import sys


def main():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "demo.settings.test")
    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
