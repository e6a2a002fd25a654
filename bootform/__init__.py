"""Bootstrap 4 form field rendering for Django forms."""

__version__ = "0.3.0"
