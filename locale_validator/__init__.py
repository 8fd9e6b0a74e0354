"""Locale key validator."""

__version__ = "1.0.0"
