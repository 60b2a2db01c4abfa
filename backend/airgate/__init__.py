"""Airgate — flight search and reservation gateway."""

__version__ = "0.1.0"
