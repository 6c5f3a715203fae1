"""Utility helpers for competition_field."""

from competition_field.utils.logging import setup_logging

__all__ = ["setup_logging"]
