"""Exceptions raised by janorm."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a required text input is missing or options are malformed."""


class ConversionError(RuntimeError):
    """Raised when the conversion engine is unavailable or rejects its input."""
