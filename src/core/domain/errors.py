"""Domain errors."""

from __future__ import annotations


class InvalidDieError(ValueError):
    """Raised when a die is built or used with invalid arguments."""
