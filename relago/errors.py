from __future__ import annotations


class InvalidTimestampError(ValueError):
    """Raised when a value cannot be normalized to a UTC instant."""
