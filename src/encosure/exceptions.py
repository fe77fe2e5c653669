"""Custom exception hierarchy for the encosure toolkit."""
from __future__ import annotations


class EncosureError(Exception):
    """Base class for errors raised outside the codec core."""


class ConfigurationError(EncosureError):
    """Raised when user-supplied configuration is invalid."""


__all__ = ["ConfigurationError", "EncosureError"]
