"""Custom exception hierarchy for the codec package."""

from __future__ import annotations

from dataclasses import dataclass


class CodecError(Exception):
    """Base class for codec-specific exceptions."""


@dataclass
class InvalidTextError(CodecError):
    """Raised when decoded bytes are not valid UTF-8 text.

    The raw bytes produced by the decoder are kept on :attr:`data` so callers
    can still display or store the partial result.
    """

    error: UnicodeDecodeError
    data: bytes

    def __str__(self) -> str:  # pragma: no cover - human-friendly message
        return f"decoded bytes are not valid UTF-8 text: {self.error.reason} at position {self.error.start}"


class UnknownSchemeError(CodecError, KeyError):
    """Raised when an encosure scheme name is not registered."""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"unknown encosure scheme '{self.args[0]}'"
