"""Encosure schemes: hide bytes in the word 'anyway'."""

from .codec import (
    DEFAULT_SEPARATOR,
    CodecError,
    InvalidTextError,
    UnknownSchemeError,
    check_separator,
    decode,
    decode_to_text,
    encode,
    encode_escape,
    encode_escaped,
)
from .exceptions import ConfigurationError, EncosureError

__all__ = [
    "CodecError",
    "ConfigurationError",
    "DEFAULT_SEPARATOR",
    "EncosureError",
    "InvalidTextError",
    "UnknownSchemeError",
    "check_separator",
    "decode",
    "decode_to_text",
    "encode",
    "encode_escape",
    "encode_escaped",
]
