"""Encosure scheme codecs."""

from .anyway import (
    DEFAULT_SEPARATOR,
    check_separator,
    decode,
    decode_to_text,
    encode,
    encode_escape,
    encode_escaped,
)
from .bytesource import as_bytes
from .errors import CodecError, InvalidTextError, UnknownSchemeError
from .schemes import SCHEMES, Scheme, explain, get_scheme

__all__ = [
    "CodecError",
    "DEFAULT_SEPARATOR",
    "InvalidTextError",
    "SCHEMES",
    "Scheme",
    "UnknownSchemeError",
    "as_bytes",
    "check_separator",
    "decode",
    "decode_to_text",
    "encode",
    "encode_escape",
    "encode_escaped",
    "explain",
    "get_scheme",
]
