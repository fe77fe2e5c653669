"""Registry of the available encosure schemes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from . import anyway
from .bytesource import ByteSource, as_bytes
from .errors import UnknownSchemeError


@dataclass(frozen=True)
class Scheme:
    """An encosure scheme selectable from the command line."""

    name: str
    label: str
    escape: bool

    def encode(self, data: ByteSource, separator: str = anyway.DEFAULT_SEPARATOR) -> str:
        return anyway.encode_escape(data, separator, self.escape)

    def decode(self, text: str) -> bytes:
        return anyway.decode(text)

    def decode_to_text(self, text: str) -> str:
        return anyway.decode_to_text(text)


@dataclass(frozen=True)
class UnitRow:
    """One row of a per-byte breakdown."""

    value: int
    tail: int
    body: int
    unit: str

    @property
    def char(self) -> str:
        """Printable form of the byte, or its escape sequence."""

        if 32 <= self.value < 127:
            return chr(self.value)
        return f"\\x{self.value:02x}"


SCHEMES: Dict[str, Scheme] = {
    "aes": Scheme(name="aes", label="Anyway (AES)", escape=False),
    "eaes": Scheme(name="eaes", label="Escaped Anyway (EAES)", escape=True),
}


def get_scheme(name: str) -> Scheme:
    """Return the scheme registered under *name* (case-insensitive)."""

    try:
        return SCHEMES[name.lower()]
    except KeyError:
        raise UnknownSchemeError(name) from None


def explain(data: ByteSource, *, escape: bool = False) -> List[UnitRow]:
    """Break *data* down into the tail, body and unit of every byte."""

    return [
        UnitRow(
            value=value,
            tail=value & anyway.TAIL_MASK,
            body=value >> 2,
            unit=anyway.encode_unit(value, escape=escape),
        )
        for value in as_bytes(data)
    ]


__all__ = ["SCHEMES", "Scheme", "UnitRow", "explain", "get_scheme"]
