"""Normalise supported input shapes into a read-only byte view."""
from __future__ import annotations

from typing import Iterable, Union

ByteSource = Union[str, bytes, bytearray, memoryview, Iterable[int]]


def as_bytes(value: ByteSource) -> memoryview:
    """Return a read-only :class:`memoryview` over the bytes of *value*.

    Text is encoded as UTF-8. Characters produced by the ``surrogateescape``
    error handler turn back into their original bytes; any other lone
    surrogate raises :class:`UnicodeEncodeError`. Buffer objects are wrapped
    without copying. Any other iterable is treated as a sequence of byte
    values.
    """

    if isinstance(value, str):
        return memoryview(value.encode("utf-8", "surrogateescape")).toreadonly()
    if isinstance(value, memoryview):
        return value.cast("B").toreadonly()
    if isinstance(value, (bytes, bytearray)):
        return memoryview(value).toreadonly()
    if isinstance(value, Iterable):
        return memoryview(bytes(value)).toreadonly()

    raise TypeError(f"cannot read bytes from {type(value).__name__!r}")


__all__ = ["ByteSource", "as_bytes"]
