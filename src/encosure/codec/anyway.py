"""Anyway encosure scheme (AES) and its escaped variant (EAES).

Every byte is stored as one *unit* built from the word ``ANYWAY``:

* the two low bits (the *tail*) choose how many ``*`` markers frame the word,
  from none to three;
* the six high bits (the *body*) choose the case of each letter, bit 2 for
  the first ``A`` up to bit 7 for the final ``Y``. A set bit makes the letter
  lowercase.

``"A"`` (``0b01000001``) has body ``0b010000`` and tail ``0b01``, so it is
written as ``*ANYWaY*``.

The escaped variant additionally frames each unit with backslash-escaped
markers (``\\**ANYWaY*\\*``) so the text survives being pasted into places
that apply markdown formatting. The decoder ignores any backslash pair, which
lets it read both variants.
"""

from __future__ import annotations

import logging

from .bytesource import ByteSource, as_bytes
from .errors import InvalidTextError

logger = logging.getLogger(__name__)

WORD = "ANYWAY"
MARKER = "*"
ESCAPE = "\\"
DEFAULT_SEPARATOR = ", "
ALPHABET = frozenset("anywANYW" + MARKER + ESCAPE)

BODY_BITS = len(WORD)
TAIL_MASK = 0b11
_CASE_OFFSET = ord("a") - ord("A")
_LOWERCASE_FLOOR = 96


def check_separator(separator: str) -> bool:
    """Return ``True`` when *separator* can join units without ambiguity."""

    if not separator:
        return False
    return not any(char in ALPHABET for char in separator)


def _resolve_separator(separator: str) -> str:
    if check_separator(separator):
        return separator
    logger.debug("separator %r is reserved, using %r", separator, DEFAULT_SEPARATOR)
    return DEFAULT_SEPARATOR


def encode_unit(value: int, *, escape: bool = False) -> str:
    """Encode a single byte *value* into one unit."""

    tail = value & TAIL_MASK
    body = (value & 0b11111100) >> 2

    word = "".join(
        chr(ord(letter) + _CASE_OFFSET * ((body >> index) & 1))
        for index, letter in enumerate(WORD)
    )
    marker = MARKER * tail
    if escape:
        escaped = (ESCAPE + MARKER) * tail
        return f"{escaped}{marker}{word}{marker}{escaped}"
    return f"{marker}{word}{marker}"


def encode_escape(data: ByteSource, separator: str, escape: bool) -> str:
    """Encode *data* as AES, or as EAES when *escape* is true.

    Invalid separators (see :func:`check_separator`) are replaced by
    :data:`DEFAULT_SEPARATOR`.
    """

    joiner = _resolve_separator(separator)
    return joiner.join(encode_unit(value, escape=escape) for value in as_bytes(data))


def encode(data: ByteSource, separator: str = DEFAULT_SEPARATOR) -> str:
    """Encode *data* as plain AES."""

    return encode_escape(data, separator, False)


def encode_escaped(data: ByteSource, separator: str = DEFAULT_SEPARATOR) -> str:
    """Encode *data* as escaped AES (EAES)."""

    return encode_escape(data, separator, True)


def decode(text: str) -> bytes:
    """Decode AES or EAES *text* back into bytes.

    The scan never fails. Characters outside the alphabet are skipped, a
    backslash swallows the character after it, and letters only count by
    their case, so any six letters complete a unit. Marker runs longer than
    three wrap around modulo four.
    """

    result = bytearray()
    body_bits = 0
    body = 0
    stars = 0

    length = len(text)
    index = 0
    while index < length:
        while index < length and text[index] not in ALPHABET:
            index += 1
        if index == length:
            break

        char = text[index]
        if char == ESCAPE:
            index += 2
            continue
        if char == MARKER:
            stars += 1
        else:
            if ord(char) >= _LOWERCASE_FLOOR:
                body |= 1 << body_bits
            body_bits += 1

        if body_bits == BODY_BITS:
            if stars > TAIL_MASK:
                logger.debug("clamping %d markers before offset %d", stars, index)
            result.append((body << 2) + (stars % 4))

            # markers and escapes glued to the finished word belong to it
            while index < length and text[index] in ALPHABET:
                index += 1

            body_bits = 0
            body = 0
            stars = 0
            continue

        index += 1

    return bytes(result)


def decode_to_text(text: str) -> str:
    """Decode *text* and interpret the result as UTF-8.

    Raises:
        InvalidTextError: If the decoded bytes are not valid UTF-8. The raw
            bytes are available on the exception's ``data`` attribute.
    """

    data = decode(text)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidTextError(exc, data) from exc


__all__ = [
    "ALPHABET",
    "DEFAULT_SEPARATOR",
    "WORD",
    "check_separator",
    "decode",
    "decode_to_text",
    "encode",
    "encode_escape",
    "encode_escaped",
    "encode_unit",
]
