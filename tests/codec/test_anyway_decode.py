"""Tests for the tolerant AES/EAES decoder."""

from __future__ import annotations

import random

import pytest

from encosure.codec import (
    InvalidTextError,
    decode,
    decode_to_text,
    encode,
    encode_escaped,
)
from encosure.codec.anyway import encode_unit

_RNG = random.Random(1337)
RANDOM_PAYLOAD = bytes(_RNG.getrandbits(8) for _ in range(512))

PAYLOADS = [
    b"",
    b"A",
    "Hello, world!".encode("utf-8"),
    "سلام دنیا 👋".encode("utf-8"),
    bytes(range(256)),
    RANDOM_PAYLOAD,
]
SEPARATORS = [", ", "\n", " ", "|", "--\n--", "0"]


def test_decode_single_letter():
    assert decode("*ANYWaY*") == b"A"
    assert decode("\\**ANYWaY*\\*") == b"A"


def test_decode_empty_text():
    assert decode("") == b""


@pytest.mark.parametrize("payload", PAYLOADS)
@pytest.mark.parametrize("separator", SEPARATORS)
def test_roundtrip_plain_and_escaped(payload: bytes, separator: str):
    assert decode(encode(payload, separator)) == payload
    assert decode(encode_escaped(payload, separator)) == payload


def test_escaped_and_plain_decode_identically():
    for payload in PAYLOADS:
        assert decode(encode_escaped(payload)) == decode(encode(payload))


def test_noise_in_separators_is_ignored():
    payload = "noise tolerant?".encode("utf-8")
    encoded = encode(payload, ", ")
    noisy = "  12 ~" + encoded.replace(", ", " ,\t;; 0 [x] ") + " ?!\n"
    assert decode(noisy) == payload


def test_noise_between_word_letters_is_ignored():
    payload = bytes(range(0, 256, 7))
    pieces = []
    for value in payload:
        unit = encode_unit(value, escape=True)
        start = next(i for i, ch in enumerate(unit) if ch.isalpha())
        word = unit[start : start + 6]
        pieces.append(unit[:start] + " 9 ".join(word) + unit[start + 6 :])
    assert decode(" | ".join(pieces)) == payload


def test_letters_count_by_case_only():
    assert decode("*NNNNwN*") == decode("*ANYWaY*") == b"A"
    assert decode("yyyyyy") == bytes([0b11111100])


def test_overlong_marker_runs_wrap_modulo_four():
    assert decode("*****ANYWaY*****") == b"A"
    assert decode("****ANYWAY****") == b"\x00"


def test_backslash_swallows_following_character():
    assert decode("\\AANYWaY") == b"@"
    assert decode("\\\\*ANYWaY*") == b"A"


def test_trailing_backslash_is_harmless():
    assert decode("\\") == b""
    assert decode("ANYWAY\\") == b"\x00"
    assert decode("*ANYW\\") == b""


def test_incomplete_unit_is_dropped():
    assert decode("*ANYWaY*, **ANY") == b"A"


def test_units_without_separator_merge():
    assert decode("ANYWAYANYWAY") == b"\x00"


def test_decode_to_text_returns_string():
    assert decode_to_text(encode("Hello, world!")) == "Hello, world!"
    assert decode_to_text(encode_escaped("سلام")) == "سلام"


def test_decode_to_text_reports_invalid_utf8():
    raw = b"\xff\xfeok"
    with pytest.raises(InvalidTextError) as excinfo:
        decode_to_text(encode(raw))

    err = excinfo.value
    assert err.data == raw
    assert isinstance(err.error, UnicodeDecodeError)
    assert isinstance(err.__cause__, UnicodeDecodeError)
