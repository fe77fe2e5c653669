"""Helpers for collecting codec input typed at a terminal."""
from __future__ import annotations

from typing import Iterable

SENTINEL = ".done"


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def collect_until_sentinel(lines: Iterable[str], sentinel: str = SENTINEL) -> str:
    """Join *lines* until one equals *sentinel*.

    Every line is followed by a newline in the result. When the sentinel is
    reached the newline in front of it is dropped; if *lines* runs out first
    the buffer is returned as collected.
    """

    buffer = ""
    for line in lines:
        line = _strip_line_ending(line)
        if line == sentinel:
            return buffer[:-1]
        buffer += line + "\n"
    return buffer


def read_separator(raw: str) -> str:
    """Turn a separator typed at a prompt into the separator to use.

    One trailing line ending is removed and the two characters ``\\n`` become
    a real newline.
    """

    return _strip_line_ending(raw).replace("\\n", "\n")


__all__ = ["SENTINEL", "collect_until_sentinel", "read_separator"]
