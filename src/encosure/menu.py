"""Numbered selection menus for the interactive session."""
from __future__ import annotations

from typing import List, NamedTuple, Sequence

import click


class IndexedChoice(NamedTuple):
    """A menu label together with its position in the menu."""

    label: str
    idx: int

    def __str__(self) -> str:
        return self.label


def make_choices(labels: Sequence[str]) -> List[IndexedChoice]:
    """Pair every label with its zero-based index."""

    return [IndexedChoice(label, idx) for idx, label in enumerate(labels)]


def select(title: str, choices: Sequence[IndexedChoice]) -> IndexedChoice:
    """Echo *choices* as a numbered list and prompt for one of them."""

    if not choices:
        raise ValueError("menu requires at least one choice")

    click.echo(title)
    for choice in choices:
        click.echo(f"  {choice.idx + 1}) {choice}")
    number = click.prompt(
        "Select",
        type=click.IntRange(1, len(choices)),
        default=1,
        show_default=True,
    )
    return choices[number - 1]


__all__ = ["IndexedChoice", "make_choices", "select"]
