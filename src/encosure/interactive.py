"""Prompt-driven encosure session."""
from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from .codec import DEFAULT_SEPARATOR, SCHEMES, InvalidTextError, check_separator
from .codec.textio import SENTINEL, collect_until_sentinel, read_separator
from .menu import make_choices, select
from .utils.logging import LOG_LEVELS, configure_logging

logger = logging.getLogger(__name__)

SCHEME_ORDER = list(SCHEMES.values())
SCHEME_CHOICES = make_choices([scheme.label for scheme in SCHEME_ORDER])
DIRECTION_CHOICES = make_choices(["Encode", "Decode"])


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Set the log level for the session.",
)
def main(log_level: Optional[str]) -> None:
    """Encode or decode text typed at the terminal."""
    configure_logging(log_level)

    scheme = SCHEME_ORDER[select("Choose an encosure scheme:", SCHEME_CHOICES).idx]
    encoding = select("Encode or decode?", DIRECTION_CHOICES).idx == 0
    logger.debug("interactive session using %s (%s)", scheme.name, "encode" if encoding else "decode")

    if encoding:
        click.echo(f"\nType {SENTINEL} on an empty line to encode.\nEnter text to encode:\n")
    else:
        click.echo(f"\nType {SENTINEL} on an empty line to decode.\nEnter data to decode:\n")

    buffer = collect_until_sentinel(iter(sys.stdin.readline, ""))

    if encoding:
        raw = click.prompt(
            "\nEnter separator ('\\n' for newline)",
            default=DEFAULT_SEPARATOR,
            show_default=False,
        )
        separator = read_separator(raw)
        if not check_separator(separator):
            click.echo(f"Separator {separator!r} is reserved; using {DEFAULT_SEPARATOR!r}.", err=True)
        click.echo(f"\nEncoded data:\n{scheme.encode(buffer, separator)}")
        return

    try:
        text = scheme.decode_to_text(buffer)
    except InvalidTextError as exc:
        click.echo("Decoded bytes are not valid UTF-8; showing raw values.", err=True)
        text = str(list(exc.data))
    click.echo(f"\nDecoded text:\n{text}")


if __name__ == "__main__":  # pragma: no cover - module entry point
    main()
