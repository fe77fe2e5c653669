"""Command line interface for the encosure toolkit."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Iterable, Sequence

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import interactive
from .codec import (
    DEFAULT_SEPARATOR,
    SCHEMES,
    CodecError,
    InvalidTextError,
    as_bytes,
    check_separator,
    explain,
    get_scheme,
)
from .exceptions import ConfigurationError, EncosureError
from .utils.logging import LOG_LEVELS, configure_logging

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _read_bytes(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: str | None, data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(path).write_bytes(data)


def _read_text(path: str | None, *, encoding: str = "utf-8", errors: str = "strict") -> str:
    if not path or path == "-":
        return sys.stdin.buffer.read().decode(encoding, errors)
    return Path(path).read_text(encoding=encoding, errors=errors)


def _write_text(path: str | None, data: str, *, encoding: str = "utf-8") -> None:
    if not path or path == "-":
        sys.stdout.write(data)
        sys.stdout.flush()
        return
    Path(path).write_text(data, encoding=encoding)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for this run (default: $ENCOSURE_LOG_LEVEL or INFO)",
    )


def _add_scheme_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--scheme",
        type=str.lower,
        choices=list(SCHEMES),
        default="aes",
        help="Encosure scheme: plain (aes) or escaped (eaes)",
    )


def _load_payload(text: str | None, input_path: str | None) -> bytes:
    if text is not None and input_path is not None:
        raise ConfigurationError("Provide either --text or --in, not both")
    if text is not None:
        try:
            return text.encode("utf-8", "surrogateescape")
        except UnicodeEncodeError as exc:
            raise ConfigurationError(f"--text cannot be encoded as UTF-8: {exc.reason}") from exc
    return _read_bytes(input_path)


def _handle_encode(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="encosure encode", description="Encode data with an encosure scheme.")
    _add_scheme_argument(parser)
    parser.add_argument("-i", "--in", dest="input_path", default=None, help="Input file (default: stdin)")
    parser.add_argument("-o", "--out", dest="output_path", default="-", help="Output file (default: stdout)")
    parser.add_argument("--text", default=None, help="Encode this UTF-8 string instead of reading input")
    parser.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Separator placed between units; '\\n' stands for a newline (default: ', ')",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    separator = args.separator.replace("\\n", "\n")
    if not check_separator(separator):
        err_console.print(
            f"[yellow]Separator {escape(repr(separator))} is reserved; using {DEFAULT_SEPARATOR!r}.[/yellow]"
        )

    try:
        payload = _load_payload(args.text, args.input_path)
        scheme = get_scheme(args.scheme)
    except (ConfigurationError, CodecError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    logger.debug("encoding %d bytes with %s", len(payload), scheme.name)
    _write_text(args.output_path, scheme.encode(payload, separator))
    return 0


def _handle_decode(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="encosure decode", description="Decode AES or EAES text.")
    parser.add_argument("-i", "--in", dest="input_path", default="-", help="Input file (default: stdin)")
    parser.add_argument("-o", "--out", dest="output_path", default="-", help="Output file (default: stdout)")
    parser.add_argument("--text", default=None, help="Decode this string instead of reading input")
    parser.add_argument(
        "--bytes",
        dest="raw_bytes",
        action="store_true",
        help="Write the decoded bytes as-is instead of validating them as UTF-8",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    encoded = args.text if args.text is not None else _read_text(args.input_path, errors="replace")
    # both variants share one decoder
    scheme = SCHEMES["aes"]

    if args.raw_bytes:
        _write_bytes(args.output_path, scheme.decode(encoded))
        return 0

    try:
        message = scheme.decode_to_text(encoded)
    except InvalidTextError as exc:
        err_console.print(f"[yellow]{escape(str(exc))}; writing raw byte values instead.[/yellow]")
        _write_text(args.output_path, str(list(exc.data)))
        return 1

    _write_text(args.output_path, message)
    return 0


def _handle_table(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(
        prog="encosure table",
        description="Show how every byte of the input is split into tail, body and unit.",
    )
    _add_scheme_argument(parser)
    parser.add_argument("-i", "--in", dest="input_path", default=None, help="Input file (default: stdin)")
    parser.add_argument("--text", default=None, help="Explain this UTF-8 string instead of reading input")
    _add_common_arguments(parser)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    try:
        payload = _load_payload(args.text, args.input_path)
        scheme = get_scheme(args.scheme)
    except (ConfigurationError, CodecError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    table = Table(title=scheme.label)
    table.add_column("Char")
    table.add_column("Value", justify="right")
    table.add_column("Tail", justify="right")
    table.add_column("Body")
    table.add_column("Unit")
    for row in explain(as_bytes(payload), escape=scheme.escape):
        table.add_row(
            escape(row.char),
            str(row.value),
            str(row.tail),
            f"{row.body:06b}",
            escape(row.unit),
        )
    console.print(table)
    return 0


def _handle_interactive(argv: Sequence[str]) -> int:
    try:
        interactive.main.main(
            args=list(argv),
            prog_name="encosure interactive",
            standalone_mode=False,
        )
    except click.exceptions.Abort:
        err_console.print("[red]Aborted.[/red]")
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="encosure",
        description="Encode data as the word 'anyway' and back again.",
    )
    subparsers = parser.add_subparsers(dest="command")
    for command in ["encode", "decode", "table", "interactive"]:
        subparsers.add_parser(command)
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]

    try:
        if command == "encode":
            return _handle_encode(rest)
        if command == "decode":
            return _handle_decode(rest)
        if command == "table":
            return _handle_table(rest)
        if command == "interactive":
            return _handle_interactive(rest)
    except (OSError, EncosureError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    if command in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    err_console.print(f"[red]Error:[/red] unknown command '{escape(command)}'")
    build_parser().print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
