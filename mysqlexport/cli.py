"""Command-line entry point for exporting a MySQL database to SQL files."""

from __future__ import annotations

import argparse
import getpass
import sys
from typing import Callable, Sequence

from .exporter import Config, ExportError, Exporter

_TRUE_WORDS = {"1", "t", "true", "yes", "y", "on"}
_FALSE_WORDS = {"0", "f", "false", "no", "n", "off"}


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {text!r}")


def _prompt_password() -> str:
    try:
        return getpass.getpass("Enter password: ")
    except (EOFError, OSError) as exc:
        raise ExportError(f"failed to read password: {exc}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the export command."""
    parser = argparse.ArgumentParser(
        prog="mysql-exporter",
        description=(
            "Export the schema of a MySQL database and up to a given number "
            "of rows from each table into schema.sql and data.sql."
        ),
    )
    parser.add_argument("--host", default="localhost", help="database host")
    parser.add_argument("--port", type=int, default=3306, help="database port")
    parser.add_argument("--user", default="root", help="database user")
    parser.add_argument(
        "--password",
        default="",
        help="database password (prompted for when empty)",
    )
    parser.add_argument("--database", required=True, help="database to export")
    parser.add_argument(
        "--rows",
        type=int,
        default=1000,
        help="maximum number of rows written for each table",
    )
    parser.add_argument("--output", default="./output", help="output directory")
    parser.add_argument(
        "--compress",
        type=_parse_bool,
        nargs="?",
        const=True,
        default=True,
        metavar="BOOL",
        help="pack the SQL files into export.zip (default: true)",
    )
    return parser


def config_from_args(
    args: argparse.Namespace,
    prompt: Callable[[], str] = _prompt_password,
) -> Config:
    """Turn parsed arguments into a Config, asking for the password if none was given."""
    password = args.password
    if not password:
        password = prompt()
    return Config(
        host=args.host,
        port=args.port,
        user=args.user,
        password=password,
        database=args.database,
        max_rows=args.rows,
        output=args.output,
        compress=args.compress,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the export command; return the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        config = config_from_args(args)
        with Exporter.from_config(config) as exporter:
            exporter.execute()
    except ExportError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())