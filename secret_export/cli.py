"""
secret-service-export CLI — entry point.

Usage:
    secret-service-export                         # list the available collections
    secret-service-export -c Login                # export "Login" as Paw JSON to stdout
    secret-service-export Login -f csv -o out.csv # export as CSV to a file
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import TextIO

from secret_export.config import Config, get_config
from secret_export.enumerator import list_collections
from secret_export.errors import ExportError, OutputIOError
from secret_export.exporter import collect_document, write_document
from secret_export.formats import available_formats, get_exporter
from secret_export.service.dbus import connect


def build_parser(cfg: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secret-service-export",
        description="Export a Secret Service collection using the specified format.",
    )
    parser.add_argument("name", nargs="?", help="Collection to export (same as --collection)")
    parser.add_argument(
        "-c",
        "--collection",
        help="Collection to export. Leave empty to list the available collections",
    )
    parser.add_argument(
        "-f",
        "--format",
        default=cfg.format,
        help=f"Output format. Allowed values: {available_formats()}. Default: {cfg.format}",
    )
    parser.add_argument(
        "-o", "--output", help="Write the output to this file. If omitted, writes to stdout"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


@contextmanager
def open_output(path: str | None, file_mode: int) -> Generator[TextIO, None, None]:
    """Yield stdout, or ``path`` created/truncated with ``file_mode``.

    The file is closed on every exit path; stdout is left open.
    """
    if not path:
        yield sys.stdout
        return

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, file_mode)
    except OSError as e:
        raise OutputIOError(f"could not create the output file: {e}") from e
    with os.fdopen(fd, "w", encoding="utf-8", newline="") as sink:
        yield sink


def main(argv: list[str] | None = None) -> int:
    cfg = get_config()
    parser = build_parser(cfg)
    args = parser.parse_args(argv)

    if args.name and args.collection and args.name != args.collection:
        parser.error(f"conflicting collection names: {args.name!r} and {args.collection!r}")

    if args.version:
        from secret_export import __version__

        print(f"secret-service-export {__version__}")
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.log_level_value,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        name = args.name or args.collection or cfg.collection
        if not name:
            return _cmd_list()
        return _cmd_export(name, args.format, args.output, cfg)
    except ExportError as e:
        # One line, no traceback
        print(f"Error: {' '.join(str(e).split())}", file=sys.stderr)
        return 1


def _cmd_list() -> int:
    with connect() as service:
        labels = list_collections(service)
    for label in labels:
        print(label)
    return 0


def _cmd_export(name: str, fmt: str, output: str | None, cfg: Config) -> int:
    # Fail on a bad format before prompting the user for any unlock.
    exporter = get_exporter(fmt)

    with connect() as service:
        document = collect_document(service, name)

    # Output is only opened once every record is in memory.
    with open_output(output, cfg.file_mode) as sink:
        write_document(document, exporter, sink)
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
