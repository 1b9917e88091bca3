"""
Command line front end: scan a G-code file and print one record per line.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence, TextIO

from gcodescan.core import (
    EndOfStream,
    GCodeReader,
    Line,
    ParseError,
    ReadError,
    ReaderConfig,
    open_reader,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_READ_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gcodescan",
        description="Scan G-code lines into codes and comments.",
    )
    parser.add_argument(
        "file", nargs="?", default="-",
        help="G-code file to scan (default: stdin)",
    )
    parser.add_argument(
        "--config", metavar="PATH",
        help="JSON reader config (encoding, errors)",
    )
    parser.add_argument(
        "--format", choices=("json", "text"), default="json",
        help="output format (default: json)",
    )
    parser.add_argument(
        "--keep-going", action="store_true",
        help="report malformed lines and continue with the next one",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def format_line(lineno: int, line: Line, fmt: str) -> str:
    """Render a scanned line for output."""
    if fmt == "json":
        return json.dumps({
            "line": lineno,
            "codes": list(line.codes),
            "comment": line.comment,
            "text": line.text,
        })
    parts = list(line.codes)
    if line.has_comment:
        parts.append(line.comment)
    return f"{lineno}: {' '.join(parts)}".rstrip()


def run(reader: GCodeReader, out: TextIO, fmt: str = "json", keep_going: bool = False) -> int:
    """Scan every line from reader, writing records to out. Returns an exit code."""
    failed = False
    while True:
        result = reader.next_line()
        if isinstance(result, EndOfStream):
            break
        if isinstance(result, ReadError):
            print(f"gcodescan: {result}", file=sys.stderr)
            return EXIT_READ_ERROR
        if isinstance(result, ParseError):
            print(f"gcodescan: {result}", file=sys.stderr)
            if not keep_going:
                return EXIT_PARSE_ERROR
            failed = True
            continue
        out.write(format_line(reader.lineno, result, fmt) + "\n")

    return EXIT_PARSE_ERROR if failed else EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ReaderConfig.from_json(args.config) if args.config else ReaderConfig()
    logger.debug("Reader config: %s", config.to_dict())

    if args.file == "-":
        return run(GCodeReader(sys.stdin), sys.stdout, args.format, args.keep_going)

    try:
        reader = open_reader(args.file, config)
    except OSError as exc:
        print(f"gcodescan: cannot open {args.file}: {exc}", file=sys.stderr)
        return EXIT_READ_ERROR

    with reader:
        return run(reader, sys.stdout, args.format, args.keep_going)


if __name__ == "__main__":
    sys.exit(main())
