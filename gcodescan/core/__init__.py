from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from gcodescan.core.config import ReaderConfig
from gcodescan.core.errors import GCodeScanError, ParseError, ReadError
from gcodescan.core.lexer import Code, GCodeLexer, Line, scan, scan_or_raise
from gcodescan.core.reader import (
    EndOfStream,
    GCodeReader,
    ReadResult,
    open_reader,
    string_reader,
)


def parse_string(content: str) -> list[Line]:
    """Scan every line of a G-code program. Raises the first ParseError."""
    return list(string_reader(content))


def parse_file(
    path: Union[str, Path],
    config: Optional[ReaderConfig] = None,
) -> list[Line]:
    """Scan every line of a G-code file. Raises the first ParseError."""
    with open_reader(path, config) as reader:
        return list(reader)


__all__ = [
    "Code",
    "EndOfStream",
    "GCodeLexer",
    "GCodeReader",
    "GCodeScanError",
    "Line",
    "ParseError",
    "ReadError",
    "ReadResult",
    "ReaderConfig",
    "open_reader",
    "parse_file",
    "parse_string",
    "scan",
    "scan_or_raise",
    "string_reader",
]
