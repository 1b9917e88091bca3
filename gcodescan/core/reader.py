"""
Line supply: pulls text lines from a stream and scans each one.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from .config import ReaderConfig
from .errors import ParseError, ReadError
from .lexer import Line, scan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndOfStream:
    """Input is exhausted. Not an error."""
    lines_read: int = 0


ReadResult = Union[Line, ParseError, EndOfStream, ReadError]


def strip_terminator(raw: str) -> str:
    """Remove a trailing \\n, \\r\\n or \\r from a raw line."""
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


class GCodeReader:
    """
    Pulls lines from a text stream and scans them one at a time.

    ``next_line()`` returns a tagged result: a Line, a ParseError for a
    malformed line, EndOfStream once the input is exhausted, or a
    ReadError if the stream failed. A ReadError is terminal and is
    returned again on every later call.

    Iterating yields Lines and raises on the first failure instead.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._lineno = 0
        self._done: Optional[Union[EndOfStream, ReadError]] = None

    @property
    def lineno(self) -> int:
        """Number of lines read so far."""
        return self._lineno

    def next_line(self) -> ReadResult:
        """Read and scan the next line."""
        if self._done is not None:
            return self._done

        try:
            raw = self._stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Read failed after line %d: %s", self._lineno, exc)
            self._done = ReadError(exc, self._lineno)
            return self._done

        if raw == "":
            logger.debug("End of stream after %d lines", self._lineno)
            self._done = EndOfStream(self._lineno)
            return self._done

        self._lineno += 1
        result = scan(strip_terminator(raw))
        if isinstance(result, ParseError):
            result = replace(result, lineno=self._lineno)
            logger.debug("%s", result)
        return result

    def __iter__(self) -> Iterator[Line]:
        """Iterate over scanned lines."""
        while True:
            result = self.next_line()
            if isinstance(result, EndOfStream):
                return
            if isinstance(result, ReadError):
                raise result.error
            if isinstance(result, ParseError):
                raise result
            yield result

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> GCodeReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_reader(
    path: Union[str, Path],
    config: Optional[ReaderConfig] = None,
) -> GCodeReader:
    """Open a G-code file for line-by-line scanning."""
    config = config or ReaderConfig()
    stream = open(
        Path(path), "r",
        encoding=config.encoding, errors=config.errors, newline="\n",
    )
    return GCodeReader(stream)


def string_reader(content: str) -> GCodeReader:
    """Reader over an in-memory G-code program."""
    return GCodeReader(io.StringIO(content, newline="\n"))
