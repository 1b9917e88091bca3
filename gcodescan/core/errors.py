"""
Error types for G-code scanning and line reading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


class GCodeScanError(Exception):
    """Base class for gcodescan errors."""


@dataclass(eq=True)
class ParseError(GCodeScanError):
    """
    A line holds a character no classification rule accepts.

    Returned (not raised) by ``scan``. ``position`` is the 0-based
    character offset of ``char`` within ``text``; ``lineno`` is filled
    in by the reader when the line came from a stream.
    """
    char: str
    position: int
    text: str
    lineno: Optional[int] = None

    def __str__(self) -> str:
        where = f"L{self.lineno}, " if self.lineno is not None else ""
        return (
            f"Parse Error at {where}C{self.position + 1}: "
            f"unexpected character {self.char!r} in {self.text!r}"
        )


@dataclass(eq=True)
class ReadError(GCodeScanError):
    """The underlying stream failed while reading the next line."""
    error: Union[OSError, UnicodeDecodeError]
    lineno: int = 0  # Lines successfully read before the failure

    def __str__(self) -> str:
        return f"Read Error after L{self.lineno}: {self.error}"
