"""
G-Code token definitions: codes, scanned lines and character classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import NewType


# A command word copied verbatim from the source line: "G1", "X10.5", "M104".
Code = NewType("Code", str)


class ScanState(Enum):
    """States of the per-line scanner."""

    SCANNING = auto()            # Classifying characters
    COMMENT_TERMINATED = auto()  # Hit ; or #, rest of line dropped
    FAILED = auto()              # Hit an unrecognized character


# Character classes
SEMICOLON_COMMENT = ";"
HASH_COMMENT = "#"
PAREN_OPEN = "("
PAREN_CLOSE = ")"
LINE_NUMBER_LETTERS = frozenset("Nn")

# Inclusive range that starts a code. Also admits [ \ ] ^ _ ` between Z and a.
CODE_FIRST = "A"
CODE_LAST = "z"


# Latin-1 whitespace only. The \x1c-\x1f separators are not whitespace here.
WHITESPACE = frozenset("\t\n\v\f\r \x85\xa0")


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_code_start(char: str) -> bool:
    """Check whether a character begins a code."""
    return CODE_FIRST <= char <= CODE_LAST


@dataclass(frozen=True)
class Line:
    """A single scanned line of G-code."""
    codes: tuple[Code, ...] = ()
    comment: str = ""
    text: str = ""  # Original text

    @property
    def has_comment(self) -> bool:
        return bool(self.comment)

    def __repr__(self) -> str:
        return f"Line({list(self.codes)!r}, comment={self.comment!r})"
