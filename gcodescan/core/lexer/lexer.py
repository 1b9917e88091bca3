"""
G-Code Lexer: scans one line of G-code into codes and an inline comment.
"""

from __future__ import annotations

from typing import Union

from ..errors import ParseError
from .tokens import (
    HASH_COMMENT,
    LINE_NUMBER_LETTERS,
    PAREN_CLOSE,
    PAREN_OPEN,
    SEMICOLON_COMMENT,
    Code,
    Line,
    ScanState,
    is_code_start,
    is_whitespace,
)


ScanResult = Union[Line, ParseError]


def _field_end(text: str, start: int) -> int:
    """Index of the first whitespace at or after start, else len(text)."""
    end = start
    while end < len(text) and not is_whitespace(text[end]):
        end += 1
    return end


def scan(text: str) -> ScanResult:
    """
    Scan a single line of G-code.

    Walks the line once, left to right:
    - whitespace is skipped
    - ``;`` and ``#`` end the line, their text is dropped
    - ``( ... )`` is captured as the comment (the last one wins); an
      unterminated ``(`` swallows the rest of the line
    - ``N``/``n`` fields (line numbers) are skipped
    - anything from ``A`` to ``z`` starts a code running to the next
      whitespace

    Any other character yields a ParseError. The error is returned, not
    raised, and no partial Line is produced.
    """
    codes: list[Code] = []
    comment = ""
    state = ScanState.SCANNING
    pos = 0

    while pos < len(text) and state is ScanState.SCANNING:
        char = text[pos]

        if is_whitespace(char):
            pos += 1

        elif char == SEMICOLON_COMMENT or char == HASH_COMMENT:
            state = ScanState.COMMENT_TERMINATED

        elif char == PAREN_OPEN:
            close = text.find(PAREN_CLOSE, pos + 1)
            if close == -1:
                pos = len(text)
            else:
                comment = text[pos:close + 1]
                pos = close + 1

        elif char in LINE_NUMBER_LETTERS:
            pos = _field_end(text, pos + 1)

        elif is_code_start(char):
            end = _field_end(text, pos + 1)
            codes.append(Code(text[pos:end]))
            pos = end

        else:
            state = ScanState.FAILED

    if state is ScanState.FAILED:
        return ParseError(text[pos], pos, text)
    return Line(codes=tuple(codes), comment=comment, text=text)


def scan_or_raise(text: str) -> Line:
    """Scan a line, raising ParseError instead of returning it."""
    result = scan(text)
    if isinstance(result, ParseError):
        raise result
    return result


class GCodeLexer:
    """
    Line lexer bound to a single line of text.
    Holds no scanning state between calls; scan() may be called repeatedly.
    """

    def __init__(self, text: str):
        self.text = text

    def scan(self) -> ScanResult:
        """Scan the bound line."""
        return scan(self.text)

    def tokenize(self) -> list[Code]:
        """Return the codes of the bound line, raising on malformed input."""
        return list(scan_or_raise(self.text).codes)
