"""
G-Code Lexer module: per-line scanning of letter-plus-number command lines.
"""

from .tokens import (
    Code,
    Line,
    ScanState,
    is_code_start,
    is_whitespace,
)
from .lexer import (
    GCodeLexer,
    ScanResult,
    scan,
    scan_or_raise,
)

__all__ = [
    # Token types
    "Code",
    "Line",
    "ScanState",
    "is_code_start",
    "is_whitespace",
    # Lexer
    "GCodeLexer",
    "ScanResult",
    "scan",
    "scan_or_raise",
]
