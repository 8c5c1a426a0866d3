"""Lexer operating modes."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    - NORMAL: ordered-choice matching against TOKEN_PATTERNS
    - RAW: inside a `css { ... }` verbatim block, counting brackets

    """

    NORMAL = auto()
    RAW = auto()
