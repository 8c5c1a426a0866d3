"""Ordered-choice lexer for pseudoscss.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, TOKEN_PATTERNS
├── core.py              # Lexer class (pattern loop + cursor tracking)
├── modes.py             # LexerMode enum
├── patterns.py          # Ordered token pattern table
└── raw.py               # Verbatim block sub-scanner mixin

Usage:
    >>> from pseudoscss.lexer import Lexer
    >>> for token in Lexer("p;").tokenize():
    ...     print(token)
    Token(TAG_NAME, 'p', 1:1)
    Token(SEMICOLON, ';', 1:2)

"""

from pseudoscss.lexer.core import Lexer
from pseudoscss.lexer.patterns import TOKEN_PATTERNS

__all__ = ["Lexer", "TOKEN_PATTERNS"]
