"""Token patterns for the pseudoscss lexer.

TOKEN_PATTERNS is an ordered-choice table: the lexer tries entries top to
bottom and the first one matching at the cursor wins, even when a later
entry would match more text. Reordering entries changes the language.

A pattern is either a literal string (matched with startswith) or a
compiled regex (matched at the cursor). The BEGIN_RAW entry carries no
token type; matching it switches the lexer into the verbatim sub-scanner.
"""

from __future__ import annotations

import re

from pseudoscss.tokens import TokenType

Pattern = str | re.Pattern[str]

# `css`, optional whitespace, `{`. The brace is consumed with the marker.
BEGIN_RAW = re.compile(r"css\s*\{")

MULTILINE_STRING = re.compile(r'"""(?:[^"\\]|\\.)*(?:"{1,2}(?:[^"\\]|\\.)+)*"""')
STRING = re.compile(r'"(?:[^"\r\n\\]|\\.)*"' r"|'(?:[^'\r\n\\]|\\.)*'")

TOKEN_PATTERNS: tuple[tuple[TokenType | None, Pattern], ...] = (
    (None, BEGIN_RAW),
    (TokenType.COMMENT, re.compile(r"//.*")),
    (TokenType.LPAREN, "("),
    (TokenType.RPAREN, ")"),
    (TokenType.LBRACKET, "["),
    (TokenType.RBRACKET, "]"),
    (TokenType.LCURLY, "{"),
    (TokenType.RCURLY, "}"),
    (TokenType.EQUAL, "="),
    (TokenType.SEMICOLON, ";"),
    (TokenType.COLON, ":"),
    (TokenType.MULTILINE_STRING, MULTILINE_STRING),
    (TokenType.STRING, STRING),
    (TokenType.ID_NAME, re.compile(r"#[\w-]+", re.ASCII)),
    (TokenType.CLASS_NAME, re.compile(r"\.[\w-]+", re.ASCII)),
    (TokenType.TAG_NAME, re.compile(r"[\w-]+", re.ASCII)),
    (TokenType.WHITESPACE, re.compile(r"\s+")),
)

# Verbatim sub-scanner character classes
RAW_OPENERS = frozenset("([{")
RAW_CLOSERS = frozenset(")]}")
RAW_RUN = re.compile(r"[^()\[\]{}]+")
