"""Ordered-choice lexer for pseudoscss source.

At each cursor position the lexer tries TOKEN_PATTERNS in order and takes
the first match. Matching the BEGIN_RAW marker hands over to the verbatim
sub-scanner until its terminating bracket.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from pseudoscss.errors import LexError
from pseudoscss.lexer.modes import LexerMode
from pseudoscss.lexer.patterns import TOKEN_PATTERNS, Pattern
from pseudoscss.lexer.raw import RawScannerMixin
from pseudoscss.tokens import Token, TokenType


class Lexer(RawScannerMixin):
    """Ordered-choice lexer producing a lazy token stream.

    Usage:
        >>> lexer = Lexer('p { content: "hi"; }')
        >>> [t.type.name for t in lexer.tokenize()][:4]
        ['TAG_NAME', 'WHITESPACE', 'LCURLY', 'WHITESPACE']

    The stream is not restartable: tokenize() advances the lexer's own
    cursor, so a second call yields nothing.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_mode",
        "_source_file",
        "_strict",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        strict: bool = False,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: pseudoscss source text
            source_file: Optional source file path for error messages
            strict: Raise UnbalancedInputError on an unterminated raw block
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._mode = LexerMode.NORMAL
        self._source_file = source_file
        self._strict = strict
        self._saved_lineno = 1
        self._saved_col = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Raises:
            LexError: If the remaining text matches no token pattern
            UnbalancedInputError: In strict mode, on an unterminated raw block
        """
        while self._pos < self._source_len:
            yield from self._scan_token()

    def _scan_token(self) -> Iterator[Token]:
        """Match one pattern at the cursor and yield its token(s)."""
        self._save_location()
        start = self._pos
        for token_type, pattern in TOKEN_PATTERNS:
            lexeme = self._match(pattern)
            if lexeme is None:
                continue
            self._consume(len(lexeme))
            if token_type is None:
                self._mode = LexerMode.RAW
                yield from self._scan_raw(start)
                self._mode = LexerMode.NORMAL
            else:
                yield self._make_token(token_type, lexeme, start)
            return

        raise LexError(
            "Cannot tokenize from here",
            remaining=self._source[self._pos :],
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )

    def _match(self, pattern: Pattern) -> str | None:
        """Return the lexeme matching pattern at the cursor, or None."""
        if isinstance(pattern, str):
            return pattern if self._source.startswith(pattern, self._pos) else None
        match = pattern.match(self._source, self._pos)
        if match is None or match.end() == self._pos:
            return None
        return match.group()

    # =========================================================================
    # Cursor and location tracking
    # =========================================================================

    def _consume(self, length: int) -> str:
        """Advance the cursor by length characters, tracking line/column.

        Returns:
            The consumed text.
        """
        text = self._source[self._pos : self._pos + length]
        newline_count = text.count("\n")
        if newline_count:
            self._lineno += newline_count
            self._col = len(text) - text.rfind("\n")
        else:
            self._col += len(text)
        self._pos += len(text)
        return text

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create a Token starting at the saved location and ending at the cursor."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )

    @property
    def mode(self) -> LexerMode:
        """Current lexer mode (NORMAL, or RAW inside a verbatim block)."""
        return self._mode
