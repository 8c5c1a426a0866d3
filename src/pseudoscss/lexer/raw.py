"""Verbatim block scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from pseudoscss.errors import UnbalancedInputError
from pseudoscss.lexer.patterns import RAW_OPENERS, RAW_RUN
from pseudoscss.tokens import Token, TokenType


class RawScannerMixin:
    """Mixin providing the bracket-balanced verbatim scanner.

    Entered after the BEGIN_RAW marker (`css {`) has been consumed. Copies
    everything up to the first unbalanced closing bracket into a single RAW
    token. All three bracket kinds share one depth counter, so the payload
    may mix them freely as long as the total nesting balances.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _strict: bool

    def _consume(self, length: int) -> str:
        """Advance the cursor. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, start_pos: int) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_raw(self, start_pos: int) -> Iterator[Token]:
        """Scan a verbatim payload and yield one RAW token.

        The terminating bracket is consumed but not part of the payload.
        If the source ends first, nothing is yielded unless strict mode
        asks for an UnbalancedInputError.

        Args:
            start_pos: Offset where the BEGIN_RAW marker started

        Yields:
            At most one RAW token
        """
        parts: list[str] = []
        depth = 0
        source = self._source
        while self._pos < self._source_len:
            run = RAW_RUN.match(source, self._pos)
            if run is not None:
                parts.append(self._consume(run.end() - self._pos))
                continue

            bracket = self._consume(1)
            if bracket in RAW_OPENERS:
                depth += 1
            else:
                depth -= 1
                if depth < 0:
                    yield self._make_token(TokenType.RAW, "".join(parts), start_pos)
                    return
            parts.append(bracket)

        if self._strict:
            partial = self._make_token(TokenType.RAW, "".join(parts), start_pos)
            raise UnbalancedInputError("Unterminated raw block", token=partial)
