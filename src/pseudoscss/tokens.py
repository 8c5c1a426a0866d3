"""Token and TokenType definitions for the pseudoscss lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, value, and source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pseudoscss.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Member order mirrors the lexer's pattern priority, with RAW (produced
    by the verbatim sub-scanner) last.

    """

    COMMENT = auto()  # // to end of line

    # Punctuation
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LCURLY = auto()  # {
    RCURLY = auto()  # }
    EQUAL = auto()  # =
    SEMICOLON = auto()  # ;
    COLON = auto()  # :

    # Literals
    MULTILINE_STRING = auto()  # """..."""
    STRING = auto()  # "..." or '...'

    # Names
    ID_NAME = auto()  # #id
    CLASS_NAME = auto()  # .class
    TAG_NAME = auto()  # tag, attribute name, bare value, `content`

    WHITESPACE = auto()

    # Verbatim block payload from css { ... }
    RAW = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The lexeme (for RAW, the verbatim payload without delimiters)
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    type: TokenType
    value: str
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from pseudoscss.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        # Idempotent write into the frozen dataclass cache field
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def source_file(self) -> str | None:
        """Source file path, if known."""
        return self._source_file
