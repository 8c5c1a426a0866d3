"""Exception classes for pseudoscss.

Every compile failure is fatal: the compiler raises one of these and
returns no partial output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pseudoscss.tokens import Token


def _format_location(
    lineno: int | None,
    col_offset: int | None,
    source_file: str | None,
) -> str:
    location = ""
    if source_file:
        location = f"{source_file}:"
    if lineno is not None:
        location += f"{lineno}:"
        if col_offset is not None:
            location += f"{col_offset}:"
    if location:
        location = location.rstrip(":") + " "
    return location


class PseudoScssError(Exception):
    """Base exception for all pseudoscss errors.

    Subclass this for specific error categories.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        location = _format_location(lineno, col_offset, source_file)
        super().__init__(f"{location}{message}")


class LexError(PseudoScssError):
    """Error during tokenization.

    Raised when the remaining text matches no token pattern, or when a
    quoted literal fails to decode.
    """

    def __init__(
        self,
        message: str,
        remaining: str = "",
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error.

        Args:
            message: Error description
            remaining: Unconsumed source text (or the offending literal)
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.remaining = remaining
        super().__init__(message, lineno, col_offset, source_file)


class ParseError(PseudoScssError):
    """Error during parsing.

    Raised when a token arrives while the top context frame has no
    transition for it.
    """

    def __init__(
        self,
        message: str,
        token: Token | None = None,
        frame: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error.

        Args:
            message: Error description
            token: The offending token (optional)
            frame: Name of the frame kind on top of the stack (optional)
            source_file: Path to source file (optional)
        """
        self.token = token
        self.frame = frame
        if token is not None:
            lineno, col_offset = token.lineno, token.col
            source_file = source_file or token.source_file
        else:
            lineno = col_offset = None
        super().__init__(message, lineno, col_offset, source_file)


class UnbalancedInputError(ParseError):
    """Input ended with an open raw block or unclosed frames.

    Only raised when strict mode is enabled; otherwise the compiler
    truncates silently.
    """

    pass
