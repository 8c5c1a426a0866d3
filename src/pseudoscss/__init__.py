"""
pseudoscss: compile a pseudo-stylesheet templating language to HTML

Nested selectors become elements, bracketed attributes become HTML
attributes, `content:` statements become escaped text, and `css { ... }`
blocks pass through verbatim.

Quick Start:
    >>> from pseudoscss import compile
    >>> compile('p.lead[data-x=1] { content: "Hello & welcome"; }')
    '<p data-x="1" class="lead">Hello &amp; welcome</p>'

    >>> # Or keep a configured compiler around
    >>> from pseudoscss import Compiler
    >>> compiler = Compiler(html="<!DOCTYPE html>")
    >>> compiler("br;")
    '<!DOCTYPE html><br>'

Command line:
    pseudoscss index.html.scss index.html
"""

from __future__ import annotations

from pathlib import Path

from pseudoscss.config import (
    CompileConfig,
    compile_config_context,
    get_compile_config,
    reset_compile_config,
    set_compile_config,
)
from pseudoscss.errors import LexError, ParseError, PseudoScssError, UnbalancedInputError
from pseudoscss.frames import (
    AttributeFrame,
    AttributeStep,
    ContentFrame,
    ContentStep,
    EmptyFrame,
    Frame,
    FrameStack,
    SelectorFrame,
)
from pseudoscss.lexer import Lexer
from pseudoscss.location import SourceLocation
from pseudoscss.parser import Parser
from pseudoscss.render import render_close_tag, render_open_tag
from pseudoscss.tokens import Token, TokenType

__version__ = "0.1.0"


def compile(
    source: str,
    *,
    html: str = "",
    trace: bool = False,
    strict: bool = False,
    source_file: str | None = None,
) -> str:
    """Compile pseudoscss source text to an HTML string.

    Args:
        source: pseudoscss source text
        html: Seed for the output (e.g. ``"<!DOCTYPE html>"``)
        trace: Log each (token, frame) pair at DEBUG level; no effect on output
        strict: Raise UnbalancedInputError instead of silently truncating
            when input ends inside a raw block or an open scope
        source_file: Optional source file path for error messages

    Returns:
        The seed followed by the generated HTML

    Raises:
        LexError: Untokenizable input or an undecodable string literal
        ParseError: A token out of place

    Example:
        >>> compile(".klass {}")
        '<div class="klass"></div>'
    """
    config = CompileConfig(html=html, trace=trace, strict=strict)
    with compile_config_context(config):
        return Parser(source, source_file=source_file).parse()


class Compiler:
    """Reusable compiler bound to one configuration.

    Usage:
        >>> compiler = Compiler(strict=True)
        >>> compiler("hr;")
        '<hr>'

    Thread Safety:
        Config is immutable and applied via ContextVar per call. Safe to
        share one Compiler across threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        html: str = "",
        trace: bool = False,
        strict: bool = False,
        config: CompileConfig | None = None,
    ) -> None:
        """Initialize the compiler.

        Args:
            html: Seed for the output
            trace: Log each (token, frame) pair at DEBUG level
            strict: Report unbalanced input instead of truncating
            config: Prebuilt config; overrides the keyword options
        """
        self._config = config or CompileConfig(html=html, trace=trace, strict=strict)

    @property
    def config(self) -> CompileConfig:
        """The compiler's configuration."""
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Compile source text with this compiler's configuration."""
        with compile_config_context(self._config):
            return Parser(source, source_file=source_file).parse()

    def compile_file(self, path: str | Path) -> str:
        """Read a UTF-8 source file and compile it.

        The path is used as source_file in error messages.
        """
        source = Path(path).read_text(encoding="utf-8")
        return self(source, source_file=str(path))


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "compile",
    "Compiler",
    # Errors
    "PseudoScssError",
    "LexError",
    "ParseError",
    "UnbalancedInputError",
    # Parser components
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "SourceLocation",
    # Frames
    "Frame",
    "FrameStack",
    "EmptyFrame",
    "SelectorFrame",
    "AttributeFrame",
    "AttributeStep",
    "ContentFrame",
    "ContentStep",
    # Rendering
    "render_open_tag",
    "render_close_tag",
    # Configuration (ContextVar-based)
    "CompileConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
]
