"""Stack-machine parser that generates HTML while it parses.

Consumes the Lexer's token stream once, left to right. Each token is
dispatched on its type; the handler inspects the current frame (and its
step) and either applies the transition or raises ParseError. Markup is
appended to the output as soon as it is known: literal text when a content
string arrives, opening tags at `{` and `;`, closing tags at `}`.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
compile. Configuration is read from ContextVar (thread-local).

"""

from __future__ import annotations

from typing import ClassVar

from pseudoscss.config import CompileConfig, get_compile_config
from pseudoscss.errors import LexError, ParseError, UnbalancedInputError
from pseudoscss.frames import (
    AttributeFrame,
    AttributeStep,
    ContentFrame,
    ContentStep,
    EmptyFrame,
    FrameStack,
    SelectorFrame,
)
from pseudoscss.lexer import Lexer
from pseudoscss.render import render_close_tag, render_open_tag
from pseudoscss.stringbuilder import StringBuilder
from pseudoscss.tokens import Token, TokenType
from pseudoscss.utils.logger import get_logger
from pseudoscss.utils.text import decode_string, dedent_multiline, escape_html

logger = get_logger(__name__)

CONTENT_KEYWORD = "content"


class Parser:
    """Stack-machine parser/generator for pseudoscss.

    Usage:
        >>> Parser('p { content: "hi"; }').parse()
        '<p>hi</p>'

    The output buffer is seeded with the active config's ``html`` prefix.
    At end of input the buffer is returned as is; unclosed frames are
    dropped unless the config is strict.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_stack",
        "_output",
        "_last_token",
    )

    _TOKEN_HANDLERS: ClassVar[dict[TokenType, str]] = {
        TokenType.COMMENT: "_on_comment",
        TokenType.WHITESPACE: "_on_whitespace",
        TokenType.TAG_NAME: "_on_tag_name",
        TokenType.CLASS_NAME: "_on_class_name",
        TokenType.ID_NAME: "_on_id_name",
        TokenType.LBRACKET: "_on_lbracket",
        TokenType.RBRACKET: "_on_rbracket",
        TokenType.EQUAL: "_on_equal",
        TokenType.STRING: "_on_string",
        TokenType.MULTILINE_STRING: "_on_string",
        TokenType.LCURLY: "_on_lcurly",
        TokenType.RCURLY: "_on_rcurly",
        TokenType.SEMICOLON: "_on_semicolon",
        TokenType.COLON: "_on_colon",
        TokenType.RAW: "_on_raw",
        TokenType.LPAREN: "_on_paren",
        TokenType.RPAREN: "_on_paren",
    }

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: pseudoscss source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._config: CompileConfig = get_compile_config()
        self._stack = FrameStack()
        self._output = StringBuilder(self._config.html)
        self._last_token: Token | None = None

    def parse(self) -> str:
        """Run the token stream through the state machine.

        Returns:
            The accumulated output, seed included

        Raises:
            LexError: Untokenizable input or an undecodable string literal
            ParseError: A token with no transition from the current frame
            UnbalancedInputError: In strict mode, input ended mid-construct
        """
        config = self._config
        lexer = Lexer(self._source, self._source_file, strict=config.strict)
        for token in lexer.tokenize():
            if config.trace:
                logger.debug("%r %r", token, self._stack.current())
            self._last_token = token
            getattr(self, self._TOKEN_HANDLERS[token.type])(token)

        if config.trace:
            logger.debug("final stack: %r", self._stack.frames())
        if config.strict and not self._stack.is_balanced():
            frame = self._stack.current()
            raise UnbalancedInputError(
                f"Input ended inside an unclosed {frame.kind} frame",
                token=self._last_token,
                frame=frame.kind,
                source_file=self._source_file,
            )
        return self._output.build()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _error(self, message: str, token: Token) -> ParseError:
        return ParseError(
            f"{message} (got {token.type.name} {token.value!r})",
            token=token,
            frame=self._stack.current().kind,
            source_file=self._source_file,
        )

    def _selector(self, token: Token, what: str) -> SelectorFrame:
        """Return the current selector frame, promoting an empty one."""
        frame = self._stack.current()
        if isinstance(frame, EmptyFrame):
            return self._stack.replace_top(SelectorFrame())
        if isinstance(frame, SelectorFrame):
            return frame
        raise self._error(f"{what} should only be in a selector", token)

    def _finish_statement(self) -> None:
        """Replace the finished frame with a fresh scope for the next sibling."""
        self._stack.replace_top(EmptyFrame())

    # =========================================================================
    # Token handlers
    # =========================================================================

    def _on_comment(self, token: Token) -> None:
        pass

    def _on_whitespace(self, token: Token) -> None:
        frame = self._stack.current()
        if isinstance(frame, SelectorFrame):
            frame.saw_whitespace = True

    def _on_tag_name(self, token: Token) -> None:
        frame = self._stack.current()
        if isinstance(frame, EmptyFrame):
            if token.value == CONTENT_KEYWORD:
                self._stack.replace_top(ContentFrame())
                return
            frame = self._stack.replace_top(SelectorFrame())

        if isinstance(frame, SelectorFrame):
            if frame.tag_name is not None:
                raise self._error("Tag name already set", token)
            frame.tag_name = token.value
        elif isinstance(frame, AttributeFrame) and frame.step is AttributeStep.NAME:
            frame.name = token.value
            frame.step = AttributeStep.POST_NAME
        elif isinstance(frame, AttributeFrame) and frame.step is AttributeStep.VALUE:
            frame.value = token.value
            frame.step = AttributeStep.END
        else:
            raise self._error("Invalid tag name context", token)

    def _on_class_name(self, token: Token) -> None:
        self._selector(token, "Class name").classes.append(token.value[1:])

    def _on_id_name(self, token: Token) -> None:
        frame = self._selector(token, "ID")
        if frame.id is not None:
            raise self._error("ID already set", token)
        frame.id = token.value[1:]

    def _on_lbracket(self, token: Token) -> None:
        self._selector(token, "Left bracket")
        self._stack.push(AttributeFrame())

    def _on_equal(self, token: Token) -> None:
        frame = self._stack.current()
        if not isinstance(frame, AttributeFrame):
            raise self._error("Equal sign should only be in an attribute", token)
        if frame.step is not AttributeStep.POST_NAME:
            raise self._error("Equal sign must follow the attribute name", token)
        frame.step = AttributeStep.VALUE

    def _on_rbracket(self, token: Token) -> None:
        frame = self._stack.current()
        if not isinstance(frame, AttributeFrame):
            raise self._error("Right bracket should only close an attribute", token)
        if frame.step not in (AttributeStep.POST_NAME, AttributeStep.END):
            raise self._error("Right bracket must follow a name or value", token)
        self._stack.pop()
        parent = self._stack.current()
        if not isinstance(parent, SelectorFrame):
            raise self._error("Attribute must belong to a selector", token)
        parent.attributes.append((frame.name, frame.value))

    def _on_string(self, token: Token) -> None:
        if token.type is TokenType.MULTILINE_STRING:
            text = dedent_multiline(token.value)
        else:
            try:
                text = decode_string(token.value)
            except ValueError as e:
                raise LexError(
                    f"Invalid string literal: {e}",
                    remaining=token.value,
                    lineno=token.lineno,
                    col_offset=token.col,
                    source_file=self._source_file,
                ) from e
        escaped = escape_html(text)

        frame = self._stack.current()
        if isinstance(frame, AttributeFrame):
            if frame.step is not AttributeStep.VALUE:
                raise self._error("String must follow an equal sign", token)
            frame.value = escaped
            frame.step = AttributeStep.END
        elif isinstance(frame, ContentFrame):
            if frame.step is not ContentStep.VALUE:
                raise self._error("String must follow a colon", token)
            self._output.append(escaped)
            frame.step = ContentStep.END
        else:
            raise self._error("Invalid string context", token)

    def _on_lcurly(self, token: Token) -> None:
        frame = self._selector(token, "Left curly")
        self._output.append(render_open_tag(frame))
        self._stack.push(EmptyFrame())

    def _on_rcurly(self, token: Token) -> None:
        if self._stack.depth() == 0:
            raise self._error("Right curly has no matching left curly", token)
        self._stack.pop()
        frame = self._stack.current()
        if not isinstance(frame, SelectorFrame):
            raise self._error("Right curly's matching left curly must follow a selector", token)
        self._output.append(render_close_tag(frame))
        self._finish_statement()

    def _on_semicolon(self, token: Token) -> None:
        frame = self._stack.current()
        if isinstance(frame, SelectorFrame):
            self._output.append(render_open_tag(frame))
        elif isinstance(frame, ContentFrame):
            if frame.step is not ContentStep.END:
                raise self._error("Semicolon must follow the content string", token)
        else:
            raise self._error("Invalid semicolon context", token)
        self._finish_statement()

    def _on_colon(self, token: Token) -> None:
        frame = self._stack.current()
        if not isinstance(frame, ContentFrame):
            raise self._error("Colon should only be in a content statement", token)
        if frame.step is not ContentStep.AFTER_CONTENT:
            raise self._error("Colon must follow `content`", token)
        frame.step = ContentStep.VALUE

    def _on_raw(self, token: Token) -> None:
        if not isinstance(self._stack.current(), EmptyFrame):
            raise self._error("Raw block must start a statement", token)
        self._output.append(token.value)

    def _on_paren(self, token: Token) -> None:
        raise self._error("Parentheses are only allowed inside raw blocks", token)
