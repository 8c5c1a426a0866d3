"""Context frames and the frame stack for the pseudoscss parser.

Each frame is the parser's partially-built construct for one scope:

- EmptyFrame: freshly opened scope, kind not yet determined
- SelectorFrame: tag name, classes, id, and attributes of an element
- AttributeFrame: a bracketed [name] or [name=value] construct
- ContentFrame: a `content: "text";` statement

An EmptyFrame is promoted in place (the stack top is replaced) once the
first token decides what the scope is.

Usage:
    stack = FrameStack()           # Initializes with an EmptyFrame sentinel
    stack.replace_top(SelectorFrame(tag_name="p"))
    stack.push(EmptyFrame())       # `{` opens a nested scope
    stack.pop()                    # `}` closes it
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, TypeAlias


class AttributeStep(Enum):
    """Progress through a bracketed attribute."""

    NAME = auto()  # after [
    POST_NAME = auto()  # after the name; ] or = may follow
    VALUE = auto()  # after =
    END = auto()  # after the value; only ] may follow


class ContentStep(Enum):
    """Progress through a content statement."""

    AFTER_CONTENT = auto()  # after the `content` keyword
    VALUE = auto()  # after :
    END = auto()  # after the literal; only ; may follow


@dataclass(slots=True)
class EmptyFrame:
    """A scope whose kind is not known yet."""

    kind: ClassVar[str] = "empty"


@dataclass(slots=True)
class SelectorFrame:
    """An element under construction.

    Attributes:
        tag_name: Explicit tag name (rendered as "div" when unset)
        classes: Class names in declaration order
        id: Element id, set at most once
        attributes: (name, value) pairs in declaration order; a value of
            None is a boolean attribute
        saw_whitespace: Set when whitespace follows a selector part. Nothing
            reads it.

    """

    kind: ClassVar[str] = "selector"

    tag_name: str | None = None
    classes: list[str] = field(default_factory=list)
    id: str | None = None
    attributes: list[tuple[str, str | None]] = field(default_factory=list)
    saw_whitespace: bool = False


@dataclass(slots=True)
class AttributeFrame:
    """A bracketed attribute under construction."""

    kind: ClassVar[str] = "attribute"

    step: AttributeStep = AttributeStep.NAME
    name: str | None = None
    value: str | None = None


@dataclass(slots=True)
class ContentFrame:
    """A content statement. Its text goes straight to the output buffer."""

    kind: ClassVar[str] = "content"

    step: ContentStep = ContentStep.AFTER_CONTENT


Frame: TypeAlias = EmptyFrame | SelectorFrame | AttributeFrame | ContentFrame


@dataclass
class FrameStack:
    """Manages the stack of context frames during parsing.

    Invariant: the stack is never empty; stack[0] starts as an EmptyFrame
    sentinel and stack[-1] is the current parse target.

    """

    _stack: list[Frame] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Initialize with the bottom EmptyFrame."""
        self._stack = [EmptyFrame()]

    def push(self, frame: Frame) -> None:
        """Push a new frame onto the stack."""
        self._stack.append(frame)

    def pop(self) -> Frame:
        """Pop the current frame.

        Returns:
            The popped frame

        Raises:
            ValueError: If attempting to pop the bottom frame
        """
        if len(self._stack) <= 1:
            raise ValueError("Cannot pop bottom frame")
        return self._stack.pop()

    def replace_top(self, frame: Frame) -> Frame:
        """Replace the current frame in place (promotion or renewal).

        Returns:
            The new current frame
        """
        self._stack[-1] = frame
        return frame

    def current(self) -> Frame:
        """Get the current (innermost) frame."""
        return self._stack[-1]

    def depth(self) -> int:
        """Current nesting depth (bottom frame = 0)."""
        return len(self._stack) - 1

    def is_balanced(self) -> bool:
        """True when only an EmptyFrame remains, i.e. every scope was closed."""
        return len(self._stack) == 1 and isinstance(self._stack[0], EmptyFrame)

    def frames(self) -> tuple[Frame, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._stack)
