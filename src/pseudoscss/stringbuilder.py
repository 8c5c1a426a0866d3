"""StringBuilder for O(n) output accumulation.

The parser's output buffer. Appends to a list, joins once at the end:
O(n) total vs O(n²) for repeated string concatenation.

Thread Safety:
StringBuilder instances are local to each parse() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
        >>> sb = StringBuilder("<!DOCTYPE html>")
        >>> _ = sb.append("<p>").append("hi").append("</p>")
        >>> sb.build()
        '<!DOCTYPE html><p>hi</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self, seed: str = "") -> None:
        """Initialize the builder, optionally seeded with a prefix."""
        self._parts: list[str] = []
        self.append(seed)

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
