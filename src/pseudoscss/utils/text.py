"""Text processing utilities for pseudoscss.

Provides the literal-handling helpers used when the parser materializes
text: HTML escaping, multiline literal dedenting, and quoted literal decoding.

Example:
    >>> from pseudoscss.utils.text import escape_html, dedent_multiline
    >>> escape_html('a < "b"')
    'a &lt; &quot;b&quot;'
    >>> dedent_multiline('\"\"\"\\n  hello\\n  world\\n\"\"\"')
    'hello world'
"""

from __future__ import annotations

import json
import re

_ESCAPE_MAP = {"<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;"}
_ESCAPE_RE = re.compile(r'[<>&"]')

# First line break inside a multiline literal and the indent that follows it
_FIRST_INDENT_RE = re.compile(r"\n([ \t]*)")

# Backslash escape or a bare double quote inside a single-quoted literal
_SINGLE_QUOTED_RE = re.compile(r'\\(.)|"', re.DOTALL)


def escape_html(text: str) -> str:
    """Escape the four HTML-significant characters.

    Converts special characters to named entity references:
    - < becomes &lt;
    - > becomes &gt;
    - & becomes &amp;
    - " becomes &quot;

    No other characters are altered (single quotes pass through).

    Args:
        text: Text to escape

    Returns:
        Escaped text safe for element content and double-quoted attributes

    Examples:
        >>> escape_html("Tom & Jerry's <show>")
        "Tom &amp; Jerry's &lt;show&gt;"
    """
    if not text:
        return ""
    return _ESCAPE_RE.sub(lambda m: _ESCAPE_MAP[m.group(0)], text)


def dedent_multiline(literal: str) -> str:
    """Collapse a triple-quoted literal into single-spaced prose.

    The indent width is taken from the first line break inside the literal.
    Every later "trailing whitespace, newline, up to that many spaces/tabs"
    run becomes one space, then the result is stripped.

    Args:
        literal: The full token text, including the ``\"\"\"`` delimiters

    Returns:
        The dedented, joined text (escape sequences are left as written)
    """
    contents = literal[3:-3]
    first_indent = _FIRST_INDENT_RE.search(contents)
    width = len(first_indent.group(1)) if first_indent else 0
    joined = re.sub(rf"\s*\n[ \t]{{0,{width}}}", " ", contents)
    return joined.strip()


def decode_string(literal: str) -> str:
    """Decode a quoted string literal using JSON string escape rules.

    Double-quoted literals are decoded as-is. Single-quoted literals accept
    ``\\'`` and bare ``"`` in addition, and are otherwise held to the same
    grammar.

    Args:
        literal: The full token text, including its quotes

    Returns:
        The decoded string

    Raises:
        ValueError: If the literal contains an invalid escape sequence or a
            raw control character
    """
    if literal.startswith("'"):
        literal = '"' + _SINGLE_QUOTED_RE.sub(_requote, literal[1:-1]) + '"'
    return json.loads(literal)


def _requote(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if escaped is None:
        return '\\"'
    if escaped == "'":
        return "'"
    return match.group(0)
