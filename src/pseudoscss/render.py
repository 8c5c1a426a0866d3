"""Tag rendering for selector frames.

Pure functions of the selector payload; nothing here touches the frame
stack or the output buffer.
"""

from __future__ import annotations

from pseudoscss.frames import SelectorFrame

DEFAULT_TAG_NAME = "div"


def render_attribute(name: str, value: str | None) -> str:
    """Render one attribute with its leading space.

    A value of None renders a bare boolean attribute. Values arrive
    already escaped.
    """
    if value is None:
        return f" {name}"
    return f' {name}="{value}"'


def render_open_tag(selector: SelectorFrame) -> str:
    """Render the opening tag for a selector.

    Declared attributes come first in declaration order, then ``class``
    (joined with spaces), then ``id``.

    Example:
        >>> render_open_tag(SelectorFrame(classes=["a", "b"], id="main"))
        '<div class="a b" id="main">'
    """
    attributes = list(selector.attributes)
    if selector.classes:
        attributes.append(("class", " ".join(selector.classes)))
    if selector.id is not None:
        attributes.append(("id", selector.id))
    rendered = "".join(render_attribute(name, value) for name, value in attributes)
    return f"<{selector.tag_name or DEFAULT_TAG_NAME}{rendered}>"


def render_close_tag(selector: SelectorFrame) -> str:
    """Render the closing tag for a selector."""
    return f"</{selector.tag_name or DEFAULT_TAG_NAME}>"
