"""Default tag construction handlers and attribute serialization."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from .events import TagEvent
from .props import iter_fields

AUTOCLOSE_TAGS = frozenset(
    {
        "img",
        "br",
        "hr",
        "input",
        "area",
        "link",
        "meta",
        "param",
        "base",
        "col",
        "command",
        "keygen",
        "source",
    }
)


def text_of(value: Any) -> str:
    """Scalar to text: ``None`` is empty, booleans are lowercase words."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _attr_items(attrs: Any) -> Dict[str, Any]:
    if attrs is None:
        return {}
    if isinstance(attrs, Mapping):
        return {str(key): value for key, value in attrs.items()}
    return dict(iter_fields(attrs))


def _class_tokens(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        tokens = value.split(" ")
    elif isinstance(value, (list, tuple)):
        tokens = [text_of(item) for item in value]
    else:
        tokens = [text_of(value)]
    return list(dict.fromkeys(tokens))


def render_attrs(attrs: Any, escape: Callable[[str], str]) -> str:
    """Serialize attributes with sorted keys; ``class`` is de-duplicated."""

    items = _attr_items(attrs)
    parts: List[str] = []
    for key in sorted(items):
        value = items[key]
        if key == "class":
            parts.append(f' class="{" ".join(_class_tokens(value))}"')
        else:
            parts.append(f' {key}="{escape(text_of(value))}"')
    return "".join(parts)


def make_tag_default(evt: TagEvent) -> TagEvent:
    """Wildcard handler: build ``<tag attrs>content</tag>`` for the event."""

    indent = evt.indent
    content = text_of(evt.content)
    if evt.tag is None:
        evt.rst = content
        return evt

    node = [indent, "<", evt.tag, render_attrs(evt.attrs, evt.builder.escape)]
    trimmed = content.strip()
    if trimmed:
        # Text-only content closes on the same line.
        if not trimmed.endswith(">"):
            indent = ""
        node.extend([">", content, indent, "</", evt.tag, ">"])
    elif evt.tag in AUTOCLOSE_TAGS:
        node.append("/>")
    else:
        node.extend(["></", evt.tag, ">"])

    evt.rst = "".join(node)
    return evt


def make_html_fragment(evt: TagEvent) -> TagEvent:
    """Handler for ``_html``: splice verbatim content, indenting only markup."""

    indent = evt.indent
    content = text_of(evt.content)
    if not content.strip().startswith("<"):
        indent = ""
    evt.rst = indent + content
    return evt


__all__ = [
    "AUTOCLOSE_TAGS",
    "make_html_fragment",
    "make_tag_default",
    "render_attrs",
    "text_of",
]
