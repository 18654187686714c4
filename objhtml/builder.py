"""Recursive conversion of Python values into HTML markup."""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from .errors import RecursionLimitError
from .escaping import Escaper
from .events import TagEvent, TagHandler
from .hooks import HookRegistry
from .io_utils import decode_json
from .models import BuilderOptions
from .props import get_prop, is_record, iter_fields
from .tags import text_of


class ValueKind(Enum):
    """Shape of a value as seen by the renderer."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"
    INSTANT = "instant"
    CALLBACK = "callback"
    SCALAR = "scalar"


def classify(value: Any) -> ValueKind:
    """Classify ``value``; checks run in the order of the enum members."""

    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if is_record(value):
        return ValueKind.MAPPING
    if isinstance(value, (date, time)):
        return ValueKind.INSTANT
    if callable(value) and not isinstance(value, type):
        return ValueKind.CALLBACK
    return ValueKind.SCALAR


def _isoformat(value: Union[date, time]) -> str:
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    return value.isoformat()


def _tag_name(value: Any) -> Optional[str]:
    return None if value is None else str(value)


OptionsLike = Union[BuilderOptions, Mapping[str, Any], None]


class ObjectHtmlBuilder:
    """Render dicts, lists, records and scalars as nested HTML tags.

    Field names become tag names. Four reserved fields change that:
    ``_tag`` and ``_attrs`` set the tag and attributes of a list item,
    ``_content`` splices nested content into the current tag and ``_html``
    inserts a verbatim fragment. Other fields starting with ``_`` are
    skipped.
    """

    def __init__(self, options: OptionsLike = None) -> None:
        if isinstance(options, BuilderOptions):
            self.options = options
        else:
            self.options = BuilderOptions.from_mapping(options)
        self.escaper = Escaper(self.options.escape_mode)
        self.hooks = HookRegistry()

    # hook registration

    def register_before_hook(self, tag_name: str, handler: TagHandler) -> None:
        """Run ``handler`` before ``tag_name`` is built; it may set ``evt.cancel``."""
        self.hooks.register_before(tag_name, handler)

    def register_hook(self, tag_name: str, handler: TagHandler) -> None:
        """Build ``tag_name`` with ``handler`` instead of the default constructor."""
        self.hooks.register(tag_name, handler)

    def unregister_before_hook(self, tag_name: str) -> None:
        self.hooks.unregister_before(tag_name)

    def unregister_hook(self, tag_name: str) -> None:
        self.hooks.unregister(tag_name)

    # escaping

    def escape(self, text: str) -> str:
        return self.escaper.escape(text)

    def unescape(self, text: str) -> str:
        return self.escaper.unescape(text)

    # rendering

    def to_html(self, value: Any, tag_name: Optional[str] = "div", attrs: Any = None) -> str:
        """Convert ``value`` (or JSON text) to markup wrapped in ``tag_name``."""

        if isinstance(value, (str, bytes, bytearray)):
            value = decode_json(value)
        elif value is None:
            value = ""
        return self.make_html(tag_name, value, {} if attrs is None else attrs, 0).strip()

    def indent_for(self, level: int) -> str:
        if not self.options.indent:
            return ""
        return "\n" + self.options.indent * level

    def make_html(
        self,
        tag_name: Optional[str],
        value: Any,
        attrs: Any = None,
        level: int = 0,
        depth: int = 0,
    ) -> str:
        """Render ``value`` at ``level``; ``depth`` counts recursive calls."""

        if depth > self.options.max_depth:
            raise RecursionLimitError(depth, self.options.max_depth)

        indent = self.indent_for(level)
        # Internal markers never become tags, except the verbatim fragment.
        if tag_name is not None and tag_name.startswith("_") and tag_name != "_html":
            tag_name = None

        kind = classify(value)
        if kind is ValueKind.SEQUENCE:
            parts: List[str] = []
            for item in value:
                if classify(item) is ValueKind.SCALAR:
                    continue
                parts.append(
                    self.make_html(
                        _tag_name(get_prop(item, "_tag")),
                        item,
                        get_prop(item, "_attrs", {}),
                        level,
                        depth + 1,
                    )
                )

            if tag_name is not None:
                return self.make_tag(value, tag_name, "".join(parts), attrs, level)

            content = "".join(parts).strip()
            if len(parts) > 1:
                indent += self.options.indent
            return indent + content

        if kind is ValueKind.MAPPING:
            parts = []
            for key, item in iter_fields(value):
                if not key.startswith("_"):
                    parts.append(
                        self.make_html(key, item, get_prop(item, "_attrs", {}), level + 1, depth + 1)
                    )
                elif key == "_html":
                    parts.append(self.make_tag(value, key, item, attrs, level + 1))
                elif key == "_content":
                    parts.append(
                        self.make_html(None, item, get_prop(item, "_attrs", {}), level, depth + 1)
                    )

            if tag_name is not None:
                return self.make_tag(value, tag_name, "".join(parts), attrs, level)
            return "".join(parts)

        if kind is ValueKind.INSTANT:
            value = _isoformat(value)
        elif kind is ValueKind.CALLBACK:
            return self.make_tag(value, tag_name, value, attrs, level)

        content = self.make_tag(value, tag_name, self.escape(text_of(value)), attrs, level).strip()
        if tag_name is None:
            return content
        return indent + content

    def make_tag(
        self,
        subject: Any,
        tag_name: Optional[str],
        content: Any,
        attrs: Any,
        level: int,
    ) -> str:
        """Run the hook pipeline for one tag and return its markup."""

        evt = TagEvent(
            builder=self,
            subject=subject,
            tag=tag_name,
            content=content,
            attrs=attrs,
            level=level,
            indent=self.indent_for(level),
        )

        before = self.hooks.before_hook(tag_name)
        if before is not None:
            before(evt)

        if not evt.cancel:
            if classify(content) is ValueKind.CALLBACK:
                result = content(evt)
                if isinstance(result, str):
                    evt.rst = result
            else:
                self.hooks.hook(tag_name)(evt)

        return evt.rst


def to_html(
    value: Any,
    tag_name: Optional[str] = "div",
    attrs: Any = None,
    **options: Any,
) -> str:
    """Render ``value`` with a throwaway builder configured by ``options``."""

    return ObjectHtmlBuilder(options).to_html(value, tag_name, attrs)


__all__ = ["ObjectHtmlBuilder", "ValueKind", "classify", "to_html"]
