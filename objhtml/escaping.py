"""Escaping modes for text content and attribute values."""

from __future__ import annotations

import html
from enum import Enum


class EscapeMode(str, Enum):
    """How quotes are treated when escaping.

    ``compat`` escapes double quotes only, ``quotes`` escapes both kinds,
    ``noquotes`` leaves quotes alone and ``none`` disables escaping.
    """

    COMPAT = "compat"
    QUOTES = "quotes"
    NOQUOTES = "noquotes"
    NONE = "none"


class Escaper:
    """Escape and unescape text according to an :class:`EscapeMode`."""

    def __init__(self, mode: EscapeMode = EscapeMode.COMPAT) -> None:
        self.mode = EscapeMode(mode)

    def escape(self, text: str) -> str:
        if self.mode is EscapeMode.NONE:
            return text
        escaped = html.escape(text, quote=False)
        if self.mode is EscapeMode.NOQUOTES:
            return escaped
        escaped = escaped.replace('"', "&quot;")
        if self.mode is EscapeMode.QUOTES:
            escaped = escaped.replace("'", "&#039;")
        return escaped

    def unescape(self, text: str) -> str:
        if self.mode is EscapeMode.NONE:
            return text
        return html.unescape(text)

    def __repr__(self) -> str:
        return f"Escaper(mode={self.mode.value!r})"


__all__ = ["EscapeMode", "Escaper"]
