"""Mutable event record threaded through tag construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .builder import ObjectHtmlBuilder


@dataclass
class TagEvent:
    """State for building one tag.

    Before-hooks may change ``attrs``/``content`` or set ``cancel``; the
    handler that runs last writes the final markup into ``rst``.
    """

    builder: "ObjectHtmlBuilder"
    subject: Any
    tag: Optional[str]
    content: Any
    attrs: Any
    level: int
    indent: str
    cancel: bool = False
    rst: str = ""


TagHandler = Callable[[TagEvent], Any]


__all__ = ["TagEvent", "TagHandler"]
