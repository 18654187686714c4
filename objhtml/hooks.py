"""Per-instance registry of tag construction hooks."""

from __future__ import annotations

from typing import Dict, Optional

from .events import TagHandler
from .tags import make_html_fragment, make_tag_default

WILDCARD = "*"


class HookRegistry:
    """Two independent tables: before-hooks and on-hooks, keyed by tag name.

    Lookups on the on-hook table fall back to the ``*`` entry. Replacing the
    wildcard replaces the default tag constructor for every unhooked tag.
    """

    def __init__(self) -> None:
        self._before: Dict[str, TagHandler] = {}
        self._on: Dict[str, TagHandler] = {
            WILDCARD: make_tag_default,
            "_html": make_html_fragment,
        }

    def register_before(self, tag_name: str, handler: TagHandler) -> None:
        self._before[tag_name] = handler

    def register(self, tag_name: str, handler: TagHandler) -> None:
        self._on[tag_name] = handler

    def unregister_before(self, tag_name: str) -> None:
        self._before.pop(tag_name, None)

    def unregister(self, tag_name: str) -> None:
        if tag_name == WILDCARD:
            raise ValueError("the wildcard hook can be replaced but not removed")
        self._on.pop(tag_name, None)

    def before_hook(self, tag_name: Optional[str]) -> Optional[TagHandler]:
        if tag_name is None:
            return None
        return self._before.get(tag_name)

    def hook(self, tag_name: Optional[str]) -> TagHandler:
        if tag_name is not None and tag_name in self._on:
            return self._on[tag_name]
        return self._on[WILDCARD]

    def __contains__(self, tag_name: object) -> bool:
        return tag_name in self._on or tag_name in self._before


__all__ = ["HookRegistry", "WILDCARD"]
