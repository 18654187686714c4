"""Exceptions raised by objhtml."""

from __future__ import annotations


class ObjectHtmlError(Exception):
    """Base class for objhtml errors."""


class DecodeError(ObjectHtmlError, ValueError):
    """Raised when JSON text handed to the builder cannot be decoded."""

    def __init__(self, msg: str, *, lineno: int | None = None, colno: int | None = None) -> None:
        super().__init__(msg)
        self.lineno = lineno
        self.colno = colno


class RecursionLimitError(ObjectHtmlError, RecursionError):
    """Raised when the input nests deeper than ``max_depth`` (usually a cycle)."""

    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(
            f"value nesting exceeded max_depth={max_depth} (depth {depth}); "
            "the input may contain a reference cycle"
        )
        self.depth = depth
        self.max_depth = max_depth


__all__ = ["DecodeError", "ObjectHtmlError", "RecursionLimitError"]
