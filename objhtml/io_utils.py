"""Utility helpers for JSON IO and logging."""

from __future__ import annotations

import json
import sys
from typing import Any, Union

from .errors import DecodeError


def decode_json(text: Union[str, bytes, bytearray]) -> Any:
    """Decode JSON text, raising :class:`DecodeError` on malformed input."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc}", lineno=exc.lineno, colno=exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise DecodeError(f"invalid JSON encoding: {exc}") from exc


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["decode_json", "warn"]
