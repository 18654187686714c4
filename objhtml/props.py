"""Uniform field access over mappings and attribute-bag objects."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from datetime import date, time
from enum import Enum
from typing import Any, Iterator, Tuple

from pydantic import BaseModel


def is_record(value: Any) -> bool:
    """Return True when ``value`` exposes named fields (a "keyed mapping")."""

    if isinstance(value, (Mapping, BaseModel)):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if isinstance(value, (str, bytes, bytearray, list, tuple, date, time, Enum)):
        return False
    if isinstance(value, (type, types.ModuleType)) or callable(value):
        return False
    return hasattr(value, "__dict__")


def iter_fields(value: Any) -> Iterator[Tuple[str, Any]]:
    """Yield ``(name, value)`` pairs of a record in declaration order."""

    if isinstance(value, Mapping):
        for key, item in value.items():
            yield str(key), item
    elif isinstance(value, BaseModel):
        # Iterating a model yields declared fields followed by extras.
        for key, item in value:
            yield key, item
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        for field in dataclasses.fields(value):
            yield field.name, getattr(value, field.name)
    elif hasattr(value, "__dict__"):
        for key, item in vars(value).items():
            yield key, item


def get_prop(value: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping key or an object attribute.

    Missing fields and fields holding ``None`` both resolve to ``default``.
    """

    if isinstance(value, Mapping):
        found = value.get(name)
    elif value is None or isinstance(value, (str, bytes, int, float)):
        found = None
    else:
        found = getattr(value, name, None)
    return default if found is None else found


__all__ = ["get_prop", "is_record", "iter_fields"]
