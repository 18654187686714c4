"""Pydantic models for builder configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .escaping import EscapeMode


class BuilderOptions(BaseModel):
    """Rendering options for an ObjectHtmlBuilder."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    indent: str = Field(
        "", description="Unit repeated once per nesting level; empty disables pretty-printing."
    )
    escape_mode: EscapeMode = Field(
        EscapeMode.COMPAT,
        alias="escapeMode",
        description="Escaping applied to text content and attribute values.",
    )
    max_depth: int = Field(
        256,
        alias="maxDepth",
        ge=1,
        description="Maximum value nesting before rendering aborts.",
    )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "BuilderOptions":
        """Validate options, ignoring keys whose value is ``None``."""

        if not data:
            return cls()
        return cls.model_validate({key: value for key, value in data.items() if value is not None})


def load_options(path: Path) -> BuilderOptions:
    """Load options from a YAML mapping; an empty file yields the defaults."""

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: options must be a YAML mapping, got {type(data).__name__}")
    return BuilderOptions.from_mapping(data)


__all__ = ["BuilderOptions", "load_options"]
