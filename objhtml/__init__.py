"""Render Python values and JSON documents as HTML markup."""

from .builder import ObjectHtmlBuilder, ValueKind, classify, to_html
from .errors import DecodeError, ObjectHtmlError, RecursionLimitError
from .escaping import EscapeMode, Escaper
from .events import TagEvent
from .hooks import HookRegistry
from .models import BuilderOptions, load_options
from .props import get_prop
from .tags import AUTOCLOSE_TAGS

__version__ = "0.1.0"

__all__ = [
    "AUTOCLOSE_TAGS",
    "BuilderOptions",
    "DecodeError",
    "EscapeMode",
    "Escaper",
    "HookRegistry",
    "ObjectHtmlBuilder",
    "ObjectHtmlError",
    "RecursionLimitError",
    "TagEvent",
    "ValueKind",
    "classify",
    "get_prop",
    "load_options",
    "to_html",
]
