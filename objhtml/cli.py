"""Command-line interface for objhtml."""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from . import __version__
from .builder import ObjectHtmlBuilder
from .errors import ObjectHtmlError
from .escaping import EscapeMode
from .io_utils import warn
from .models import BuilderOptions, load_options
from .util_fs import write_text


def _parse_attrs(pairs: List[str]) -> Dict[str, Any]:
    attrs: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise SystemExit(f"--attr expects KEY=VALUE, got {pair!r}")
        if key == "class" and key in attrs:
            attrs[key] = f"{attrs[key]} {value}"
        else:
            attrs[key] = value
    return attrs


def _resolve_options(args: argparse.Namespace) -> BuilderOptions:
    base: Dict[str, Any] = {}
    if args.config:
        base = load_options(Path(args.config)).model_dump()
    overrides = {
        "indent": args.indent,
        "escape_mode": args.escape_mode,
        "max_depth": args.max_depth,
    }
    base.update({key: value for key, value in overrides.items() if value is not None})
    return BuilderOptions.from_mapping(base)


def _read_source(source: Optional[str]) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _handle_render(args: argparse.Namespace) -> None:
    try:
        options = _resolve_options(args)
        source = _read_source(args.input)
        builder = ObjectHtmlBuilder(options)
        tag_name = None if args.no_tag else args.tag
        markup = builder.to_html(source, tag_name, _parse_attrs(args.attrs))
    except (ObjectHtmlError, ValidationError, ValueError) as exc:
        warn(f"objhtml: {exc}")
        raise SystemExit(1)

    if args.output:
        write_text(args.output, markup + "\n")
    else:
        print(markup)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objhtml",
        description="Render JSON documents as HTML markup",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"objhtml {__version__}",
        help="Show the objhtml version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a JSON document as HTML.",
        description="Decode JSON and render it as nested HTML tags.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        default=None,
        help="Path to the JSON input; reads stdin when omitted or '-'.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the rendered markup; prints to stdout when omitted.",
    )
    render_parser.add_argument(
        "--tag",
        default="div",
        help="Name of the outermost tag (default: div).",
    )
    render_parser.add_argument(
        "--no-tag",
        dest="no_tag",
        action="store_true",
        help="Emit the content without an outermost tag.",
    )
    render_parser.add_argument(
        "--attr",
        dest="attrs",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Attribute for the outermost tag; repeat for more.",
    )
    render_parser.add_argument(
        "--indent",
        default=None,
        help="Indent unit per nesting level (e.g. two spaces).",
    )
    render_parser.add_argument(
        "--escape-mode",
        dest="escape_mode",
        choices=[mode.value for mode in EscapeMode],
        default=None,
        help="Escaping applied to text and attribute values.",
    )
    render_parser.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum nesting depth before rendering aborts.",
    )
    render_parser.add_argument(
        "--config",
        default=None,
        help="YAML file with builder options; command-line flags take precedence.",
    )
    render_parser.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
