#!/usr/bin/env python3
"""
JSON Side-by-Side Diff

A CLI tool for recovering malformed JSON and rendering side-by-side
comparisons of two JSON documents from an externally computed delta.

Usage:
    python -m sidediff.main parse <file>                      Recover and pretty-print JSON
    python -m sidediff.main parse <file> --extract            Drill into a serialized payload field
    python -m sidediff.main render <left> <right> <delta>     Show both sides in the terminal
    python -m sidediff.main render <left> <right> <delta> -f json
    python -m sidediff.main view <left> <right> <delta>       Open the interactive viewer

Input files may hold plain JSON, a bare "key": value fragment, or JSON that
was escaped one extra time. Use "-" to read standard input.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any

from rich.console import Console

from sidediff.logging_config import get_logger, setup_logging
from sidediff.parsing import ParseResult, extract_inner, format_json, parse
from sidediff.render import DepthExceededError, RenderOptions, render
from sidediff.render.side_by_side import MAX_RENDER_DEPTH
from sidediff.render.terminal import side_by_side_table

logger = get_logger("sidediff.main")

STDIN_NAME = "-"


def fail(message: str) -> None:
    """Print an error message to stderr and exit with status 1."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def read_text(path: str) -> str:
    """Read a whole input file, or standard input for "-"."""
    if path != STDIN_NAME and not os.path.exists(path):
        fail(f"File not found: {path}")

    try:
        if path == STDIN_NAME:
            return sys.stdin.read()
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        fail(f"{path}: not valid UTF-8 text ({e.reason} at byte {e.start})")
    except OSError as e:
        fail(f"Cannot read {path}: {e.strerror or e}")


def load_document(path: str, extract: bool = False) -> Any:
    """Read and recover a JSON document, exiting on failure.

    Args:
        path: Input file path ("-" for stdin).
        extract: Whether to drill into a serialized payload field.

    Returns:
        The recovered JSON value.
    """
    text = read_text(path)
    result: ParseResult = extract_inner(text) if extract else parse(text)
    if not result.ok:
        fail(f"{path}: {result.error}")

    logger.debug("Loaded %s via %s", path, result.strategy.value)
    return result.value


def build_options(args: argparse.Namespace) -> RenderOptions:
    """Build RenderOptions from command line flags, exiting on bad values."""
    try:
        return RenderOptions(indent=args.indent, max_depth=args.max_depth)
    except ValueError as e:
        fail(str(e))


def cmd_parse(args: argparse.Namespace) -> None:
    """Recover a JSON document and print it pretty-printed."""
    value = load_document(args.file, args.extract)
    print(format_json(value, indent=args.indent))


def _render_inputs(args: argparse.Namespace):
    """Load both documents and the delta, and render them."""
    options = build_options(args)
    left = load_document(args.left, args.extract)
    right = load_document(args.right, args.extract)
    delta = load_document(args.delta)

    try:
        return render(left, right, delta, options), options
    except DepthExceededError as e:
        fail(str(e))


def cmd_render(args: argparse.Namespace) -> None:
    """Render a comparison to the terminal or as JSON."""
    result, options = _render_inputs(args)

    if args.output_format == "json":
        print(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))
        return

    console = Console()
    console.print(side_by_side_table(result, args.left_title, args.right_title, options))


def cmd_view(args: argparse.Namespace) -> None:
    """Open the interactive side-by-side viewer."""
    # Import here so the other commands do not load textual
    from sidediff.tui.app import SideBySideApp

    result, options = _render_inputs(args)
    SideBySideApp(result, args.left_title, args.right_title, options).run()


def add_render_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by the render and view commands."""
    parser.add_argument('left', help='Old (left) JSON document')
    parser.add_argument('right', help='New (right) JSON document')
    parser.add_argument('delta', help='Delta file produced by the diff component')
    parser.add_argument('--extract', action='store_true', help='Drill into serialized payload fields of both documents')
    parser.add_argument('--indent', type=int, default=2, help='Spaces per nesting level (default: 2)')
    parser.add_argument(
        '--max-depth',
        type=int,
        default=MAX_RENDER_DEPTH,
        help=f'Maximum nesting depth (default: {MAX_RENDER_DEPTH})'
    )
    parser.add_argument('--left-title', default='Left', help='Header of the left column')
    parser.add_argument('--right-title', default='Right', help='Header of the right column')


def main():
    parser = argparse.ArgumentParser(
        description="JSON Side-by-Side Diff - recover JSON and render comparisons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Parse command
    parse_parser = subparsers.add_parser('parse', help='Recover and pretty-print a JSON document')
    parse_parser.add_argument('file', help='Input file path ("-" for stdin)')
    parse_parser.add_argument('--extract', action='store_true', help='Drill into a serialized payload field')
    parse_parser.add_argument('--indent', type=int, default=2, help='Spaces per nesting level (default: 2)')
    parse_parser.set_defaults(func=cmd_parse)

    # Render command
    render_parser = subparsers.add_parser('render', help='Render a side-by-side comparison')
    add_render_arguments(render_parser)
    render_parser.add_argument(
        '-f', '--output-format',
        choices=['terminal', 'json'],
        default='terminal',
        help='Output format (default: terminal)'
    )
    render_parser.set_defaults(func=cmd_render)

    # View command
    view_parser = subparsers.add_parser('view', help='Open the interactive side-by-side viewer')
    add_render_arguments(view_parser)
    view_parser.set_defaults(func=cmd_view)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging("DEBUG" if args.verbose else None)
    args.func(args)


if __name__ == "__main__":
    main()
