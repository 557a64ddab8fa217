"""Command-line entry point for rendering hierarchy scripts."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from doxtree.config import DOXTREE_EXPAND_DEPTH, DOXTREE_LOG_LEVEL, DOXTREE_VARIABLE_NAME
from doxtree.exceptions import DoxtreeError
from doxtree.html_renderer import render_html
from doxtree.pipeline import RenderOptions, render_hierarchy
from doxtree.renderer import render_json, render_text
from doxtree.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

FORMATS = ("html", "page", "text", "json", "summary")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="doxtree",
        description="Render a Doxygen class hierarchy as a collapsible tree.",
    )
    parser.add_argument("location", help="Path or URL of hierarchy.js (or a JSON file)")
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--expand-depth",
        type=int,
        default=DOXTREE_EXPAND_DEPTH,
        help=f"Levels expanded initially (default: {DOXTREE_EXPAND_DEPTH})",
    )
    filters = parser.add_mutually_exclusive_group()
    filters.add_argument("--include", nargs="+", metavar="LABEL", help="Keep only these classes and their subtrees")
    filters.add_argument("--exclude", nargs="+", metavar="LABEL", help="Drop these classes and their subtrees")
    parser.add_argument("--docs-dir", type=Path, help="Check links against this documentation directory")
    parser.add_argument(
        "--validate-links",
        action="store_true",
        help="Check links against the directory of the hierarchy file",
    )
    parser.add_argument(
        "--variable",
        default=DOXTREE_VARIABLE_NAME,
        help=f"Variable holding the hierarchy (default: {DOXTREE_VARIABLE_NAME})",
    )
    parser.add_argument("--title", help="Page title for HTML output")
    parser.add_argument("--output", "-o", type=Path, help="Write output to a file instead of stdout")
    parser.add_argument("--log-level", default=DOXTREE_LOG_LEVEL, help=f"Log level (default: {DOXTREE_LOG_LEVEL})")
    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> RenderOptions:
    options = RenderOptions(
        expand_depth=args.expand_depth,
        filter_mode="include" if args.include else "exclude",
        labels=list(args.include or args.exclude or []),
        docs_dir=args.docs_dir,
        validate_links=args.validate_links,
        variable=args.variable,
    )
    if args.title:
        options.title = args.title
    return options


def main(argv: list[str] | None = None) -> int:
    """Render the hierarchy and print or write it."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        document, tree, _ = asyncio.run(render_hierarchy(args.location, build_options(args)))
    except DoxtreeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.format == "html":
        output = render_html(tree)
    elif args.format == "page":
        output = document.html
    elif args.format == "json":
        output = render_json(tree)
    elif args.format == "summary":
        output = document.summary + "\n\n" + document.tree_text
    else:
        output = render_text(tree)

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info("Wrote output", extra={"path": str(args.output), "format": args.format})
    else:
        print(output)
    return 0
