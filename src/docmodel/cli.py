#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/cli.py
"""Command-line interface for docmodel.

All commands read a document serialized as JSON (see
:mod:`docmodel.serialization`)::

    docmodel toc report.json --rich
    docmodel text report.json
    docmodel refs report.json -o report.refs.json
    docmodel collect links report.json

Exit codes: 0 on success, 1 on a docmodel error (bad input, config or
strict-mode failure), 2 on invalid arguments.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable
from rich.tree import Tree

from docmodel import __version__
from docmodel.collectors import collect_figures, collect_tables, collect_web_links
from docmodel.config import load_config_with_priority, options_from_config
from docmodel.constants import CONFIG_ENV_VAR, DEFAULT_LOG_LEVEL, TOC_INDENT
from docmodel.exceptions import DocModelError
from docmodel.logging_utils import configure_logging
from docmodel.nodes import Document, OrderedList
from docmodel.references import assign_unique_references
from docmodel.serialization import document_to_json, json_to_document
from docmodel.toc import build_toc
from docmodel.utils import collect_all_text
from docmodel.validation import validate_shape

logger = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", help="Document serialized as JSON")
    parser.add_argument("--config", help=f"Configuration file (overrides ${CONFIG_ENV_VAR} and discovery)")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging (equivalent to --log-level DEBUG)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL}). Overrides --verbose if both are specified.",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--rich", action="store_true", help="Use rich terminal output")


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser with one subcommand per operation

    """
    parser = argparse.ArgumentParser(prog="docmodel", description="Query and transform document trees.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    toc_parser = subparsers.add_parser("toc", help="Print the table of contents")
    _add_common_arguments(toc_parser)

    text_parser = subparsers.add_parser("text", help="Print all text of the document")
    _add_common_arguments(text_parser)

    refs_parser = subparsers.add_parser("refs", help="Assign unique section references")
    _add_common_arguments(refs_parser)
    refs_parser.add_argument("-o", "--output", help="Write the updated document to this file")

    collect_parser = subparsers.add_parser("collect", help="List figures, tables or web links")
    collect_parser.add_argument("kind", choices=["figures", "tables", "links"], help="Kind of node to collect")
    _add_common_arguments(collect_parser)

    return parser


def _load_document(path: str) -> Document:
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocModelError(f"Cannot read {path}: {e}", original_error=e) from e
    document = json_to_document(content)
    validate_shape(document)
    return document


def _print_toc_plain(toc: OrderedList, level: int = 0) -> None:
    for number, item in enumerate(toc.items, start=1):
        link, nested = item.children[0], item.children[1:]
        print(f"{TOC_INDENT * level}{number}. {collect_all_text(link)} (#{link.section_reference})")  # type: ignore[attr-defined]
        for child in nested:
            _print_toc_plain(child, level + 1)  # type: ignore[arg-type]


def _add_toc_branches(tree: Tree, toc: OrderedList) -> None:
    for item in toc.items:
        link, nested = item.children[0], item.children[1:]
        reference = link.section_reference  # type: ignore[attr-defined]
        branch = tree.add(f"{escape(collect_all_text(link))} [dim]#{escape(reference)}[/dim]")
        for child in nested:
            _add_toc_branches(branch, child)  # type: ignore[arg-type]


def _run_toc(args: argparse.Namespace, document: Document, options: tuple[Any, Any]) -> int:
    reference_options, toc_options = options
    assign_unique_references(document, reference_options)
    toc = build_toc(document, toc_options)

    if args.rich:
        tree = Tree(f"[bold]{escape(document.title or args.input)}[/bold]")
        _add_toc_branches(tree, toc)
        Console().print(tree)
    else:
        _print_toc_plain(toc)
    return 0


def _run_text(args: argparse.Namespace, document: Document, options: tuple[Any, Any]) -> int:
    print(collect_all_text(document))
    return 0


def _run_refs(args: argparse.Namespace, document: Document, options: tuple[Any, Any]) -> int:
    reference_options, _ = options
    assign_unique_references(document, reference_options)
    output = document_to_json(document, indent=2)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(output)
    return 0


def _run_collect(args: argparse.Namespace, document: Document, options: tuple[Any, Any]) -> int:
    rows: list[tuple[str, str]]
    if args.kind == "figures":
        columns = ("Source", "Caption")
        rows = [
            (fig.image.source, "".join(collect_all_text(node) for node in fig.description))
            for fig in collect_figures(document)
        ]
    elif args.kind == "tables":
        columns = ("Table", "Rows")
        rows = [(str(index), str(len(tbl.rows))) for index, tbl in enumerate(collect_tables(document), start=1)]
    else:
        columns = ("URI", "Label")
        rows = [(link.uri, collect_all_text(link)) for link in collect_web_links(document)]

    if args.rich:
        table = RichTable(title=f"{args.kind.capitalize()} ({len(rows)})")
        table.add_column(columns[0], style="cyan")
        table.add_column(columns[1], style="white")
        for row in rows:
            table.add_row(*(escape(value) for value in row))
        Console().print(table)
    else:
        for first, second in rows:
            print(f"{first}\t{second}")
    return 0


_COMMANDS: dict[str, Callable[[argparse.Namespace, Document, tuple[Any, Any]], int]] = {
    "toc": _run_toc,
    "text": _run_text,
    "refs": _run_refs,
    "collect": _run_collect,
}


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Parameters
    ----------
    argv : list of str, optional
        Arguments without the program name; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code

    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    log_level = args.log_level or ("DEBUG" if args.verbose else DEFAULT_LOG_LEVEL)
    configure_logging(log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        config = load_config_with_priority(args.config, os.environ.get(CONFIG_ENV_VAR))
        options = options_from_config(config)
        document = _load_document(args.input)
        return _COMMANDS[args.command](args, document, options)
    except DocModelError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


__all__ = [
    "create_parser",
    "main",
]
