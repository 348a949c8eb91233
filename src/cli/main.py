"""Rllq CLI entry points.

This module maps argparse flags onto one query operation per invocation.
It owns console output and the exit-code mapping.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence

from cli.output import format_group_counts, write_lines
from core.config import RllqConfig
from core.constants import (
    EXIT_OK,
    EXIT_OTHER_ERROR,
    EXIT_REPORTED_ERROR,
    EXIT_USAGE,
    STDIN_SOURCE_NAME,
)
from core.errors import CliError, QueryFailedError, RllqConfigError
from core.logging_config import configure_logging, get_logger
from query.arguments import resolve_source_name
from query.group_by_label import group_by_label
from query.list_labels import list_labels
from query.order_by_label import order_by_label
from query.select_labels import select_labels

_LOGGER = get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports malformed flags with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = _ArgumentParser(
        prog="rllq",
        description="Query LTSV (labeled tab-separated values) files",
    )
    queries = parser.add_mutually_exclusive_group(required=True)
    queries.add_argument("-l", "--list", action="store_true", help="list LTSV labels")
    queries.add_argument(
        "-s",
        "--select",
        action="append",
        metavar="LABEL",
        help="select LABEL from each record (repeatable)",
    )
    queries.add_argument("-g", "--groupby", metavar="LABEL", help="count records by LABEL")
    queries.add_argument("-o", "--orderby", metavar="LABEL", help="sort records by LABEL")
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help=f"LTSV input file, or '{STDIN_SOURCE_NAME}' for standard input",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Rllq CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not arguments:
        parser.print_help()
        return EXIT_OK
    args = parser.parse_args(arguments)
    try:
        config = RllqConfig.from_env()
    except RllqConfigError as error:
        print(error, file=sys.stderr)
        return EXIT_OTHER_ERROR
    configure_logging(config.log_level)
    try:
        source_name = resolve_source_name(args.files)
        _run_query(args, source_name, config)
    except QueryFailedError as error:
        print(error, file=sys.stderr)
        return EXIT_OTHER_ERROR
    except CliError as error:
        print(error, file=sys.stderr)
        return EXIT_REPORTED_ERROR
    return EXIT_OK


def _run_query(args: argparse.Namespace, source_name: str, config: RllqConfig) -> None:
    """Dispatch the selected query and write its result to stdout.

    Args:
        args: Parsed CLI args.
        source_name: Single source file name or ``-``.
        config: Runtime configuration.

    Raises:
        CliError: If the query fails.
    """
    encoding = config.input_encoding
    _LOGGER.debug("query_started", source=source_name)
    if args.list:
        write_lines(list_labels(source_name, encoding), sys.stdout)
    elif args.select:
        write_lines(select_labels(source_name, args.select, encoding), sys.stdout)
    elif args.groupby is not None:
        counts = group_by_label(source_name, args.groupby, encoding)
        write_lines(format_group_counts(args.groupby, counts), sys.stdout)
    else:
        write_lines(order_by_label(source_name, args.orderby, encoding), sys.stdout)
