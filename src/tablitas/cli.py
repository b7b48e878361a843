"""Command-line entry point.

Usage:
    tablitas encoding NAME [--workers N] [--profile] [--verbose]
    python -m tablitas encoding NAME

Writes the tables for NAME to stdout. Unknown or non-ASCII-compatible
encodings print a diagnostic to stderr and exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from contextlib import nullcontext

from tablitas.config import GeneratorConfig, generator_config_context
from tablitas.driver import write_tables
from tablitas.errors import TablitasError
from tablitas.profiling import profiled_scan
from tablitas.utils.logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tablitas",
        description="Generate lexer character classification tables",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    encoding = commands.add_parser(
        "encoding", help="Generate alpha/alnum/upper tables for an encoding"
    )
    encoding.add_argument("name", help="Encoding name, e.g. cp1252 or utf-8")
    encoding.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Scan range categories on N threads (UTF-8 family only)",
    )
    encoding.add_argument(
        "--profile", action="store_true", help="Print scan metrics to stderr"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    config = GeneratorConfig(workers=args.workers)
    try:
        profiling = profiled_scan() if args.profile else nullcontext()
        with generator_config_context(config), profiling as metrics:
            write_tables(args.name)
    except TablitasError as e:
        print(e, file=sys.stderr)
        return 1

    if metrics is not None:
        print(json.dumps(metrics.summary()), file=sys.stderr)
    return 0


__all__ = ["build_parser", "main"]
