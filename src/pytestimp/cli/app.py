# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point and orchestration for pytestimp commands."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from contextlib import suppress
from typing import Final

from pytestimp import __version__
from pytestimp._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, configure_logging
from pytestimp.cli.commands import compile as compile_command
from pytestimp.cli.commands import match as match_command
from pytestimp.cli.commands import show as show_command
from pytestimp.cli.helpers import echo, register_argument
from pytestimp.core.model_types import LogFormat

logger: logging.Logger = logging.getLogger("pytestimp.cli")

PYTESTIMP_VERSION: Final[str] = __version__

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the pytestimp command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"pytestimp {PYTESTIMP_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(args.log_format, args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    return handler(args)


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with global options and all subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Select logging output format (human-readable text or structured JSON).",
    )
    register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default="warning",
        help="Set verbosity of logged events.",
    )
    parser = argparse.ArgumentParser(
        prog="pytestimp",
        parents=[common],
        description="Translate pytest python_classes/python_functions wildcards into regular expressions.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the pytestimp version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    parents = [common]
    compile_command.register_compile_command(subparsers, parents=parents)
    show_command.register_show_command(subparsers, parents=parents)
    match_command.register_match_command(subparsers, parents=parents)
    return parser


def _initialize_logging(log_format: str, log_level: str) -> None:
    """Configure logging for the CLI; failures are ignored."""
    with suppress(Exception):  # best-effort logger init
        _ = configure_logging(LogFormat.from_str(log_format), log_level=log_level)


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "compile": compile_command.execute_compile,
        "match": match_command.execute_match,
        "show": show_command.execute_show,
    }


__all__ = ["main"]
