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

"""`pytestimp compile`: translate wildcards into the regex pytestimp matches with."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pytestimp._internal.error_codes import error_code_for
from pytestimp.cli.helpers import add_command_parser, echo, register_argument, register_json_flag, render_data
from pytestimp.patterns import (
    PatternCompileError,
    compile_wildcard_pattern,
    compile_wildcard_patterns,
    split_wildcard_patterns,
)

if TYPE_CHECKING:
    import argparse
    from collections.abc import Sequence

    from pytestimp.cli.types import SubparserCollection


def register_compile_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the `pytestimp compile` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    compile_parser = add_command_parser(
        subparsers,
        "compile",
        help_text="Translate wildcard patterns into a regular expression",
        parents=parents,
    )
    register_argument(
        compile_parser,
        "patterns",
        nargs="+",
        help="Wildcard patterns, e.g. 'test_*' 'check_*'.",
    )
    register_argument(
        compile_parser,
        "--dashes",
        action="store_true",
        help="Treat dashes outside character classes as CamelCase word boundaries.",
    )
    register_json_flag(compile_parser)


def execute_compile(args: argparse.Namespace) -> int:
    """Execute the compile subcommand.

    Raises:
        SystemExit: If the translated patterns do not form a valid regex.
    """
    patterns = " ".join(args.patterns)
    try:
        regex = compile_wildcard_patterns(patterns, word_boundary_dashes=args.dashes)
    except PatternCompileError as exc:
        code = error_code_for(exc)
        message = f"({code}) {exc}"
        raise SystemExit(message) from exc
    if not args.json:
        echo(regex.pattern)
        return 0
    payload = {
        "patterns": patterns,
        "word_boundary_dashes": args.dashes,
        "fragments": [
            compile_wildcard_pattern(pattern, word_boundary_dashes=args.dashes)
            for pattern in split_wildcard_patterns(patterns)
        ],
        "regex": regex.pattern,
    }
    for line in render_data(payload, as_json=True):
        echo(line)
    return 0


__all__ = ["execute_compile", "register_compile_command"]
