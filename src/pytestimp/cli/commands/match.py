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

"""`pytestimp match`: check which names a pytest config collects as tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pytestimp.cli.commands.show import load_config_for_cli
from pytestimp.cli.helpers import (
    add_command_parser,
    echo,
    register_argument,
    register_config_option,
    register_json_flag,
    render_data,
)
from pytestimp.core.model_types import NameKind

if TYPE_CHECKING:
    import argparse
    from collections.abc import Sequence

    from pytestimp.cli.types import SubparserCollection


def register_match_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the `pytestimp match` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    match = add_command_parser(
        subparsers,
        "match",
        help_text="Report which names the pytest config selects",
        parents=parents,
    )
    register_argument(match, "names", nargs="+", help="Class or function names to check.")
    register_argument(
        match,
        "--kind",
        choices=[kind.value for kind in NameKind],
        default=NameKind.FUNCTION.value,
        help="Whether the names are test classes or test functions.",
    )
    register_config_option(match)
    register_json_flag(match)


def execute_match(args: argparse.Namespace) -> int:
    """Execute the match subcommand.

    Returns:
        ``0`` when every name is selected, ``1`` otherwise.
    """
    config = load_config_for_cli(args.config)
    kind = NameKind.from_str(args.kind)
    results = [{"name": name, "kind": kind, "selected": config.selects(name, kind)} for name in args.names]
    if args.json:
        for line in render_data(results, as_json=True):
            echo(line)
    else:
        for result in results:
            marker = "+" if result["selected"] else "-"
            echo(f"{marker} {result['name']}")
    return 0 if all(result["selected"] for result in results) else 1


__all__ = ["execute_match", "register_match_command"]
