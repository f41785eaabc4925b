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

"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from pytestimp._internal.utils import consume
from pytestimp.config import DEFAULT_CONFIG_FILENAME

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pytestimp.cli.types import SubparserCollection


class ArgumentRegistrar(Protocol):
    """Protocol matching ``ArgumentParser`` and argument groups for adding arguments."""

    def add_argument(
        self,
        *args: Any,
        **kwargs: Any,
    ) -> argparse.Action:
        """Expose ``ArgumentParser.add_argument`` so helpers can operate generically."""
        ...  # pragma: no cover


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle.

    Args:
        registrar: Parser or argument group on which to register the option.
        *args: Positional flags and option strings forwarded to ``add_argument``.
        **kwargs: Keyword options forwarded to ``add_argument``.
    """
    consume(registrar.add_argument(*args, **kwargs))


def add_command_parser(
    subparsers: SubparserCollection,
    name: str,
    *,
    help_text: str,
    parents: Sequence[argparse.ArgumentParser] | None,
) -> argparse.ArgumentParser:
    """Create a subcommand parser with the shared formatter and parent parsers."""
    return subparsers.add_parser(
        name,
        help=help_text,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )


def register_config_option(parser: argparse.ArgumentParser) -> None:
    """Register ``--config`` pointing at a ``pytest.ini`` or ``pyproject.toml`` file."""
    register_argument(
        parser,
        "-c",
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILENAME),
        help="pytest.ini or pyproject.toml to read python_classes/python_functions from.",
    )


def register_json_flag(parser: argparse.ArgumentParser) -> None:
    register_argument(
        parser,
        "--json",
        action="store_true",
        help="Emit machine-readable JSON instead of text.",
    )


__all__ = [
    "ArgumentRegistrar",
    "add_command_parser",
    "register_argument",
    "register_config_option",
    "register_json_flag",
]
