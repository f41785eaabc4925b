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

"""`pytestimp show`: print the name patterns a pytest config file selects."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pytestimp._internal.error_codes import error_code_for
from pytestimp._internal.logging_utils import structured_extra
from pytestimp.cli.helpers import add_command_parser, echo, register_config_option, register_json_flag, render_data
from pytestimp.config import ConfigParseError, PytestConfig, load_config
from pytestimp.core.model_types import LogComponent

if TYPE_CHECKING:
    import argparse
    from collections.abc import Sequence

    from pytestimp.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("pytestimp.cli")


def register_show_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the `pytestimp show` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    show = add_command_parser(
        subparsers,
        "show",
        help_text="Show python_classes/python_functions and their regexes",
        parents=parents,
    )
    register_config_option(show)
    register_json_flag(show)


def load_config_for_cli(path: Path) -> PytestConfig:
    """Load ``path`` for a CLI command, falling back to pytest defaults.

    Raises:
        SystemExit: If the file exists but is malformed or unreadable.
    """
    resolved = path if path.is_absolute() else (Path.cwd() / path).resolve()
    try:
        config = load_config(resolved)
    except ConfigParseError as exc:
        code = error_code_for(exc)
        message = f"({code}) {exc}"
        raise SystemExit(message) from exc
    if config is None:
        logger.info(
            "No pytest config found at %s; using pytest defaults",
            resolved,
            extra=structured_extra(LogComponent.CLI, path=resolved),
        )
        return PytestConfig.default()
    return config


def describe_config(config: PytestConfig) -> dict[str, object]:
    """Return the printable summary of a config."""
    return {
        "path": str(config.path) if config.path is not None else None,
        "format": config.config_format,
        "python_classes": config.python_classes_raw,
        "python_functions": config.python_functions_raw,
        "effective_python_classes": config.effective_python_classes,
        "effective_python_functions": config.effective_python_functions,
        "classes_regex": config.python_classes.pattern,
        "functions_regex": config.python_functions.pattern,
    }


def execute_show(args: argparse.Namespace) -> int:
    config = load_config_for_cli(args.config)
    for line in render_data(describe_config(config), as_json=args.json):
        echo(line)
    return 0


__all__ = ["describe_config", "execute_show", "load_config_for_cli", "register_show_command"]
