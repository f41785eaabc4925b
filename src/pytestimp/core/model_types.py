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

"""Enumerations shared across pytestimp.

- Config file formats recognised by the loader
- Name kinds selected by a pytest configuration
- Log output formats and logging components
"""

from __future__ import annotations

from pytestimp.compat import StrEnum


class ConfigFormat(StrEnum):
    """On-disk formats a pytest configuration can be read from.

    Attributes:
        INI: ``pytest.ini`` / ``tox.ini`` style file with a ``[pytest]`` section.
        TOML: ``pyproject.toml`` with a ``[tool.pytest.ini_options]`` table.
    """

    INI = "ini"
    TOML = "toml"

    @classmethod
    def from_str(cls, raw: str) -> ConfigFormat:
        """Create a ConfigFormat enum from a string value.

        Args:
            raw: Format name or file suffix (a leading dot is ignored).

        Returns:
            ConfigFormat enum value.

        Raises:
            ValueError: If the string does not name a supported format.
        """
        value = raw.strip().lower().removeprefix(".")
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown config format '{raw}'"
            raise ValueError(msg) from exc


class NameKind(StrEnum):
    """Kinds of Python names a pytest configuration selects."""

    CLASS = "class"
    FUNCTION = "function"

    @classmethod
    def from_str(cls, raw: str) -> NameKind:
        """Create a NameKind enum from a string value.

        Raises:
            ValueError: If the string does not match any NameKind value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown name kind '{raw}'"
            raise ValueError(msg) from exc


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable system components.

    Attributes:
        PATTERNS: Wildcard pattern compilation.
        CONFIG: Config file parsing and loading.
        SERVICES: Per-project config services.
        CLI: Command-line interface component.
    """

    PATTERNS = "patterns"
    CONFIG = "config"
    SERVICES = "services"
    CLI = "cli"


__all__ = ["ConfigFormat", "LogComponent", "LogFormat", "NameKind"]
