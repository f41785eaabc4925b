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

"""Configuration models and errors for pytest name patterns.

``PytestConfig`` is the immutable view the rest of pytestimp works with: two
raw wildcard lists as read from disk, and the regexes derived from them on
first use. The pydantic model validates the ``[tool.pytest.ini_options]``
table of a ``pyproject.toml`` before its values reach ``PytestConfig``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from pytestimp._internal.exceptions import PytestImpValidationError
from pytestimp.core.model_types import ConfigFormat, NameKind
from pytestimp.patterns import compile_wildcard_patterns_or_nothing

from .constants import DEFAULT_PYTHON_CLASSES, DEFAULT_PYTHON_FUNCTIONS

if TYPE_CHECKING:
    from .sources import ConfigSource


class ConfigValidationError(PytestImpValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigFieldTypeError(ConfigValidationError):
    """Raised when a configuration field has an invalid type."""

    def __init__(self, field: str) -> None:
        """Initialize the exception with the field name that has an invalid type.

        Args:
            field: The name of the configuration field with an invalid type.
        """
        self.field = field
        super().__init__(f"{field} must be a string or a list of strings")


class ConfigParseError(ConfigValidationError):
    """Raised when a configuration document cannot be turned into a ``PytestConfig``."""

    def __init__(self, path: Path | None, error: Exception) -> None:
        """Initialize the exception with the document path and underlying error.

        Args:
            path: Path of the configuration file, or None for in-memory text.
            error: The underlying exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to parse {_describe(path)}: {error}")


class ConfigReadError(ConfigParseError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        super().__init__(path, error)
        self.args = (f"Unable to read {path}: {error}",)


class InvalidConfigFileError(ConfigParseError):
    """Raised when a configuration document is malformed or fails validation."""

    def __init__(self, path: Path | None, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The configuration file that failed validation, or None for text.
            error: The underlying parse or validation exception.
        """
        super().__init__(path, error)
        self.args = (f"Invalid pytest configuration in {_describe(path)}: {error}",)


def _describe(path: Path | None) -> str:
    return str(path) if path is not None else "<text>"


class PytestIniOptionsModel(BaseModel):
    """Pydantic model for the ``[tool.pytest.ini_options]`` table.

    Only the name pattern options are kept; every other pytest option is ignored.
    Values may be a single whitespace-separated string or a list of wildcards,
    which is joined with spaces.

    Attributes:
        python_classes: Raw wildcard list for test class names.
        python_functions: Raw wildcard list for test function names.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore", frozen=True)
    python_classes: str | None = None
    python_functions: str | None = None

    @field_validator("python_classes", "python_functions", mode="before")
    @classmethod
    def _join_patterns(cls, value: object, info: ValidationInfo) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return " ".join(value)
        raise ConfigFieldTypeError(info.field_name or "value")


@dataclass(frozen=True)
class PytestConfig:
    """Pytest name-pattern configuration read from a single file.

    Equality and hashing consider only the two raw wildcard lists, so configs
    read from files that differ elsewhere compare equal. Derived regexes are
    computed on first access and cached on the instance.

    Attributes:
        python_classes_raw: ``python_classes`` as configured, or None when unset.
        python_functions_raw: ``python_functions`` as configured, or None when unset.
        source: Parsed document the values were read from, if any.
    """

    python_classes_raw: str | None = None
    python_functions_raw: str | None = None
    source: ConfigSource | None = field(default=None, compare=False, repr=False)

    @classmethod
    def default(cls) -> PytestConfig:
        """Return the configuration pytest uses when nothing is configured."""
        return cls()

    @classmethod
    def from_source(cls, source: ConfigSource) -> PytestConfig:
        """Build a config from the raw values of a parsed INI or TOML document."""
        return cls(
            python_classes_raw=source.python_classes_raw,
            python_functions_raw=source.python_functions_raw,
            source=source,
        )

    @property
    def config_format(self) -> ConfigFormat | None:
        """Format of the backing document, or None for the default config."""
        return self.source.format if self.source is not None else None

    @property
    def path(self) -> Path | None:
        """Path of the backing document, when it was read from disk."""
        return self.source.path if self.source is not None else None

    @property
    def effective_python_classes(self) -> str:
        """Configured class wildcards, or ``Test*`` when unset."""
        if self.python_classes_raw is None:
            return DEFAULT_PYTHON_CLASSES
        return self.python_classes_raw

    @property
    def effective_python_functions(self) -> str:
        """Configured function wildcards, or ``test_*`` when unset."""
        if self.python_functions_raw is None:
            return DEFAULT_PYTHON_FUNCTIONS
        return self.python_functions_raw

    @cached_property
    def python_classes(self) -> re.Pattern[str]:
        """Regex selecting test class names (dashes act as word boundaries)."""
        return compile_wildcard_patterns_or_nothing(self.effective_python_classes, word_boundary_dashes=True)

    @cached_property
    def python_functions(self) -> re.Pattern[str]:
        """Regex selecting test function names."""
        return compile_wildcard_patterns_or_nothing(self.effective_python_functions, word_boundary_dashes=False)

    def is_test_class(self, name: str) -> bool:
        return self.python_classes.fullmatch(name) is not None

    def is_test_function(self, name: str) -> bool:
        return self.python_functions.fullmatch(name) is not None

    def selects(self, name: str, kind: NameKind) -> bool:
        """Return whether ``name`` is collected as a test of the given kind."""
        if kind is NameKind.CLASS:
            return self.is_test_class(name)
        return self.is_test_function(name)


__all__ = [
    "ConfigFieldTypeError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "PytestConfig",
    "PytestIniOptionsModel",
]
