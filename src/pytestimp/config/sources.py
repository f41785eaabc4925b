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

"""Config sources: parsed ``pytest.ini`` and ``pyproject.toml`` documents.

Each source owns one parsed document and exposes the raw ``python_classes`` /
``python_functions`` values found at a fixed location inside it. A missing
section, table or key yields ``None`` so that ``PytestConfig`` can apply the
pytest defaults. ``ConfigSource`` is the closed union of the two variants.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, TypeAlias, cast

from iniconfig import IniConfig, ParseError
from pydantic import ValidationError

from pytestimp.compat import tomllib
from pytestimp.core.model_types import ConfigFormat

from .constants import (
    CONFIG_PYTHON_CLASSES,
    CONFIG_PYTHON_FUNCTIONS,
    PYPROJECT_PYTEST_SECTION,
    PYTEST_INI_SECTION,
)
from .models import InvalidConfigFileError, PytestIniOptionsModel

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class IniConfigSource:
    """Parsed INI file exposing the ``[pytest]`` section.

    Attributes:
        document: Parsed INI document.
        path: File the document was read from, if any.
    """

    document: IniConfig = field(repr=False)
    path: Path | None = None

    format: ClassVar[ConfigFormat] = ConfigFormat.INI

    @classmethod
    def from_text(cls, text: str, *, path: Path | None = None) -> IniConfigSource:
        """Parse INI text.

        Args:
            text: Full contents of the INI file.
            path: Originating file, used in error messages.

        Returns:
            Source wrapping the parsed document.

        Raises:
            InvalidConfigFileError: If the text is not valid INI syntax.
        """
        try:
            document = IniConfig(str(path) if path is not None else "pytest.ini", data=text)
        except ParseError as exc:
            raise InvalidConfigFileError(path, exc) from exc
        return cls(document=document, path=path)

    def get(self, key: str) -> str | None:
        """Return ``key`` from the ``[pytest]`` section, or None when absent."""
        return self.document.get(PYTEST_INI_SECTION, key)

    @property
    def python_classes_raw(self) -> str | None:
        return self.get(CONFIG_PYTHON_CLASSES)

    @property
    def python_functions_raw(self) -> str | None:
        return self.get(CONFIG_PYTHON_FUNCTIONS)


@dataclass(frozen=True, slots=True)
class TomlConfigSource:
    """Parsed TOML document exposing ``[tool.pytest.ini_options]``.

    Attributes:
        document: Parsed TOML mapping.
        options: Validated pytest options, or None when the table is absent.
        path: File the document was read from, if any.
    """

    document: Mapping[str, object] = field(repr=False)
    options: PytestIniOptionsModel | None = None
    path: Path | None = None

    format: ClassVar[ConfigFormat] = ConfigFormat.TOML

    @classmethod
    def from_text(cls, text: str, *, path: Path | None = None) -> TomlConfigSource:
        """Parse TOML text and validate its pytest options table.

        Args:
            text: Full contents of the TOML file.
            path: Originating file, used in error messages.

        Returns:
            Source wrapping the parsed document.

        Raises:
            InvalidConfigFileError: If the text is not valid TOML, or the pytest
                options table holds values of the wrong type.
        """
        try:
            document: dict[str, object] = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidConfigFileError(path, exc) from exc
        return cls.from_document(document, path=path)

    @classmethod
    def from_document(cls, document: Mapping[str, object], *, path: Path | None = None) -> TomlConfigSource:
        """Wrap an already-parsed TOML mapping.

        Raises:
            InvalidConfigFileError: If a table on the options path is not a
                table, or the options fail validation.
        """
        section = _extract_pytest_section(document, path)
        if section is None:
            return cls(document=document, options=None, path=path)
        try:
            options = PytestIniOptionsModel.model_validate(section)
        except ValidationError as exc:
            raise InvalidConfigFileError(path, exc) from exc
        return cls(document=document, options=options, path=path)

    @property
    def python_classes_raw(self) -> str | None:
        return self.options.python_classes if self.options is not None else None

    @property
    def python_functions_raw(self) -> str | None:
        return self.options.python_functions if self.options is not None else None


def _extract_pytest_section(document: Mapping[str, object], path: Path | None) -> Mapping[str, object] | None:
    """Walk ``tool.pytest.ini_options`` through the document.

    Returns:
        The options table, or None when any table on the way is missing.

    Raises:
        InvalidConfigFileError: If an entry on the way exists but is not a table.
    """
    current: Mapping[str, object] = document
    walked: list[str] = []
    for key in PYPROJECT_PYTEST_SECTION:
        walked.append(key)
        value = current.get(key)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            message = f"[{'.'.join(walked)}] must be a TOML table"
            raise InvalidConfigFileError(path, ValueError(message))
        current = cast("Mapping[str, object]", value)
    return current


ConfigSource: TypeAlias = IniConfigSource | TomlConfigSource

__all__ = ["ConfigSource", "IniConfigSource", "TomlConfigSource"]
