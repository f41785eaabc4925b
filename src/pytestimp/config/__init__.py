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

"""Pytest configuration loading for name-pattern discovery.

This package reads ``python_classes`` and ``python_functions`` from
``pytest.ini`` style files and from ``pyproject.toml`` and exposes them as an
immutable ``PytestConfig`` with derived regexes.
"""

from __future__ import annotations

from .constants import (
    CONFIG_PYTHON_CLASSES,
    CONFIG_PYTHON_FUNCTIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_PYTHON_CLASSES,
    DEFAULT_PYTHON_FUNCTIONS,
    PYPROJECT_PYTEST_SECTION,
    PYTEST_INI_SECTION,
)
from .loader import config_format_for, load_config, load_config_or_none, parse_config_source, parse_config_text
from .models import (
    ConfigFieldTypeError,
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    PytestConfig,
    PytestIniOptionsModel,
)
from .sources import ConfigSource, IniConfigSource, TomlConfigSource

__all__ = [
    "CONFIG_PYTHON_CLASSES",
    "CONFIG_PYTHON_FUNCTIONS",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_PYTHON_CLASSES",
    "DEFAULT_PYTHON_FUNCTIONS",
    "PYPROJECT_PYTEST_SECTION",
    "PYTEST_INI_SECTION",
    "ConfigFieldTypeError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigSource",
    "ConfigValidationError",
    "IniConfigSource",
    "InvalidConfigFileError",
    "PytestConfig",
    "PytestIniOptionsModel",
    "TomlConfigSource",
    "config_format_for",
    "load_config",
    "load_config_or_none",
    "parse_config_source",
    "parse_config_text",
]
