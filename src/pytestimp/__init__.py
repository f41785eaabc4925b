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

"""pytestimp - pytest name-pattern discovery helpers.

Translates pytest ``python_classes`` / ``python_functions`` wildcards into
regular expressions and reads them from ``pytest.ini`` or ``pyproject.toml``.
"""

from __future__ import annotations

from ._internal.exceptions import PytestImpError, PytestImpTypeError, PytestImpValidationError
from .config import (
    ConfigParseError,
    IniConfigSource,
    PytestConfig,
    TomlConfigSource,
    load_config,
    parse_config_text,
)
from .core.model_types import ConfigFormat, NameKind
from .patterns import (
    MATCH_NOTHING,
    PatternCompileError,
    compile_wildcard_pattern,
    compile_wildcard_patterns,
)
from .services import PytestConfigService, refresh_changed_configs

__all__ = [
    "MATCH_NOTHING",
    "ConfigFormat",
    "ConfigParseError",
    "IniConfigSource",
    "NameKind",
    "PatternCompileError",
    "PytestConfig",
    "PytestConfigService",
    "PytestImpError",
    "PytestImpTypeError",
    "PytestImpValidationError",
    "TomlConfigSource",
    "__version__",
    "compile_wildcard_pattern",
    "compile_wildcard_patterns",
    "load_config",
    "parse_config_text",
    "refresh_changed_configs",
]

__version__ = "0.1.0"
