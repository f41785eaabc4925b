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

"""Keys, sections and defaults for reading pytest configuration."""

from __future__ import annotations

from typing import Final

CONFIG_PYTHON_CLASSES: Final[str] = "python_classes"
CONFIG_PYTHON_FUNCTIONS: Final[str] = "python_functions"

PYTEST_INI_SECTION: Final[str] = "pytest"
PYPROJECT_PYTEST_SECTION: Final[tuple[str, ...]] = ("tool", "pytest", "ini_options")

DEFAULT_PYTHON_CLASSES: Final[str] = "Test*"
DEFAULT_PYTHON_FUNCTIONS: Final[str] = "test_*"

DEFAULT_CONFIG_FILENAME: Final[str] = "pytest.ini"

__all__ = [
    "CONFIG_PYTHON_CLASSES",
    "CONFIG_PYTHON_FUNCTIONS",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_PYTHON_CLASSES",
    "DEFAULT_PYTHON_FUNCTIONS",
    "PYPROJECT_PYTEST_SECTION",
    "PYTEST_INI_SECTION",
]
