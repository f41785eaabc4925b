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

"""Wildcard-to-regex compilation for pytest name patterns."""

from __future__ import annotations

from .wildcard import MATCH_NOTHING, WORD_BOUNDARY, compile_wildcard_pattern
from .wildcard_set import (
    MATCH_NOTHING_REGEX,
    PatternCompileError,
    compile_wildcard_patterns,
    compile_wildcard_patterns_or_nothing,
    split_wildcard_patterns,
    wildcard_patterns_to_regex,
)

__all__ = [
    "MATCH_NOTHING",
    "MATCH_NOTHING_REGEX",
    "WORD_BOUNDARY",
    "PatternCompileError",
    "compile_wildcard_pattern",
    "compile_wildcard_patterns",
    "compile_wildcard_patterns_or_nothing",
    "split_wildcard_patterns",
    "wildcard_patterns_to_regex",
]
