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

"""Property-based tests for wildcard translation."""

from __future__ import annotations

import fnmatch
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pytestimp.patterns import (
    MATCH_NOTHING,
    compile_wildcard_pattern,
    compile_wildcard_patterns,
)
from tests.property_based.strategies import (
    balanced_wildcards,
    candidate_names,
    plain_names,
    unterminated_wildcards,
)

pytestmark = pytest.mark.property


@given(st.lists(balanced_wildcards(degenerate_classes=True), max_size=4), st.booleans())
def test_balanced_wildcards_always_compile(patterns: list[str], dashes: bool) -> None:
    for pattern in patterns:
        _ = re.compile(compile_wildcard_pattern(pattern, word_boundary_dashes=dashes))
    regex = compile_wildcard_patterns(" ".join(patterns), word_boundary_dashes=dashes)
    assert isinstance(regex, re.Pattern)


@given(balanced_wildcards(degenerate_classes=True), st.sampled_from(["test_a", "test_login", "test_"]))
def test_rejected_sibling_never_hides_valid_wildcard(pattern: str, name: str) -> None:
    regex = compile_wildcard_patterns(f"{pattern} test_*", word_boundary_dashes=False)
    assert regex.fullmatch(name)


@given(unterminated_wildcards(), candidate_names())
def test_unterminated_class_matches_nothing(pattern: str, name: str) -> None:
    fragment = compile_wildcard_pattern(pattern, word_boundary_dashes=False)
    assert fragment == MATCH_NOTHING
    assert re.fullmatch(fragment, name) is None


@given(plain_names())
def test_plain_names_translate_to_themselves(name: str) -> None:
    assert compile_wildcard_pattern(name, word_boundary_dashes=True) == name


@given(balanced_wildcards())
def test_dash_mode_is_irrelevant_without_dashes(pattern: str) -> None:
    with_dashes = compile_wildcard_pattern(pattern, word_boundary_dashes=True)
    without_dashes = compile_wildcard_pattern(pattern, word_boundary_dashes=False)
    assert with_dashes == without_dashes


@given(balanced_wildcards(), candidate_names())
def test_single_wildcard_agrees_with_fnmatch(pattern: str, name: str) -> None:
    fragment = compile_wildcard_pattern(pattern, word_boundary_dashes=False)
    matched = re.fullmatch(fragment, name) is not None
    assert matched == fnmatch.fnmatchcase(name, pattern)


@given(st.lists(balanced_wildcards(min_tokens=1), min_size=1, max_size=3), candidate_names())
def test_wildcard_list_matches_any_member(patterns: list[str], name: str) -> None:
    regex = compile_wildcard_patterns(" ".join(patterns), word_boundary_dashes=False)
    expected = any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)
    assert (regex.fullmatch(name) is not None) == expected


@given(st.text(max_size=12), st.booleans())
def test_compilation_is_deterministic(pattern: str, dashes: bool) -> None:
    first = compile_wildcard_pattern(pattern, word_boundary_dashes=dashes)
    assert compile_wildcard_pattern(pattern, word_boundary_dashes=dashes) == first
