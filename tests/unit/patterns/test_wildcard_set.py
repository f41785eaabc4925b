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

"""Unit tests for compiling whitespace-separated wildcard lists."""

from __future__ import annotations

import logging
import re

import pytest

from pytestimp.patterns import (
    MATCH_NOTHING_REGEX,
    PatternCompileError,
    compile_wildcard_patterns,
    compile_wildcard_patterns_or_nothing,
    split_wildcard_patterns,
    wildcard_patterns_to_regex,
    wildcard_set,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("patterns", "expected"),
    [
        ("test_* check_*", ["test_*", "check_*"]),
        ("  test_*\t\tcheck_*\n", ["test_*", "check_*"]),
        ("test_*\n    check_*", ["test_*", "check_*"]),
        ("single", ["single"]),
        ("", [""]),
        ("   ", [""]),
    ],
)
def test_split_wildcard_patterns(patterns: str, expected: list[str]) -> None:
    assert split_wildcard_patterns(patterns) == expected


def test_wildcard_patterns_join_with_alternation() -> None:
    assert wildcard_patterns_to_regex("test_* check_*", word_boundary_dashes=False) == "test_.*|check_.*"
    assert wildcard_patterns_to_regex("Test-* Suite", word_boundary_dashes=True) == "Test[A-Z0-9].*|Suite"


def test_compile_wildcard_patterns_matches_any_alternative() -> None:
    regex = compile_wildcard_patterns("test_* check_*", word_boundary_dashes=False)
    assert regex.fullmatch("test_one")
    assert regex.fullmatch("check_two")
    assert not regex.fullmatch("other_test")
    assert not regex.fullmatch("xtest_one")
    assert not regex.fullmatch("Test_one")


def test_compile_wildcard_patterns_empty_matches_only_empty() -> None:
    regex = compile_wildcard_patterns("", word_boundary_dashes=False)
    assert regex.pattern == ""
    assert regex.fullmatch("")
    assert not regex.fullmatch("test_a")


def test_unterminated_pattern_only_disables_itself() -> None:
    regex = compile_wildcard_patterns("[abc test_*", word_boundary_dashes=False)
    assert regex.pattern == "(?!)|test_.*"
    assert regex.fullmatch("test_x")
    assert not regex.fullmatch("a")


def test_compiled_regex_is_case_sensitive() -> None:
    regex = compile_wildcard_patterns("Test*", word_boundary_dashes=True)
    assert not regex.flags & re.IGNORECASE
    assert not regex.fullmatch("testFoo")


@pytest.mark.parametrize("rejected", ["[!]", "[]", "[z-a]", "]x["])
def test_rejected_wildcard_only_disables_itself(rejected: str) -> None:
    patterns = f"Test* {rejected} check_*"
    regex = compile_wildcard_patterns(patterns, word_boundary_dashes=False)
    assert regex.pattern == "Test.*|(?!)|check_.*"
    assert regex.fullmatch("TestFoo")
    assert regex.fullmatch("check_a")
    assert compile_wildcard_patterns_or_nothing(patterns, word_boundary_dashes=False).fullmatch("TestFoo")


def _reject_join(patterns: str, *, word_boundary_dashes: bool) -> str:
    _ = word_boundary_dashes
    return f"({patterns}"


def test_invalid_joined_regex_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(wildcard_set, "wildcard_patterns_to_regex", _reject_join)
    with pytest.raises(PatternCompileError) as excinfo:
        _ = compile_wildcard_patterns("test_*", word_boundary_dashes=False)
    assert excinfo.value.patterns == "test_*"
    assert excinfo.value.regex == "(test_*"


def test_or_nothing_falls_back_and_logs(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setattr(wildcard_set, "wildcard_patterns_to_regex", _reject_join)
    caplog.set_level(logging.ERROR, logger="pytestimp.patterns")
    regex = compile_wildcard_patterns_or_nothing("[!]", word_boundary_dashes=False)
    assert regex is MATCH_NOTHING_REGEX
    assert regex.search("") is None
    assert regex.search("anything") is None
    record = next(record for record in caplog.records if record.name == "pytestimp.patterns")
    assert record.levelno == logging.ERROR
    assert getattr(record, "component") == "patterns"
    assert getattr(record, "pattern") == "[!]"


def test_or_nothing_passes_valid_patterns_through() -> None:
    regex = compile_wildcard_patterns_or_nothing("test_*", word_boundary_dashes=False)
    assert regex.pattern == "test_.*"
