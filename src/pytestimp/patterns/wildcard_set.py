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

"""Compile a whitespace-separated list of wildcards into one regular expression."""

from __future__ import annotations

import logging
import re
from typing import Final

from pytestimp._internal.exceptions import PytestImpError
from pytestimp._internal.logging_utils import structured_extra
from pytestimp.core.model_types import LogComponent

from .wildcard import MATCH_NOTHING, compile_wildcard_pattern

logger: logging.Logger = logging.getLogger("pytestimp.patterns")

MATCH_NOTHING_REGEX: Final[re.Pattern[str]] = re.compile(MATCH_NOTHING)


class PatternCompileError(PytestImpError):
    """Raised when the joined regex for a wildcard list is rejected by :mod:`re`."""

    def __init__(self, patterns: str, regex: str, error: re.error) -> None:
        """Initialize the exception with the source wildcards and the failing regex.

        Args:
            patterns: Wildcard list that was being compiled.
            regex: Joined regex string handed to :func:`re.compile`.
            error: The error raised by :mod:`re`.
        """
        self.patterns = patterns
        self.regex = regex
        self.error = error
        super().__init__(f"Wildcards {patterns!r} produced an invalid regex {regex!r}: {error}")


def split_wildcard_patterns(patterns: str) -> list[str]:
    """Split a wildcard list on whitespace runs.

    Empty or whitespace-only input yields a single empty wildcard, so the
    resulting regex matches exactly the empty string.
    """
    return patterns.split() or [""]


def wildcard_patterns_to_regex(patterns: str, *, word_boundary_dashes: bool) -> str:
    """Return the joined regex source for a whitespace-separated wildcard list."""
    return "|".join(
        compile_wildcard_pattern(pattern, word_boundary_dashes=word_boundary_dashes)
        for pattern in split_wildcard_patterns(patterns)
    )


def compile_wildcard_patterns(patterns: str, *, word_boundary_dashes: bool) -> re.Pattern[str]:
    """Convert a whitespace-separated list of wildcards into a single regex.

    Args:
        patterns: Wildcards separated by whitespace, e.g. ``"test_* check_*"``.
        word_boundary_dashes: Treat top-level dashes as CamelCase word boundaries.

    Returns:
        Compiled regex whose alternatives are the translated wildcards.

    Raises:
        PatternCompileError: If :mod:`re` rejects the joined regex.
    """
    regex = wildcard_patterns_to_regex(patterns, word_boundary_dashes=word_boundary_dashes)
    try:
        return re.compile(regex)
    except re.error as exc:
        raise PatternCompileError(patterns, regex, exc) from exc


def compile_wildcard_patterns_or_nothing(patterns: str, *, word_boundary_dashes: bool) -> re.Pattern[str]:
    """Compile a wildcard list, falling back to a regex that matches nothing.

    A compile failure is logged at error level rather than propagated.
    """
    try:
        return compile_wildcard_patterns(patterns, word_boundary_dashes=word_boundary_dashes)
    except PatternCompileError as exc:
        logger.error(
            "Unable to compile wildcards %r; matching nothing instead: %s",
            patterns,
            exc.error,
            extra=structured_extra(
                LogComponent.PATTERNS,
                pattern=patterns,
                details={"regex": exc.regex},
            ),
        )
        return MATCH_NOTHING_REGEX


__all__ = [
    "MATCH_NOTHING_REGEX",
    "PatternCompileError",
    "compile_wildcard_patterns",
    "compile_wildcard_patterns_or_nothing",
    "split_wildcard_patterns",
    "wildcard_patterns_to_regex",
]
