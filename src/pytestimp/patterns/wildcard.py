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

"""Translate a single fnmatch-style wildcard into a regular-expression fragment.

pytest's ``python_classes`` and ``python_functions`` options hold shell-style
wildcards such as ``test_*`` or ``Test*``. This module converts one such
wildcard into a string usable as an alternative inside a Python regex.

A hand-written scanner is used instead of :func:`fnmatch.translate` so that a
dash can be treated as a CamelCase word boundary outside character classes
while dashes inside ``[A-Z]`` keep their range meaning. A plain string replace
would break those ranges.

The scanner tracks two pieces of state:

- whether the previous character was an unconsumed ``\\`` escape
- how many ``[`` class openers are still unclosed (a plain counter)

An escape applies to exactly the next character. Malformed input never raises:
a wildcard with an unterminated character class compiles to :data:`MATCH_NOTHING`,
and so does a balanced one that :mod:`re` still rejects (``[]``, ``[!]``,
``[z-a]``). Only the offending wildcard is silenced; its siblings in a list
keep matching.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from pytestimp._internal.logging_utils import structured_extra
from pytestimp.core.model_types import LogComponent

logger: logging.Logger = logging.getLogger("pytestimp.patterns")

MATCH_NOTHING: Final[str] = "(?!)"
"""Regex fragment that fails at every position, including on the empty string."""

WORD_BOUNDARY: Final[str] = "[A-Z0-9]"
"""Replacement for a top-level dash when word-boundary mode is enabled."""

_ESCAPED_METACHARACTERS: Final[frozenset[str]] = frozenset(".()^+|${}")


def compile_wildcard_pattern(pattern: str, *, word_boundary_dashes: bool) -> str:
    """Convert an fnmatch wildcard (e.g. ``test_*``) to a regex fragment string.

    Args:
        pattern: Wildcard to translate.
        word_boundary_dashes: Treat a dash outside character classes as a
            CamelCase word boundary (``[A-Z0-9]``) instead of a literal dash.

    Returns:
        Regex fragment equivalent to ``pattern``, or :data:`MATCH_NOTHING` when
        the wildcard leaves a character class unclosed or its translation is
        rejected by :mod:`re` (logged at error level).
    """
    chars: list[str] = []
    escaping = False
    class_depth = 0

    for index, char in enumerate(pattern):
        if char == "*":
            if class_depth > 0:
                chars.append("*")
            else:
                chars.append("\\*" if escaping else ".*")
            escaping = False
        elif char == "?":
            if class_depth > 0:
                chars.append("?")
            else:
                chars.append("\\?" if escaping else ".")
            escaping = False
        elif char in _ESCAPED_METACHARACTERS:
            # inside a class only "^" keeps a special meaning
            if class_depth == 0 or char == "^":
                chars.append("\\")
            chars.append(char)
            escaping = False
        elif char == "\\":
            if escaping:
                chars.append("\\\\")
            escaping = not escaping
        elif char == "[":
            if escaping:
                chars.append("\\[")
            else:
                chars.append("[")
                class_depth += 1
            escaping = False
        elif char == "]":
            if escaping:
                chars.append("\\]")
            else:
                chars.append("]")
                class_depth -= 1
            escaping = False
        elif char == "!":
            # look back at the raw wildcard: the output may hold inserted escapes
            if class_depth > 0 and pattern[index - 1] == "[":
                chars.append("^")
            else:
                chars.append("!")
            escaping = False
        elif char == "-":
            if word_boundary_dashes and class_depth == 0:
                chars.append(WORD_BOUNDARY)
            else:
                chars.append("-")
            escaping = False
        else:
            chars.append(char)
            escaping = False

    # an unclosed class would make the joined regex fail to compile
    if class_depth > 0:
        return MATCH_NOTHING

    fragment = "".join(chars)
    if not _accepted_by_re(pattern, fragment):
        return MATCH_NOTHING
    return fragment


def _accepted_by_re(pattern: str, fragment: str) -> bool:
    try:
        _ = re.compile(fragment)
    except re.error as exc:
        logger.error(
            "Wildcard %r translated to an invalid regex %r; it will match nothing: %s",
            pattern,
            fragment,
            exc,
            extra=structured_extra(
                LogComponent.PATTERNS,
                pattern=pattern,
                details={"regex": fragment},
            ),
        )
        return False
    return True


__all__ = ["MATCH_NOTHING", "WORD_BOUNDARY", "compile_wildcard_pattern"]
