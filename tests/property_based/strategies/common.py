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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

import string

from hypothesis import strategies as st

__all__ = [
    "balanced_wildcards",
    "candidate_names",
    "plain_names",
    "unterminated_wildcards",
]

_ALNUM = string.ascii_letters + string.digits
_LITERALS = _ALNUM + "_.()+^$|!{}"
_NAME_ALPHABET = "abTt_01.-"


def _reversed_range() -> st.SearchStrategy[str]:
    bounds = st.lists(st.sampled_from(_ALNUM), min_size=2, max_size=2, unique=True)
    return bounds.map(lambda pair: "-".join(sorted(pair, reverse=True)))


def _class_tokens(*, degenerate: bool) -> st.SearchStrategy[str]:
    body = st.text(alphabet=_ALNUM, min_size=1, max_size=4)
    if degenerate:
        body = st.one_of(body, st.just(""), _reversed_range())
    return st.builds(lambda negate, chars: ("[!" if negate else "[") + chars + "]", st.booleans(), body)


def balanced_wildcards(
    min_tokens: int = 0,
    max_tokens: int = 8,
    *,
    degenerate_classes: bool = False,
) -> st.SearchStrategy[str]:
    """Wildcards whose character classes are all closed.

    No dashes outside classes, backslashes or whitespace are generated. Unless
    ``degenerate_classes`` is set, classes are non-empty and free of ranges, so
    the result has the same meaning under :func:`fnmatch.fnmatchcase`. With it,
    empty (``[]``, ``[!]``) and reversed-range (``[z-a]``) classes appear too.
    """
    token = st.one_of(
        st.sampled_from(_LITERALS),
        st.just("*"),
        st.just("?"),
        _class_tokens(degenerate=degenerate_classes),
    )
    return st.lists(token, min_size=min_tokens, max_size=max_tokens).map("".join)


def unterminated_wildcards() -> st.SearchStrategy[str]:
    """Balanced wildcards followed by a class that is never closed."""
    tail = st.text(alphabet=_ALNUM, max_size=4)
    return st.builds(lambda head, rest: f"{head}[{rest}", balanced_wildcards(), tail)


def plain_names(max_size: int = 12) -> st.SearchStrategy[str]:
    """Identifiers without any wildcard or regex metacharacters."""
    return st.text(alphabet=_ALNUM + "_", max_size=max_size)


def candidate_names(max_size: int = 6) -> st.SearchStrategy[str]:
    """Short names drawn from a small alphabet so matches are likely."""
    return st.text(alphabet=_NAME_ALPHABET, max_size=max_size)
