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

"""Rendering helpers for CLI payloads."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence


def _stringify(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def render_data(data: Mapping[str, object] | Sequence[Mapping[str, object]], *, as_json: bool) -> list[str]:
    """Render a mapping (or list of mappings) for CLI output.

    Args:
        data: Payload produced by a command.
        as_json: Emit a single indented JSON document instead of text lines.

    Returns:
        Lines to print.
    """
    if as_json:
        return [json.dumps(data, indent=2, ensure_ascii=False, default=str)]
    rows = [data] if isinstance(data, Mapping) else list(data)
    lines: list[str] = []
    for row in rows:
        width = max((len(key) for key in row), default=0)
        lines.extend(f"{key.ljust(width)}  {_stringify(value)}" for key, value in row.items())
    return lines


__all__ = ["render_data"]
