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

"""Select and load a pytest configuration from a file.

The file extension picks the variant: ``.ini`` files are read as INI documents
with a ``[pytest]`` section and ``.toml`` files as ``pyproject.toml`` documents
with a ``[tool.pytest.ini_options]`` table. Any other file, a missing file, or
no file at all means there is no configuration, which is reported as ``None``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pytestimp._internal.logging_utils import structured_extra
from pytestimp.core.model_types import ConfigFormat, LogComponent

from .models import ConfigParseError, ConfigReadError, InvalidConfigFileError, PytestConfig
from .sources import ConfigSource, IniConfigSource, TomlConfigSource

if TYPE_CHECKING:
    from pathlib import Path

logger: logging.Logger = logging.getLogger("pytestimp.config")


def config_format_for(path: Path | None) -> ConfigFormat | None:
    """Return the config format implied by a file extension.

    Args:
        path: Candidate configuration file.

    Returns:
        ``ConfigFormat.INI`` for ``.ini``, ``ConfigFormat.TOML`` for ``.toml``,
        otherwise None.
    """
    if path is None:
        return None
    match path.suffix.lower():
        case ".ini":
            return ConfigFormat.INI
        case ".toml":
            return ConfigFormat.TOML
        case _:
            return None


def parse_config_source(
    content: str | bytes,
    config_format: ConfigFormat,
    *,
    path: Path | None = None,
) -> ConfigSource:
    """Parse configuration content into the variant for ``config_format``.

    Raises:
        InvalidConfigFileError: If the content cannot be decoded or parsed.
    """
    text = _decode(content, path)
    if config_format is ConfigFormat.INI:
        return IniConfigSource.from_text(text, path=path)
    return TomlConfigSource.from_text(text, path=path)


def parse_config_text(
    content: str | bytes,
    config_format: ConfigFormat,
    *,
    path: Path | None = None,
) -> PytestConfig:
    """Build a ``PytestConfig`` from already-read file content.

    Args:
        content: File contents; bytes are decoded as UTF-8.
        config_format: Format of the content.
        path: Originating file, recorded on the source and used in errors.

    Returns:
        Config carrying the raw ``python_classes``/``python_functions`` values.

    Raises:
        InvalidConfigFileError: If the content is malformed.
    """
    return PytestConfig.from_source(parse_config_source(content, config_format, path=path))


def _decode(content: str | bytes, path: Path | None) -> str:
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidConfigFileError(path, exc) from exc


def load_config(path: Path | None) -> PytestConfig | None:
    """Load the pytest configuration stored at ``path``.

    Args:
        path: Configuration file, or None when no file is configured.

    Returns:
        The parsed config, or None when ``path`` is None, does not exist, or
        has an unrecognised extension.

    Raises:
        ConfigReadError: If the file exists but cannot be read.
        InvalidConfigFileError: If the file content is malformed.
    """
    config_format = config_format_for(path)
    if path is None or config_format is None:
        return None
    if not path.is_file():
        return None
    try:
        content = path.read_bytes()
    # ignore JUSTIFIED: filesystem errors depend on host configuration
    except OSError as exc:  # pragma: no cover - IO errors
        raise ConfigReadError(path, exc) from exc
    return parse_config_text(content, config_format, path=path)


def load_config_or_none(path: Path | None) -> PytestConfig | None:
    """Load a config like :func:`load_config`, treating parse failures as absent.

    The failure is logged at warning level so pytest defaults take over
    without interrupting the caller.
    """
    try:
        return load_config(path)
    except ConfigParseError as exc:
        logger.warning(
            "Ignoring unreadable pytest config: %s",
            exc,
            extra=structured_extra(
                LogComponent.CONFIG,
                path=path,
                format=config_format_for(path),
            ),
        )
        return None


__all__ = [
    "config_format_for",
    "load_config",
    "load_config_or_none",
    "parse_config_source",
    "parse_config_text",
]
