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

"""Per-project pytest config tracking with change detection.

A ``PytestConfigService`` remembers which file holds a project's pytest
configuration and the config last read from it. Refreshing re-reads the file
and reports whether the effective name patterns changed, so callers only
re-run discovery when ``python_classes`` or ``python_functions`` actually moved.

No registry of services is kept here; hosts own their services and pass them
to :func:`refresh_changed_configs` when files change.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING

from pytestimp._internal.logging_utils import structured_extra
from pytestimp.config import (
    DEFAULT_CONFIG_FILENAME,
    ConfigParseError,
    PytestConfig,
    load_config_or_none,
    parse_config_text,
)
from pytestimp.core.model_types import LogComponent

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pytestimp.core.model_types import ConfigFormat

logger: logging.Logger = logging.getLogger("pytestimp.services")


class PytestConfigService:
    """Track the pytest configuration of one project.

    Args:
        root: Project root; relative config paths resolve against it.
        config_path: Configuration file, ``pytest.ini`` by default.
    """

    def __init__(self, root: Path, config_path: str | Path = DEFAULT_CONFIG_FILENAME) -> None:
        self.root = root
        self._config_path = Path(config_path)
        self._config: PytestConfig | None = load_config_or_none(self.resolved_config_path)

    @property
    def config_path(self) -> Path:
        """Configured path, as given (possibly relative to ``root``)."""
        return self._config_path

    @config_path.setter
    def config_path(self, value: str | Path) -> None:
        self._config_path = Path(value)
        self.refresh()

    @property
    def resolved_config_path(self) -> Path:
        """Absolute location of the configuration file."""
        if self._config_path.is_absolute():
            return self._config_path.resolve()
        return (self.root / self._config_path).resolve()

    @property
    def config(self) -> PytestConfig | None:
        """Config last read, or None when no recognised config is available."""
        return self._config

    @property
    def effective_config(self) -> PytestConfig:
        """Config last read, or pytest's defaults when there is none."""
        return self._config if self._config is not None else PytestConfig.default()

    def refresh(self, path: Path | None = None) -> bool:
        """Re-read the configuration file.

        Args:
            path: File to read instead of the configured path. Unreadable or
                malformed files count as no configuration.

        Returns:
            True when the config differs from the one previously held.
        """
        target = path if path is not None else self.resolved_config_path
        return self._swap(load_config_or_none(target))

    def refresh_from_text(self, content: str | bytes, config_format: ConfigFormat) -> bool:
        """Replace the config with one parsed from in-memory content.

        Returns:
            True when the config differs from the one previously held.
        """
        try:
            new_config: PytestConfig | None = parse_config_text(
                content,
                config_format,
                path=self.resolved_config_path,
            )
        except ConfigParseError as exc:
            logger.warning(
                "Ignoring unreadable pytest config: %s",
                exc,
                extra=structured_extra(
                    LogComponent.SERVICES,
                    path=self.resolved_config_path,
                    format=config_format,
                ),
            )
            new_config = None
        return self._swap(new_config)

    def _swap(self, new_config: PytestConfig | None) -> bool:
        effective = new_config if new_config is not None else PytestConfig.default()
        changed = effective != self.effective_config
        self._config = new_config
        logger.debug(
            "Refreshed pytest config from %s",
            self.resolved_config_path,
            extra=structured_extra(
                LogComponent.SERVICES,
                path=self.resolved_config_path,
                changed=changed,
            ),
        )
        return changed


def refresh_changed_configs(
    services: Iterable[PytestConfigService],
    changed_paths: Iterable[Path],
) -> list[PytestConfigService]:
    """Refresh every service whose configuration file is among ``changed_paths``.

    Args:
        services: Services owned by the host, typically one per open project.
        changed_paths: Files reported as created, modified or deleted.

    Returns:
        Services whose config changed, in the order they were given.
    """
    ordered = list(services)
    by_path: defaultdict[Path, list[PytestConfigService]] = defaultdict(list)
    for service in ordered:
        by_path[service.resolved_config_path].append(service)

    changed_services: list[PytestConfigService] = []
    seen: set[Path] = set()
    for raw_path in changed_paths:
        path = raw_path.resolve()
        if path in seen:
            continue
        seen.add(path)
        changed_services.extend(service for service in by_path.get(path, []) if service.refresh())

    order = {id(service): index for index, service in enumerate(ordered)}
    changed_services.sort(key=lambda service: order[id(service)])
    return changed_services


__all__ = ["PytestConfigService", "refresh_changed_configs"]
