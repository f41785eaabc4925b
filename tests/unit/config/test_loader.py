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

"""Unit tests for config format selection and loading."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from pytestimp.config import (
    InvalidConfigFileError,
    PytestConfig,
    config_format_for,
    load_config,
    load_config_or_none,
    parse_config_text,
)
from pytestimp.core.model_types import ConfigFormat

pytestmark = pytest.mark.unit

WriteConfig = Callable[[str, str], Path]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (Path("pytest.ini"), ConfigFormat.INI),
        (Path("tox.ini"), ConfigFormat.INI),
        (Path("PYTEST.INI"), ConfigFormat.INI),
        (Path("pyproject.toml"), ConfigFormat.TOML),
        (Path("setup.cfg"), None),
        (Path("pytest"), None),
        (None, None),
    ],
)
def test_config_format_for(path: Path | None, expected: ConfigFormat | None) -> None:
    assert config_format_for(path) is expected


def test_load_config_without_file_is_none(tmp_path: Path) -> None:
    assert load_config(None) is None
    assert load_config(tmp_path / "pytest.ini") is None


def test_load_config_ignores_unrecognised_extension(write_config: WriteConfig) -> None:
    path = write_config("setup.cfg", "[tool:pytest]\npython_classes = Check*\n")
    assert load_config(path) is None


def test_load_config_reads_ini(write_config: WriteConfig) -> None:
    path = write_config("pytest.ini", "[pytest]\npython_classes = Check*\n")
    config = load_config(path)
    assert config is not None
    assert config.python_classes_raw == "Check*"
    assert config.python_functions_raw is None
    assert config.config_format is ConfigFormat.INI
    assert config.path == path
    assert config.is_test_class("CheckLogin")
    assert config.is_test_function("test_login")


def test_load_config_reads_pyproject(write_config: WriteConfig) -> None:
    path = write_config(
        "pyproject.toml",
        '[tool.pytest.ini_options]\npython_functions = "check_* verify_*"\n',
    )
    config = load_config(path)
    assert config is not None
    assert config.config_format is ConfigFormat.TOML
    assert config.is_test_function("verify_login")
    assert not config.is_test_function("test_login")


def test_load_config_raises_on_malformed_file(write_config: WriteConfig) -> None:
    path = write_config("pyproject.toml", "[tool.pytest.ini_options\n")
    with pytest.raises(InvalidConfigFileError) as excinfo:
        _ = load_config(path)
    assert excinfo.value.path == path


def test_load_config_or_none_logs_and_returns_none(
    write_config: WriteConfig,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.WARNING, logger="pytestimp.config")
    path = write_config("pytest.ini", "[pytest]\nnot a key value line\n")
    assert load_config_or_none(path) is None
    record = next(record for record in caplog.records if record.name == "pytestimp.config")
    assert record.levelno == logging.WARNING
    assert getattr(record, "component") == "config"
    assert getattr(record, "path") == str(path)
    assert getattr(record, "format") == "ini"


def test_missing_section_and_key_fall_back_to_defaults(write_config: WriteConfig) -> None:
    default = PytestConfig.default()
    for name, content in (
        ("a/pytest.ini", "[tox]\nenvlist = py312\n"),
        ("b/pytest.ini", "[pytest]\naddopts = -ra\n"),
        ("c/pyproject.toml", '[project]\nname = "demo"\n'),
    ):
        config = load_config(write_config(name, content))
        assert config is not None
        assert config == default
        assert config.python_classes.pattern == default.python_classes.pattern
        assert config.python_functions.pattern == default.python_functions.pattern


def test_unrelated_content_does_not_affect_equality(write_config: WriteConfig) -> None:
    first = load_config(
        write_config(
            "one/pyproject.toml",
            '[tool.black]\nline-length = 88\n[tool.pytest.ini_options]\npython_classes = "Suite*"\n',
        ),
    )
    second = load_config(
        write_config(
            "two/pyproject.toml",
            '[tool.pytest.ini_options]\npython_classes = "Suite*"\naddopts = "-q"\n',
        ),
    )
    ini = load_config(write_config("three/pytest.ini", "[pytest]\npython_classes = Suite*\n"))
    assert first == second == ini


def test_parse_config_text_accepts_bytes() -> None:
    config = parse_config_text(b"[pytest]\npython_functions = check_*\n", ConfigFormat.INI)
    assert config.python_functions_raw == "check_*"


def test_parse_config_text_rejects_undecodable_bytes() -> None:
    with pytest.raises(InvalidConfigFileError) as excinfo:
        _ = parse_config_text(b"\xff\xfe[pytest]", ConfigFormat.INI, path=Path("pytest.ini"))
    assert isinstance(excinfo.value.error, UnicodeDecodeError)
