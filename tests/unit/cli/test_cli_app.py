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


"""Unit tests for the top-level CLI entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from eeaforge import __version__
from eeaforge.cli import app
from eeaforge.config import load_config
from eeaforge.signatures import Nullness

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = [pytest.mark.unit, pytest.mark.cli]


def test_version_flag_prints_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert app.main(["--version"]) == 0

    assert capsys.readouterr().out == f"eeaforge {__version__}\n"


def test_main_requires_command() -> None:
    with pytest.raises(SystemExit):
        _ = app.main([])


def test_main_unknown_command() -> None:
    with pytest.raises(SystemExit):
        _ = app.main(["unknown"])


def test_main_fails_when_handler_missing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(app, "_command_handlers", dict)

    with pytest.raises(SystemExit):
        _ = app.main(["init", "--save-as", str(tmp_path / "eeaforge.toml")])


def test_init_writes_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "conf" / "eeaforge.toml"

    assert app.main(["init", "--save-as", str(target)]) == 0

    assert target.read_text(encoding="utf-8") == app.CONFIG_TEMPLATE
    assert f"Wrote starter config to {target}" in capsys.readouterr().out


def test_init_template_loads_as_default_configuration(tmp_path: Path) -> None:
    target = tmp_path / "eeaforge.toml"
    assert app.write_config_template(target, force=False) == 0

    config = load_config(target)

    assert config.nullability.nullable == "javax.annotation.Nullable"
    assert config.nullability.parameter_default is Nullness.UNDEFINED
    assert config.output.directory == (tmp_path / "build" / "annotations").resolve()


def test_init_refuses_to_overwrite(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "eeaforge.toml"
    _ = target.write_text("keep = true\n", encoding="utf-8")

    assert app.main(["init", "-o", str(target)]) == 1

    assert target.read_text(encoding="utf-8") == "keep = true\n"
    assert "Refusing to overwrite existing file" in capsys.readouterr().out


def test_init_force_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "eeaforge.toml"
    _ = target.write_text("keep = true\n", encoding="utf-8")

    assert app.main(["init", "-o", str(target), "--force"]) == 0

    assert target.read_text(encoding="utf-8") == app.CONFIG_TEMPLATE


def test_eeaforge_errors_exit_with_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.json"

    exit_code = app.main(["show", str(missing), "--config", str(tmp_path / "absent.toml")])

    assert exit_code == app.EXIT_ERROR
    assert "(EF114)" in capsys.readouterr().err


def test_missing_model_is_reported_with_error_code(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(tmp_path)

    exit_code = app.main(["--log-format", "json", "show", "missing.json"])

    err = capsys.readouterr().err
    assert exit_code == app.EXIT_ERROR
    assert '"error_code": "EF400"' in err
    assert "Unable to read type model" in err
