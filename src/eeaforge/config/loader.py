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

"""Configuration discovery and loading for eeaforge.

Configuration is read from the first of ``eeaforge.toml``, ``.eeaforge.toml``
and ``pyproject.toml`` (``[tool.eeaforge]``) in the working directory, or from
an explicit path. Relative output directories resolve against the directory of
the file they were read from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from eeaforge._internal.logging_utils import structured_extra
from eeaforge.compat import tomllib
from eeaforge.core.model_types import LogComponent

from .constants import CONFIG_FILENAMES
from .models import (
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    OutputSettings,
    config_from_model,
)

logger: logging.Logger = logging.getLogger("eeaforge.config")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: Filesystem path the configuration was loaded from, or None when
            defaults are used.
    """

    config: Config
    path: Path | None


def load_config(explicit_path: Path | None = None) -> Config:
    """Load eeaforge configuration from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file. If provided,
            only this file will be checked. If None, standard locations are searched.

    Returns:
        A Config object with the output directory resolved to an absolute path.
    """
    return load_config_with_metadata(explicit_path).config


def load_config_with_metadata(explicit_path: Path | None = None) -> LoadedConfig:
    """Load eeaforge configuration with metadata about the source file.

    Configuration files can use either a direct format (recommended for
    standalone ``eeaforge.toml`` files) or be nested under ``[tool.eeaforge]``
    in ``pyproject.toml``. A standalone file takes precedence over
    ``pyproject.toml`` because it is earlier in the search order.

    Args:
        explicit_path: Optional explicit path to a configuration file.

    Returns:
        LoadedConfig: Parsed configuration and the path it originated from.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If a candidate file fails validation, or an
            explicit file holds no eeaforge configuration.
    """
    base_dir = _discover_config_root(explicit_path)
    for candidate in _config_search_order(base_dir, explicit_path):
        loaded = _load_candidate_config(candidate, explicit=explicit_path is not None)
        if loaded is not None:
            logger.debug(
                "Loaded configuration from %s",
                loaded.path,
                extra=structured_extra(component=LogComponent.CONFIG, path=candidate),
            )
            return loaded
    return _default_config(base_dir)


def _default_config(base_dir: Path) -> LoadedConfig:
    cfg = Config()
    cfg.output = OutputSettings(directory=(base_dir / cfg.output.directory).resolve(), suffix=cfg.output.suffix)
    return LoadedConfig(config=cfg, path=None)


def _discover_config_root(explicit_path: Path | None) -> Path:
    if explicit_path:
        return _resolve_candidate_path(explicit_path).parent.resolve()
    return Path.cwd().resolve()


def _config_search_order(base_dir: Path, explicit_path: Path | None) -> list[Path]:
    if explicit_path:
        return [_resolve_candidate_path(explicit_path)]
    return [base_dir / filename for filename in CONFIG_FILENAMES]


def _resolve_candidate_path(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate_config(candidate: Path, *, explicit: bool) -> LoadedConfig | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError("file does not exist"))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_eeaforge_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = (
                f"{candidate.name} does not define eeaforge configuration; "
                "add standard tables (e.g. [nullability]) or a [tool.eeaforge] section"
            )
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        cfg_model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    root = candidate.parent.resolve()
    return LoadedConfig(config=config_from_model(root, cfg_model), path=candidate.resolve())


def _extract_eeaforge_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the eeaforge configuration payload from a TOML mapping.

    Args:
        candidate: Source configuration path.
        raw_map: Data parsed from the TOML document.

    Returns:
        Mapping to validate or None when no eeaforge configuration is present (only for
        pyproject.toml lookups).

    Raises:
        InvalidConfigFileError: If [tool.eeaforge] exists but is not a table.
    """
    tool_section_raw = raw_map.get("tool")
    is_pyproject = candidate.name == "pyproject.toml"
    if tool_section_raw is not None and not isinstance(tool_section_raw, dict):
        if is_pyproject:
            message = "[tool] in pyproject.toml must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        # standalone configs ignore unrelated tool entries
        tool_section_raw = None

    if isinstance(tool_section_raw, dict):
        tool_section = cast("dict[str, object]", tool_section_raw)
        eeaforge_section = tool_section.get("eeaforge")
        if eeaforge_section is not None and not isinstance(eeaforge_section, dict):
            message = "[tool.eeaforge] must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        if isinstance(eeaforge_section, dict):
            return cast("dict[str, object]", eeaforge_section)

    if is_pyproject:
        return None
    payload = dict(raw_map)
    payload.pop("tool", None)
    return payload


__all__ = ["LoadedConfig", "load_config", "load_config_with_metadata"]
