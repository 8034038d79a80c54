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

"""Configuration for eeaforge: discovery, validation and runtime settings."""

from __future__ import annotations

from .constants import (
    CONFIG_FILENAMES,
    CONFIG_VERSION,
    DEFAULT_ARCHIVE_SUFFIX,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_OUTPUT_DIRECTORY,
)
from .loader import LoadedConfig, load_config, load_config_with_metadata
from .models import (
    DEFAULT_CHOICES,
    Config,
    ConfigFieldChoiceError,
    ConfigFieldTypeError,
    ConfigModel,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    NullabilityConfigModel,
    NullabilitySettings,
    OutputConfigModel,
    OutputSettings,
    UnsupportedConfigVersionError,
)

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "DEFAULT_ARCHIVE_SUFFIX",
    "DEFAULT_CHOICES",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_OUTPUT_DIRECTORY",
    "Config",
    "ConfigFieldChoiceError",
    "ConfigFieldTypeError",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LoadedConfig",
    "NullabilityConfigModel",
    "NullabilitySettings",
    "OutputConfigModel",
    "OutputSettings",
    "UnsupportedConfigVersionError",
    "load_config",
    "load_config_with_metadata",
]
