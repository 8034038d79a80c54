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

"""Shared configuration defaults for eeaforge."""

from __future__ import annotations

from typing import Final

CONFIG_VERSION: Final[int] = 0
CONFIG_FILENAMES: Final[tuple[str, ...]] = ("eeaforge.toml", ".eeaforge.toml", "pyproject.toml")
DEFAULT_CONFIG_FILENAME: Final[str] = "eeaforge.toml"
DEFAULT_OUTPUT_DIRECTORY: Final[str] = "build/annotations"
DEFAULT_ARCHIVE_SUFFIX: Final[str] = "-annotations.zip"

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "DEFAULT_ARCHIVE_SUFFIX",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_OUTPUT_DIRECTORY",
]
