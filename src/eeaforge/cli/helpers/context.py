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

"""Resolve runtime settings from configuration and CLI overrides."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from eeaforge.config import load_config
from eeaforge.services.annotations import build_nullability
from eeaforge.signatures.nullness import Nullness

if TYPE_CHECKING:
    import argparse

    from eeaforge.config import Config
    from eeaforge.nullability import NullabilityProvider


def load_cli_config(args: argparse.Namespace) -> Config:
    """Load configuration honouring ``--config``."""
    return load_config(getattr(args, "config", None))


def resolve_nullability(args: argparse.Namespace, config: Config) -> NullabilityProvider:
    """Build the nullability provider, applying ``--parameter-default``/``--return-default``."""
    settings = config.nullability
    parameter_default = getattr(args, "parameter_default", None)
    return_default = getattr(args, "return_default", None)
    if parameter_default is not None:
        settings = replace(settings, parameter_default=Nullness.from_str(parameter_default))
    if return_default is not None:
        settings = replace(settings, return_default=Nullness.from_str(return_default))
    return build_nullability(settings)


__all__ = ["load_cli_config", "resolve_nullability"]
