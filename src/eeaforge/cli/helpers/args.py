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

"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Protocol

from eeaforge.config.models import DEFAULT_CHOICES


class ArgumentRegistrar(Protocol):
    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action: ...  # pragma: no cover - stub


class SubparserRegistry(Protocol):
    def add_parser(self, *args: object, **kwargs: object) -> argparse.ArgumentParser:
        """Register a CLI subcommand on an argparse subparser collection."""
        ...  # pragma: no cover - Protocol helper


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    _ = registrar.add_argument(*args, **kwargs)


def register_config_option(parser: ArgumentRegistrar) -> None:
    """Register ``--config`` for commands that read project configuration."""
    register_argument(
        parser,
        "--config",
        type=Path,
        default=None,
        help="Explicit configuration file (default: eeaforge.toml, .eeaforge.toml or pyproject.toml).",
    )


def register_nullability_options(parser: ArgumentRegistrar) -> None:
    """Register the nullness default overrides shared by ``generate`` and ``show``."""
    register_argument(
        parser,
        "--parameter-default",
        choices=DEFAULT_CHOICES,
        default=None,
        help="Nullness assumed for parameters without a declared marker (overrides configuration).",
    )
    register_argument(
        parser,
        "--return-default",
        choices=DEFAULT_CHOICES,
        default=None,
        help="Nullness assumed for return values without a declared marker (overrides configuration).",
    )


__all__ = [
    "ArgumentRegistrar",
    "SubparserRegistry",
    "register_argument",
    "register_config_option",
    "register_nullability_options",
]
