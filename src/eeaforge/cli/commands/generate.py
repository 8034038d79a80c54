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

"""``eeaforge generate``: write one annotation archive per type model."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from eeaforge.cli.helpers import (
    echo,
    load_cli_config,
    register_argument,
    register_config_option,
    register_nullability_options,
    resolve_nullability,
)
from eeaforge.services.annotations import generate_from_model_files

if TYPE_CHECKING:
    from eeaforge.cli.helpers import SubparserRegistry
    from eeaforge.services.annotations import ArchiveResult


def register_generate_command(subparsers: SubparserRegistry) -> None:
    """Attach the ``eeaforge generate`` command to the CLI."""
    generate = subparsers.add_parser(
        "generate",
        help="Write external annotation archives for type-model files",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        generate,
        "models",
        nargs="+",
        type=Path,
        metavar="MODEL",
        help="Type-model JSON files, one archive each.",
    )
    register_argument(
        generate,
        "--output-dir",
        type=Path,
        default=None,
        help="Directory receiving the archives (default: [output].directory).",
    )
    register_argument(
        generate,
        "--suffix",
        default=None,
        help=(
            "Archive name suffix (default: [output].suffix). "
            "Values starting with '-' need the --suffix=VALUE form."
        ),
    )
    register_config_option(generate)
    register_nullability_options(generate)


def format_result(result: ArchiveResult) -> str:
    """Return the one-line summary printed for an archive."""
    status = "annotated" if result.annotated else "empty"
    line = (
        f"[eeaforge] {result.path}: {status}, "
        f"{result.classes_annotated}/{result.classes_total} classes annotated"
    )
    if result.method_errors:
        line += f", {len(result.method_errors)} method error(s)"
    if result.class_errors:
        line += f", {len(result.class_errors)} class error(s)"
    return line


def execute_generate(args: argparse.Namespace) -> int:
    """Execute the generate subcommand.

    Args:
        args: Parsed CLI namespace.

    Returns:
        ``0`` when every class was processed, ``1`` when any class failed.
    """
    config = load_cli_config(args)
    nullability = resolve_nullability(args, config)
    output_dir: Path = args.output_dir if args.output_dir is not None else config.output.directory
    suffix: str = args.suffix or config.output.suffix
    results = generate_from_model_files(args.models, output_dir, nullability, suffix)
    for result in results:
        echo(format_result(result))
    return 1 if any(result.failed for result in results) else 0


__all__ = ["execute_generate", "format_result", "register_generate_command"]
