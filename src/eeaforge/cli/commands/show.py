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

"""``eeaforge show``: print the ``.eea`` records of a type model."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from eeaforge._internal.exceptions import format_causal_chain
from eeaforge.annotations import AnnotationDiffEngine, ClassAnnotationError, MethodAnnotationError
from eeaforge.cli.helpers import (
    echo,
    load_cli_config,
    register_argument,
    register_config_option,
    register_nullability_options,
    resolve_nullability,
)
from eeaforge.metadata import load_type_model

if TYPE_CHECKING:
    from eeaforge.cli.helpers import SubparserRegistry


def register_show_command(subparsers: SubparserRegistry) -> None:
    """Attach the ``eeaforge show`` command to the CLI."""
    show = subparsers.add_parser(
        "show",
        help="Print the external annotation records of a type model",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(show, "model", type=Path, metavar="MODEL", help="Type-model JSON file.")
    register_argument(
        show,
        "--class",
        dest="class_names",
        action="append",
        default=None,
        metavar="NAME",
        help="Binary class name to show (repeatable; default: all annotated classes).",
    )
    register_config_option(show)
    register_nullability_options(show)


def _report_method_error(error: MethodAnnotationError) -> None:
    echo(f"[eeaforge] {format_causal_chain(error)}", err=True)


def execute_show(args: argparse.Namespace) -> int:
    """Execute the show subcommand.

    Args:
        args: Parsed CLI namespace.

    Returns:
        ``0`` on success, ``1`` when a requested class is missing or a class
        could not be rendered.
    """
    config = load_cli_config(args)
    engine = AnnotationDiffEngine(resolve_nullability(args, config))
    model = load_type_model(args.model)
    exit_code = 0
    if args.class_names:
        classes = []
        for name in args.class_names:
            cls = model.find_class(name)
            if cls is None:
                echo(f"[eeaforge] Class not found in {args.model}: {name}", err=True)
                exit_code = 1
                continue
            classes.append(cls)
    else:
        classes = sorted(model.classes, key=lambda item: item.name)

    for cls in classes:
        try:
            record = engine.diff(cls, _report_method_error)
        except ClassAnnotationError as exc:
            echo(f"[eeaforge] {format_causal_chain(exc)}", err=True)
            exit_code = 1
            continue
        if not record.annotated:
            if args.class_names:
                echo(f"# {record.entry_name} (not annotated)")
            continue
        echo(f"# {record.entry_name}")
        echo(record.body, newline=False)
    return exit_code


__all__ = ["execute_show", "register_show_command"]
