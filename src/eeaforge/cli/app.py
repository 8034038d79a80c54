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

"""CLI entry point and orchestration for eeaforge commands."""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Callable, Sequence
from contextlib import suppress
from textwrap import dedent
from typing import Final

from eeaforge import __version__
from eeaforge._internal.error_codes import error_code_for
from eeaforge._internal.exceptions import EeaforgeError
from eeaforge._internal.logging_utils import structured_extra
from eeaforge.cli.commands import generate as generate_command
from eeaforge.cli.commands import show as show_command
from eeaforge.cli.helpers import SubparserRegistry
from eeaforge.cli.helpers import echo as _echo
from eeaforge.cli.helpers import register_argument as _register_argument
from eeaforge.config.constants import DEFAULT_CONFIG_FILENAME
from eeaforge.core.model_types import LogComponent, LogFormat
from eeaforge.logging import LOG_FORMATS, LOG_LEVELS, configure_logging

logger: logging.Logger = logging.getLogger("eeaforge.cli")

EEAFORGE_VERSION: Final[str] = __version__
EXIT_ERROR: Final[int] = 2

CONFIG_TEMPLATE: Final[str] = dedent(
    """\
    # eeaforge configuration template
    # Save this file as eeaforge.toml in the root of your project, or move the
    # tables below under [tool.eeaforge] in pyproject.toml.
    config_version = 0

    [nullability]
    # Annotation names recognised on parameters, methods and packages.
    nullable = "javax.annotation.Nullable"
    nonnull = "javax.annotation.Nonnull"
    parameters_nonnull_by_default = "javax.annotation.ParametersAreNonnullByDefault"

    # Nullness assumed when an element declares no marker.
    # choices: nullable, nonnull, undefined
    # parameter_default = "undefined"
    # return_default = "undefined"

    [output]
    # Relative directories resolve against this file's directory.
    directory = "build/annotations"
    suffix = "-annotations.zip"
    """,
)

CommandHandler = Callable[[argparse.Namespace], int]


def write_config_template(path: pathlib.Path, *, force: bool) -> int:
    """Write the eeaforge configuration template to a file.

    Args:
        path: Target path where the configuration file will be written.
        force: If True, overwrite the file if it already exists. If False, refuse to overwrite.

    Returns:
        int: Exit code (0 for success, 1 for failure).
    """
    if path.exists() and not force:
        _echo(f"[eeaforge] Refusing to overwrite existing file: {path}")
        _echo("Use --force if you want to replace it.")
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    _echo(f"[eeaforge] Wrote starter config to {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the eeaforge command-line interface.

    Parses command-line arguments, configures logging, and dispatches to the appropriate
    command handler. Structured eeaforge errors are logged with their error code.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler, or ``2`` when an
        eeaforge error aborted the command.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"eeaforge {EEAFORGE_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(args.log_format, args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        return handler(args)
    except EeaforgeError as exc:
        code = error_code_for(exc)
        logger.error(  # noqa: TRY400 # JUSTIFIED: expected failures are reported without a traceback
            "(%s) %s",
            code,
            exc,
            extra=structured_extra(component=LogComponent.CLI, error_code=code),
        )
        return EXIT_ERROR


def _build_parser() -> argparse.ArgumentParser:
    """Build and configure the main argument parser for the eeaforge CLI.

    Returns:
        argparse.ArgumentParser: Fully configured argument parser ready to parse CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="eeaforge",
        description="Generate Eclipse external nullness annotations from type models.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Select logging output format (human-readable text or structured JSON).",
    )
    _register_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="Set verbosity of logged events.",
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the eeaforge version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate_command.register_generate_command(subparsers)
    show_command.register_show_command(subparsers)
    _register_init_command(subparsers)
    return parser


def _register_init_command(subparsers: SubparserRegistry) -> None:
    """Register the 'init' subcommand, which writes a starter eeaforge.toml."""
    init = subparsers.add_parser(
        "init",
        help="Generate a starter configuration file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        init,
        "--save-as",
        "-o",
        dest="output",
        type=pathlib.Path,
        default=pathlib.Path(DEFAULT_CONFIG_FILENAME),
        help="Destination for the generated configuration file.",
    )
    _register_argument(
        init,
        "--force",
        action="store_true",
        help="Overwrite the output file if it already exists.",
    )


def _initialize_logging(log_format: str, log_level: str) -> None:
    with suppress(Exception):  # best-effort logger init
        _ = configure_logging(LogFormat.from_str(log_format), log_level=log_level)


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "generate": generate_command.execute_generate,
        "init": _execute_init,
        "show": show_command.execute_show,
    }


def _execute_init(args: argparse.Namespace) -> int:
    return write_config_template(args.output, force=args.force)


__all__ = ["CONFIG_TEMPLATE", "main", "write_config_template"]
