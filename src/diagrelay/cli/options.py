# topmark:header:start
#
#   project      : DiagRelay
#   file         : options.py
#   file_relpath : src/diagrelay/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based DiagRelay CLI.

This module centralizes reusable options (verbosity, color, configuration,
warning flags, output format) and their resolution logic, so commands and
groups can stay thin.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from diagrelay.cli.cli_types import EnumChoiceParam
from diagrelay.cli.errors import DiagrelayUsageError
from diagrelay.cli.keys import CliOpt
from diagrelay.cli_shared.color import ColorMode
from diagrelay.cli_shared.utils import OutputFormat

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``verbose_count`` when positive, ``-1`` when quiet, else ``0``.

    Raises:
        DiagrelayUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DiagrelayUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return min(verbose_count, 2)
    if quiet_count > 0:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program-output verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Reduce program output to the diagnostics themselves.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options to a command."""
    f = click.option(
        CliOpt.CONFIG_PATHS,
        "config_paths",
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        multiple=True,
        help="Extra config file(s) merged after discovered ones (diagrelay.toml or "
        "pyproject.toml).",
    )(f)
    f = click.option(
        CliOpt.NO_CONFIG,
        "no_config",
        is_flag=True,
        help="Do not discover config files from the working directory upwards.",
    )(f)
    return f


def warning_flag_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the repeatable ``-W`` warning flag option to a command.

    ``-Wno-dev`` and ``-W no-dev`` both deliver ``no-dev``.
    """
    f = click.option(
        "-W",
        CliOpt.WARNING_FLAG,
        "warning_flags",
        multiple=True,
        metavar="FLAG",
        help="Warning flag: dev, no-dev, error=dev, no-error=dev "
        "(same forms for 'deprecated'). Applied left to right.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` option (default, json) to a command."""
    f = click.option(
        CliOpt.OUTPUT_FORMAT,
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
    return f
