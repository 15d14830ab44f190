# topmark:header:start
#
#   project      : DiagRelay
#   file         : cmd_common.py
#   file_relpath : src/diagrelay/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by DiagRelay CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagrelay.cli.keys import ArgKey

if TYPE_CHECKING:
    import click

    from diagrelay.cli_shared.console_api import ConsoleLike


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj[ArgKey.CONSOLE]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` terse, ``>0`` verbose)."""
    return int(ctx.obj.get(ArgKey.VERBOSITY_LEVEL, 0))
