# topmark:header:start
#
#   project      : DiagRelay
#   file         : version.py
#   file_relpath : src/diagrelay/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagRelay `version` command.

Prints the current DiagRelay version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from diagrelay.cli.cmd_common import get_console, get_effective_verbosity
from diagrelay.cli.keys import CliCmd
from diagrelay.cli.options import output_format_option
from diagrelay.cli_shared.utils import OutputFormat
from diagrelay.constants import DIAGRELAY_VERSION

if TYPE_CHECKING:
    from diagrelay.cli_shared.console_api import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of DiagRelay.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of DiagRelay.

    Args:
        output_format (OutputFormat | None): Optional output format (default or json).
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": DIAGRELAY_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("DiagRelay version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DIAGRELAY_VERSION, bold=True)}")
    else:
        console.print(console.styled(DIAGRELAY_VERSION, bold=True))
