# topmark:header:start
#
#   project      : DiagRelay
#   file         : policy.py
#   file_relpath : src/diagrelay/cli/commands/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagRelay `policy` command group.

`policy show` prints the resolved settings (defaults, then config files, then
``-W`` flags) as a TOML document in the config file schema.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from diagrelay.cli.cmd_common import get_console, get_effective_verbosity
from diagrelay.cli.config_resolver import resolve_settings
from diagrelay.cli.keys import CliCmd
from diagrelay.cli.options import common_config_options, warning_flag_options

if TYPE_CHECKING:
    from diagrelay.cli_shared.console_api import ConsoleLike
    from diagrelay.config.model import Settings


@click.group(name=CliCmd.POLICY, help="Inspect the effective warning policy.")
def policy_group() -> None:
    """Warning policy commands."""


@policy_group.command(
    name=CliCmd.POLICY_SHOW,
    help="Print the resolved settings as TOML.",
)
@warning_flag_options
@common_config_options
def policy_show_command(
    *,
    warning_flags: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Show the resolved settings.

    With ``-v`` the contributing config files are listed as TOML comments.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    settings: Settings = resolve_settings(
        config_paths=config_paths,
        no_config=no_config,
        warning_flags=warning_flags,
    )

    if get_effective_verbosity(ctx) > 0:
        if settings.config_files:
            for path in settings.config_files:
                console.print(f"# config file: {path}")
        else:
            console.print("# config file: (none)")
    console.print(settings.to_toml(), nl=False)
