# topmark:header:start
#
#   project      : DiagRelay
#   file         : main.py
#   file_relpath : src/diagrelay/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagRelay command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from diagrelay.cli.commands.emit import emit_command
from diagrelay.cli.commands.policy import policy_group
from diagrelay.cli.commands.severities import severities_command
from diagrelay.cli.commands.version import version_command
from diagrelay.cli.console import ClickConsole
from diagrelay.cli.errors import DiagrelayUnexpectedError
from diagrelay.cli.keys import ArgKey
from diagrelay.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from diagrelay.cli_shared.color import ColorMode, resolve_color_mode
from diagrelay.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from diagrelay.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


class DiagrelayGroup(click.Group):
    """Click group that reports unhandled exceptions as `DiagrelayUnexpectedError`.

    Click's own exceptions and exits pass through unchanged. Anything else exits
    with `UNEXPECTED_ERROR` (255), keeping exit status 1 for emitted errors.
    """

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the group, translating unexpected exceptions."""
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as e:
            logger.exception("Unhandled exception in command")
            raise DiagrelayUnexpectedError(f"unexpected {type(e).__name__}: {e}") from e


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj[ArgKey.VERBOSITY_LEVEL] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj[ArgKey.LOG_LEVEL] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    enable_color: bool = resolve_color_mode(
        color_mode_override=effective_color_mode,
        output_format=None,
    )
    ctx.obj[ArgKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color

    ctx.obj[ArgKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=DiagrelayGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DiagRelay: classify and render build diagnostics.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the DiagRelay CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj[ArgKey.CONSOLE]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'diagrelay emit --severity KEY TEXT' to report a diagnostic.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(severities_command)

cli.add_command(policy_group)

cli.add_command(emit_command)

if __name__ == "__main__":
    cli()
