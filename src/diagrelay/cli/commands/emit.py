# topmark:header:start
#
#   project      : DiagRelay
#   file         : emit.py
#   file_relpath : src/diagrelay/cli/commands/emit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagRelay `emit` command.

Dispatches a single diagnostic through the warning policy and prints the
rendered report to stderr. Exits with `ExitCode.FAILURE` when the diagnostic
was emitted as an error.

Examples:
    ```console
    $ diagrelay emit --severity author_warning \
        --frame CMakeLists.txt:12:cmake_policy "Policy CMP0042 is not set."
    $ diagrelay emit -Werror=dev --severity dev_warning "Promoted to an error."
    $ echo "Text from a pipe" | diagrelay emit --severity warning -
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from diagrelay.api import build_dispatcher
from diagrelay.cli.cli_types import FrameParam, KeyedEnumParam
from diagrelay.cli.cmd_common import get_console, get_effective_verbosity
from diagrelay.cli.config_resolver import resolve_settings
from diagrelay.cli.keys import CliCmd, CliOpt
from diagrelay.cli.options import common_config_options, warning_flag_options
from diagrelay.cli.sink import ConsoleSink
from diagrelay.cli_shared.exit_codes import ExitCode
from diagrelay.config.logging import get_logger
from diagrelay.core.error_state import ErrorState
from diagrelay.core.model import Diagnostic
from diagrelay.core.severity import Severity
from diagrelay.rendering.backtrace import Backtrace
from diagrelay.rendering.stack import capture_program_stack

if TYPE_CHECKING:
    from diagrelay.cli_shared.console_api import ConsoleLike
    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.config.model import Settings
    from diagrelay.core.dispatch import Dispatcher
    from diagrelay.rendering.backtrace import Frame

logger: DiagrelayLogger = get_logger(__name__)

STDIN_SENTINEL: str = "-"


@click.command(
    name=CliCmd.EMIT,
    help="Classify, render and print one diagnostic. Use '-' as TEXT to read it from STDIN.",
)
@click.option(
    CliOpt.SEVERITY,
    "severity",
    type=KeyedEnumParam(Severity),
    default=Severity.WARNING.value,
    show_default=True,
    help="Severity the diagnostic is issued with (key, name or alias).",
)
@click.option(
    CliOpt.FRAME,
    "frames",
    multiple=True,
    callback=FrameParam,
    metavar="FILE[:LINE[:COMMAND]]",
    help="Call-context frame; repeat with the most recent frame first.",
)
@warning_flag_options
@common_config_options
@click.option(
    CliOpt.NO_STACK,
    "no_stack",
    is_flag=True,
    help="Do not append the program stack to internal errors.",
)
@click.argument("text")
def emit_command(
    *,
    severity: Severity,
    frames: list[Frame],
    warning_flags: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    no_stack: bool,
    text: str,
) -> None:
    """Emit one diagnostic.

    Args:
        severity (Severity): Severity before policy reclassification.
        frames (list[Frame]): Call context, most recent first.
        warning_flags (tuple[str, ...]): ``-W`` flags.
        config_paths (tuple[str, ...]): Explicit config files.
        no_config (bool): Disable config discovery.
        no_stack (bool): Omit the program stack from internal errors.
        text (str): Diagnostic text, or ``-`` for STDIN.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if text == STDIN_SENTINEL:
        text = click.get_text_stream("stdin").read()

    settings: Settings = resolve_settings(
        config_paths=config_paths,
        no_config=no_config,
        warning_flags=warning_flags,
    )
    error_state = ErrorState()
    dispatcher: Dispatcher = build_dispatcher(
        settings,
        sink=ConsoleSink(console),
        error_state=error_state,
        stack_capture=None if no_stack else capture_program_stack,
    )

    emitted: bool = dispatcher.dispatch(
        Diagnostic(severity, text, Backtrace.from_frames(frames)),
        settings.policy,
    )
    if not emitted and vlevel > 0:
        console.print(f"{severity.key}: suppressed by the warning policy")

    if error_state.error_occurred:
        logger.debug("Error-class diagnostic emitted; exiting with %s", ExitCode.FAILURE.name)
        ctx.exit(ExitCode.FAILURE)
