# topmark:header:start
#
#   project      : DiagRelay
#   file         : severities.py
#   file_relpath : src/diagrelay/cli/commands/severities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagRelay `severities` command.

Lists every severity with its machine key, report title, color and preamble.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from diagrelay.cli.cmd_common import get_console, get_effective_verbosity
from diagrelay.cli.keys import ArgKey, CliCmd
from diagrelay.cli.options import output_format_option
from diagrelay.cli_shared.utils import OutputFormat
from diagrelay.constants import DEFAULT_PRODUCT_NAME
from diagrelay.core.severity import Severity

if TYPE_CHECKING:
    from diagrelay.cli_shared.console_api import ConsoleLike


def severity_to_dict(severity: Severity, product_name: str) -> dict[str, Any]:
    """Return a JSON-friendly description of ``severity``."""
    return {
        "key": severity.key,
        "name": severity.name,
        "label": severity.label,
        "aliases": list(severity.aliases),
        "title": severity.report_title.value,
        "color": severity.message_color.value,
        "is_error": severity.is_error,
        "preamble": severity.preamble(product_name),
    }


@click.command(
    name=CliCmd.SEVERITIES,
    help="List the diagnostic severities and how they are reported.",
)
@click.option(
    "--product-name",
    "product_name",
    default=DEFAULT_PRODUCT_NAME,
    show_default=True,
    help="Product name used in the listed preambles.",
)
@output_format_option
def severities_command(*, product_name: str, output_format: OutputFormat | None = None) -> None:
    """List severities.

    Args:
        product_name (str): Preamble prefix.
        output_format (OutputFormat | None): Output format (default or json).
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(
            json.dumps([severity_to_dict(s, product_name) for s in Severity], indent=2)
        )
        return

    color_enabled: bool = bool(ctx.obj.get(ArgKey.COLOR_ENABLED, False))
    key_width: int = max(len(s.key) for s in Severity)
    if vlevel > 0:
        console.print(console.styled("Diagnostic severities:\n", bold=True, underline=True))
    for s in Severity:
        preamble: str = s.preamble(product_name)
        if color_enabled:
            preamble = s.message_color.color(preamble)
        line: str = f"{s.key:<{key_width}}  {s.report_title.value:<7}  {preamble}"
        if vlevel > 0:
            line += f"  - {s.label}"
        console.print(line)
