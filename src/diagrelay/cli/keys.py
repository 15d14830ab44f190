# topmark:header:start
#
#   project      : DiagRelay
#   file         : keys.py
#   file_relpath : src/diagrelay/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names, option spellings and context keys for DiagRelay.

Centralizing these values avoids string duplication between command definitions,
the shared state stored on ``click.Context.obj`` and the tests.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the DiagRelay CLI."""

    EMIT: Final[str] = "emit"
    SEVERITIES: Final[str] = "severities"
    POLICY: Final[str] = "policy"
    POLICY_SHOW: Final[str] = "show"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (values include the leading ``--``)."""

    SEVERITY: Final[str] = "--severity"
    FRAME: Final[str] = "--frame"
    WARNING_FLAG: Final[str] = "--warning"
    CONFIG_PATHS: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"
    NO_STACK: Final[str] = "--no-stack"
    OUTPUT_FORMAT: Final[str] = "--format"


class ArgKey:
    """Keys of the shared state stored on ``click.Context.obj``."""

    CONSOLE: Final[str] = "console"
    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_ENABLED: Final[str] = "color_enabled"
