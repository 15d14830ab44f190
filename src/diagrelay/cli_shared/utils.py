# topmark:header:start
#
#   project      : DiagRelay
#   file         : utils.py
#   file_relpath : src/diagrelay/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI helpers that do not depend on Click."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for listing commands.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = "default"
    JSON = "json"
