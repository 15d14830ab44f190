# topmark:header:start
#
#   project      : DiagRelay
#   file         : color.py
#   file_relpath : src/diagrelay/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for DiagRelay.

This module provides:

- the `ColorMode` enum;
- color-mode resolution based on CLI flags, environment and output format.

These helpers are kept Click-free so they can be reused from both command-line
entry points and tests.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from diagrelay.config.logging import get_logger

logger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when the stream is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: if `output_format` is ``"json"``, return False.
        2. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        3. **Environment**:
            - ``FORCE_COLOR`` (set and not ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        4. **Auto**: whether stderr (where reports go) is a TTY.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value; `None`
            means "not provided".
        output_format (str | None): Output format; ``"json"`` suppresses color.
        stream_isatty (bool | None): Override for TTY detection.

    Returns:
        bool: True if ANSI color should be enabled.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER, output_format=None)
        False
        >>> resolve_color_mode(color_mode_override=None, output_format="json")
        False
    """
    if output_format and output_format.lower() == "json":
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        try:
            stream_isatty = sys.stderr.isatty()
        except (OSError, ValueError):
            stream_isatty = False
    logger.debug("Color auto-detection: isatty=%s", stream_isatty)
    return bool(stream_isatty)
