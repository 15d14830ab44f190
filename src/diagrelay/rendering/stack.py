# topmark:header:start
#
#   project      : DiagRelay
#   file         : stack.py
#   file_relpath : src/diagrelay/rendering/stack.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program stack capture for internal-error reports."""

from __future__ import annotations

import traceback

STACK_TRACE_PREFIX: str = "WARNING: Stack trace of the reporting process:"


def capture_program_stack() -> str:
    """Return the formatted Python stack of the caller.

    The text starts with ``WARNING:``; the renderer rewrites that token to
    ``Note:`` when appending it to a report.

    Returns:
        str: The prefixed stack trace, without a trailing newline.
    """
    # Drop this function's own frame
    frames: list[str] = traceback.format_stack()[:-1]
    return STACK_TRACE_PREFIX + "\n" + "".join(frames).rstrip("\n")
