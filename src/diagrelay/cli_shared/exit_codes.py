# topmark:header:start
#
#   project      : DiagRelay
#   file         : exit_codes.py
#   file_relpath : src/diagrelay/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DiagRelay CLI.

DiagRelay aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. ``FAILURE`` (1) signals that an
error-class diagnostic was emitted, mirroring a build tool that reports errors and
exits non-zero.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DiagRelay CLI.

    Attributes:
        SUCCESS: Successful execution; no error-class diagnostic was emitted.
        FAILURE: An error-class diagnostic was emitted (or a generic failure).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (unreadable/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
