# topmark:header:start
#
#   project      : DiagRelay
#   file         : visibility.py
#   file_relpath : src/diagrelay/core/visibility.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Visibility rules for (reclassified) severities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagrelay.core.severity import Severity

if TYPE_CHECKING:
    from diagrelay.config.policy import PolicyStore


def is_visible(severity: Severity, policy: PolicyStore) -> bool:
    """Return True if a diagnostic of ``severity`` should produce output.

    Evaluate this on the severity *after* reclassification.

    * `DEPRECATION_ERROR` is shown only when deprecation warnings are errors.
    * `DEPRECATION_WARNING` is shown unless deprecation warnings are suppressed.
    * `AUTHOR_ERROR` is shown only when developer warnings are errors.
    * `AUTHOR_WARNING` is shown unless developer warnings are suppressed.
    * Every other severity is always shown.

    Args:
        severity (Severity): The effective severity.
        policy (PolicyStore): Current warning policy.

    Returns:
        bool: Whether the diagnostic is visible.
    """
    if severity is Severity.DEPRECATION_ERROR:
        return policy.deprecated_warnings_as_errors
    if severity is Severity.DEPRECATION_WARNING:
        return not policy.suppress_deprecated_warnings
    if severity is Severity.AUTHOR_ERROR:
        return policy.dev_warnings_as_errors
    if severity is Severity.AUTHOR_WARNING:
        return not policy.suppress_dev_warnings
    return True
