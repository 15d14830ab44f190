# topmark:header:start
#
#   project      : DiagRelay
#   file         : reclassify.py
#   file_relpath : src/diagrelay/core/reclassify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Policy-driven severity reclassification.

Developer and deprecation diagnostics come in warning/error pairs. The
``*_warnings_as_errors`` policy flags pick which member of a pair a diagnostic
is reported as, in both directions:

| Input               | Flag true           | Flag false          |
| ------------------- | ------------------- | ------------------- |
| AUTHOR_WARNING      | AUTHOR_ERROR        | AUTHOR_WARNING      |
| AUTHOR_ERROR        | AUTHOR_ERROR        | AUTHOR_WARNING      |
| DEPRECATION_WARNING | DEPRECATION_ERROR   | DEPRECATION_WARNING |
| DEPRECATION_ERROR   | DEPRECATION_ERROR   | DEPRECATION_WARNING |

The mapping is applied once, never iterated: reclassifying an already
reclassified severity under the same policy returns it unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagrelay.core.severity import Severity

if TYPE_CHECKING:
    from diagrelay.config.policy import PolicyStore


def _pick(severity: Severity, *, as_errors: bool, warning: Severity, error: Severity) -> Severity:
    if as_errors and severity is warning:
        return error
    if not as_errors and severity is error:
        return warning
    return severity


def reclassify(severity: Severity, policy: PolicyStore) -> tuple[Severity, bool]:
    """Apply the warnings-as-errors policy to ``severity``.

    Args:
        severity (Severity): Severity the diagnostic was issued with.
        policy (PolicyStore): Current warning policy (read on every call).

    Returns:
        tuple[Severity, bool]: The effective severity and ``forced``, which is True
        exactly when the effective severity differs from the input. A forced
        diagnostic bypasses visibility filtering.
    """
    effective: Severity = severity
    if severity.in_dev_pair:
        effective = _pick(
            severity,
            as_errors=policy.dev_warnings_as_errors,
            warning=Severity.AUTHOR_WARNING,
            error=Severity.AUTHOR_ERROR,
        )
    elif severity.in_deprecation_pair:
        effective = _pick(
            severity,
            as_errors=policy.deprecated_warnings_as_errors,
            warning=Severity.DEPRECATION_WARNING,
            error=Severity.DEPRECATION_ERROR,
        )
    return effective, effective is not severity
