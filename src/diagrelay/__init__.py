# topmark:header:start
#
#   project      : DiagRelay
#   file         : __init__.py
#   file_relpath : src/diagrelay/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagRelay package.

DiagRelay classifies and renders build diagnostics. It applies a user warning
policy (warnings-as-errors, suppression), decides which diagnostics are shown,
renders human-readable reports with call context and hands them to an output
sink. It exposes both a CLI and a small typed API (`diagrelay.api`).
"""

from __future__ import annotations
