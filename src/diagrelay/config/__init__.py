# topmark:header:start
#
#   project      : DiagRelay
#   file         : __init__.py
#   file_relpath : src/diagrelay/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for DiagRelay.

This package holds the warning policy model, the layered settings builder,
TOML loading/rendering via `tomlkit`, ``-W`` flag parsing and the project
logging setup.
"""

from __future__ import annotations

from diagrelay.config.errors import ConfigError, WarningFlagError
from diagrelay.config.model import MutableSettings, Settings
from diagrelay.config.policy import MutableWarningPolicy, PolicyStore, WarningPolicy
from diagrelay.config.warning_flags import policy_from_warning_flags

__all__ = [
    "ConfigError",
    "MutableSettings",
    "MutableWarningPolicy",
    "PolicyStore",
    "Settings",
    "WarningFlagError",
    "WarningPolicy",
    "policy_from_warning_flags",
]
