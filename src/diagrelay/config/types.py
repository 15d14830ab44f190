# topmark:header:start
#
#   project      : DiagRelay
#   file         : types.py
#   file_relpath : src/diagrelay/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typing aliases for TOML configuration data."""

from __future__ import annotations

from typing import Any

# A parsed TOML table, converted to plain Python containers.
TomlTable = dict[str, Any]
