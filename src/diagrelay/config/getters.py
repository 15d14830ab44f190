# topmark:header:start
#
#   project      : DiagRelay
#   file         : getters.py
#   file_relpath : src/diagrelay/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Missing keys yield ``None`` (meaning "inherit"); present keys with the wrong
type raise [`ConfigError`][diagrelay.config.errors.ConfigError]. Unknown keys
are reported through `warn_unknown_keys` as log warnings and otherwise ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from diagrelay.config.errors import ConfigError
from diagrelay.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.config.types import TomlTable

logger: DiagrelayLogger = get_logger(__name__)


def get_table_value(table: TomlTable, key: str, *, path: Path | None = None) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.
        path (Path | None): Source file, used in error messages.

    Returns:
        TomlTable: The sub-table as a plain dict, or an empty dict when missing.

    Raises:
        ConfigError: If the key is present but not a table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"[{key}] must be a table, got {type(value).__name__}", path=path)
    return dict(cast("Mapping[str, Any]", value))


def get_bool_value_or_none(table: TomlTable, key: str, *, path: Path | None = None) -> bool | None:
    """Extract an optional boolean from a TOML table.

    Raises:
        ConfigError: If the key is present but not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got {value!r}", path=path)
    return value


def get_string_value_or_none(table: TomlTable, key: str, *, path: Path | None = None) -> str | None:
    """Extract an optional non-empty string from a TOML table.

    Raises:
        ConfigError: If the key is present but not a non-empty string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string, got {value!r}", path=path)
    return value


def get_int_value_or_none(
    table: TomlTable,
    key: str,
    *,
    minimum: int = 1,
    path: Path | None = None,
) -> int | None:
    """Extract an optional integer (``>= minimum``) from a TOML table.

    Booleans are rejected even though ``bool`` is an ``int`` subclass.

    Raises:
        ConfigError: If the key is present but not an integer in range.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(f"'{key}' must be an integer >= {minimum}, got {value!r}", path=path)
    return value


def warn_unknown_keys(
    table: TomlTable,
    known: Iterable[str],
    *,
    section: str,
    path: Path | None = None,
) -> list[str]:
    """Log a warning for each key in ``table`` that is not in ``known``.

    Returns:
        list[str]: The unknown keys, sorted.
    """
    unknown: list[str] = sorted(set(table) - set(known))
    for key in unknown:
        logger.warning(
            "Ignoring unknown key '%s' in [%s]%s",
            key,
            section,
            f" ({path})" if path is not None else "",
        )
    return unknown
