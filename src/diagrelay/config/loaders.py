# topmark:header:start
#
#   project      : DiagRelay
#   file         : loaders.py
#   file_relpath : src/diagrelay/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading DiagRelay configuration from
on-disk TOML files (``diagrelay.toml`` / ``pyproject.toml``) and for rendering
resolved settings back to TOML text.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from diagrelay.config.errors import ConfigError
from diagrelay.config.getters import get_bool_value_or_none
from diagrelay.config.keys import Toml
from diagrelay.config.logging import get_logger
from diagrelay.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.config.types import TomlTable

logger: DiagrelayLogger = get_logger(__name__)

# Top-level key that stops upward discovery after the current directory.
ROOT_KEY: str = "root"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``diagrelay.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"cannot read config file: {e}", path=path) from e
    except TomlkitParseError as e:
        raise ConfigError(f"invalid TOML: {e}", path=path) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the DiagRelay table from a parsed config document.

    For ``pyproject.toml`` this is ``[tool.diagrelay]``; for ``diagrelay.toml``
    it is the whole document.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): Path the document was read from.

    Returns:
        TomlTable | None: The DiagRelay table, or None when a ``pyproject.toml``
        has no ``[tool.diagrelay]`` section.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool_any: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool_any, dict):
        return None
    tool_tbl: Any = cast("TomlTable", tool_any).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", tool_tbl) if isinstance(tool_tbl, dict) else None


def discover_config_files(start: Path) -> list[Path]:
    """Return config files discovered by walking upward from ``start``.

    Discovery semantics:
      * Directories are visited from ``start`` up to the filesystem root and the
        result is ordered **root-most first, nearest last**, so a later
        last-wins merge gives precedence to the nearest file.
      * Within one directory, ``pyproject.toml`` (only when it carries a
        ``[tool.diagrelay]`` section) comes before ``diagrelay.toml``.
      * A file declaring ``root = true`` stops the walk after its directory.
      * A candidate file that cannot be read or parsed is logged and skipped, so an
        unrelated broken ``pyproject.toml`` in a parent directory does not block
        discovery. Explicit config files are loaded by the caller and still fail hard.

    Args:
        start (Path): Directory (or file within it) where discovery starts.

    Returns:
        list[Path]: Discovered config file paths in merge order.

    Raises:
        ConfigError: If a discovered DiagRelay table has a non-boolean ``root`` key.
    """
    per_dir: list[list[Path]] = []
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        root_stop_here = False
        dir_entries: list[Path] = []

        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            p: Path = cur / name
            if not p.is_file():
                continue
            try:
                data: TomlTable = load_toml_dict(p)
            except ConfigError as e:
                logger.warning("Skipping config candidate during discovery: %s", e)
                continue
            tool_tbl: TomlTable | None = extract_tool_table(data, p)
            if tool_tbl is None:
                continue
            logger.debug("Discovered config file: %s", p)
            dir_entries.append(p)
            if get_bool_value_or_none(tool_tbl, ROOT_KEY, path=p):
                root_stop_here = True

        if dir_entries:
            per_dir.append(dir_entries)

        parent: Path = cur.parent
        if parent == cur or root_stop_here:
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
            break
        cur = parent

    ordered: list[Path] = []
    for dir_list in reversed(per_dir):
        ordered.extend(dir_list)
    return ordered


def to_toml(data: Mapping[str, Any]) -> str:
    """Render a mapping as a TOML document.

    ``None`` values are dropped since TOML has no null.

    Args:
        data (Mapping[str, Any]): Table to render; nested mappings become tables.

    Returns:
        str: TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in data.items():
        if value is None:
            logger.debug("Ignoring `None` entry for key %s", key)
            continue
        if isinstance(value, dict):
            table = tomlkit.table()
            for sub_key, sub_value in cast("dict[str, Any]", value).items():
                if sub_value is not None:
                    table.add(sub_key, sub_value)
            doc.add(key, table)
        else:
            doc.add(key, value)
    return tomlkit.dumps(doc)
