# topmark:header:start
#
#   project      : DiagRelay
#   file         : model.py
#   file_relpath : src/diagrelay/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model for DiagRelay.

`MutableSettings` is a tri-state builder assembled from layered sources
(runtime defaults → discovered config files → explicit config files → ``-W``
flags) and merged last-wins. `Settings` is the frozen runtime snapshot handed to
[`diagrelay.api.build_dispatcher`][diagrelay.api.build_dispatcher].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diagrelay.config.getters import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    warn_unknown_keys,
)
from diagrelay.config.keys import Toml
from diagrelay.config.loaders import (
    ROOT_KEY,
    discover_config_files,
    extract_tool_table,
    load_toml_dict,
    to_toml,
)
from diagrelay.config.logging import get_logger
from diagrelay.config.policy import MutableWarningPolicy, WarningPolicy
from diagrelay.constants import DEFAULT_PRODUCT_NAME, DEFAULT_TEXT_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.config.types import TomlTable

logger: DiagrelayLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings.

    Attributes:
        policy (WarningPolicy): Resolved warning policy.
        product_name (str): Prefix used in report preambles.
        text_width (int): Column width for word-wrapping diagnostic text.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    policy: WarningPolicy = WarningPolicy()
    product_name: str = DEFAULT_PRODUCT_NAME
    text_width: int = DEFAULT_TEXT_WIDTH
    config_files: tuple[Path, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-compatible dict (config file schema)."""
        return {
            Toml.SECTION_WARNINGS: self.policy.to_dict(),
            Toml.SECTION_OUTPUT: {
                Toml.KEY_PRODUCT_NAME: self.product_name,
                Toml.KEY_TEXT_WIDTH: self.text_width,
            },
        }

    def to_toml(self) -> str:
        """Render the settings as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableSettings:
        """Return a mutable builder initialized from these settings."""
        return MutableSettings(
            policy=self.policy.thaw(),
            product_name=self.product_name,
            text_width=self.text_width,
            config_files=list(self.config_files),
        )


@dataclass
class MutableSettings:
    """Mutable builder for `Settings`.

    Attributes:
        policy (MutableWarningPolicy): Tri-state warning policy.
        product_name (str | None): See `Settings`. `None` means "inherit".
        text_width (int | None): See `Settings`. `None` means "inherit".
        config_files (list[Path]): Config files that contributed, in merge order.
    """

    policy: MutableWarningPolicy = field(default_factory=MutableWarningPolicy)
    product_name: str | None = None
    text_width: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def merge_with(self, other: MutableSettings) -> MutableSettings:
        """Return a new builder with ``other`` applied over ``self`` (last-wins).

        Args:
            other (MutableSettings): Higher-precedence settings.

        Returns:
            MutableSettings: Merged settings.
        """
        return MutableSettings(
            policy=self.policy.merge_with(other.policy),
            product_name=(
                other.product_name if other.product_name is not None else self.product_name
            ),
            text_width=other.text_width if other.text_width is not None else self.text_width,
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Settings:
        """Freeze this builder into immutable `Settings`, filling unset fields with defaults."""
        return Settings(
            policy=self.policy.resolve(WarningPolicy()),
            product_name=(
                self.product_name if self.product_name is not None else DEFAULT_PRODUCT_NAME
            ),
            text_width=self.text_width if self.text_width is not None else DEFAULT_TEXT_WIDTH,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableSettings:
        """Return a builder holding the runtime defaults (all fields explicit)."""
        return Settings().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableSettings:
        """Create a builder from a parsed DiagRelay table.

        Args:
            data (TomlTable): The DiagRelay table (``diagrelay.toml`` document or
                ``[tool.diagrelay]``).
            config_file (Path | None): Source file, for error messages and provenance.

        Returns:
            MutableSettings: Builder with only the keys present in ``data`` set.

        Raises:
            ConfigError: If a section or value has the wrong type.
        """
        warn_unknown_keys(
            data,
            (Toml.SECTION_WARNINGS, Toml.SECTION_OUTPUT, ROOT_KEY),
            section="<root>",
            path=config_file,
        )
        get_bool_value_or_none(data, ROOT_KEY, path=config_file)

        warnings_tbl: TomlTable = get_table_value(data, Toml.SECTION_WARNINGS, path=config_file)
        logger.trace("TOML [warnings]: %s", warnings_tbl)
        warn_unknown_keys(
            warnings_tbl, Toml.warning_keys(), section=Toml.SECTION_WARNINGS, path=config_file
        )

        output_tbl: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT, path=config_file)
        logger.trace("TOML [output]: %s", output_tbl)
        warn_unknown_keys(
            output_tbl, Toml.output_keys(), section=Toml.SECTION_OUTPUT, path=config_file
        )

        def _flag(key: str) -> bool | None:
            return get_bool_value_or_none(warnings_tbl, key, path=config_file)

        return cls(
            policy=MutableWarningPolicy(
                dev_warnings_as_errors=_flag(Toml.KEY_DEV_WARNINGS_AS_ERRORS),
                deprecated_warnings_as_errors=_flag(Toml.KEY_DEPRECATED_WARNINGS_AS_ERRORS),
                suppress_dev_warnings=_flag(Toml.KEY_SUPPRESS_DEV_WARNINGS),
                suppress_deprecated_warnings=_flag(Toml.KEY_SUPPRESS_DEPRECATED_WARNINGS),
            ),
            product_name=get_string_value_or_none(
                output_tbl, Toml.KEY_PRODUCT_NAME, path=config_file
            ),
            text_width=get_int_value_or_none(
                output_tbl, Toml.KEY_TEXT_WIDTH, minimum=10, path=config_file
            ),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSettings:
        """Load settings from a single TOML file.

        A ``pyproject.toml`` without ``[tool.diagrelay]`` yields an empty builder.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values.
        """
        logger.debug("Loading settings from %s", path)
        data: TomlTable = load_toml_dict(path)
        tool_tbl: TomlTable | None = extract_tool_table(data, path)
        if tool_tbl is None:
            logger.info("No [tool.diagrelay] section in %s", path)
            return cls(config_files=[path])
        return cls.from_toml_dict(tool_tbl, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        config_paths: Iterable[Path] = (),
        overlay_policy: MutableWarningPolicy | None = None,
    ) -> MutableSettings:
        """Build settings from all layered sources.

        Precedence (lowest to highest): runtime defaults, files discovered from
        ``start``, explicit ``config_paths`` (in order), ``overlay_policy``.

        Args:
            start (Path | None): Directory to start discovery from; ``None`` disables
                discovery.
            config_paths (Iterable[Path]): Explicit config files.
            overlay_policy (MutableWarningPolicy | None): Policy from ``-W`` flags.

        Returns:
            MutableSettings: The merged builder.
        """
        merged: MutableSettings = cls.from_defaults()
        discovered: list[Path] = discover_config_files(start) if start is not None else []
        for path in [*discovered, *config_paths]:
            merged = merged.merge_with(cls.from_toml_file(path))
        if overlay_policy is not None:
            merged = merged.merge_with(cls(policy=overlay_policy))
        logger.debug("Merged settings from %d config file(s)", len(merged.config_files))
        return merged

