# topmark:header:start
#
#   project      : DiagRelay
#   file         : config_resolver.py
#   file_relpath : src/diagrelay/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve runtime `Settings` from CLI inputs.

Layering (lowest to highest precedence): runtime defaults, config files
discovered from the working directory (unless ``--no-config``), explicit
``--config`` files, ``-W`` flags. Library errors are translated to CLI errors
with the matching exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from diagrelay.cli.errors import DiagrelayConfigError, DiagrelayUsageError
from diagrelay.config.errors import ConfigError, WarningFlagError
from diagrelay.config.logging import get_logger
from diagrelay.config.model import MutableSettings
from diagrelay.config.warning_flags import policy_from_warning_flags

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.config.model import Settings
    from diagrelay.config.policy import MutableWarningPolicy

logger: DiagrelayLogger = get_logger(__name__)


def resolve_settings(
    *,
    config_paths: Iterable[str] = (),
    no_config: bool = False,
    warning_flags: Iterable[str] = (),
    cwd: Path | None = None,
) -> Settings:
    """Build frozen settings from CLI options.

    Args:
        config_paths (Iterable[str]): Values of ``--config``.
        no_config (bool): Skip config discovery.
        warning_flags (Iterable[str]): Values of ``-W``, in command-line order.
        cwd (Path | None): Discovery start; defaults to the current directory.

    Returns:
        Settings: The resolved settings.

    Raises:
        DiagrelayUsageError: If a ``-W`` flag is invalid.
        DiagrelayConfigError: If a config file is unreadable or invalid.
    """
    try:
        overlay: MutableWarningPolicy = policy_from_warning_flags(warning_flags)
    except WarningFlagError as exc:
        raise DiagrelayUsageError(str(exc)) from exc

    start: Path | None = None if no_config else (cwd or Path.cwd())
    try:
        builder: MutableSettings = MutableSettings.load_merged(
            start=start,
            config_paths=[Path(p) for p in config_paths],
            overlay_policy=overlay,
        )
    except ConfigError as exc:
        raise DiagrelayConfigError(str(exc)) from exc

    settings: Settings = builder.freeze()
    logger.debug("Resolved settings: %s", settings)
    return settings
