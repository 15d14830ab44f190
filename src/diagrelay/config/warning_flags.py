# topmark:header:start
#
#   project      : DiagRelay
#   file         : warning_flags.py
#   file_relpath : src/diagrelay/config/warning_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compiler-style ``-W`` flags for the warning policy.

Users steer the warning policy with the same flags the suppression hints print:

| Flag               | Effect on the category level                  |
| ------------------ | --------------------------------------------- |
| ``-W<cat>``        | ``WARN``                                      |
| ``-Wno-<cat>``     | ``IGNORE``                                    |
| ``-Werror=<cat>``  | ``ERROR``                                     |
| ``-Wno-error=<cat>`` | ``min(level, WARN)`` (``WARN`` if unset)    |

Categories are ``dev`` and ``deprecated``. Flags are applied left to right.
A ``dev`` level also sets the ``deprecated`` policy fields unless a
``deprecated`` flag was given explicitly.

The result is a tri-state [`MutableWarningPolicy`][diagrelay.config.policy.MutableWarningPolicy]
in which only the fields touched by the flags are set, so it can be merged on top
of configuration files.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING

from diagrelay.config.errors import WarningFlagError
from diagrelay.config.logging import get_logger
from diagrelay.config.policy import MutableWarningPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagrelay.config.logging import DiagrelayLogger

logger: DiagrelayLogger = get_logger(__name__)

_FLAG_PREFIX: str = "-W"
_NO_ERROR_PREFIX: str = "no-error="
_ERROR_PREFIX: str = "error="
_NO_PREFIX: str = "no-"


class DiagLevel(IntEnum):
    """Requested level for a warning category, ordered by strictness."""

    IGNORE = 0
    WARN = 1
    ERROR = 2


class WarningCategory(str, Enum):
    """Warning categories addressable with ``-W`` flags."""

    DEV = "dev"
    DEPRECATED = "deprecated"


def _parse_category(name: str, flag: str) -> WarningCategory:
    try:
        return WarningCategory(name)
    except ValueError:
        known: str = ", ".join(c.value for c in WarningCategory)
        raise WarningFlagError(
            f"Unknown warning category '{name}' in flag '{flag}' (known: {known})"
        ) from None


def apply_warning_flag(levels: dict[WarningCategory, DiagLevel], flag: str) -> None:
    """Apply a single ``-W`` flag to ``levels`` in place.

    Both ``-Wno-dev`` and ``no-dev`` spellings are accepted (Click delivers the
    latter for ``-W no-dev`` and ``-Wno-dev`` alike).

    Args:
        levels (dict[WarningCategory, DiagLevel]): Levels collected so far.
        flag (str): The flag to apply.

    Raises:
        WarningFlagError: If the flag is malformed or names an unknown category.
    """
    body: str = flag.strip()
    if body.startswith(_FLAG_PREFIX):
        body = body[len(_FLAG_PREFIX) :]
    if not body:
        raise WarningFlagError(f"Empty warning flag: '{flag}'")

    if body.startswith(_NO_ERROR_PREFIX):
        category: WarningCategory = _parse_category(body[len(_NO_ERROR_PREFIX) :], flag)
        current: DiagLevel | None = levels.get(category)
        levels[category] = DiagLevel.WARN if current is None else min(current, DiagLevel.WARN)
    elif body.startswith(_ERROR_PREFIX):
        category = _parse_category(body[len(_ERROR_PREFIX) :], flag)
        levels[category] = DiagLevel.ERROR
    elif body.startswith(_NO_PREFIX):
        category = _parse_category(body[len(_NO_PREFIX) :], flag)
        levels[category] = DiagLevel.IGNORE
    else:
        category = _parse_category(body, flag)
        levels[category] = DiagLevel.WARN
    logger.trace("Warning flag %r -> %s=%s", flag, category.value, levels[category].name)


def parse_warning_flags(flags: Iterable[str]) -> dict[WarningCategory, DiagLevel]:
    """Parse ``-W`` flags left to right into per-category levels.

    Args:
        flags (Iterable[str]): Flags such as ``"-Wno-dev"`` or ``"error=deprecated"``.

    Returns:
        dict[WarningCategory, DiagLevel]: Levels for the categories the flags touched.
    """
    levels: dict[WarningCategory, DiagLevel] = {}
    for flag in flags:
        apply_warning_flag(levels, flag)
    return levels


def _fields_for(level: DiagLevel) -> tuple[bool, bool]:
    """Return ``(as_errors, suppress)`` for a level."""
    if level is DiagLevel.IGNORE:
        return False, True
    if level is DiagLevel.WARN:
        return False, False
    return True, False


def policy_from_levels(levels: dict[WarningCategory, DiagLevel]) -> MutableWarningPolicy:
    """Translate category levels into a tri-state policy overlay.

    Args:
        levels (dict[WarningCategory, DiagLevel]): Output of `parse_warning_flags`.

    Returns:
        MutableWarningPolicy: Overlay with only the affected fields set.
    """
    overlay = MutableWarningPolicy()

    deprecated_level: DiagLevel | None = levels.get(WarningCategory.DEPRECATED)
    dev_level: DiagLevel | None = levels.get(WarningCategory.DEV)
    if deprecated_level is None:
        # The dev level also governs deprecation warnings unless those were set explicitly
        deprecated_level = dev_level

    if dev_level is not None:
        overlay.dev_warnings_as_errors, overlay.suppress_dev_warnings = _fields_for(dev_level)
    if deprecated_level is not None:
        (
            overlay.deprecated_warnings_as_errors,
            overlay.suppress_deprecated_warnings,
        ) = _fields_for(deprecated_level)
    return overlay


def policy_from_warning_flags(flags: Iterable[str]) -> MutableWarningPolicy:
    """Parse ``-W`` flags into a tri-state policy overlay.

    Example:
        ```python
        overlay = policy_from_warning_flags(["-Werror=dev", "-Wno-deprecated"])
        assert overlay.dev_warnings_as_errors is True
        assert overlay.suppress_deprecated_warnings is True
        ```

    Raises:
        WarningFlagError: If any flag is malformed or names an unknown category.
    """
    return policy_from_levels(parse_warning_flags(flags))
