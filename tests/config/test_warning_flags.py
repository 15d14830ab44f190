# topmark:header:start
#
#   project      : DiagRelay
#   file         : test_warning_flags.py
#   file_relpath : tests/config/test_warning_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``-W`` flag parsing."""

from __future__ import annotations

import pytest

from diagrelay.config.errors import WarningFlagError
from diagrelay.config.policy import MutableWarningPolicy
from diagrelay.config.warning_flags import (
    DiagLevel,
    WarningCategory,
    parse_warning_flags,
    policy_from_warning_flags,
)


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        (["-Wdev"], {WarningCategory.DEV: DiagLevel.WARN}),
        (["-Wno-dev"], {WarningCategory.DEV: DiagLevel.IGNORE}),
        (["-Werror=dev"], {WarningCategory.DEV: DiagLevel.ERROR}),
        (["-Wno-error=dev"], {WarningCategory.DEV: DiagLevel.WARN}),
        (["no-deprecated"], {WarningCategory.DEPRECATED: DiagLevel.IGNORE}),
        (["-Werror=dev", "-Wno-error=dev"], {WarningCategory.DEV: DiagLevel.WARN}),
        (["-Wno-dev", "-Wno-error=dev"], {WarningCategory.DEV: DiagLevel.IGNORE}),
        (["-Wno-dev", "-Wdev"], {WarningCategory.DEV: DiagLevel.WARN}),
        (["-Wno-dev", "-Werror=dev"], {WarningCategory.DEV: DiagLevel.ERROR}),
    ],
)
def test_levels_apply_left_to_right(
    flags: list[str], expected: dict[WarningCategory, DiagLevel]
) -> None:
    """Each flag form sets the documented level; later flags win."""
    assert parse_warning_flags(flags) == expected


def test_error_flag_maps_to_policy() -> None:
    """``-Werror=dev`` promotes dev and (implicitly) deprecation warnings."""
    overlay: MutableWarningPolicy = policy_from_warning_flags(["-Werror=dev"])
    assert overlay == MutableWarningPolicy(
        dev_warnings_as_errors=True,
        deprecated_warnings_as_errors=True,
        suppress_dev_warnings=False,
        suppress_deprecated_warnings=False,
    )


def test_explicit_deprecated_flag_wins_over_dev() -> None:
    """A ``deprecated`` flag is not overridden by the ``dev`` level."""
    overlay: MutableWarningPolicy = policy_from_warning_flags(["-Wno-dev", "-Wdeprecated"])
    assert overlay == MutableWarningPolicy(
        dev_warnings_as_errors=False,
        deprecated_warnings_as_errors=False,
        suppress_dev_warnings=True,
        suppress_deprecated_warnings=False,
    )


def test_deprecated_only_leaves_dev_unset() -> None:
    """Only the touched fields are set, so config values survive the merge."""
    overlay: MutableWarningPolicy = policy_from_warning_flags(["-Werror=deprecated"])
    assert overlay.dev_warnings_as_errors is None
    assert overlay.suppress_dev_warnings is None
    assert overlay.deprecated_warnings_as_errors is True
    assert overlay.suppress_deprecated_warnings is False


def test_no_flags_set_nothing() -> None:
    """An empty flag list yields an all-unset overlay."""
    assert policy_from_warning_flags([]) == MutableWarningPolicy()


@pytest.mark.parametrize("flag", ["-Wbogus", "-Werror=", "no-error=nope", "-W", "  "])
def test_invalid_flags_raise(flag: str) -> None:
    """Unknown categories and empty flags are rejected."""
    with pytest.raises(WarningFlagError):
        parse_warning_flags([flag])
