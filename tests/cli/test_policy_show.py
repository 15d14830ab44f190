# topmark:header:start
#
#   project      : DiagRelay
#   file         : test_policy_show.py
#   file_relpath : tests/cli/test_policy_show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `policy show` command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def _parse(result: Result) -> dict[str, Any]:
    return tomlkit.parse(result.output).unwrap()


def test_defaults() -> None:
    """Without config or flags the runtime defaults are printed."""
    result: Result = run_cli(["--no-color", "policy", "show", "--no-config"])
    assert_SUCCESS(result)
    assert _parse(result) == {
        "warnings": {
            "dev_warnings_as_errors": False,
            "deprecated_warnings_as_errors": False,
            "suppress_dev_warnings": False,
            "suppress_deprecated_warnings": False,
        },
        "output": {"product_name": "Build", "text_width": 77},
    }


def test_flags_are_applied() -> None:
    """``-W`` flags show up in the resolved policy."""
    result: Result = run_cli(
        ["--no-color", "policy", "show", "--no-config", "-Werror=dev", "-Wno-deprecated"]
    )
    assert_SUCCESS(result)
    warnings: dict[str, Any] = _parse(result)["warnings"]
    assert warnings["dev_warnings_as_errors"] is True
    assert warnings["deprecated_warnings_as_errors"] is False
    assert warnings["suppress_deprecated_warnings"] is True


def test_discovered_config_and_verbose_sources(isolation: Path) -> None:
    """Discovered config is merged and listed as a TOML comment with ``-v``."""
    (isolation / "diagrelay.toml").write_text(
        "root = true\n[output]\ntext_width = 40\n", encoding="utf-8"
    )
    result: Result = run_cli_in(isolation, ["--no-color", "-v", "policy", "show"])
    assert_SUCCESS(result)
    assert "# config file: " in result.output
    assert "diagrelay.toml" in result.output
    assert _parse(result)["output"]["text_width"] == 40


def test_bad_flag() -> None:
    """Invalid flags are usage errors."""
    assert_USAGE_ERROR(run_cli(["policy", "show", "--no-config", "-Werror="]))
