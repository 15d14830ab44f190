# topmark:header:start
#
#   project      : DiagRelay
#   file         : test_main.py
#   file_relpath : tests/cli/test_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: group-level options and entry points."""

from __future__ import annotations

import subprocess
import sys
from typing import TYPE_CHECKING

import pytest

from diagrelay.cli_shared.color import ColorMode, resolve_color_mode
from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    assert_UNEXPECTED_ERROR,
    assert_USAGE_ERROR,
    run_cli,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_no_subcommand_prints_hint_and_help() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result: Result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Hint: use 'diagrelay emit" in result.output
    assert "emit" in result.output
    assert "severities" in result.output


def test_verbose_and_quiet_are_exclusive() -> None:
    """``-v`` and ``-q`` together are a usage error."""
    assert_USAGE_ERROR(run_cli(["-v", "-q", "version"]))


def test_color_always_styles_reports() -> None:
    """With --color=always the report body carries ANSI styling."""
    result: Result = run_cli(
        ["--color", "always", "emit", "--no-config", "--severity", "warning", "x"]
    )
    assert_SUCCESS(result)
    assert "\x1b[33m" in result.output


@pytest.mark.parametrize(
    ("override", "env", "isatty", "expected"),
    [
        (ColorMode.ALWAYS, {"NO_COLOR": "1"}, False, True),
        (ColorMode.NEVER, {"FORCE_COLOR": "1"}, True, False),
        (None, {"FORCE_COLOR": "1"}, False, True),
        (None, {"FORCE_COLOR": "0"}, True, True),
        (None, {"NO_COLOR": ""}, True, False),
        (None, {}, False, False),
    ],
)
def test_resolve_color_mode(
    monkeypatch: pytest.MonkeyPatch,
    override: ColorMode | None,
    env: dict[str, str],
    isatty: bool,
    expected: bool,
) -> None:
    """CLI override beats environment, which beats TTY detection."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    assert (
        resolve_color_mode(color_mode_override=override, output_format=None, stream_isatty=isatty)
        is expected
    )


def test_json_output_is_never_colored() -> None:
    """Machine formats disable color regardless of the override."""
    assert not resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format="json")


@mark_cli
def test_python_dash_m_entry_point() -> None:
    """``python -m diagrelay`` runs the same CLI."""
    proc = subprocess.run(
        [sys.executable, "-m", "diagrelay", "--no-color", "emit", "--no-config", "hello"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stderr == "Build Warning:\n  hello\n\n"


def test_unhandled_exception_exits_with_unexpected_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A crash inside a command exits 255, distinct from an emitted error (1)."""

    def _boom(**_kwargs: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr("diagrelay.cli.commands.emit.resolve_settings", _boom)
    result: Result = run_cli(["--no-color", "emit", "--no-config", "x"])
    assert_UNEXPECTED_ERROR(result)
    assert "Error: unexpected RuntimeError: boom" in result.output


def test_emitted_error_still_exits_with_failure() -> None:
    """An error-class diagnostic keeps exit status 1 and reports through the console."""
    result: Result = run_cli(
        ["--no-color", "emit", "--no-config", "--severity", "fatal_error", "x"]
    )
    assert_FAILURE(result)
    assert result.output == "Build Error:\n  x\n\n"
