# topmark:header:start
#
#   project      : DiagRelay
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DiagRelay test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable settings split:

    - Build settings using `diagrelay.config.MutableSettings`, then `freeze()`
      into `diagrelay.config.Settings` before wiring a dispatcher.
    - Do **not** mutate a frozen `WarningPolicy`; use `thaw()` or
      `dataclasses.replace()` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from diagrelay.config import logging

if TYPE_CHECKING:
    from diagrelay.rendering.report import ReportMetadata

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_diagrelay_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure DiagRelay's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    DIAGRELAY_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("DIAGRELAY_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    A ``diagrelay.toml`` with ``root = true`` is written so config discovery
    never escapes the temporary directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "diagrelay.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


@dataclass
class RecordingSink:
    """In-memory output sink that records every emitted report."""

    reports: list[tuple[str, ReportMetadata]] = field(default_factory=lambda: [])

    def emit(self, body: str, metadata: ReportMetadata) -> None:
        """Record one report."""
        self.reports.append((body, metadata))

    @property
    def bodies(self) -> list[str]:
        """Return the recorded report bodies."""
        return [body for body, _ in self.reports]


@dataclass
class CountingErrorFlag:
    """Error flag test double counting `mark_error_occurred` calls."""

    calls: int = 0

    def mark_error_occurred(self) -> None:
        """Count one call."""
        self.calls += 1
