# topmark:header:start
#
#   project      : DiagRelay
#   file         : test_dispatch.py
#   file_relpath : tests/core/test_dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the dispatch controller.

Covers the forced-override and dropped-message invariants as properties, plus
end-to-end scenarios through the real renderer with recording collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass

from hypothesis import given

from diagrelay.config.policy import WarningPolicy
from diagrelay.core.dispatch import Dispatcher
from diagrelay.core.error_state import ErrorState
from diagrelay.core.model import Diagnostic
from diagrelay.core.reclassify import reclassify
from diagrelay.core.severity import ReportTitle, Severity
from diagrelay.core.visibility import is_visible
from diagrelay.rendering.backtrace import Backtrace, Frame
from diagrelay.rendering.colored_enum import MessageColor
from diagrelay.rendering.formatter import DocumentationFormatter
from diagrelay.rendering.renderer import MessageRenderer
from tests.conftest import CountingErrorFlag, RecordingSink
from tests.strategies_diagrelay import s_policy, s_severity

BACKTRACE = Backtrace((Frame("CMakeLists.txt", 7, "message"),))


def _dispatcher(
    sink: RecordingSink,
    flag: CountingErrorFlag | ErrorState,
    *,
    stack: str | None = None,
) -> Dispatcher:
    renderer = MessageRenderer(
        DocumentationFormatter(),
        stack_capture=(lambda: stack) if stack is not None else None,
    )
    return Dispatcher(renderer, sink, flag)


@given(severity=s_severity(), policy=s_policy())
def test_forced_diagnostics_are_always_emitted(severity: Severity, policy: WarningPolicy) -> None:
    """A reclassified diagnostic is never suppressed, whatever the suppression flags say."""
    sink = RecordingSink()
    flag = CountingErrorFlag()
    effective, forced = reclassify(severity, policy)

    emitted: bool = _dispatcher(sink, flag).dispatch(Diagnostic(severity, "text"), policy)

    if forced:
        assert emitted
        assert len(sink.reports) == 1
        assert sink.reports[0][1].title is effective.report_title


@given(severity=s_severity(), policy=s_policy())
def test_invisible_diagnostics_have_no_effect(severity: Severity, policy: WarningPolicy) -> None:
    """Dropped diagnostics neither reach the sink nor touch the error flag."""
    sink = RecordingSink()
    flag = CountingErrorFlag()
    effective, forced = reclassify(severity, policy)

    emitted: bool = _dispatcher(sink, flag).dispatch(Diagnostic(severity, "text"), policy)

    if not forced and not is_visible(effective, policy):
        assert not emitted
        assert sink.reports == []
        assert flag.calls == 0
    else:
        assert emitted
        assert flag.calls == (1 if effective.is_error else 0)


def test_internal_error_scenario() -> None:
    """Internal errors are red, flagged, and carry the normalized program stack."""
    sink = RecordingSink()
    state = ErrorState()
    dispatcher: Dispatcher = _dispatcher(sink, state, stack="WARNING: frame1\nframe2")

    emitted: bool = dispatcher.dispatch(
        Diagnostic(Severity.INTERNAL_ERROR, "boom", BACKTRACE), WarningPolicy()
    )

    assert emitted
    body, metadata = sink.reports[0]
    assert body.startswith("Build Internal Error (please report a bug) at CMakeLists.txt:7")
    assert body.endswith("  boom\n\nNote: frame1\nframe2\n")
    assert metadata.title is ReportTitle.ERROR
    assert metadata.color is MessageColor.RED
    assert state.error_occurred


def test_suppressed_author_warning_scenario() -> None:
    """A suppressed developer warning produces no output and no error."""
    sink = RecordingSink()
    state = ErrorState()
    policy = WarningPolicy(suppress_dev_warnings=True)

    emitted: bool = _dispatcher(sink, state).dispatch(
        Diagnostic(Severity.AUTHOR_WARNING, "x"), policy
    )

    assert not emitted
    assert sink.reports == []
    assert not state.error_occurred


def test_forced_author_warning_scenario() -> None:
    """Warnings-as-errors beats suppression: the warning is shown as a dev error."""
    sink = RecordingSink()
    state = ErrorState()
    policy = WarningPolicy(dev_warnings_as_errors=True, suppress_dev_warnings=True)

    emitted: bool = _dispatcher(sink, state).dispatch(
        Diagnostic(Severity.AUTHOR_WARNING, "x"), policy
    )

    assert emitted
    body, metadata = sink.reports[0]
    assert body.startswith("Build Error (dev):\n")
    assert "This error is for project developers. Use -Wno-error=dev to suppress it." in body
    assert metadata.title is ReportTitle.ERROR
    assert metadata.color is MessageColor.RED
    assert state.error_occurred


def test_demoted_author_error_is_a_warning() -> None:
    """An author error without warnings-as-errors is shown as a forced warning."""
    sink = RecordingSink()
    state = ErrorState()
    policy = WarningPolicy(suppress_dev_warnings=True)

    diagnostic = Diagnostic(Severity.AUTHOR_ERROR, "x")
    emitted: bool = _dispatcher(sink, state).dispatch(diagnostic, policy)

    assert emitted
    assert sink.bodies[0].startswith("Build Warning (dev):\n")
    assert sink.reports[0][1].title is ReportTitle.WARNING
    assert not state.error_occurred


@dataclass
class _LivePolicy:
    dev_warnings_as_errors: bool = False
    deprecated_warnings_as_errors: bool = False
    suppress_dev_warnings: bool = False
    suppress_deprecated_warnings: bool = False


def test_policy_is_read_on_every_dispatch() -> None:
    """A policy store changed between two dispatches is honored immediately."""
    sink = RecordingSink()
    state = ErrorState()
    dispatcher: Dispatcher = _dispatcher(sink, state)
    policy = _LivePolicy()
    diagnostic = Diagnostic(Severity.DEPRECATION_WARNING, "old")

    assert dispatcher.dispatch(diagnostic, policy)
    policy.suppress_deprecated_warnings = True
    assert not dispatcher.dispatch(diagnostic, policy)
    policy.deprecated_warnings_as_errors = True
    assert dispatcher.dispatch(diagnostic, policy)

    assert [b.splitlines()[0] for b in sink.bodies] == [
        "Build Deprecation Warning:",
        "Build Deprecation Error:",
    ]
    assert state.error_occurred


def test_error_flag_marked_once_per_error() -> None:
    """Each emitted error-class diagnostic marks the flag; warnings never do."""
    sink = RecordingSink()
    flag = CountingErrorFlag()
    dispatcher: Dispatcher = _dispatcher(sink, flag)

    dispatcher.dispatch(Diagnostic(Severity.WARNING, "w"), WarningPolicy())
    dispatcher.dispatch(Diagnostic(Severity.FATAL_ERROR, "e1"), WarningPolicy())
    dispatcher.dispatch(Diagnostic(Severity.FATAL_ERROR, "e2"), WarningPolicy())

    assert flag.calls == 2
    assert len(sink.reports) == 3


def test_backtrace_is_not_modified() -> None:
    """Dispatch only reads the backtrace."""
    frames = (Frame("a.cmake", 1, "f"), Frame("b.cmake", 2, "g"))
    backtrace = Backtrace(frames)

    _dispatcher(RecordingSink(), ErrorState()).dispatch(
        Diagnostic(Severity.WARNING, "w", backtrace), WarningPolicy()
    )

    assert backtrace.frames == frames
