# topmark:header:start
#
#   project      : DiagRelay
#   file         : error_state.py
#   file_relpath : src/diagrelay/core/error_state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide "an error occurred" flag.

Lifecycle:
    1. Create one `ErrorState` at process start (unset).
    2. Pass it explicitly to the [`Dispatcher`][diagrelay.core.dispatch.Dispatcher];
       each error-class diagnostic that is emitted calls `mark_error_occurred()`.
    3. Read `error_occurred` at exit to choose the exit status.

The flag is monotonic: nothing in DiagRelay ever clears it. It is backed by a
`threading.Event`, so marking and reading are race-free when a host embeds
the dispatcher in a multi-threaded process.
"""

from __future__ import annotations

import threading
from typing import Protocol


class ErrorFlag(Protocol):
    """Write side of the error flag, as seen by the dispatcher."""

    def mark_error_occurred(self) -> None:
        """Record that an error-class diagnostic was emitted (idempotent)."""
        ...


class ErrorState:
    """Monotonic, thread-safe error flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def mark_error_occurred(self) -> None:
        """Set the flag. Calling this more than once has no further effect."""
        self._event.set()

    @property
    def error_occurred(self) -> bool:
        """Return True once any error-class diagnostic has been emitted."""
        return self._event.is_set()

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"ErrorState(error_occurred={self.error_occurred})"
