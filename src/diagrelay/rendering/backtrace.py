# topmark:header:start
#
#   project      : DiagRelay
#   file         : backtrace.py
#   file_relpath : src/diagrelay/rendering/backtrace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Call-context backtraces attached to diagnostics.

A `Backtrace` is an immutable stack of `Frame` objects with the most recent
frame first. It implements the `BacktraceLike` protocol:

* `print_title` writes `` at <top frame>`` (nothing when empty);
* `print_call_stack` writes ``Call Stack (most recent call first):`` followed by
  one indented line per frame *below* the top (nothing with fewer than two frames).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from diagrelay.constants import TEXT_INDENT

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

CALL_STACK_HEADER: str = "Call Stack (most recent call first):"

# ASCII digits only; a leading minus is matched so negative lines can be rejected.
_LINE_FIELD = re.compile(r"-?[0-9]+")


@dataclass(frozen=True, slots=True)
class Frame:
    """One entry of a backtrace.

    Attributes:
        file_path (str): Source file the command was read from.
        line (int): 1-based line number; 0 when unknown.
        command (str): Name of the command being executed; may be empty.
    """

    file_path: str
    line: int = 0
    command: str = ""

    def __str__(self) -> str:
        """Return ``file:line (command)``, omitting unknown parts."""
        text: str = self.file_path
        if self.line > 0:
            text += f":{self.line}"
        if self.command:
            text += f" ({self.command})"
        return text

    @classmethod
    def parse(cls, raw: str) -> Frame:
        """Parse ``FILE[:LINE[:COMMAND]]``.

        The file part may itself contain colons (e.g. Windows drive letters); the
        line is recognized as the last ``:``-separated field made of ASCII digits.

        Args:
            raw (str): Frame specification.

        Returns:
            Frame: The parsed frame.

        Raises:
            ValueError: If the file part is empty or the line is negative.
        """
        parts: list[str] = raw.rsplit(":", 2)
        file_path: str = raw
        line_field: str = "0"
        command: str = ""
        if len(parts) == 3 and _LINE_FIELD.fullmatch(parts[1]):
            file_path, line_field, command = parts
        elif len(parts) >= 2 and _LINE_FIELD.fullmatch(parts[-1]):
            file_path, line_field = raw.rsplit(":", 1)
        line: int = int(line_field)
        if line < 0:
            raise ValueError(f"Frame '{raw}' has a negative line number ({line})")
        if not file_path.strip():
            raise ValueError(f"Frame '{raw}' has no file part (expected FILE[:LINE[:COMMAND]])")
        return cls(file_path=file_path, line=line, command=command.strip())


@dataclass(frozen=True, slots=True)
class Backtrace:
    """Immutable call-context stack, most recent frame first."""

    frames: tuple[Frame, ...] = ()

    @classmethod
    def from_frames(cls, frames: Iterable[Frame]) -> Backtrace:
        """Build a backtrace from frames listed most recent first."""
        return cls(tuple(frames))

    def push(self, frame: Frame) -> Backtrace:
        """Return a new backtrace with ``frame`` on top."""
        return Backtrace((frame, *self.frames))

    def top(self) -> Frame:
        """Return the most recent frame.

        Raises:
            IndexError: If the backtrace is empty.
        """
        if not self.frames:
            raise IndexError("top of empty backtrace")
        return self.frames[0]

    def pop(self) -> Backtrace:
        """Return a new backtrace without the most recent frame.

        Raises:
            IndexError: If the backtrace is empty.
        """
        if not self.frames:
            raise IndexError("pop from empty backtrace")
        return Backtrace(self.frames[1:])

    def empty(self) -> bool:
        """Return True if there are no frames."""
        return not self.frames

    def print_title(self, out: TextIO) -> None:
        """Write the location of the most recent frame."""
        if self.frames:
            out.write(f" at {self.frames[0]}")

    def print_call_stack(self, out: TextIO) -> None:
        """Write the frames below the top, one per line."""
        if len(self.frames) < 2:
            return
        out.write(CALL_STACK_HEADER + "\n")
        for frame in self.frames[1:]:
            out.write(f"{TEXT_INDENT}{frame}\n")
