# topmark:header:start
#
#   project      : DiagRelay
#   file         : colored_enum.py
#   file_relpath : src/diagrelay/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer. The enum `.value` remains a plain string, while the colorizer
      is exposed via `.color`.
    - `MessageColor`: the color requested by a rendered report.

Design:
    `ColoredStrEnum` keeps `_value_` as the plain `str` and stores the color
    function separately (`_color`). This preserves Enum semantics (hashing,
    equality, `repr`) and keeps report metadata serializable as plain text.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Designed to be compatible with `yachalk.ChalkBuilder.__call__`, which
    accepts a variadic list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


def plain(*args: object, sep: str = " ") -> str:
    """Colorizer that leaves text undecorated."""
    return sep.join(str(a) for a in args)


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color


class MessageColor(ColoredStrEnum):
    """Terminal color requested for a rendered report.

    `NORMAL` means "no color": sinks print the body undecorated.
    """

    RED = ("red", chalk.red)
    YELLOW = ("yellow", chalk.yellow)
    NORMAL = ("normal", plain)

    @property
    def fg(self) -> str | None:
        """Return the `click.style` foreground name, or None for `NORMAL`."""
        if self is MessageColor.NORMAL:
            return None
        return self.value
