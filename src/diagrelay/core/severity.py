# topmark:header:start
#
#   project      : DiagRelay
#   file         : severity.py
#   file_relpath : src/diagrelay/core/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Severity taxonomy for build diagnostics.

`Severity` is the closed set of diagnostic classes DiagRelay knows about. Every
static property (preamble, color, title, error-class membership) is looked up in
a table keyed by *all* members; the tables are audited at import time so that
adding a member without extending each table fails loudly instead of silently
falling through to a default.

Groupings:
    * dev pair: `AUTHOR_WARNING`, `AUTHOR_ERROR`
    * deprecation pair: `DEPRECATION_WARNING`, `DEPRECATION_ERROR`
    * error class: `FATAL_ERROR`, `INTERNAL_ERROR`, `DEPRECATION_ERROR`, `AUTHOR_ERROR`
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from diagrelay.core.enum_mixins import KeyedStrEnum
from diagrelay.rendering.colored_enum import MessageColor

if TYPE_CHECKING:
    from collections.abc import Mapping


class Severity(KeyedStrEnum):
    """Diagnostic severity.

    `.value` is the stable machine key (used on the command line and in
    machine output); `.label` is a short human description.
    """

    FATAL_ERROR = ("fatal_error", "Fatal error", ("error", "fatal"))
    INTERNAL_ERROR = ("internal_error", "Internal error (a bug in the reporting tool)")
    LOG = ("log", "Debug log message", ("debug",))
    DEPRECATION_ERROR = ("deprecation_error", "Deprecated usage, reported as an error")
    DEPRECATION_WARNING = ("deprecation_warning", "Deprecated usage", ("deprecation",))
    AUTHOR_WARNING = ("author_warning", "Warning for project developers", ("dev_warning",))
    AUTHOR_ERROR = ("author_error", "Error for project developers", ("dev_error",))
    WARNING = ("warning", "Warning", ("warn",))

    @property
    def is_error(self) -> bool:
        """Return True if this severity belongs to the error class."""
        return _ERROR_CLASS[self]

    @property
    def report_title(self) -> ReportTitle:
        """Return the report title ("Error" or "Warning")."""
        return ReportTitle.ERROR if self.is_error else ReportTitle.WARNING

    @property
    def message_color(self) -> MessageColor:
        """Return the terminal color requested for reports of this severity."""
        return _COLORS[self]

    @property
    def in_dev_pair(self) -> bool:
        """Return True for `AUTHOR_WARNING` and `AUTHOR_ERROR`."""
        return self in DEV_PAIR

    @property
    def in_deprecation_pair(self) -> bool:
        """Return True for `DEPRECATION_WARNING` and `DEPRECATION_ERROR`."""
        return self in DEPRECATION_PAIR

    def preamble(self, product_name: str) -> str:
        """Return the report header for this severity.

        Args:
            product_name (str): Name of the reporting tool, e.g. ``"Build"``.

        Returns:
            str: The header text, e.g. ``"Build Warning (dev)"``.
        """
        return f"{product_name} {_PREAMBLES[self]}"


class ReportTitle(str, Enum):
    """Title attached to rendered report metadata."""

    ERROR = "Error"
    WARNING = "Warning"


DEV_PAIR: Final[frozenset[Severity]] = frozenset(
    {Severity.AUTHOR_WARNING, Severity.AUTHOR_ERROR}
)
DEPRECATION_PAIR: Final[frozenset[Severity]] = frozenset(
    {Severity.DEPRECATION_WARNING, Severity.DEPRECATION_ERROR}
)

_PREAMBLES: Final[dict[Severity, str]] = {
    Severity.FATAL_ERROR: "Error",
    Severity.INTERNAL_ERROR: "Internal Error (please report a bug)",
    Severity.LOG: "Debug Log",
    Severity.DEPRECATION_ERROR: "Deprecation Error",
    Severity.DEPRECATION_WARNING: "Deprecation Warning",
    Severity.AUTHOR_WARNING: "Warning (dev)",
    Severity.AUTHOR_ERROR: "Error (dev)",
    Severity.WARNING: "Warning",
}

_COLORS: Final[dict[Severity, MessageColor]] = {
    Severity.FATAL_ERROR: MessageColor.RED,
    Severity.INTERNAL_ERROR: MessageColor.RED,
    Severity.LOG: MessageColor.NORMAL,
    Severity.DEPRECATION_ERROR: MessageColor.NORMAL,
    Severity.DEPRECATION_WARNING: MessageColor.NORMAL,
    Severity.AUTHOR_WARNING: MessageColor.YELLOW,
    Severity.AUTHOR_ERROR: MessageColor.RED,
    Severity.WARNING: MessageColor.YELLOW,
}

_ERROR_CLASS: Final[dict[Severity, bool]] = {
    Severity.FATAL_ERROR: True,
    Severity.INTERNAL_ERROR: True,
    Severity.LOG: False,
    Severity.DEPRECATION_ERROR: True,
    Severity.DEPRECATION_WARNING: False,
    Severity.AUTHOR_WARNING: False,
    Severity.AUTHOR_ERROR: True,
    Severity.WARNING: False,
}


def _audit_table(name: str, table: Mapping[Severity, object]) -> None:
    missing: set[Severity] = set(Severity) - set(table)
    if missing:
        raise RuntimeError(
            f"Severity table {name} is missing: {', '.join(sorted(s.name for s in missing))}"
        )


for _name, _table in (
    ("preambles", _PREAMBLES),
    ("colors", _COLORS),
    ("error class", _ERROR_CLASS),
):
    _audit_table(_name, _table)
