# topmark:header:start
#
#   project      : DiagRelay
#   file         : policy.py
#   file_relpath : src/diagrelay/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Warning policy model for DiagRelay.

This module defines the **policy layer** that controls how warning classes are
promoted, demoted and suppressed.

Design:
    * ``PolicyStore`` is the structural, read-only view the classification core
      depends on. Anything exposing the four boolean attributes satisfies it.
    * ``MutableWarningPolicy`` uses tri-state options (``bool | None``) to represent
      explicit True/False vs. *unset*. This enables non-destructive merges when
      composing multiple sources (defaults → config file → ``-W`` flags).
    * ``WarningPolicy`` is the fully-resolved, immutable runtime view with plain
      booleans, so the classifier never branches on ``None``.

TOML mapping:

    [warnings]
    dev_warnings_as_errors = false
    deprecated_warnings_as_errors = false
    suppress_dev_warnings = false
    suppress_deprecated_warnings = false
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class PolicyStore(Protocol):
    """Read-only view of the four warning-policy flags.

    The classification core reads these on every call and never caches them,
    so a store may change between two dispatches.
    """

    @property
    def dev_warnings_as_errors(self) -> bool:
        """Promote developer warnings to errors (and keep developer errors as errors)."""
        ...

    @property
    def deprecated_warnings_as_errors(self) -> bool:
        """Promote deprecation warnings to errors (and keep deprecation errors as errors)."""
        ...

    @property
    def suppress_dev_warnings(self) -> bool:
        """Hide developer warnings that were not reclassified."""
        ...

    @property
    def suppress_deprecated_warnings(self) -> bool:
        """Hide deprecation warnings that were not reclassified."""
        ...


@dataclass(frozen=True, slots=True)
class WarningPolicy:
    """Immutable, resolved warning policy.

    Attributes:
        dev_warnings_as_errors (bool): Treat developer (author) warnings as errors.
        deprecated_warnings_as_errors (bool): Treat deprecation warnings as errors.
        suppress_dev_warnings (bool): Do not show developer warnings.
        suppress_deprecated_warnings (bool): Do not show deprecation warnings.

    Notes:
        The four flags are independent; no combination is contradictory.
    """

    dev_warnings_as_errors: bool = False
    deprecated_warnings_as_errors: bool = False
    suppress_dev_warnings: bool = False
    suppress_deprecated_warnings: bool = False

    def thaw(self) -> MutableWarningPolicy:
        """Return a mutable builder initialized from this frozen policy.

        Returns:
            MutableWarningPolicy: A tri-state mutable policy.
        """
        return MutableWarningPolicy(
            dev_warnings_as_errors=self.dev_warnings_as_errors,
            deprecated_warnings_as_errors=self.deprecated_warnings_as_errors,
            suppress_dev_warnings=self.suppress_dev_warnings,
            suppress_deprecated_warnings=self.suppress_deprecated_warnings,
        )

    def to_dict(self) -> dict[str, bool]:
        """Return a TOML/JSON-friendly mapping of the policy flags."""
        return {
            "dev_warnings_as_errors": self.dev_warnings_as_errors,
            "deprecated_warnings_as_errors": self.deprecated_warnings_as_errors,
            "suppress_dev_warnings": self.suppress_dev_warnings,
            "suppress_deprecated_warnings": self.suppress_deprecated_warnings,
        }


@dataclass
class MutableWarningPolicy:
    """Mutable builder for `WarningPolicy`, suitable for config loading/merging.

    This class is merged in a **last-wins** manner when combining sources.

    Attributes:
        dev_warnings_as_errors (bool | None): See `WarningPolicy`. `None` means "inherit".
        deprecated_warnings_as_errors (bool | None): See `WarningPolicy`. `None` means
            "inherit".
        suppress_dev_warnings (bool | None): See `WarningPolicy`. `None` means "inherit".
        suppress_deprecated_warnings (bool | None): See `WarningPolicy`. `None` means
            "inherit".
    """

    dev_warnings_as_errors: bool | None = None
    deprecated_warnings_as_errors: bool | None = None
    suppress_dev_warnings: bool | None = None
    suppress_deprecated_warnings: bool | None = None

    def merge_with(self, other: MutableWarningPolicy) -> MutableWarningPolicy:
        """Return a new MutableWarningPolicy by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutableWarningPolicy): The policy whose values override current ones.

        Returns:
            MutableWarningPolicy: Merged policy.
        """

        def pick(*, current: bool | None, override: bool | None) -> bool | None:
            return override if override is not None else current

        return MutableWarningPolicy(
            dev_warnings_as_errors=pick(
                override=other.dev_warnings_as_errors,
                current=self.dev_warnings_as_errors,
            ),
            deprecated_warnings_as_errors=pick(
                override=other.deprecated_warnings_as_errors,
                current=self.deprecated_warnings_as_errors,
            ),
            suppress_dev_warnings=pick(
                override=other.suppress_dev_warnings,
                current=self.suppress_dev_warnings,
            ),
            suppress_deprecated_warnings=pick(
                override=other.suppress_deprecated_warnings,
                current=self.suppress_deprecated_warnings,
            ),
        )

    def resolve(self, base: WarningPolicy | None = None) -> WarningPolicy:
        """Resolve tri-state fields against a base frozen policy.

        Args:
            base (WarningPolicy | None): Policy supplying values for unset fields.
                Defaults to the all-false runtime defaults.

        Returns:
            WarningPolicy: The resolved, immutable policy.
        """
        base = base or WarningPolicy()
        return WarningPolicy(
            dev_warnings_as_errors=(
                base.dev_warnings_as_errors
                if self.dev_warnings_as_errors is None
                else self.dev_warnings_as_errors
            ),
            deprecated_warnings_as_errors=(
                base.deprecated_warnings_as_errors
                if self.deprecated_warnings_as_errors is None
                else self.deprecated_warnings_as_errors
            ),
            suppress_dev_warnings=(
                base.suppress_dev_warnings
                if self.suppress_dev_warnings is None
                else self.suppress_dev_warnings
            ),
            suppress_deprecated_warnings=(
                base.suppress_deprecated_warnings
                if self.suppress_deprecated_warnings is None
                else self.suppress_deprecated_warnings
            ),
        )
