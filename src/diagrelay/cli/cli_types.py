# topmark:header:start
#
#   project      : DiagRelay
#   file         : cli_types.py
#   file_relpath : src/diagrelay/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for DiagRelay.

- `EnumChoiceParam`: case-insensitive conversion of a string to an Enum member.
- `KeyedEnumParam`: like `EnumChoiceParam`, but also accepts member names and
  aliases of a [`KeyedStrEnum`][diagrelay.core.enum_mixins.KeyedStrEnum].
- `FrameParam`: converts ``FILE[:LINE[:COMMAND]]`` to a backtrace `Frame`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, Protocol, TypeVar, cast

import click

from diagrelay.rendering.backtrace import Frame

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    from diagrelay.core.enum_mixins import KeyedStrEnum

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumParam
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        # Assume the enum exposes string-valued members
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def _lookup(self, value: str) -> E | None:
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        return lookup.get(value.lower())

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        member: E | None = self._lookup(str(value))
        if member is not None:
            return member

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_DIAGRELAY_COMPLETE=bash_source diagrelay)"`
        """
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"


K = TypeVar("K", bound="KeyedStrEnum")


class KeyedEnumParam(EnumChoiceParam[K]):
    """Click parameter type for `KeyedStrEnum` members (keys, names and aliases)."""

    def _lookup(self, value: str) -> K | None:
        return self.enum_cls.parse(value)

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"KeyedEnumParam({self.enum_cls.__name__})"


def FrameParam(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> list[Frame]:
    """Callback: convert repeated ``--frame FILE[:LINE[:COMMAND]]`` values to frames.

    Args:
        ctx (click.Context): Click context.
        param (click.Parameter): The Click parameter.
        value (tuple[str, ...]): Raw frame specifications, most recent first.

    Returns:
        list[Frame]: Parsed frames in the given order.

    Raises:
        click.BadParameter: If a specification has no file part.
    """
    frames: list[Frame] = []
    for raw in value:
        try:
            frames.append(Frame.parse(raw))
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
    return frames
