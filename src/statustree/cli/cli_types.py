# topmark:header:start
#
#   project      : StatusTree
#   file         : cli_types.py
#   file_relpath : src/statustree/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for the StatusTree CLI.

- `EnumChoiceParam`: converts a string to a member of a string-valued Enum
  (e.g. `OutputFormat`), case-insensitively.
- `WarningLevelParam`: converts a level name (``error``, ``warn``, ...) to a
  `WarningLevel` member.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from statustree.core.enum_mixins import enum_from_value
from statustree.model.levels import WarningLevel

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumParam
E = TypeVar("E", bound=Enum)


def _fail_noreturn(
    message: str,
    param: click.Parameter | None,
    ctx: click.Context | None,
) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


def _complete(choices: list[str], incomplete: str) -> list[ClickCompletionItem]:
    # Runtime import to avoid import-time dependency for non-completion paths
    from click.shell_completion import CompletionItem as RuntimeCompletionItem

    prefix: str = (incomplete or "").lower()
    return [RuntimeCompletionItem(c) for c in choices if c.lower().startswith(prefix)]


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", e.value) for e in self.enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        member: E | None = enum_from_value(self.enum_cls, str(value), case_insensitive=True)
        if member is not None:
            return member

        _fail_noreturn(
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

        Bash: `eval "$(_STATUSTREE_COMPLETE=bash_source statustree)"`
        """
        return _complete(self.choices, incomplete)

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumParam({self.enum_cls.__name__})"


class WarningLevelParam(ParamTypeBase):
    """A Click parameter type that converts a level name to a `WarningLevel`."""

    name: str = "level"
    choices: list[str]

    def __init__(self) -> None:
        self.choices = [level.lower_case_name for level in WarningLevel]

    def convert(
        self,
        value: str | WarningLevel | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> WarningLevel | None:
        """Converts a level name (case-insensitive) to a `WarningLevel`."""
        if value is None or isinstance(value, WarningLevel):
            return value

        key: str = str(value).strip().lower()
        for level in WarningLevel:
            if level.lower_case_name == key:
                return level

        _fail_noreturn(
            f"Invalid level '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        return _complete(self.choices, incomplete)

    def __repr__(self) -> str:
        """Return a string representation."""
        return "WarningLevelParam()"
