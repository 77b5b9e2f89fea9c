# topmark:header:start
#
#   project      : StatusTree
#   file         : levels.py
#   file_relpath : src/statustree/model/levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Warning levels for status trees.

`WarningLevel` is a totally ordered enumeration, declared from most to least
severe. The declaration order *is* the ordering: comparisons go through the
member ``value`` (0 = most severe) and never through the name.

Textual forms:
    - ``lower_case_name``: the lowercase member name, derived once per member.
    - ``wire_name``: what the codec writes; equal to ``lower_case_name`` except
      for `WarningLevel.NONE`, which is written as the empty string.

`WarningLevel.read` accepts both the empty string and any ``lower_case_name``
and raises `FormatError` for everything else.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import cached_property
from typing import Final

from statustree.core.errors import FormatError


class WarningLevel(Enum):
    """Severity of a status node, ordered most to least severe."""

    FATAL = 0
    ERROR = 1
    WARN = 2
    CONCERN = 3
    INFO = 4
    NONE = 5

    @cached_property
    def lower_case_name(self) -> str:
        """Lowercase member name (e.g. ``"warn"``)."""
        return self.name.lower()

    @property
    def wire_name(self) -> str:
        """Textual form written by the codec (``""`` for `NONE`)."""
        if self is WarningLevel.NONE:
            return ""
        return self.lower_case_name

    def is_higher_than(self, other: WarningLevel) -> bool:
        """Return True if this level is strictly more severe than ``other``."""
        return self.value < other.value

    def is_at_least(self, other: WarningLevel) -> bool:
        """Return True if this level is at least as severe as ``other``."""
        return self.value <= other.value

    @staticmethod
    def get_highest(a: WarningLevel, b: WarningLevel) -> WarningLevel:
        """Return the more severe of two levels (either one when they are equal)."""
        return a if a.is_higher_than(b) else b

    @staticmethod
    def from_char(c: str) -> WarningLevel | None:
        """Map a single markup character to a level.

        Args:
            c: The marker character.

        Returns:
            The level to use, or ``None`` if the character doesn't map to any level.
            Callers must treat ``None`` ("no match") differently from `NONE`.
        """
        return _CHAR_TO_LEVEL.get(c)

    @staticmethod
    def read(text: str) -> WarningLevel:
        """Parse the textual form of a level.

        Args:
            text: ``""`` or a level's ``lower_case_name``.

        Returns:
            The matching level; the empty string reads as `NONE`.

        Raises:
            FormatError: If ``text`` is not a known level name.
        """
        if not text:
            return WarningLevel.NONE
        level: WarningLevel | None = _NAME_TO_LEVEL.get(text)
        if level is None:
            raise FormatError(
                f"Expected a valid warning level, but got '{text}'",
                expected="warning level",
                actual=text,
            )
        return level

    @staticmethod
    def from_logging_level(levelno: int) -> WarningLevel:
        """Map a standard `logging` level number onto a warning level.

        ``CRITICAL`` maps to `FATAL`, ``ERROR`` to `ERROR`, ``WARNING`` to `WARN`,
        ``INFO`` to `INFO`; anything below ``INFO`` maps to `NONE`.
        """
        if levelno >= logging.CRITICAL:
            return WarningLevel.FATAL
        if levelno >= logging.ERROR:
            return WarningLevel.ERROR
        if levelno >= logging.WARNING:
            return WarningLevel.WARN
        if levelno >= logging.INFO:
            return WarningLevel.INFO
        return WarningLevel.NONE


_CHAR_TO_LEVEL: Final[dict[str, WarningLevel]] = {
    "-": WarningLevel.NONE,
    "+": WarningLevel.INFO,
    "!": WarningLevel.WARN,
    "x": WarningLevel.ERROR,
}

_NAME_TO_LEVEL: Final[dict[str, WarningLevel]] = {
    level.lower_case_name: level for level in WarningLevel
}
