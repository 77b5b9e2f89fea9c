# topmark:header:start
#
#   project      : StatusTree
#   file         : enum_mixins.py
#   file_relpath : src/statustree/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for StatusTree (typing-friendly, UI-agnostic).

Provided:
    - ``enum_from_name(enum_cls, name, *, case_insensitive=False)``:
        Typed lookup by ``name`` from ``__members__``. Returns ``None`` on miss.
    - ``enum_from_value(enum_cls, value, *, case_insensitive=False)``:
        Typed lookup by string ``.value``. Returns ``None`` on miss.

Example:
    ```python
    from enum import Enum
    from statustree.core.enum_mixins import enum_from_name

    class Mode(Enum):
        A = "alpha"
        B = "beta"

    assert enum_from_name(Mode, "A") is Mode.A
    assert enum_from_name(Mode, "a") is None
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar, cast

_E = TypeVar("_E", bound=Enum)


def enum_from_name(
    enum_cls: type[_E],
    key_name: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the enum member for ``key_name`` from ``enum_cls.__members__``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        key_name (str | None): The member name (e.g., ``'CLICK_ONCE'``). If ``None``,
            returns ``None``.
        case_insensitive (bool): If True, lookup is performed with ``key_name.upper()``.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if key_name is None:
        return None
    target: str = key_name.upper() if case_insensitive else key_name
    member: Any | None = getattr(enum_cls, "__members__", {}).get(target)
    return cast("_E | None", member)


def enum_from_value(
    enum_cls: type[_E],
    value: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the member of ``enum_cls`` whose string ``.value`` equals ``value``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        value (str | None): Candidate value. If ``None``, returns ``None``.
        case_insensitive (bool): Compare lowercased values if True.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if value is None:
        return None
    target: str = value.lower() if case_insensitive else value
    for member in enum_cls:
        candidate: str = str(member.value)
        if (candidate.lower() if case_insensitive else candidate) == target:
            return member
    return None
