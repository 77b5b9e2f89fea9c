# topmark:header:start
#
#   project      : StatusTree
#   file         : reader.py
#   file_relpath : src/statustree/codec/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Order-enforcing reader for the report wire format.

JSON objects are parsed into `WireObject` instances (via ``object_pairs_hook``)
that keep their fields in document order, duplicates included. Readers then
consume fields strictly in the order the writer emits them: every
``expect_*`` call checks the *next* field name, and `WireObject.end` rejects
leftover fields. Any mismatch raises `FormatError` and aborts the decode.

There is no schema negotiation and no optional field: as we write the documents
ourselves, we mandate the order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from statustree.codec.keys import WireKey
from statustree.config.logging import get_logger
from statustree.core.enum_mixins import enum_from_name
from statustree.core.errors import FormatError
from statustree.model.levels import WarningLevel
from statustree.model.node import StatusNode
from statustree.model.report import Button, ButtonType, Message, Report, Tab

if TYPE_CHECKING:
    from collections.abc import Sequence

    from statustree.config.logging import StatusTreeLogger

logger: StatusTreeLogger = get_logger(__name__)


def _describe(value: object) -> str:
    """Return the JSON type name of a decoded value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, WireObject):
        return "object"
    return type(value).__name__


class WireObject:
    """A decoded JSON object whose fields are consumed in order.

    Attributes:
        pairs (list[tuple[str, object]]): The object's fields in document order.
    """

    __slots__ = ("_pos", "pairs")

    pairs: list[tuple[str, object]]

    def __init__(self, pairs: Sequence[tuple[str, object]]) -> None:
        self.pairs = list(pairs)
        self._pos = 0

    def __repr__(self) -> str:
        return f"WireObject(keys={[k for k, _ in self.pairs]!r}, pos={self._pos})"

    def expect(self, name: str) -> object:
        """Consume the next field, which must be called ``name``, and return its value.

        Raises:
            FormatError: If the next field has another name or there is none left.
        """
        if self._pos >= len(self.pairs):
            raise FormatError(
                f"Expected '{name}', but reached the end of the object",
                expected=name,
                actual=None,
            )
        key, value = self.pairs[self._pos]
        if key != name:
            raise FormatError(f"Expected '{name}', but read '{key}'", expected=name, actual=key)
        self._pos += 1
        return value

    def expect_string(self, name: str) -> str:
        """Consume field ``name`` and return its string value."""
        value: object = self.expect(name)
        if not isinstance(value, str):
            raise FormatError(
                f"Expected a string for '{name}', but read {_describe(value)}",
                expected="string",
                actual=_describe(value),
            )
        return value

    def expect_string_or_none(self, name: str) -> str | None:
        """Consume field ``name`` and return its string value, or None for ``null``."""
        value: object = self.expect(name)
        if value is not None and not isinstance(value, str):
            raise FormatError(
                f"Expected a string or null for '{name}', but read {_describe(value)}",
                expected="string or null",
                actual=_describe(value),
            )
        return value

    def expect_bool(self, name: str) -> bool:
        """Consume field ``name`` and return its boolean value."""
        value: object = self.expect(name)
        if not isinstance(value, bool):
            raise FormatError(
                f"Expected a boolean for '{name}', but read {_describe(value)}",
                expected="boolean",
                actual=_describe(value),
            )
        return value

    def expect_object(self, name: str) -> WireObject:
        """Consume field ``name`` and return its object value."""
        return _as_object(self.expect(name), name)

    def expect_array(self, name: str) -> list[object]:
        """Consume field ``name`` and return its array value."""
        value: object = self.expect(name)
        if not isinstance(value, list):
            raise FormatError(
                f"Expected an array for '{name}', but read {_describe(value)}",
                expected="array",
                actual=_describe(value),
            )
        return value

    def expect_string_array(self, name: str) -> list[str]:
        """Consume field ``name`` and return its array of strings."""
        items: list[str] = []
        for item in self.expect_array(name):
            if not isinstance(item, str):
                raise FormatError(
                    f"Expected strings in '{name}', but read {_describe(item)}",
                    expected="string",
                    actual=_describe(item),
                )
            items.append(item)
        return items

    def expect_object_array(self, name: str) -> list[WireObject]:
        """Consume field ``name`` and return its array of objects."""
        return [_as_object(item, name) for item in self.expect_array(name)]

    def end(self) -> None:
        """Check that every field of the object has been consumed.

        Raises:
            FormatError: If fields are left.
        """
        if self._pos < len(self.pairs):
            key: str = self.pairs[self._pos][0]
            raise FormatError(
                f"Expected end of object, but read '{key}'",
                expected=None,
                actual=key,
            )


def _as_object(value: object, name: str) -> WireObject:
    if not isinstance(value, WireObject):
        raise FormatError(
            f"Expected an object in '{name}', but read {_describe(value)}",
            expected="object",
            actual=_describe(value),
        )
    return value


def read_button(obj: WireObject) -> Button:
    """Decode a button object."""
    text: str = obj.expect_string(WireKey.TEXT)
    type_name: str = obj.expect_string(WireKey.TYPE)
    button_type: ButtonType | None = enum_from_name(ButtonType, type_name)
    if button_type is None:
        raise FormatError(
            f"Expected a valid button type, but got '{type_name}'",
            expected="button type",
            actual=type_name,
        )
    button = Button(text, button_type)
    button.should_close = obj.expect_bool(WireKey.SHOULD_CLOSE)
    button.should_continue = obj.expect_bool(WireKey.SHOULD_CONTINUE)
    button.clipboard = obj.expect_string(WireKey.CLIPBOARD)
    obj.end()
    return button


def read_node(obj: WireObject, parent: StatusNode | None = None) -> StatusNode:
    """Decode a status node and its sub-tree, linking every child to its parent."""
    node = StatusNode.restore(
        parent,
        name=obj.expect_string(WireKey.NAME),
        icon_type=obj.expect_string(WireKey.ICON),
        warning_level=WarningLevel.read(obj.expect_string(WireKey.LEVEL)),
        expand_by_default=obj.expect_bool(WireKey.EXPAND_BY_DEFAULT),
        details=obj.expect_string_or_none(WireKey.DETAILS),
    )
    for child in obj.expect_object_array(WireKey.CHILDREN):
        node.children.append(read_node(child, node))
    obj.end()
    return node


def read_tab(obj: WireObject) -> Tab:
    """Decode a tab object."""
    filter_level: WarningLevel = WarningLevel.read(obj.expect_string(WireKey.LEVEL))
    node: StatusNode = read_node(obj.expect_object(WireKey.NODE))
    obj.end()
    tab = Tab(node.name, node=node)
    tab.filter_level = filter_level
    return tab


def read_message(obj: WireObject) -> Message:
    """Decode a message object and its sub-messages."""
    message = Message(
        title=obj.expect_string(WireKey.TITLE),
        icon_type=obj.expect_string(WireKey.ICON),
    )
    message.description = obj.expect_string_array(WireKey.DESCRIPTION)
    message.additional_info = obj.expect_string_array(WireKey.INFO)
    message.buttons = [read_button(b) for b in obj.expect_object_array(WireKey.BUTTONS)]
    message.sub_message_header = obj.expect_string(WireKey.SUB_MESSAGE_HEADER)
    message.sub_messages = [read_message(m) for m in obj.expect_object_array(WireKey.SUB_MESSAGES)]
    obj.end()
    return message


def read_report(obj: WireObject) -> Report:
    """Decode a whole report object."""
    report = Report(obj.expect_string(WireKey.TITLE), obj.expect_string(WireKey.MAIN_TEXT))
    report.messages = [read_message(m) for m in obj.expect_object_array(WireKey.MESSAGES)]
    report.tabs = [read_tab(t) for t in obj.expect_object_array(WireKey.TABS)]
    report.buttons = [read_button(b) for b in obj.expect_object_array(WireKey.BUTTONS)]
    obj.end()
    logger.debug(
        "Decoded report %r: %d message(s), %d tab(s), %d button(s)",
        report.title,
        len(report.messages),
        len(report.tabs),
        len(report.buttons),
    )
    return report
