# topmark:header:start
#
#   project      : StatusTree
#   file         : keys.py
#   file_relpath : src/statustree/codec/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical field names of the report wire format.

Field *order* is part of the contract; the ``*_FIELDS`` tuples list each
object's fields in the only order the writer emits and the reader accepts.
"""

from __future__ import annotations

from typing import Final


class WireKey:
    """Field names used in encoded reports.

    These are shared constants to avoid stringly-typed key drift between the
    writer and the reader.
    """

    # Report
    TITLE: Final[str] = "title"
    MAIN_TEXT: Final[str] = "mainText"
    MESSAGES: Final[str] = "messages"
    TABS: Final[str] = "tabs"
    BUTTONS: Final[str] = "buttons"

    # Message (also uses TITLE and BUTTONS)
    ICON: Final[str] = "icon"
    DESCRIPTION: Final[str] = "description"
    INFO: Final[str] = "info"
    SUB_MESSAGE_HEADER: Final[str] = "sub_message_header"
    SUB_MESSAGES: Final[str] = "sub_messages"

    # Tab
    LEVEL: Final[str] = "level"
    NODE: Final[str] = "node"

    # StatusNode (also uses ICON and LEVEL)
    NAME: Final[str] = "name"
    EXPAND_BY_DEFAULT: Final[str] = "expandByDefault"
    DETAILS: Final[str] = "details"
    CHILDREN: Final[str] = "children"

    # Button
    TEXT: Final[str] = "text"
    TYPE: Final[str] = "type"
    SHOULD_CLOSE: Final[str] = "shouldClose"
    SHOULD_CONTINUE: Final[str] = "shouldContinue"
    CLIPBOARD: Final[str] = "clipboard"


REPORT_FIELDS: Final[tuple[str, ...]] = (
    WireKey.TITLE,
    WireKey.MAIN_TEXT,
    WireKey.MESSAGES,
    WireKey.TABS,
    WireKey.BUTTONS,
)

MESSAGE_FIELDS: Final[tuple[str, ...]] = (
    WireKey.TITLE,
    WireKey.ICON,
    WireKey.DESCRIPTION,
    WireKey.INFO,
    WireKey.BUTTONS,
    WireKey.SUB_MESSAGE_HEADER,
    WireKey.SUB_MESSAGES,
)

TAB_FIELDS: Final[tuple[str, ...]] = (
    WireKey.LEVEL,
    WireKey.NODE,
)

NODE_FIELDS: Final[tuple[str, ...]] = (
    WireKey.NAME,
    WireKey.ICON,
    WireKey.LEVEL,
    WireKey.EXPAND_BY_DEFAULT,
    WireKey.DETAILS,
    WireKey.CHILDREN,
)

BUTTON_FIELDS: Final[tuple[str, ...]] = (
    WireKey.TEXT,
    WireKey.TYPE,
    WireKey.SHOULD_CLOSE,
    WireKey.SHOULD_CONTINUE,
    WireKey.CLIPBOARD,
)
