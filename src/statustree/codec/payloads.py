# topmark:header:start
#
#   project      : StatusTree
#   file         : payloads.py
#   file_relpath : src/statustree/codec/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload builders for the report wire format.

Each builder turns one model object into a plain, JSON-friendly ``dict`` whose
insertion order is the wire field order (see `statustree.codec.keys`). This
module is serialization-free (no ``json.dumps``); `statustree.codec.serializers`
turns payloads into text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from statustree.codec.keys import WireKey

if TYPE_CHECKING:
    from statustree.model.node import StatusNode
    from statustree.model.report import Button, Message, Report, Tab


def build_button_payload(button: Button) -> dict[str, object]:
    """Return the wire payload of a button."""
    return {
        WireKey.TEXT: button.text,
        WireKey.TYPE: button.type.name,
        WireKey.SHOULD_CLOSE: button.should_close,
        WireKey.SHOULD_CONTINUE: button.should_continue,
        WireKey.CLIPBOARD: button.clipboard,
    }


def build_node_payload(node: StatusNode) -> dict[str, object]:
    """Return the wire payload of a status node and its whole sub-tree."""
    return {
        WireKey.NAME: node.name,
        WireKey.ICON: node.icon_type,
        WireKey.LEVEL: node.get_maximum_warning_level().wire_name,
        WireKey.EXPAND_BY_DEFAULT: node.expand_by_default,
        WireKey.DETAILS: node.details,
        WireKey.CHILDREN: [build_node_payload(child) for child in node.children],
    }


def build_tab_payload(tab: Tab) -> dict[str, object]:
    """Return the wire payload of a tab."""
    return {
        WireKey.LEVEL: tab.filter_level.wire_name,
        WireKey.NODE: build_node_payload(tab.node),
    }


def build_message_payload(message: Message) -> dict[str, object]:
    """Return the wire payload of a message and its sub-messages."""
    return {
        WireKey.TITLE: message.title,
        WireKey.ICON: message.icon_type,
        WireKey.DESCRIPTION: list(message.description),
        WireKey.INFO: list(message.additional_info),
        WireKey.BUTTONS: [build_button_payload(b) for b in message.buttons],
        WireKey.SUB_MESSAGE_HEADER: message.sub_message_header,
        WireKey.SUB_MESSAGES: [build_message_payload(m) for m in message.sub_messages],
    }


def build_report_payload(report: Report) -> dict[str, object]:
    """Return the wire payload of a whole report."""
    return {
        WireKey.TITLE: report.title,
        WireKey.MAIN_TEXT: report.main_text,
        WireKey.MESSAGES: [build_message_payload(m) for m in report.messages],
        WireKey.TABS: [build_tab_payload(t) for t in report.tabs],
        WireKey.BUTTONS: [build_button_payload(b) for b in report.buttons],
    }
