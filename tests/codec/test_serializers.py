# topmark:header:start
#
#   project      : StatusTree
#   file         : test_serializers.py
#   file_relpath : tests/codec/test_serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the order-fixed JSON codec."""

from __future__ import annotations

import io
import json

import pytest
from hypothesis import given, settings

from statustree.codec.keys import (
    BUTTON_FIELDS,
    MESSAGE_FIELDS,
    NODE_FIELDS,
    REPORT_FIELDS,
    TAB_FIELDS,
)
from statustree.codec.serializers import (
    deserialize_report,
    dump_report,
    load_report,
    serialize_report,
)
from statustree.core.errors import FormatError
from statustree.model.levels import WarningLevel
from statustree.model.report import ButtonType, Report
from tests.conftest import make_sample_report
from tests.strategies_statustree import reports


def test_reencoding_is_byte_identical() -> None:
    """encode → decode → encode yields the same text."""
    text = serialize_report(make_sample_report())
    assert serialize_report(deserialize_report(text)) == text


def test_compact_encoding_is_single_line() -> None:
    """``indent=None`` produces a single-line document that decodes identically."""
    report = make_sample_report()
    compact = serialize_report(report, indent=None)
    assert "\n" not in compact
    assert serialize_report(deserialize_report(compact)) == serialize_report(report)


@settings(max_examples=100)
@given(report=reports())
def test_reencoding_any_built_report_is_byte_identical(report: Report) -> None:
    """Any report built through the public builders re-encodes to the same text."""
    assert "\n" not in serialize_report(report, indent=None)
    for indent in (2, None):
        text = serialize_report(report, indent=indent)
        assert serialize_report(deserialize_report(text), indent=indent) == text


def test_field_order_matches_contract() -> None:
    """Every object is written with its fields in the mandated order."""
    payload = json.loads(serialize_report(make_sample_report()))
    assert tuple(payload) == REPORT_FIELDS
    message = payload["messages"][0]
    assert tuple(message) == MESSAGE_FIELDS
    assert tuple(message["buttons"][0]) == BUTTON_FIELDS
    tab = payload["tabs"][0]
    assert tuple(tab) == TAB_FIELDS
    assert tuple(tab["node"]) == NODE_FIELDS


def test_wire_values() -> None:
    """Levels use lowercase names (``""`` for NONE); button types use member names."""
    payload = json.loads(serialize_report(make_sample_report()))
    tab = payload["tabs"][0]
    assert tab["level"] == ""
    root = tab["node"]
    assert root["level"] == "error"
    assert root["details"] is None
    assert root["children"][1]["details"] == "line one\nline two"
    assert root["children"][1]["level"] == ""
    assert payload["buttons"][0]["type"] == "CLICK_ONCE"
    assert payload["buttons"][0]["shouldClose"] is True


def test_decoded_tree_restores_parents_and_levels() -> None:
    """Decoding links every child to its parent and keeps the encoded levels."""
    report = deserialize_report(serialize_report(make_sample_report()))
    root = report.tabs[0].node
    assert root.parent is None
    for node in root.iter_nodes():
        for child in node.children:
            assert child.parent is node
    mods = root.children[0]
    assert mods.name == "mods"
    assert mods.icon_type == "folder"
    assert mods.expand_by_default
    assert mods.get_maximum_warning_level() is WarningLevel.ERROR
    assert report.get_maximum_warning_level() is WarningLevel.ERROR


def test_decoded_containers() -> None:
    """Messages, sub-messages and buttons survive a round trip."""
    report = deserialize_report(serialize_report(make_sample_report()))
    assert report.title == "Mod loading"
    (message,) = report.messages
    assert message.icon_type == "jar"
    assert message.additional_info == ["Installed: 1.19.4"]
    assert message.buttons[0].clipboard == "fabric-api"
    assert message.buttons[0].type is ButtonType.CLICK_ONCE
    assert [m.title for m in message.sub_messages] == ["fabric-api"]
    assert report.buttons[0].should_close


def test_tab_filter_level_round_trips() -> None:
    """A tab's filter level is written in its ``level`` field."""
    report = Report("t", "")
    report.add_tab("tab").filter_level = WarningLevel.CONCERN
    decoded = deserialize_report(serialize_report(report))
    assert decoded.tabs[0].filter_level is WarningLevel.CONCERN
    assert decoded.tabs[0].name == "tab"


def test_read_accepts_none_spelled_out() -> None:
    """``"none"`` is read as NONE even though the writer emits ``""``."""
    text = serialize_report(Report("t", "")).replace('"tabs": []', _tab_json('"none"'))
    report = deserialize_report(text)
    assert report.tabs[0].filter_level is WarningLevel.NONE


def _tab_json(level: str) -> str:
    node = (
        '{"name": "n", "icon": "", "level": ' + level + ', "expandByDefault": false, '
        '"details": null, "children": []}'
    )
    return '"tabs": [{"level": ' + level + ', "node": ' + node + "}]"


def test_out_of_order_field_is_rejected() -> None:
    """A node with ``icon`` before ``name`` reports the expected field."""
    text = (
        '{"title": "t", "mainText": "", "messages": [], "tabs": [{"level": "", "node": '
        '{"icon": "", "name": "n", "level": "", "expandByDefault": false, '
        '"details": null, "children": []}}], "buttons": []}'
    )
    with pytest.raises(FormatError) as excinfo:
        deserialize_report(text)
    assert excinfo.value.expected == "name"
    assert excinfo.value.actual == "icon"
    assert "Expected 'name', but read 'icon'" in str(excinfo.value)


def test_missing_field_is_rejected() -> None:
    """An object that ends early is a format error."""
    with pytest.raises(FormatError) as excinfo:
        deserialize_report('{"title": "t", "mainText": ""}')
    assert excinfo.value.expected == "messages"


def test_leftover_field_is_rejected() -> None:
    """Fields after the last expected one are a format error."""
    text = serialize_report(Report("t", ""), indent=None)[:-1] + ', "extra": 1}'
    with pytest.raises(FormatError, match="Expected end of object, but read 'extra'"):
        deserialize_report(text)


@pytest.mark.parametrize("level", ['"warning"', '"ERROR"', "3", "null"])
def test_bad_level_is_rejected(level: str) -> None:
    """Unknown level names and non-string levels are format errors."""
    text = serialize_report(Report("t", "")).replace('"tabs": []', _tab_json(level))
    with pytest.raises(FormatError):
        deserialize_report(text)


def test_bad_button_type_is_rejected() -> None:
    """Button types must match a member name exactly."""
    text = (
        '{"title": "t", "mainText": "", "messages": [], "tabs": [], "buttons": '
        '[{"text": "x", "type": "click_once", "shouldClose": false, '
        '"shouldContinue": false, "clipboard": ""}]}'
    )
    with pytest.raises(FormatError) as excinfo:
        deserialize_report(text)
    assert excinfo.value.actual == "click_once"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "{",
        "[]",
        '"report"',
        '{"title": 1, "mainText": "", "messages": [], "tabs": [], "buttons": []}',
        '{"title": "t", "mainText": "", "messages": {}, "tabs": [], "buttons": []}',
        '{"title": "t", "mainText": "", "messages": [1], "tabs": [], "buttons": []}',
    ],
)
def test_malformed_documents_are_rejected(text: str) -> None:
    """Invalid JSON and wrong JSON types are all reported as `FormatError`."""
    with pytest.raises(FormatError):
        deserialize_report(text)


def test_stream_helpers() -> None:
    """`dump_report` appends a newline; `load_report` reads it back."""
    buffer = io.StringIO()
    report = make_sample_report()
    dump_report(report, buffer)
    assert buffer.getvalue().endswith("}\n")

    buffer.seek(0)
    assert serialize_report(load_report(buffer)) == serialize_report(report)
