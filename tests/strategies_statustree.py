# topmark:header:start
#
#   project      : StatusTree
#   file         : strategies_statustree.py
#   file_relpath : tests/strategies_statustree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for generating reports through the public builders.

Reports are assembled only with `Report.add_tab`, `Tab.add_child`,
`Report.add_message`, `Message.add_sub_message`, the ``add_button`` methods and
the fluent `Button` builders, so every generated report is one a host could
produce.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from statustree.model.icons import IconType
from statustree.model.levels import WarningLevel
from statustree.model.report import Button, ButtonType, Report

Draw = Callable[[st.SearchStrategy[Any]], Any]

EXCLUDED_CATEGORIES: tuple[str, ...] = ("Cs",)

# Free text, biased toward the characters the markup parser and JSON care about.
texts: st.SearchStrategy[str] = st.text(
    alphabet=st.one_of(
        st.sampled_from(["\n", "\t", "$", " ", "x", "!", "+", "-", "/", '"', "\\", "é", "✓"]),
        st.characters(exclude_categories=EXCLUDED_CATEGORIES),
    ),
    max_size=20,
)

icons: st.SearchStrategy[str] = st.one_of(
    st.sampled_from([IconType.DEFAULT, IconType.FOLDER, IconType.JAR_FILE, IconType.QUILT_JSON]),
    texts,
)

# One line of outline markup: optional tabs, level marker and icon, then a label.
markup_lines: st.SearchStrategy[str] = st.builds(
    lambda tabs, marker, icon, label: "\t" * tabs + marker + icon + label,
    st.integers(min_value=0, max_value=3),
    st.sampled_from(["", "- ", "+ ", "! ", "x "]),
    st.sampled_from(["", "$jar$ ", "$json+quilt$ ", "$ "]),
    texts,
)


def _draw_buttons(draw: Draw, target: Any, max_size: int) -> None:
    """Append buttons to ``target`` and configure them through the fluent builders."""
    for _ in range(draw(st.integers(min_value=0, max_value=max_size))):
        button: Button = target.add_button(draw(texts), draw(st.sampled_from(list(ButtonType))))
        if draw(st.booleans()):
            button.make_close()
        if draw(st.booleans()):
            button.make_continue()
        if draw(st.booleans()):
            button.with_clipboard(draw(texts))


@st.composite
def reports(draw: Draw) -> Report:
    """Generate a report with messages, tabs and buttons."""
    report = Report(draw(texts), draw(texts))

    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        message = report.add_message(draw(texts), draw(icons))
        message.description.extend(draw(st.lists(texts, max_size=3)))
        message.additional_info.extend(draw(st.lists(texts, max_size=2)))
        _draw_buttons(draw, message, 2)
        message.sub_message_header = draw(texts)
        for _ in range(draw(st.integers(min_value=0, max_value=2))):
            message.add_sub_message(draw(texts), draw(icons)).description.extend(
                draw(st.lists(texts, max_size=2))
            )

    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        tab = report.add_tab(draw(texts))
        for line in draw(st.lists(markup_lines, max_size=8)):
            node = tab.add_child(line)
            if draw(st.booleans()):
                node.details = draw(texts)
            level: WarningLevel = draw(st.sampled_from(list(WarningLevel)))
            node.set_warning_level(
                WarningLevel.get_highest(node.get_maximum_warning_level(), level)
            )
        tab.filter_level = draw(st.sampled_from(list(WarningLevel)))

    _draw_buttons(draw, report, 3)

    return report
