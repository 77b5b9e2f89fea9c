# topmark:header:start
#
#   project      : StatusTree
#   file         : outline.py
#   file_relpath : src/statustree/rendering/outline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text outline rendering of status reports.

The outline is intended for terminals: one line per node, indented by depth,
colored by warning level with `yachalk` when color is enabled. Machine output
uses the JSON codec instead (see `statustree.codec`).

Tabs honor their ``filter_level``: a node is shown when its aggregated level is
at least as severe as the filter (``NONE`` shows everything). The tab root is
always shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from statustree.model.levels import WarningLevel

if TYPE_CHECKING:
    from statustree.model.node import StatusNode
    from statustree.model.report import Button, Message, Report, Tab

INDENT: Final[str] = "  "


def _plain(text: str) -> str:
    return text


def level_color(level: WarningLevel) -> Callable[[str], str]:
    """Return the `yachalk` color function associated with a warning level."""
    return cast(
        "Callable[[str], str]",
        {
            WarningLevel.FATAL: chalk.red_bright.bold,
            WarningLevel.ERROR: chalk.red_bright,
            WarningLevel.WARN: chalk.yellow,
            WarningLevel.CONCERN: chalk.magenta,
            WarningLevel.INFO: chalk.blue,
            WarningLevel.NONE: _plain,
        }[level],
    )


def _paint(text: str, level: WarningLevel, color: bool) -> str:
    return level_color(level)(text) if color else text


def render_node_lines(
    node: StatusNode,
    *,
    depth: int = 0,
    filter_level: WarningLevel = WarningLevel.NONE,
    color: bool = False,
) -> list[str]:
    """Render a node and the visible part of its sub-tree.

    Args:
        node (StatusNode): The node to render (always shown).
        depth (int): Indentation depth of ``node``.
        filter_level (WarningLevel): Children less severe than this are hidden.
        color (bool): Whether to emit ANSI colors.

    Returns:
        list[str]: One line per rendered node or detail line.
    """
    level: WarningLevel = node.get_maximum_warning_level()
    label: str = node.name
    if node.icon_type:
        label = f"{label} ({node.icon_type})"
    if level is not WarningLevel.NONE:
        label = f"{label} [{level.lower_case_name}]"

    prefix: str = INDENT * depth
    lines: list[str] = [prefix + "- " + _paint(label, level, color)]
    if node.details:
        lines.extend(f"{prefix}{INDENT}| {line}" for line in node.details.split("\n"))

    for child in node.children:
        if child.get_maximum_warning_level().is_at_least(filter_level):
            lines.extend(
                render_node_lines(child, depth=depth + 1, filter_level=filter_level, color=color)
            )
    return lines


def render_tab_lines(tab: Tab, *, color: bool = False) -> list[str]:
    """Render one tab: its root node and visible descendants."""
    return render_node_lines(tab.node, filter_level=tab.filter_level, color=color)


def _render_buttons(buttons: list[Button], prefix: str) -> list[str]:
    return [f"{prefix}[{button.text}]" for button in buttons]


def render_message_lines(message: Message, *, depth: int = 0) -> list[str]:
    """Render a message with its description, additional info, buttons and sub-messages."""
    prefix: str = INDENT * depth
    lines: list[str] = [f"{prefix}* {message.title}"]
    lines.extend(f"{prefix}{INDENT}{line}" for line in message.description)
    lines.extend(f"{prefix}{INDENT}{line}" for line in message.additional_info)
    lines.extend(_render_buttons(message.buttons, prefix + INDENT))
    if message.sub_messages:
        if message.sub_message_header:
            lines.append(f"{prefix}{INDENT}{message.sub_message_header}")
        for sub in message.sub_messages:
            lines.extend(render_message_lines(sub, depth=depth + 1))
    return lines


def render_report_lines(report: Report, *, color: bool = False) -> list[str]:
    """Render a whole report as a text outline.

    Args:
        report (Report): The report to render.
        color (bool): Whether to emit ANSI colors.

    Returns:
        list[str]: The outline, one entry per line.
    """
    level: WarningLevel = report.get_maximum_warning_level()
    title: str = report.title
    if level is not WarningLevel.NONE:
        title = f"{title} [{level.lower_case_name}]"
    lines: list[str] = [chalk.bold(title) if color else title]
    if report.main_text:
        lines.append(report.main_text)

    for message in report.messages:
        lines.append("")
        lines.extend(render_message_lines(message))

    for tab in report.tabs:
        lines.append("")
        lines.extend(render_tab_lines(tab, color=color))

    if report.buttons:
        lines.append("")
        lines.extend(_render_buttons(report.buttons, ""))
    return lines
