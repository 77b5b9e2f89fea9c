# topmark:header:start
#
#   project      : StatusTree
#   file         : node.py
#   file_relpath : src/statustree/model/node.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status tree nodes.

A `StatusNode` is one entry in a display tree. Nodes own their children
(``children`` list) and keep a non-owning back-reference to their parent which is
used only to propagate severity upward and to re-parent nodes.

Severity invariant:
    A node's warning level is always at least as severe as the level of any of its
    descendants. `StatusNode.set_warning_level` maintains this eagerly by raising
    the parent chain *before* committing the new level. Levels can never be
    lowered; an attempt raises `InvariantViolation`.

    `StatusNode.move_to` does not re-aggregate severity: the old parent keeps its
    (possibly now too high) level.

Construction helpers:
    * `StatusNode.add_child`: parse one line of outline markup
      (tabs for depth, an optional ``x``/``!``/``+``/``-`` level marker, an
      optional ``$icon$`` tag, then the label).
    * `StatusNode.add_exception` / `StatusNode.add_cleaned_exception`: turn an
      exception with its suppressed exceptions and cause chain into a sub-tree.
    * `StatusNode.get_file_node`: group ``/``-separated paths into folders,
      combined with `StatusNode.merge_child_file_paths` to collapse single-entry
      folder chains into ``a/b/c`` labels.

None of these operations lock anything: one writer at a time per tree.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from statustree.config.logging import get_logger
from statustree.core.errors import InvariantViolation
from statustree.model.exceptions import (
    clean_exception,
    exception_cause,
    format_exception_message,
    suppressed_exceptions,
)
from statustree.model.icons import IconType
from statustree.model.levels import WarningLevel

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from statustree.config.logging import StatusTreeLogger

logger: StatusTreeLogger = get_logger(__name__)

_ICON_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$([a-z.+-]+)\$")


class StatusNode:
    """One entry of a status tree.

    Attributes:
        name (str): Human-readable label. Merge operations append to it.
        icon_type (str): Opaque icon tag; ``""`` means no icon (see `IconType`).
        expand_by_default (bool): Display hint for renderers.
        details (str | None): Optional extra text; lines are separated by ``"\\n"``.
        children (list[StatusNode]): Ordered child nodes, owned by this node.
    """

    name: str
    icon_type: str
    expand_by_default: bool
    details: str | None
    children: list[StatusNode]

    def __init__(self, parent: StatusNode | None, name: str) -> None:
        self._parent: StatusNode | None = parent
        self._warning_level: WarningLevel = WarningLevel.NONE
        self.name = name
        self.icon_type = IconType.DEFAULT
        self.expand_by_default = False
        self.details = None
        self.children = []

    @classmethod
    def restore(
        cls,
        parent: StatusNode | None,
        *,
        name: str,
        icon_type: str,
        warning_level: WarningLevel,
        expand_by_default: bool,
        details: str | None,
    ) -> StatusNode:
        """Recreate a node exactly as it was encoded.

        The warning level is assigned as-is, without propagation: a decoded tree
        carries the levels that the producer had already aggregated. The caller is
        responsible for appending the node to ``parent.children``.
        """
        node = cls(parent, name)
        node.icon_type = icon_type
        node._warning_level = warning_level
        node.expand_by_default = expand_by_default
        node.details = details
        return node

    def __repr__(self) -> str:
        return (
            f"StatusNode(name={self.name!r}, icon_type={self.icon_type!r}, "
            f"level={self._warning_level.name}, children={len(self.children)})"
        )

    @property
    def parent(self) -> StatusNode | None:
        """The node owning this one, or None for a root."""
        return self._parent

    # --- Severity ---

    def get_maximum_warning_level(self) -> WarningLevel:
        """Return the aggregated level of this node and all of its descendants."""
        return self._warning_level

    def set_warning_level(self, level: WarningLevel | None) -> None:
        """Raise this node's warning level, propagating it to the ancestors.

        Args:
            level: The new level. ``None`` and the current level are no-ops.

        Raises:
            InvariantViolation: If ``level`` is less severe than the current level.
        """
        if level is None or level is self._warning_level:
            return

        if self._warning_level.is_higher_than(level):
            logger.error(
                "Refusing to lower warning level of %r from %s to %s",
                self.name,
                self._warning_level.name,
                level.name,
            )
            raise InvariantViolation(
                f"Cannot lower the warning level of {self.name!r} "
                f"from {self._warning_level.name} to {level.name}"
            )

        parent: StatusNode | None = self._parent
        if parent is not None and level.is_higher_than(parent._warning_level):
            parent.set_warning_level(level)

        logger.trace(
            "Warning level of %r: %s -> %s", self.name, self._warning_level.name, level.name
        )
        self._warning_level = level

    def set_error(self) -> None:
        """Raise this node to `WarningLevel.ERROR`."""
        self.set_warning_level(WarningLevel.ERROR)

    def set_warning(self) -> None:
        """Raise this node to `WarningLevel.WARN`."""
        self.set_warning_level(WarningLevel.WARN)

    def set_info(self) -> None:
        """Raise this node to `WarningLevel.INFO`."""
        self.set_warning_level(WarningLevel.INFO)

    # --- Structure ---

    def add_child(self, markup: str) -> StatusNode:
        r"""Parse one line of outline markup and append the resulting node.

        Markup, left to right:

        1. Leading tab characters: the indent depth. For every tab, descend into the
           last child (synthesizing an empty placeholder when there is none); every
           node descended into is marked ``expand_by_default``.
        2. An optional level marker: one of ``- + ! x`` followed by whitespace.
        3. An optional icon tag ``$token$`` with ``token`` matching ``[a-z.+-]+``.
        4. The label (trimmed).

        Example:
            ``node.add_child("\t\t! $tick$ Hello")`` on a childless node creates two
            empty placeholders and a ``WARN`` leaf named ``"Hello"`` with icon ``"tick"``.

        Args:
            markup: A single line of markup.

        Returns:
            The newly created node.
        """
        text: str = markup.lstrip("\t")
        indent: int = len(markup) - len(text)
        level: WarningLevel | None = None

        text = text.strip()
        if len(text) > 1 and text[1].isspace():
            level = WarningLevel.from_char(text[0])
            if level is not None:
                text = text[2:]

        text = text.strip()
        icon: str = IconType.DEFAULT
        if len(text) > 3 and text.startswith("$"):
            match: re.Match[str] | None = _ICON_PATTERN.match(text)
            if match is not None:
                icon = match.group(1)
                text = text[match.end() :]

        text = text.strip()

        target: StatusNode = self
        for _ in range(indent):
            if not target.children:
                placeholder = StatusNode(target, "")
                target.children.append(placeholder)
                target = placeholder
            else:
                target = target.children[-1]
            target.expand_by_default = True

        child = StatusNode(target, text)
        child.set_warning_level(level)
        child.icon_type = icon
        target.children.append(child)
        logger.trace("Added %r under %r (indent=%d)", child.name, target.name, indent)
        return child

    def move_to(self, new_parent: StatusNode) -> None:
        """Detach this node from its parent and append it to ``new_parent``.

        Severity is not re-aggregated on either parent.
        """
        if self._parent is not None:
            self._parent.children.remove(self)
        self._parent = new_parent
        new_parent.children.append(self)

    def iter_nodes(self) -> Iterator[StatusNode]:
        """Yield this node and all of its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    # --- Exceptions ---

    def add_exception(self, exception: BaseException) -> StatusNode:
        """Append ``exception`` (with suppressed exceptions and causes) as a sub-tree.

        Returns:
            The node created for ``exception`` itself.
        """
        logger.debug("Importing exception %r under %r", exception, self.name)
        return StatusNode._add_exception(self, {}, exception, None)

    def add_cleaned_exception(self, exception: BaseException) -> StatusNode:
        """Like `add_exception`, but collapse wrappers that only repeat their cause.

        Returns:
            The node created for the first non-redundant exception of the chain.
        """
        logger.debug("Importing cleaned exception %r under %r", exception, self.name)
        return StatusNode._add_exception(self, {}, exception, clean_exception)

    @staticmethod
    def _add_exception(
        node: StatusNode,
        seen: dict[int, BaseException],
        exception: BaseException,
        exception_filter: Callable[[BaseException], BaseException] | None,
    ) -> StatusNode:
        # Keyed by identity; the dict also keeps visited exceptions alive so ids stay unique.
        if id(exception) in seen:
            return node
        seen[id(exception)] = exception

        if exception_filter is not None:
            exception = exception_filter(exception)
        sub: StatusNode = node._add_exception_node(exception)

        for suppressed in suppressed_exceptions(exception):
            StatusNode._add_exception(sub, seen, suppressed, exception_filter)

        cause: BaseException | None = exception_cause(exception)
        if cause is not None:
            StatusNode._add_exception(sub, seen, cause, exception_filter)

        return sub

    def _add_exception_node(self, exception: BaseException) -> StatusNode:
        lines: list[str] = format_exception_message(exception).split("\n")
        while len(lines) > 1 and not lines[-1]:
            lines.pop()

        sub = StatusNode(self, lines[0])
        self.children.append(sub)
        sub.set_error()
        sub.expand_by_default = True

        for line in lines[1:]:
            sub.add_child(line)

        return sub

    # --- File paths ---

    def merge_with_single_child(self, join: str) -> None:
        """Merge the only child into this node, joining the names with ``join``.

        Does nothing unless this node has exactly one child. The child's children
        are re-parented onto this node.
        """
        if len(self.children) != 1:
            return

        child: StatusNode = self.children.pop(0)
        self.name += join + child.name

        for grandchild in child.children:
            grandchild._parent = self
            self.children.append(grandchild)

        child.children.clear()

    def merge_single_child_file_path(self, folder_type: str) -> None:
        """Collapse a run of single-child folders into one ``a/b/c`` label.

        Only applies to nodes tagged ``folder_type``. A root node (no parent) is a
        container label rather than a path segment, so it never absorbs its child;
        its children are still sorted and merged.

        Args:
            folder_type: The icon type that marks folders.
        """
        if self.icon_type != folder_type:
            return

        if self._parent is not None:
            while len(self.children) == 1 and self.children[0].icon_type == folder_type:
                self.merge_with_single_child("/")

        self.children.sort(key=lambda node: node.name)
        self.merge_child_file_paths(folder_type)

    def merge_child_file_paths(self, folder_type: str) -> None:
        """Apply `merge_single_child_file_path` to every child."""
        for child in self.children:
            child.merge_single_child_file_path(folder_type)

    def get_file_node(self, file: str, folder_type: str, file_type: str) -> StatusNode:
        """Return the node for a ``/``-separated path, creating folders as needed.

        Existing children are matched by exact name. Before a child is created, a
        node that still has the default icon is tagged ``folder_type``. Empty path
        segments are ignored.

        Args:
            file: The ``/``-separated path.
            folder_type: Icon type for intermediate folders.
            file_type: Icon type for the returned file node.

        Returns:
            The node of the last path segment (``self`` for an empty path).
        """
        file_node: StatusNode = self

        for segment in file.split("/"):
            if not segment:
                continue

            existing: StatusNode | None = next(
                (c for c in file_node.children if c.name == segment), None
            )
            if existing is not None:
                file_node = existing
                continue

            if file_node.icon_type == IconType.DEFAULT:
                file_node.icon_type = folder_type

            file_node = file_node.add_child(segment)

        file_node.icon_type = file_type
        return file_node
