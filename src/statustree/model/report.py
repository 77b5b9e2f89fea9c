# topmark:header:start
#
#   project      : StatusTree
#   file         : report.py
#   file_relpath : src/statustree/model/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level report containers.

A `Report` is what a host process hands to a renderer. It owns:

    * `Message`: flat report units (title, description lines, extra info, buttons)
      with an optional single level of sub-messages.
    * `Tab`: a named `StatusNode` tree plus a minimum level to display.
    * `Button`: actions the renderer offers; the renderer honors
      ``should_close``/``should_continue`` when a button fires.

Custom icons are registered on the report as ``{pixel_size: image}`` mappings and
referenced by their index. Images are opaque here: they are never inspected beyond
reading ``width`` in `Report.allocate_custom_icon`, and are not part of the wire
format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol

from statustree.config.logging import get_logger
from statustree.model.icons import IconType
from statustree.model.levels import WarningLevel
from statustree.model.node import StatusNode

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from statustree.config.logging import StatusTreeLogger

logger: StatusTreeLogger = get_logger(__name__)


class ButtonType(Enum):
    """How a button behaves once it fires. The member name is the wire form."""

    # Sends the status message to the host, then disables itself.
    CLICK_ONCE = auto()
    # Sends the status message to the host and stays enabled.
    CLICK_MANY = auto()


class SizedImage(Protocol):
    """Any image object exposing its pixel width."""

    @property
    def width(self) -> int:
        """Width of the image in pixels."""
        ...


@dataclass
class Button:
    """An action offered by the renderer.

    Attributes:
        text (str): Button label.
        type (ButtonType): Click behavior.
        clipboard (str): Text copied to the clipboard when fired (``""`` for none).
        should_close (bool): Close the renderer when fired.
        should_continue (bool): Let the host continue when fired.
    """

    text: str
    type: ButtonType
    clipboard: str = ""
    should_close: bool = False
    should_continue: bool = False

    def make_close(self) -> Button:
        """Mark the button as closing the renderer and return it."""
        self.should_close = True
        return self

    def make_continue(self) -> Button:
        """Mark the button as letting the host continue and return it."""
        self.should_continue = True
        return self

    def with_clipboard(self, clipboard: str) -> Button:
        """Set the clipboard payload and return the button."""
        self.clipboard = clipboard
        return self


@dataclass
class Message:
    """A flat report unit shown above the tabs."""

    title: str = ""
    icon_type: str = IconType.DEFAULT
    description: list[str] = field(default_factory=lambda: [])
    additional_info: list[str] = field(default_factory=lambda: [])
    buttons: list[Button] = field(default_factory=lambda: [])
    sub_message_header: str = ""
    sub_messages: list[Message] = field(default_factory=lambda: [])

    def add_button(self, text: str, type: ButtonType) -> Button:
        """Append a new button to this message and return it."""
        button = Button(text, type)
        self.buttons.append(button)
        return button

    def add_sub_message(self, title: str, icon_type: str = IconType.DEFAULT) -> Message:
        """Append a nested message and return it."""
        sub = Message(title=title, icon_type=icon_type)
        self.sub_messages.append(sub)
        return sub


class Tab:
    """A named status tree.

    Attributes:
        node (StatusNode): The unparented root; its name is the tab name.
        filter_level (WarningLevel): Minimum level the renderer should display.
    """

    node: StatusNode
    filter_level: WarningLevel

    def __init__(self, name: str, *, node: StatusNode | None = None) -> None:
        self.node = node if node is not None else StatusNode(None, name)
        self.filter_level = WarningLevel.NONE

    @property
    def name(self) -> str:
        """The tab label (the root node's name)."""
        return self.node.name

    def add_child(self, markup: str) -> StatusNode:
        """Shortcut for ``tab.node.add_child(markup)``."""
        return self.node.add_child(markup)


class Report:
    """Root container handed from the host to a renderer."""

    title: str
    main_text: str
    messages: list[Message]
    tabs: list[Tab]
    buttons: list[Button]

    def __init__(self, title: str, main_text: str) -> None:
        self.title = title
        self.main_text = main_text
        self.messages = []
        self.tabs = []
        self.buttons = []
        self._custom_icons: list[Mapping[int, object]] = []

    @property
    def custom_icons(self) -> Sequence[Mapping[int, object]]:
        """Registered custom icons, indexed by the value `allocate_custom_icon` returned."""
        return tuple(self._custom_icons)

    def allocate_custom_icon(self, image: SizedImage) -> int:
        """Register a single-size icon keyed by its width and return its index."""
        return self.allocate_custom_icon_sizes({image.width: image})

    def allocate_custom_icon_sizes(self, image_sizes: Mapping[int, object]) -> int:
        """Register an icon available in several pixel sizes and return its index.

        Args:
            image_sizes: Mapping from pixel size to an opaque image object.

        Returns:
            The stable index of the new icon.
        """
        self._custom_icons.append(dict(image_sizes))
        index: int = len(self._custom_icons) - 1
        logger.debug("Allocated custom icon %d with sizes %s", index, sorted(image_sizes))
        return index

    def add_tab(self, name: str) -> Tab:
        """Append a new tab and return it."""
        tab = Tab(name)
        self.tabs.append(tab)
        return tab

    def add_button(self, text: str, type: ButtonType) -> Button:
        """Append a new report-level button and return it."""
        button = Button(text, type)
        self.buttons.append(button)
        return button

    def add_message(self, title: str, icon_type: str = IconType.DEFAULT) -> Message:
        """Append a new message and return it."""
        message = Message(title=title, icon_type=icon_type)
        self.messages.append(message)
        return message

    def get_maximum_warning_level(self) -> WarningLevel:
        """Return the most severe level across all tab roots (`NONE` without tabs)."""
        highest: WarningLevel = WarningLevel.NONE
        for tab in self.tabs:
            highest = WarningLevel.get_highest(highest, tab.node.get_maximum_warning_level())
        return highest
