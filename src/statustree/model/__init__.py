# topmark:header:start
#
#   project      : StatusTree
#   file         : __init__.py
#   file_relpath : src/statustree/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status report data model.

Design:
    - `WarningLevel` orders severities; `StatusNode` aggregates them upward.
    - `Report` owns `Message`s, `Tab`s (each with a root `StatusNode`) and
      `Button`s.
    - Everything here is in-memory and single-threaded; encoding lives in
      `statustree.codec`.
"""

from __future__ import annotations

from statustree.model.icons import IconType
from statustree.model.levels import WarningLevel
from statustree.model.node import StatusNode
from statustree.model.report import Button, ButtonType, Message, Report, SizedImage, Tab

__all__ = [
    "Button",
    "ButtonType",
    "IconType",
    "Message",
    "Report",
    "SizedImage",
    "StatusNode",
    "Tab",
    "WarningLevel",
]
