# topmark:header:start
#
#   project      : StatusTree
#   file         : keys.py
#   file_relpath : src/statustree/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for StatusTree configuration.

These constants describe the configuration schema as it appears in
``statustree.toml`` and in ``[tool.statustree]`` inside ``pyproject.toml``.

Notes:
    - Values must match user-facing TOML keys exactly.
    - Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by StatusTree configuration."""

    # [codec]
    SECTION_CODEC: Final[str] = "codec"

    KEY_INDENT: Final[str] = "indent"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_FOLDER_ICON: Final[str] = "folder_icon"
    KEY_FILE_ICON: Final[str] = "file_icon"

    # [check]
    SECTION_CHECK: Final[str] = "check"

    KEY_FAIL_ON: Final[str] = "fail_on"
