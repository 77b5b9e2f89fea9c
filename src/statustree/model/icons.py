# topmark:header:start
#
#   project      : StatusTree
#   file         : icons.py
#   file_relpath : src/statustree/model/icons.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Well-known icon type tags.

Icon types are free-form strings as far as the tree model is concerned; the
renderer gives meaning to them. A tag may carry decorations joined with ``+``
(e.g. ``"jar+quilt"``). The constants below are the values producers commonly
use; the empty string means "no icon".
"""

from __future__ import annotations

from typing import Final


class IconType:
    """Canonical icon type tags understood by renderers."""

    # No icon is displayed.
    DEFAULT: Final[str] = ""

    FOLDER: Final[str] = "folder"
    # Generic file with unknown contents.
    UNKNOWN_FILE: Final[str] = "file"

    JAR_FILE: Final[str] = "jar"
    FABRIC_JAR_FILE: Final[str] = "jar+fabric"
    QUILT_JAR_FILE: Final[str] = "jar+quilt"

    FABRIC: Final[str] = "fabric"
    QUILT: Final[str] = "quilt"

    JSON: Final[str] = "json"
    FABRIC_JSON: Final[str] = "json+fabric"
    QUILT_JSON: Final[str] = "json+quilt"

    JAVA_CLASS: Final[str] = "java_class"
    # A folder inside an archive.
    PACKAGE: Final[str] = "package"
    # A folder that contains class files.
    JAVA_PACKAGE: Final[str] = "java_package"

    # Something matched.
    TICK: Final[str] = "tick"
    # Something didn't match, without being an error.
    LESSER_CROSS: Final[str] = "lesser_cross"
