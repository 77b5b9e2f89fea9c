# topmark:header:start
#
#   project      : StatusTree
#   file         : formats.py
#   file_relpath : src/statustree/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions used across StatusTree frontends.

Machine formats (JSON) are intended to be stable and colorless.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        JSON: The report wire format (machine-readable).
    """

    TEXT = "text"
    JSON = "json"


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats intended for machine consumption."""
    return fmt == OutputFormat.JSON
