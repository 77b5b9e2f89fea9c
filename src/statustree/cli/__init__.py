# topmark:header:start
#
#   project      : StatusTree
#   file         : __init__.py
#   file_relpath : src/statustree/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree CLI package.

This package groups all Click command definitions and supporting utilities
for the StatusTree command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        statustree = "statustree.cli.main:cli"

All subcommands live in `statustree.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
