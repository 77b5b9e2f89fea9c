# topmark:header:start
#
#   project      : StatusTree
#   file         : constants.py
#   file_relpath : src/statustree/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

STATUSTREE: str = "statustree"

STATUSTREE_VERSION: str = get_version(STATUSTREE)

# Project-local config file, looked up in the working directory:
CONFIG_FILE_NAME: str = "statustree.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.statustree"

# Path argument meaning "read from standard input":
STDIN_PATH: str = "-"
