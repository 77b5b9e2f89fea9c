# topmark:header:start
#
#   project      : StatusTree
#   file         : __init__.py
#   file_relpath : src/statustree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree package.

StatusTree models hierarchical status reports (load errors, warnings, file
listings) produced by a host process, and encodes them in an order-fixed JSON
wire format for a separate renderer. It exposes the data model
(`statustree.model`), the codec (`statustree.codec`) and a small CLI.
"""

from __future__ import annotations
