# topmark:header:start
#
#   project      : StatusTree
#   file         : __init__.py
#   file_relpath : src/statustree/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for StatusTree.

Submodules:
    - `statustree.config.keys`: canonical TOML section and key names.
    - `statustree.config.io`: TOML loading and value getters (tomlkit).
    - `statustree.config.model`: `MutableConfig` builder and frozen `Config`.
    - `statustree.config.logging`: TRACE-aware logger and colored formatter.
"""
