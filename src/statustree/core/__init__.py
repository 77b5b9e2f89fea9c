# topmark:header:start
#
#   project      : StatusTree
#   file         : __init__.py
#   file_relpath : src/statustree/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across StatusTree.

Included modules:

- ``errors``
  Library exceptions (`FormatError`, `InvariantViolation`, `FormattedError`).

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.

- ``enum_mixins``
  Typing-friendly Enum lookup helpers that remain independent of CLI or UI
  rendering.

- ``formats``
  The `OutputFormat` vocabulary shared by CLI commands.

Design goals:

- Keep this package free of UI dependencies and side effects.
- Prefer small, well-typed helpers over framework-specific utilities.
"""

from __future__ import annotations
