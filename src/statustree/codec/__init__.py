# topmark:header:start
#
#   project      : StatusTree
#   file         : __init__.py
#   file_relpath : src/statustree/codec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Wire codec for status reports.

Layers:

1) Keys (`statustree.codec.keys`): field names and the mandated field order.
2) Payloads (`statustree.codec.payloads`): model → ordered ``dict``.
3) Reader (`statustree.codec.reader`): parsed JSON → model, order enforced.
4) Serializers (`statustree.codec.serializers`): text and stream I/O.

Rule of thumb:
- The writer and the reader must stay symmetric field-for-field. Adding a
  field means adding it to both, at the same position.
"""

from __future__ import annotations

from statustree.codec.payloads import build_report_payload
from statustree.codec.serializers import (
    deserialize_report,
    dump_report,
    load_report,
    serialize_report,
)

__all__ = [
    "build_report_payload",
    "deserialize_report",
    "dump_report",
    "load_report",
    "serialize_report",
]
