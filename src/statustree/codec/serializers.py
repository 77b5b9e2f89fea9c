# topmark:header:start
#
#   project      : StatusTree
#   file         : serializers.py
#   file_relpath : src/statustree/codec/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON encoding and decoding of whole reports.

Separation of concerns:
- `statustree.codec.payloads` builds ordered payload dicts (no JSON).
- `statustree.codec.reader` consumes parsed objects in the mandated field order.
- This module converts between reports and JSON text or text streams.

Conventions:
- `serialize_report` does not append a trailing newline; `dump_report` does.
- Output is deterministic: encoding the same report twice, or re-encoding a
  decoded report, yields identical text.
- Any decode problem, including malformed JSON, raises `FormatError`.
"""

from __future__ import annotations

import json
from typing import IO, TYPE_CHECKING

from statustree.codec.payloads import build_report_payload
from statustree.codec.reader import WireObject, read_report
from statustree.config.logging import get_logger
from statustree.core.errors import FormatError

if TYPE_CHECKING:
    from statustree.config.logging import StatusTreeLogger
    from statustree.model.report import Report

logger: StatusTreeLogger = get_logger(__name__)

DEFAULT_INDENT: int | None = 2


def serialize_report(report: Report, *, indent: int | None = DEFAULT_INDENT) -> str:
    """Encode a report as JSON text (no trailing newline).

    Args:
        report: The report to encode.
        indent: Indentation width, or None for a compact single-line document.

    Returns:
        The JSON document.
    """
    payload: dict[str, object] = build_report_payload(report)
    text: str = json.dumps(payload, indent=indent)
    logger.debug("Encoded report %r (%d characters)", report.title, len(text))
    return text


def deserialize_report(text: str) -> Report:
    """Decode a report from JSON text.

    Args:
        text: The JSON document.

    Returns:
        The decoded report, with parent links restored in every tree.

    Raises:
        FormatError: If the text is not JSON or does not follow the wire format.
    """
    try:
        document: object = json.loads(text, object_pairs_hook=WireObject)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Invalid JSON: {exc}") from exc

    if not isinstance(document, WireObject):
        raise FormatError("Expected a report object at the top level", expected="object")
    return read_report(document)


def dump_report(report: Report, fp: IO[str], *, indent: int | None = DEFAULT_INDENT) -> None:
    """Write a report to a text stream, followed by a newline."""
    fp.write(serialize_report(report, indent=indent))
    fp.write("\n")


def load_report(fp: IO[str]) -> Report:
    """Read a report from a text stream.

    Raises:
        FormatError: If the stream content does not follow the wire format.
    """
    return deserialize_report(fp.read())
