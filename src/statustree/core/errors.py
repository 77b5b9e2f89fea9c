# topmark:header:start
#
#   project      : StatusTree
#   file         : errors.py
#   file_relpath : src/statustree/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for StatusTree.

Error kinds:
    * `FormatError`: raised while decoding a report document whose structure does
      not match the order-fixed wire contract. Decoding is aborted on the first
      mismatch; there is no partial result.
    * `InvariantViolation`: raised when code tries to lower the warning level of a
      status node. This is a caller bug, so it deliberately does **not** derive
      from `StatusTreeError` and must not be caught by library code.
    * `FormattedError`: base class for host exceptions whose message is already
      presentation-ready. Exception import uses the raw message for these.

CLI-facing errors (with exit codes) live in `statustree.cli.errors`.
"""

from __future__ import annotations


class StatusTreeError(Exception):
    """Base class for recoverable StatusTree library errors."""


class FormatError(StatusTreeError, ValueError):
    """A report document does not follow the wire format.

    Attributes:
        expected: The field name (or value kind) the decoder expected, if known.
        actual: What was actually read, if known.
    """

    expected: str | None
    actual: str | None

    def __init__(
        self,
        message: str,
        *,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvariantViolation(AssertionError):
    """A status node's warning level was about to be lowered."""


class FormattedError(Exception):
    """Exception whose message is already formatted for display.

    Subclass this in host code when the message should be shown verbatim
    (without the ``ClassName: `` prefix) in an imported exception tree.
    """
