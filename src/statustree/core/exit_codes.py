# topmark:header:start
#
#   project      : StatusTree
#   file         : exit_codes.py
#   file_relpath : src/statustree/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the StatusTree CLI.

StatusTree aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. ``LEVEL_REACHED=1`` signals that a
report was read successfully but contains a node at or above the requested
``--fail-on`` level.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the StatusTree CLI.

    Attributes:
        SUCCESS: Successful execution.
        LEVEL_REACHED: The report's maximum warning level reached the threshold.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FORMAT_ERROR: The input does not follow the report wire format. Mirrors
            BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    LEVEL_REACHED = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FORMAT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
