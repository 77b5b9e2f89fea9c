# topmark:header:start
#
#   project      : StatusTree
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-aware logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from statustree.cli.errors import StatusTreeUsageError
from statustree.cli.options import resolve_verbosity
from statustree.config.logging import (
    ENV_LOG_LEVEL,
    TRACE_LEVEL,
    ChalkFormatter,
    StatusTreeLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("loud", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Level names (any case) and numbers are accepted; unknown names are ignored."""
    monkeypatch.setenv(ENV_LOG_LEVEL, value)
    assert resolve_env_log_level() == expected


def test_env_log_level_unset() -> None:
    """Without the variable there is no override."""
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers are `StatusTreeLogger` instances with a ``trace`` method."""
    logger = get_logger("statustree.tests.trace")
    assert isinstance(logger, StatusTreeLogger)
    with caplog.at_level(TRACE_LEVEL, logger="statustree.tests.trace"):
        logger.trace("hello %s", "trace")
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "hello trace"


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """``-v`` lowers and ``-q`` raises the log threshold."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_rejects_both() -> None:
    """``-v`` and ``-q`` are mutually exclusive."""
    with pytest.raises(StatusTreeUsageError):
        resolve_verbosity(1, 1)


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("statustree.tests", level, __file__, 1, message, None, None)


def test_formatter_without_color_is_plain() -> None:
    """With color off, records are formatted without ANSI escapes."""
    formatter = ChalkFormatter("[%(levelname)s] %(message)s", color=False)
    assert formatter.format(_record(logging.ERROR, "broken")) == "[ERROR] broken"


def test_setup_logging_keeps_foreign_handlers() -> None:
    """Repeated setup replaces only its own handler."""
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    stream = io.StringIO()
    try:
        setup_logging(logging.INFO, color=False)
        setup_logging(logging.INFO, color=False, stream=stream)
        assert foreign in root.handlers
        assert sum(isinstance(h.formatter, ChalkFormatter) for h in root.handlers) == 1

        get_logger("statustree.tests.setup").warning("careful")
        assert stream.getvalue() == "[WARNING] careful\n"
    finally:
        root.removeHandler(foreign)
        setup_logging(TRACE_LEVEL)
