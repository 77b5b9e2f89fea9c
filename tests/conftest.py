# topmark:header:start
#
#   project      : StatusTree
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the StatusTree test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split: build configs
    using `statustree.config.model.MutableConfig`, then `freeze()` into a `Config`.
    Do **not** mutate a frozen `Config`; call `Config.thaw()`, edit, then `freeze()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from statustree.config import logging
from statustree.config.model import MutableConfig
from statustree.model.report import ButtonType, Report

if TYPE_CHECKING:
    from pathlib import Path

    from statustree.config.model import Config


@pytest.fixture(autouse=True)
def silence_statustree_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure StatusTree's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    STATUSTREE_LOG_LEVEL in their shell.
    """
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated, empty working directory (no config files)."""
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and CLI-style overrides."""
    return MutableConfig.from_defaults().apply_args(overrides).freeze()


def make_sample_report() -> Report:
    """Return a small report exercising every object kind of the wire format."""
    report = Report("Mod loading", "Some mods failed to load")

    message = report.add_message("Incompatible mods", "jar")
    message.description = ["fabric-api requires minecraft 1.20"]
    message.additional_info = ["Installed: 1.19.4"]
    message.add_button("Copy", ButtonType.CLICK_ONCE).with_clipboard("fabric-api")
    message.sub_message_header = "Details"
    message.add_sub_message("fabric-api", "jar+fabric")

    tab = report.add_tab("Files")
    tab.add_child("+ $folder$ mods")
    tab.add_child("\tx $jar$ broken.jar")
    tab.add_child("\t\tMissing dependency")
    tab.add_child("- $json$ config.json").details = "line one\nline two"

    report.add_button("Close", ButtonType.CLICK_ONCE).make_close()
    return report

