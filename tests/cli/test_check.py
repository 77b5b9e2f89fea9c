# topmark:header:start
#
#   project      : StatusTree
#   file         : test_check.py
#   file_relpath : tests/cli/test_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `check` command output and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from statustree.codec.serializers import serialize_report
from statustree.core.exit_codes import ExitCode
from statustree.model.report import Report
from tests.cli.conftest import assert_LEVEL_REACHED, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import make_sample_report

if TYPE_CHECKING:
    from pathlib import Path


def _write_report(directory: Path, report: Report, name: str = "report.json") -> Path:
    path = directory / name
    path.write_text(serialize_report(report), encoding="utf-8")
    return path


def _warn_report() -> Report:
    report = Report("t", "")
    report.add_tab("tab").add_child("! careful")
    return report


def test_check_error_report_fails_by_default(tmp_path: Path) -> None:
    """The sample report contains an ERROR node; the default threshold is ``error``."""
    _write_report(tmp_path, make_sample_report())
    result = run_cli_in(tmp_path, ["--no-color", "check", "report.json"])
    assert_LEVEL_REACHED(result)
    assert result.stdout.strip() == "report.json: error"


def test_check_below_threshold_succeeds(tmp_path: Path) -> None:
    """A WARN report passes the default ``error`` threshold."""
    _write_report(tmp_path, _warn_report())
    result = run_cli_in(tmp_path, ["--no-color", "check", "report.json"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == "report.json: warn"


@pytest.mark.parametrize(
    ("fail_on", "expected"),
    [
        ("fatal", ExitCode.SUCCESS),
        ("error", ExitCode.SUCCESS),
        ("WARN", ExitCode.LEVEL_REACHED),
        ("info", ExitCode.LEVEL_REACHED),
    ],
)
def test_check_fail_on(tmp_path: Path, fail_on: str, expected: ExitCode) -> None:
    """``--fail-on`` overrides the threshold (case-insensitive)."""
    _write_report(tmp_path, _warn_report())
    result = run_cli_in(tmp_path, ["check", "report.json", "--fail-on", fail_on])
    assert result.exit_code == expected, result.output


def test_check_fail_on_from_config(tmp_path: Path) -> None:
    """``[check] fail_on`` in statustree.toml sets the default threshold."""
    _write_report(tmp_path, _warn_report())
    (tmp_path / "statustree.toml").write_text('[check]\nfail_on = "warn"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["check", "report.json"])
    assert_LEVEL_REACHED(result)


def test_check_invalid_fail_on_is_usage_error(tmp_path: Path) -> None:
    """Unknown level names are rejected by Click."""
    _write_report(tmp_path, _warn_report())
    result = run_cli_in(tmp_path, ["check", "report.json", "--fail-on", "severe"])
    assert result.exit_code == 2
    assert "Invalid level 'severe'" in result.output


def test_check_json_output(tmp_path: Path) -> None:
    """``--format json`` prints a machine-readable verdict."""
    _write_report(tmp_path, _warn_report())
    result = run_cli_in(tmp_path, ["check", "report.json", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {
        "file": "report.json",
        "level": "warn",
        "fail_on": "error",
        "reached": False,
    }


def test_check_reads_stdin() -> None:
    """``-`` reads the report from STDIN."""
    result = run_cli(
        ["--no-color", "check", "-"], input_text=serialize_report(_warn_report())
    )
    assert_SUCCESS(result)
    assert result.stdout.strip() == "-: warn"


def test_check_empty_report_has_level_none() -> None:
    """A report without tabs has level ``none``."""
    result = run_cli(["--no-color", "check", "-"], input_text=serialize_report(Report("t", "")))
    assert_SUCCESS(result)
    assert result.stdout.strip() == "-: none"


def test_check_missing_file(tmp_path: Path) -> None:
    """A missing input exits with FILE_NOT_FOUND (66)."""
    result = run_cli_in(tmp_path, ["check", "missing.json"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"mainText": "", "title": "t", "messages": [], "tabs": [], "buttons": []}',
    ],
)
def test_check_malformed_report(text: str) -> None:
    """A document that is not in the wire format exits with FORMAT_ERROR (65)."""
    result = run_cli(["check", "-"], input_text=text)
    assert result.exit_code == ExitCode.FORMAT_ERROR, result.output


def test_check_undecodable_stdin_is_io_error() -> None:
    """Bytes on STDIN that are not UTF-8 exit with IO_ERROR (74)."""
    result = run_cli(["--no-config", "check", "-"], input_text=b"\xff\xfe{")
    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "Cannot read STDIN" in result.stderr


def test_check_reads_non_ascii_stdin() -> None:
    """STDIN is decoded as UTF-8."""
    report = Report("Überblick ✓", "")
    report.add_tab("Mods").add_child("! $jar$ Ünïcödé")
    text = json.dumps(json.loads(serialize_report(report)), ensure_ascii=False)
    result = run_cli(["--no-color", "check", "-"], input_text=text.encode("utf-8"))
    assert_SUCCESS(result)
    assert result.stdout.strip() == "-: warn"
