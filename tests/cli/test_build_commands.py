# topmark:header:start
#
#   project      : StatusTree
#   file         : test_build_commands.py
#   file_relpath : tests/cli/test_build_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `outline` and `files` commands building reports from text input."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from statustree.cli.commands.files import build_files_report
from statustree.cli.commands.outline import build_outline_report
from statustree.codec.serializers import deserialize_report
from statustree.model.levels import WarningLevel
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

OUTLINE = "Mods\n\t+ $jar$ fabric-api\n\n\tx $jar$ broken-mod\n\t\tMissing dependency\n"

PATHS = "src/pkg/z.py\nsrc/pkg/a.py\n\ndocs/guide/index.md\nREADME.md\n"


def test_build_outline_report() -> None:
    """Each non-blank line becomes a node via the outline markup."""
    report = build_outline_report(OUTLINE, title="Load", tab_name="Mods tab")
    (tab,) = report.tabs
    assert tab.name == "Mods tab"
    (mods,) = tab.node.children
    assert mods.name == "Mods"
    assert [c.name for c in mods.children] == ["fabric-api", "broken-mod"]
    broken = mods.children[1]
    assert broken.icon_type == "jar"
    assert [c.name for c in broken.children] == ["Missing dependency"]
    assert report.get_maximum_warning_level() is WarningLevel.ERROR


def test_outline_command_prints_json(tmp_path: Path) -> None:
    """The title defaults to the file stem and the tab name to the title."""
    (tmp_path / "mods.txt").write_text(OUTLINE, encoding="utf-8")
    result = run_cli_in(tmp_path, ["outline", "mods.txt"])
    assert_SUCCESS(result)
    report = deserialize_report(result.stdout)
    assert report.title == "mods"
    assert report.tabs[0].name == "mods"
    assert report.tabs[0].node.children[0].name == "Mods"


def test_outline_command_options() -> None:
    """``--title``, ``--tab`` and ``--main-text`` name the report parts."""
    result = run_cli(
        ["outline", "-", "--title", "T", "--tab", "Tab", "--main-text", "Body"],
        input_text=OUTLINE,
    )
    assert_SUCCESS(result)
    payload = json.loads(result.stdout)
    assert payload["title"] == "T"
    assert payload["mainText"] == "Body"
    assert payload["tabs"][0]["node"]["name"] == "Tab"


def test_outline_command_text_format() -> None:
    """``--format text`` prints the outline instead of JSON."""
    result = run_cli(["--no-color", "outline", "-", "--format", "text"], input_text=OUTLINE)
    assert_SUCCESS(result)
    assert "    - broken-mod (jar) [error]" in result.stdout


def test_build_files_report() -> None:
    """Paths become a sorted tree with single-child folders collapsed."""
    report = build_files_report(
        PATHS, title="Files", tab_name="Files", folder_icon="folder", file_icon="file"
    )
    root = report.tabs[0].node
    assert root.icon_type == "folder"
    assert [c.name for c in root.children] == ["README.md", "docs/guide", "src/pkg"]
    src = root.children[2]
    assert src.icon_type == "folder"
    assert [(c.name, c.icon_type) for c in src.children] == [("a.py", "file"), ("z.py", "file")]


def test_files_command_uses_configured_icons(tmp_path: Path) -> None:
    """``[files]`` icon types from statustree.toml are applied."""
    (tmp_path / "paths.txt").write_text(PATHS, encoding="utf-8")
    (tmp_path / "statustree.toml").write_text(
        '[files]\nfolder_icon = "package"\nfile_icon = "java_class"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["files", "paths.txt", "--title", "Tree"])
    assert_SUCCESS(result)
    report = deserialize_report(result.stdout)
    root = report.tabs[0].node
    assert root.name == "Tree"
    assert root.icon_type == "package"
    assert {c.icon_type for c in root.children[2].children} == {"java_class"}


def test_files_command_missing_input(tmp_path: Path) -> None:
    """A missing input file exits with FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["files", "nope.txt"])
    assert result.exit_code == 66, result.output
