# topmark:header:start
#
#   project      : HyprConf
#   file         : test_edit_commands.py
#   file_relpath : tests/cli/test_edit_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the editing commands: `set`, `enable` and `disable`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from hyprconf.adapters.files import list_backups
from hyprconf.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_WOULD_CHANGE, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_dry_run_shows_diff_and_leaves_file(input_conf: Path, input_conf_text: str) -> None:
    """Without --apply a diff is printed and the file is untouched."""
    result = run_cli(["enable", input_conf, "input:repeat_delay"])
    assert_WOULD_CHANGE(result)
    assert "-  # repeat_delay = 300" in result.output
    assert "+  repeat_delay = 300" in result.output
    assert input_conf.read_text(encoding="utf-8") == input_conf_text
    assert list_backups(input_conf) == []


@mark_cli
def test_apply_writes_and_backs_up(input_conf: Path, input_conf_text: str) -> None:
    """--apply writes the file after a timestamped backup."""
    result = run_cli(["disable", input_conf, "input:touchpad:natural_scroll", "--apply"])
    assert_SUCCESS(result)
    assert "updated" in result.output

    text = input_conf.read_text(encoding="utf-8")
    assert "    # natural_scroll = true\n" in text
    backups = list_backups(input_conf)
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == input_conf_text


@mark_cli
def test_apply_without_backup(input_conf: Path) -> None:
    """--no-backup skips the backup copy."""
    result = run_cli(["set", input_conf, "input:repeat_rate", "25", "--apply", "--no-backup"])
    assert_SUCCESS(result)
    assert "  repeat_rate = 25\n" in input_conf.read_text(encoding="utf-8")
    assert list_backups(input_conf) == []


@mark_cli
def test_set_quoted_value_stays_string(input_conf: Path) -> None:
    """A quoted value is written as a quoted string."""
    result = run_cli(["set", input_conf, "input:kb_variant", '"10"', "--apply"])
    assert_SUCCESS(result)
    assert '  kb_variant = "10"\n' in input_conf.read_text(encoding="utf-8")


@mark_cli
def test_set_creates_missing_blocks(input_conf: Path) -> None:
    """Setting a value under a missing block appends the block."""
    result = run_cli(["set", input_conf, "general:gaps_in", "5", "--apply"])
    assert_SUCCESS(result)
    assert input_conf.read_text(encoding="utf-8").endswith("general {\n  gaps_in = 5\n}\n")


@mark_cli
def test_noop_edit_is_unchanged(input_conf: Path, input_conf_text: str) -> None:
    """Disabling an already disabled setting changes nothing."""
    result = run_cli(["disable", input_conf, "input:repeat_delay"])
    assert_SUCCESS(result)
    assert "unchanged" in result.output
    assert input_conf.read_text(encoding="utf-8") == input_conf_text


@mark_cli
def test_enable_with_value(input_conf: Path) -> None:
    """enable with a value uncomments using that value."""
    result = run_cli(["enable", input_conf, "input:kb_options", "grp:alt_shift_toggle", "--apply"])
    assert_SUCCESS(result)
    text = input_conf.read_text(encoding="utf-8")
    assert "  kb_options = grp:alt_shift_toggle\n" in text
    assert "# kb_options" not in text


@mark_cli
def test_apply_records_state(input_conf: Path, tmp_path: Path) -> None:
    """Applied edits are remembered in the state file."""
    result = run_cli(["set", input_conf, "input:repeat_rate", "25", "--apply"])
    assert_SUCCESS(result)
    state = json.loads((tmp_path / "state" / "state.json").read_text(encoding="utf-8"))
    entries = state[str(input_conf)]
    assert entries["state:input:repeat_rate"]["original_value"] == 40
    assert entries["state:input:repeat_rate"]["value"] == 25
    assert len(entries["backup"]["changes"]) == 1


@mark_cli
def test_edit_parse_error(tmp_path: Path) -> None:
    """Editing an unparseable file is a configuration error."""
    path = tmp_path / "broken.conf"
    path.write_text("input {\n  kb_layout us\n}\n", encoding="utf-8")
    result = run_cli(["set", path, "input:kb_layout", "de"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "Expected = after property name" in result.output


@mark_cli
def test_edit_missing_file(tmp_path: Path) -> None:
    """Editing a missing file is reported as such."""
    result = run_cli(["set", tmp_path / "nope.conf", "input:kb_layout", "de"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_settings_file_disables_backup(tmp_path: Path, input_conf: Path) -> None:
    """The settings file provides the backup default."""
    settings = tmp_path / "hyprconf.toml"
    settings.write_text("backup = false\n", encoding="utf-8")
    result = run_cli(
        ["--config", settings, "set", input_conf, "input:repeat_rate", "30", "--apply"]
    )
    assert_SUCCESS(result)
    assert list_backups(input_conf) == []


@mark_cli
def test_failed_write_leaves_no_state(
    input_conf: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A write that fails is reported and not recorded in the state file."""

    def fail_write(path: Path, content: str) -> None:
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("hyprconf.adapters.session.write_text", fail_write)
    result = run_cli(["set", input_conf, "input:repeat_rate", "25", "--apply", "--no-backup"])
    assert result.exit_code == ExitCode.PERMISSION_DENIED, result.output
    assert not (tmp_path / "state" / "state.json").exists()


@mark_cli
def test_quiet_hides_status_lines(input_conf: Path) -> None:
    """-q drops the 'updated' and 'unchanged' lines but still edits."""
    result = run_cli(["-q", "set", input_conf, "input:repeat_rate", "25", "--apply"])
    assert_SUCCESS(result)
    assert result.output == ""
    assert "repeat_rate = 25" in input_conf.read_text(encoding="utf-8")

    unchanged = run_cli(["-q", "set", input_conf, "input:repeat_rate", "25"])
    assert_SUCCESS(unchanged)
    assert unchanged.output == ""
