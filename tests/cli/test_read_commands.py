# topmark:header:start
#
#   project      : HyprConf
#   file         : test_read_commands.py
#   file_relpath : tests/cli/test_read_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the read-only commands: `dump`, `get`, `input`, `version`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hyprconf.cli.exit_codes import ExitCode
from hyprconf.constants import HYPRCONF_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_dump_normalizes(tmp_path: Path) -> None:
    """dump prints the canonical serialization."""
    path = tmp_path / "a.conf"
    path.write_text("input{\n\n\tkb_layout=us   #  layout\n}", encoding="utf-8")
    result = run_cli(["dump", path])
    assert_SUCCESS(result)
    assert result.output == "input {\n  kb_layout = us # layout\n}\n"


@mark_cli
def test_dump_strip_comments(input_conf: Path) -> None:
    """--strip-comments drops prose but keeps disabled settings."""
    result = run_cli(["dump", "--strip-comments", input_conf])
    assert_SUCCESS(result)
    assert "Keyboard" not in result.output
    assert "mouse speed" not in result.output
    assert "# repeat_delay = 300" in result.output


@mark_cli
def test_get_reports_state(input_conf: Path) -> None:
    """get prints value and state for enabled, disabled and missing settings."""
    enabled = run_cli(["get", input_conf, "input:touchpad:natural_scroll"])
    assert_SUCCESS(enabled)
    assert enabled.output == "input:touchpad:natural_scroll = true (enabled)\n"

    disabled = run_cli(["get", input_conf, "input:repeat_delay"])
    assert disabled.output == "input:repeat_delay = 300 (disabled)\n"

    missing = run_cli(["get", input_conf, "decoration:rounding"])
    assert_SUCCESS(missing)
    assert missing.output == "decoration:rounding: missing\n"


@mark_cli
def test_get_bad_key_path(input_conf: Path) -> None:
    """A malformed key path is a usage error."""
    result = run_cli(["get", input_conf, "input::x"])
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


@mark_cli
def test_input_lists_typed_settings(input_conf: Path) -> None:
    """input shows every known setting, absent ones as not set."""
    result = run_cli(["input", input_conf])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert "input:kb_layout = us" in lines
    assert "input:repeat_delay = 300 (disabled)" in lines
    assert "input:touchpad:clickfinger_behavior = <not set>" in lines
    assert "input:touchpad:scroll_factor = 1.5 (disabled)" in lines


@mark_cli
def test_input_validate(tmp_path: Path) -> None:
    """--validate fails on out-of-range values."""
    path = tmp_path / "a.conf"
    path.write_text("input {\n  repeat_rate = 500\n}\n", encoding="utf-8")
    result = run_cli(["input", "--validate", path])
    assert result.exit_code == ExitCode.FAILURE, result.output
    assert "repeat_rate must be between 1 and 100" in result.output


@mark_cli
def test_input_validate_ok(input_conf: Path) -> None:
    """--validate passes on the sample file."""
    result = run_cli(["input", "--validate", input_conf])
    assert_SUCCESS(result)
    assert "Settings are valid" in result.output


@mark_cli
def test_version() -> None:
    """version prints the installed version."""
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert HYPRCONF_VERSION in result.output


@mark_cli
def test_file_defaults_to_configured_config_file(
    input_conf: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Without FILE, dump, input and check use HYPRCONF_CONFIG_FILE."""
    monkeypatch.setenv("HYPRCONF_CONFIG_FILE", str(input_conf))

    dumped = run_cli(["dump"])
    assert_SUCCESS(dumped)
    assert "  kb_layout = us\n" in dumped.output

    shown = run_cli(["input"])
    assert_SUCCESS(shown)
    assert "input:repeat_rate = 40" in shown.output

    checked = run_cli(["check"])
    assert_SUCCESS(checked)
    assert f"{input_conf}: OK" in checked.output
