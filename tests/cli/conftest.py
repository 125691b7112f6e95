# topmark:header:start
#
#   project      : HyprConf
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers.

`run_cli` invokes the Click group through `click.testing.CliRunner` with color
disabled, so assertions can match plain text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from hyprconf.cli.exit_codes import ExitCode
from hyprconf.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli(argv: Sequence[str | Path]) -> Result:
    """Invoke the CLI with ``--no-color`` and return the result.

    Args:
        argv (Sequence[str | Path]): CLI argument vector, e.g. ``["check", path]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *(str(arg) for arg in argv)])


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Click's own usage errors also exit with 2, so also check that no exception
    other than the normal exit was raised.
    """
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert "Usage:" not in result.output
