# topmark:header:start
#
#   project      : HyprConf
#   file         : edit.py
#   file_relpath : src/hyprconf/cli/commands/edit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf editing commands: `set`, `enable` and `disable`.

Each command edits one setting addressed by KEYPATH (``block:...:key``). The
setting keeps its position in the file: enabling uncomments it in place and
disabling comments it out in place.

Without ``--apply`` the commands print a unified diff and exit with
`ExitCode.WOULD_CHANGE` (2) when the file would change.

Examples:
  $ hyprconf set input.conf input:repeat_rate 40 --apply
  $ hyprconf disable input.conf input:touchpad:natural_scroll
"""

from __future__ import annotations

from pathlib import Path

import click

from hyprconf.cli.cmd_common import (
    check_key_path,
    finish_edit,
    get_settings,
    open_session,
    parse_value_argument,
)
from hyprconf.cli.options import common_write_options
from hyprconf.config.logging import get_logger

logger = get_logger(__name__)


def _edit(
    ctx: click.Context,
    file: Path,
    key_path: str,
    *,
    enabled: bool,
    raw_value: str | None,
    apply_changes: bool,
    no_backup: bool,
) -> None:
    check_key_path(key_path)
    session = open_session(file, get_settings(ctx), track=apply_changes)
    value = None if raw_value is None else parse_value_argument(raw_value)
    logger.info("%s %s in %s (value=%r)", "Enable" if enabled else "Disable", key_path, file, value)
    session.set_enabled(key_path, enabled, value)
    finish_edit(ctx, session, apply_changes=apply_changes, no_backup=no_backup)


@click.command(name="set", help="Set a setting's value, enabling or adding it.")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("key_path", metavar="KEYPATH")
@click.argument("value")
@common_write_options
@click.pass_context
def set_command(
    ctx: click.Context,
    file: Path,
    key_path: str,
    value: str,
    apply_changes: bool,
    no_backup: bool,
) -> None:
    """Set KEYPATH to VALUE. Quote VALUE (``'"40"'``) to keep it a string."""
    _edit(
        ctx,
        file,
        key_path,
        enabled=True,
        raw_value=value,
        apply_changes=apply_changes,
        no_backup=no_backup,
    )


@click.command(name="enable", help="Uncomment a setting, optionally with a new value.")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("key_path", metavar="KEYPATH")
@click.argument("value", required=False)
@common_write_options
@click.pass_context
def enable_command(
    ctx: click.Context,
    file: Path,
    key_path: str,
    value: str | None,
    apply_changes: bool,
    no_backup: bool,
) -> None:
    """Enable KEYPATH; with VALUE, also set its value (adding it when absent)."""
    _edit(
        ctx,
        file,
        key_path,
        enabled=True,
        raw_value=value,
        apply_changes=apply_changes,
        no_backup=no_backup,
    )


@click.command(name="disable", help="Comment out a setting.")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("key_path", metavar="KEYPATH")
@common_write_options
@click.pass_context
def disable_command(
    ctx: click.Context,
    file: Path,
    key_path: str,
    apply_changes: bool,
    no_backup: bool,
) -> None:
    """Comment out KEYPATH in place."""
    _edit(
        ctx,
        file,
        key_path,
        enabled=False,
        raw_value=None,
        apply_changes=apply_changes,
        no_backup=no_backup,
    )
