# topmark:header:start
#
#   project      : HyprConf
#   file         : cmd_common.py
#   file_relpath : src/hyprconf/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for HyprConf CLI commands.

These helpers read config files while translating failures into `HyprconfError`
subclasses (and thus exit codes), turn value arguments into typed values, and
finish editing commands with either a diff preview or a write.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hyprconf.adapters.files import read_text
from hyprconf.adapters.session import ConfigSession
from hyprconf.adapters.state import JsonFileStore
from hyprconf.adapters.tracker import ChangeTracker
from hyprconf.cli.errors import (
    HyprconfConfigError,
    HyprconfEncodingError,
    HyprconfFileNotFoundError,
    HyprconfIOError,
    HyprconfPermissionDeniedError,
    HyprconfUsageError,
)
from hyprconf.cli.exit_codes import ExitCode
from hyprconf.config.logging import get_logger
from hyprconf.config.settings import HyprconfSettings
from hyprconf.core.errors import ConfigParseError
from hyprconf.core.parser import parse
from hyprconf.core.query import split_key_path
from hyprconf.core.values import coerce_value, unquote_string
from hyprconf.utils.diff import render_patch

if TYPE_CHECKING:
    from pathlib import Path

    from hyprconf.cli.console_api import ConsoleLike
    from hyprconf.core.nodes import Config, Value

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (number of ``-v`` flags, 0 when terse)."""
    return int(ctx.obj.get("verbosity", 0))


def is_quiet(ctx: click.Context) -> bool:
    """Whether ``-q`` asked to drop status lines such as ``OK`` or ``updated``."""
    return bool(ctx.obj.get("quiet", False))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context."""
    return ctx.obj["console"]


def get_settings(ctx: click.Context) -> HyprconfSettings:
    """Return the resolved settings, falling back to defaults."""
    settings = ctx.obj.get("settings")
    if settings is None:
        settings = HyprconfSettings().expanded()
        ctx.obj["settings"] = settings
    return settings


def read_config_text(path: Path) -> str:
    """Read ``path``, mapping I/O failures to CLI errors.

    Raises:
        HyprconfFileNotFoundError: If ``path`` does not exist.
        HyprconfPermissionDeniedError: If ``path`` cannot be read.
        HyprconfEncodingError: If ``path`` is not valid UTF-8.
        HyprconfIOError: For any other I/O failure.
    """
    try:
        return read_text(path)
    except FileNotFoundError as exc:
        raise HyprconfFileNotFoundError(f"File not found: {path}") from exc
    except PermissionError as exc:
        raise HyprconfPermissionDeniedError(f"Permission denied: {path}") from exc
    except UnicodeDecodeError as exc:
        raise HyprconfEncodingError(f"Cannot decode {path} as UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise HyprconfIOError(f"Cannot read {path}: {exc}") from exc


def parse_config_file(path: Path) -> Config:
    """Read and parse ``path``.

    Raises:
        HyprconfConfigError: If the file cannot be parsed.
    """
    text = read_config_text(path)
    try:
        return parse(text)
    except ConfigParseError as exc:
        raise HyprconfConfigError(f"{path}: {exc}") from exc


def open_session(path: Path, settings: HyprconfSettings, *, track: bool) -> ConfigSession:
    """Open an editing session over ``path``.

    Args:
        path (Path): Config file to edit.
        settings (HyprconfSettings): Resolved settings.
        track (bool): Record the edits in the state file.

    Returns:
        ConfigSession: The session.
    """
    text = read_config_text(path)
    tracker = ChangeTracker(JsonFileStore(settings.state_file)) if track else None
    try:
        return ConfigSession(
            path, text, tracker=tracker, preserve_comments=settings.preserve_comments
        )
    except ConfigParseError as exc:
        raise HyprconfConfigError(f"{path}: {exc}") from exc


def check_key_path(key_path: str) -> None:
    """Validate ``key_path`` (``block:...:key``).

    Raises:
        HyprconfUsageError: If ``key_path`` is malformed.
    """
    try:
        split_key_path(key_path)
    except ValueError as exc:
        raise HyprconfUsageError(str(exc)) from exc


def parse_value_argument(raw: str) -> Value:
    """Turn a command-line value into a typed value.

    A fully quoted argument (``'"42"'``) stays a string; anything else is coerced
    like a config value (``true`` -> bool, ``40`` -> int).
    """
    unquoted = unquote_string(raw)
    if unquoted is not None:
        return unquoted
    return coerce_value(raw)


def finish_edit(
    ctx: click.Context,
    session: ConfigSession,
    *,
    apply_changes: bool,
    no_backup: bool,
) -> None:
    """Show or write the result of an edit and exit with the matching code.

    Without ``apply_changes`` a colored diff is printed and the command exits with
    `ExitCode.WOULD_CHANGE` when the file would change. With ``apply_changes`` the
    file is written (after a backup unless disabled).
    """
    console = get_console(ctx)
    settings = get_settings(ctx)

    if not session.has_changes:
        if not is_quiet(ctx):
            console.print(console.styled(f"{session.path}: unchanged", fg="green"))
        return

    if not apply_changes:
        patch = session.diff()
        if console_color_enabled(ctx):
            console.print(render_patch(patch), nl=False)
        else:
            console.print("".join(patch), nl=False)
        ctx.exit(ExitCode.WOULD_CHANGE)

    make_backup = settings.backup and not no_backup
    try:
        backup_path = session.save(backup=make_backup)
    except PermissionError as exc:
        raise HyprconfPermissionDeniedError(f"Permission denied: {session.path}") from exc
    except OSError as exc:
        raise HyprconfIOError(f"Cannot write {session.path}: {exc}") from exc

    if backup_path is not None and get_effective_verbosity(ctx) > 0:
        console.print(f"Backup: {backup_path}")
    if not is_quiet(ctx):
        console.print(console.styled(f"{session.path}: updated", fg="yellow"))


def console_color_enabled(ctx: click.Context) -> bool:
    """Whether colored output was requested for this invocation."""
    return bool(ctx.obj.get("color_enabled", False))


def resolve_file_argument(ctx: click.Context, file: Path | None) -> Path:
    """Return ``file``, or the configured ``config_file`` when none was given."""
    if file is not None:
        return file
    default = get_settings(ctx).config_file
    logger.debug("No file given; using %s", default)
    return default
