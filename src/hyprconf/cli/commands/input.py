# topmark:header:start
#
#   project      : HyprConf
#   file         : input.py
#   file_relpath : src/hyprconf/cli/commands/input.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf `input` command: show the typed ``input`` settings of a file."""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING

import click

from hyprconf.cli.cmd_common import (
    get_console,
    is_quiet,
    parse_config_file,
    resolve_file_argument,
)
from hyprconf.cli.exit_codes import ExitCode
from hyprconf.constants import VALUE_NOT_SET
from hyprconf.core.serializer import format_value
from hyprconf.settings.input import (
    INPUT_BLOCK,
    TOUCHPAD_BLOCK,
    InputSettings,
    TouchpadSettings,
    read_input_settings,
    validate_input_settings,
)

if TYPE_CHECKING:
    from hyprconf.cli.console_api import ConsoleLike
    from hyprconf.settings.input import Setting


def _print_setting(
    console: ConsoleLike,
    name: str,
    setting: Setting | None,  # type: ignore[type-arg]
) -> None:
    if setting is None:
        console.print(f"{name} = {console.styled(VALUE_NOT_SET, dim=True)}")
        return
    suffix = "" if setting.enabled else console.styled(" (disabled)", fg="yellow")
    console.print(f"{name} = {format_value(setting.value)}{suffix}")


@click.command(name="input", help="Show the input settings of a config file.")
@click.argument("file", required=False, type=click.Path(path_type=Path))
@click.option("--validate", is_flag=True, help="Check values against accepted ranges.")
@click.pass_context
def input_command(ctx: click.Context, file: Path | None, validate: bool) -> None:
    """Print the ``input`` and ``input:touchpad`` settings of FILE."""
    console = get_console(ctx)
    settings = read_input_settings(parse_config_file(resolve_file_argument(ctx, file)))

    for f in fields(InputSettings):
        if f.name != TOUCHPAD_BLOCK:
            _print_setting(console, f"{INPUT_BLOCK}:{f.name}", getattr(settings, f.name))
    touchpad = settings.touchpad or TouchpadSettings()
    for f in fields(TouchpadSettings):
        _print_setting(
            console, f"{INPUT_BLOCK}:{TOUCHPAD_BLOCK}:{f.name}", getattr(touchpad, f.name)
        )

    if not validate:
        return
    result = validate_input_settings(settings)
    if result.valid:
        if not is_quiet(ctx):
            console.print(console.styled("✔ Settings are valid", fg="green"))
        return
    for error in result.errors:
        console.error(console.styled(f"✘ {error}", fg="bright_red"))
    ctx.exit(ExitCode.FAILURE)
