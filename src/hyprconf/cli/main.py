# topmark:header:start
#
#   project      : HyprConf
#   file         : main.py
#   file_relpath : src/hyprconf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf command line.

Group-level options (verbosity, color, settings file) are resolved once and placed
into ``ctx.obj``; subcommands read the console and settings from there.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from hyprconf.cli.commands.check import check_command
from hyprconf.cli.commands.dump import dump_command
from hyprconf.cli.commands.edit import disable_command, enable_command, set_command
from hyprconf.cli.commands.get import get_command
from hyprconf.cli.commands.input import input_command
from hyprconf.cli.commands.version import version_command
from hyprconf.cli.console import ClickConsole
from hyprconf.cli.errors import HyprconfConfigError
from hyprconf.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from hyprconf.config.logging import get_logger, resolve_env_log_level, setup_logging
from hyprconf.config.settings import SettingsError, load_settings

if TYPE_CHECKING:
    from hyprconf.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    settings_file: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, settings) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        settings_file (Path | None): Explicit settings file from ``--config``.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose
    ctx.obj["quiet"] = quiet > 0

    # HYPRCONF_LOG_LEVEL wins; -q only trims program output, logs stay at CRITICAL.
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else (level_cli if verbose > 0 else None)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    try:
        ctx.obj["settings"] = load_settings(settings_file)
    except SettingsError as exc:
        raise HyprconfConfigError(str(exc)) from exc
    logger.debug("Settings: %s", ctx.obj["settings"])


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="HyprConf: read and edit Hyprland config files without losing comments.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "settings_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="HyprConf settings file (TOML). Defaults to ~/.config/hyprconf/hyprconf.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    settings_file: Path | None,
) -> None:
    """Entry point for the HyprConf CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        settings_file=settings_file,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'hyprconf check FILE' to validate a config file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(dump_command)

cli.add_command(get_command)

cli.add_command(set_command)

cli.add_command(enable_command)

cli.add_command(disable_command)

cli.add_command(input_command)
