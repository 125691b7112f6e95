# topmark:header:start
#
#   project      : HyprConf
#   file         : check.py
#   file_relpath : src/hyprconf/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf `check` command.

Parses each FILE (the configured config file when none is given) and reports
either ``OK`` or the location of the first parse error. The exit code is that of
the first failure (see `ExitCode`).

Examples:
  $ hyprconf check ~/.config/hypr/hyprland.conf ~/.config/hypr/input.conf
"""

from __future__ import annotations

from pathlib import Path

import click

from hyprconf.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    get_settings,
    is_quiet,
    parse_config_file,
)
from hyprconf.cli.errors import HyprconfError
from hyprconf.cli.exit_codes import ExitCode
from hyprconf.config.logging import get_logger

logger = get_logger(__name__)


@click.command(name="check", help="Check that config files parse.")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.pass_context
def check_command(ctx: click.Context, files: tuple[Path, ...]) -> None:
    """Parse every file and report the result.

    Args:
        ctx (click.Context): Click context holding the console.
        files (tuple[Path, ...]): Files to check; the configured config file when empty.
    """
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    encountered_error_code: ExitCode | None = None

    for path in files or (get_settings(ctx).config_file,):
        try:
            tree = parse_config_file(path)
        except HyprconfError as exc:
            console.error(console.styled(f"✘ {exc.format_message()}", fg="bright_red"))
            if encountered_error_code is None:
                encountered_error_code = ExitCode(exc.exit_code)
            continue
        if is_quiet(ctx):
            continue
        message = f"✔ {path}: OK"
        if vlevel > 0:
            message += f" ({len(tree.children)} top-level nodes)"
        console.print(console.styled(message, fg="green"))

    if encountered_error_code is not None:
        ctx.exit(encountered_error_code)
