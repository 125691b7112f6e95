# topmark:header:start
#
#   project      : HyprConf
#   file         : version.py
#   file_relpath : src/hyprconf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf `version` command."""

from __future__ import annotations

import click

from hyprconf.cli.cmd_common import get_console
from hyprconf.constants import HYPRCONF_VERSION


@click.command(name="version", help="Show the current version of HyprConf.")
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the HyprConf version as installed in the current environment."""
    console = get_console(ctx)
    console.print(f"HyprConf version {HYPRCONF_VERSION}")
