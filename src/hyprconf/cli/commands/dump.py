# topmark:header:start
#
#   project      : HyprConf
#   file         : dump.py
#   file_relpath : src/hyprconf/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf `dump` command: print the normalized serialization of a file."""

from __future__ import annotations

from pathlib import Path

import click

from hyprconf.cli.cmd_common import (
    get_console,
    get_settings,
    parse_config_file,
    resolve_file_argument,
)
from hyprconf.core.serializer import serialize


@click.command(name="dump", help="Print a config file as HyprConf writes it.")
@click.argument("file", required=False, type=click.Path(path_type=Path))
@click.option(
    "--strip-comments",
    is_flag=True,
    help="Drop comments (commented-out settings are kept).",
)
@click.pass_context
def dump_command(ctx: click.Context, file: Path | None, strip_comments: bool) -> None:
    """Parse FILE (default: the configured config file) and print it re-serialized."""
    console = get_console(ctx)
    settings = get_settings(ctx)
    tree = parse_config_file(resolve_file_argument(ctx, file))
    preserve = settings.preserve_comments and not strip_comments
    console.print(serialize(tree, preserve_comments=preserve), nl=False)
