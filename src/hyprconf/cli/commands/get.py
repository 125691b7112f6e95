# topmark:header:start
#
#   project      : HyprConf
#   file         : get.py
#   file_relpath : src/hyprconf/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf `get` command.

Prints the value of the setting at KEYPATH together with its state:

```
$ hyprconf get input.conf input:repeat_rate
input:repeat_rate = 40 (disabled)
```
"""

from __future__ import annotations

from pathlib import Path

import click

from hyprconf.cli.cmd_common import check_key_path, get_console, get_settings, open_session
from hyprconf.core.serializer import format_value


@click.command(name="get", help="Show a setting's value and whether it is enabled.")
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("key_path", metavar="KEYPATH")
@click.pass_context
def get_command(ctx: click.Context, file: Path, key_path: str) -> None:
    """Look up KEYPATH (``block:...:key``) in FILE."""
    console = get_console(ctx)
    check_key_path(key_path)
    session = open_session(file, get_settings(ctx), track=False)

    lookup = session.lookup(key_path)
    if lookup is None or lookup.current is None:
        console.print(f"{key_path}: {console.styled('missing', fg='red')}")
        return

    if lookup.enabled:
        state = console.styled("enabled", fg="green")
    else:
        state = console.styled("disabled", fg="yellow")
    console.print(f"{key_path} = {format_value(lookup.current.value)} ({state})")
