# topmark:header:start
#
#   project      : HyprConf
#   file         : __main__.py
#   file_relpath : src/hyprconf/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running HyprConf via ``python -m hyprconf``.

Delegates to `hyprconf.cli.main.cli`, the single CLI entry point.

Examples:
    Check a config file::

        python -m hyprconf check ~/.config/hypr/input.conf
"""

from __future__ import annotations

from hyprconf.cli.main import cli

if __name__ == "__main__":
    cli()
