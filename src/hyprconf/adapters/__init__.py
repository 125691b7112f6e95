# topmark:header:start
#
#   project      : HyprConf
#   file         : __init__.py
#   file_relpath : src/hyprconf/adapters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Adapters between the pure core and the outside world.

- `hyprconf.adapters.files`: reading, writing and backing up config files.
- `hyprconf.adapters.state`: per-file key-value stores.
- `hyprconf.adapters.tracker`: original values and change history.
- `hyprconf.adapters.session`: one editing session over one file.
"""

from __future__ import annotations
