# topmark:header:start
#
#   project      : HyprConf
#   file         : __init__.py
#   file_relpath : src/hyprconf/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for HyprConf."""

from __future__ import annotations
