# topmark:header:start
#
#   project      : HyprConf
#   file         : __init__.py
#   file_relpath : src/hyprconf/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf CLI subcommands."""
