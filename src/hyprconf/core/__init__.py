# topmark:header:start
#
#   project      : HyprConf
#   file         : __init__.py
#   file_relpath : src/hyprconf/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless parser, serializer and query/mutation API.

Layout (leaves first):

- `hyprconf.core.values`: scalar coercion and formatting.
- `hyprconf.core.tokens` / `hyprconf.core.tokenizer`: text to tokens.
- `hyprconf.core.nodes`: tree node dataclasses.
- `hyprconf.core.parser`: tokens to tree.
- `hyprconf.core.serializer`: tree to text.
- `hyprconf.core.query`: lookups and in-place edits.

Nothing in this package performs I/O.
"""

from __future__ import annotations
