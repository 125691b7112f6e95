# topmark:header:start
#
#   project      : HyprConf
#   file         : __init__.py
#   file_relpath : src/hyprconf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HyprConf package.

HyprConf reads and edits Hyprland-style configuration files without disturbing the
lines it was not asked to touch. Text is tokenized, parsed into an ordered node
tree, edited in place through a small query/mutation API, and serialized back.

Example:
    ```python
    import hyprconf

    tree = hyprconf.parse(text)
    block = hyprconf.ensure_block(tree, "input")
    hyprconf.set_property_enabled(block, "repeat_rate", True, 40)
    new_text = hyprconf.serialize(tree)
    ```
"""

from __future__ import annotations

from hyprconf.core.errors import ConfigParseError, MissingEqualsError, UnclosedBlockError
from hyprconf.core.nodes import (
    Block,
    Comment,
    CommentedProperty,
    Config,
    Node,
    Property,
    Value,
)
from hyprconf.core.parser import parse
from hyprconf.core.query import (
    PropertyLookup,
    ensure_block,
    ensure_child_block,
    find_block,
    find_child_block,
    find_commented_property,
    find_property,
    find_property_or_commented,
    resolve_block_path,
    set_property_enabled,
    split_key_path,
    toggle_property_comment,
    update_or_add_property,
)
from hyprconf.core.serializer import serialize
from hyprconf.core.tokenizer import tokenize

__all__ = [
    "Block",
    "Comment",
    "CommentedProperty",
    "Config",
    "ConfigParseError",
    "MissingEqualsError",
    "Node",
    "Property",
    "PropertyLookup",
    "UnclosedBlockError",
    "Value",
    "ensure_block",
    "ensure_child_block",
    "find_block",
    "find_child_block",
    "find_commented_property",
    "find_property",
    "find_property_or_commented",
    "parse",
    "resolve_block_path",
    "serialize",
    "set_property_enabled",
    "split_key_path",
    "tokenize",
    "toggle_property_comment",
    "update_or_add_property",
]
