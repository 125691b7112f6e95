# topmark:header:start
#
#   project      : HyprConf
#   file         : nodes.py
#   file_relpath : src/hyprconf/core/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node types of the parsed configuration tree.

The tree is a closed set of mutable dataclasses:

- `Comment`: a free-text ``#`` line.
- `Property`: an active ``key = value`` setting.
- `CommentedProperty`: a ``# key = value`` line, i.e. a disabled setting whose value
  is kept so it can be reactivated.
- `Block`: a named ``name { ... }`` container.
- `Config`: the root.

Child order is significant. Equality is structural: the ``line`` field does not take
part in ``==``, so a tree compares equal to the tree obtained by serializing and
re-parsing it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from hyprconf.constants import UNPOSITIONED_LINE

Value = Union[str, int, float, bool]


@dataclass
class Comment:
    """A plain comment line (``content`` excludes the leading ``#``)."""

    content: str
    line: int = field(default=UNPOSITIONED_LINE, compare=False)


@dataclass
class Property:
    """An active ``key = value`` setting with an optional inline comment."""

    key: str
    value: Value
    comment: str | None = None
    line: int = field(default=UNPOSITIONED_LINE, compare=False)


@dataclass
class CommentedProperty:
    """A disabled ``# key = value`` setting; same shape as `Property`."""

    key: str
    value: Value
    comment: str | None = None
    line: int = field(default=UNPOSITIONED_LINE, compare=False)


@dataclass
class Block:
    """A named block holding an ordered list of child nodes."""

    name: str
    children: list[Node] = field(default_factory=lambda: [])
    line: int = field(default=UNPOSITIONED_LINE, compare=False)


@dataclass
class Config:
    """Root of a parsed configuration document."""

    children: list[Node] = field(default_factory=lambda: [])


Node = Union[Comment, Property, CommentedProperty, Block]
"""Any node that can appear as a child of a `Block` or of the `Config` root."""

Container = Union[Block, Config]
"""Nodes that hold children."""


def is_synthesized(node: Node) -> bool:
    """Return True when ``node`` was created by a mutation rather than parsed."""
    return node.line == UNPOSITIONED_LINE
