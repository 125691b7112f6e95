# topmark:header:start
#
#   project      : HyprConf
#   file         : query.py
#   file_relpath : src/hyprconf/core/query.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural lookups and in-place edits over a configuration tree.

Every enable/disable transition swaps the node at its existing index in the
parent's ``children`` list; nothing is removed and re-appended. Editing one setting
therefore never moves any other line of the file.

Mutations never raise: they either act or do nothing.

State transitions of `set_property_enabled`:

| current state                | enabled | value given | effect                                   |
|------------------------------|---------|-------------|------------------------------------------|
| commented match, no active   | True    | any         | uncomment in place (given or kept value) |
| no match                     | True    | yes         | append a new `Property`                  |
| active match                 | True    | yes         | set the value in place                   |
| active match                 | False   | -           | comment out in place                     |
| commented-only or no match   | False   | -           | no-op                                    |
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from hyprconf.config.logging import get_logger
from hyprconf.constants import KEY_PATH_SEPARATOR, UNPOSITIONED_LINE
from hyprconf.core.nodes import Block, CommentedProperty, Property

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hyprconf.core.nodes import Config, Container, Node, Value

logger = get_logger(__name__)

_N = TypeVar("_N", Property, CommentedProperty)


@dataclass(frozen=True)
class PropertyLookup:
    """Result of `find_property_or_commented`.

    Attributes:
        property (Property | None): First active match.
        commented (CommentedProperty | None): First commented match.
        is_commented (bool): True only when a commented match exists and no active one does.
    """

    property: Property | None
    commented: CommentedProperty | None
    is_commented: bool

    @property
    def current(self) -> Property | CommentedProperty | None:
        """The node that represents the setting's state (active wins)."""
        return self.property or self.commented

    @property
    def value(self) -> Value | None:
        """The effective value, or None when the key is absent."""
        node = self.current
        return node.value if node is not None else None

    @property
    def enabled(self) -> bool:
        """Whether an active property exists."""
        return self.property is not None


# --- lookups ---


def find_block(config: Config, name: str) -> Block | None:
    """Return the first top-level block called ``name``."""
    return _find_child_block(config, name)


def find_child_block(block: Block, name: str) -> Block | None:
    """Return the first block called ``name`` directly inside ``block``."""
    return _find_child_block(block, name)


def _find_child_block(container: Container, name: str) -> Block | None:
    for child in container.children:
        if isinstance(child, Block) and child.name == name:
            return child
    return None


def _find_keyed(container: Container, kind: type[_N], key: str) -> _N | None:
    for child in container.children:
        if isinstance(child, kind) and child.key == key:
            return child
    return None


def find_property(block: Container, key: str) -> Property | None:
    """Return the first active property ``key`` directly inside ``block``."""
    return _find_keyed(block, Property, key)


def find_commented_property(block: Container, key: str) -> CommentedProperty | None:
    """Return the first commented property ``key`` directly inside ``block``."""
    return _find_keyed(block, CommentedProperty, key)


def find_property_or_commented(block: Container, key: str) -> PropertyLookup:
    """Look up both the active and the commented form of ``key``.

    The active property always takes precedence: ``is_commented`` is True only when a
    commented match exists and no active one does.
    """
    prop = find_property(block, key)
    commented = find_commented_property(block, key)
    return PropertyLookup(
        property=prop,
        commented=commented,
        is_commented=commented is not None and prop is None,
    )


# --- mutations ---


def _index_of(container: Container, node: Node) -> int:
    # Identity, not equality: two structurally equal nodes may share a block.
    for i, child in enumerate(container.children):
        if child is node:
            return i
    raise LookupError(f"node not in container: {node!r}")


def _comment_out(block: Container, prop: Property) -> CommentedProperty:
    index = _index_of(block, prop)
    commented = CommentedProperty(
        key=prop.key, value=prop.value, comment=prop.comment, line=prop.line
    )
    block.children[index] = commented
    logger.debug("Disabled %r at index %d", prop.key, index)
    return commented


def _uncomment(block: Container, commented: CommentedProperty, value: Value | None) -> Property:
    index = _index_of(block, commented)
    prop = Property(
        key=commented.key,
        value=commented.value if value is None else value,
        comment=commented.comment,
        line=commented.line,
    )
    block.children[index] = prop
    logger.debug("Enabled %r at index %d", prop.key, index)
    return prop


def _append_property(block: Container, key: str, value: Value) -> Property:
    prop = Property(key=key, value=value, line=UNPOSITIONED_LINE)
    block.children.append(prop)
    logger.debug("Appended %r = %r", key, value)
    return prop


def update_or_add_property(block: Container, key: str, value: Value) -> Property:
    """Set the value of the active property ``key``, appending it when absent.

    Commented forms of ``key`` are left alone.
    """
    existing = find_property(block, key)
    if existing is not None:
        existing.value = value
        return existing
    return _append_property(block, key, value)


def toggle_property_comment(block: Container, key: str, value: Value | None = None) -> None:
    """Flip ``key`` between active and commented, in place.

    - an active property is commented out (``value`` is ignored);
    - otherwise a commented property is activated, with ``value`` if given;
    - otherwise, when ``value`` is given, a new property is appended.
    """
    lookup = find_property_or_commented(block, key)
    if lookup.property is not None:
        _comment_out(block, lookup.property)
    elif lookup.commented is not None:
        _uncomment(block, lookup.commented, value)
    elif value is not None:
        _append_property(block, key, value)


def set_property_enabled(
    block: Container,
    key: str,
    enabled: bool,
    value: Value | None = None,
) -> None:
    """Bring ``key`` into the requested state.

    Args:
        block (Container): Block (or root) holding the setting.
        key (str): Setting name.
        enabled (bool): Desired state.
        value (Value | None): New value; None means "keep the current value".
    """
    lookup = find_property_or_commented(block, key)

    if enabled:
        if lookup.is_commented:
            assert lookup.commented is not None
            _uncomment(block, lookup.commented, value)
        elif lookup.property is not None:
            if value is not None:
                lookup.property.value = value
                logger.debug("Updated %r = %r", key, value)
        elif value is not None:
            _append_property(block, key, value)
    elif lookup.property is not None:
        _comment_out(block, lookup.property)


def ensure_block(config: Config, name: str) -> Block:
    """Return the top-level block ``name``, appending an empty one when absent."""
    return _ensure_child_block(config, name)


def ensure_child_block(block: Block, name: str) -> Block:
    """Return the block ``name`` inside ``block``, appending an empty one when absent."""
    return _ensure_child_block(block, name)


def _ensure_child_block(container: Container, name: str) -> Block:
    block = _find_child_block(container, name)
    if block is None:
        block = Block(name=name, children=[], line=UNPOSITIONED_LINE)
        container.children.append(block)
        logger.debug("Created block %r", name)
    return block


def resolve_block_path(
    config: Config,
    path: Sequence[str],
    *,
    create: bool = False,
) -> Container | None:
    """Walk nested blocks by name from the root.

    Args:
        config (Config): Root of the tree.
        path (Sequence[str]): Block names, outermost first. An empty path is the root.
        create (bool): Append missing blocks instead of giving up.

    Returns:
        Container | None: The innermost block (or the root), or None when a block is
            missing and ``create`` is False.
    """
    container: Container = config
    for name in path:
        found = _find_child_block(container, name)
        if found is None:
            if not create:
                return None
            found = _ensure_child_block(container, name)
        container = found
    return container


def split_key_path(key_path: str) -> tuple[tuple[str, ...], str]:
    """Split ``input:touchpad:natural_scroll`` into block names and the key.

    Raises:
        ValueError: If the key path or one of its segments is empty.
    """
    segments = [segment.strip() for segment in key_path.split(KEY_PATH_SEPARATOR)]
    if not segments or not all(segments):
        raise ValueError(f"Invalid key path: {key_path!r}")
    return tuple(segments[:-1]), segments[-1]
