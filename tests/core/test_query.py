# topmark:header:start
#
#   project      : HyprConf
#   file         : test_query.py
#   file_relpath : tests/core/test_query.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `hyprconf.core.query` lookups and in-place mutations."""

from __future__ import annotations

import pytest

from hyprconf.constants import UNPOSITIONED_LINE
from hyprconf.core.nodes import Block, Comment, CommentedProperty, Config, Property, is_synthesized
from hyprconf.core.parser import parse
from hyprconf.core.query import (
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


def input_block(text: str) -> tuple[Config, Block]:
    """Parse ``text`` and return the root and its ``input`` block."""
    tree = parse(text)
    block = find_block(tree, "input")
    assert block is not None
    return tree, block


def test_uncomment_in_place() -> None:
    """Enabling a commented setting swaps it in place, keeping its value."""
    tree, block = input_block("input {\n  sensitivity = 0.5\n  # repeat_rate = 40\n}\n")

    lookup = find_property_or_commented(block, "repeat_rate")
    assert lookup.is_commented
    assert lookup.value == 40
    assert not lookup.enabled

    set_property_enabled(block, "repeat_rate", True)

    assert serialize(tree) == "input {\n  sensitivity = 0.5\n  repeat_rate = 40\n}\n"
    assert block.children[1] == Property("repeat_rate", 40)


def test_active_wins_over_commented() -> None:
    """With both forms present, the active one is reported."""
    _, block = input_block("input {\n  # x = 1\n  x = 2\n}\n")
    lookup = find_property_or_commented(block, "x")
    assert not lookup.is_commented
    assert lookup.property == Property("x", 2)
    assert lookup.commented == CommentedProperty("x", 1)
    assert lookup.current is lookup.property
    assert lookup.value == 2


def test_missing_key_lookup() -> None:
    """A missing key yields an empty lookup."""
    _, block = input_block("input {\n}\n")
    lookup = find_property_or_commented(block, "nope")
    assert (lookup.property, lookup.commented, lookup.is_commented) == (None, None, False)
    assert lookup.current is None
    assert lookup.value is None


def test_finders_return_first_match() -> None:
    """Duplicate keys: the first one wins."""
    _, block = input_block("input {\n  a = 1\n  a = 2\n  # b = 1\n  # b = 2\n}\n")
    assert find_property(block, "a") == Property("a", 1)
    assert find_commented_property(block, "b") == CommentedProperty("b", 1)
    assert find_property(block, "b") is None


def test_disable_in_place_keeps_inline_comment() -> None:
    """Disabling comments out the active property at the same index."""
    tree, block = input_block("input {\n  a = 1\n  b = 2 # keep\n  c = 3\n}\n")
    set_property_enabled(block, "b", False)
    assert block.children[1] == CommentedProperty("b", 2, comment="keep")
    assert block.children[1].line == 3
    assert serialize(tree) == "input {\n  a = 1\n  # b = 2 # keep\n  c = 3\n}\n"


def test_enable_with_value_replaces_commented_value() -> None:
    """Enabling with a value uncomments with that value."""
    _, block = input_block("input {\n  # repeat_rate = 40\n}\n")
    set_property_enabled(block, "repeat_rate", True, 25)
    assert block.children == [Property("repeat_rate", 25)]


def test_enable_active_with_value_updates_in_place() -> None:
    """An active property gets the new value."""
    _, block = input_block("input {\n  a = 1\n  b = 2\n}\n")
    target = block.children[0]
    set_property_enabled(block, "a", True, 5)
    assert block.children[0] is target
    assert block.children == [Property("a", 5), Property("b", 2)]


def test_enable_missing_with_value_appends() -> None:
    """A missing setting is appended with a synthesized position."""
    _, block = input_block("input {\n  a = 1\n}\n")
    set_property_enabled(block, "z", True, "x")
    assert block.children[-1] == Property("z", "x")
    assert is_synthesized(block.children[-1])
    assert block.children[-1].line == UNPOSITIONED_LINE


def test_no_op_transitions() -> None:
    """Disabling something not active and enabling without a value are no-ops."""
    text = "input {\n  # a = 1\n  b = 2\n}\n"
    tree, block = input_block(text)
    set_property_enabled(block, "a", False)
    set_property_enabled(block, "missing", False)
    set_property_enabled(block, "missing", True)
    set_property_enabled(block, "b", True)
    assert serialize(tree) == text


def test_toggle_property_comment() -> None:
    """toggle flips active and commented, and appends only with a value."""
    _, block = input_block("input {\n  a = 1\n  # b = 2\n}\n")
    toggle_property_comment(block, "a")
    toggle_property_comment(block, "b", 3)
    toggle_property_comment(block, "c")
    assert block.children == [CommentedProperty("a", 1), Property("b", 3)]
    toggle_property_comment(block, "c", True)
    assert block.children[-1] == Property("c", True)


def test_toggle_uses_identity_for_equal_duplicates() -> None:
    """Structurally equal siblings are told apart by identity."""
    block = Block("b", [Comment("x"), CommentedProperty("k", 1), CommentedProperty("k", 1)])
    toggle_property_comment(block, "k")
    assert block.children == [Comment("x"), Property("k", 1), CommentedProperty("k", 1)]


def test_update_or_add_property_ignores_commented_form() -> None:
    """update_or_add_property acts on active properties only."""
    _, block = input_block("input {\n  # a = 1\n  b = 2\n}\n")
    returned = update_or_add_property(block, "b", 3)
    assert returned is block.children[1]
    update_or_add_property(block, "a", 9)
    assert block.children == [CommentedProperty("a", 1), Property("b", 3), Property("a", 9)]


def test_ensure_blocks() -> None:
    """ensure_* returns existing blocks and appends missing ones."""
    tree = parse("input {\n}\n")
    existing = find_block(tree, "input")
    assert ensure_block(tree, "input") is existing
    general = ensure_block(tree, "general")
    assert tree.children[-1] is general
    assert existing is not None
    touchpad = ensure_child_block(existing, "touchpad")
    assert find_child_block(existing, "touchpad") is touchpad
    assert ensure_child_block(existing, "touchpad") is touchpad


def test_resolve_block_path() -> None:
    """Block paths resolve from the root; missing blocks are created on request."""
    tree = parse("input {\n  touchpad {\n  }\n}\n")
    assert resolve_block_path(tree, ()) is tree
    touchpad = resolve_block_path(tree, ("input", "touchpad"))
    assert isinstance(touchpad, Block)
    assert touchpad.name == "touchpad"
    assert resolve_block_path(tree, ("input", "mouse")) is None

    created = resolve_block_path(tree, ("decoration", "blur"), create=True)
    assert isinstance(created, Block)
    assert serialize(tree).endswith("decoration {\n  blur {\n\n  }\n}\n")


def test_split_key_path() -> None:
    """Key paths split into block names and the final key."""
    assert split_key_path("input:touchpad:natural_scroll") == (
        ("input", "touchpad"),
        "natural_scroll",
    )
    assert split_key_path("gaps_in") == ((), "gaps_in")


@pytest.mark.parametrize("key_path", ["", ":", "input:", ":key", "a::b"])
def test_split_key_path_rejects_empty_segments(key_path: str) -> None:
    """Empty segments are invalid."""
    with pytest.raises(ValueError, match="Invalid key path"):
        split_key_path(key_path)
