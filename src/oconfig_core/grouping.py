"""Grouping of sibling ConfigItems that share a key."""

from __future__ import annotations

from typing import Sequence

from .item import Boolean, ConfigItem, ConfigValue, Number, String
from .values import GroupedEntry, Node, VBool, VNumber, VObject, VString


def group(items: Sequence[ConfigItem]) -> list[GroupedEntry]:
    """Collapse repeated keys into one entry each, in first-seen order.

    - Scalar values of every occurrence are concatenated in parser order
    - Each child block becomes one VObject, recursively grouped
    - An item carrying both contributes its values first, then its object

    Example::

        Key "a" "b"
        Key "c"
        → [GroupedEntry("Key", [VString("a"), VString("b"), VString("c")])]
    """
    entries: dict[str, list[Node]] = {}
    for item in items:
        if item.values:
            entries.setdefault(item.key, []).extend(
                value_to_node(v) for v in item.values
            )
        if item.children:
            entries.setdefault(item.key, []).append(VObject(group(item.children)))

    return [GroupedEntry(key, nodes) for key, nodes in entries.items()]


def value_to_node(value: ConfigValue) -> Node:
    if isinstance(value, Number):
        return VNumber(float(value.value))
    if isinstance(value, Boolean):
        return VBool(bool(value.value))
    if isinstance(value, String):
        return VString(value.value)
    raise TypeError(f"unrecognized config value: {value!r}")
