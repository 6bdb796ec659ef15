"""Decodable node types produced by grouping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(slots=True)
class VNumber:
    value: float


@dataclass(slots=True)
class VBool:
    value: bool


@dataclass(slots=True)
class VString:
    value: str


@dataclass(slots=True)
class VObject:
    """One occurrence of a child block, already grouped."""

    entries: list["GroupedEntry"] = field(default_factory=list)


@dataclass(slots=True)
class GroupedEntry:
    """A key with every value and child block seen for it, in order."""

    key: str
    nodes: list["Node"] = field(default_factory=list)


Node = Union[VNumber, VBool, VString, VObject]
