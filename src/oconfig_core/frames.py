"""Traversal stack: where the decoder currently is in the grouped tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .errors import (
    ExpectSingleValueError,
    ExpectStructError,
    NoMoreValuesLeftError,
)
from .values import GroupedEntry, Node


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class StructFrame:
    """Iterating the fields of an object."""

    entries: list[GroupedEntry]
    cursor: int = 0


@dataclass(slots=True)
class ItemFrame:
    """The values of one key, awaiting a scalar, sequence or nested decode."""

    key: str
    nodes: list[Node] = field(default_factory=list)


@dataclass(slots=True)
class SeqFrame:
    """Iterating the elements derived from an ItemFrame."""

    nodes: list[Node]
    cursor: int = 0

    @property
    def node(self) -> Node:
        return self.nodes[self.cursor]


Frame = Union[StructFrame, ItemFrame, SeqFrame]


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------

class TraversalStack:
    """Explicit stack of frames, seeded with the root StructFrame.

    Sibling iteration reuses the top slot: the first field (or element)
    pushes a frame, later ones overwrite it, so its length tracks the tree's
    depth rather than its breadth.
    """

    def __init__(self, root: list[GroupedEntry]) -> None:
        self._frames: list[Frame] = [StructFrame(root)]

    def __len__(self) -> int:
        return len(self._frames)

    def current(self) -> Frame:
        if not self._frames:
            raise NoMoreValuesLeftError()
        return self._frames[-1]

    def pop(self) -> Frame:
        if not self._frames:
            raise NoMoreValuesLeftError()
        return self._frames.pop()

    def push(self, frame: Frame) -> None:
        self._frames.append(frame)

    # -- Sibling-aware pushes -------------------------------------------

    def push_item(self, position: int) -> ItemFrame:
        """Enter the field at *position* of the enclosing StructFrame."""
        parent = self._parent(position)
        if not isinstance(parent, StructFrame):
            raise ExpectStructError()
        entry = parent.entries[position]
        frame = ItemFrame(entry.key, entry.nodes)
        self._place(position, frame)
        return frame

    def push_seq(self, position: int) -> SeqFrame:
        """Position a SeqFrame at element *position* of the enclosing item."""
        parent = self._parent(position)
        if not isinstance(parent, ItemFrame):
            raise ExpectStructError()
        frame = SeqFrame(parent.nodes, position)
        self._place(position, frame)
        return frame

    def push_struct(self, entries: list[GroupedEntry]) -> StructFrame:
        frame = StructFrame(entries)
        self._frames.append(frame)
        return frame

    def _parent(self, position: int) -> Frame:
        # First sibling: parent is the top. Later ones: top is the previous
        # sibling's frame and the parent sits right below it.
        offset = 1 if position == 0 else 2
        if len(self._frames) < offset:
            raise NoMoreValuesLeftError()
        return self._frames[-offset]

    def _place(self, position: int, frame: Frame) -> None:
        if position == 0:
            self._frames.append(frame)
        else:
            self._frames[-1] = frame

    # -- Reads ------------------------------------------------------------

    def grab_node(self) -> Node:
        """Return the single node a scalar read applies to."""
        top = self.current()
        if isinstance(top, ItemFrame):
            if len(top.nodes) != 1:
                raise ExpectSingleValueError()
            return top.nodes[0]
        if isinstance(top, SeqFrame):
            return top.node
        raise ExpectSingleValueError()
