"""Structural decoders handed to visitors: fields, elements and unit variants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import CustomError
from .frames import StructFrame
from .visitor import END, IgnoredAny, Seed, Visitor

if TYPE_CHECKING:
    from .decoder import Decoder


class _KeyVisitor(Visitor[str]):
    expecting = "an identifier"

    def visit_str(self, value: str) -> str:
        return value


def identifier(decoder: "Decoder") -> str:
    """Seed reading the current identifier as a plain string."""
    return decoder.decode_identifier(_KeyVisitor())


# ---------------------------------------------------------------------------
# Field access (structs)
# ---------------------------------------------------------------------------

class FieldAccess:
    """Walks the entries of a StructFrame, one key/value pair at a time.

    Usage (inside ``Visitor.visit_map``)::

        while (key := access.next_key()) is not None:
            if key == "Port":
                port = access.next_value(decode_port)
            else:
                access.skip_value()
    """

    def __init__(self, decoder: "Decoder", frame: StructFrame) -> None:
        self._de = decoder
        self._frame = frame
        self.count = len(frame.entries)
        self.position = 0

    def __len__(self) -> int:
        return self.count

    def next_key(self, seed: Seed = identifier) -> Any:
        """Enter the next field and decode its key; ``None`` once exhausted."""
        if self.position == self.count:
            if self.count != 0:
                # Drop the last field's ItemFrame.
                self._de.stack.pop()
            return None

        self._de.stack.push_item(self.position)
        self.position += 1
        self._frame.cursor = self.position
        return seed(self._de)

    def next_value(self, seed: Seed) -> Any:
        return seed(self._de)

    def skip_value(self) -> None:
        self._de.decode_ignored(IgnoredAny())


# ---------------------------------------------------------------------------
# Element access (sequences)
# ---------------------------------------------------------------------------

class SeqAccess:
    """Walks the nodes of an ItemFrame as sequence elements."""

    def __init__(self, decoder: "Decoder", count: int) -> None:
        self._de = decoder
        self.count = count
        self.position = 0

    def __len__(self) -> int:
        return self.count

    def next_element(self, seed: Seed) -> Any:
        """Decode the next element; returns ``END`` once exhausted."""
        if self.position == self.count:
            if self.count != 0:
                self._de.stack.pop()
            return END

        self._de.stack.push_seq(self.position)
        self.position += 1
        return seed(self._de)


# ---------------------------------------------------------------------------
# Unit-variant access (enums)
# ---------------------------------------------------------------------------

class UnitVariantAccess:
    """Reads a variant name; only unit variants carry no further data."""

    def __init__(self, decoder: "Decoder") -> None:
        self._de = decoder

    def variant(self, seed: Seed = identifier) -> tuple[Any, "UnitVariantAccess"]:
        return seed(self._de), self

    def unit_variant(self) -> None:
        return None

    def newtype_variant(self, seed: Seed) -> Any:
        raise CustomError("newtype variant not supported")

    def tuple_variant(self, length: int, visitor: Visitor) -> Any:
        raise CustomError("tuple variant not supported")

    def struct_variant(self, fields: tuple[str, ...], visitor: Visitor) -> Any:
        raise CustomError("struct variant not supported")
