"""Decoder: walks grouped config entries on behalf of a target type."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .access import FieldAccess, SeqAccess, UnitVariantAccess
from .coercion import FloatWidth, IntWidth, to_bool, to_char, to_float, to_int, to_str
from .errors import (
    CustomError,
    DataTypeNotSupportedError,
    DecodeError,
    ExpectObjectError,
    ExpectSingleValueError,
    ExpectStringError,
    ExpectStructError,
)
from .frames import ItemFrame, SeqFrame, StructFrame, TraversalStack
from .grouping import group
from .item import ConfigItem
from .options import DEFAULT_OPTIONS, DecodeOptions
from .typedef import decode_type
from .values import GroupedEntry, VObject, VString
from .visitor import Visitor

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def decode(
    items: Sequence[ConfigItem],
    target: Any,
    options: DecodeOptions | None = None,
) -> Any:
    """Decode a parsed config tree into an instance of *target*.

    *target* is anything :func:`oconfig_core.typedef.decode_type` accepts:
    a dataclass, a pydantic model, an Enum, a ``Decodable`` class, or a
    typing construct built from those.
    """
    name = getattr(target, "__name__", repr(target))
    logger.debug("Decoding %s from %d config items", name, len(items))

    decoder = Decoder(group(items), options)
    try:
        value = decode_type(target, decoder)
        decoder.finish()
    except DecodeError as exc:
        logger.debug("Failed to decode %s: %s", name, exc)
        raise
    return value


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

class Decoder:
    """Answers shape requests from the top frame of its traversal stack.

    One Decoder serves exactly one top-level decode. Target types must
    reach nested values through the access objects they are handed, never
    by driving the stack themselves.
    """

    def __init__(
        self,
        entries: list[GroupedEntry],
        options: DecodeOptions | None = None,
    ) -> None:
        self.stack = TraversalStack(entries)
        self.options = options or DEFAULT_OPTIONS

    # -- Scalars ----------------------------------------------------------

    def decode_bool(self, visitor: Visitor) -> Any:
        return visitor.visit_bool(to_bool(self.stack.grab_node()))

    def decode_int(self, visitor: Visitor, width: IntWidth = IntWidth.I64) -> Any:
        node = self.stack.grab_node()
        return visitor.visit_int(to_int(node, width, self.options.numeric_policy))

    def decode_float(self, visitor: Visitor, width: FloatWidth = FloatWidth.F64) -> Any:
        return visitor.visit_float(to_float(self.stack.grab_node(), width))

    def decode_str(self, visitor: Visitor) -> Any:
        return visitor.visit_str(to_str(self.stack.grab_node()))

    def decode_char(self, visitor: Visitor) -> Any:
        return visitor.visit_char(to_char(self.stack.grab_node()))

    # -- Wrappers -----------------------------------------------------------

    def decode_option(self, visitor: Visitor) -> Any:
        # A missing key is never visited, so anything reaching here is present.
        return visitor.visit_some(self)

    def decode_newtype(self, name: str, visitor: Visitor) -> Any:
        return visitor.visit_newtype(self)

    def decode_ignored(self, visitor: Visitor) -> Any:
        return visitor.visit_none()

    # -- Identifiers --------------------------------------------------------

    def decode_identifier(self, visitor: Visitor) -> Any:
        """Field name of an ItemFrame, or the variant name of an enum value."""
        top = self.stack.current()
        if isinstance(top, ItemFrame):
            return visitor.visit_str(top.key)
        if isinstance(top, SeqFrame) and top.cursor == 0:
            node = top.node
            if isinstance(node, VString):
                return visitor.visit_str(node.value)
        raise ExpectStructError()

    # -- Structures ---------------------------------------------------------

    def decode_seq(self, visitor: Visitor) -> Any:
        top = self.stack.current()
        if not isinstance(top, ItemFrame):
            raise CustomError("expected an item when decoding a sequence")
        return visitor.visit_seq(SeqAccess(self, len(top.nodes)))

    def decode_struct(self, name: str, fields: Sequence[str], visitor: Visitor) -> Any:
        top = self.stack.current()

        # Descending into an object goes down two levels (item/seq, then the
        # object itself), so remember to climb back out.
        owes_pop = False
        if isinstance(top, StructFrame):
            frame = top
        else:
            frame = self.stack.push_struct(self._object_at(top).entries)
            owes_pop = True

        result = visitor.visit_map(FieldAccess(self, frame))
        if owes_pop:
            self.stack.pop()
        return result

    def decode_enum(self, name: str, variants: Sequence[str], visitor: Visitor) -> Any:
        top = self.stack.current()
        if isinstance(top, ItemFrame):
            if len(top.nodes) != 1:
                raise CustomError("expected enum item to have a single item list")
            if not isinstance(top.nodes[0], VString):
                raise ExpectStringError()
            # The variant name is read as an identifier; a one-element
            # sequence keeps it from re-reading the field's key instead.
            self.stack.push_seq(0)
        elif isinstance(top, SeqFrame):
            node = top.node
            if not isinstance(node, VString):
                raise ExpectStringError()
            self.stack.push(SeqFrame([node]))
        else:
            raise ExpectStructError()

        result = visitor.visit_enum(UnitVariantAccess(self))
        self.stack.pop()
        return result

    # -- Unsupported shapes -------------------------------------------------

    def decode_any(self, visitor: Visitor) -> Any:
        raise DataTypeNotSupportedError()

    def decode_map(self, visitor: Visitor) -> Any:
        return self.decode_any(visitor)

    def decode_tuple(self, length: int, visitor: Visitor) -> Any:
        return self.decode_any(visitor)

    def decode_bytes(self, visitor: Visitor) -> Any:
        return self.decode_any(visitor)

    def decode_unit(self, visitor: Visitor) -> Any:
        return self.decode_any(visitor)

    # -- Helpers ------------------------------------------------------------

    def _object_at(self, top: ItemFrame | SeqFrame) -> VObject:
        if isinstance(top, SeqFrame):
            node = top.node
        elif len(top.nodes) != 1:
            raise ExpectSingleValueError()
        else:
            node = top.nodes[0]
        if not isinstance(node, VObject):
            raise ExpectObjectError()
        return node

    def finish(self) -> None:
        """Pop the root frame, checking every top-level key was visited."""
        if len(self.stack) != 1:
            raise CustomError(
                f"decoding stopped {len(self.stack) - 1} level(s) below the root"
            )
        root = self.stack.pop()
        if isinstance(root, StructFrame) and root.cursor < len(root.entries):
            left = ", ".join(e.key for e in root.entries[root.cursor:])
            raise CustomError(f"unconsumed configuration keys: {left}")
