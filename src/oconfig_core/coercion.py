"""Scalar coercion from decodable nodes to primitive Python values."""

from __future__ import annotations

import logging
import math
import struct
from enum import Enum

from .errors import (
    CustomError,
    ExpectBooleanError,
    ExpectCharError,
    ExpectNumberError,
    ExpectStringError,
)
from .options import NumericPolicy
from .values import Node, VBool, VNumber, VString

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Widths
# ---------------------------------------------------------------------------

class IntWidth(Enum):
    I8 = ("i8", 8, True)
    I16 = ("i16", 16, True)
    I32 = ("i32", 32, True)
    I64 = ("i64", 64, True)
    U8 = ("u8", 8, False)
    U16 = ("u16", 16, False)
    U32 = ("u32", 32, False)
    U64 = ("u64", 64, False)

    def __init__(self, label: str, bits: int, signed: bool) -> None:
        self.label = label
        self.bits = bits
        self.signed = signed

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


class FloatWidth(Enum):
    F32 = "f32"
    F64 = "f64"


# ---------------------------------------------------------------------------
# Tag checks
# ---------------------------------------------------------------------------

def to_bool(node: Node) -> bool:
    if not isinstance(node, VBool):
        raise ExpectBooleanError()
    return node.value


def to_number(node: Node) -> float:
    if not isinstance(node, VNumber):
        raise ExpectNumberError()
    return node.value


def to_str(node: Node) -> str:
    if not isinstance(node, VString):
        raise ExpectStringError()
    return node.value


def to_char(node: Node) -> str:
    s = to_str(node)
    if len(s) != 1:
        raise ExpectCharError(s)
    return s


# ---------------------------------------------------------------------------
# Numeric narrowing
# ---------------------------------------------------------------------------

def to_int(node: Node, width: IntWidth, policy: NumericPolicy) -> int:
    """Narrow a config number to an integer of the given width."""
    x = to_number(node)
    result = narrow_int(x, width)
    if result != x:
        if policy is NumericPolicy.STRICT:
            raise CustomError(f"number {x} does not fit in {width.label}")
        logger.warning("Config number %s narrowed to %s as %s", x, result, width.label)
    return result


def narrow_int(x: float, width: IntWidth) -> int:
    """Truncate toward zero and saturate; NaN maps to 0."""
    if math.isnan(x):
        return 0
    if x >= width.max:
        return width.max
    if x <= width.min:
        return width.min
    return int(x)


def to_float(node: Node, width: FloatWidth) -> float:
    x = to_number(node)
    if width is FloatWidth.F32:
        return narrow_f32(x)
    return x


def narrow_f32(x: float) -> float:
    """Round through IEEE single precision."""
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)
