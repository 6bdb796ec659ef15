"""The "decode yourself" protocol target types implement.

A decode is a conversation: the target asks the Decoder for a shape
(``decode_bool``, ``decode_struct``, ...) and hands over a Visitor; the
Decoder answers by calling back exactly one ``visit_*`` method with what
it found. Structured shapes arrive as access objects the visitor drives
itself (see :mod:`oconfig_core.access`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

from .errors import CustomError

if TYPE_CHECKING:
    from .access import FieldAccess, SeqAccess, UnitVariantAccess
    from .decoder import Decoder

T = TypeVar("T")

# A seed decodes one value out of the decoder's current position.
Seed = Callable[["Decoder"], Any]


class _End:
    """Singleton returned by SeqAccess.next_element once exhausted."""

    _instance: "_End | None" = None

    def __new__(cls) -> "_End":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END"

    def __bool__(self) -> bool:
        return False


END = _End()


@runtime_checkable
class Decodable(Protocol):
    """A type that knows how to decode itself."""

    @classmethod
    def __decode__(cls, decoder: "Decoder") -> Any: ...


class Visitor(Generic[T]):
    """Receives whatever the Decoder found.

    Every method rejects its shape by default; subclasses override the
    ones they accept.
    """

    expecting: str = "a value"

    def invalid(self, found: str) -> CustomError:
        return CustomError(f"invalid type: {found}, expected {self.expecting}")

    def visit_bool(self, value: bool) -> T:
        raise self.invalid(f"boolean `{str(value).lower()}`")

    def visit_int(self, value: int) -> T:
        raise self.invalid(f"integer `{value}`")

    def visit_float(self, value: float) -> T:
        raise self.invalid(f"floating point `{value}`")

    def visit_str(self, value: str) -> T:
        raise self.invalid(f"string {value!r}")

    def visit_char(self, value: str) -> T:
        return self.visit_str(value)

    def visit_none(self) -> T:
        raise self.invalid("nothing")

    def visit_some(self, decoder: "Decoder") -> T:
        raise self.invalid("optional value")

    def visit_newtype(self, decoder: "Decoder") -> T:
        raise self.invalid("newtype")

    def visit_seq(self, access: "SeqAccess") -> T:
        raise self.invalid("sequence")

    def visit_map(self, access: "FieldAccess") -> T:
        raise self.invalid("map")

    def visit_enum(self, access: "UnitVariantAccess") -> T:
        raise self.invalid("enum")


class IgnoredAny(Visitor[None]):
    """Accepts and discards anything."""

    expecting = "anything at all"

    def visit_none(self) -> None:
        return None
