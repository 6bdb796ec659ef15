"""Reflection-based decoding for dataclasses, pydantic models and typing hints.

Target types never need to write visitors by hand: :func:`decode_type`
inspects a type hint and drives the Decoder accordingly. Classes that
define ``__decode__`` take over their own decoding.

Width markers narrow numbers explicitly::

    @config(rename_all="PascalCase", deny_unknown_fields=True)
    @dataclass
    class Node:
        name: str
        port: u16
        separator: Char = "."
        prefix: str | None = None
"""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Callable, Union, get_args, get_origin

import pydantic

from .coercion import FloatWidth, IntWidth
from .errors import CustomError, OConfigError
from .visitor import END, IgnoredAny, Seed, Visitor

if TYPE_CHECKING:
    from .access import FieldAccess, SeqAccess, UnitVariantAccess
    from .decoder import Decoder


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

class _CharMarker:
    def __repr__(self) -> str:
        return "CHAR"


CHAR = _CharMarker()

i8 = Annotated[int, IntWidth.I8]
i16 = Annotated[int, IntWidth.I16]
i32 = Annotated[int, IntWidth.I32]
i64 = Annotated[int, IntWidth.I64]
u8 = Annotated[int, IntWidth.U8]
u16 = Annotated[int, IntWidth.U16]
u32 = Annotated[int, IntWidth.U32]
u64 = Annotated[int, IntWidth.U64]
f32 = Annotated[float, FloatWidth.F32]
f64 = Annotated[float, FloatWidth.F64]
Char = Annotated[str, CHAR]


# ---------------------------------------------------------------------------
# Struct options
# ---------------------------------------------------------------------------

def _pascal(name: str) -> str:
    return "".join(p[:1].upper() + p[1:] for p in name.split("_"))


def _camel(name: str) -> str:
    pascal = _pascal(name)
    return pascal[:1].lower() + pascal[1:]


_RENAMERS: dict[str, Callable[[str], str]] = {
    "PascalCase": _pascal,
    "camelCase": _camel,
    "lowercase": str.lower,
    "UPPERCASE": str.upper,
    "kebab-case": lambda name: name.replace("_", "-"),
    "SCREAMING_SNAKE_CASE": str.upper,
}


@dataclass(frozen=True)
class StructConfig:
    rename_all: str | None = None
    deny_unknown_fields: bool = False

    def key_for(self, name: str) -> str:
        if self.rename_all is None:
            return name
        return _RENAMERS[self.rename_all](name)


_DEFAULT_STRUCT_CONFIG = StructConfig()


def config(cls: type | None = None, *, rename_all: str | None = None,
           deny_unknown_fields: bool = False):
    """Class decorator setting how config keys map onto fields."""
    if rename_all is not None and rename_all not in _RENAMERS:
        raise ValueError(
            f"unknown rename_all {rename_all!r}, expected one of {sorted(_RENAMERS)}"
        )

    def wrap(target: type) -> type:
        target.__oconfig__ = StructConfig(rename_all, deny_unknown_fields)
        return target

    return wrap if cls is None else wrap(cls)


# ---------------------------------------------------------------------------
# Struct plans
# ---------------------------------------------------------------------------

@dataclass
class MemberDef:
    attr: str  # constructor argument name
    key: str  # config key
    hint: Any
    required: bool = True
    optional: bool = False


@dataclass
class TypeDef:
    name: str
    members: list[MemberDef]
    build: Callable[[dict[str, Any]], Any]
    deny_unknown_fields: bool = False

    def __post_init__(self) -> None:
        self.by_key = {m.key: m for m in self.members}

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(m.key for m in self.members)


def _is_optional(hint: Any) -> bool:
    if get_origin(hint) is Annotated:
        hint = get_args(hint)[0]
    return get_origin(hint) in (Union, types.UnionType) and type(None) in get_args(hint)


@functools.lru_cache(maxsize=None)
def dataclass_typedef(cls: type) -> TypeDef:
    opts: StructConfig = getattr(cls, "__oconfig__", _DEFAULT_STRUCT_CONFIG)
    hints = typing.get_type_hints(cls, include_extras=True)
    members = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        hint = hints.get(f.name, Any)
        has_default = (
            f.default is not dataclasses.MISSING
            or f.default_factory is not dataclasses.MISSING
        )
        members.append(MemberDef(
            attr=f.name,
            key=f.metadata.get("rename") or opts.key_for(f.name),
            hint=hint,
            required=not has_default,
            optional=_is_optional(hint),
        ))
    return TypeDef(
        name=cls.__name__,
        members=members,
        build=lambda values: cls(**values),
        deny_unknown_fields=opts.deny_unknown_fields,
    )


@functools.lru_cache(maxsize=None)
def model_typedef(cls: type[pydantic.BaseModel]) -> TypeDef:
    opts: StructConfig = getattr(cls, "__oconfig__", _DEFAULT_STRUCT_CONFIG)
    members = []
    for name, info in cls.model_fields.items():
        hint = info.annotation
        if info.metadata:
            # Width markers survive in the field's metadata.
            hint = Annotated[(hint, *info.metadata)]
        members.append(MemberDef(
            attr=info.alias or name,
            key=info.alias or opts.key_for(name),
            hint=hint,
            required=info.is_required(),
            optional=_is_optional(hint),
        ))

    def build(values: dict[str, Any]) -> Any:
        try:
            return cls.model_validate(values)
        except pydantic.ValidationError as exc:
            raise CustomError(str(exc)) from exc

    return TypeDef(
        name=cls.__name__,
        members=members,
        build=build,
        deny_unknown_fields=(
            opts.deny_unknown_fields or cls.model_config.get("extra") == "forbid"
        ),
    )


# ---------------------------------------------------------------------------
# Visitors
# ---------------------------------------------------------------------------

class _BoolVisitor(Visitor[bool]):
    expecting = "a boolean"

    def visit_bool(self, value: bool) -> bool:
        return value


class _IntVisitor(Visitor[int]):
    expecting = "an integer"

    def visit_int(self, value: int) -> int:
        return value


class _FloatVisitor(Visitor[float]):
    expecting = "a number"

    def visit_float(self, value: float) -> float:
        return value


class _StrVisitor(Visitor[str]):
    expecting = "a string"

    def visit_str(self, value: str) -> str:
        return value


class _OptionVisitor(Visitor[Any]):
    def __init__(self, inner: Any) -> None:
        self.inner = inner

    def visit_none(self) -> None:
        return None

    def visit_some(self, decoder: "Decoder") -> Any:
        return decode_type(self.inner, decoder)


class _NewtypeVisitor(Visitor[Any]):
    def __init__(self, newtype: Any) -> None:
        self.newtype = newtype
        self.expecting = f"newtype {newtype.__name__}"

    def visit_newtype(self, decoder: "Decoder") -> Any:
        return self.newtype(decode_type(self.newtype.__supertype__, decoder))


class _ListVisitor(Visitor[list]):
    expecting = "a sequence"

    def __init__(self, item: Any) -> None:
        self.item = item

    def visit_seq(self, access: "SeqAccess") -> list:
        out = []
        while (value := access.next_element(self._element)) is not END:
            out.append(value)
        return out

    def _element(self, decoder: "Decoder") -> Any:
        return decode_type(self.item, decoder)


class _EnumVisitor(Visitor[Enum]):
    def __init__(self, cls: type[Enum]) -> None:
        self.cls = cls
        self.expecting = f"enum {cls.__name__}"

    def visit_enum(self, access: "UnitVariantAccess") -> Enum:
        name, variant = access.variant()
        variant.unit_variant()
        return self.lookup(name)

    def lookup(self, name: str) -> Enum:
        member = self.cls.__members__.get(name)
        if member is not None:
            return member
        for member in self.cls:
            if member.value == name:
                return member
        expected = ", ".join(f"`{n}`" for n in self.cls.__members__)
        raise CustomError(f"unknown variant `{name}`, expected one of {expected}")


class _StructVisitor(Visitor[Any]):
    def __init__(self, td: TypeDef) -> None:
        self.td = td
        self.expecting = f"struct {td.name}"

    def visit_map(self, access: "FieldAccess") -> Any:
        values: dict[str, Any] = {}
        while (key := access.next_key()) is not None:
            member = self.td.by_key.get(key)
            if member is None:
                if self.td.deny_unknown_fields:
                    expected = ", ".join(f"`{k}`" for k in self.td.keys)
                    raise CustomError(f"unknown field `{key}`, expected one of {expected}")
                access.skip_value()
                continue
            values[member.attr] = access.next_value(
                lambda decoder, hint=member.hint: decode_type(hint, decoder)
            )

        for member in self.td.members:
            if member.attr in values or not member.required:
                continue
            if member.optional:
                values[member.attr] = None
            else:
                raise CustomError(f"missing field `{member.key}`")
        return self.td.build(values)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def decode_type(tp: Any, decoder: "Decoder") -> Any:
    """Decode the value at the decoder's position as an instance of *tp*."""
    return seed_for(tp)(decoder)


def seed_for(tp: Any) -> Seed:
    """Return a seed that decodes *tp*."""
    origin = get_origin(tp)

    if origin is Annotated:
        base, *meta = get_args(tp)
        for m in meta:
            if isinstance(m, IntWidth):
                return lambda de: de.decode_int(_IntVisitor(), m)
            if isinstance(m, FloatWidth):
                return lambda de: de.decode_float(_FloatVisitor(), m)
            if m is CHAR:
                return lambda de: de.decode_char(_StrVisitor())
        return seed_for(base)

    if tp is Any or tp is object:
        return lambda de: de.decode_any(IgnoredAny())

    if origin in (Union, types.UnionType):
        args = get_args(tp)
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1 and len(args) == 2:
            return lambda de: de.decode_option(_OptionVisitor(rest[0]))
        return lambda de: de.decode_any(IgnoredAny())

    if origin is list or tp is list:
        (item,) = get_args(tp) or (Any,)
        return lambda de: de.decode_seq(_ListVisitor(item))

    if origin is dict or tp is dict:
        return lambda de: de.decode_map(IgnoredAny())

    if origin is tuple or tp is tuple:
        return lambda de: de.decode_tuple(len(get_args(tp)), IgnoredAny())

    if hasattr(tp, "__supertype__"):
        return lambda de: de.decode_newtype(tp.__name__, _NewtypeVisitor(tp))

    if isinstance(tp, type):
        return _seed_for_class(tp)

    raise OConfigError(f"cannot decode into {tp!r}")


def _seed_for_class(cls: type) -> Seed:
    if hasattr(cls, "__decode__"):
        return cls.__decode__
    if issubclass(cls, bool):
        return lambda de: de.decode_bool(_BoolVisitor())
    if issubclass(cls, Enum):
        variants = tuple(cls.__members__)
        return lambda de: de.decode_enum(cls.__name__, variants, _EnumVisitor(cls))
    if issubclass(cls, int):
        return lambda de: de.decode_int(_IntVisitor())
    if issubclass(cls, float):
        return lambda de: de.decode_float(_FloatVisitor())
    if issubclass(cls, str):
        return lambda de: de.decode_str(_StrVisitor())
    if issubclass(cls, bytes):
        return lambda de: de.decode_bytes(IgnoredAny())
    if issubclass(cls, pydantic.BaseModel):
        td = model_typedef(cls)
        return lambda de: de.decode_struct(td.name, td.keys, _StructVisitor(td))
    if dataclasses.is_dataclass(cls):
        td = dataclass_typedef(cls)
        return lambda de: de.decode_struct(td.name, td.keys, _StructVisitor(td))
    raise OConfigError(f"cannot decode into {cls.__name__}")
