"""ConfigItem: the raw tree handed over by the config file parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class String:
    value: str


ConfigValue = Union[Number, Boolean, String]


def to_config_value(raw: object) -> ConfigValue:
    """Wrap a plain Python scalar as a ConfigValue.

    ``bool`` is checked before ``int`` since it is a subclass of it.
    """
    if isinstance(raw, (Number, Boolean, String)):
        return raw
    if isinstance(raw, bool):
        return Boolean(raw)
    if isinstance(raw, (int, float)):
        return Number(float(raw))
    if isinstance(raw, str):
        return String(raw)
    raise TypeError(f"cannot use {type(raw).__name__} as a config value")


@dataclass
class ConfigItem:
    """One directive: a key, its scalar values and its child block.

    Keys may repeat among siblings; each occurrence keeps its own
    values and children.
    """

    key: str
    values: list[ConfigValue] = field(default_factory=list)
    children: list["ConfigItem"] = field(default_factory=list)

    @classmethod
    def of(
        cls,
        key: str,
        *values: object,
        children: Iterable["ConfigItem"] = (),
    ) -> "ConfigItem":
        """Build an item from plain Python scalars.

        Usage::

            ConfigItem.of("Node", children=[
                ConfigItem.of("Name", "localhost"),
                ConfigItem.of("Port", 2003),
            ])
        """
        return cls(
            key=key,
            values=[to_config_value(v) for v in values],
            children=list(children),
        )
