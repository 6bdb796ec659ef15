"""End-to-end decoding of plugin configuration blocks."""

from dataclasses import dataclass, field
from typing import Optional

import pytest

from oconfig_core import (
    ConfigItem,
    CustomError,
    DecodeError,
    LogLevel,
    config,
    decode,
    u16,
)


@config(rename_all="PascalCase", deny_unknown_fields=True)
@dataclass
class GraphiteNode:
    name: str
    address: str
    prefix: Optional[str] = None


@config(deny_unknown_fields=True)
@dataclass
class GraphiteConfig:
    nodes: list[GraphiteNode] = field(metadata={"rename": "Node"})


@config(rename_all="PascalCase")
@dataclass
class LoadConfig:
    report_relative: bool = False
    log_level: LogLevel = LogLevel.INFO
    ports: list[u16] = field(default_factory=list)


def _node(name, address, prefix=None):
    children = [ConfigItem.of("Name", name), ConfigItem.of("Address", address)]
    if prefix is not None:
        children.append(ConfigItem.of("Prefix", prefix))
    return ConfigItem.of("Node", children=children)


def test_graphite_nodes():
    items = [
        _node("localhost.1", "127.0.0.1:20003"),
        _node("localhost.2", "127.0.0.1:20004", prefix="iamprefix"),
    ]
    assert decode(items, GraphiteConfig) == GraphiteConfig(nodes=[
        GraphiteNode("localhost.1", "127.0.0.1:20003"),
        GraphiteNode("localhost.2", "127.0.0.1:20004", "iamprefix"),
    ])


def test_graphite_unknown_node_key():
    items = [
        ConfigItem.of("Node", children=[
            ConfigItem.of("Name", "n"),
            ConfigItem.of("Address", "a"),
            ConfigItem.of("Protocol", "tcp"),
        ]),
    ]
    with pytest.raises(CustomError, match="Protocol"):
        decode(items, GraphiteConfig)


def test_graphite_unknown_top_level_key():
    items = [_node("n", "a"), ConfigItem.of("Interval", 10)]
    with pytest.raises(DecodeError):
        decode(items, GraphiteConfig)


def test_load_config_defaults():
    assert decode([], LoadConfig) == LoadConfig()


def test_load_config_full():
    items = [
        ConfigItem.of("ReportRelative", True),
        ConfigItem.of("LogLevel", "debug"),
        ConfigItem.of("Ports", 2003, 2004),
        ConfigItem.of("Ports", 2005),
    ]
    assert decode(items, LoadConfig) == LoadConfig(
        report_relative=True,
        log_level=LogLevel.DEBUG,
        ports=[2003, 2004, 2005],
    )


def test_error_text_rendered():
    items = [ConfigItem.of("ReportRelative", "yes")]
    with pytest.raises(DecodeError) as exc_info:
        decode(items, LoadConfig)
    assert str(exc_info.value) == "expecting boolean"
    assert exc_info.value.ERROR_CODE == "OCF_1004"
