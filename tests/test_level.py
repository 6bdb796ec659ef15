"""Tests for LogLevel decoding and conversions."""

import logging
from dataclasses import dataclass

import pytest

from oconfig_core import ConfigItem, CustomError, ExpectStringError, LogLevel, decode


@dataclass
class Levels:
    warn: LogLevel
    warning: LogLevel
    err: LogLevel
    error: LogLevel
    debug: LogLevel
    info: LogLevel
    notice: LogLevel


@dataclass
class Threshold:
    level: LogLevel


@dataclass
class Thresholds:
    levels: list[LogLevel]


def test_log_levels_case_insensitive():
    items = [
        ConfigItem.of("warn", "warn"),
        ConfigItem.of("warning", "Warning"),
        ConfigItem.of("err", "ErR"),
        ConfigItem.of("error", "Error"),
        ConfigItem.of("debug", "debug"),
        ConfigItem.of("info", "INFO"),
        ConfigItem.of("notice", "notice"),
    ]
    assert decode(items, Levels) == Levels(
        warn=LogLevel.WARNING,
        warning=LogLevel.WARNING,
        err=LogLevel.ERROR,
        error=LogLevel.ERROR,
        debug=LogLevel.DEBUG,
        info=LogLevel.INFO,
        notice=LogLevel.NOTICE,
    )


def test_unknown_level():
    with pytest.raises(CustomError, match="Did not expect log level of: TRACE"):
        decode([ConfigItem.of("level", "trace")], Threshold)


def test_level_not_a_string():
    with pytest.raises(ExpectStringError):
        decode([ConfigItem.of("level", 3)], Threshold)


def test_level_sequence():
    items = [ConfigItem.of("levels", "info", "err")]
    assert decode(items, Thresholds) == Thresholds([LogLevel.INFO, LogLevel.ERROR])


class TestConversions:
    def test_from_syslog(self):
        assert LogLevel.from_syslog(3) is LogLevel.ERROR
        assert LogLevel.from_syslog(7) is LogLevel.DEBUG
        assert LogLevel.from_syslog(42) is None

    def test_from_logging(self):
        assert LogLevel.from_logging(logging.CRITICAL) is LogLevel.ERROR
        assert LogLevel.from_logging(logging.WARNING) is LogLevel.WARNING
        assert LogLevel.from_logging(logging.INFO) is LogLevel.INFO
        assert LogLevel.from_logging(5) is LogLevel.DEBUG

    def test_to_logging(self):
        assert LogLevel.NOTICE.to_logging() == logging.INFO
        assert LogLevel.ERROR.to_logging() == logging.ERROR
