"""LogLevel: the daemon's syslog-style log levels."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .errors import CustomError
from .visitor import Visitor

if TYPE_CHECKING:
    from .decoder import Decoder


class LogLevel(Enum):
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @classmethod
    def __decode__(cls, decoder: "Decoder") -> "LogLevel":
        return decoder.decode_str(_LogLevelVisitor())

    @classmethod
    def from_syslog(cls, level: int) -> "LogLevel | None":
        """Map a syslog priority number; ``None`` if it isn't one we expose."""
        try:
            return cls(level)
        except ValueError:
            return None

    @classmethod
    def from_logging(cls, level: int) -> "LogLevel":
        if level >= logging.ERROR:
            return cls.ERROR
        if level >= logging.WARNING:
            return cls.WARNING
        if level >= logging.INFO:
            return cls.INFO
        return cls.DEBUG

    def to_logging(self) -> int:
        return _TO_LOGGING[self]


_TO_LOGGING = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.NOTICE: logging.INFO,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}

_NAMES = {
    "ERR": LogLevel.ERROR,
    "ERROR": LogLevel.ERROR,
    "WARN": LogLevel.WARNING,
    "WARNING": LogLevel.WARNING,
    "NOTICE": LogLevel.NOTICE,
    "INFO": LogLevel.INFO,
    "DEBUG": LogLevel.DEBUG,
}


class _LogLevelVisitor(Visitor[LogLevel]):
    expecting = "ERROR | WARN | INFO | DEBUG | NOTICE"

    def visit_str(self, value: str) -> LogLevel:
        level = _NAMES.get(value.upper())
        if level is None:
            raise CustomError(f"Did not expect log level of: {value.upper()}")
        return level
