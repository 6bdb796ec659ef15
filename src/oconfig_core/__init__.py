"""oconfig core: typed decoding of directive-style configuration trees."""

from .decoder import Decoder, decode
from .errors import (
    CustomError,
    DataTypeNotSupportedError,
    DecodeError,
    ExpectBooleanError,
    ExpectCharError,
    ExpectNumberError,
    ExpectObjectError,
    ExpectSingleValueError,
    ExpectStringError,
    ExpectStructError,
    NoMoreValuesLeftError,
    OConfigError,
)
from .grouping import group
from .item import Boolean, ConfigItem, ConfigValue, Number, String
from .level import LogLevel
from .options import DecodeOptions, NumericPolicy
from .typedef import Char, config, decode_type, f32, f64, i8, i16, i32, i64, u8, u16, u32, u64
from .values import GroupedEntry, VBool, VNumber, VObject, VString
from .visitor import END, Decodable, Visitor

__all__ = [
    "decode",
    "decode_type",
    "config",
    "Decoder",
    "Decodable",
    "Visitor",
    "END",
    "ConfigItem",
    "ConfigValue",
    "Number",
    "Boolean",
    "String",
    "group",
    "GroupedEntry",
    "VNumber",
    "VBool",
    "VString",
    "VObject",
    "DecodeOptions",
    "NumericPolicy",
    "LogLevel",
    "Char",
    "i8",
    "i16",
    "i32",
    "i64",
    "u8",
    "u16",
    "u32",
    "u64",
    "f32",
    "f64",
    "OConfigError",
    "DecodeError",
    "NoMoreValuesLeftError",
    "ExpectSingleValueError",
    "ExpectStringError",
    "ExpectBooleanError",
    "ExpectNumberError",
    "ExpectCharError",
    "ExpectStructError",
    "ExpectObjectError",
    "DataTypeNotSupportedError",
    "CustomError",
]
