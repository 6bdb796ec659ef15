"""Tests for scalar coercion."""

import logging
import math

import pytest

from oconfig_core.coercion import (
    FloatWidth,
    IntWidth,
    narrow_f32,
    narrow_int,
    to_bool,
    to_char,
    to_float,
    to_int,
    to_str,
)
from oconfig_core.errors import (
    CustomError,
    ExpectBooleanError,
    ExpectCharError,
    ExpectNumberError,
    ExpectStringError,
)
from oconfig_core.options import NumericPolicy
from oconfig_core.values import VBool, VNumber, VString


class TestTagChecks:
    def test_bool(self):
        assert to_bool(VBool(False)) is False

    def test_bool_wrong_tag(self):
        with pytest.raises(ExpectBooleanError):
            to_bool(VString("true"))

    def test_str(self):
        assert to_str(VString("HEY")) == "HEY"

    def test_str_wrong_tag(self):
        with pytest.raises(ExpectStringError):
            to_str(VNumber(1.0))

    def test_char(self):
        assert to_char(VString("/")) == "/"

    def test_char_too_long(self):
        with pytest.raises(ExpectCharError) as exc_info:
            to_char(VString("ab"))
        assert exc_info.value.actual == "ab"

    def test_char_empty(self):
        with pytest.raises(ExpectCharError):
            to_char(VString(""))

    def test_number_wrong_tag(self):
        with pytest.raises(ExpectNumberError):
            to_int(VBool(True), IntWidth.I32, NumericPolicy.TRUNCATE)


class TestIntWidth:
    def test_ranges(self):
        assert (IntWidth.I8.min, IntWidth.I8.max) == (-128, 127)
        assert (IntWidth.U8.min, IntWidth.U8.max) == (0, 255)
        assert IntWidth.U64.max == 2**64 - 1
        assert IntWidth.I64.min == -(2**63)


class TestNarrowInt:
    @pytest.mark.parametrize("width", list(IntWidth))
    def test_one_fits_every_width(self, width):
        assert narrow_int(1.0, width) == 1

    def test_truncates_toward_zero(self):
        assert narrow_int(2.9, IntWidth.I32) == 2
        assert narrow_int(-2.9, IntWidth.I32) == -2

    def test_saturates(self):
        assert narrow_int(300.0, IntWidth.U8) == 255
        assert narrow_int(-1.0, IntWidth.U8) == 0
        assert narrow_int(math.inf, IntWidth.I16) == 32767

    def test_nan_is_zero(self):
        assert narrow_int(math.nan, IntWidth.I64) == 0


class TestToInt:
    def test_exact(self):
        assert to_int(VNumber(2003.0), IntWidth.I32, NumericPolicy.STRICT) == 2003

    def test_truncate_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="oconfig_core.coercion"):
            assert to_int(VNumber(1.5), IntWidth.I32, NumericPolicy.TRUNCATE) == 1
        assert "narrowed" in caplog.text

    def test_strict_rejects_fraction(self):
        with pytest.raises(CustomError):
            to_int(VNumber(1.5), IntWidth.I32, NumericPolicy.STRICT)

    def test_strict_rejects_out_of_range(self):
        with pytest.raises(CustomError, match="u8"):
            to_int(VNumber(256.0), IntWidth.U8, NumericPolicy.STRICT)


class TestToFloat:
    def test_f64(self):
        assert to_float(VNumber(0.1), FloatWidth.F64) == 0.1

    def test_f32_rounds(self):
        assert to_float(VNumber(0.1), FloatWidth.F32) != 0.1
        assert to_float(VNumber(1.0), FloatWidth.F32) == 1.0

    def test_f32_overflow_is_infinite(self):
        assert narrow_f32(1e300) == math.inf
        assert narrow_f32(-1e300) == -math.inf
