"""Exception hierarchy for oconfig decoding."""

from __future__ import annotations


class OConfigError(Exception):
    """Base exception for all oconfig_core errors."""

    ERROR_CODE = "OCF_0000"


class DecodeError(OConfigError):
    """A config tree could not be decoded into the requested type."""

    ERROR_CODE = "OCF_1000"
    message = "could not decode configuration"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NoMoreValuesLeftError(DecodeError):
    ERROR_CODE = "OCF_1001"
    message = "no more values left, this should never happen"


class ExpectSingleValueError(DecodeError):
    ERROR_CODE = "OCF_1002"
    message = "expecting values to contain a single entry"


class ExpectStringError(DecodeError):
    ERROR_CODE = "OCF_1003"
    message = "expecting string"


class ExpectBooleanError(DecodeError):
    ERROR_CODE = "OCF_1004"
    message = "expecting boolean"


class ExpectNumberError(DecodeError):
    ERROR_CODE = "OCF_1005"
    message = "expecting number"


class ExpectCharError(DecodeError):
    ERROR_CODE = "OCF_1006"

    def __init__(self, actual: str) -> None:
        self.actual = actual
        super().__init__(f"expecting string of length one, received `{actual}`")


class ExpectStructError(DecodeError):
    ERROR_CODE = "OCF_1007"
    message = "expecting struct"


class ExpectObjectError(DecodeError):
    ERROR_CODE = "OCF_1008"
    message = "needs an object to decode a struct"


class DataTypeNotSupportedError(DecodeError):
    ERROR_CODE = "OCF_1009"
    message = "could not decode as datatype not supported"


class CustomError(DecodeError):
    """Failure raised by a target type's own decode logic."""

    ERROR_CODE = "OCF_1100"

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"error from decoding: {message}")
