"""Decode options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NumericPolicy(Enum):
    """How a config number is narrowed to a fixed-width integer.

    TRUNCATE keeps the format's historical cast: drop the fraction and
    clamp to the width's range (NaN becomes 0). STRICT rejects any number
    that would change.
    """

    TRUNCATE = "truncate"
    STRICT = "strict"


@dataclass(frozen=True)
class DecodeOptions:
    numeric_policy: NumericPolicy = NumericPolicy.TRUNCATE


DEFAULT_OPTIONS = DecodeOptions()
