"""Numeric type descriptors.

A ``NumericType`` carries everything a codec needs to know about one
fixed-width primitive: its byte width, signedness and whether it is an
integer or an IEEE-754 float.
"""

from __future__ import annotations

import struct
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

NumericKind = Literal["int", "float"]

POINTER_WIDTH = struct.calcsize("P")


class NumericType(BaseModel):
    """Description of a fixed-width numeric type.

    Attributes:
        name: Short type name (e.g. "u16", "f64")
        width: Size in bytes
        signed: Two's complement signed integer (always True for floats)
        kind: "int" or "float"
        format_char: Equivalent ``struct`` format character, if any

    Example:
        >>> u16 = NumericType(name="u16", width=2, signed=False, format_char="H")
        >>> u16.bits, u16.max_value
        (16, 65535)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    width: int = Field(ge=1, le=16)
    signed: bool
    kind: NumericKind = "int"
    format_char: str | None = Field(default=None, min_length=1, max_length=1)

    @model_validator(mode="after")
    def _check_width(self) -> NumericType:
        if self.kind == "float":
            if self.width not in (4, 8):
                raise ValueError(f"{self.name}: float width must be 4 or 8 bytes, got {self.width}")
            if not self.signed:
                raise ValueError(f"{self.name}: float types are always signed")
        return self

    @property
    def bits(self) -> int:
        """Width in bits."""
        return self.width * 8

    @property
    def min_value(self) -> int:
        """Smallest integer value (integer types only)."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        """Largest integer value (integer types only)."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def bits_type(self) -> NumericType:
        """Return the unsigned integer type of the same width."""
        return NumericType(name=f"u{self.bits}", width=self.width, signed=False)


INTEGER_TYPES: tuple[NumericType, ...] = (
    NumericType(name="u8", width=1, signed=False, format_char="B"),
    NumericType(name="u16", width=2, signed=False, format_char="H"),
    NumericType(name="u32", width=4, signed=False, format_char="I"),
    NumericType(name="u64", width=8, signed=False, format_char="Q"),
    NumericType(name="u128", width=16, signed=False),
    NumericType(name="usize", width=POINTER_WIDTH, signed=False, format_char="N"),
    NumericType(name="i8", width=1, signed=True, format_char="b"),
    NumericType(name="i16", width=2, signed=True, format_char="h"),
    NumericType(name="i32", width=4, signed=True, format_char="i"),
    NumericType(name="i64", width=8, signed=True, format_char="q"),
    NumericType(name="i128", width=16, signed=True),
    NumericType(name="isize", width=POINTER_WIDTH, signed=True, format_char="n"),
)

FLOAT_TYPES: tuple[NumericType, ...] = (
    NumericType(name="f32", width=4, signed=True, kind="float", format_char="f"),
    NumericType(name="f64", width=8, signed=True, kind="float", format_char="d"),
)
