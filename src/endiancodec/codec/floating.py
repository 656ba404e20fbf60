"""IEEE-754 float codec.

Floats have no byte order operation of their own. They are reinterpreted bit
for bit as the unsigned integer of the same width (binary32 -> u32,
binary64 -> u64) and that integer is encoded by ``IntegerCodec``. The
reinterpretation never converts the numeric value, so NaN payloads, the sign
of zero and denormals survive a round-trip.

Note:
    A Python ``float`` is a binary64. binary32 values go through a
    binary64 <-> binary32 conversion on the way in and out, which is exact for
    every finite value and infinity but may not preserve a binary32 NaN
    payload. Use ``encode_bits``/``decode_bits`` to move raw binary32 patterns.
"""

from __future__ import annotations

import struct
import sys

from ..endianness import EndiannessLike
from ..exceptions import EncodeError
from .integer import IntegerCodec, exact_bytes
from .protocol import ByteSink, ByteSource
from .schema import NumericType

_NATIVE_FORMATS = {4: ("=f", "=I"), 8: ("=d", "=Q")}


class FloatCodec:
    """Encoder/decoder for binary32 or binary64 floats.

    Example:
        >>> f64 = FloatCodec(NumericType(name="f64", width=8, signed=True, kind="float"))
        >>> hex(f64.to_bits(-0.0))
        '0x8000000000000000'
    """

    __slots__ = ("numeric_type", "bits_codec", "_float_format", "_bits_format")

    def __init__(self, numeric_type: NumericType) -> None:
        if numeric_type.kind != "float":
            raise ValueError(f"FloatCodec requires a float type, got {numeric_type.name}")
        self.numeric_type = numeric_type
        self.bits_codec = IntegerCodec(numeric_type.bits_type())
        self._float_format, self._bits_format = _NATIVE_FORMATS[numeric_type.width]

    def __repr__(self) -> str:
        return f"<FloatCodec {self.numeric_type.name}>"

    @property
    def name(self) -> str:
        return self.numeric_type.name

    @property
    def width(self) -> int:
        """Encoded size in bytes."""
        return self.numeric_type.width

    def to_bits(self, value: float) -> int:
        """Return the IEEE-754 bit pattern of ``value`` as an unsigned int.

        Raises:
            EncodeError: If value is not a real number or overflows binary32
        """
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise EncodeError(f"{self.name}: expected float, got {type(value).__name__}")
        try:
            raw = struct.pack(self._float_format, value)
        except (OverflowError, struct.error) as err:
            raise EncodeError(f"{self.name}: cannot represent {value!r}: {err}") from err
        return struct.unpack(self._bits_format, raw)[0]

    def from_bits(self, bits: int) -> float:
        """Reinterpret an unsigned bit pattern as a float.

        Raises:
            ValueError: If bits does not fit the type's width
        """
        bits_type = self.bits_codec.numeric_type
        if not isinstance(bits, int) or not 0 <= bits <= bits_type.max_value:
            raise ValueError(f"{self.name}: bit pattern {bits!r} does not fit in {bits_type.name}")
        return struct.unpack(self._float_format, struct.pack(self._bits_format, bits))[0]

    def to_le_bits(self, value: float) -> int:
        """Bits of ``value`` whose native-order bytes are its little-endian encoding."""
        return int.from_bytes(self.pack(value, "little"), sys.byteorder)

    def to_be_bits(self, value: float) -> int:
        """Bits of ``value`` whose native-order bytes are its big-endian encoding."""
        return int.from_bytes(self.pack(value, "big"), sys.byteorder)

    def encode(self, value: float, sink: ByteSink, endianness: EndiannessLike) -> None:
        """Write ``value`` to ``sink`` as exactly ``width`` bytes.

        Raises:
            EncodeError: If value is not representable (nothing is written)
            WriteError: If the sink does not accept all bytes
        """
        self.bits_codec.encode(self.to_bits(value), sink, endianness)

    def decode(self, source: ByteSource, endianness: EndiannessLike) -> float:
        """Read exactly ``width`` bytes from ``source`` and return the float.

        Raises:
            UnexpectedEofError: If the source ends before ``width`` bytes
        """
        return self.from_bits(self.bits_codec.decode(source, endianness))

    def encode_bits(self, bits: int, sink: ByteSink, endianness: EndiannessLike) -> None:
        """Write a raw IEEE-754 bit pattern without going through a Python float."""
        self.bits_codec.encode(bits, sink, endianness)

    def decode_bits(self, source: ByteSource, endianness: EndiannessLike) -> int:
        """Read a raw IEEE-754 bit pattern without going through a Python float."""
        return self.bits_codec.decode(source, endianness)

    def pack(self, value: float, endianness: EndiannessLike) -> bytes:
        """Encode ``value`` and return the bytes."""
        return self.bits_codec.to_bytes(self.to_bits(value), endianness)

    def unpack(self, data: bytes, endianness: EndiannessLike) -> float:
        """Decode a float from exactly ``width`` bytes."""
        return self.from_bits(
            self.bits_codec.from_bytes(exact_bytes(self.name, data, self.width), endianness)
        )
