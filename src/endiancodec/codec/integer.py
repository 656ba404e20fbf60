"""Fixed-width integer codec.

One implementation serves every integer width and signedness. The byte order
is chosen per call by an ``Endianness``; signed values use two's complement
and share the byte pattern of the unsigned type of the same width.
"""

from __future__ import annotations

from ..endianness import Endianness, EndiannessLike
from ..exceptions import DecodeError, EncodeError, UnexpectedEofError
from .protocol import ByteSink, ByteSource
from .schema import NumericType
from .stream import read_exact, write_exact


class IntegerCodec:
    """Encoder/decoder for one fixed-width integer type.

    Example:
        >>> import io
        >>> u16 = IntegerCodec(NumericType(name="u16", width=2, signed=False))
        >>> sink = io.BytesIO()
        >>> u16.encode(1, sink, Endianness.BIG)
        >>> sink.getvalue()
        b'\\x00\\x01'
    """

    __slots__ = ("numeric_type",)

    def __init__(self, numeric_type: NumericType) -> None:
        if numeric_type.kind != "int":
            raise ValueError(f"IntegerCodec requires an integer type, got {numeric_type.name}")
        self.numeric_type = numeric_type

    def __repr__(self) -> str:
        return f"<IntegerCodec {self.numeric_type.name}>"

    @property
    def name(self) -> str:
        return self.numeric_type.name

    @property
    def width(self) -> int:
        """Encoded size in bytes."""
        return self.numeric_type.width

    def to_bytes(self, value: int, endianness: EndiannessLike) -> bytes:
        """Convert ``value`` to its ``width``-byte representation.

        Raises:
            EncodeError: If value is not an int or is out of range
        """
        # bool is an int subclass but never a valid numeric value here
        if not isinstance(value, int) or isinstance(value, bool):
            raise EncodeError(f"{self.name}: expected int, got {type(value).__name__}")

        nt = self.numeric_type
        if value < nt.min_value or value > nt.max_value:
            raise EncodeError(
                f"{self.name}: value {value} out of bounds [{nt.min_value}, {nt.max_value}]"
            )

        order = Endianness.parse(endianness).byteorder
        return value.to_bytes(nt.width, order, signed=nt.signed)

    def from_bytes(self, data: bytes, endianness: EndiannessLike) -> int:
        """Interpret exactly ``width`` bytes as a value.

        Raises:
            DecodeError: If data is not exactly ``width`` bytes
        """
        if len(data) != self.width:
            raise DecodeError(f"{self.name}: expected {self.width} bytes, got {len(data)} bytes")
        order = Endianness.parse(endianness).byteorder
        return int.from_bytes(data, order, signed=self.numeric_type.signed)

    def encode(self, value: int, sink: ByteSink, endianness: EndiannessLike) -> None:
        """Write ``value`` to ``sink`` as exactly ``width`` bytes.

        Args:
            value: Integer within the type's range
            sink: Destination with a ``write()`` method
            endianness: Byte order policy

        Raises:
            EncodeError: If value is not representable (nothing is written)
            WriteError: If the sink does not accept all bytes
        """
        write_exact(sink, self.to_bytes(value, endianness))

    def decode(self, source: ByteSource, endianness: EndiannessLike) -> int:
        """Read exactly ``width`` bytes from ``source`` and return the value.

        Raises:
            UnexpectedEofError: If the source ends before ``width`` bytes
            ValueError: If endianness is not a known policy (nothing is read)
        """
        policy = Endianness.parse(endianness)
        return self.from_bytes(read_exact(source, self.width), policy)

    def pack(self, value: int, endianness: EndiannessLike) -> bytes:
        """Encode ``value`` and return the bytes."""
        return self.to_bytes(value, endianness)

    def unpack(self, data: bytes, endianness: EndiannessLike) -> int:
        """Decode a value from exactly ``width`` bytes.

        Raises:
            UnexpectedEofError: If data is shorter than ``width``
            DecodeError: If data is longer than ``width``
        """
        return self.from_bytes(exact_bytes(self.name, data, self.width), endianness)


def exact_bytes(name: str, data: bytes, width: int) -> bytes:
    """Return ``data`` as bytes if it is exactly ``width`` long.

    Raises:
        UnexpectedEofError: If data is shorter than ``width``
        DecodeError: If data is longer than ``width``
    """
    if len(data) < width:
        raise UnexpectedEofError(f"{name}: needed {width} bytes, got {len(data)}")
    if len(data) > width:
        raise DecodeError(f"{name}: expected {width} bytes, got {len(data)} bytes")
    return bytes(data)
