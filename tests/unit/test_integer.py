"""Unit tests for the integer codec."""

from __future__ import annotations

import io
import struct
import sys

import pytest

from endiancodec import (
    CODECS,
    DecodeError,
    EncodeError,
    Endianness,
    IntegerCodec,
    NumericType,
    f32,
    f64,
    i8,
    i16,
    i32,
    i128,
    isize,
    u8,
    u16,
    u32,
    u64,
    u128,
    usize,
)

INTEGER_CODECS = [codec for codec in CODECS.values() if isinstance(codec, IntegerCodec)]
POLICIES = list(Endianness)


def _ids(codec: IntegerCodec) -> str:
    return codec.name


class TestByteOrder:
    """Test byte placement for each policy."""

    def test_u16_one(self, sink: io.BytesIO) -> None:
        """1 as u16 is 01 00 little-endian and 00 01 big-endian."""
        u16.encode(1, sink, Endianness.LITTLE)
        assert sink.getvalue() == bytes([0x01, 0x00])

        sink = io.BytesIO()
        u16.encode(1, sink, Endianness.BIG)
        assert sink.getvalue() == bytes([0x00, 0x01])

    def test_u32_one(self) -> None:
        """1 as u32 puts the set byte at the right end."""
        assert u32.pack(1, Endianness.LITTLE) == bytes([0x01, 0x00, 0x00, 0x00])
        assert u32.pack(1, Endianness.BIG) == bytes([0x00, 0x00, 0x00, 0x01])

    def test_u64_multi_byte(self) -> None:
        """Every byte position lands where expected."""
        value = 0x0102030405060708
        assert u64.pack(value, "little") == bytes([8, 7, 6, 5, 4, 3, 2, 1])
        assert u64.pack(value, "big") == bytes([1, 2, 3, 4, 5, 6, 7, 8])

    def test_u128(self) -> None:
        """128-bit values use all sixteen bytes."""
        value = int.from_bytes(bytes(range(1, 17)), "big")
        assert u128.pack(value, Endianness.BIG) == bytes(range(1, 17))
        assert u128.pack(value, Endianness.LITTLE) == bytes(range(16, 0, -1))

    @pytest.mark.parametrize("codec", INTEGER_CODECS, ids=_ids)
    def test_native_matches_host(self, codec: IntegerCodec) -> None:
        """NATIVE produces the same bytes as the host's byte order."""
        host = Endianness.LITTLE if sys.byteorder == "little" else Endianness.BIG
        assert codec.pack(1, Endianness.NATIVE) == codec.pack(1, host)

    @pytest.mark.parametrize(
        ("codec", "fmt"),
        [(u16, "H"), (u32, "I"), (u64, "Q"), (i16, "h"), (i32, "i")],
        ids=["u16", "u32", "u64", "i16", "i32"],
    )
    def test_matches_struct(self, codec: IntegerCodec, fmt: str) -> None:
        """Output agrees with the struct module for its standard sizes."""
        value = 0x1234 if codec.width == 2 else 0x12345678
        assert codec.pack(value, "<") == struct.pack("<" + fmt, value)
        assert codec.pack(value, ">") == struct.pack(">" + fmt, value)

    def test_native_matches_struct_native(self) -> None:
        """NATIVE agrees with struct's native byte order."""
        assert u32.pack(0xDEADBEEF, Endianness.NATIVE) == struct.pack("=I", 0xDEADBEEF)


class TestSigned:
    """Test two's complement handling."""

    def test_minus_one(self) -> None:
        """-1 is all ones regardless of order."""
        assert i8.pack(-1, Endianness.BIG) == b"\xff"
        assert i32.pack(-1, Endianness.LITTLE) == b"\xff\xff\xff\xff"

    def test_same_pattern_as_unsigned(self) -> None:
        """Signed and unsigned of one width share byte patterns."""
        for policy in POLICIES:
            assert i16.pack(-2, policy) == u16.pack(0xFFFE, policy)
            assert i128.pack(-1, policy) == u128.pack(u128.numeric_type.max_value, policy)

    def test_sign_recovered_by_reinterpretation(self) -> None:
        """Decoding the unsigned pattern as signed yields the negative value."""
        data = u16.pack(0x8000, Endianness.BIG)
        assert i16.unpack(data, Endianness.BIG) == -32768
        assert u16.unpack(data, Endianness.BIG) == 0x8000


class TestRoundTrip:
    """Test encode/decode round-trips for representative values."""

    @pytest.mark.parametrize("policy", POLICIES, ids=lambda p: p.name)
    @pytest.mark.parametrize("codec", INTEGER_CODECS, ids=_ids)
    def test_representative_values(self, codec: IntegerCodec, policy: Endianness) -> None:
        """0, 1, min and max survive a round-trip through a stream."""
        nt = codec.numeric_type
        for value in (0, 1, nt.min_value, nt.max_value):
            sink = io.BytesIO()
            codec.encode(value, sink, policy)
            assert len(sink.getvalue()) == codec.width

            source = io.BytesIO(sink.getvalue() + b"\xaa")
            assert codec.decode(source, policy) == value
            assert source.tell() == codec.width

    def test_sequential_values(self, sink: io.BytesIO) -> None:
        """Several values written back to back decode in order."""
        u8.encode(7, sink, Endianness.NATIVE)
        u16.encode(0xABCD, sink, Endianness.BIG)
        i32.encode(-5, sink, Endianness.LITTLE)
        assert len(sink.getvalue()) == 7

        sink.seek(0)
        assert u8.decode(sink, Endianness.NATIVE) == 7
        assert u16.decode(sink, Endianness.BIG) == 0xABCD
        assert i32.decode(sink, Endianness.LITTLE) == -5

    def test_trickle_source(self, trickle_source: type) -> None:
        """Decode completes when the source returns one byte at a time."""
        source = trickle_source(bytes([0x00, 0x00, 0x00, 0x2A]))
        assert u32.decode(source, Endianness.BIG) == 42

    def test_trickle_sink(self, trickle_sink) -> None:
        """Encode completes when the sink accepts one byte at a time."""
        u32.encode(42, trickle_sink, Endianness.LITTLE)
        assert bytes(trickle_sink.data) == bytes([0x2A, 0x00, 0x00, 0x00])


class TestPointerWidth:
    """Test platform-width integers."""

    def test_width_matches_pointer(self) -> None:
        """usize/isize are as wide as a C pointer."""
        assert usize.width == struct.calcsize("P")
        assert isize.width == struct.calcsize("P")

    def test_matches_struct_native(self) -> None:
        """usize agrees with struct's native size_t format."""
        assert usize.pack(12345, Endianness.NATIVE) == struct.pack("N", 12345)
        assert isize.pack(-12345, Endianness.NATIVE) == struct.pack("n", -12345)


class TestValidation:
    """Test rejection of values that do not fit."""

    @pytest.mark.parametrize(
        ("codec", "value"),
        [(u8, 256), (u8, -1), (i8, 128), (i8, -129), (u128, 1 << 128), (i16, 40000)],
        ids=["u8-high", "u8-neg", "i8-high", "i8-low", "u128-high", "i16-high"],
    )
    def test_out_of_range(self, codec: IntegerCodec, value: int, sink: io.BytesIO) -> None:
        """Out-of-range values raise EncodeError and write nothing."""
        with pytest.raises(EncodeError, match="out of bounds"):
            codec.encode(value, sink, Endianness.LITTLE)
        assert sink.getvalue() == b""

    @pytest.mark.parametrize("value", [1.0, "1", True, None])
    def test_wrong_type(self, value: object) -> None:
        """Non-integers are rejected."""
        with pytest.raises(EncodeError, match="expected int"):
            u32.pack(value, Endianness.BIG)  # type: ignore[arg-type]

    def test_unpack_wrong_length(self) -> None:
        """unpack() requires exactly width bytes."""
        with pytest.raises(DecodeError, match="expected 2 bytes"):
            u16.unpack(b"\x00\x01\x02", Endianness.BIG)

    def test_invalid_policy(self) -> None:
        """An unknown policy name is a ValueError."""
        with pytest.raises(ValueError):
            u16.pack(1, "sideways")

    @pytest.mark.parametrize(
        "decode",
        [u32.decode, i16.decode, f64.decode, f32.decode_bits],
        ids=["u32", "i16", "f64", "f32-bits"],
    )
    def test_decode_invalid_policy_reads_nothing(self, decode) -> None:
        """A bad policy is rejected before any byte is consumed."""
        source = io.BytesIO(b"\x00\x00\x00\x01\x00\x00\x00\x00\xff")
        with pytest.raises(ValueError, match="Invalid endianness"):
            decode(source, "sideways")
        assert source.tell() == 0

    def test_float_type_rejected(self) -> None:
        """IntegerCodec cannot be built for a float descriptor."""
        with pytest.raises(ValueError, match="integer type"):
            IntegerCodec(NumericType(name="f32", width=4, signed=True, kind="float"))
