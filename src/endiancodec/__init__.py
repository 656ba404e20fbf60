"""endiancodec: Byte-Order-Aware Numeric Codec

A Python library for bit-exact encoding and decoding of fixed-width numeric
primitives under an explicitly chosen byte order.

Key Features:
- Unsigned/signed integers of 8, 16, 32, 64 and 128 bits plus pointer width
- IEEE-754 binary32/binary64 floats, encoded through their bit pattern
- Native, little-endian and big-endian policies chosen per call
- Works with any file-like sink/source (``write()``/``read()``)

Quick Start:
    >>> import io
    >>> from endiancodec import Endianness, u16, f64
    >>>
    >>> sink = io.BytesIO()
    >>> u16.encode(1, sink, Endianness.LITTLE)
    >>> u16.encode(1, sink, Endianness.BIG)
    >>> sink.getvalue()
    b'\\x01\\x00\\x00\\x01'
    >>>
    >>> data = f64.pack(-0.0, Endianness.BIG)
    >>> f64.unpack(data, Endianness.BIG)
    -0.0
"""

from __future__ import annotations

import logging

from .codec import (
    BufferSink,
    ByteSink,
    ByteSource,
    Codec,
    Decoder,
    Encoder,
    FloatCodec,
    IntegerCodec,
    NumericType,
)
from .endianness import Endianness
from .exceptions import (
    DecodeError,
    EncodeError,
    EndianCodecError,
    UnexpectedEofError,
    WriteError,
)
from .numeric import (
    CODECS,
    f32,
    f64,
    get_codec,
    i8,
    i16,
    i32,
    i64,
    i128,
    isize,
    register_codec,
    sizeof,
    u8,
    u16,
    u32,
    u64,
    u128,
    usize,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Policy
    "Endianness",
    # Codecs
    "u8",
    "u16",
    "u32",
    "u64",
    "u128",
    "usize",
    "i8",
    "i16",
    "i32",
    "i64",
    "i128",
    "isize",
    "f32",
    "f64",
    "CODECS",
    "get_codec",
    "register_codec",
    "sizeof",
    "IntegerCodec",
    "FloatCodec",
    "NumericType",
    # Capability protocols
    "Codec",
    "Encoder",
    "Decoder",
    "ByteSink",
    "ByteSource",
    "BufferSink",
    # Exceptions
    "EndianCodecError",
    "EncodeError",
    "DecodeError",
    "WriteError",
    "UnexpectedEofError",
    # Version
    "__version__",
]
