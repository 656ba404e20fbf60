"""Fixed-width numeric codec for endiancodec.

This module provides the generic integer codec, the IEEE-754 float codec that
bridges through it, and the exact-width stream helpers they share.
"""

from __future__ import annotations

from .floating import FloatCodec
from .integer import IntegerCodec
from .protocol import ByteSink, ByteSource, Codec, Decoder, Encoder
from .schema import FLOAT_TYPES, INTEGER_TYPES, NumericType
from .stream import BufferSink, read_exact, write_exact

__all__ = [
    "IntegerCodec",
    "FloatCodec",
    "NumericType",
    "INTEGER_TYPES",
    "FLOAT_TYPES",
    "Codec",
    "Encoder",
    "Decoder",
    "ByteSink",
    "ByteSource",
    "BufferSink",
    "read_exact",
    "write_exact",
]
