"""Codec instances for every supported numeric type.

Each name below is a ready-to-use codec:

    >>> import io
    >>> from endiancodec import Endianness, u32
    >>> sink = io.BytesIO()
    >>> u32.encode(1, sink, Endianness.LITTLE)
    >>> sink.getvalue()
    b'\\x01\\x00\\x00\\x00'
"""

from __future__ import annotations

from typing import Any, Union

from .codec.floating import FloatCodec
from .codec.integer import IntegerCodec
from .codec.protocol import Codec
from .codec.schema import FLOAT_TYPES, INTEGER_TYPES

# Global registry: type name -> codec
CODECS: dict[str, Codec[Any]] = {}

# struct format character -> type name
_FORMAT_CHARS: dict[str, str] = {}


def register_codec(codec: Codec[Any]) -> None:
    """Register a codec for lookup by name with get_codec().

    Args:
        codec: Object implementing both encode() and decode() plus ``name``
            and ``width``, e.g. an IntegerCodec for a custom width

    Raises:
        TypeError: If codec does not implement the Encoder/Decoder pair
        ValueError: If another codec is already registered under the name

    Example:
        >>> from endiancodec import IntegerCodec, NumericType
        >>> u24 = IntegerCodec(NumericType(name="u24", width=3, signed=False))
        >>> register_codec(u24)
        >>> get_codec("u24").width
        3
    """
    if not isinstance(codec, Codec):
        raise TypeError(f"{codec!r} does not implement the Encoder/Decoder pair")

    existing = CODECS.get(codec.name)
    if existing is not None:
        if existing is not codec:
            raise ValueError(
                f"Numeric type {codec.name!r} already registered to {existing!r}. "
                f"Cannot register {codec!r} under the same name."
            )
        # Already registered, no-op
        return

    CODECS[codec.name] = codec
    numeric_type = getattr(codec, "numeric_type", None)
    format_char = getattr(numeric_type, "format_char", None)
    if format_char is not None and format_char not in _FORMAT_CHARS:
        _FORMAT_CHARS[format_char] = codec.name


_INTEGER_CODECS = {nt.name: IntegerCodec(nt) for nt in INTEGER_TYPES}
_FLOAT_CODECS = {nt.name: FloatCodec(nt) for nt in FLOAT_TYPES}
for _codec in (*_INTEGER_CODECS.values(), *_FLOAT_CODECS.values()):
    register_codec(_codec)
del _codec

u8 = _INTEGER_CODECS["u8"]
u16 = _INTEGER_CODECS["u16"]
u32 = _INTEGER_CODECS["u32"]
u64 = _INTEGER_CODECS["u64"]
u128 = _INTEGER_CODECS["u128"]
usize = _INTEGER_CODECS["usize"]
i8 = _INTEGER_CODECS["i8"]
i16 = _INTEGER_CODECS["i16"]
i32 = _INTEGER_CODECS["i32"]
i64 = _INTEGER_CODECS["i64"]
i128 = _INTEGER_CODECS["i128"]
isize = _INTEGER_CODECS["isize"]
f32 = _FLOAT_CODECS["f32"]
f64 = _FLOAT_CODECS["f64"]


def get_codec(name: str) -> Codec[Any]:
    """Look up a codec by type name or ``struct`` format character.

    Args:
        name: Type name ("u16", "f64", ...) or format character ("H", "d", ...)

    Returns:
        The matching codec

    Raises:
        KeyError: If the name is unknown

    Example:
        >>> get_codec("H") is get_codec("u16")
        True
    """
    if name in CODECS:
        return CODECS[name]
    if name in _FORMAT_CHARS:
        return CODECS[_FORMAT_CHARS[name]]
    raise KeyError(
        f"Unknown numeric type {name!r}. Known types: {', '.join(CODECS)}; "
        f"format characters: {''.join(_FORMAT_CHARS)}"
    )


def sizeof(codec: Union[str, Codec[Any]]) -> int:
    """Return the encoded width in bytes of a codec or type name."""
    if isinstance(codec, str):
        codec = get_codec(codec)
    return codec.width
