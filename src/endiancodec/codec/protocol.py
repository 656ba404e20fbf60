"""Encoder/Decoder capability protocols.

The codecs in this package implement a generic encode/decode capability pair
parameterized by a configuration value. Here the configuration is always an
``Endianness``. Sinks and sources are plain file-like objects.
"""

from __future__ import annotations

from typing import Optional, Protocol, TypeVar, runtime_checkable

from ..endianness import EndiannessLike

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class ByteSink(Protocol):
    """Destination for bytes, e.g. ``io.BytesIO`` or an open binary file.

    ``write`` returns the number of bytes accepted. ``None`` is treated as
    "all bytes accepted" to match writers that do not report a count, except
    for ``io.RawIOBase`` streams, where it means a non-blocking write would block.
    """

    def write(self, data: bytes, /) -> Optional[int]: ...


@runtime_checkable
class ByteSource(Protocol):
    """Origin of bytes. ``read(n)`` returns at most ``n`` bytes, ``b""`` at EOF."""

    def read(self, size: int, /) -> bytes: ...


@runtime_checkable
class Encoder(Protocol[T_contra]):
    """Writes one value to a sink under a configuration."""

    def encode(self, value: T_contra, sink: ByteSink, endianness: EndiannessLike) -> None: ...


@runtime_checkable
class Decoder(Protocol[T_co]):
    """Reads one value from a source under a configuration."""

    def decode(self, source: ByteSource, endianness: EndiannessLike) -> T_co: ...


@runtime_checkable
class Codec(Encoder[T], Decoder[T], Protocol[T]):
    """Both halves of the capability pair for one fixed-width type."""

    @property
    def name(self) -> str: ...

    @property
    def width(self) -> int: ...
