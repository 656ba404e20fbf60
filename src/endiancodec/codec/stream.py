"""Exact-width I/O over caller supplied sinks and sources.

Every value occupies a fixed number of bytes, so the codecs only ever need
"write all of these bytes" and "read exactly this many bytes". Partial
progress is continued; no progress at all is an error.
"""

from __future__ import annotations

import io
import logging

from ..exceptions import UnexpectedEofError, WriteError
from .protocol import ByteSink, ByteSource

logger = logging.getLogger(__name__)


def write_exact(sink: ByteSink, data: bytes) -> None:
    """Write all of ``data`` to ``sink``.

    Args:
        sink: Destination with a ``write()`` method
        data: Bytes to write

    Raises:
        WriteError: If the sink stops accepting bytes before all were written
            (including a raw non-blocking stream whose write() returns None)
        OSError: Propagated unchanged from the sink
    """
    written = 0
    while written < len(data):
        count = sink.write(data[written:])
        if count is None:
            # raw streams return None when a non-blocking write would block
            if isinstance(sink, io.RawIOBase):
                logger.debug("raw sink %r would block after %d of %d bytes", sink, written, len(data))
                raise WriteError(
                    f"Failed to write whole buffer: sink would block after {written} of {len(data)} bytes"
                )
            return
        if count <= 0:
            logger.debug("sink %r accepted %d of %d bytes", sink, written, len(data))
            raise WriteError(f"Failed to write whole buffer: wrote {written} of {len(data)} bytes")
        written += count


def read_exact(source: ByteSource, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``source``.

    Args:
        source: Origin with a ``read()`` method
        size: Number of bytes required

    Returns:
        Exactly ``size`` bytes

    Raises:
        UnexpectedEofError: If the source is exhausted first
        OSError: Propagated unchanged from the source
    """
    chunks = bytearray()
    while len(chunks) < size:
        chunk = source.read(size - len(chunks))
        if not chunk:
            logger.debug("source %r ended after %d of %d bytes", source, len(chunks), size)
            raise UnexpectedEofError(
                f"Failed to fill whole buffer: needed {size} bytes, got {len(chunks)}"
            )
        chunks.extend(chunk)
    return bytes(chunks)


class BufferSink:
    """Fixed-capacity sink, like writing into a preallocated byte slice.

    Each write copies as many bytes as still fit and reports that count;
    once full, writes return 0.

    Example:
        >>> sink = BufferSink(2)
        >>> sink.write(b"\\x01\\x00\\xff")
        2
        >>> sink.getvalue()
        b'\\x01\\x00'
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._buffer = bytearray(capacity)
        self._position = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def remaining(self) -> int:
        """Return the number of bytes that can still be written."""
        return len(self._buffer) - self._position

    def write(self, data: bytes) -> int:
        count = min(len(data), self.remaining())
        self._buffer[self._position : self._position + count] = bytes(data[:count])
        self._position += count
        return count

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer[: self._position])
