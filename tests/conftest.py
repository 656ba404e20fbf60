"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io

import pytest


class RejectingSink:
    """Sink that accepts zero bytes, like a closed pipe."""

    def __init__(self) -> None:
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        return 0


class TrickleSource:
    """Source that returns at most one byte per read()."""

    def __init__(self, data: bytes) -> None:
        self._stream = io.BytesIO(data)

    def read(self, size: int) -> bytes:
        return self._stream.read(min(size, 1))


class TrickleSink:
    """Sink that accepts at most one byte per write()."""

    def __init__(self) -> None:
        self.data = bytearray()

    def write(self, data: bytes) -> int:
        self.data.extend(data[:1])
        return min(len(data), 1)


@pytest.fixture
def sink() -> io.BytesIO:
    """Empty in-memory sink."""
    return io.BytesIO()


@pytest.fixture
def rejecting_sink() -> RejectingSink:
    """Sink that never accepts any bytes."""
    return RejectingSink()


@pytest.fixture
def trickle_source() -> type[TrickleSource]:
    """Factory for sources that return one byte per read()."""
    return TrickleSource


@pytest.fixture
def trickle_sink() -> TrickleSink:
    """Sink that accepts one byte per write()."""
    return TrickleSink()
