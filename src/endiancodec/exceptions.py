"""Exception hierarchy for endiancodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from EndianCodecError for easy catching of any
endiancodec-specific error.
"""

from __future__ import annotations


class EndianCodecError(Exception):
    """Base exception for all endiancodec errors."""

    pass


class EncodeError(EndianCodecError):
    """Raised when a value cannot be encoded.

    Examples:
        - Integer out of range for the target width
        - Value of the wrong Python type (e.g. a float for u32)
    """

    pass


class DecodeError(EndianCodecError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Trailing bytes passed to unpack()
    """

    pass


class WriteError(EncodeError, OSError):
    """Raised when a sink accepts fewer bytes than the value's width.

    Examples:
        - Sink whose write() returns 0
        - Fixed-capacity buffer that is already full
    """

    pass


class UnexpectedEofError(DecodeError, EOFError):
    """Raised when a source is exhausted before a full value was read."""

    pass
