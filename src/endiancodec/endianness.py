"""Byte order policy.

``Endianness`` is the configuration value passed to every encode/decode call.
It is a pure selector: it never fails and never holds state.

Note:
    ``Endianness.NATIVE`` follows the executing host and is therefore not
    portable. Data written with NATIVE on a little-endian host and read with
    NATIVE on a big-endian host is misinterpreted. Use LITTLE or BIG for
    anything that leaves the process.
"""

from __future__ import annotations

import enum
import sys
from typing import Literal, Union

ByteOrder = Literal["little", "big"]

_ALIASES: dict[str, str] = {
    "native": "NATIVE",
    "=": "NATIVE",
    "@": "NATIVE",
    "little": "LITTLE",
    "le": "LITTLE",
    "<": "LITTLE",
    "big": "BIG",
    "be": "BIG",
    ">": "BIG",
    "!": "BIG",
}


class Endianness(enum.Enum):
    """Endianness to use during encoding/decoding."""

    NATIVE = "native"
    """Host byte order (``sys.byteorder``)."""

    LITTLE = "little"
    """Least-significant byte first."""

    BIG = "big"
    """Most-significant byte first."""

    @property
    def byteorder(self) -> ByteOrder:
        """Concrete byte order usable with ``int.to_bytes``/``int.from_bytes``."""
        if self is Endianness.NATIVE:
            return sys.byteorder  # type: ignore[return-value]
        return self.value  # type: ignore[return-value]

    @classmethod
    def parse(cls, value: EndiannessLike) -> Endianness:
        """Normalize a policy given by name or ``struct`` prefix.

        Args:
            value: An Endianness, or one of "native", "little", "big", "le",
                "be" (case insensitive) or a struct prefix ("=", "@", "<",
                ">", "!")

        Returns:
            The matching Endianness member

        Raises:
            ValueError: If value is not a known policy

        Example:
            >>> Endianness.parse("<")
            <Endianness.LITTLE: 'little'>
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid endianness {value!r}. Expected Endianness or str.")

        member = _ALIASES.get(value.strip().lower())
        if member is None:
            raise ValueError(
                f"Invalid endianness '{value}'. Expected one of: "
                f"{', '.join(sorted(_ALIASES))}"
            )
        return cls[member]


EndiannessLike = Union[Endianness, str]
