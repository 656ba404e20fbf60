#!/usr/bin/env python3
"""Basic usage example for endiancodec.

This example demonstrates:
1. Encoding integers under each byte order
2. Encoding floats through their IEEE-754 bit pattern
3. Decoding a stream of mixed values
4. Handling truncated input
"""

from __future__ import annotations

import io

from endiancodec import Endianness, UnexpectedEofError, f64, i32, sizeof, u16


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("endiancodec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Encoding 1 as u16 under each policy...")
    for policy in Endianness:
        print(f"   {policy.name:<6} -> {u16.pack(1, policy).hex(' ')}")
    print()

    print("2. Encoding floats by bit pattern...")
    for value in (1.0, -0.0, float("nan")):
        print(f"   {value!r:<5} bits=0x{f64.to_bits(value):016x} "
              f"big={f64.pack(value, Endianness.BIG).hex(' ')}")
    print()

    print("3. Writing and reading a stream...")
    stream = io.BytesIO()
    u16.encode(0xABCD, stream, Endianness.BIG)
    i32.encode(-7, stream, Endianness.LITTLE)
    f64.encode(2.5, stream, Endianness.BIG)
    print(f"   Wrote {len(stream.getvalue())} bytes "
          f"({sizeof(u16)} + {sizeof('i32')} + {sizeof(f64)})")

    stream.seek(0)
    print(f"   u16: 0x{u16.decode(stream, Endianness.BIG):04x}")
    print(f"   i32: {i32.decode(stream, Endianness.LITTLE)}")
    print(f"   f64: {f64.decode(stream, Endianness.BIG)}")
    print()

    print("4. Decoding from truncated input...")
    try:
        i32.decode(io.BytesIO(b"\x01\x02"), Endianness.LITTLE)
    except UnexpectedEofError as e:
        print(f"   UnexpectedEofError: {e}")


if __name__ == "__main__":
    main()
