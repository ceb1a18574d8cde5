"""
Unsigned 32-bit arithmetic helpers shared by the hash steps.

Python integers are unbounded, so every helper narrows its result back to
32 bits explicitly.
"""

MASK32 = 0xFFFFFFFF

FMIX_C1 = 0x85EBCA6B
FMIX_C2 = 0xC2B2AE35


def u32(value: int) -> int:
    """Wrap an integer to an unsigned 32-bit value."""
    return value & MASK32


def rotl32(value: int, shift: int) -> int:
    """Rotate a 32-bit value left by ``shift`` bits."""
    value &= MASK32
    shift %= 32
    return ((value << shift) | (value >> (32 - shift))) & MASK32


def fmix32(value: int) -> int:
    """MurmurHash3 32-bit finalizer."""
    h = value & MASK32
    h ^= h >> 16
    h = (h * FMIX_C1) & MASK32
    h ^= h >> 13
    h = (h * FMIX_C2) & MASK32
    h ^= h >> 16
    return h


def code_points(text: str) -> list[int]:
    """Unicode code points of ``text`` in order."""
    return [ord(char) for char in text]


def hex32(value: int) -> str:
    """Format a 32-bit value as eight lowercase hex digits."""
    return format(value & MASK32, "08x")
