"""Unsigned 32-bit fractions and a few unsigned integer helpers.

A fract32 value is an ``int`` from 0 to 0xFFFFFFFF standing for a fraction
of 0xFFFFFFFF.
"""

from __future__ import annotations

FULL = 0xFFFFFFFF
_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def create(numerator: int, denominator: int) -> int:
    """Make a fraction from two unsigned integers.

    A numerator not below the denominator yields the full fraction.
    A denominator of one leaves nothing to scale by and raises
    ``ZeroDivisionError``.
    """
    numerator &= _MASK32
    denominator &= _MASK32
    if denominator <= numerator:
        return FULL
    step = FULL // (denominator - 1)
    return ((numerator % denominator) * step) & _MASK32


def invert(fract: int) -> int:
    """Complement of a fraction: ``FULL - fract``."""
    return FULL - (fract & _MASK32)


def usmul(value: int, fract: int) -> int:
    """Scale an unsigned 32-bit integer by a fraction."""
    return (((value & _MASK32) * (fract & _MASK32)) >> 32) & _MASK32


def smul(value: int, fract: int) -> int:
    """Scale a signed 32-bit integer by a fraction."""
    if value < 0:
        return _to_int32(-usmul(-value, fract))
    return _to_int32(usmul(value, fract))


def uint32_log2(value: int) -> int:
    """Integer base-2 logarithm of an unsigned 32-bit value; zero gives zero."""
    value &= _MASK32
    return value.bit_length() - 1 if value else 0