"""Signed 16.16 fixed-point arithmetic on plain Python integers.

A fix16 value is an ``int`` in the signed 32-bit range whose low 16 bits
hold the fraction.  Operations that detect overflow return ``OVERFLOW``;
the saturating variants clamp to ``MAXIMUM`` or ``MINIMUM`` instead.
"""

from __future__ import annotations

import math

ONE = 0x00010000
MAXIMUM = 0x7FFFFFFF
MINIMUM = -0x80000000
OVERFLOW = -0x80000000

RAD_TO_DEG_MULT = 3754936
DEG_TO_RAD_MULT = 1144

_MASK32 = 0xFFFFFFFF


def _wrap(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, as two's complement does."""
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _saturate(result: int, positive: bool) -> int:
    if result == OVERFLOW:
        return MAXIMUM if positive else MINIMUM
    return result


def from_int(a: int) -> int:
    """Convert an integer to fix16."""
    return _wrap(a * ONE)


def to_int(a: int) -> int:
    """Convert fix16 to the nearest integer, halves rounded away from zero."""
    half = ONE >> 1
    if a >= 0:
        return (a + half) // ONE
    return -((half - a) // ONE)


def from_float(a: float) -> int:
    """Convert a float to fix16, rounding to the nearest step."""
    temp = a * ONE
    temp += 0.5 if temp >= 0 else -0.5
    return _wrap(math.trunc(temp))


def to_float(a: int) -> float:
    """Convert fix16 to a float."""
    return a / ONE


def absolute(x: int) -> int:
    """Absolute value; ``MINIMUM`` stays ``MINIMUM``."""
    return _wrap(-x if x < 0 else x)


def floor(x: int) -> int:
    """Largest whole number not above ``x``."""
    return _wrap(x & ~0xFFFF)


def ceil(x: int) -> int:
    """Smallest whole number not below ``x``."""
    return _wrap((x & ~0xFFFF) + (ONE if x & 0xFFFF else 0))


def fmin(x: int, y: int) -> int:
    return x if x < y else y


def fmax(x: int, y: int) -> int:
    return x if x > y else y


def clamp(x: int, lo: int, hi: int) -> int:
    """Limit ``x`` to the range from ``lo`` to ``hi``."""
    return fmin(fmax(x, lo), hi)


def rad_to_deg(radians: int) -> int:
    return mul(radians, RAD_TO_DEG_MULT)


def deg_to_rad(degrees: int) -> int:
    return mul(degrees, DEG_TO_RAD_MULT)


def sq(x: int) -> int:
    return mul(x, x)


def fix_abs(value: int) -> int:
    """Absolute value of a 32-bit integer; the minimum cannot be negated."""
    if value == MINIMUM:
        return MINIMUM
    return value if value >= 0 else -value


def add(a: int, b: int) -> int:
    """Add, returning ``OVERFLOW`` when the sum leaves the 32-bit range."""
    total = a + b
    if not MINIMUM <= total <= MAXIMUM:
        return OVERFLOW
    return total


def sub(a: int, b: int) -> int:
    """Subtract, returning ``OVERFLOW`` when the difference leaves the range."""
    diff = a - b
    if not MINIMUM <= diff <= MAXIMUM:
        return OVERFLOW
    return diff


def sadd(a: int, b: int) -> int:
    """Saturating addition."""
    return _saturate(add(a, b), a >= 0)


def ssub(a: int, b: int) -> int:
    """Saturating subtraction."""
    return _saturate(sub(a, b), a >= 0)


def mul(a: int, b: int) -> int:
    """Multiply with rounding to nearest; ``OVERFLOW`` if the result does not fit."""
    product = a * b
    upper = product >> 47
    if product < 0:
        if upper != -1:
            return OVERFLOW
        product -= 1
    elif upper:
        return OVERFLOW
    result = (product >> 16) + ((product & 0x8000) >> 15)
    return _wrap(result)


def smul(a: int, b: int) -> int:
    """Saturating multiplication."""
    return _saturate(mul(a, b), (a >= 0) == (b >= 0))


def div(a: int, b: int) -> int:
    """Divide with rounding to nearest.

    Division by zero gives ``MINIMUM``; a quotient that does not fit gives
    ``OVERFLOW``.
    """
    if b == 0:
        return MINIMUM
    numerator = abs(a) << 16
    divisor = abs(b)
    quotient = (2 * numerator + divisor) // (2 * divisor)
    if quotient > MAXIMUM:
        return OVERFLOW
    return -quotient if (a < 0) != (b < 0) else quotient


def sdiv(a: int, b: int) -> int:
    """Saturating division."""
    return _saturate(div(a, b), (a >= 0) == (b >= 0))


def sqrt(x: int) -> int:
    """Square root rounded to nearest; a negative input gives the negated root."""
    negative = x < 0
    scaled = abs(x) << 16
    root = math.isqrt(scaled)
    if scaled - root * root > root:
        root += 1
    return -root if negative else root