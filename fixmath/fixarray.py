"""Dot products and norms of fix16 vectors."""

from __future__ import annotations

from collections.abc import Iterable

from fixmath import fix16

_MASK32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _scale_value(value: int, shift: int) -> int:
    """Shift a fix16 value left (positive) or right (negative), detecting overflow."""
    if shift > 0:
        shifted = _to_int32(value << shift)
        if shifted >> shift != value:
            return fix16.OVERFLOW
        return shifted
    if shift < 0:
        return value >> -shift
    return value


def dot(a: Iterable[int], b: Iterable[int]) -> int:
    """Dot product of two fix16 vectors, rounded to nearest.

    The sum is accumulated exactly and only the final result is checked;
    ``fix16.OVERFLOW`` is returned if it does not fit.  Extra items of the
    longer vector are ignored.
    """
    total = sum(x * y for x, y in zip(a, b))
    upper = total >> 47
    if total < 0:
        if upper != -1:
            return fix16.OVERFLOW
        # Needed so that -1/2 rounds the same way as +1/2.
        total -= 1
    elif upper:
        return fix16.OVERFLOW
    return _to_int32((total >> 16) + ((total & 0x8000) >> 15))


def norm(a: Iterable[int]) -> int:
    """Euclidean norm of a fix16 vector; ``fix16.OVERFLOW`` if it does not fit."""
    total = sum(x * x for x in a)
    high = (total >> 32) & _MASK32
    low = total & _MASK32
    if high:
        scale = 1 + high.bit_length()
    elif low & 0x80000000:
        scale = 1
    else:
        scale = 0
    if scale & 1:
        scale += 1
    root = fix16.sqrt((total >> scale) & _MASK32)
    return _scale_value(root, scale // 2 - 8)