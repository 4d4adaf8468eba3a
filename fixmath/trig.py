"""Trigonometric functions on fix16 values (angles in radians)."""

from __future__ import annotations

from fixmath import fix16

PI = 205887
PI_DIV_4 = 0x0000C90F
THREE_PI_DIV_4 = 0x00025B2F

FOUR_DIV_PI = 0x000145F3
FOUR_DIV_PI2 = -0x000067C0
X4_CORRECTION_COMPONENT = 0x0000399A

_ATAN_CUBIC = 0x00003240
_ATAN_LINEAR = 0x0000FB50

# Divisors and signs of the odd Taylor terms of sine after the linear one.
_SIN_TERMS = ((6, -1), (120, 1), (5040, -1), (362880, 1), (39916800, -1))


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, for a positive divisor."""
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def _trunc_rem(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend, for a positive divisor."""
    remainder = abs(a) % b
    return -remainder if a < 0 else remainder


def sin_parabola(angle: int) -> int:
    """Sine by a corrected parabola; valid for angles from -pi to pi."""
    abs_angle = fix16.absolute(angle)
    retval = _to_int32(
        fix16.mul(FOUR_DIV_PI, angle)
        + fix16.mul(fix16.mul(FOUR_DIV_PI2, angle), abs_angle)
    )
    abs_retval = fix16.absolute(retval)
    correction = _to_int32(fix16.mul(retval, abs_retval) - retval)
    return _to_int32(retval + fix16.mul(X4_CORRECTION_COMPONENT, correction))


def sin(angle: int) -> int:
    """Sine by a Taylor series after reducing the angle to [-pi, pi]."""
    two_pi = PI << 1
    reduced = _trunc_rem(angle, two_pi)
    if reduced > PI:
        reduced -= two_pi
    elif reduced < -PI:
        reduced += two_pi

    square = fix16.mul(reduced, reduced)
    result = reduced
    power = reduced
    for divisor, sign in _SIN_TERMS:
        power = fix16.mul(power, square)
        result += sign * _trunc_div(power, divisor)
    return _to_int32(result)


def cos(angle: int) -> int:
    """Cosine, as the sine of the angle shifted by pi/2."""
    return sin(_to_int32(angle + (PI >> 1)))


def tan(angle: int) -> int:
    """Tangent, saturating where the cosine approaches zero."""
    return fix16.sdiv(sin(angle), cos(angle))


def asin(x: int) -> int:
    """Arcsine; inputs outside [-1, 1] give zero."""
    if x > fix16.ONE or x < -fix16.ONE:
        return 0
    out = fix16.ONE - fix16.mul(x, x)
    out = fix16.div(x, fix16.sqrt(out))
    return atan(out)


def acos(x: int) -> int:
    """Arccosine, as pi/2 minus the arcsine."""
    return _to_int32((PI >> 1) - asin(x))


def atan2(y: int, x: int) -> int:
    """Four-quadrant arctangent of ``y / x`` by a cubic approximation."""
    abs_y = fix16.absolute(y)
    if x >= 0:
        r = fix16.div(_to_int32(x - abs_y), _to_int32(x + abs_y))
        offset = PI_DIV_4
    else:
        r = fix16.div(_to_int32(x + abs_y), _to_int32(abs_y - x))
        offset = THREE_PI_DIV_4
    r_cubed = fix16.mul(fix16.mul(r, r), r)
    angle = _to_int32(
        fix16.mul(_ATAN_CUBIC, r_cubed) - fix16.mul(_ATAN_LINEAR, r) + offset
    )
    if y < 0:
        angle = _to_int32(-angle)
    return angle


def atan(x: int) -> int:
    """Arctangent."""
    return atan2(x, fix16.ONE)