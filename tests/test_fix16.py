import math

import pytest

from fixmath import fix16
from fixmath.fix16 import MAXIMUM, MINIMUM, ONE, OVERFLOW

SAMPLES = [0, 1, -1, ONE // 2, -(ONE // 2), ONE * 3 + 77, -ONE * 1000 - 12345,
           MAXIMUM, MINIMUM + 1]


@pytest.mark.parametrize("n", [-32768, -1, 0, 1, 32767])
def test_int_round_trip(n):
    assert fix16.to_int(fix16.from_int(n)) == n


def test_from_int_one_is_unit():
    assert fix16.from_int(1) == ONE


def test_to_int_rounds_half_away_from_zero():
    assert fix16.to_int(ONE // 2) == 1
    assert fix16.to_int(-(ONE // 2)) == -1
    assert fix16.to_int(ONE // 2 - 1) == 0


@pytest.mark.parametrize("value", [0.5, -1.25, 100.75, -32768.0])
def test_float_round_trip_exact(value):
    assert fix16.to_float(fix16.from_float(value)) == value


@pytest.mark.parametrize("value", [0.1, -0.3, 3.14159, -2.71828, 1234.5678])
def test_from_float_is_nearest(value):
    assert abs(fix16.to_float(fix16.from_float(value)) - value) <= 0.5 / ONE


@pytest.mark.parametrize("x", SAMPLES)
def test_absolute_and_fix_abs(x):
    assert fix16.absolute(x) == abs(x)
    assert fix16.fix_abs(x) == abs(x)


def test_absolute_of_minimum():
    assert fix16.absolute(MINIMUM) == MINIMUM
    assert fix16.fix_abs(MINIMUM) == MINIMUM


@pytest.mark.parametrize("x", [ONE * 2 + ONE // 2, -(ONE * 2 + ONE // 2), ONE * 5, -ONE, 7, -7])
def test_floor_ceil_bounds(x):
    lo = fix16.floor(x)
    hi = fix16.ceil(x)
    assert lo % ONE == 0 and hi % ONE == 0
    assert lo <= x < lo + ONE
    assert hi - ONE < x <= hi


def test_min_max_clamp():
    a, b = fix16.from_int(-3), fix16.from_int(4)
    assert fix16.fmin(a, b) == a
    assert fix16.fmax(a, b) == b
    assert fix16.clamp(fix16.from_int(10), a, b) == b
    assert fix16.clamp(fix16.from_int(-10), a, b) == a
    assert fix16.clamp(ONE, a, b) == ONE


@pytest.mark.parametrize("a,b", [(3, 4), (-100, 25), (0, 7), (-16000, -16000)])
def test_add_sub_integers(a, b):
    fa, fb = fix16.from_int(a), fix16.from_int(b)
    assert fix16.add(fa, fb) == fix16.from_int(a + b)
    assert fix16.sub(fa, fb) == fix16.from_int(a - b)


def test_add_sub_overflow_and_saturation():
    assert fix16.add(MAXIMUM, 1) == OVERFLOW
    assert fix16.sub(MINIMUM, 1) == OVERFLOW
    assert fix16.sadd(MAXIMUM, ONE) == MAXIMUM
    assert fix16.sadd(MINIMUM, -1) == MINIMUM
    assert fix16.ssub(MINIMUM, 1) == MINIMUM
    assert fix16.ssub(MAXIMUM, -1) == MAXIMUM


@pytest.mark.parametrize("a,b", [(3, 4), (-12, 11), (181, 181), (-1, -32767)])
def test_mul_integers(a, b):
    assert fix16.mul(fix16.from_int(a), fix16.from_int(b)) == fix16.from_int(a * b)


@pytest.mark.parametrize("x", SAMPLES)
def test_mul_identity_and_commutative(x):
    y = ONE * 3 // 4
    assert fix16.mul(x, ONE) == x
    assert fix16.mul(x, y) == fix16.mul(y, x)


def test_mul_rounding_of_half():
    assert fix16.mul(1, ONE // 2) == 1
    assert fix16.mul(-1, ONE // 2) == -1


def test_mul_overflow_and_saturation():
    big = fix16.from_int(200)
    assert fix16.mul(big, big) == OVERFLOW
    assert fix16.smul(big, big) == MAXIMUM
    assert fix16.smul(-big, big) == MINIMUM
    assert fix16.smul(-big, -big) == MAXIMUM


def test_sq_matches_mul():
    for x in SAMPLES[:7]:
        assert fix16.sq(x) == fix16.mul(x, x)


@pytest.mark.parametrize("a,b", [(3, 4), (-12, 11), (100, -7), (-5, -5)])
def test_div_inverts_mul(a, b):
    assert fix16.div(fix16.from_int(a * b), fix16.from_int(b)) == fix16.from_int(a)


def test_div_by_zero_and_overflow():
    assert fix16.div(ONE, 0) == MINIMUM
    assert fix16.div(MAXIMUM, ONE // 2) == OVERFLOW
    assert fix16.sdiv(MAXIMUM, ONE // 2) == MAXIMUM
    assert fix16.sdiv(MAXIMUM, -(ONE // 2)) == MINIMUM


def test_div_third_is_close():
    third = fix16.div(ONE, fix16.from_int(3))
    assert abs(fix16.mul(third, fix16.from_int(3)) - ONE) <= 2


@pytest.mark.parametrize("n", [0, 1, 2, 7, 181])
def test_sqrt_of_squares(n):
    assert fix16.sqrt(fix16.from_int(n * n)) == fix16.from_int(n)


def test_sqrt_two_and_negative():
    root = fix16.sqrt(fix16.from_int(2))
    assert abs(fix16.to_float(root) - math.sqrt(2)) <= 1 / ONE
    assert fix16.sqrt(-fix16.from_int(4)) == -fix16.from_int(2)


def test_angle_conversion():
    rad = fix16.deg_to_rad(fix16.from_int(180))
    assert abs(fix16.to_float(rad) - math.pi) < 1e-3
    back = fix16.rad_to_deg(fix16.deg_to_rad(fix16.from_int(90)))
    assert abs(fix16.to_float(back) - 90) < 0.05