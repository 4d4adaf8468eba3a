"""A value type wrapping a raw fix16 integer with Python operators."""

from __future__ import annotations

from fixmath import fix16, strconv, trig


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _raw_of(value: Fix16 | int | float) -> int:
    """Raw fix16 form of a Fix16, an integer or a float."""
    if isinstance(value, Fix16):
        return value.raw
    if isinstance(value, int):
        return fix16.from_int(value)
    if isinstance(value, float):
        return fix16.from_float(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Fix16")


class Fix16:
    """A signed 16.16 fixed-point number.

    Integers and floats are accepted wherever a Fix16 is.  Plain ``+`` and
    ``-`` wrap around on overflow; ``*`` and ``/`` by a Fix16 or float give
    the overflow marker; the ``s``-prefixed methods saturate instead.
    """

    __slots__ = ("raw",)

    def __init__(self, value: Fix16 | int | float = 0) -> None:
        self.raw = _raw_of(value)

    @classmethod
    def from_raw(cls, raw: int) -> Fix16:
        """Build a value from its raw 32-bit representation."""
        obj = cls.__new__(cls)
        obj.raw = _to_int32(raw)
        return obj

    def __int__(self) -> int:
        return fix16.to_int(self.raw)

    def __float__(self) -> float:
        return fix16.to_float(self.raw)

    def __repr__(self) -> str:
        return f"Fix16.from_raw({self.raw})"

    def __str__(self) -> str:
        return strconv.to_str(self.raw, 5)

    def __hash__(self) -> int:
        return hash(float(self))

    def _coerce(self, other: object) -> int | None:
        try:
            return _raw_of(other)  # type: ignore[arg-type]
        except TypeError:
            return None

    def __eq__(self, other: object) -> bool:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return self.raw == raw

    def __lt__(self, other: object) -> bool:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return self.raw < raw

    def __le__(self, other: object) -> bool:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return self.raw <= raw

    def __gt__(self, other: object) -> bool:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return self.raw > raw

    def __ge__(self, other: object) -> bool:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return self.raw >= raw

    def __neg__(self) -> Fix16:
        return Fix16.from_raw(-self.raw)

    def __add__(self, other: object) -> Fix16:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return Fix16.from_raw(self.raw + raw)

    def __radd__(self, other: object) -> Fix16:
        return self.__add__(other)

    def __sub__(self, other: object) -> Fix16:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return Fix16.from_raw(self.raw - raw)

    def __rsub__(self, other: object) -> Fix16:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return Fix16.from_raw(raw - self.raw)

    def __mul__(self, other: object) -> Fix16:
        if isinstance(other, int):
            return Fix16.from_raw(self.raw * other)
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return Fix16.from_raw(fix16.mul(self.raw, raw))

    def __rmul__(self, other: object) -> Fix16:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Fix16:
        if isinstance(other, int):
            if other == 0:
                raise ZeroDivisionError("Fix16 division by zero")
            return Fix16.from_raw(_trunc_div(self.raw, other))
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return Fix16.from_raw(fix16.div(self.raw, raw))

    def __rtruediv__(self, other: object) -> Fix16:
        raw = self._coerce(other)
        if raw is None:
            return NotImplemented
        return Fix16.from_raw(fix16.div(raw, self.raw))

    def sadd(self, other: Fix16 | int | float) -> Fix16:
        """Saturating addition."""
        return Fix16.from_raw(fix16.sadd(self.raw, _raw_of(other)))

    def ssub(self, other: Fix16 | int | float) -> Fix16:
        """Saturating subtraction, as addition of the negated operand."""
        return Fix16.from_raw(fix16.sadd(self.raw, _to_int32(-_raw_of(other))))

    def smul(self, other: Fix16 | int | float) -> Fix16:
        """Saturating multiplication."""
        return Fix16.from_raw(fix16.smul(self.raw, _raw_of(other)))

    def sdiv(self, other: Fix16 | int | float) -> Fix16:
        """Saturating division."""
        return Fix16.from_raw(fix16.sdiv(self.raw, _raw_of(other)))

    def sin(self) -> Fix16:
        return Fix16.from_raw(trig.sin(self.raw))

    def cos(self) -> Fix16:
        return Fix16.from_raw(trig.cos(self.raw))

    def tan(self) -> Fix16:
        return Fix16.from_raw(trig.tan(self.raw))

    def asin(self) -> Fix16:
        return Fix16.from_raw(trig.asin(self.raw))

    def acos(self) -> Fix16:
        return Fix16.from_raw(trig.acos(self.raw))

    def atan(self) -> Fix16:
        return Fix16.from_raw(trig.atan(self.raw))

    def atan2(self, y: Fix16 | int | float) -> Fix16:
        """Four-quadrant arctangent with this value as the ordinate and ``y`` as the abscissa."""
        return Fix16.from_raw(trig.atan2(self.raw, _raw_of(y)))

    def sqrt(self) -> Fix16:
        return Fix16.from_raw(fix16.sqrt(self.raw))