"""Conversion of fix16 values to and from decimal text."""

from __future__ import annotations

from fixmath import fix16

# Five decimals already give full fix16 precision; more are not produced.
_SCALES = (1, 10, 100, 1000, 10000, 100000, 100000, 100000)

_SPACE = frozenset(" \r\n\t\v\f")
_DIGITS = frozenset("0123456789")

_MAX_FRACTION_DIGITS = 5
_MAX_INTEGER_DIGITS = 5


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def to_str(value: int, decimals: int = 5) -> str:
    """Format a fix16 value with the given number of decimals (at most five)."""
    magnitude = abs(value) & 0xFFFFFFFF
    intpart = magnitude >> 16
    scale = _SCALES[decimals & 7]
    fracpart = fix16.mul(magnitude & 0xFFFF, scale)
    if fracpart >= scale:
        intpart += 1
        fracpart -= scale

    text = f"{'-' if value < 0 else ''}{intpart}"
    if scale != 1:
        width = len(str(scale)) - 1
        text += f".{fracpart:0{width}d}"
    return text


def from_str(text: str) -> int:
    """Parse decimal text into a fix16 value.

    Leading whitespace, an optional sign, up to five integer digits and an
    optional fraction after ``.`` or ``,`` are accepted.  Fraction digits
    beyond the fifth are ignored, as are trailing digits and whitespace.
    Anything else raises ``ValueError``.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _SPACE:
        pos += 1

    negative = text.startswith("-", pos)
    if pos < length and text[pos] in "+-":
        pos += 1

    start = pos
    while pos < length and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    intpart = int(digits) if digits else 0

    if (
        not digits
        or len(digits) > _MAX_INTEGER_DIGITS
        or intpart > 32768
        or (not negative and intpart > 32767)
    ):
        raise ValueError(f"cannot parse {text!r} as a fix16 value")

    value = intpart << 16

    if pos < length and text[pos] in ".,":
        pos += 1
        start = pos
        while (
            pos < length
            and text[pos] in _DIGITS
            and pos - start < _MAX_FRACTION_DIGITS
        ):
            pos += 1
        fraction = text[start:pos]
        if fraction:
            value += fix16.div(int(fraction), 10 ** len(fraction))

    if any(ch not in _DIGITS and ch not in _SPACE for ch in text[pos:]):
        raise ValueError(f"cannot parse {text!r} as a fix16 value")

    return _to_int32(-value if negative else value)