# fixmath

Q16.16 fixed-point arithmetic for Python. The results are computed with the
same integer steps that fixed-point code uses on targets without a
floating-point unit. You can use the package to prototype algorithms, to make
reference values, and to check integer-only firmware maths on a desktop.

A fixed-point value is a plain `int` in the signed 32-bit range. Its lower 16
bits hold the fraction, so `65536` (`fix16.ONE`) means `1.0`.

Operations that detect overflow return the sentinel `fix16.OVERFLOW`, which is
`-0x80000000`. The saturating variants clamp to `fix16.MAXIMUM` or
`fix16.MINIMUM` instead. `fix16.div` also returns `-0x80000000` on division by
zero.

## Installation

```
pip install fixmath
```

To install with the test dependencies:

```
pip install "fixmath[test]"
```

## Modules

### `fixmath.fix16`

Conversions and basic arithmetic on raw integers.

- Conversions:
  - `from_int` and `from_float`.
  - `to_int`, which rounds halves away from zero.
  - `to_float`.
- Arithmetic that returns `OVERFLOW` when the result does not fit:
  - `add`, `sub`, `mul`, `div`.
- Saturating arithmetic:
  - `sadd`, `ssub`, `smul`, `sdiv`.
- Other functions:
  - `sqrt`, `sq`, `floor`, `ceil`.
  - `fmin`, `fmax`, `clamp`.
  - `absolute` and `fix_abs`.
  - `rad_to_deg` and `deg_to_rad`.

### `fixmath.fract32`

Unsigned 32-bit fractions of `0xFFFFFFFF`.

- `create(numerator, denominator)`:
  - A numerator that is not below the denominator gives `FULL`.
  - A denominator of one raises `ZeroDivisionError`.
- `invert`.
- `usmul` and `smul`, which scale an integer by a fraction.
- `uint32_log2`.

### `fixmath.strconv`

Decimal text conversions.

- `to_str(value, decimals=5)` gives at most five decimals.
- `from_str(text)` accepts:
  - leading whitespace,
  - a sign,
  - up to five integer digits,
  - a fraction after `.` or `,`.

  Input it cannot parse, or a value out of range, raises `ValueError`.

### `fixmath.trig`

Trigonometry on angles in radians.

- `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `atan2`.
- `sin_parabola`, a cheaper approximation that is valid from -pi to pi.

### `fixmath.number`

The `Fix16` class wraps a raw value and supports Python operators.

- Construction:
  - `Fix16(x)` takes an int, a float or another `Fix16`.
  - `Fix16.from_raw(raw)` takes a raw value.
- Operators:
  - `+` and `-` wrap around on overflow.
  - `*` and `/` by a `Fix16` or a float use `fix16.mul` and `fix16.div`.
  - `*` and `/` by a plain `int` scale the raw value directly.
  - Dividing by the integer `0` raises `ZeroDivisionError`.
- Methods:
  - The saturating `sadd`, `ssub`, `smul`, `sdiv`.
  - `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `atan2`, `sqrt`.
- `str()` formats the value with five decimals.

### `fixmath.fixarray`

- `dot(a, b)` and `norm(a)` on sequences of fixed-point values.
- Both return `fix16.OVERFLOW` if the result does not fit.

### `fixmath.matrix`

The immutable `Matrix` class, the `MatrixError` flags and the `solve` function.

- `Matrix`:
  - Constructors: `Matrix(rows)`, `Matrix.filled` and `Matrix.identity`.
  - Arithmetic: `add`, `sub`, `mul_s`, `div_s`, `mul`, `mul_bt` (`a * b'`) and `mul_at` (`a' * b`).
  - Other operations: `transpose` and `fill`.
  - `qr_decomposition(reorthogonalize)` returns `(q, r)`.
  - `cholesky`.
  - `invert_lt`, which computes the inverse of `L * L'` from the lower-triangular `L`.
- `solve(q, r, b)` solves `A x = b` from a QR decomposition. For systems with
  more equations than unknowns it gives the least-squares solution.

## Examples

```python
from fixmath import fix16, strconv, trig
from fixmath.number import Fix16

a = fix16.from_float(1.5)
b = fix16.from_int(3)
print(strconv.to_str(fix16.mul(a, b), 5))       # 4.50000
print(fix16.to_float(trig.sin(fix16.from_float(0.5))))

x = Fix16(2.25)
print(float(x.sqrt()))                          # 1.5
print(x * 2 + 1)                                # 5.50000
```

Most matrix operations do not raise on numeric trouble:

- Overflow, a singular matrix or mismatched dimensions each set a
  `MatrixError` flag in the result's `errors`.
- The result also carries the errors of its operands.
- Check `errors` afterwards.

The exception is `solve`, which raises `ValueError` when `r` is not square or
does not match `q`.

```python
from fixmath import fix16
from fixmath.matrix import Matrix, solve

a = Matrix([[fix16.from_int(v) for v in row]
            for row in ([1, 2, 3], [4, 5, 6], [7, 8, 10])])
b = Matrix([[fix16.from_int(-1)], [fix16.from_int(-2)], [fix16.from_int(-3)]])

q, r = a.qr_decomposition(1)
x = solve(q, r, b)
print(x.errors, a.mul(x).errors)
```

## What it does not do

- The package is a library only. It has no command-line tool.
- It has no vector or quaternion types. Vectors are plain sequences of
  integers passed to `fixarray.dot` and `fixarray.norm`.
- It has no function that prints matrices.

## Running the tests

```
pytest
```