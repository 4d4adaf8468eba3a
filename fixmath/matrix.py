"""Small fix16 matrices with error flags carried along with the results."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from fixmath import fix16
from fixmath.fixarray import dot, norm


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class MatrixError(enum.IntFlag):
    """Conditions recorded on a matrix by the operations that produced it."""

    OVERFLOW = 0x01
    DIMENSION = 0x02
    SINGULAR = 0x08
    NEGATIVE = 0x10


_NO_ERRORS = MatrixError(0)


def _overflow_flag(rows: Iterable[Iterable[int]]) -> MatrixError:
    if any(value == fix16.OVERFLOW for row in rows for value in row):
        return MatrixError.OVERFLOW
    return _NO_ERRORS


class Matrix:
    """An immutable matrix of fix16 values with accumulated error flags.

    Operations never raise on numeric trouble; they return a new matrix
    whose ``errors`` records overflow, mismatched dimensions and the like,
    together with the errors of the operands.
    """

    __slots__ = ("data", "errors")

    def __init__(
        self,
        data: Iterable[Iterable[int]] = (),
        errors: MatrixError | int = _NO_ERRORS,
    ) -> None:
        rows = tuple(tuple(int(v) for v in row) for row in data)
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("matrix rows must all have the same length")
        self.data: tuple[tuple[int, ...], ...] = rows
        self.errors = MatrixError(errors)

    @classmethod
    def filled(cls, rows: int, columns: int, value: int) -> Matrix:
        """A matrix of the given shape with every entry set to ``value``."""
        return cls([[value] * columns for _ in range(rows)])

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """The square identity matrix."""
        return cls(
            [[fix16.ONE if i == j else 0 for j in range(size)] for i in range(size)]
        )

    @property
    def rows(self) -> int:
        return len(self.data)

    @property
    def columns(self) -> int:
        return len(self.data[0]) if self.data else 0

    def __getitem__(self, index: tuple[int, int]) -> int:
        row, column = index
        return self.data[row][column]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.data == other.data and self.errors == other.errors

    def __hash__(self) -> int:
        return hash((self.data, int(self.errors)))

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.data]!r}, {self.errors!r})"

    def _get(self, row: int, column: int) -> int:
        """Entry at a position, reading outside the matrix as zero."""
        if row < self.rows and column < self.columns:
            return self.data[row][column]
        return 0

    def _column(self, column: int) -> list[int]:
        return [row[column] for row in self.data]

    def _same_shape(self, other: Matrix) -> bool:
        return self.rows == other.rows and self.columns == other.columns

    def fill(self, value: int) -> Matrix:
        """A matrix of the same shape and errors with every entry set to ``value``."""
        return Matrix(
            [[value] * self.columns for _ in range(self.rows)], self.errors
        )

    def transpose(self) -> Matrix:
        return Matrix(
            [self._column(c) for c in range(self.columns)], self.errors
        )

    def _addsub(self, other: Matrix, op) -> Matrix:
        errors = self.errors | other.errors
        if not self._same_shape(other):
            errors |= MatrixError.DIMENSION
        data = [
            [op(value, other._get(r, c)) for c, value in enumerate(row)]
            for r, row in enumerate(self.data)
        ]
        return Matrix(data, errors | _overflow_flag(data))

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum."""
        return self._addsub(other, fix16.add)

    def sub(self, other: Matrix) -> Matrix:
        """Element-wise difference."""
        return self._addsub(other, fix16.sub)

    def _scalar(self, scalar: int, op) -> Matrix:
        data = [[op(value, scalar) for value in row] for row in self.data]
        return Matrix(data, self.errors | _overflow_flag(data))

    def mul_s(self, scalar: int) -> Matrix:
        """Every entry multiplied by a fix16 scalar."""
        return self._scalar(scalar, fix16.mul)

    def div_s(self, scalar: int) -> Matrix:
        """Every entry divided by a fix16 scalar."""
        return self._scalar(scalar, fix16.div)

    def mul(self, other: Matrix) -> Matrix:
        """Matrix product ``self * other``."""
        errors = self.errors | other.errors
        if self.columns != other.rows:
            errors |= MatrixError.DIMENSION
        other_columns = [other._column(c) for c in range(other.columns)]
        data = [[dot(row, col) for col in other_columns] for row in self.data]
        return Matrix(data, errors | _overflow_flag(data))

    def mul_bt(self, other: Matrix) -> Matrix:
        """Product with the transpose of the second operand, ``self * other'``."""
        errors = self.errors | other.errors
        if self.columns != other.columns:
            errors |= MatrixError.DIMENSION
        data = [[dot(row, brow) for brow in other.data] for row in self.data]
        return Matrix(data, errors | _overflow_flag(data))

    def mul_at(self, other: Matrix) -> Matrix:
        """Product with the transpose of this matrix, ``self' * other``."""
        errors = self.errors | other.errors
        if self.rows != other.rows:
            errors |= MatrixError.DIMENSION
        own_columns = [self._column(c) for c in range(self.columns)]
        other_columns = [other._column(c) for c in range(other.columns)]
        data = [[dot(a, b) for b in other_columns] for a in own_columns]
        return Matrix(data, errors | _overflow_flag(data))

    def qr_decomposition(self, reorthogonalize: int = 1) -> tuple[Matrix, Matrix]:
        """QR decomposition by modified Gram-Schmidt.

        Returns ``(q, r)``.  ``reorthogonalize`` extra projection passes are
        made per column.  A column whose remainder has a near-zero norm marks
        both results ``SINGULAR`` and is left unnormalised.
        """
        q = [self._column(c) for c in range(self.columns)]
        size = self.columns
        r = [[0] * size for _ in range(size)]
        errors = self.errors

        for j, v in enumerate(q):
            for _ in range(int(reorthogonalize) + 1):
                for i in range(j):
                    u = q[i]
                    projection = dot(v, u)
                    for k, (vk, uk) in enumerate(zip(v, u)):
                        diff = fix16.sub(vk, fix16.mul(projection, uk))
                        if diff == fix16.OVERFLOW:
                            errors |= MatrixError.OVERFLOW
                        v[k] = diff
                    if projection == fix16.OVERFLOW:
                        errors |= MatrixError.OVERFLOW
                    r[i][j] = _to_int32(r[i][j] + projection)

            length = norm(v)
            r[j][j] = length
            if length == fix16.OVERFLOW:
                errors |= MatrixError.OVERFLOW
            if -5 < length < 5:
                # Linearly dependent column.
                errors |= MatrixError.SINGULAR
                continue
            q[j] = [fix16.div(value, length) for value in v]

        q_matrix = Matrix(zip(*q), errors) if q else Matrix([], errors)
        if not q and self.rows:
            q_matrix = Matrix([[] for _ in range(self.rows)], errors)
        return q_matrix, Matrix(r, errors)

    def cholesky(self) -> Matrix:
        """Lower-triangular ``L`` with ``L * L' = self`` (Cholesky-Banachiewicz)."""
        errors = self.errors
        if self.rows != self.columns:
            errors |= MatrixError.DIMENSION
        size = self.rows
        lower = [[0] * size for _ in range(size)]

        for row in range(size):
            for column in range(size):
                if row == column:
                    value = self._get(row, column)
                    for k in range(column):
                        square = fix16.mul(lower[row][k], lower[row][k])
                        value = fix16.sub(value, square)
                        if value == fix16.OVERFLOW or square == fix16.OVERFLOW:
                            errors |= MatrixError.OVERFLOW
                    if value < 0:
                        if value < -65:
                            errors |= MatrixError.NEGATIVE
                        value = 0
                    lower[row][column] = fix16.sqrt(value)
                elif row > column:
                    value = self._get(row, column)
                    for k in range(column):
                        product = fix16.mul(lower[row][k], lower[column][k])
                        value = fix16.sub(value, product)
                        if value == fix16.OVERFLOW or product == fix16.OVERFLOW:
                            errors |= MatrixError.OVERFLOW
                    value = fix16.div(value, lower[column][column])
                    lower[row][column] = value
                    if value == fix16.OVERFLOW:
                        errors |= MatrixError.OVERFLOW

        return Matrix(lower, errors)

    def invert_lt(self) -> Matrix:
        """Inverse of ``L * L'`` where this matrix is the lower-triangular ``L``."""
        size = self.rows
        m = self._get
        dest = [[0] * size for _ in range(size)]

        for i in range(size):
            diagonal = m(i, i)
            for j in range(i + 1):
                total = fix16.ONE if i == j else 0
                for k in range(i - 1, j - 1, -1):
                    total = fix16.sub(total, fix16.mul(m(i, k), dest[j][k]))
                dest[j][i] = fix16.div(total, diagonal)

        for i in reversed(range(size)):
            diagonal = m(i, i)
            for j in range(i + 1):
                total = dest[j][i]
                for k in range(i + 1, size):
                    total = fix16.sub(total, fix16.mul(m(k, i), dest[j][k]))
                dest[i][j] = dest[j][i] = fix16.div(total, diagonal)

        return Matrix(dest, self.errors)


def solve(q: Matrix, r: Matrix, matrix: Matrix) -> Matrix:
    """Solve ``A x = matrix`` given the QR decomposition of ``A``.

    For an over-determined system this is the least-squares solution.
    Raises ``ValueError`` if ``r`` is not square or does not match ``q``.
    """
    if r.columns != r.rows or r.columns != q.columns:
        raise ValueError("r must be square with as many columns as q")

    # Ax = b  <=>  QRx = b  <=>  Rx = Q'b
    product = q.mul_at(matrix)
    errors = product.errors
    x = [list(row) for row in product.data]
    size = r.columns

    for column in range(product.columns):
        for row in reversed(range(product.rows)):
            value = x[row][column]
            for variable in range(row + 1, size):
                term = fix16.mul(r.data[row][variable], x[variable][column])
                value = fix16.sub(value, term)
                if term == fix16.OVERFLOW or value == fix16.OVERFLOW:
                    errors |= MatrixError.OVERFLOW

            divider = r.data[row][row]
            if divider == 0:
                errors |= MatrixError.SINGULAR
                x[row][column] = 0
                continue

            result = fix16.div(value, divider)
            x[row][column] = result
            if result == fix16.OVERFLOW:
                errors |= MatrixError.OVERFLOW

    return Matrix(x, errors)