"""3x3 real matrices built from three Vector3 rows.

Note the two kinds of multiplication:

* ``m * n`` and ``m / n`` between two matrices are elementwise (Hadamard),
  also spelled ``elementwise_multiply`` / ``elementwise_divide``.
* ``m.product(n)``, ``m.matrix_multiply(n)`` and ``m @ n`` are the
  linear-algebra row-by-column product.

Matrix-vector multiplication has a single implementation, ``product``;
``m * v`` and ``m @ v`` both delegate to it.
"""

from __future__ import annotations

from numbers import Real
from typing import ClassVar, Iterator, Sequence, Union

import numpy as np

from .errors import InvalidSize, NonInvertible
from .settings import (
    DEFAULT_PRECISION,
    DEFAULT_TOLERANCE,
    DTYPE,
    INVERTIBILITY_THRESHOLD,
)
from .vector3 import Vector3, check_index, format_real

RowLike = Union[Vector3, Sequence[float]]


def _row_values(row: RowLike) -> np.ndarray:
    if isinstance(row, Vector3):
        return row.to_numpy()
    return Vector3.from_sequence(row).to_numpy()


class Matrix3:
    """A 3x3 matrix stored row-major as a (3, 3) float64 array.

    ``m[i]`` and ``m.row(i)`` return the row as a Vector3 that shares memory
    with the matrix, so ``m[0][2] = 5.0`` or ``m[1] += v`` modify *m*.
    Columns are returned as copies.

    No orthonormality is enforced, even when a matrix is used as the
    rotation of an Isometry.
    """

    __slots__ = ("_data",)

    __array_ufunc__ = None

    IDENTITY: ClassVar[Matrix3]
    ONES: ClassVar[Matrix3]
    ZERO: ClassVar[Matrix3]

    def __init__(self, *values: float):
        """Build a matrix from 9 row-major values, or the zero matrix."""
        if not values:
            self._data = np.zeros((3, 3), dtype=DTYPE)
            return
        if len(values) != 9:
            raise InvalidSize(f"Matrix3 needs 0 or 9 values, got {len(values)}")
        self._data = np.array(values, dtype=DTYPE).reshape(3, 3)

    @classmethod
    def from_rows(cls, row0: RowLike, row1: RowLike, row2: RowLike) -> Matrix3:
        return cls._wrap(np.stack([_row_values(row) for row in (row0, row1, row2)]))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Matrix3:
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    # Row and column access
    def __getitem__(self, index: int) -> Vector3:
        return Vector3._view(self._data[check_index(index, "Matrix3 row")])

    def __setitem__(self, index: int, row: RowLike) -> None:
        self._data[check_index(index, "Matrix3 row")] = _row_values(row)

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[Vector3]:
        return (self[index] for index in range(3))

    def row(self, index: int) -> Vector3:
        return self[index]

    def col(self, index: int) -> Vector3:
        return Vector3._view(self._data[:, check_index(index, "Matrix3 column")].copy())

    # Elementwise algebra
    def __add__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3._wrap(self._data + other._data)

    def __sub__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return Matrix3._wrap(self._data - other._data)

    def __mul__(self, other):
        if isinstance(other, Matrix3):
            return self.elementwise_multiply(other)
        if isinstance(other, Vector3):
            return self.product(other)
        if isinstance(other, Real):
            return Matrix3._wrap(self._data * float(other))
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Matrix3._wrap(float(scalar) * self._data)

    def __truediv__(self, other):
        if isinstance(other, Matrix3):
            return self.elementwise_divide(other)
        if isinstance(other, Real):
            return Matrix3._wrap(self._data / float(other))
        return NotImplemented

    def __neg__(self) -> Matrix3:
        return Matrix3._wrap(-self._data)

    def __iadd__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        self._data += other._data
        return self

    def __isub__(self, other: Matrix3) -> Matrix3:
        if not isinstance(other, Matrix3):
            return NotImplemented
        self._data -= other._data
        return self

    def __imul__(self, other):
        # Elementwise for matrices. m *= v would rebind m to a Vector3 through
        # the __mul__ fallback, so it is rejected here.
        if isinstance(other, Vector3):
            raise TypeError("in-place multiplication of Matrix3 by Vector3 is not supported")
        if isinstance(other, Matrix3):
            self._data *= other._data
        elif isinstance(other, Real):
            self._data *= float(other)
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other):
        if isinstance(other, Matrix3):
            self._data /= other._data
        elif isinstance(other, Real):
            self._data /= float(other)
        else:
            return NotImplemented
        return self

    def elementwise_multiply(self, other: Matrix3) -> Matrix3:
        """Hadamard product, ``result[i][j] = self[i][j] * other[i][j]``."""
        return Matrix3._wrap(self._data * other._data)

    def elementwise_divide(self, other: Matrix3) -> Matrix3:
        return Matrix3._wrap(self._data / other._data)

    # Linear algebra
    def product(self, other):
        """Matrix-matrix or matrix-vector product.

        Args:
            other: a Matrix3 (``result[i][j] = row(i) . other.col(j)``) or a
                Vector3 (``result[i] = row(i) . other``)

        Returns:
            Matrix3 or Vector3, matching the type of *other*
        """
        if isinstance(other, Vector3):
            return Vector3(*(row.dot(other) for row in self))
        if isinstance(other, Matrix3):
            columns = [other.col(j) for j in range(3)]
            return Matrix3(*(row.dot(column) for row in self for column in columns))
        raise TypeError(f"cannot multiply Matrix3 by {type(other).__name__}")

    matrix_multiply = product

    def __matmul__(self, other):
        if not isinstance(other, (Matrix3, Vector3)):
            return NotImplemented
        return self.product(other)

    def transpose(self) -> Matrix3:
        return Matrix3._wrap(self._data.T.copy())

    def det(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        (a, b, c), (d, e, f), (g, h, k) = self._data
        return float(a * (e * k - f * h) - b * (d * k - f * g) + c * (d * h - e * g))

    def inverse(self) -> Matrix3:
        """Analytic inverse, adjugate divided by the determinant.

        Raises:
            NonInvertible: if ``abs(det()) < 1e-6``
        """
        det = self.det()
        if abs(det) < INVERTIBILITY_THRESHOLD:
            raise NonInvertible(f"Matrix3 is not invertible (det={det!r})")
        (a, b, c), (d, e, f), (g, h, k) = self._data
        adjugate = Matrix3(
            e * k - f * h, c * h - b * k, b * f - c * e,
            f * g - d * k, a * k - c * g, c * d - a * f,
            d * h - e * g, b * g - a * h, a * e - b * d,
        )
        return adjugate / det

    # Comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return all(row == other_row for row, other_row in zip(self, other))

    __hash__ = None  # mutable

    def isclose(self, other: Matrix3, atol: float = DEFAULT_TOLERANCE) -> bool:
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    # Copies and interop
    def copy(self) -> Matrix3:
        return Matrix3._wrap(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo) -> Matrix3:
        return self.copy()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype, copy=True)

    # Rendering
    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        rows = (
            "[" + ", ".join(format_real(value, precision) for value in row) + "]"
            for row in self._data
        )
        return "[" + ", ".join(rows) + "]"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        values = ", ".join(repr(float(value)) for value in self._data.flat)
        return f"Matrix3({values})"


def _constant(*values: float) -> Matrix3:
    matrix = Matrix3(*values)
    matrix._data.flags.writeable = False
    return matrix


Matrix3.IDENTITY = _constant(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
Matrix3.ONES = _constant(1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0)
Matrix3.ZERO = _constant(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
