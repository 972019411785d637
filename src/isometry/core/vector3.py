"""Three-component real vectors.

Vector3 is a small mutable value type backed by a float64 numpy array of
shape (3,). Matrix3 hands out its rows as Vector3 views on its own storage,
so in-place operators on a row write through to the matrix.
"""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import ClassVar, Iterable, Iterator

import numpy as np

from .errors import IndexOutOfRange, InvalidSize
from .settings import DEFAULT_PRECISION, DEFAULT_TOLERANCE, DTYPE, EQUALITY_EPSILON


def check_index(index: int, what: str) -> int:
    """Return *index* as an int, raising IndexOutOfRange outside [0, 2]."""
    index = operator.index(index)
    if not 0 <= index <= 2:
        raise IndexOutOfRange(f"{what} index must be 0, 1 or 2, got {index}")
    return index


def format_real(value: float, precision: int) -> str:
    """Render a real with *precision* significant digits (C stream style)."""
    return f"{value:.{precision}g}"


class Vector3:
    """A 3D vector with elementwise algebra, dot/cross products and norm.

    Equality uses an absolute tolerance of machine epsilon per component, so
    it degrades for large-magnitude vectors; use ``isclose`` when comparing
    computed results.

    Instances are not synchronised. Mutating a vector that other threads
    read is a data race the caller has to prevent.
    """

    __slots__ = ("_data",)

    # numpy scalars defer to __rmul__ instead of broadcasting over __array__
    __array_ufunc__ = None

    ZERO: ClassVar[Vector3]
    UNIT_X: ClassVar[Vector3]
    UNIT_Y: ClassVar[Vector3]
    UNIT_Z: ClassVar[Vector3]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=DTYPE)

    @classmethod
    def from_sequence(cls, values: Iterable[float]) -> Vector3:
        """Build a vector from an ordered sequence of exactly 3 reals."""
        values = list(values)
        if len(values) != 3:
            raise InvalidSize(f"Vector3 needs exactly 3 values, got {len(values)}")
        return cls(*values)

    @classmethod
    def _view(cls, data: np.ndarray) -> Vector3:
        # Wraps *data* without copying; writes go to the caller's buffer.
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    # Component access
    def __getitem__(self, index: int) -> float:
        return float(self._data[check_index(index, "Vector3")])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[check_index(index, "Vector3")] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self._data)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = value

    # Elementwise algebra
    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._view(self._data + other._data)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._view(self._data - other._data)

    def __mul__(self, other):
        if isinstance(other, Vector3):
            return self.elementwise_multiply(other)
        if isinstance(other, Real):
            return Vector3._view(self._data * float(other))
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3._view(float(scalar) * self._data)

    def __truediv__(self, other):
        if isinstance(other, Vector3):
            return self.elementwise_divide(other)
        if isinstance(other, Real):
            return Vector3._view(self._data / float(other))
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3._view(-self._data)

    def __iadd__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self._data += other._data
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self._data -= other._data
        return self

    def __imul__(self, other):
        if isinstance(other, Vector3):
            self._data *= other._data
        elif isinstance(other, Real):
            self._data *= float(other)
        else:
            return NotImplemented
        return self

    def __itruediv__(self, other):
        if isinstance(other, Vector3):
            self._data /= other._data
        elif isinstance(other, Real):
            self._data /= float(other)
        else:
            return NotImplemented
        return self

    def elementwise_multiply(self, other: Vector3) -> Vector3:
        return Vector3._view(self._data * other._data)

    def elementwise_divide(self, other: Vector3) -> Vector3:
        return Vector3._view(self._data / other._data)

    # Products
    def dot(self, other: Vector3) -> float:
        x1, y1, z1 = self._data
        x2, y2, z2 = other._data
        return float(x1 * x2 + y1 * y2 + z1 * z2)

    def cross(self, other: Vector3) -> Vector3:
        """Right-handed cross product ``self × other``."""
        x1, y1, z1 = self._data
        x2, y2, z2 = other._data
        return Vector3(y1 * z2 - z1 * y2, z1 * x2 - x1 * z2, x1 * y2 - y1 * x2)

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    # Comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) <= EQUALITY_EPSILON))

    __hash__ = None  # mutable

    def isclose(self, other: Vector3, atol: float = DEFAULT_TOLERANCE) -> bool:
        """Componentwise comparison with an absolute tolerance *atol*."""
        return bool(np.allclose(self._data, other._data, rtol=0.0, atol=atol))

    # Copies and interop
    def copy(self) -> Vector3:
        return Vector3._view(self._data.copy())

    __copy__ = copy

    def __deepcopy__(self, memo) -> Vector3:
        return self.copy()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype, copy=True)

    # Rendering
    def format(self, precision: int = DEFAULT_PRECISION) -> str:
        x, y, z = (format_real(value, precision) for value in self._data)
        return f"(x: {x}, y: {y}, z: {z})"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Vector3(x={self.x!r}, y={self.y!r}, z={self.z!r})"


def _constant(x: float, y: float, z: float) -> Vector3:
    vector = Vector3(x, y, z)
    vector._data.flags.writeable = False
    return vector


Vector3.ZERO = _constant(0.0, 0.0, 0.0)
Vector3.UNIT_X = _constant(1.0, 0.0, 0.0)
Vector3.UNIT_Y = _constant(0.0, 1.0, 0.0)
Vector3.UNIT_Z = _constant(0.0, 0.0, 1.0)
