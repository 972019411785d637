"""Core value types for the isometry library.

This module provides the 3D vector and 3x3 matrix types every transform is
built from, together with the library's error taxonomy.
"""

from .errors import (
    IndexOutOfRange,
    InvalidArgument,
    InvalidSize,
    IsometryError,
    NonInvertible,
)
from .matrix3 import Matrix3
from .vector3 import Vector3

__all__ = [
    "Vector3",
    "Matrix3",
    "IsometryError",
    "IndexOutOfRange",
    "InvalidSize",
    "InvalidArgument",
    "NonInvertible",
]
