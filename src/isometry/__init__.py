"""
Isometry: exact 3D vector, matrix and rigid-body transform math.

This library provides small value types for robotics frame and pose
computations: 3-component vectors, 3x3 matrices and isometries
(rotation + translation) with composition and inversion.
"""

from . import core
from . import transforms
from .core import (
    IndexOutOfRange,
    InvalidArgument,
    InvalidSize,
    IsometryError,
    Matrix3,
    NonInvertible,
    Vector3,
)
from .transforms import Isometry

__version__ = "0.1.0"
__all__ = [
    "core",
    "transforms",
    "Vector3",
    "Matrix3",
    "Isometry",
    "IsometryError",
    "IndexOutOfRange",
    "InvalidSize",
    "InvalidArgument",
    "NonInvertible",
]
