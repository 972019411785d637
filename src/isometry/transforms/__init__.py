"""
Rigid-body transforms built on the core vector and matrix types.

This module provides:
- rotation-matrix builders (rotation module)
- the Isometry rotation + translation transform (isometry module)

Every operation is a pure function of its operands; nothing is cached.
"""

from . import rotation
from .isometry import Isometry

__all__ = [
    "rotation",
    "Isometry",
]
