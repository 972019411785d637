"""Rotation-matrix builders.

Rotations are plain Matrix3 values; these helpers construct them from an
axis-angle pair or from roll/pitch/yaw angles.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

from ..core.errors import InvalidArgument
from ..core.matrix3 import Matrix3
from ..core.vector3 import Vector3

VectorLike = Union[Vector3, Sequence[float]]


def as_vector(value: VectorLike) -> Vector3:
    if isinstance(value, Vector3):
        return value
    return Vector3.from_sequence(value)


def skew_symmetric(v: VectorLike) -> Matrix3:
    """
    Convert a 3D vector to its cross-product matrix.

    ``skew_symmetric(v).product(w) == v.cross(w)`` for every w.

    Args:
        v: 3D vector

    Returns:
        3x3 skew-symmetric matrix
    """
    x, y, z = as_vector(v)
    return Matrix3(
        0.0, -z, y,
        z, 0.0, -x,
        -y, x, 0.0,
    )


def axis_angle(axis: VectorLike, radians: float) -> Matrix3:
    """
    Rotation of *radians* around *axis* (right-hand rule).

    Implements Rodrigues' formula R = I + sin(θ) * K + (1 - cos(θ)) * K²,
    where K is the cross-product matrix of the normalized axis.

    Args:
        axis: rotation axis, any non-zero length
        radians: rotation angle

    Returns:
        3x3 rotation matrix

    Raises:
        InvalidArgument: if the axis has zero (or non-finite) length
    """
    axis = as_vector(axis)
    # Scale by the largest component first so the norm neither overflows nor
    # underflows. np.max propagates NaN.
    scale = float(np.max(np.abs(axis.to_numpy())))
    if not 0.0 < scale < math.inf:
        raise InvalidArgument(f"rotation axis must have a finite non-zero length, got {axis!r}")
    axis = axis / scale

    K = skew_symmetric(axis / axis.norm())
    sin_angle = math.sin(radians)
    cos_angle = math.cos(radians)

    return Matrix3.IDENTITY + sin_angle * K + (1.0 - cos_angle) * K.product(K)


def euler_angles(roll: float, pitch: float, yaw: float) -> Matrix3:
    """
    Rotation ``Rx(roll) · Ry(pitch) · Rz(yaw)``.

    The product is taken in exactly this order, so a vector is rotated about
    Z first, then Y, then X.
    """
    Rx = axis_angle(Vector3.UNIT_X, roll)
    Ry = axis_angle(Vector3.UNIT_Y, pitch)
    Rz = axis_angle(Vector3.UNIT_Z, yaw)
    return Rx.product(Ry).product(Rz)
