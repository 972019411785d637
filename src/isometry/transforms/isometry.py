"""Rigid-body transforms ``y = R·x + t``."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..core.matrix3 import Matrix3
from ..core.settings import DEFAULT_TOLERANCE, DTYPE, ISOMETRY_PRECISION
from ..core.vector3 import Vector3
from .rotation import VectorLike, as_vector, axis_angle, euler_angles


@dataclass(eq=False)
class Isometry:
    """A rotation matrix and a translation vector.

    Together they denote the affine map ``transform(x) = R·x + t``.

    ``Isometry()`` has a *zero* rotation, not the identity: it is singular
    and cannot be inverted. Use ``Isometry.identity()`` or
    ``Isometry.from_translation(v)`` for a proper transform.

    The rotation is not checked for orthonormality; callers supply valid
    rotations. ``translation`` and ``rotation`` are the instance's own
    objects, so in-place changes to them change the isometry.
    """

    translation: Vector3 = field(default_factory=Vector3)
    rotation: Matrix3 = field(default_factory=Matrix3)

    def __post_init__(self):
        # Value semantics: never alias the caller's objects or the constants.
        self.translation = as_vector(self.translation).copy()
        if not isinstance(self.rotation, Matrix3):
            raise TypeError(f"rotation must be a Matrix3, got {type(self.rotation).__name__}")
        self.rotation = self.rotation.copy()

    # Constructors
    @classmethod
    def identity(cls) -> Isometry:
        return cls.from_translation(Vector3.ZERO)

    @classmethod
    def from_translation(cls, vector: VectorLike) -> Isometry:
        """Pure translation by *vector* (identity rotation)."""
        return cls(vector, Matrix3.IDENTITY)

    @classmethod
    def rotate_around(cls, axis: VectorLike, radians: float) -> Isometry:
        """Pure rotation of *radians* around *axis*; raises InvalidArgument for a zero axis."""
        return cls(Vector3.ZERO, axis_angle(axis, radians))

    @classmethod
    def from_euler_angles(cls, roll: float, pitch: float, yaw: float) -> Isometry:
        """Pure rotation ``Rx(roll) ∘ Ry(pitch) ∘ Rz(yaw)``."""
        return cls(Vector3.ZERO, euler_angles(roll, pitch, yaw))

    # Basic operations
    def transform(self, vector: VectorLike) -> Vector3:
        """Apply the map to *vector*: ``R·vector + t``."""
        return self.rotation.product(as_vector(vector)) + self.translation

    def compose(self, other: Isometry) -> Isometry:
        """Self ∘ other (apply *other* first, then self)."""
        return Isometry(
            self.rotation.product(other.translation) + self.translation,
            self.rotation.product(other.rotation),
        )

    def inverse(self) -> Isometry:
        """
        Inverse map ``(R⁻¹, -(R⁻¹·t))``.

        Uses the general matrix inverse rather than the transpose, so it also
        holds for non-orthonormal rotations.

        Raises:
            NonInvertible: if ``abs(det(R)) < 1e-6``
        """
        inverse_rotation = self.rotation.inverse()
        return Isometry(-inverse_rotation.product(self.translation), inverse_rotation)

    def __mul__(self, other):
        if isinstance(other, Isometry):
            return self.compose(other)
        if isinstance(other, Vector3):
            return self.transform(other)
        return NotImplemented

    def __imul__(self, other: Isometry) -> Isometry:
        # iso *= v would rebind iso to a Vector3 through the __mul__ fallback.
        if isinstance(other, Vector3):
            raise TypeError("in-place multiplication of Isometry by Vector3 is not supported")
        if not isinstance(other, Isometry):
            return NotImplemented
        composed = self.compose(other)
        self.translation = composed.translation
        self.rotation = composed.rotation
        return self

    # Comparison
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Isometry):
            return NotImplemented
        return self.rotation == other.rotation and self.translation == other.translation

    def isclose(self, other: Isometry, atol: float = DEFAULT_TOLERANCE) -> bool:
        return self.rotation.isclose(other.rotation, atol) and self.translation.isclose(
            other.translation, atol
        )

    # Copies and interop
    def copy(self) -> Isometry:
        return Isometry(self.translation, self.rotation)

    __copy__ = copy

    def __deepcopy__(self, memo) -> Isometry:
        return self.copy()

    def to_homogeneous(self) -> np.ndarray:
        """(4, 4) homogeneous matrix ``[[R, t], [0, 0, 0, 1]]``."""
        T = np.eye(4, dtype=DTYPE)
        T[:3, :3] = self.rotation.to_numpy()
        T[:3, 3] = self.translation.to_numpy()
        return T

    def __str__(self) -> str:
        return (
            f"[T: {self.translation.format(ISOMETRY_PRECISION)}, "
            f"R:{self.rotation.format(ISOMETRY_PRECISION)}]"
        )
