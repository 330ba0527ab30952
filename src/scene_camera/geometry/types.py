"""Immutable value types shared by all cameras."""

from __future__ import annotations
from typing import NamedTuple
import numpy as np

from .rotation import (
    euler_to_rotation_matrix,
    rotation_matrix_to_euler,
    rotation_matrix_to_quaternion,
    quaternion_to_rotation_matrix,
)


def _three_floats(v, name: str):
    values = np.asarray(v, dtype=np.float64).reshape(-1)
    if values.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {values.shape}")
    if not np.isfinite(values).all():
        raise ValueError(f"{name} contains NaN or Inf")
    return tuple(float(c) for c in values)


def _value_eq(self, other):
    # a position never equals an orientation; bare tuples still compare by value
    if isinstance(other, (Vector3, Euler)) and type(other) is not type(self):
        return False
    return tuple.__eq__(self, other)


def _value_ne(self, other):
    result = _value_eq(self, other)
    if result is NotImplemented:
        return result
    return not result


class Vector3(NamedTuple):
    """3-component vector (world units)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, v) -> 'Vector3':
        """Coerce a 3-sequence or (3,) array into a Vector3."""
        if isinstance(v, cls):
            return v
        return cls(*_three_floats(v, "Vector3"))

    __eq__ = _value_eq
    __ne__ = _value_ne
    __hash__ = tuple.__hash__

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float32)


class Euler(NamedTuple):
    """
    Orientation as XYZ Euler angles in radians.

    The rotation matrix is R = Rx(x) @ Ry(y) @ Rz(z). Values are replaced
    wholesale, never edited in place, so they interpolate as flat tuples.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __eq__ = _value_eq
    __ne__ = _value_ne
    __hash__ = tuple.__hash__

    @classmethod
    def of(cls, v) -> 'Euler':
        if isinstance(v, cls):
            return v
        return cls(*_three_floats(v, "Euler"))

    @classmethod
    def from_matrix(cls, R: np.ndarray) -> 'Euler':
        return cls(*rotation_matrix_to_euler(R))

    @classmethod
    def from_quaternion(cls, q) -> 'Euler':
        """Build from an XYZW quaternion."""
        return cls.from_matrix(quaternion_to_rotation_matrix(q))

    def to_matrix(self) -> np.ndarray:
        """(3, 3) float32 rotation matrix."""
        return euler_to_rotation_matrix(self).astype(np.float32)

    def to_quaternion(self) -> np.ndarray:
        """(4,) XYZW quaternion."""
        return rotation_matrix_to_quaternion(euler_to_rotation_matrix(self))


class Viewport(NamedTuple):
    """Rendering surface size in pixels or logical units."""
    width: float
    height: float

    @property
    def aspect(self) -> float:
        """Width / height."""
        return self.width / self.height
