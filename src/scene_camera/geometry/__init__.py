"""Vectors, Euler angles and rotation conversions."""

from .types import Vector3, Euler, Viewport
from .rotation import (
    euler_to_rotation_matrix,
    rotation_matrix_to_euler,
    rotation_matrix_to_quaternion,
    quaternion_to_rotation_matrix,
)

__all__ = [
    "Vector3",
    "Euler",
    "Viewport",
    "euler_to_rotation_matrix",
    "rotation_matrix_to_euler",
    "rotation_matrix_to_quaternion",
    "quaternion_to_rotation_matrix",
]
