"""Rotation conversions between XYZ Euler angles, matrices and quaternions."""

from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np


EPSILON_QUATERNION = 1e-12
EPSILON_GIMBAL = 1e-9


def euler_to_rotation_matrix(angles: Sequence[float]) -> np.ndarray:
    """
    Build a rotation matrix from XYZ Euler angles.

    R = Rx(x) @ Ry(y) @ Rz(z)

    Args:
        angles: (x, y, z) rotation angles in radians

    Returns:
        (3, 3) rotation matrix (float64)
    """
    x, y, z = (float(a) for a in angles)
    cx, sx = np.cos(x), np.sin(x)
    cy, sy = np.cos(y), np.sin(y)
    cz, sz = np.cos(z), np.sin(z)

    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])

    return rx @ ry @ rz


def rotation_matrix_to_euler(R: np.ndarray) -> Tuple[float, float, float]:
    """
    Convert a 3x3 rotation matrix to XYZ Euler angles.

    Args:
        R: (3, 3) rotation matrix

    Returns:
        (x, y, z) angles in radians

    Notes:
        - cos(y) is taken as hypot(R[0, 0], R[0, 1]); only when it vanishes
          (gimbal lock) is z fixed to 0 and the remaining rotation folded into x
    """
    m = np.asarray(R, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"Expected (3, 3) rotation matrix, got {m.shape}")

    cy = np.hypot(m[0, 0], m[0, 1])
    y = np.arctan2(m[0, 2], cy)

    if cy >= EPSILON_GIMBAL:
        x = np.arctan2(-m[1, 2], m[2, 2])
        z = np.arctan2(-m[0, 1], m[0, 0])
    else:
        x = np.arctan2(m[2, 1], m[1, 1])
        z = 0.0

    return float(x), float(y), float(z)


def rotation_matrix_to_quaternion(R: np.ndarray) -> np.ndarray:
    """
    Convert 3x3 rotation matrix to XYZW quaternion.

    Args:
        R: (3, 3) rotation matrix

    Returns:
        (4,) quaternion [x, y, z, w]

    Notes:
        - Uses Shepperd's method for numerical stability
        - Returns normalized quaternion
    """
    R = np.asarray(R, dtype=np.float64)
    trace = np.trace(R)

    if trace > 0.0:
        # w is the largest component
        s = np.sqrt(trace + 1.0) * 2.0
        w = 0.25 * s
        x = (R[2, 1] - R[1, 2]) / s
        y = (R[0, 2] - R[2, 0]) / s
        z = (R[1, 0] - R[0, 1]) / s

    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        # x is the largest component
        s = np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2]) * 2.0
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s

    elif R[1, 1] > R[2, 2]:
        # y is the largest component
        s = np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2]) * 2.0
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s

    else:
        # z is the largest component
        s = np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1]) * 2.0
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    q = np.array([x, y, z, w], dtype=np.float64)
    q /= (np.linalg.norm(q) + EPSILON_QUATERNION)

    return q


def quaternion_to_rotation_matrix(q: Sequence[float]) -> np.ndarray:
    """
    Convert XYZW quaternion to 3x3 rotation matrix.

    Args:
        q: (4,) quaternion [x, y, z, w], normalized on the way in

    Returns:
        (3, 3) rotation matrix (float64)

    Raises:
        ValueError: If the quaternion has zero length
    """
    q = np.asarray(q, dtype=np.float64)
    if q.shape != (4,):
        raise ValueError(f"Expected (4,) quaternion, got {q.shape}")

    norm = np.linalg.norm(q)
    if norm < EPSILON_QUATERNION:
        raise ValueError("Cannot build a rotation from a zero-length quaternion")

    x, y, z, w = q / norm

    return np.array([
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (x * z + y * w)],
        [2.0 * (x * y + z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - x * w)],
        [2.0 * (x * z - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (x * x + y * y)],
    ])
