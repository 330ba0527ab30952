"""Projection matrix construction."""

from __future__ import annotations
import math
import numpy as np

from ..errors import InvalidCameraParameters


def build_orthographic_projection_matrix(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float
) -> np.ndarray:
    """
    Build OpenGL-style orthographic projection matrix.

    Maps the box [left, right] x [bottom, top] x [-near, -far] in view space
    to the NDC cube [-1, 1]^3.

    Args:
        left, right: Horizontal extent of the view volume
        bottom, top: Vertical extent of the view volume
        near, far: Clip distances along -Z

    Returns:
        4x4 projection matrix (row-major, float32)

    Raises:
        InvalidCameraParameters: If any extent is empty
    """
    if right == left or top == bottom or far == near:
        raise InvalidCameraParameters(
            f"Empty orthographic volume: l={left} r={right} b={bottom} t={top} n={near} f={far}"
        )

    P = np.zeros((4, 4), dtype=np.float32)

    P[0, 0] = 2.0 / (right - left)
    P[1, 1] = 2.0 / (top - bottom)
    P[2, 2] = -2.0 / (far - near)

    P[0, 3] = -(right + left) / (right - left)
    P[1, 3] = -(top + bottom) / (top - bottom)
    P[2, 3] = -(far + near) / (far - near)

    P[3, 3] = 1.0

    return P


def build_perspective_projection_matrix(
    fov: float,
    aspect: float,
    near: float,
    far: float
) -> np.ndarray:
    """
    Build OpenGL-style perspective projection matrix.

    Right-handed view space (camera looks down -Z), NDC depth in [-1, 1],
    clip.w = -z_view.

    Args:
        fov: Vertical field of view (radians)
        aspect: Viewport width / height
        near, far: Clip distances (both > 0)

    Returns:
        4x4 projection matrix (row-major, float32)

    Notes:
        - P[1, 1] = 1 / tan(fov / 2), P[0, 0] = P[1, 1] / aspect
    """
    if not 0.0 < fov < math.pi:
        raise InvalidCameraParameters(f"fov must be in (0, pi) radians, got {fov}")
    if aspect <= 0.0:
        raise InvalidCameraParameters(f"aspect must be > 0, got {aspect}")

    f = 1.0 / math.tan(fov * 0.5)

    P = np.zeros((4, 4), dtype=np.float32)

    P[0, 0] = f / aspect
    P[1, 1] = f

    # Depth encoding: -near -> -1, -far -> +1
    P[2, 2] = (far + near) / (near - far)
    P[2, 3] = (2.0 * far * near) / (near - far)

    # Perspective division: clip.w = -z_view
    P[3, 2] = -1.0

    return P


def fov_from_projection_matrix(P: np.ndarray) -> float:
    """Recover the vertical field of view (radians) from a perspective matrix."""
    return 2.0 * math.atan(1.0 / float(P[1, 1]))


def aspect_from_projection_matrix(P: np.ndarray) -> float:
    """Recover width / height from a perspective matrix."""
    return float(P[1, 1]) / float(P[0, 0])
