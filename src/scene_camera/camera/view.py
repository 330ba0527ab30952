"""View transforms derived from camera position and rotation."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..utils.projection_2d import project_points_to_screen
from .cameras import Camera


def ensure_4x4_matrix(m) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.

    Args:
        m: Input matrix (4x4 array or flat list of 16 floats)

    Returns:
        4x4 float32 numpy array

    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.asarray(m, dtype=np.float32)

    if M.shape == (16,):
        M = M.reshape(4, 4)

    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )

    return M


def invert_transform(m: np.ndarray) -> np.ndarray:
    """General inverse of a 4x4 transformation matrix (float32)."""
    return np.linalg.inv(ensure_4x4_matrix(m)).astype(np.float32)


def camera_to_world(camera: Camera) -> np.ndarray:
    """
    Camera-to-world (c2w) transform.

    Upper 3x3 is the rotation matrix, last column the position.
    """
    c2w = np.eye(4, dtype=np.float32)
    c2w[:3, :3] = camera.rotation.to_matrix()
    c2w[:3, 3] = camera.position
    return c2w


def view_matrix(camera: Camera) -> np.ndarray:
    """
    World-to-camera (w2c) transform.

    Closed-form rigid inverse [R^T | -R^T p] of `camera_to_world`.
    """
    R = camera.rotation.to_matrix().astype(np.float64)
    p = np.asarray(camera.position, dtype=np.float64)

    w2c = np.eye(4, dtype=np.float64)
    w2c[:3, :3] = R.T
    w2c[:3, 3] = -R.T @ p
    return w2c.astype(np.float32)


def view_projection_matrix(camera: Camera, viewport) -> np.ndarray:
    """Full world-to-clip transform: projection @ view."""
    return camera.projection_matrix(viewport) @ view_matrix(camera)


def forward_vector(camera: Camera) -> np.ndarray:
    """Unit viewing direction in world space (the camera's -Z axis)."""
    return -camera.rotation.to_matrix()[:, 2]


def up_vector(camera: Camera) -> np.ndarray:
    return camera.rotation.to_matrix()[:, 1]


def right_vector(camera: Camera) -> np.ndarray:
    return camera.rotation.to_matrix()[:, 0]


def project_points(camera: Camera, xyz, viewport) -> Tuple[np.ndarray, np.ndarray]:
    """Project world points to screen coordinates through `camera`."""
    return project_points_to_screen(xyz, view_projection_matrix(camera, viewport), viewport)
