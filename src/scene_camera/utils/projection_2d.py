"""2D projection utilities."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from .conversion import to_points_array
from .validation import validate_points, validate_viewport, validate_matrix

INVALID_SCREEN_COORD = -1e6


def project_points_to_screen(
    xyz,
    view_proj: np.ndarray,
    viewport
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project 3D points to 2D screen coordinates.

    Args:
        xyz: (N, 3) world-space positions
        view_proj: (4, 4) world-to-clip matrix (projection @ view)
        viewport: (width, height) of the target surface

    Returns:
        means2D: (N, 2) screen coordinates (u, v), v grows downward
        valid: (N,) boolean mask for valid projections

    Notes:
        - Points behind the camera (w <= 0) are invalid
        - Invalid points set to (-1e6, -1e6)
        - Uses perspective division (clip space -> NDC -> screen)
    """
    points = to_points_array(xyz)
    validate_points(points)
    view_proj = np.asarray(view_proj, dtype=np.float32)
    validate_matrix(view_proj, "view_proj")
    width, height = validate_viewport(viewport)

    N = points.shape[0]

    # Homogeneous coordinates
    xyz_homogeneous = np.concatenate([
        points,
        np.ones((N, 1), dtype=np.float32)
    ], axis=1)

    clip = xyz_homogeneous @ view_proj.T

    w = clip[:, 3]
    valid = np.isfinite(clip).all(axis=1) & (w > 0)

    ndc = np.full((N, 2), np.nan, dtype=np.float32)
    ndc[valid, 0] = clip[valid, 0] / w[valid]
    ndc[valid, 1] = clip[valid, 1] / w[valid]

    u = (ndc[:, 0] * 0.5 + 0.5) * float(width)
    v = (-ndc[:, 1] * 0.5 + 0.5) * float(height)

    means2D = np.stack([u, v], axis=1).astype(np.float32)
    means2D[~valid] = INVALID_SCREEN_COORD

    return means2D, valid
