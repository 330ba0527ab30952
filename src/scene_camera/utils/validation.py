"""Input validation utilities."""

from __future__ import annotations
import math
import numpy as np

from ..errors import InvalidViewport, InvalidCameraParameters
from ..geometry.types import Viewport


def validate_viewport(size) -> Viewport:
    """
    Validate a viewport size.

    Args:
        size: (width, height) pair, or any object with `width`/`height`

    Returns:
        Viewport with float dimensions

    Raises:
        InvalidViewport: If either dimension is non-positive or not finite
    """
    if hasattr(size, "width") and hasattr(size, "height"):
        width, height = size.width, size.height
    else:
        try:
            width, height = size
        except (TypeError, ValueError):
            raise InvalidViewport(size, None) from None

    try:
        width = float(width)
        height = float(height)
    except (TypeError, ValueError):
        raise InvalidViewport(width, height) from None

    if not (math.isfinite(width) and math.isfinite(height)):
        raise InvalidViewport(width, height)
    if width <= 0.0 or height <= 0.0:
        raise InvalidViewport(width, height)

    return Viewport(width, height)


def validate_clip_planes(near: float, far: float, require_positive: bool = False):
    """
    Validate near/far clip distances.

    Raises:
        InvalidCameraParameters: If near >= far, values are not finite, or
            (with require_positive) near is not > 0
    """
    if not (math.isfinite(near) and math.isfinite(far)):
        raise InvalidCameraParameters(f"near/far must be finite, got near={near}, far={far}")
    if near >= far:
        raise InvalidCameraParameters(f"near must be < far, got near={near}, far={far}")
    if require_positive and near <= 0.0:
        raise InvalidCameraParameters(f"near must be > 0, got {near}")


def validate_points(xyz: np.ndarray):
    """
    Validate world-space points.

    Raises:
        ValueError: If points are not (N, 3)
    """
    if xyz.ndim != 2 or xyz.shape[1] != 3:
        raise ValueError(f"xyz must be (N, 3), got {xyz.shape}")


def validate_matrix(m: np.ndarray, name: str = "matrix"):
    """
    Validate a 4x4 transform.

    Raises:
        ValueError: If the matrix is not 4x4 or contains NaN/Inf
    """
    if m.shape != (4, 4):
        raise ValueError(f"{name} must be (4, 4), got {m.shape}")
    if not np.isfinite(m).all():
        raise ValueError(f"{name} contains NaN or Inf")
