"""Type conversion utilities."""

from __future__ import annotations
import numpy as np


def to_numpy_array(x, dtype: np.dtype = np.float32) -> np.ndarray:
    """
    Convert input to NumPy array.

    Args:
        x: Input (numpy array, tuple, list or anything array-like)
        dtype: Target dtype

    Returns:
        NumPy array
    """
    return np.asarray(x, dtype=dtype)


def to_points_array(xyz) -> np.ndarray:
    """
    Convert points to an (N, 3) float32 array.

    A single point of shape (3,) becomes (1, 3); empty input becomes (0, 3).
    """
    points = to_numpy_array(xyz)
    if points.size == 0:
        return points.reshape(0, 3)
    if points.ndim == 1:
        points = points.reshape(1, -1)
    return points
