"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os
import numpy as np

DEBUG_ENV_VAR = "SCENE_CAMERA_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_matrix_stats(m: np.ndarray) -> Tuple[float, float, float]:
    """(min, max, mean) of a matrix as floats."""
    m = np.asarray(m)
    return float(m.min()), float(m.max()), float(m.mean())


def debug_matrix_info(name: str, m: np.ndarray):
    """Print debug information about a matrix."""
    if is_debug_enabled():
        m = np.asarray(m)
        mn, mx, mean = get_matrix_stats(m)
        finite = bool(np.isfinite(m).all())
        print(f"[{name}] shape={m.shape} dtype={m.dtype} "
              f"min={mn:.4f} max={mx:.4f} mean={mean:.4f} finite={finite}")
