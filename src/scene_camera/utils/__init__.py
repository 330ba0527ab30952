"""Common utilities for camera math."""

from .conversion import (
    to_numpy_array,
    to_points_array,
)
from .validation import (
    validate_viewport,
    validate_clip_planes,
    validate_points,
    validate_matrix,
)
from .projection_2d import project_points_to_screen
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
    get_matrix_stats,
)

__all__ = [
    # Conversion
    "to_numpy_array",
    "to_points_array",

    # Validation
    "validate_viewport",
    "validate_clip_planes",
    "validate_points",
    "validate_matrix",

    # Projection
    "project_points_to_screen",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
    "get_matrix_stats",
]
