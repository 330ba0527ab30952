"""Camera system: value types, projection, look-at and view transforms."""

from .cameras import (
    Camera,
    OrthographicCamera,
    PerspectiveCamera,
    animatable_data,
    with_animatable_data,
)
from .projection import (
    build_orthographic_projection_matrix,
    build_perspective_projection_matrix,
    fov_from_projection_matrix,
    aspect_from_projection_matrix,
)
from .lookat import (
    build_lookat_rotation,
    build_lookat_camera_pose,
    look_at,
    looking_at,
)
from .view import (
    ensure_4x4_matrix,
    invert_transform,
    camera_to_world,
    view_matrix,
    view_projection_matrix,
    forward_vector,
    up_vector,
    right_vector,
    project_points,
)
from .config import (
    load_config,
    camera_from_config,
    camera_to_config,
    make_matrices_from_config,
)

__all__ = [
    "Camera",
    "OrthographicCamera",
    "PerspectiveCamera",
    "animatable_data",
    "with_animatable_data",
    "build_orthographic_projection_matrix",
    "build_perspective_projection_matrix",
    "fov_from_projection_matrix",
    "aspect_from_projection_matrix",
    "build_lookat_rotation",
    "build_lookat_camera_pose",
    "look_at",
    "looking_at",
    "ensure_4x4_matrix",
    "invert_transform",
    "camera_to_world",
    "view_matrix",
    "view_projection_matrix",
    "forward_vector",
    "up_vector",
    "right_vector",
    "project_points",
    "load_config",
    "camera_from_config",
    "camera_to_config",
    "make_matrices_from_config",
]
