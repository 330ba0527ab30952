"""
scene_camera - Cameras for declarative 3D scene views

Projection and orientation math for scene cameras, plus the environment
values a rendering layer reads every frame.

Components:
    - Geometry: Vector3, Euler and rotation conversions
    - Camera: Orthographic/perspective cameras, look-at, view transforms
    - Environment: Immutable store for the active camera, IBL and skybox
    - Utils: Validation, screen projection and debug helpers

Example:
    >>> from scene_camera import PerspectiveCamera, looking_at, view_matrix
    >>>
    >>> # Setup camera
    >>> camera = looking_at(PerspectiveCamera(position=(0, 2, 5)), center=(0, 0, 0))
    >>>
    >>> # Per frame
    >>> proj = camera.projection_matrix((1920, 1080))
    >>> view = view_matrix(camera)
"""

__version__ = "1.0.0"

# Errors
from .errors import (
    CameraError,
    InvalidViewport,
    DegenerateOrientation,
    InvalidCameraParameters,
)

# Geometry
from .geometry import Vector3, Euler, Viewport

# Camera
from .camera import (
    Camera,
    OrthographicCamera,
    PerspectiveCamera,
    animatable_data,
    with_animatable_data,
    build_orthographic_projection_matrix,
    build_perspective_projection_matrix,
    fov_from_projection_matrix,
    build_lookat_rotation,
    build_lookat_camera_pose,
    look_at,
    looking_at,
    camera_to_world,
    view_matrix,
    view_projection_matrix,
    forward_vector,
    project_points,
    load_config,
    camera_from_config,
    camera_to_config,
    make_matrices_from_config,
)

# Environment
from .environment import (
    EnvironmentKey,
    EnvironmentValues,
    CAMERA_KEY,
    IBL_KEY,
    SKYBOX_KEY,
)

# Utils
from .utils import (
    project_points_to_screen,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",

    # Errors
    "CameraError",
    "InvalidViewport",
    "DegenerateOrientation",
    "InvalidCameraParameters",

    # Geometry
    "Vector3",
    "Euler",
    "Viewport",

    # Camera
    "Camera",
    "OrthographicCamera",
    "PerspectiveCamera",
    "animatable_data",
    "with_animatable_data",
    "build_orthographic_projection_matrix",
    "build_perspective_projection_matrix",
    "fov_from_projection_matrix",
    "build_lookat_rotation",
    "build_lookat_camera_pose",
    "look_at",
    "looking_at",
    "camera_to_world",
    "view_matrix",
    "view_projection_matrix",
    "forward_vector",
    "project_points",
    "load_config",
    "camera_from_config",
    "camera_to_config",
    "make_matrices_from_config",

    # Environment
    "EnvironmentKey",
    "EnvironmentValues",
    "CAMERA_KEY",
    "IBL_KEY",
    "SKYBOX_KEY",

    # Utils
    "project_points_to_screen",
    "debug_print",
    "is_debug_enabled",
]
