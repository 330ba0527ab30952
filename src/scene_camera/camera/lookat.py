"""Look-at camera orientation."""

from __future__ import annotations
from typing import Optional, TypeVar
import copy
import numpy as np

from ..errors import DegenerateOrientation
from ..geometry.types import Euler
from ..geometry.rotation import rotation_matrix_to_quaternion
from ..utils.debug import debug_print
from .cameras import Camera


EPSILON_FORWARD = 1e-12
EPSILON_PARALLEL = 1e-6

DEFAULT_UP = (0.0, 1.0, 0.0)

C = TypeVar("C", bound=Camera)


def build_lookat_rotation(
    eye: np.ndarray,
    target: np.ndarray,
    up: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Build the camera-to-world rotation that points a camera at `target`.

    Constructs an OpenGL-style camera coordinate system:
        -Z = forward (eye -> target)
        +X = right
        +Y = up

    The output matrix columns are [right, true_up, -forward].

    Args:
        eye: (3,) Camera position in world coordinates
        target: (3,) Look-at point in world coordinates
        up: (3,) World 'up' direction hint (default: Y-up)
            Note: This is NOT the camera's up direction, but a world-space
            hint to define the camera's roll.

    Returns:
        R: (3, 3) rotation matrix (float64)

    Raises:
        DegenerateOrientation: If eye and target coincide, or up is zero

    Notes:
        - Right-handed coordinate system
        - If 'forward' and 'up' are parallel, an alternative up vector is chosen
    """
    if up is None:
        up = DEFAULT_UP

    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    # Step 1: Compute forward direction (camera -Z axis)
    forward = target - eye
    forward_norm = np.linalg.norm(forward)

    if not forward_norm >= EPSILON_FORWARD:
        raise DegenerateOrientation(
            f"Eye and target positions are too close (degenerate camera): {eye.tolist()}"
        )

    up_norm = np.linalg.norm(up)
    if not up_norm >= EPSILON_FORWARD:
        raise DegenerateOrientation("Up vector has zero length")

    forward = forward / forward_norm

    # Step 2: Compute right direction (camera X-axis)
    right = np.cross(forward, up / up_norm)
    right_norm = np.linalg.norm(right)

    # Handle degenerate case: forward and up are parallel
    if right_norm < EPSILON_PARALLEL:
        if abs(np.dot(forward, [0.0, 0.0, 1.0])) < 0.999:
            alt_up = np.array([0.0, 0.0, 1.0])
        else:
            alt_up = np.array([1.0, 0.0, 0.0])
        debug_print(f"[lookat] forward {forward.tolist()} parallel to up, "
                    f"using {alt_up.tolist()} instead")

        right = np.cross(forward, alt_up)
        right_norm = np.linalg.norm(right)

    right = right / right_norm

    # Step 3: right x forward is already unit length
    true_up = np.cross(right, forward)

    return np.stack([right, true_up, -forward], axis=1)


def build_lookat_camera_pose(
    eye: np.ndarray,
    target: np.ndarray,
    up: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Build camera-to-world (c2w) matrix from look-at parameters.

    Returns:
        c2w: (4, 4) float32, columns [right, up, -forward, position]
    """
    c2w = np.eye(4, dtype=np.float32)
    c2w[:3, :3] = build_lookat_rotation(eye, target, up)
    c2w[:3, 3] = np.asarray(eye, dtype=np.float32)
    return c2w


def look_at(camera: Camera, center, up=DEFAULT_UP) -> None:
    """
    Orient `camera` towards `center` in place.

    The rotation is left unchanged when the orientation is degenerate.
    """
    R = build_lookat_rotation(np.asarray(camera.position), center, up)
    camera.rotation = Euler.from_quaternion(rotation_matrix_to_quaternion(R))


def looking_at(camera: C, center, up=DEFAULT_UP) -> C:
    """Return a copy of `camera` oriented towards `center`."""
    oriented = copy.copy(camera)
    look_at(oriented, center, up)
    return oriented
