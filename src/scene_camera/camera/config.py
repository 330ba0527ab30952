"""Camera configuration parser."""

from __future__ import annotations
from pathlib import Path
from typing import Tuple, Dict, Any, Union
import numpy as np
from omegaconf import OmegaConf

from ..errors import InvalidCameraParameters
from ..utils.debug import debug_print
from .cameras import (
    Camera,
    OrthographicCamera,
    PerspectiveCamera,
    DEFAULT_POSITION,
    DEFAULT_NEAR,
    DEFAULT_FAR,
    DEFAULT_SCALE,
    DEFAULT_FOV_DEGREES,
)
from .lookat import look_at, DEFAULT_UP
from .view import view_matrix


CAMERA_TYPES = ("perspective", "orthographic")


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML scene/camera configuration into a plain dict.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    cfg = OmegaConf.load(path)
    debug_print(f"[config] loaded {path}")
    return OmegaConf.to_container(cfg, resolve=True)


def _as_plain_dict(cfg) -> Dict[str, Any]:
    if OmegaConf.is_config(cfg):
        return OmegaConf.to_container(cfg, resolve=True)
    return dict(cfg)


def camera_from_config(camera_cfg: Dict[str, Any]) -> Camera:
    """
    Build a camera from a configuration dictionary.

    Args:
        camera_cfg: Camera configuration (dict or OmegaConf node) with keys:
            Optional:
                - type: 'perspective' (default) or 'orthographic'
                - position: Camera position [x, y, z] (default: [0, 0, 2])
                - rotation: Euler angles [x, y, z] in radians
                - near, far: Clipping planes (default: 0.1, 100.0)
                - fov: Vertical field of view in degrees (perspective)
                - scale: View volume half-height (orthographic)
                - lookat: Look-at parameters (dict)
                    - target: Look-at point [x, y, z] (default: origin)
                    - up: Up direction hint [x, y, z] (default: [0, 1, 0])
                Note: If 'lookat' is provided, 'rotation' is ignored

    Returns:
        OrthographicCamera or PerspectiveCamera

    Raises:
        InvalidCameraParameters: Unknown type or invalid field values

    Example:
        >>> cam = camera_from_config({
        ...     "type": "perspective",
        ...     "position": [0, 2, 5],
        ...     "fov": 45,
        ...     "lookat": {"target": [0, 0, 0]},
        ... })
    """
    cfg = _as_plain_dict(camera_cfg)
    camera_type = str(cfg.get("type", "perspective")).lower()

    position = cfg.get("position", DEFAULT_POSITION)
    rotation = cfg.get("rotation", (0.0, 0.0, 0.0))
    near = float(cfg.get("near", DEFAULT_NEAR))
    far = float(cfg.get("far", DEFAULT_FAR))

    if camera_type == "perspective":
        camera = PerspectiveCamera(
            position=position,
            rotation=rotation,
            fov=float(cfg.get("fov", DEFAULT_FOV_DEGREES)),
            near=near,
            far=far,
        )
    elif camera_type == "orthographic":
        camera = OrthographicCamera(
            position=position,
            rotation=rotation,
            near=near,
            far=far,
            scale=float(cfg.get("scale", DEFAULT_SCALE)),
        )
    else:
        raise InvalidCameraParameters(
            f"Unknown camera type: {camera_type} (expected one of {CAMERA_TYPES})"
        )

    lookat_cfg = cfg.get("lookat")
    if lookat_cfg is not None:
        if "rotation" in cfg:
            debug_print("[config] both 'rotation' and 'lookat' given, using 'lookat'")
        look_at(
            camera,
            lookat_cfg.get("target", [0.0, 0.0, 0.0]),
            lookat_cfg.get("up", DEFAULT_UP),
        )

    return camera


def camera_to_config(camera: Camera) -> Dict[str, Any]:
    """Convert a camera to a plain dictionary accepted by `camera_from_config`."""
    cfg = {
        "position": list(camera.position),
        "rotation": list(camera.rotation),
    }
    if isinstance(camera, OrthographicCamera):
        cfg.update(type="orthographic", near=camera.near, far=camera.far, scale=camera.scale)
    elif isinstance(camera, PerspectiveCamera):
        cfg.update(type="perspective", fov=camera.fov, near=camera.near, far=camera.far)
    else:
        raise InvalidCameraParameters(f"Unsupported camera type: {type(camera).__name__}")
    return cfg


def make_matrices_from_config(
    camera_cfg: Dict[str, Any],
    viewport
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Build rendering matrices from a camera configuration.

    Returns:
        Tuple of:
            - view_matrix (4x4 float32): World-to-view transform
            - proj_matrix (4x4 float32): Projection for `viewport`
            - camera_position (3, float32): Camera position in world space
    """
    camera = camera_from_config(camera_cfg)
    return (
        view_matrix(camera),
        camera.projection_matrix(viewport),
        camera.position.as_array(),
    )
