"""Camera value types."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable
import math
import numpy as np

from ..errors import InvalidCameraParameters
from ..geometry.types import Vector3, Euler
from ..utils.validation import validate_viewport, validate_clip_planes
from ..utils.debug import debug_matrix_info
from .projection import (
    build_orthographic_projection_matrix,
    build_perspective_projection_matrix,
)


DEFAULT_POSITION = Vector3(0.0, 0.0, 2.0)
DEFAULT_NEAR = 0.1
DEFAULT_FAR = 100.0
DEFAULT_SCALE = 1.0
DEFAULT_FOV_DEGREES = 60.0


@runtime_checkable
class Camera(Protocol):
    """
    Capability set shared by every camera.

    `is_rotating` is advisory state for the renderer (e.g. suppress
    recentring while the user drags); it never enters the projection math.
    """
    position: Vector3
    rotation: Euler
    is_rotating: bool

    def projection_matrix(self, viewport) -> np.ndarray:
        ...


def _coerce_pose(self, name, value):
    # position/rotation stay flat immutable tuples, whatever was assigned
    if name == "position":
        value = Vector3.of(value)
    elif name == "rotation":
        value = Euler.of(value)
    object.__setattr__(self, name, value)


@dataclass
class OrthographicCamera:
    """
    Camera with orthographic projection.

    Attributes:
        position: Camera position in world space
        rotation: Camera orientation (XYZ Euler, radians)
        near, far: Clip distances, near < far
        scale: Half-height of the view volume, > 0
        is_rotating: Advisory flag for the renderer
    """
    position: Vector3 = DEFAULT_POSITION
    rotation: Euler = field(default_factory=Euler)
    near: float = DEFAULT_NEAR
    far: float = DEFAULT_FAR
    scale: float = DEFAULT_SCALE
    is_rotating: bool = False

    __setattr__ = _coerce_pose

    def __post_init__(self):
        self.near = float(self.near)
        self.far = float(self.far)
        self.scale = float(self.scale)
        self.validate()

    def validate(self):
        validate_clip_planes(self.near, self.far)
        if not (math.isfinite(self.scale) and self.scale > 0.0):
            raise InvalidCameraParameters(f"scale must be > 0, got {self.scale}")

    def copy(self) -> 'OrthographicCamera':
        return replace(self)

    def projection_matrix(self, viewport) -> np.ndarray:
        """
        Orthographic projection for the given viewport.

        aspect = (w / h) * scale; the volume spans [-aspect, aspect]
        horizontally and [-scale, scale] vertically.
        """
        viewport = validate_viewport(viewport)
        self.validate()
        aspect = viewport.aspect * self.scale
        P = build_orthographic_projection_matrix(
            -aspect, aspect, -self.scale, self.scale, self.near, self.far
        )
        debug_matrix_info("ortho_proj", P)
        return P


@dataclass
class PerspectiveCamera:
    """
    Camera with perspective projection.

    Attributes:
        position: Camera position in world space
        rotation: Camera orientation (XYZ Euler, radians)
        fov: Vertical field of view in degrees, 0 < fov < 180
        near, far: Clip distances, 0 < near < far
        is_rotating: Advisory flag for the renderer
    """
    position: Vector3 = DEFAULT_POSITION
    rotation: Euler = field(default_factory=Euler)
    fov: float = DEFAULT_FOV_DEGREES
    near: float = DEFAULT_NEAR
    far: float = DEFAULT_FAR
    is_rotating: bool = False

    __setattr__ = _coerce_pose

    def __post_init__(self):
        self.fov = float(self.fov)
        self.near = float(self.near)
        self.far = float(self.far)
        self.validate()

    @property
    def fov_radians(self) -> float:
        return math.radians(self.fov)

    def validate(self):
        if not 0.0 < self.fov < 180.0:
            raise InvalidCameraParameters(f"fov must be in (0, 180) degrees, got {self.fov}")
        validate_clip_planes(self.near, self.far, require_positive=True)

    def copy(self) -> 'PerspectiveCamera':
        return replace(self)

    def projection_matrix(self, viewport) -> np.ndarray:
        """Perspective projection for the given viewport (aspect = w / h)."""
        viewport = validate_viewport(viewport)
        self.validate()
        P = build_perspective_projection_matrix(
            self.fov_radians, viewport.aspect, self.near, self.far
        )
        debug_matrix_info("perspective_proj", P)
        return P


def animatable_data(camera: Camera) -> np.ndarray:
    """
    Flat (6,) array [px, py, pz, rx, ry, rz] for interpolating a camera.

    Only position and rotation animate; projection parameters are static.
    """
    return np.array(tuple(camera.position) + tuple(camera.rotation), dtype=np.float64)


def with_animatable_data(camera: Camera, data) -> Camera:
    """Copy of `camera` with position/rotation taken from a (6,) array."""
    data = np.asarray(data, dtype=np.float64)
    if data.shape != (6,):
        raise ValueError(f"Animatable data must be (6,), got {data.shape}")
    return replace(camera, position=data[:3], rotation=data[3:])
