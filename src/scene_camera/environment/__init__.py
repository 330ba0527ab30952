"""Environment values (active camera, IBL and skybox sources)."""

from .values import (
    EnvironmentKey,
    EnvironmentValues,
    CAMERA_KEY,
    IBL_KEY,
    SKYBOX_KEY,
)

__all__ = [
    "EnvironmentKey",
    "EnvironmentValues",
    "CAMERA_KEY",
    "IBL_KEY",
    "SKYBOX_KEY",
]
