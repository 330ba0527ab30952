"""Scene environment values passed down to the rendering layer."""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional
import copy
import os

from ..camera.cameras import Camera, PerspectiveCamera
from ..camera.config import camera_from_config
from ..utils.debug import debug_print


@dataclass(frozen=True)
class EnvironmentKey:
    """
    Symbolic key with a default value.

    Attributes:
        name: Key name, also used by `EnvironmentValues.update`
        default: Default value, returned when nothing was set
        default_factory: Zero-argument callable producing the default;
            takes precedence over `default`
    """
    name: str
    default: Any = None
    default_factory: Optional[Callable[[], Any]] = None

    def make_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


CAMERA_KEY = EnvironmentKey("camera", default_factory=PerspectiveCamera)
IBL_KEY = EnvironmentKey("ibl")
SKYBOX_KEY = EnvironmentKey("skybox")

BUILTIN_KEYS = {key.name: key for key in (CAMERA_KEY, IBL_KEY, SKYBOX_KEY)}


def _normalize_source(source) -> Optional[str]:
    if source is None:
        return None
    return os.fspath(source)


class EnvironmentValues:
    """
    Immutable key/value store for the active camera and lighting sources.

    Every setter returns a new instance; the receiver is never modified,
    so a store can be handed down a call stack and specialised locally.

    Example:
        >>> env = EnvironmentValues().with_camera(OrthographicCamera(scale=2))
        >>> env.camera.scale
        2.0
        >>> EnvironmentValues().camera == PerspectiveCamera()
        True
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[EnvironmentKey, Any]] = None):
        self._values = MappingProxyType(dict(values or {}))

    def __getitem__(self, key: EnvironmentKey) -> Any:
        return self.get(key)

    def __contains__(self, key: EnvironmentKey) -> bool:
        """True when `key` was explicitly set."""
        return key in self._values

    def __eq__(self, other):
        if not isinstance(other, EnvironmentValues):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __repr__(self):
        items = ", ".join(f"{k.name}={v!r}" for k, v in self._values.items())
        return f"EnvironmentValues({items})"

    def get(self, key: EnvironmentKey) -> Any:
        if key in self._values:
            return self._values[key]
        return key.make_default()

    def set(self, key: EnvironmentKey, value: Any) -> 'EnvironmentValues':
        values = dict(self._values)
        values[key] = value
        return EnvironmentValues(values)

    def update(self, **values) -> 'EnvironmentValues':
        """
        Set several built-in keys by name.

        Raises:
            KeyError: If a name is not a built-in key
        """
        env = self
        for name, value in values.items():
            if name not in BUILTIN_KEYS:
                raise KeyError(f"Unknown environment key: {name}")
            if name == CAMERA_KEY.name:
                env = env.with_camera(value)
            else:
                env = env.set(BUILTIN_KEYS[name], _normalize_source(value))
        return env

    # Camera

    @property
    def camera(self) -> Camera:
        return self.get(CAMERA_KEY)

    def with_camera(self, camera: Camera) -> 'EnvironmentValues':
        """Store a copy of `camera` as the active camera."""
        if not isinstance(camera, Camera):
            raise TypeError(f"Expected a camera, got {type(camera).__name__}")
        return self.set(CAMERA_KEY, copy.copy(camera))

    # Image-based lighting / skybox sources

    @property
    def ibl(self) -> Optional[str]:
        return self.get(IBL_KEY)

    def with_ibl(self, source) -> 'EnvironmentValues':
        return self.set(IBL_KEY, _normalize_source(source))

    @property
    def skybox(self) -> Optional[str]:
        return self.get(SKYBOX_KEY)

    def with_skybox(self, source) -> 'EnvironmentValues':
        return self.set(SKYBOX_KEY, _normalize_source(source))

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> 'EnvironmentValues':
        """
        Build a store from a scene configuration.

        Args:
            cfg: Mapping with optional keys:
                - camera: Camera configuration (see `camera_from_config`)
                - ibl: Image-based lighting source (path or URL)
                - skybox: Skybox source (path or URL)
        """
        env = cls()
        camera_cfg = cfg.get("camera")
        if camera_cfg is not None:
            env = env.with_camera(camera_from_config(camera_cfg))
        if cfg.get("ibl") is not None:
            env = env.with_ibl(cfg["ibl"])
        if cfg.get("skybox") is not None:
            env = env.with_skybox(cfg["skybox"])
        debug_print(f"[environment] {env!r}")
        return env

    def to_dict(self) -> Dict[str, Any]:
        """Effective values (defaults included) keyed by name."""
        return {name: self.get(key) for name, key in BUILTIN_KEYS.items()}
