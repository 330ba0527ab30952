from pathlib import Path

import numpy as np
import pytest

from scene_camera import (
    CAMERA_KEY,
    IBL_KEY,
    SKYBOX_KEY,
    EnvironmentKey,
    EnvironmentValues,
    OrthographicCamera,
    PerspectiveCamera,
    Vector3,
    forward_vector,
)


def test_defaults():
    env = EnvironmentValues()

    assert env.camera == PerspectiveCamera()
    assert env.ibl is None
    assert env.skybox is None
    assert CAMERA_KEY not in env


def test_default_camera_is_fresh_per_read():
    env = EnvironmentValues()
    camera = env.camera
    camera.position = (9.0, 9.0, 9.0)

    assert env.camera.position == Vector3(0.0, 0.0, 2.0)


def test_with_camera_returns_new_store():
    base = EnvironmentValues()
    ortho = OrthographicCamera(scale=3.0)
    env = base.with_camera(ortho)

    assert env.camera == ortho
    assert CAMERA_KEY in env
    assert base.camera == PerspectiveCamera()


def test_stored_camera_is_a_copy():
    camera = PerspectiveCamera()
    env = EnvironmentValues().with_camera(camera)
    camera.position = (1.0, 1.0, 1.0)

    assert env.camera.position == Vector3(0.0, 0.0, 2.0)


def test_with_camera_rejects_non_cameras():
    with pytest.raises(TypeError):
        EnvironmentValues().with_camera("camera")


def test_sources_are_normalized_to_strings():
    env = EnvironmentValues().with_ibl(Path("assets") / "studio.hdr").with_skybox("sky.png")

    assert env.ibl == str(Path("assets") / "studio.hdr")
    assert env.skybox == "sky.png"
    assert env[IBL_KEY] == env.ibl
    assert env.with_skybox(None).skybox is None


def test_update_by_name():
    env = EnvironmentValues().update(camera=OrthographicCamera(), skybox="sky.png")

    assert isinstance(env.camera, OrthographicCamera)
    assert env.get(SKYBOX_KEY) == "sky.png"

    with pytest.raises(KeyError):
        env.update(exposure=1.0)


def test_custom_key():
    exposure = EnvironmentKey("exposure", default=1.0)
    env = EnvironmentValues()

    assert env[exposure] == 1.0
    assert env.set(exposure, 2.5)[exposure] == 2.5
    assert env[exposure] == 1.0


def test_equality():
    assert EnvironmentValues() == EnvironmentValues()
    assert EnvironmentValues().with_ibl("a.hdr") == EnvironmentValues().with_ibl("a.hdr")
    assert EnvironmentValues().with_ibl("a.hdr") != EnvironmentValues()


def test_from_config():
    env = EnvironmentValues.from_config({
        "camera": {
            "type": "perspective",
            "position": [0, 0, 5],
            "fov": 45,
            "lookat": {"target": [0, 0, 0]},
        },
        "ibl": "studio.hdr",
        "skybox": None,
    })

    assert env.camera.fov == 45.0
    np.testing.assert_allclose(forward_vector(env.camera), [0.0, 0.0, -1.0], atol=1e-6)
    assert env.ibl == "studio.hdr"
    assert env.skybox is None
    assert SKYBOX_KEY not in env


def test_to_dict_includes_defaults():
    values = EnvironmentValues().with_ibl("studio.hdr").to_dict()

    assert values == {"camera": PerspectiveCamera(), "ibl": "studio.hdr", "skybox": None}
