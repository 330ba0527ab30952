import copy

import numpy as np
import pytest

from scene_camera import (
    Camera,
    Euler,
    OrthographicCamera,
    PerspectiveCamera,
    InvalidCameraParameters,
    Vector3,
    Viewport,
    animatable_data,
    with_animatable_data,
)
from scene_camera.utils.validation import validate_viewport


def test_defaults():
    ortho = OrthographicCamera()
    assert ortho.position == Vector3(0.0, 0.0, 2.0)
    assert ortho.rotation == Euler()
    assert (ortho.near, ortho.far, ortho.scale) == (0.1, 100.0, 1.0)
    assert ortho.is_rotating is False

    persp = PerspectiveCamera()
    assert persp.position == Vector3(0.0, 0.0, 2.0)
    assert persp.fov == 60.0
    assert persp.fov_radians == pytest.approx(np.pi / 3)
    assert (persp.near, persp.far) == (0.1, 100.0)


@pytest.mark.parametrize("camera", [OrthographicCamera(), PerspectiveCamera()])
def test_cameras_satisfy_capability_set(camera):
    assert isinstance(camera, Camera)


def test_plain_object_is_not_a_camera():
    assert not isinstance(object(), Camera)


@pytest.mark.parametrize("make", [OrthographicCamera, PerspectiveCamera])
def test_copy_is_isolated(make):
    original = make()
    duplicate = original.copy()
    duplicate.position = (1.0, 2.0, 3.0)
    duplicate.rotation = (0.1, 0.2, 0.3)

    assert original.position == Vector3(0.0, 0.0, 2.0)
    assert original.rotation == Euler()
    assert duplicate != original

    shallow = copy.copy(original)
    shallow.position = (5.0, 5.0, 5.0)
    assert original.position == Vector3(0.0, 0.0, 2.0)


def test_pose_assignment_is_coerced():
    camera = PerspectiveCamera(position=[1, 2, 3], rotation=np.zeros(3))
    assert isinstance(camera.position, Vector3)
    assert isinstance(camera.rotation, Euler)
    assert camera.position == (1.0, 2.0, 3.0)

    camera.position = np.array([4.0, 5.0, 6.0])
    assert camera.position == Vector3(4.0, 5.0, 6.0)


def test_bad_position_rejected():
    with pytest.raises(ValueError):
        PerspectiveCamera(position=(1.0, 2.0))
    with pytest.raises(ValueError):
        OrthographicCamera(position=(float("nan"), 0.0, 0.0))


def test_equality_compares_all_fields():
    assert PerspectiveCamera() == PerspectiveCamera()
    assert PerspectiveCamera(fov=45.0) != PerspectiveCamera()
    assert OrthographicCamera(scale=2.0) != OrthographicCamera()


@pytest.mark.parametrize("kwargs", [
    {"near": 10.0, "far": 1.0},
    {"near": 1.0, "far": 1.0},
    {"scale": 0.0},
    {"scale": -1.0},
    {"far": float("inf")},
])
def test_orthographic_invariants(kwargs):
    with pytest.raises(InvalidCameraParameters):
        OrthographicCamera(**kwargs)


def test_orthographic_allows_negative_near():
    camera = OrthographicCamera(near=-10.0, far=10.0)
    assert camera.projection_matrix((100, 100)).shape == (4, 4)


@pytest.mark.parametrize("kwargs", [
    {"fov": 0.0},
    {"fov": 180.0},
    {"fov": -30.0},
    {"near": 0.0},
    {"near": -0.1},
    {"near": 5.0, "far": 1.0},
])
def test_perspective_invariants(kwargs):
    with pytest.raises(InvalidCameraParameters):
        PerspectiveCamera(**kwargs)


def test_animatable_data_round_trip():
    camera = PerspectiveCamera(position=(1.0, 2.0, 3.0), rotation=(0.1, 0.2, 0.3), fov=45.0)
    data = animatable_data(camera)
    np.testing.assert_allclose(data, [1.0, 2.0, 3.0, 0.1, 0.2, 0.3])

    moved = with_animatable_data(camera, data * 2.0)
    assert moved.position == Vector3(2.0, 4.0, 6.0)
    assert moved.rotation == pytest.approx((0.2, 0.4, 0.6))
    assert moved.fov == 45.0
    assert camera.position == Vector3(1.0, 2.0, 3.0)


def test_animatable_data_interpolates_linearly():
    a = OrthographicCamera(position=(0.0, 0.0, 2.0))
    b = OrthographicCamera(position=(2.0, 0.0, 2.0), rotation=(0.0, 1.0, 0.0))

    mid = with_animatable_data(a, 0.5 * (animatable_data(a) + animatable_data(b)))
    assert mid.position == pytest.approx((1.0, 0.0, 2.0))
    assert mid.rotation == pytest.approx((0.0, 0.5, 0.0))


def test_animatable_data_shape_checked():
    with pytest.raises(ValueError):
        with_animatable_data(PerspectiveCamera(), [0.0, 1.0, 2.0])


def test_position_never_equals_rotation():
    assert Vector3(0.0, 0.0, 0.0) != Euler(0.0, 0.0, 0.0)
    assert not Euler(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)


def test_value_types_compare_with_plain_tuples():
    assert Euler(1.0, 2.0, 3.0) == (1.0, 2.0, 3.0)
    assert (1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)
    assert Vector3.of([1, 2, 3]) == Vector3(1.0, 2.0, 3.0)
    assert Euler(0.1, 0.2, 0.3) != Euler(0.1, 0.2, 0.4)
    assert hash(Euler(1.0, 2.0, 3.0)) == hash((1.0, 2.0, 3.0))


def test_viewport_aspect():
    assert Viewport(4, 2).aspect == 2.0
    assert validate_viewport((1920, 1080)).aspect == pytest.approx(16 / 9)
