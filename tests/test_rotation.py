import numpy as np
import pytest

from scene_camera import Euler
from scene_camera.geometry import (
    euler_to_rotation_matrix,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_euler,
    rotation_matrix_to_quaternion,
)


@pytest.mark.parametrize("angles", [
    (0.0, 0.0, 0.0),
    (0.3, -0.2, 0.5),
    (-1.2, 0.7, 2.5),
    (3.0, -1.4, -3.0),
])
def test_euler_matrix_round_trip(angles):
    R = euler_to_rotation_matrix(angles)
    np.testing.assert_allclose(rotation_matrix_to_euler(R), angles, atol=1e-9)


@pytest.mark.parametrize("angles", [(0.3, -0.2, 0.5), (2.0, 1.0, -0.5)])
def test_quaternion_round_trip(angles):
    euler = Euler(*angles)
    back = Euler.from_quaternion(euler.to_quaternion())
    np.testing.assert_allclose(back, angles, atol=1e-9)


def test_rotation_order_is_xyz():
    x, y, z = 0.4, -0.3, 1.1
    expected = (
        euler_to_rotation_matrix((x, 0.0, 0.0))
        @ euler_to_rotation_matrix((0.0, y, 0.0))
        @ euler_to_rotation_matrix((0.0, 0.0, z))
    )
    np.testing.assert_allclose(euler_to_rotation_matrix((x, y, z)), expected, atol=1e-12)


def test_gimbal_lock_preserves_rotation():
    R = euler_to_rotation_matrix((0.4, np.pi / 2, 0.25))
    recovered = Euler.from_matrix(R)

    assert recovered.z == 0.0
    np.testing.assert_allclose(recovered.to_matrix(), R, atol=1e-6)


def test_half_turn_quaternion_branches():
    for axis in range(3):
        R = -np.eye(3)
        R[axis, axis] = 1.0
        q = rotation_matrix_to_quaternion(R)
        expected = np.zeros(4)
        expected[axis] = 1.0
        np.testing.assert_allclose(np.abs(q), expected, atol=1e-9)
        np.testing.assert_allclose(quaternion_to_rotation_matrix(q), R, atol=1e-9)


def test_quaternion_is_normalized_on_input():
    R = quaternion_to_rotation_matrix([0.0, 0.0, 0.0, 5.0])
    np.testing.assert_allclose(R, np.eye(3))


def test_zero_quaternion_raises():
    with pytest.raises(ValueError):
        quaternion_to_rotation_matrix([0.0, 0.0, 0.0, 0.0])


def test_to_matrix_is_float32():
    assert Euler(0.1, 0.2, 0.3).to_matrix().dtype == np.float32


@pytest.mark.parametrize("cos_y", [1e-3, 3e-4, 1e-6])
def test_near_gimbal_keeps_z(cos_y):
    angles = (0.7, np.arccos(cos_y), -0.9)
    R = euler_to_rotation_matrix(angles)
    recovered = rotation_matrix_to_euler(R)

    np.testing.assert_allclose(recovered, angles, atol=1e-8)
    np.testing.assert_allclose(euler_to_rotation_matrix(recovered), R, atol=1e-9)
