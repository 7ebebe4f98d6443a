import math

import numpy as np
import pytest

from posegraph.helpers import (
    compute_distance,
    compute_info_matrix,
    extract_theta,
    relative_pose_2d,
)
from posegraph.types import Node2D, Point, Quaternion


def _yaw(angle):
    return Quaternion(0.0, 0.0, math.sin(angle / 2), math.cos(angle / 2))


def _diag_covariance(a, b, c):
    cov = [0.0] * 36
    cov[0], cov[7], cov[35] = a, b, c
    return cov


def test_relative_pose_from_origin_is_absolute_difference():
    result = relative_pose_2d(Node2D(0.0, 0.0, 0.0), Node2D(3.0, 4.0, 0.5))
    np.testing.assert_allclose(result, [3.0, 4.0, 0.5])


def test_relative_pose_expressed_in_rotated_frame():
    result = relative_pose_2d(Node2D(0.0, 0.0, math.pi / 2), Node2D(0.0, 1.0, math.pi / 2))
    np.testing.assert_allclose(result, [1.0, 0.0, 0.0], atol=1e-12)


@pytest.mark.parametrize("from_theta", [-2.0, 0.3, 1.7, 3.0])
def test_relative_pose_preserves_distance(from_theta):
    start = Node2D(1.0, -2.0, from_theta)
    end = Node2D(4.5, 3.0, 0.1)
    result = relative_pose_2d(start, end)
    assert math.hypot(result[0], result[1]) == pytest.approx(math.hypot(3.5, 5.0))


def test_relative_pose_round_trip():
    start = Node2D(2.0, 1.0, 0.8)
    end = Node2D(-1.0, 5.0, -0.4)
    dx, dy, dtheta = relative_pose_2d(start, end)
    c, s = math.cos(start.theta), math.sin(start.theta)
    assert start.x + c * dx - s * dy == pytest.approx(end.x)
    assert start.y + s * dx + c * dy == pytest.approx(end.y)
    assert math.cos(start.theta + dtheta) == pytest.approx(math.cos(end.theta))
    assert math.sin(start.theta + dtheta) == pytest.approx(math.sin(end.theta))


def test_relative_pose_wraps_heading():
    result = relative_pose_2d(Node2D(0.0, 0.0, 3.0), Node2D(0.0, 0.0, -3.0))
    assert -math.pi <= result[2] <= math.pi
    assert math.cos(result[2]) == pytest.approx(math.cos(-6.0))
    assert math.sin(result[2]) == pytest.approx(math.sin(-6.0))


def test_info_matrix_inverts_planar_block():
    cov = _diag_covariance(2.0, 4.0, 8.0)
    info = compute_info_matrix(cov)
    block = np.diag([2.0, 4.0, 8.0])
    np.testing.assert_allclose(info @ block, np.eye(3), atol=1e-12)


def test_info_matrix_uses_off_diagonal_entries():
    cov = _diag_covariance(2.0, 3.0, 5.0)
    cov[1] = cov[6] = 0.5
    cov[5] = cov[30] = 0.25
    info = compute_info_matrix(cov)
    block = np.array([[2.0, 0.5, 0.25], [0.5, 3.0, 0.0], [0.25, 0.0, 5.0]])
    np.testing.assert_allclose(block @ info, np.eye(3), atol=1e-12)


def test_info_matrix_singular_falls_back():
    info = compute_info_matrix([0.0] * 36)
    np.testing.assert_allclose(info, np.eye(3) * 1e-3)


def test_info_matrix_negative_determinant_falls_back():
    info = compute_info_matrix(_diag_covariance(-1.0, 1.0, 1.0))
    np.testing.assert_allclose(info, np.eye(3) * 1e-3)


def test_info_matrix_rejects_wrong_size():
    with pytest.raises(ValueError):
        compute_info_matrix([1.0] * 9)


def test_distance_pythagorean():
    assert compute_distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(5.0)


def test_distance_ignores_height_and_is_symmetric():
    a = Point(1.0, 2.0, 0.0)
    b = Point(-4.0, 7.0, 100.0)
    assert compute_distance(a, b) == pytest.approx(compute_distance(b, a))
    assert compute_distance(a, b) == pytest.approx(compute_distance(a, Point(-4.0, 7.0, 0.0)))


def test_theta_of_identity_is_zero():
    assert extract_theta(Quaternion()) == pytest.approx(0.0)


@pytest.mark.parametrize("angle", [0.1, 0.7, 1.5, 2.9])
def test_theta_positive_yaw_recovered(angle):
    assert extract_theta(_yaw(angle)) == pytest.approx(angle)


@pytest.mark.parametrize("angle", [-0.1, -0.7, -1.5, -2.9])
def test_theta_negative_yaw_shifted_by_pi(angle):
    assert extract_theta(_yaw(angle)) == pytest.approx(angle + math.pi)


@pytest.mark.parametrize("angle", [-3.0, -1.0, 0.5, 2.0, 3.1])
def test_theta_always_in_upper_half(angle):
    theta = extract_theta(_yaw(angle))
    assert 0.0 <= theta <= math.pi