"""Geometry helpers for building a planar pose graph."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from posegraph.types import Node2D, Point, Quaternion

_SINGULAR_THRESHOLD = 1e-9
_FALLBACK_INFORMATION = 1e-3
# Rows and columns of the 6x6 covariance that belong to x, y and yaw.
_PLANAR_AXES = [0, 1, 5]


def relative_pose_2d(from_node: Node2D, to_node: Node2D) -> np.ndarray:
    """Return the pose of ``to_node`` in the frame of ``from_node`` as (dx, dy, dtheta)."""
    dx = to_node.x - from_node.x
    dy = to_node.y - from_node.y
    dtheta = to_node.theta - from_node.theta

    while dtheta > math.pi:
        dtheta -= 2 * math.pi
    while dtheta < -math.pi:
        dtheta += 2 * math.pi

    cos_t = math.cos(-from_node.theta)
    sin_t = math.sin(-from_node.theta)

    local_dx = cos_t * dx - sin_t * dy
    local_dy = sin_t * dx + cos_t * dy
    return np.array([local_dx, local_dy, dtheta])


def compute_info_matrix(covariance: Sequence[float]) -> np.ndarray:
    """Invert the planar (x, y, yaw) block of a row-major 6x6 covariance.

    A near-singular block yields a small isotropic information matrix instead.
    """
    values = np.asarray(covariance, dtype=float).ravel()
    if values.size != 36:
        raise ValueError(f"covariance must hold 36 values, got {values.size}")
    cov = values.reshape(6, 6)[np.ix_(_PLANAR_AXES, _PLANAR_AXES)]
    if np.linalg.det(cov) <= _SINGULAR_THRESHOLD:
        return np.eye(3) * _FALLBACK_INFORMATION
    return np.linalg.inv(cov)


def compute_distance(p1: Point, p2: Point) -> float:
    """Planar Euclidean distance between two points; z is ignored."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def extract_theta(q: Quaternion) -> float:
    """Heading from a Z-Y-X Euler decomposition of ``q``.

    The decomposition keeps its first angle in [0, pi], so negative headings
    come back shifted by pi.
    """
    r00 = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    r10 = 2.0 * (q.x * q.y + q.z * q.w)
    theta = math.atan2(r10, r00)
    if theta < 0.0:
        theta += math.pi
    return theta