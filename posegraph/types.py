"""Message and graph element types used by the pose-graph builder."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

COVARIANCE_SIZE = 36


@dataclass(frozen=True)
class Point:
    """A position in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """An orientation as a quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Pose:
    """A position together with an orientation."""

    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True)
class Odometry:
    """An odometry reading: a pose and its row-major 6x6 covariance."""

    pose: Pose = field(default_factory=Pose)
    covariance: tuple[float, ...] = (0.0,) * COVARIANCE_SIZE


@dataclass(frozen=True)
class PoseStamped:
    """A pose with the time it was observed at."""

    pose: Pose = field(default_factory=Pose)
    stamp: float = 0.0


@dataclass(frozen=True)
class Node2D:
    """A planar pose stored as a node of the graph."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    node_id: int = 0

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.theta:g}) Node id : {self.node_id}"


@dataclass(eq=False)
class Edge2D:
    """A constraint between two nodes: relative measurement and its information."""

    from_node_id: int
    to_node_id: int
    relative_meas: np.ndarray
    information_mat: np.ndarray
    edge_type: str = "odom"

    def __post_init__(self) -> None:
        self.relative_meas = np.asarray(self.relative_meas, dtype=float)
        self.information_mat = np.asarray(self.information_mat, dtype=float)
        if self.relative_meas.shape != (3,):
            raise ValueError("relative measurement must have three components")
        if self.information_mat.shape != (3, 3):
            raise ValueError("information matrix must be 3x3")