"""Visualisation markers for graph nodes and edges."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum

from posegraph.types import Node2D, Point, Pose


class MarkerType(IntEnum):
    """Shape drawn by a marker."""

    ARROW = 0
    CUBE = 1
    SPHERE = 2
    CYLINDER = 3
    LINE_STRIP = 4
    LINE_LIST = 5
    CUBE_LIST = 6
    SPHERE_LIST = 7
    POINTS = 8
    TEXT_VIEW_FACING = 9
    MESH_RESOURCE = 10
    TRIANGLE_LIST = 11


class MarkerAction(IntEnum):
    """What a marker does to the display."""

    ADD = 0
    DELETE = 2
    DELETEALL = 3


@dataclass
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0


@dataclass
class Scale:
    """Marker size in metres along each axis."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Marker:
    """A single visualisation marker; a lifetime of 0 means forever."""

    frame_id: str = ""
    stamp: float = 0.0
    ns: str = ""
    id: int = 0
    type: MarkerType = MarkerType.ARROW
    action: MarkerAction = MarkerAction.ADD
    pose: Pose = field(default_factory=Pose)
    scale: Scale = field(default_factory=Scale)
    color: Color = field(default_factory=Color)
    lifetime: float = 0.0
    points: list[Point] = field(default_factory=list)


_FRAME_ID = "odom"


def _sphere_marker(ns: str, stamp: float) -> Marker:
    return Marker(
        frame_id=_FRAME_ID,
        stamp=stamp,
        ns=ns,
        type=MarkerType.SPHERE,
        action=MarkerAction.ADD,
        scale=Scale(0.2, 0.2, 0.2),
        color=Color(1.0, 0.0, 0.0, 1.0),
        lifetime=0.0,
    )


def _place_at(marker: Marker, node: Node2D) -> Marker:
    marker.id = node.node_id
    marker.pose = Pose(position=Point(node.x, node.y, 0.0))
    return marker


def create_node_marker(node: Node2D, stamp: float) -> Marker:
    """A red sphere at the node's position."""
    return _place_at(_sphere_marker("nodes", stamp), node)


def create_edge_marker(prev: Node2D, current: Node2D, stamp: float) -> Marker:
    """A yellow line segment from ``prev`` to ``current``."""
    return Marker(
        frame_id=_FRAME_ID,
        stamp=stamp,
        ns="edges",
        id=prev.node_id,
        type=MarkerType.LINE_LIST,
        action=MarkerAction.ADD,
        scale=Scale(0.01, 0.01, 0.0),
        color=Color(1.0, 1.0, 0.0, 1.0),
        lifetime=0.0,
        points=[Point(prev.x, prev.y), Point(current.x, current.y)],
    )


class GraphVisualiser:
    """Publishes node markers through a caller-supplied publish function."""

    def __init__(self, publish: Callable[[Marker], None]) -> None:
        self._publish = publish

    def create_marker_obj(self) -> Marker:
        """A fresh, unplaced node marker."""
        return _sphere_marker("graph_slam_ns", stamp=0.0)

    def publish_node_marker(self, node: Node2D) -> None:
        """Publish a marker placed at ``node``."""
        self._publish(_place_at(self.create_marker_obj(), node))