"""Builds a pose graph from odometry, dropping a node every stretch of travel."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from posegraph.helpers import (
    compute_distance,
    compute_info_matrix,
    extract_theta,
    relative_pose_2d,
)
from posegraph.markers import Marker, create_edge_marker, create_node_marker
from posegraph.types import Edge2D, Node2D, Odometry, Point, Pose, PoseStamped

logger = logging.getLogger(__name__)

NODE_SPACING = 10.0


class GraphSLAM:
    """Turns odometry messages into graph nodes and odometry edges.

    Markers for new nodes and edges are handed to the two publisher callables.
    """

    def __init__(
        self,
        node_publisher: Callable[[Marker], None],
        edge_publisher: Callable[[Marker], None],
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._publish_node = node_publisher
        self._publish_edge = edge_publisher
        self._clock = clock
        self.nodes: list[Node2D] = []
        self.edges: list[Edge2D] = []
        self.last_ground_truth: Pose | None = None
        self._node_counter = 0
        self._first_frame = True
        self._last_point = Point()
        self._previous_node = Node2D()
        self._distance_travelled = 0.0
        logger.info("Custom Graph SLAM Node Initialised!")

    def _make_node(self, msg: Odometry) -> Node2D:
        position = msg.pose.position
        node = Node2D(
            x=position.x,
            y=position.y,
            theta=extract_theta(msg.pose.orientation),
            node_id=self._node_counter,
        )
        self.nodes.append(node)
        self._publish_node(create_node_marker(node, self._clock()))
        return node

    def odom_callback(self, msg: Odometry) -> None:
        """Handle one odometry message."""
        if self._first_frame:
            logger.info("First Frame Received")
            self._first_frame = False
            self._previous_node = self._make_node(msg)
            return

        current_point = msg.pose.position
        self._distance_travelled += compute_distance(current_point, self._last_point)
        if self._distance_travelled <= NODE_SPACING:
            return

        self._node_counter += 1
        node = self._make_node(msg)
        logger.info("%s", node)

        previous = self._previous_node
        edge = Edge2D(
            node.node_id,
            previous.node_id,
            relative_pose_2d(previous, node),
            compute_info_matrix(msg.covariance),
        )
        self.edges.append(edge)
        self._publish_edge(create_edge_marker(previous, node, self._clock()))

        self._last_point = current_point
        self._previous_node = node
        self._distance_travelled = 0.0

    def gt_pose_callback(self, msg: PoseStamped) -> None:
        """Record a ground-truth pose; it does not affect the graph."""
        self.last_ground_truth = msg.pose