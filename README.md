# posegraph

`posegraph` builds a two-dimensional pose graph from a stream of odometry
messages, the way the front end of a graph-based SLAM system does.

- The first odometry message becomes node 0.
- After that, the planar distance between each new position and the position
  at which the last node was dropped is added up. Once that running total
  exceeds 10 m (`posegraph.graph_slam.NODE_SPACING`), a new node is dropped at
  the current pose, an odometry edge is added, and the total is reset.
- Each edge holds the pose of the new node in the frame of the previous node
  (`dx`, `dy`, `dtheta`, with the angle wrapped to `[-pi, pi]`) and an
  information matrix: the inverse of the x/y/yaw block of the message's
  covariance, or `1e-3 * I` when that block's determinant is at most `1e-9`.
- Every node is turned into a red sphere marker and every edge into a yellow
  line-segment marker, both in the `odom` frame, and handed to a publishing
  function that you supply.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Types — `posegraph.types`

Frozen dataclasses `Point`, `Quaternion` (identity by default), `Pose`,
`Odometry` (a pose plus a 36-value row-major 6x6 covariance), `PoseStamped`
(a pose plus a `stamp`) and `Node2D` (`x`, `y`, `theta`, `node_id`;
`str(node)` gives e.g. `(1, 2, 0.5) Node id : 3`).

`Edge2D(from_node_id, to_node_id, relative_meas, information_mat, edge_type="odom")`
converts its measurement and matrix to NumPy arrays and raises `ValueError`
unless they have shapes `(3,)` and `(3, 3)`.

### Geometry — `posegraph.helpers`

- `relative_pose_2d(from_node, to_node)` – pose of `to_node` in the frame of
  `from_node`, as a NumPy 3-vector.
- `compute_info_matrix(covariance)` – 3x3 information matrix from 36
  covariance values; raises `ValueError` for any other count.
- `compute_distance(p1, p2)` – planar distance; `z` is ignored.
- `extract_theta(q)` – heading from a Z-Y-X Euler decomposition. The first
  angle of that decomposition is kept in `[0, pi]`, so a negative heading is
  returned shifted by `pi`.

### Markers — `posegraph.markers`

`Marker` is a dataclass with `frame_id`, `stamp`, `ns`, `id`, `type`
(`MarkerType`), `action` (`MarkerAction`), `pose`, `scale` (`Scale`),
`color` (`Color`), `lifetime` (0 means forever) and `points`.

- `create_node_marker(node, stamp)` – a 0.2 m red sphere in namespace
  `nodes`, with the node's id and position.
- `create_edge_marker(prev, current, stamp)` – a `LINE_LIST` in namespace
  `edges`, id of `prev`, with the two node positions as its points.
- `GraphVisualiser(publish)` – `create_marker_obj()` returns an unplaced red
  sphere in namespace `graph_slam_ns`; `publish_node_marker(node)` places one
  at the node and passes it to `publish`.

### The graph — `posegraph.graph_slam`

```python
from posegraph.graph_slam import GraphSLAM
from posegraph.types import Odometry, Point, Pose

slam = GraphSLAM(node_publisher=print, edge_publisher=print)
slam.odom_callback(Odometry(pose=Pose(position=Point(0.0, 0.0))))
slam.odom_callback(Odometry(pose=Pose(position=Point(11.0, 0.0))))
print(slam.nodes)   # two Node2D
print(slam.edges)   # one Edge2D
```

`GraphSLAM(node_publisher, edge_publisher, clock=time.time)` keeps the graph
in its `nodes` and `edges` lists; the clock supplies marker stamps. An edge's
`from_node_id` is the new node and its `to_node_id` the previous one.
`gt_pose_callback(msg)` stores `msg.pose` in `last_ground_truth` and has no
effect on the graph.

## Command line

```
posegraph [INPUT]
```

reads JSON objects, one per line, from `INPUT` or from standard input when it
is omitted or `-`. Recognised lines:

```
{"topic": "/odom", "position": [x, y, z], "orientation": [x, y, z, w], "covariance": [36 numbers]}
{"topic": "/lls", "position": [x, y, z], "orientation": [x, y, z, w], "stamp": 0.0}
```

Missing fields take defaults (origin, identity orientation, zero covariance,
stamp 0); lines with any other topic, and blank lines, are skipped. Each
marker produced is printed to standard output as
`{"topic": "visualization_marker" | "edges_marker", "marker": {...}}`.
A malformed line is reported on standard error with its line number and
the command exits with status 1; an unreadable input file does the same.

## What it does not do

`posegraph` only builds the graph. It does not optimise it, does not detect
loop closures, does not use ground-truth poses beyond recording the last one,
and does not connect to any message bus or display: markers go to the
functions you pass in, or to standard output from the command.