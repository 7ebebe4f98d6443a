"""Command line entry: feed odometry as JSON lines, get markers as JSON lines."""

from __future__ import annotations

import argparse
import contextlib
import json
import sys
from collections.abc import Iterable
from dataclasses import asdict
from typing import Any

from posegraph.graph_slam import GraphSLAM
from posegraph.markers import Marker
from posegraph.types import Odometry, Point, Pose, PoseStamped, Quaternion

ODOM_TOPIC = "/odom"
GROUND_TRUTH_TOPIC = "/lls"
NODE_MARKER_TOPIC = "visualization_marker"
EDGE_MARKER_TOPIC = "edges_marker"


def _floats(record: dict[str, Any], key: str, count: int, default: Iterable[float]) -> list[float]:
    raw = record.get(key, default)
    try:
        values = [float(v) for v in raw]
    except TypeError as exc:
        raise ValueError(f"'{key}' must be a list of numbers") from exc
    if len(values) != count:
        raise ValueError(f"'{key}' must hold {count} numbers, got {len(values)}")
    return values


def _read_pose(record: dict[str, Any]) -> Pose:
    position = _floats(record, "position", 3, (0.0, 0.0, 0.0))
    orientation = _floats(record, "orientation", 4, (0.0, 0.0, 0.0, 1.0))
    return Pose(Point(*position), Quaternion(*orientation))


def _parse_message(record: Any) -> tuple[str, Odometry | PoseStamped] | None:
    if not isinstance(record, dict):
        raise ValueError("each line must be a JSON object")
    topic = record.get("topic")
    if topic == ODOM_TOPIC:
        covariance = _floats(record, "covariance", 36, (0.0,) * 36)
        return topic, Odometry(pose=_read_pose(record), covariance=tuple(covariance))
    if topic == GROUND_TRUTH_TOPIC:
        stamp = float(record.get("stamp", 0.0))
        return topic, PoseStamped(pose=_read_pose(record), stamp=stamp)
    return None


def _emitter(topic: str):
    def emit(marker: Marker) -> None:
        print(json.dumps({"topic": topic, "marker": asdict(marker)}), flush=True)

    return emit


def _run(stream: Iterable[str]) -> int:
    slam = GraphSLAM(_emitter(NODE_MARKER_TOPIC), _emitter(EDGE_MARKER_TOPIC))
    for number, line in enumerate(stream, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            parsed = _parse_message(json.loads(line))
        except ValueError as exc:
            print(f"line {number}: {exc}", file=sys.stderr)
            return 1
        if parsed is None:
            continue
        topic, msg = parsed
        if topic == ODOM_TOPIC:
            slam.odom_callback(msg)
        else:
            slam.gt_pose_callback(msg)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Read messages from a file or stdin and print the markers they produce."""
    parser = argparse.ArgumentParser(
        prog="posegraph",
        description="Build a pose graph from odometry given as JSON lines.",
    )
    parser.add_argument("input", nargs="?", default="-", help="input file, or - for stdin")
    args = parser.parse_args(argv)

    print("Starting the Graph Slam Project", file=sys.stderr)

    with contextlib.ExitStack() as stack:
        if args.input == "-":
            stream = sys.stdin
        else:
            try:
                stream = stack.enter_context(open(args.input, encoding="utf-8"))
            except OSError as exc:
                print(f"cannot read {args.input}: {exc}", file=sys.stderr)
                return 1
        return _run(stream)


if __name__ == "__main__":
    raise SystemExit(main())