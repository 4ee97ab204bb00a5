#!/usr/bin/env python3
import os

import rclpy
import yaml
from geometry_msgs.msg import PoseStamped
from rclpy.node import Node
from rclpy.parameter import Parameter

from vrx_waypoint_markers.config import MarkerConfigError, read_parameters
from vrx_waypoint_markers.geometry import quaternion_to_yaw
from vrx_waypoint_markers.waypoint_markers import WaypointMarkers


def load_waypoints_file(path):
    """Read (x, y, yaw, label) tuples from a YAML file with a waypoints list."""
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    waypoints = []
    for i, entry in enumerate(data.get('waypoints') or []):
        try:
            x = float(entry['x'])
            y = float(entry['y'])
            yaw = float(entry.get('yaw', 0.0))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f'{path}: waypoint {i} is malformed: {e}') from e
        label = entry.get('label')
        waypoints.append((x, y, yaw, None if label is None else str(label)))
    return waypoints


def parse_waypoint_list(values):
    """Turn a flat [x, y, yaw, x, y, yaw, ...] list into waypoint tuples."""
    values = [float(v) for v in values]
    if len(values) % 3 != 0:
        raise ValueError(
            f'waypoints needs x, y, yaw triples, got {len(values)} values')
    return [(values[i], values[i + 1], values[i + 2], None)
            for i in range(0, len(values), 3)]


class WaypointMarkerNode(Node):
    def __init__(self, **kwargs):
        super().__init__(
            'waypoint_markers',
            automatically_declare_parameters_from_overrides=True,
            **kwargs)

        namespace = self._param('namespace', 'waypoints')
        topic = self._param('topic', '/marker')
        frame_id = self._param('frame_id', 'world')
        publish_period = float(self._param('publish_period', 1.0))
        self.label_waypoints = bool(self._param('label_waypoints', True))

        self.markers = WaypointMarkers(self, namespace, topic, frame_id)
        try:
            self.markers.load(read_parameters(self, 'markers'))
        except MarkerConfigError as e:
            self.get_logger().error(f'Invalid marker parameters, using defaults: {e}')

        self.waypoints = self._load_waypoints()
        # (id, x, y, yaw, text) of every marker drawn so far
        self.drawn = []

        self.create_subscription(
            PoseStamped,
            '~/add_waypoint',
            self.add_waypoint_callback,
            10
        )

        self.timer = self.create_timer(publish_period, self.publish_markers)
        self.get_logger().info(
            f'Waypoint markers started: {len(self.waypoints)} waypoints on {topic} '
            f'(ns "{namespace}", material {self.markers.config.material})')

    def _param(self, name, default):
        return self.get_parameter_or(name, Parameter(name, value=default)).value

    def _load_waypoints(self):
        waypoints = []
        path = self._param('waypoints_file', '')
        if path:
            path = os.path.expanduser(path)
            try:
                waypoints.extend(load_waypoints_file(path))
            except (OSError, ValueError, yaml.YAMLError) as e:
                self.get_logger().error(f'Could not load waypoints from {path}: {e}')

        values = self._param('waypoints', [])
        if values:
            try:
                waypoints.extend(parse_waypoint_list(values))
            except ValueError as e:
                self.get_logger().error(f'Ignoring waypoints parameter: {e}')
        return waypoints

    def _label(self, index, label):
        if label is not None:
            return label
        return str(index) if self.label_waypoints else ''

    def _draw_new(self, x, y, yaw, text):
        marker_id = self.markers.next_id
        if not self.markers.draw_marker(x, y, yaw, text):
            self.get_logger().warn(f'Marker {marker_id} was not published')
        self.drawn.append((marker_id, x, y, yaw, text))

    def publish_markers(self):
        # First pass hands out ids, later passes repeat them for late subscribers.
        if self.waypoints:
            for i, (x, y, yaw, label) in enumerate(self.waypoints):
                self._draw_new(x, y, yaw, self._label(i, label))
            self.waypoints = []
            return

        for marker_id, x, y, yaw, text in self.drawn:
            self.markers.draw_marker(x, y, yaw, text, marker_id=marker_id)

    def add_waypoint_callback(self, msg):
        q = msg.pose.orientation
        yaw = quaternion_to_yaw(q.x, q.y, q.z, q.w)
        x = msg.pose.position.x
        y = msg.pose.position.y
        text = self._label(len(self.drawn) + len(self.waypoints), None)
        self.get_logger().info(f'New waypoint: {x:.2f}, {y:.2f}, yaw {yaw:.2f}')
        self._draw_new(x, y, yaw, text)


def main(args=None):
    rclpy.init(args=args)
    node = WaypointMarkerNode()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    node.destroy_node()
    rclpy.shutdown()


if __name__ == '__main__':
    main()
