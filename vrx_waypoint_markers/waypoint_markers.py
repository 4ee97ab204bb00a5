import threading

from visualization_msgs.msg import Marker

from vrx_waypoint_markers.config import (
    DEFAULT_MATERIAL, MarkerConfig, valid_marker_id)
from vrx_waypoint_markers.geometry import label_position, yaw_to_quaternion
from vrx_waypoint_markers.materials import (
    MATERIAL_COLORS, TEXT_MATERIAL, material_color)

TEXT_HEIGHT = 1.0


class WaypointMarkers:
    """Cylinder waypoint markers with an optional text label on top.

    Meant to be driven from one thread, the auto id counter is still locked.
    """

    def __init__(self, node, namespace, topic='/marker', frame_id='world'):
        if not namespace:
            raise ValueError('marker namespace must not be empty')

        self._node = node
        self._ns = namespace
        self._frame_id = frame_id
        self._config = MarkerConfig()
        self._next_id = self._config.initial_id
        self._auto_started = False
        self._id_lock = threading.Lock()
        self._unknown_materials = set()

        self._publisher = node.create_publisher(Marker, topic, 10)

    @property
    def namespace(self):
        return self._ns

    @property
    def config(self):
        return self._config

    @property
    def next_id(self):
        return self._next_id

    @property
    def publisher(self):
        return self._publisher

    def load(self, config=None):
        """Apply marker properties, keeping the current value of absent keys.

        ``config`` is a mapping, a MarkerConfig or None. A MarkerConfig
        replaces every property. The counter only moves when initial_id
        changes, and never once an auto assigned id has been drawn.
        """
        if config is None:
            return
        if isinstance(config, MarkerConfig):
            config = config.as_dict()

        new_config = self._config.updated(config)
        with self._id_lock:
            if new_config.initial_id != self._config.initial_id:
                if self._auto_started:
                    self._node.get_logger().warn(
                        f'[{self._ns}] ignoring initial_id '
                        f'{new_config.initial_id}, markers already drawn up '
                        f'to id {self._next_id - 1}')
                else:
                    self._next_id = new_config.initial_id
            self._config = new_config

    def draw_marker(self, x, y, yaw, text='', marker_id=None):
        """Returns True if the marker was handed to the publisher."""
        if marker_id is None:
            with self._id_lock:
                marker_id = self._next_id
                self._next_id += 1
                self._auto_started = True

        if not valid_marker_id(marker_id):
            self._node.get_logger().error(
                f'[{self._ns}] marker id {marker_id} does not fit in a Marker.id')
            return False

        ok = True
        for msg in self.build_markers(marker_id, x, y, yaw, text):
            ok = self._publish(msg) and ok
        return ok

    def build_markers(self, marker_id, x, y, yaw, text=''):
        config = self._config
        stamp = self._node.get_clock().now().to_msg()

        cylinder = Marker()
        cylinder.header.frame_id = self._frame_id
        cylinder.header.stamp = stamp
        cylinder.ns = self._ns
        cylinder.id = int(marker_id)
        cylinder.type = Marker.CYLINDER
        cylinder.action = Marker.ADD

        cylinder.pose.position.x = float(x)
        cylinder.pose.position.y = float(y)
        cylinder.pose.position.z = config.height
        qx, qy, qz, qw = yaw_to_quaternion(float(yaw))
        cylinder.pose.orientation.x = qx
        cylinder.pose.orientation.y = qy
        cylinder.pose.orientation.z = qz
        cylinder.pose.orientation.w = qw

        cylinder.scale.x, cylinder.scale.y, cylinder.scale.z = config.scaling
        self._set_color(cylinder, self._resolve_color(config.material))

        markers = [cylinder]
        if not text:
            return markers

        label = Marker()
        label.header.frame_id = self._frame_id
        label.header.stamp = stamp
        label.ns = self._ns + '_text'
        label.id = int(marker_id)
        label.type = Marker.TEXT_VIEW_FACING
        label.action = Marker.ADD
        label.text = text

        lx, ly, lz = label_position(float(x), float(y), config.height,
                                    config.scaling)
        label.pose.position.x = lx
        label.pose.position.y = ly
        label.pose.position.z = lz
        label.pose.orientation.w = 1.0

        label.scale.x = label.scale.y = label.scale.z = TEXT_HEIGHT
        self._set_color(label, MATERIAL_COLORS[TEXT_MATERIAL])

        markers.append(label)
        return markers

    def _resolve_color(self, material):
        color = material_color(material)
        if color is not None:
            return color
        if material not in self._unknown_materials:
            self._unknown_materials.add(material)
            self._node.get_logger().warn(
                f'[{self._ns}] unknown material "{material}", '
                f'drawing as {DEFAULT_MATERIAL}')
        return MATERIAL_COLORS[DEFAULT_MATERIAL]

    @staticmethod
    def _set_color(marker, rgba):
        marker.color.r, marker.color.g, marker.color.b, marker.color.a = rgba

    def _publish(self, msg):
        if not self._node.context.ok():
            self._node.get_logger().warn(
                f'[{msg.ns}] marker {msg.id} not sent, context is shut down')
            return False
        try:
            self._publisher.publish(msg)
        except Exception as e:
            self._node.get_logger().error(
                f'[{msg.ns}] failed to publish marker {msg.id}: {e}')
            return False
        return True
