import math

# Label offset from the waypoint, and gap between cylinder top and text.
LABEL_XY_OFFSET = -0.2
LABEL_Z_GAP = 0.5


def yaw_to_quaternion(yaw):
    """Quaternion (x, y, z, w) for a rotation of ``yaw`` radians about z."""
    half = 0.5 * yaw
    return (0.0, 0.0, math.sin(half), math.cos(half))


def quaternion_to_yaw(x, y, z, w):
    """Yaw angle in radians of a quaternion, roll and pitch are discarded."""
    siny_cosp = 2.0 * (w * z + x * y)
    cosy_cosp = 1.0 - 2.0 * (y * y + z * z)
    return math.atan2(siny_cosp, cosy_cosp)


def label_position(x, y, height, scaling):
    """Position of the text label, just above the top of the cylinder."""
    return (x + LABEL_XY_OFFSET,
            y + LABEL_XY_OFFSET,
            height + scaling[2] / 2.0 + LABEL_Z_GAP)
