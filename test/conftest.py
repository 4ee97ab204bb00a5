import pytest


class FakeLogger:
    def __init__(self):
        self.records = []

    def info(self, msg):
        self.records.append(('info', msg))

    def warn(self, msg):
        self.records.append(('warn', msg))

    def error(self, msg):
        self.records.append(('error', msg))

    def of(self, level):
        return [msg for lvl, msg in self.records if lvl == level]


class FakePublisher:
    def __init__(self, msg_type, topic, qos):
        self.msg_type = msg_type
        self.topic = topic
        self.qos = qos
        self.sent = []
        self.fail = False

    def publish(self, msg):
        if self.fail:
            raise RuntimeError('publisher handle is invalid')
        self.sent.append(msg)


class FakeContext:
    def __init__(self):
        self.running = True

    def ok(self):
        return self.running


class FakeClock:
    def now(self):
        return self

    def to_msg(self):
        from builtin_interfaces.msg import Time
        return Time(sec=12, nanosec=34)


class FakeNode:
    """Just enough of rclpy.node.Node for WaypointMarkers."""

    def __init__(self):
        self.logger = FakeLogger()
        self.context = FakeContext()
        self.publishers = []

    def create_publisher(self, msg_type, topic, qos):
        publisher = FakePublisher(msg_type, topic, qos)
        self.publishers.append(publisher)
        return publisher

    def get_logger(self):
        return self.logger

    def get_clock(self):
        return FakeClock()


@pytest.fixture
def node():
    return FakeNode()
