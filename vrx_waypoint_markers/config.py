import dataclasses
import xml.etree.ElementTree as ET
from dataclasses import dataclass


DEFAULT_MATERIAL = 'Gazebo/Green'
DEFAULT_SCALING = (0.2, 0.2, 1.5)
DEFAULT_HEIGHT = 0.0
DEFAULT_INITIAL_ID = 0

KEYS = ('material', 'scaling', 'height', 'initial_id')

# visualization_msgs/Marker.id is an int32
ID_MIN = -2 ** 31
ID_MAX = 2 ** 31 - 1


class MarkerConfigError(ValueError):
    pass


def valid_marker_id(marker_id):
    return ID_MIN <= marker_id <= ID_MAX


def parse_scaling(value):
    """Scaling as three floats, from a sequence or a "0.2 0.2 1.5" string."""
    if isinstance(value, str):
        value = value.split()
    try:
        scaling = tuple(float(v) for v in value)
    except (TypeError, ValueError) as e:
        raise MarkerConfigError(f'invalid scaling {value!r}: {e}') from e
    if len(scaling) != 3:
        raise MarkerConfigError(
            f'scaling needs 3 values, got {len(scaling)}: {value!r}')
    return scaling


def _coerce(key, value):
    try:
        if key == 'material':
            return str(value)
        if key == 'scaling':
            return parse_scaling(value)
        if key == 'height':
            return float(value)
        if key == 'initial_id':
            if isinstance(value, float) and not value.is_integer():
                raise ValueError('not an integer')
            value = int(value)
            if not valid_marker_id(value):
                raise ValueError('outside the int32 marker id range')
            return value
    except (TypeError, ValueError) as e:
        raise MarkerConfigError(f'invalid {key} {value!r}: {e}') from e
    raise MarkerConfigError(f'unknown key {key!r}')


@dataclass(frozen=True)
class MarkerConfig:
    material: str = DEFAULT_MATERIAL
    scaling: tuple = DEFAULT_SCALING
    height: float = DEFAULT_HEIGHT
    initial_id: int = DEFAULT_INITIAL_ID

    def __post_init__(self):
        for key in KEYS:
            object.__setattr__(self, key, _coerce(key, getattr(self, key)))

    @classmethod
    def from_mapping(cls, values):
        return cls().updated(values)

    def updated(self, values):
        """Copy with only the keys present in ``values`` overridden."""
        if values is None:
            return self
        present = {key: values[key] for key in KEYS
                   if key in values and values[key] is not None}
        return dataclasses.replace(self, **present)

    def as_dict(self):
        return dataclasses.asdict(self)


def parse_sdf(element):
    """Read a <markers> SDF element, or its XML text, into a mapping."""
    if element is None:
        return None
    if isinstance(element, (str, bytes)):
        try:
            element = ET.fromstring(element)
        except ET.ParseError as e:
            raise MarkerConfigError(f'invalid markers sdf: {e}') from e

    values = {}
    for key in KEYS:
        child = element.find(key)
        if child is None or child.text is None or not child.text.strip():
            continue
        values[key] = _coerce(key, child.text.strip())
    return values


def read_parameters(node, prefix='markers'):
    """Marker parameters set on ``node`` under ``prefix``, unset ones left out."""
    params = node.get_parameters_by_prefix(prefix)
    values = {}
    for key in KEYS:
        param = params.get(key)
        if param is None or param.value is None:
            continue
        values[key] = _coerce(key, param.value)
    return values
