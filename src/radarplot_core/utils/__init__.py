from .constants import (
    EPSILON,
    STARBOARD,
    PORT,
    NR_TARGETS,
    TARGET_LETTERS,
    MINUTES_PER_HOUR,
)
from .utils import (
    wrap_angle,
    angle_difference,
    WrapTo180,
    WrapTo360,
    wrap_to_range,
    is_zero,
    minutes_to_clock_string,
    clock_string_to_minutes,
    is_valid_bearing,
    is_valid_speed,
    is_valid_distance,
    is_valid_time,
    is_valid_observation_interval,
)

__all__ = [
    'EPSILON',
    'STARBOARD',
    'PORT',
    'NR_TARGETS',
    'TARGET_LETTERS',
    'MINUTES_PER_HOUR',
    'wrap_angle',
    'angle_difference',
    'WrapTo180',
    'WrapTo360',
    'wrap_to_range',
    'is_zero',
    'minutes_to_clock_string',
    'clock_string_to_minutes',
    'is_valid_bearing',
    'is_valid_speed',
    'is_valid_distance',
    'is_valid_time',
    'is_valid_observation_interval',
]
