import numpy as np

from .constants import (
    EPSILON,
    MAX_SPEED_KNOTS,
    MIN_OBSERVATION_INTERVAL,
    MINUTES_PER_DAY,
)


def wrap_angle(angle):
    """
    Wraps an angle in degrees to the range (-180, 180].

    Uses atan2(sin, cos), which is periodic in 360 degrees.

    Args:
        angle (float): The angle in degrees.

    Returns:
        float: The wrapped angle in degrees.
    """
    rad = np.deg2rad(angle)
    wrapped = float(np.rad2deg(np.arctan2(np.sin(rad), np.cos(rad))))

    # -180 belongs to the other end of the range
    if np.isclose(wrapped, -180.0, rtol=0.0, atol=1e-9):
        return 180.0

    return wrapped


def angle_difference(angle1, angle2):
    """
    Calculates the shortest difference between two angles (angle1 - angle2).

    The result is wrapped to (-180, 180]. A positive result means angle1 is
    clockwise from angle2 (nautical convention).
    """
    return wrap_angle(angle1 - angle2)


def WrapTo180(deg):
    """Transform an angle to the range (-180, 180]."""
    return wrap_angle(deg)


def wrap_to_range(angle, min_val, max_val):
    """
    Wraps an angle to a given range [min_val, max_val).

    The length of the range (max_val - min_val) is assumed to be a full circle (2*pi or 360).

    Args:
        angle (float): The angle value to wrap.
        min_val (float): The minimum value of the range (inclusive).
        max_val (float): The maximum value of the range (exclusive).

    Returns:
        float: The wrapped angle.
    """
    span = max_val - min_val
    if span <= 0:
        raise ValueError("max_val must be greater than min_val.")

    wrapped = (angle - min_val) % span + min_val

    # Snap to min_val if the result is very close to max_val (float inaccuracies)
    if np.isclose(wrapped, max_val, rtol=0.0, atol=1e-9):
        return float(min_val)

    return float(wrapped)


def WrapTo360(deg):
    """
    Transform an angle in degrees to the range [0, 360).
    """
    return wrap_to_range(deg, 0.0, 360.0)


def is_zero(value, epsilon=EPSILON):
    """|value| < epsilon"""
    return abs(value) < epsilon


# ========================================
# Clock time (minutes since midnight)
# ========================================

def minutes_to_clock_string(minutes):
    """
    Minutes since midnight를 "HH:MM" 문자열로 변환 (24시간 wrap)

    Examples:
        >>> minutes_to_clock_string(754)
        '12:34'
        >>> minutes_to_clock_string(1450)
        '00:10'
    """
    total = int(np.floor(minutes))
    hours = (total // 60) % 24
    mins = total % 60
    return f"{hours:02d}:{mins:02d}"


def clock_string_to_minutes(clock):
    """
    "HH:MM" 문자열을 minutes since midnight로 변환

    Raises:
        ValueError: If the string is not of the form HH:MM
    """
    parts = clock.strip().split(':')
    if len(parts) != 2:
        raise ValueError(f"Clock time must be HH:MM. Got {clock!r}")
    try:
        hours = int(parts[0])
        mins = int(parts[1])
    except ValueError:
        raise ValueError(f"Clock time must be HH:MM. Got {clock!r}") from None
    if not 0 <= mins < 60 or hours < 0:
        raise ValueError(f"Clock time out of range: {clock!r}")
    return (hours % 24) * 60 + mins


# ========================================
# Input validation
# ========================================

def is_valid_bearing(bearing):
    return 0.0 <= bearing < 360.0


def is_valid_speed(speed):
    return 0.0 <= speed <= MAX_SPEED_KNOTS


def is_valid_distance(distance):
    return distance >= 0.0


def is_valid_time(minutes):
    return 0 <= minutes < MINUTES_PER_DAY


def is_valid_observation_interval(delta_time):
    return delta_time >= MIN_OBSERVATION_INTERVAL
