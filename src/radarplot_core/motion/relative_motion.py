"""
Relative / True Motion 계산

Two timed observations of a target give its relative motion (DRM, SRM).
Adding own ship's velocity gives the target's true motion:

    v_B = v_Br + v_A
"""
from typing import Optional

from ..geometry import (
    Vector2,
    calculate_aspect_angle,
    cartesian_to_polar,
    polar_to_cartesian,
    relative_to_true_bearing,
    true_to_relative_bearing,
    vector_add,
    vector_subtract,
)
from ..utils import EPSILON, MINUTES_PER_HOUR, WrapTo360
from .types import (
    BearingType,
    Observation,
    ObservationBearings,
    RelativeMotion,
    TrueMotion,
)


def reconcile_bearings(observation: Observation, own_course: float) -> ObservationBearings:
    """
    관측 방위를 진방위(RaKrP)와 상대방위(RaSP)로 정리

    - 진방위 입력: 그대로 사용, 상대방위 = 진방위 - 관측 당시 course
    - 상대방위 입력: 진방위 = 상대방위 + 관측 당시 course

    관측 당시 course가 주어지지 않으면 현재 own course 사용.
    """
    course = own_course if observation.course_at_observation is None \
        else observation.course_at_observation

    if observation.bearing_type is BearingType.TRUE:
        true_bearing = WrapTo360(observation.bearing)
        relative_bearing = true_to_relative_bearing(true_bearing, course)
    else:
        relative_bearing = WrapTo360(observation.bearing)
        true_bearing = relative_to_true_bearing(relative_bearing, course)

    return ObservationBearings(true_bearing, relative_bearing)


def observation_position(true_bearing: float, distance: float) -> Vector2:
    """Plotted position of an observation (own ship at origin)"""
    return polar_to_cartesian(true_bearing, distance)


def calculate_relative_motion(
    pos1: Vector2,
    pos2: Vector2,
    delta_time: float
) -> Optional[RelativeMotion]:
    """
    두 관측 위치로부터 상대 운동 계산

    Args:
        pos1: 첫 번째 관측 위치 (nm)
        pos2: 두 번째 관측 위치 (nm)
        delta_time: 관측 간격 (minutes)

    Returns:
        RelativeMotion(kbr, vbr), delta_time <= EPSILON이면 None
    """
    if delta_time <= EPSILON:
        return None

    kbr, travelled = cartesian_to_polar(vector_subtract(pos2, pos1))
    vbr = travelled / delta_time * MINUTES_PER_HOUR

    return RelativeMotion(kbr=kbr, vbr=vbr)


def calculate_true_motion(
    kbr: float,
    vbr: float,
    own_course: float,
    own_speed: float
) -> TrueMotion:
    """
    상대 운동 + own ship 운동 = target 진운동

    Returns:
        TrueMotion(kb, vb, aspect)
    """
    relative_vec = polar_to_cartesian(kbr, vbr)
    own_vec = polar_to_cartesian(own_course, own_speed)

    kb, vb = cartesian_to_polar(vector_add(relative_vec, own_vec))
    aspect = calculate_aspect_angle(kb, own_course)

    return TrueMotion(kb=kb, vb=vb, aspect=aspect)


def calculate_relative_from_true(
    kb: float,
    vb: float,
    own_course: float,
    own_speed: float
) -> RelativeMotion:
    """
    Velocity triangle의 역: v_Br = v_B - v_A

    Used whenever own course or speed changes while the target's true motion
    is held fixed.
    """
    target_vec = polar_to_cartesian(kb, vb)
    own_vec = polar_to_cartesian(own_course, own_speed)

    kbr, vbr = cartesian_to_polar(vector_subtract(target_vec, own_vec))
    return RelativeMotion(kbr=kbr, vbr=vbr)
