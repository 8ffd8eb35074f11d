"""
항해 방위 계산 유틸리티 (radar plotting plane, own ship at origin)
"""
from ..utils import WrapTo360
from .vector import Vector2, cartesian_to_polar


def calculate_true_bearing(position: Vector2) -> float:
    """
    Own Ship(원점)에서 본 target의 진방위 (RaKrP)

    Returns:
        진방위 (degrees, [0, 360), 0=North)
    """
    return cartesian_to_polar(position)[0]


def calculate_relative_bearing(position: Vector2, own_course: float) -> float:
    """
    Own Ship에서 본 target의 상대 방위각 (RaSP)

    Args:
        position: target 위치 (x_east, y_north), own ship = origin
        own_course: own ship course (degrees, 0=North, clockwise)

    Returns:
        상대 방위각 (degrees, [0, 360), 0=dead ahead)
    """
    return WrapTo360(calculate_true_bearing(position) - own_course)


def relative_to_true_bearing(relative_bearing: float, course: float) -> float:
    """RaKrP = RaSP + course in effect"""
    return WrapTo360(relative_bearing + course)


def true_to_relative_bearing(true_bearing: float, course: float) -> float:
    """RaSP = RaKrP - course in effect"""
    return WrapTo360(true_bearing - course)


def calculate_aspect_angle(target_course: float, own_course: float) -> float:
    """
    Target의 aspect angle 계산

    Target heading과 own course의 reciprocal(own_course + 180) 사이의 각.

    Returns:
        Aspect angle (degrees, [0, 360))
        0   = 두 선박이 정면으로 마주봄 (reciprocal courses)
        180 = 같은 침로
    """
    reciprocal = WrapTo360(own_course + 180.0)
    return WrapTo360(target_course - reciprocal)
