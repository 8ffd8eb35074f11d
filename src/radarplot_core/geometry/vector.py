"""
2D Vector Operations (radar plotting plane)

좌표계 정의:
-------------
Own ship은 항상 원점 (0, 0)에 위치.

   - +x = East, +y = North
   - bearing 0° = North (+y 방향), 90° = East (+x 방향)
   - 회전: 시계방향 (CW)
   - 변환: x = d*sin(θ), y = d*cos(θ)

모든 bearing 출력은 [0, 360)으로 정규화됨.
"""

import numpy as np
from typing import NamedTuple, Tuple

from ..utils import EPSILON, WrapTo360


class Vector2(NamedTuple):
    """Point or displacement in the plotting plane (nautical miles or knots)"""
    x: float
    y: float


ORIGIN = Vector2(0.0, 0.0)


def as_vector(v) -> Vector2:
    """tuple, list, numpy array → Vector2"""
    if isinstance(v, Vector2):
        return v
    arr = np.asarray(v, dtype=float).flatten()[:2]
    return Vector2(float(arr[0]), float(arr[1]))


# ========================================
# Vector Arithmetic
# ========================================

def vector_add(v1: Vector2, v2: Vector2) -> Vector2:
    return Vector2(v1[0] + v2[0], v1[1] + v2[1])


def vector_subtract(v1: Vector2, v2: Vector2) -> Vector2:
    """v1 - v2"""
    return Vector2(v1[0] - v2[0], v1[1] - v2[1])


def vector_scale(v: Vector2, scalar: float) -> Vector2:
    return Vector2(v[0] * scalar, v[1] * scalar)


def vector_magnitude(v: Vector2) -> float:
    return float(np.hypot(v[0], v[1]))


def distance(p1: Vector2, p2: Vector2) -> float:
    return float(np.hypot(p2[0] - p1[0], p2[1] - p1[1]))


def vector_normalize(v: Vector2) -> Vector2:
    """Unit vector; the zero vector maps to itself."""
    mag = vector_magnitude(v)
    if mag < EPSILON:
        return ORIGIN
    return Vector2(v[0] / mag, v[1] / mag)


def dot_product(v1: Vector2, v2: Vector2) -> float:
    return v1[0] * v2[0] + v1[1] * v2[1]


def cross_product(v1: Vector2, v2: Vector2) -> float:
    """z-component of the 3D cross product"""
    return v1[0] * v2[1] - v1[1] * v2[0]


# ========================================
# Polar (bearing, distance) <-> Cartesian
# ========================================

def polar_to_cartesian(bearing: float, dist: float) -> Vector2:
    """
    Nautical bearing / distance를 Cartesian vector로 변환

    Args:
        bearing: degrees, 0=North, clockwise
        dist: distance (nm) or speed (kn)

    Returns:
        Vector2(x_east, y_north)
    """
    bearing_rad = np.radians(bearing)
    return Vector2(float(dist * np.sin(bearing_rad)), float(dist * np.cos(bearing_rad)))


def cartesian_to_polar(v: Vector2) -> Tuple[float, float]:
    """
    Cartesian vector를 (bearing, distance)로 변환

    Returns:
        (bearing, distance)
        bearing: degrees, [0, 360), 0=North, clockwise
        distance: magnitude of v

    Notes:
        - 길이가 EPSILON 미만인 vector는 (0.0, 0.0) 반환
    """
    dist = vector_magnitude(v)
    if dist < EPSILON:
        return 0.0, 0.0
    # atan2(East, North) gives angle from North, clockwise
    bearing = WrapTo360(np.degrees(np.arctan2(v[0], v[1])))
    return bearing, dist


def bearing_between(p1: Vector2, p2: Vector2) -> float:
    """Bearing from p1 to p2 (degrees, [0, 360))"""
    return cartesian_to_polar(vector_subtract(p2, p1))[0]


def unit_vector(bearing: float) -> Vector2:
    return polar_to_cartesian(bearing, 1.0)


# ========================================
# Rotation / Misc
# ========================================

def rotate_vector(v: Vector2, angle_deg: float) -> Vector2:
    """
    Rotate v clockwise by angle_deg (nautical sense), so that
    cartesian_to_polar(rotate_vector(v, a))[0] == bearing(v) + a.
    """
    rad = np.radians(angle_deg)
    c, s = np.cos(rad), np.sin(rad)
    return Vector2(float(v[0] * c + v[1] * s), float(-v[0] * s + v[1] * c))


def rotate_point_around(point: Vector2, center: Vector2, angle_deg: float) -> Vector2:
    rotated = rotate_vector(vector_subtract(point, center), angle_deg)
    return vector_add(rotated, center)


def angle_between_vectors(v1: Vector2, v2: Vector2) -> float:
    """Unsigned angle between two vectors in degrees, [0, 180]"""
    mag1 = vector_magnitude(v1)
    mag2 = vector_magnitude(v2)
    if mag1 < EPSILON or mag2 < EPSILON:
        return 0.0
    cos_angle = np.clip(dot_product(v1, v2) / (mag1 * mag2), -1.0, 1.0)
    return float(np.degrees(np.arccos(cos_angle)))


def interpolate_points(p1: Vector2, p2: Vector2, t: float) -> Vector2:
    """t = 0 → p1, t = 1 → p2 (extrapolates outside [0, 1])"""
    return Vector2(p1[0] + t * (p2[0] - p1[0]), p1[1] + t * (p2[1] - p1[1]))
