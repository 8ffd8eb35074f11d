"""
Line / Circle Intersection Geometry

Radar plotting paper의 작도(construction)에 필요한 교점 계산:
- 두 직선의 교점 (slope-intercept form, vertical line 특수 처리)
- 원점 중심 원과 직선의 교점 (0, 1, 2개)
- 점과 직선/선분 사이의 거리
"""

import numpy as np
from typing import Optional, Tuple

from ..utils import EPSILON
from .vector import (
    Vector2,
    cross_product,
    distance,
    dot_product,
    vector_add,
    vector_scale,
    vector_subtract,
)


def line_line_intersection(
    a0: Vector2,
    a1: Vector2,
    b0: Vector2,
    b1: Vector2,
    eps: float = EPSILON
) -> Optional[Vector2]:
    """
    두 무한 직선 (a0→a1), (b0→b1)의 교점 계산

    Each line is put in slope-intercept form y = m*x + b; a line whose
    x-extent is below eps is treated as vertical (x = const).

    Returns:
        교점 Vector2, 평행/일치하는 경우 None
    """
    a_vertical = abs(a1[0] - a0[0]) < eps
    b_vertical = abs(b1[0] - b0[0]) < eps

    # 두 직선 모두 수직 → 평행
    if a_vertical and b_vertical:
        return None

    if a_vertical:
        m2 = (b1[1] - b0[1]) / (b1[0] - b0[0])
        c2 = b1[1] - m2 * b1[0]
        return Vector2(float(a1[0]), float(m2 * a1[0] + c2))

    if b_vertical:
        m1 = (a1[1] - a0[1]) / (a1[0] - a0[0])
        c1 = a1[1] - m1 * a1[0]
        return Vector2(float(b1[0]), float(m1 * b1[0] + c1))

    m1 = (a1[1] - a0[1]) / (a1[0] - a0[0])
    c1 = a1[1] - m1 * a1[0]
    m2 = (b1[1] - b0[1]) / (b1[0] - b0[0])
    c2 = b1[1] - m2 * b1[0]

    if abs(m2 - m1) < eps:
        return None

    x = (c2 - c1) / (m1 - m2)
    y = m1 * x + c1
    return Vector2(float(x), float(y))


def infinite_lines_intersect(
    a0: Vector2,
    a1: Vector2,
    b0: Vector2,
    b1: Vector2,
    eps: float = EPSILON
) -> Optional[Vector2]:
    """
    Parametric (determinant) form of the line-line intersection.

    Returns None when the direction vectors are parallel (|det| < eps).
    """
    d1 = vector_subtract(a1, a0)
    d2 = vector_subtract(b1, b0)

    det = cross_product(d1, d2)
    if abs(det) < eps:
        return None

    t1 = cross_product(vector_subtract(b0, a0), d2) / det
    return vector_add(a0, vector_scale(d1, t1))


def segments_intersect(
    a0: Vector2,
    a1: Vector2,
    b0: Vector2,
    b1: Vector2,
    eps: float = EPSILON
) -> Optional[Vector2]:
    """Intersection of the bounded segments a0-a1 and b0-b1, or None"""
    d1 = vector_subtract(a1, a0)
    d2 = vector_subtract(b1, b0)

    det = cross_product(d1, d2)
    if abs(det) < eps:
        return None

    diff = vector_subtract(b0, a0)
    t1 = cross_product(diff, d2) / det
    t2 = cross_product(diff, d1) / det

    if 0.0 <= t1 <= 1.0 and 0.0 <= t2 <= 1.0:
        return vector_add(a0, vector_scale(d1, t1))
    return None


def line_circle_intersection(
    p0: Vector2,
    p1: Vector2,
    radius: float,
    eps: float = EPSILON
) -> Tuple[Vector2, ...]:
    """
    직선 (p0→p1)과 원점 중심, 반지름 radius인 원의 교점

    The line is written as y = m*(x - p1.x) + p1.y and substituted into
    x² + y² = r², giving a quadratic in x:

        (m² + 1)·x² + 2m(p1.y - m·p1.x)·x + (m·p1.x - p1.y)² - r² = 0

    A vertical line (x = p1.x) is solved directly.

    Returns:
        교점 tuple: () no crossing, (p,) tangent, (p_plus, p_minus) two crossings
    """
    # Vertical line: x = p1.x
    if abs(p1[0] - p0[0]) < eps:
        x = float(p1[0])
        discriminant = radius * radius - x * x
        if abs(discriminant) < eps:
            return (Vector2(x, 0.0),)
        if discriminant > 0:
            root = float(np.sqrt(discriminant))
            return (Vector2(x, root), Vector2(x, -root))
        return ()

    m = (p1[1] - p0[1]) / (p1[0] - p0[0])
    a = m * m + 1.0
    b = 2.0 * m * (p1[1] - m * p1[0])
    c = (m * p1[0] - p1[1]) ** 2 - radius * radius

    p = b / a
    q = c / a
    discriminant = p * p / 4.0 - q

    if abs(discriminant) < eps:
        x = -p / 2.0
        return (Vector2(float(x), float(m * (x - p1[0]) + p1[1])),)

    if discriminant > 0:
        root = np.sqrt(discriminant)
        x_plus = -p / 2.0 + root
        x_minus = -p / 2.0 - root
        return (
            Vector2(float(x_plus), float(m * (x_plus - p1[0]) + p1[1])),
            Vector2(float(x_minus), float(m * (x_minus - p1[0]) + p1[1])),
        )

    return ()


# ========================================
# Point / Line relations
# ========================================

def point_on_segment(
    s0: Vector2,
    s1: Vector2,
    point: Vector2,
    tolerance: float = 1e-9
) -> bool:
    """
    점이 선분 s0-s1의 bounding box 안에 있는지 확인

    Intended for points already known to lie on the infinite line s0→s1
    (e.g. a computed intersection).
    """
    x0, x1 = min(s0[0], s1[0]), max(s0[0], s1[0])
    y0, y1 = min(s0[1], s1[1]), max(s0[1], s1[1])
    return (x0 - tolerance <= point[0] <= x1 + tolerance and
            y0 - tolerance <= point[1] <= y1 + tolerance)


def point_to_line_distance(point: Vector2, line_start: Vector2, line_end: Vector2) -> float:
    """Perpendicular distance from point to the infinite line through line_start, line_end"""
    line_vec = vector_subtract(line_end, line_start)
    length_sq = dot_product(line_vec, line_vec)
    if length_sq < EPSILON:
        return distance(point, line_start)

    t = dot_product(vector_subtract(point, line_start), line_vec) / length_sq
    return distance(point, vector_add(line_start, vector_scale(line_vec, t)))


def closest_point_on_segment(point: Vector2, seg_start: Vector2, seg_end: Vector2) -> Vector2:
    seg_vec = vector_subtract(seg_end, seg_start)
    length_sq = dot_product(seg_vec, seg_vec)
    if length_sq < EPSILON:
        return Vector2(float(seg_start[0]), float(seg_start[1]))

    t = dot_product(vector_subtract(point, seg_start), seg_vec) / length_sq
    t = min(1.0, max(0.0, t))
    return vector_add(seg_start, vector_scale(seg_vec, t))


def point_to_segment_distance(point: Vector2, seg_start: Vector2, seg_end: Vector2) -> float:
    """Distance from point to the bounded segment seg_start-seg_end"""
    return distance(point, closest_point_on_segment(point, seg_start, seg_end))


def are_collinear(p1: Vector2, p2: Vector2, p3: Vector2, eps: float = EPSILON) -> bool:
    return abs(cross_product(vector_subtract(p2, p1), vector_subtract(p3, p1))) < eps
