"""
Bow Crossing Range (BCR) 및 Bow Crossing Time (BCT) 계산
"""
from typing import Optional

from ..geometry import (
    ORIGIN,
    Vector2,
    dot_product,
    infinite_lines_intersect,
    polar_to_cartesian,
    unit_vector,
    vector_add,
    vector_magnitude,
    vector_subtract,
)
from ..utils import EPSILON, MINUTES_PER_HOUR, is_zero
from .types import BowCrossingData

# heading line / 상대 운동선을 정의하는 두 번째 점까지의 거리 (nm)
_LINE_EXTENT = 100.0


def calculate_bow_crossing(
    current_pos: Vector2,
    kbr: float,
    vbr: float,
    own_course: float,
    current_time: float
) -> Optional[BowCrossingData]:
    """
    Target 상대 운동선이 own ship heading line을 가로지르는 점 계산

    Args:
        current_pos: 현재 target 위치 (nm)
        kbr: 상대 운동 방향 (degrees)
        vbr: 상대 운동 속력 (knots)
        own_course: own ship heading (degrees)
        current_time: 현재 시각 (minutes since midnight)

    Returns:
        BowCrossingData, 또는 None if
        - 상대 운동 없음 (v_Br ≈ 0)
        - 두 직선이 평행
        - 교차점이 own ship 후방
        - 교차점이 target의 과거 항적 위
    """
    if is_zero(vbr):
        return None

    heading_end = polar_to_cartesian(own_course, _LINE_EXTENT)
    track_end = vector_add(current_pos, polar_to_cartesian(kbr, _LINE_EXTENT))

    cross_point = infinite_lines_intersect(ORIGIN, heading_end, current_pos, track_end)
    if cross_point is None:
        return None

    # 교차점이 own ship 전방인지 확인
    to_cross = vector_subtract(cross_point, ORIGIN)
    if dot_product(to_cross, unit_vector(own_course)) < EPSILON:
        return None

    # 교차점이 target의 미래 항적 위인지 확인
    target_to_cross = vector_subtract(cross_point, current_pos)
    if dot_product(target_to_cross, unit_vector(kbr)) < EPSILON:
        return None

    bct = vector_magnitude(target_to_cross) / vbr * MINUTES_PER_HOUR

    return BowCrossingData(
        bcr=vector_magnitude(to_cross),
        bct=bct,
        bc_clock=current_time + bct,
        point=cross_point,
    )
