"""
Closest Point of Approach (CPA) 및 Time to CPA (TCPA) 계산
"""
from typing import Optional

from ..geometry import (
    ORIGIN,
    Vector2,
    calculate_relative_bearing,
    calculate_true_bearing,
    dot_product,
    unit_vector,
    vector_add,
    vector_magnitude,
    vector_scale,
    vector_subtract,
)
from ..utils import EPSILON, MINUTES_PER_HOUR, is_zero
from .types import CPAData


def calculate_cpa(
    current_pos: Vector2,
    kbr: float,
    vbr: float,
    own_course: float,
    current_time: float,
    allow_past: bool = False
) -> Optional[CPAData]:
    """
    상대 운동선 위의 CPA 계산

    Own ship(원점)을 상대 운동 방향 unit vector 위로 투영:

        s        = (O - P) · û
        P_cpa    = P + s · û
        CPA      = ||P_cpa||
        TCPA     = s / v_Br × 60   (minutes)

    Args:
        current_pos: 현재 target 위치 P (nm)
        kbr: 상대 운동 방향 (degrees)
        vbr: 상대 운동 속력 (knots)
        own_course: bearing at CPA를 상대방위로 변환할 own course
        current_time: 현재 시각 (minutes since midnight)
        allow_past: True이면 이미 지나간 CPA(s < 0)도 음의 TCPA로 반환

    Returns:
        CPAData, 또는
        None if v_Br ≈ 0 (상대 운동 없음) or CPA already passed (allow_past=False)
    """
    if is_zero(vbr):
        return None

    direction = unit_vector(kbr)
    projection = dot_product(vector_subtract(ORIGIN, current_pos), direction)

    # 음수 투영: 이미 CPA 통과 (멀어지는 중)
    if projection < -EPSILON and not allow_past:
        return None

    cpa_point = vector_add(current_pos, vector_scale(direction, projection))
    tcpa = projection / vbr * MINUTES_PER_HOUR

    return CPAData(
        cpa=vector_magnitude(cpa_point),
        tcpa=tcpa,
        cpa_clock=current_time + tcpa,
        pcpa=calculate_true_bearing(cpa_point),
        spcpa=calculate_relative_bearing(cpa_point, own_course),
        point=cpa_point,
    )
