"""
Target 계산: 두 관측 → 상대 운동 → 진운동 → CPA / bow crossing
"""
import logging
from typing import Optional, Sequence

from ..errors import ErrorKind
from ..motion import (
    Observation,
    OwnShip,
    calculate_relative_motion,
    calculate_true_motion,
    observation_position,
    reconcile_bearings,
)
from ..risk import calculate_bow_crossing, calculate_cpa
from ..utils import EPSILON, NR_TARGETS, is_zero
from .types import TargetState

logger = logging.getLogger(__name__)


def evaluate_target(
    index: int,
    observations: Sequence[Optional[Observation]],
    own_ship: OwnShip
) -> TargetState:
    """
    Target 하나의 모든 파생 값 계산

    Args:
        index: target index (0..4, B..F)
        observations: (first, second) 관측, 입력되지 않은 관측은 None
        own_ship: 현재 own course / speed

    Returns:
        TargetState (incomplete input은 error=INPUT_INCOMPLETE)

    Raises:
        ValueError: index가 범위 밖이거나 관측이 2개가 아닌 경우
    """
    if not 0 <= index < NR_TARGETS:
        raise ValueError(f"target index must be in [0, {NR_TARGETS}). Got {index}")
    if len(observations) != 2:
        raise ValueError(f"exactly two observations are required. Got {len(observations)}")

    first, second = observations
    bearings = tuple(
        None if obs is None else reconcile_bearings(obs, own_ship.course)
        for obs in (first, second)
    )
    state = TargetState(index=index, observations=(first, second), bearings=bearings)

    if first is None or second is None or first.distance <= 0 or second.distance <= 0:
        return state._replace(
            error=ErrorKind.INPUT_INCOMPLETE,
            error_reason="both observations need a positive distance",
        )

    delta_time = second.time - first.time
    sight = (
        observation_position(bearings[0].true_bearing, first.distance),
        observation_position(bearings[1].true_bearing, second.distance),
    )
    state = state._replace(delta_time=delta_time, sight=sight)

    relative = calculate_relative_motion(sight[0], sight[1], delta_time)
    if relative is None:
        return state._replace(
            error=ErrorKind.INPUT_INCOMPLETE,
            error_reason="second observation must be later than the first",
        )

    true_motion = calculate_true_motion(relative.kbr, relative.vbr, own_ship.course, own_ship.speed)
    state = state._replace(relative_motion=relative, true_motion=true_motion)

    if is_zero(relative.vbr, EPSILON):
        logger.debug("target %s: no relative motion", state.letter)
        return state._replace(
            error=ErrorKind.DEGENERATE_GEOMETRY,
            error_reason="target has no relative motion",
        )

    cpa = calculate_cpa(sight[1], relative.kbr, relative.vbr, own_ship.course, second.time)
    crossing = calculate_bow_crossing(sight[1], relative.kbr, relative.vbr, own_ship.course, second.time)

    return state._replace(cpa=cpa, bow_crossing=crossing)
