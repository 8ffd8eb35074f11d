"""
Plot pipeline: 관측 → target 계산 → maneuver → 다른 target 영향
"""
import logging
from typing import Optional, Sequence

from ..maneuver import ManeuverRequest, ManeuverSolved, ManeuverSolver, ManeuverUnset
from ..motion import Observation, OwnShip
from ..target import evaluate_target
from ..utils import NR_TARGETS
from .types import PlotSolution

logger = logging.getLogger(__name__)


def solve_plot(
    observations: Sequence[Sequence[Optional[Observation]]],
    own_ship: OwnShip,
    request: Optional[ManeuverRequest] = None,
    solver: Optional[ManeuverSolver] = None
) -> PlotSolution:
    """
    Radar plot 전체 계산

    Args:
        observations: target별 (first, second) 관측, 최대 NR_TARGETS개.
            빠진 target은 관측 없음으로 처리
        own_ship: 현재 own course / speed
        request: primary target maneuver 입력 (None이면 maneuver 없음)
        solver: 사용할 ManeuverSolver (None이면 기본 파라미터)

    Returns:
        PlotSolution (같은 입력에 대해 항상 같은 결과)

    Raises:
        ValueError: target이 NR_TARGETS개보다 많은 경우
    """
    if len(observations) > NR_TARGETS:
        raise ValueError(f"at most {NR_TARGETS} targets can be plotted. Got {len(observations)}")

    solver = solver or ManeuverSolver()
    padded = list(observations) + [(None, None)] * (NR_TARGETS - len(observations))
    targets = tuple(evaluate_target(index, pair, own_ship) for index, pair in enumerate(padded))

    for state in targets:
        if state.error is not None:
            logger.debug("target %s: %s", state.letter, state.error_reason)

    if request is None:
        return PlotSolution(targets, ManeuverUnset("no maneuver requested"), (None,) * NR_TARGETS)

    maneuver = solver.solve(targets[request.target_index], own_ship, request)
    if not isinstance(maneuver, ManeuverSolved):
        return PlotSolution(targets, maneuver, (None,) * NR_TARGETS)

    secondary = tuple(
        None if state.index == request.target_index else solver.apply_to_target(state, own_ship, maneuver)
        for state in targets
    )
    return PlotSolution(targets, maneuver, secondary)
