"""
Plot 전체 계산 결과
"""
from typing import NamedTuple, Optional, Tuple

from ..maneuver import ManeuverOutcome, ManeuverSolved, SecondaryManeuverEffect
from ..target import TargetState


class PlotSolution(NamedTuple):
    """
    모든 target, primary maneuver, 다른 target에 대한 영향

    secondary[i] is None for the primary target, for targets without valid
    CPA data, and for every target when no maneuver was solved.
    """
    targets: Tuple[TargetState, ...]
    maneuver: ManeuverOutcome
    secondary: Tuple[Optional[SecondaryManeuverEffect], ...]

    @property
    def is_maneuver_solved(self) -> bool:
        return isinstance(self.maneuver, ManeuverSolved)

    def target(self, letter: str) -> TargetState:
        """Target by letter (B..F)"""
        for state in self.targets:
            if state.letter == letter:
                return state
        raise KeyError(letter)
