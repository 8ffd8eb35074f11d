"""
CPA / Bow Crossing 결과 types
"""
from typing import NamedTuple

from ..geometry import Vector2


class CPAData(NamedTuple):
    """
    Closest Point of Approach 계산 결과
    """
    cpa: float           # Distance at CPA (nm)
    tcpa: float          # Time to CPA (minutes), 음수는 이미 CPA 통과
    cpa_clock: float     # Clock time at CPA (minutes since midnight)
    pcpa: float          # 진방위 at CPA (degrees)
    spcpa: float         # 상대방위 at CPA (degrees)
    point: Vector2       # CPA 위치

    @property
    def is_past(self) -> bool:
        return self.tcpa < 0


class BowCrossingData(NamedTuple):
    """
    Bow crossing (target이 own ship 선수 heading line을 가로지름) 계산 결과
    """
    bcr: float           # Bow crossing range (nm)
    bct: float           # Time to bow crossing (minutes)
    bc_clock: float      # Clock time of crossing (minutes since midnight)
    point: Vector2       # Crossing 위치
