"""
Target 상태 types
"""
from typing import NamedTuple, Optional, Tuple

from ..errors import ErrorKind
from ..geometry import Vector2
from ..motion import Observation, ObservationBearings, RelativeMotion, TrueMotion
from ..risk import BowCrossingData, CPAData
from ..utils import TARGET_LETTERS


class TargetState(NamedTuple):
    """
    한 target의 관측 및 계산 결과

    Each derived block (relative/true motion, CPA, bow crossing) is either a
    complete record or None.
    """
    index: int
    observations: Tuple[Optional[Observation], Optional[Observation]]
    bearings: Tuple[Optional[ObservationBearings], Optional[ObservationBearings]]
    delta_time: Optional[float] = None                   # minutes
    sight: Optional[Tuple[Vector2, Vector2]] = None      # 관측 위치 (nm)
    relative_motion: Optional[RelativeMotion] = None
    true_motion: Optional[TrueMotion] = None
    cpa: Optional[CPAData] = None
    bow_crossing: Optional[BowCrossingData] = None
    error: Optional[ErrorKind] = None
    error_reason: Optional[str] = None

    @property
    def letter(self) -> str:
        return TARGET_LETTERS[self.index]

    @property
    def has_cpa(self) -> bool:
        return self.cpa is not None

    @property
    def has_crossing(self) -> bool:
        return self.bow_crossing is not None

    @property
    def is_complete(self) -> bool:
        """두 관측이 모두 유효하여 상대 운동이 정의됨"""
        return self.relative_motion is not None

    @property
    def current_position(self) -> Optional[Vector2]:
        return None if self.sight is None else self.sight[1]

    @property
    def current_time(self) -> Optional[float]:
        second = self.observations[1]
        return None if second is None else second.time
