"""
Maneuver request / result types
"""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Union

from ..errors import ErrorKind
from ..geometry import Vector2
from ..risk import BowCrossingData, CPAData
from ..utils import NR_TARGETS


class ManeuverAxis(Enum):
    """
    회피 동작 종류: course 변경 또는 speed 변경
    """
    COURSE = "course"
    SPEED = "speed"


class DegradedReason(Enum):
    """
    Best-effort (fallback) 해의 사유
    """
    NO_VALID_CANDIDATE = "no_valid_candidate"  # 유효 후보 없음 → 최소 deviation 후보 사용
    NO_CANDIDATE = "no_candidate"              # 후보 자체가 없음 → 명시적 fallback


@dataclass(frozen=True)
class ManeuverRequest:
    """
    Maneuver 입력

    Maneuver point: maneuver_time (clock time) 또는 maneuver_distance (nm) 중 하나.
    Goal: desired_cpa (nm) 또는 new_value (course° / speed kn, axis에 따라) 중 하나.
    둘 중 어느 것도 주어지지 않은 경우는 "입력 없음"으로 solver가 Unset 반환.

    Raises:
        ValueError: 두 형식이 동시에 주어지거나 음수 거리/CPA
    """
    target_index: int
    axis: ManeuverAxis = ManeuverAxis.COURSE
    maneuver_time: Optional[float] = None
    maneuver_distance: Optional[float] = None
    desired_cpa: Optional[float] = None
    new_value: Optional[float] = None

    def __post_init__(self):
        if not 0 <= self.target_index < NR_TARGETS:
            raise ValueError(f"target_index must be in [0, {NR_TARGETS}). Got {self.target_index}")
        if not isinstance(self.axis, ManeuverAxis):
            raise ValueError(f"axis must be a ManeuverAxis. Got {self.axis!r}")
        if self.maneuver_time is not None and self.maneuver_distance is not None:
            raise ValueError("give either maneuver_time or maneuver_distance, not both")
        if self.desired_cpa is not None and self.new_value is not None:
            raise ValueError("give either desired_cpa or new_value, not both")
        if self.maneuver_distance is not None and self.maneuver_distance < 0:
            raise ValueError(f"maneuver_distance must be non-negative. Got {self.maneuver_distance}")
        if self.desired_cpa is not None and self.desired_cpa < 0:
            raise ValueError(f"desired_cpa must be non-negative. Got {self.desired_cpa}")

    @property
    def by_time(self) -> bool:
        return self.maneuver_time is not None

    @property
    def by_cpa(self) -> bool:
        return self.desired_cpa is not None


class ManeuverCandidate(NamedTuple):
    """
    Course/speed 후보 해 하나
    """
    kbr: float               # 새 상대 운동 방향 (tangent direction)
    tangent_point: Vector2   # desired CPA 원 위의 접점
    xpoint: Vector2          # 새 own ship vector 끝점
    course: float
    speed: float
    deviation: float         # course: 선호 방향으로의 선회각, speed: own speed - 후보 speed
    valid: bool


class ManeuverUnset(NamedTuple):
    """입력 없음 (maneuver 미설정)"""
    reason: Optional[str] = None


class ManeuverError(NamedTuple):
    kind: ErrorKind
    reason: str


class ManeuverSolved(NamedTuple):
    """
    Maneuver 이후 ("nach Manöver") 계산 결과
    """
    axis: ManeuverAxis
    required_course: Optional[float]      # course axis일 때만
    required_speed: Optional[float]       # speed axis일 때만
    new_kbr: float
    new_vbr: float
    new_cpa: float
    new_tcpa: float                       # minutes from maneuver point
    new_cpa_clock: float
    new_pcpa: float
    new_spcpa: float
    new_bow_crossing: Optional[BowCrossingData]
    maneuver_point: Vector2
    maneuver_distance: float
    maneuver_clock: float
    tangent_cpa_point: Vector2
    own_apex_point: Vector2               # p0_sub_own (velocity triangle apex)
    new_own_vector_end: Vector2           # xpoint
    relative_motion_delta: float          # newKBr - KBr, (-180, 180]
    new_relative_bearing: float           # RaSP of maneuver point under new course
    course_or_speed_delta: float          # degrees (course) or knots (speed)
    course_change: float                  # new course - own course, (-180, 180]
    time_to_maneuver: float               # minutes
    degraded: Optional[DegradedReason] = None

    @property
    def is_degraded(self) -> bool:
        return self.degraded is not None

    @property
    def new_bcr(self) -> Optional[float]:
        return None if self.new_bow_crossing is None else self.new_bow_crossing.bcr

    @property
    def new_bct(self) -> Optional[float]:
        return None if self.new_bow_crossing is None else self.new_bow_crossing.bct


ManeuverOutcome = Union[ManeuverUnset, ManeuverSolved, ManeuverError]


class SecondaryManeuverEffect(NamedTuple):
    """
    Primary target maneuver가 다른 target에 미치는 영향

    The secondary target's true motion is held fixed; only own course/speed
    change. new_cpa is None when the new CPA already lies in the past.
    """
    target_index: int
    new_kbr: float
    new_vbr: float
    new_cpa: Optional[CPAData]
    new_bow_crossing: Optional[BowCrossingData]
