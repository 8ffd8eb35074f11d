"""
Radar observation 및 motion 관련 types 정의
"""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class BearingType(Enum):
    """
    관측 방위의 종류
    """
    TRUE = "rakrp"          # 진방위 (compass bearing, RaKrP)
    RELATIVE = "rasp"       # 상대 방위 (relative to own heading, RaSP)


@dataclass(frozen=True)
class Observation:
    """
    Target 관측 1회 (radar bearing + distance)

    Attributes:
        time: 관측 시각 (minutes since midnight)
        bearing: 관측 방위 (degrees), bearing_type에 따라 진방위 또는 상대방위
        distance: 거리 (nm), 0은 "입력 없음"
        bearing_type: TRUE or RELATIVE
        course_at_observation: 관측 당시 own course (degrees).
            None이면 현재 own course 사용
    """
    time: float
    bearing: float
    distance: float
    bearing_type: BearingType = BearingType.TRUE
    course_at_observation: Optional[float] = None

    def __post_init__(self):
        if self.distance < 0:
            raise ValueError(f"distance must be non-negative. Got {self.distance}")
        if not isinstance(self.bearing_type, BearingType):
            raise ValueError(f"bearing_type must be a BearingType. Got {self.bearing_type!r}")


@dataclass(frozen=True)
class OwnShip:
    """
    Own Ship motion

    Attributes:
        course: degrees (0=North, clockwise)
        speed: knots
    """
    course: float = 0.0
    speed: float = 0.0

    def __post_init__(self):
        if self.speed < 0:
            raise ValueError(f"speed must be non-negative. Got {self.speed}")


class RelativeMotion(NamedTuple):
    """
    상대 운동 (DRM / SRM)
    """
    kbr: float   # Direction of relative motion (degrees, [0, 360))
    vbr: float   # Speed of relative motion (knots)


class TrueMotion(NamedTuple):
    """
    Target 진운동
    """
    kb: float      # True course (degrees, [0, 360))
    vb: float      # True speed (knots)
    aspect: float  # Aspect angle (degrees, [0, 360))


class ObservationBearings(NamedTuple):
    """
    관측 방위 정리 결과 (RaKrP / RaSP)
    """
    true_bearing: float       # RaKrP
    relative_bearing: float   # RaSP
