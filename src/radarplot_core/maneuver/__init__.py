"""
Maneuver Module

원하는 CPA를 얻기 위한 회피 동작 계산:
- Maneuver point (시각 / 거리)
- Course 변경 또는 speed 변경 작도
- Maneuver 이후 CPA / bow crossing
- 다른 target에 대한 영향
"""

from .types import (
    ManeuverAxis,
    DegradedReason,
    ManeuverRequest,
    ManeuverCandidate,
    ManeuverUnset,
    ManeuverError,
    ManeuverSolved,
    ManeuverOutcome,
    SecondaryManeuverEffect,
)

from .geometry import (
    VelocityTriangle,
    TangentLine,
    ManeuverGeometry,
    CourseChangeGeometry,
    SpeedChangeGeometry,
    geometry_for,
)

from .solver import (
    ManeuverSolverParams,
    ManeuverSolver,
)

__all__ = [
    # Types
    'ManeuverAxis',
    'DegradedReason',
    'ManeuverRequest',
    'ManeuverCandidate',
    'ManeuverUnset',
    'ManeuverError',
    'ManeuverSolved',
    'ManeuverOutcome',
    'SecondaryManeuverEffect',
    # Geometry strategies
    'VelocityTriangle',
    'TangentLine',
    'ManeuverGeometry',
    'CourseChangeGeometry',
    'SpeedChangeGeometry',
    'geometry_for',
    # Solver
    'ManeuverSolverParams',
    'ManeuverSolver',
]
