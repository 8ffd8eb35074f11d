"""
Motion Module

관측 데이터로부터 상대 운동(DRM/SRM)과 진운동(course/speed/aspect) 계산
"""

from .types import (
    BearingType,
    Observation,
    OwnShip,
    RelativeMotion,
    TrueMotion,
    ObservationBearings,
)

from .relative_motion import (
    reconcile_bearings,
    observation_position,
    calculate_relative_motion,
    calculate_true_motion,
    calculate_relative_from_true,
)

__all__ = [
    # Types
    'BearingType',
    'Observation',
    'OwnShip',
    'RelativeMotion',
    'TrueMotion',
    'ObservationBearings',
    # Functions
    'reconcile_bearings',
    'observation_position',
    'calculate_relative_motion',
    'calculate_true_motion',
    'calculate_relative_from_true',
]
