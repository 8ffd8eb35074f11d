"""
계산 실패 분류

Failures are returned as values (never raised) from the resolvers and the
maneuver solver.
"""
from enum import Enum


class ErrorKind(Enum):
    INPUT_INCOMPLETE = "input_incomplete"          # 거리 누락/0, 관측 간격 <= 0
    DEGENERATE_GEOMETRY = "degenerate_geometry"    # 평행선, 상대 속력 0
    INFEASIBLE_GOAL = "infeasible_goal"            # desired CPA >= maneuver distance 등
    NO_CHANGE_REQUESTED = "no_change_requested"    # 입력 course/speed = 현재 값
