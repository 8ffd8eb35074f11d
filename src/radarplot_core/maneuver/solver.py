"""
Maneuver Solver

Course / speed 변경으로 원하는 CPA를 얻는 회피 동작 계산 (radar plotting 작도 재현)

Steps:
    A. Maneuver point 결정 (clock time 또는 거리)
    B. 입력 course/speed 적용 → 결과 CPA (direct branch)
    C. Desired CPA 원에 대한 접선 → course 또는 speed 후보 → 선택
    D. Maneuver 이후 상대 운동 / CPA / bow crossing
    E. 다른 target에 대한 영향 (apply_to_target)
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from ..errors import ErrorKind
from ..geometry import (
    ORIGIN,
    Vector2,
    bearing_between,
    calculate_relative_bearing,
    cross_product,
    distance,
    dot_product,
    line_circle_intersection,
    polar_to_cartesian,
    unit_vector,
    vector_add,
    vector_magnitude,
    vector_scale,
    vector_subtract,
)
from ..motion import OwnShip, calculate_relative_from_true
from ..risk import calculate_bow_crossing, calculate_cpa
from ..target import TargetState
from ..utils import (
    EPSILON,
    MINUTES_PER_HOUR,
    PORT,
    STARBOARD,
    WrapTo180,
    WrapTo360,
    angle_difference,
    is_zero,
)
from .geometry import TangentLine, VelocityTriangle, geometry_for
from .types import (
    DegradedReason,
    ManeuverAxis,
    ManeuverCandidate,
    ManeuverError,
    ManeuverOutcome,
    ManeuverRequest,
    ManeuverSolved,
    ManeuverUnset,
    SecondaryManeuverEffect,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManeuverSolverParams:
    """
    Maneuver solver 파라미터

    Attributes:
        epsilon: 수치 비교 허용 오차
        port_sector: maneuver point의 상대방위가 이 구간 [lo, hi)에 있으면
            port 선회 선호, 그 외에는 starboard
        segment_tolerance: speed 후보 교점의 선분 포함 판정 허용 오차 (nm)
    """
    epsilon: float = EPSILON
    port_sector: Tuple[float, float] = (90.0, 180.0)
    segment_tolerance: float = 1e-9


class ManeuverSolver:
    """
    Target 하나에 대한 회피 동작 계산

    Stateless: every call depends only on its arguments.

    Example:
        >>> solver = ManeuverSolver()
        >>> outcome = solver.solve(target, own_ship, ManeuverRequest(
        ...     target_index=0, maneuver_distance=5.0, desired_cpa=2.0))
        >>> if isinstance(outcome, ManeuverSolved):
        ...     print(outcome.required_course)
    """

    def __init__(self, params: Optional[ManeuverSolverParams] = None,
                 logger: Optional[logging.Logger] = None):
        self.params = params or ManeuverSolverParams()
        self.logger = logger or logging.getLogger(__name__)

    # ========================================
    # Entry point
    # ========================================

    def solve(self, target: TargetState, own_ship: OwnShip,
              request: ManeuverRequest) -> ManeuverOutcome:
        """
        Maneuver 계산

        Args:
            target: evaluate_target 결과 (primary target)
            own_ship: 현재 own course / speed
            request: maneuver point 및 목표 (desired CPA 또는 새 course/speed)

        Returns:
            ManeuverUnset: 입력 없음 (point 또는 목표 미지정, target 미완성)
            ManeuverError: 실패 (ErrorKind)
            ManeuverSolved: 결과 (degraded이면 fallback 해)
        """
        if not target.is_complete:
            return ManeuverUnset("target observations are incomplete")
        if not target.has_cpa or target.relative_motion.vbr <= self.params.epsilon:
            return ManeuverError(ErrorKind.DEGENERATE_GEOMETRY, "target has no valid CPA data")
        if request.desired_cpa is None and request.new_value is None:
            return ManeuverUnset("no maneuver goal given")

        point = self.maneuver_point(target, request)
        if isinstance(point, (ManeuverUnset, ManeuverError)):
            return point

        triangle = VelocityTriangle.build(
            target.sight[0], target.sight[1],
            own_ship.course, own_ship.speed,
            target.delta_time,
            self.turn_side(point, own_ship.course),
        )

        if request.by_cpa:
            return self._solve_for_cpa(target, own_ship, request, point, triangle)
        return self._solve_direct(target, own_ship, request, point, triangle)

    # ========================================
    # Step A: maneuver point
    # ========================================

    def maneuver_point(self, target: TargetState,
                       request: ManeuverRequest) -> Union[Vector2, ManeuverUnset, ManeuverError]:
        """
        Maneuver point (target 상대 운동선 위의 위치) 결정

        By time: 현재 위치에서 CPA 방향으로 (t_m - t_2) / TCPA 비율만큼 이동
        (비율은 [0, 1]로 제한하지 않음). t_m이 현재 시각 이전이면 현재 위치.

        By distance: 두 관측을 지나는 무한 직선과 반지름 D 원의 교점 중
        현재 이후 가장 먼저 도달하는 점.
        """
        eps = self.params.epsilon
        relative = target.relative_motion
        current = target.current_position

        if request.maneuver_time is not None and request.maneuver_time > 0:
            elapsed = request.maneuver_time - target.current_time
            if elapsed <= 0:
                self.logger.debug("target %s: maneuver time %.1f not after current time, using current position",
                                  target.letter, request.maneuver_time)
                return current

            tcpa = target.cpa.tcpa
            if is_zero(tcpa, eps):
                # CPA 위에 있음: 상대 운동 방향으로 진행
                return vector_add(current, polar_to_cartesian(relative.kbr, relative.vbr * elapsed / MINUTES_PER_HOUR))

            fraction = elapsed / tcpa
            self.logger.debug("target %s: maneuver point by time, fraction %.4f of TCPA", target.letter, fraction)
            return vector_add(current, vector_scale(vector_subtract(target.cpa.point, current), fraction))

        if request.maneuver_distance is not None and request.maneuver_distance > 0:
            crossings = line_circle_intersection(target.sight[0], target.sight[1], request.maneuver_distance, eps)
            if not crossings:
                return ManeuverError(ErrorKind.INFEASIBLE_GOAL,
                                     f"relative motion never reaches {request.maneuver_distance} nm")

            direction = unit_vector(relative.kbr)
            reachable = []
            for crossing in crossings:
                offset = vector_subtract(crossing, current)
                travel_time = vector_magnitude(offset) / relative.vbr * MINUTES_PER_HOUR
                if dot_product(offset, direction) < 0:
                    travel_time = -travel_time
                if travel_time >= -eps:
                    reachable.append((travel_time, crossing))

            if not reachable:
                return ManeuverError(ErrorKind.INFEASIBLE_GOAL, "maneuver point in the past")

            travel_time, crossing = min(reachable, key=lambda item: item[0])
            self.logger.debug("target %s: maneuver point by distance %.2f nm, reached in %.1f min",
                              target.letter, request.maneuver_distance, travel_time)
            return crossing

        return ManeuverUnset("no maneuver point given")

    def turn_side(self, point: Vector2, own_course: float) -> float:
        """선호 선회 방향: maneuver point 상대방위가 port sector 안이면 PORT"""
        lo, hi = self.params.port_sector
        relative_bearing = calculate_relative_bearing(point, own_course)
        return PORT if lo <= relative_bearing < hi else STARBOARD

    # ========================================
    # Step B: explicit course / speed
    # ========================================

    def _solve_direct(self, target, own_ship, request, point, triangle) -> ManeuverOutcome:
        eps = self.params.epsilon
        value = request.new_value

        if request.axis is ManeuverAxis.COURSE:
            if abs(WrapTo180(value - own_ship.course)) < eps:
                return ManeuverError(ErrorKind.NO_CHANGE_REQUESTED, "new course equals current course")
            course, speed = WrapTo360(value), own_ship.speed
        else:
            if value < 0:
                return ManeuverError(ErrorKind.INPUT_INCOMPLETE, f"new speed must be non-negative. Got {value}")
            if abs(value - own_ship.speed) < eps:
                return ManeuverError(ErrorKind.NO_CHANGE_REQUESTED, "new speed equals current speed")
            course, speed = own_ship.course, float(value)

        xpoint = triangle.own_vector_end(course, speed)
        self.logger.debug("target %s: direct %s maneuver, course %.1f speed %.2f",
                          target.letter, request.axis.value, course, speed)

        return self._after_maneuver(target, own_ship, request.axis, point, triangle,
                                    course, speed, xpoint, tangent_point=None)

    # ========================================
    # Step C: desired CPA
    # ========================================

    def tangent_lines(self, point: Vector2, desired_cpa: float) -> List[TangentLine]:
        """
        Maneuver point에서 반지름 desired_cpa 원(원점 중심)에 그은 두 접선

            α = asin(c / D),  β = bearing(point → origin),  m = sqrt(D² - c²)
            KBr_new ∈ {β + α, β - α},  접점 = point + m · û(KBr_new)
        """
        point_distance = vector_magnitude(point)
        alpha = float(np.degrees(np.arcsin(desired_cpa / point_distance)))
        beta = bearing_between(point, ORIGIN)
        leg = float(np.sqrt(point_distance ** 2 - desired_cpa ** 2))

        tangents = []
        for kbr in (WrapTo360(beta + alpha), WrapTo360(beta - alpha)):
            offset = polar_to_cartesian(kbr, leg)
            tangents.append(TangentLine(kbr=kbr, point=vector_add(point, offset), offset=offset))
        return tangents

    def _solve_for_cpa(self, target, own_ship, request, point, triangle) -> ManeuverOutcome:
        eps = self.params.epsilon
        desired = request.desired_cpa
        point_distance = vector_magnitude(point)

        if desired <= 0:
            return ManeuverError(ErrorKind.INPUT_INCOMPLETE, "desired CPA must be positive")
        if desired >= point_distance - eps:
            return ManeuverError(ErrorKind.INFEASIBLE_GOAL,
                                 f"desired CPA {desired} nm is not inside maneuver distance {point_distance:.2f} nm")

        tangents = self.tangent_lines(point, desired)
        geometry = geometry_for(request.axis, self.params.segment_tolerance)
        self.logger.debug("target %s: %s geometry, tangents %.1f / %.1f, turn side %s",
                          target.letter, request.axis.value, tangents[0].kbr, tangents[1].kbr,
                          "port" if triangle.turn_side == PORT else "starboard")

        chosen, degraded = self.select_candidate(geometry.candidates(triangle, tangents))
        if chosen is None:
            chosen = geometry.fallback(triangle, tangents, point)
            degraded = DegradedReason.NO_CANDIDATE

        if degraded is not None:
            self.logger.warning("target %s: no valid %s solution (%s), using course %.1f speed %.2f",
                                target.letter, request.axis.value, degraded.value, chosen.course, chosen.speed)

        return self._after_maneuver(target, own_ship, request.axis, point, triangle,
                                    chosen.course, chosen.speed, chosen.xpoint,
                                    tangent_point=chosen.tangent_point, degraded=degraded)

    def select_candidate(
        self,
        candidates: List[ManeuverCandidate]
    ) -> Tuple[Optional[ManeuverCandidate], Optional[DegradedReason]]:
        """
        후보 선택

        Returns:
            (최소 deviation 유효 후보, None), 유효 후보가 없으면
            (전체 중 최소 deviation 후보, NO_VALID_CANDIDATE), 후보가 없으면 (None, None)
        """
        for candidate in candidates:
            self.logger.debug("candidate course %.1f speed %.2f deviation %.2f %s",
                              candidate.course, candidate.speed, candidate.deviation,
                              "accepted" if candidate.valid else "rejected")

        if not candidates:
            return None, None

        valid = [c for c in candidates if c.valid]
        if valid:
            return min(valid, key=lambda c: c.deviation), None
        return min(candidates, key=lambda c: c.deviation), DegradedReason.NO_VALID_CANDIDATE

    # ========================================
    # Step D: after maneuver
    # ========================================

    def _after_maneuver(self, target, own_ship, axis, point, triangle, course, speed, xpoint,
                        tangent_point=None, degraded=None) -> ManeuverOutcome:
        relative = target.relative_motion
        true_motion = target.true_motion

        new_relative = calculate_relative_from_true(true_motion.kb, true_motion.vb, course, speed)
        if new_relative.vbr <= self.params.epsilon:
            return ManeuverError(ErrorKind.DEGENERATE_GEOMETRY, "no relative motion after maneuver")

        time_to_maneuver = distance(target.current_position, point) / relative.vbr * MINUTES_PER_HOUR
        maneuver_clock = target.current_time + time_to_maneuver

        cpa = calculate_cpa(point, new_relative.kbr, new_relative.vbr, course, maneuver_clock, allow_past=True)
        crossing = calculate_bow_crossing(point, new_relative.kbr, new_relative.vbr, course, maneuver_clock)

        # 원점에서 새 상대 운동선까지의 수직 거리
        new_cpa = abs(cross_product(point, unit_vector(new_relative.kbr)))
        course_change = angle_difference(course, own_ship.course)

        solved = ManeuverSolved(
            axis=axis,
            required_course=course if axis is ManeuverAxis.COURSE else None,
            required_speed=speed if axis is ManeuverAxis.SPEED else None,
            new_kbr=new_relative.kbr,
            new_vbr=new_relative.vbr,
            new_cpa=new_cpa,
            new_tcpa=cpa.tcpa,
            new_cpa_clock=cpa.cpa_clock,
            new_pcpa=cpa.pcpa,
            new_spcpa=cpa.spcpa,
            new_bow_crossing=crossing,
            maneuver_point=point,
            maneuver_distance=vector_magnitude(point),
            maneuver_clock=maneuver_clock,
            tangent_cpa_point=cpa.point if tangent_point is None or degraded is not None else tangent_point,
            own_apex_point=triangle.p0_sub_own,
            new_own_vector_end=xpoint,
            relative_motion_delta=angle_difference(new_relative.kbr, relative.kbr),
            new_relative_bearing=calculate_relative_bearing(point, course),
            course_or_speed_delta=course_change if axis is ManeuverAxis.COURSE else speed - own_ship.speed,
            course_change=course_change,
            time_to_maneuver=time_to_maneuver,
            degraded=degraded,
        )

        self.logger.debug("target %s: solved, course %.1f speed %.2f new CPA %.2f nm",
                          target.letter, course, speed, new_cpa)
        return solved

    # ========================================
    # Step E: other targets
    # ========================================

    def apply_to_target(self, target: TargetState, own_ship: OwnShip,
                        solved: ManeuverSolved) -> Optional[SecondaryManeuverEffect]:
        """
        Primary maneuver의 새 course/speed를 다른 target에 적용

        The target is advanced along its current relative motion to the
        maneuver clock time; from there its true motion is held fixed.

        Returns:
            SecondaryManeuverEffect, 또는 None (target에 유효한 CPA 데이터 없음)
        """
        if not target.has_cpa or target.relative_motion.vbr <= self.params.epsilon:
            return None

        course = own_ship.course if solved.required_course is None else solved.required_course
        speed = own_ship.speed if solved.required_speed is None else solved.required_speed

        relative = target.relative_motion
        elapsed = solved.maneuver_clock - target.current_time
        position = vector_add(target.current_position,
                              polar_to_cartesian(relative.kbr, relative.vbr * elapsed / MINUTES_PER_HOUR))

        new_relative = calculate_relative_from_true(target.true_motion.kb, target.true_motion.vb, course, speed)
        cpa = calculate_cpa(position, new_relative.kbr, new_relative.vbr, course, solved.maneuver_clock)
        crossing = calculate_bow_crossing(position, new_relative.kbr, new_relative.vbr, course, solved.maneuver_clock)

        return SecondaryManeuverEffect(
            target_index=target.index,
            new_kbr=new_relative.kbr,
            new_vbr=new_relative.vbr,
            new_cpa=cpa,
            new_bow_crossing=crossing,
        )
