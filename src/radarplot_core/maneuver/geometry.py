"""
Maneuver 작도 (velocity triangle construction)

Velocity triangle on the plot, for the observation interval Δt:

    p0_sub_own = sight[0] + reverse(own course) · l      (l = own speed · Δt)
    sight[1] - p0_sub_own                                = target true motion
    sight[1] - xpoint                                    = relative motion after maneuver
    xpoint   - p0_sub_own                                = own motion after maneuver

A new relative-motion direction (tangent to the desired-CPA circle) fixes the
line through sight[1] on which xpoint must lie. The two strategies differ in
the locus of possible xpoints:

- CourseChangeGeometry: own speed fixed → circle of radius l around p0_sub_own
- SpeedChangeGeometry:  own course fixed → line p0_sub_own → sight[0]
"""
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Sequence

from ..geometry import (
    Vector2,
    bearing_between,
    cartesian_to_polar,
    dot_product,
    line_circle_intersection,
    line_line_intersection,
    point_on_segment,
    polar_to_cartesian,
    unit_vector,
    vector_add,
    vector_subtract,
)
from ..utils import MINUTES_PER_HOUR, WrapTo360
from .types import ManeuverAxis, ManeuverCandidate


class VelocityTriangle(NamedTuple):
    """
    Maneuver 작도에 필요한 기준점 및 own ship 운동
    """
    sight0: Vector2
    sight1: Vector2
    p0_sub_own: Vector2
    own_course: float
    own_speed: float
    delta_time: float     # minutes
    travel: float         # l: own ship travel during delta_time (nm)
    turn_side: float      # STARBOARD (+1) or PORT (-1)

    @classmethod
    def build(cls, sight0, sight1, own_course, own_speed, delta_time, turn_side):
        travel = own_speed * (delta_time / MINUTES_PER_HOUR)
        p0_sub_own = vector_add(sight0, polar_to_cartesian(WrapTo360(own_course + 180.0), travel))
        return cls(sight0, sight1, p0_sub_own, own_course, own_speed, delta_time, travel, turn_side)

    def own_vector_end(self, course: float, speed: float) -> Vector2:
        """xpoint for a given own course / speed"""
        return vector_add(self.p0_sub_own, polar_to_cartesian(course, speed * self.delta_time / MINUTES_PER_HOUR))

    def speed_to(self, xpoint: Vector2) -> float:
        """
        Own speed along own course that ends the own vector at xpoint

        Signed: a point behind p0_sub_own (sternway) gives a negative speed.
        """
        along_course = dot_product(vector_subtract(xpoint, self.p0_sub_own), unit_vector(self.own_course))
        return along_course / (self.delta_time / MINUTES_PER_HOUR)


class TangentLine(NamedTuple):
    """
    Maneuver point에서 desired CPA 원에 그은 접선
    """
    kbr: float            # 접선 방향 (새 상대 운동 방향)
    point: Vector2        # 접점 (새 CPA 위치)
    offset: Vector2       # maneuver point → 접점 vector (m · û(kbr))


class ManeuverGeometry(ABC):
    """
    Course/speed 변경 작도의 공통 interface
    """
    axis: ManeuverAxis

    @abstractmethod
    def candidates(self, triangle: VelocityTriangle, tangents: Sequence[TangentLine]) -> List[ManeuverCandidate]:
        """각 접선에 대한 후보 해 (교점이 없으면 해당 접선은 후보 없음)"""

    @abstractmethod
    def fallback(self, triangle: VelocityTriangle, tangents: Sequence[TangentLine],
                 maneuver_point: Vector2) -> ManeuverCandidate:
        """후보가 하나도 없을 때의 명시적 해"""


class CourseChangeGeometry(ManeuverGeometry):
    """
    Own speed 유지, course 변경

    For each tangent, the line through v0 = sight[1] - p0_sub_own in the
    tangent direction is intersected with the circle of radius l (own speed
    circle), both taken relative to p0_sub_own.
    """
    axis = ManeuverAxis.COURSE

    def candidates(self, triangle, tangents):
        found = []
        v0 = vector_subtract(triangle.sight1, triangle.p0_sub_own)

        for tangent in tangents:
            v1 = vector_subtract(vector_subtract(triangle.sight1, tangent.offset), triangle.p0_sub_own)

            for crossing in line_circle_intersection(v0, v1, triangle.travel):
                xpoint = vector_add(crossing, triangle.p0_sub_own)
                course = cartesian_to_polar(crossing)[0]
                deviation = WrapTo360(triangle.turn_side * (course - triangle.own_course))

                found.append(ManeuverCandidate(
                    kbr=tangent.kbr,
                    tangent_point=tangent.point,
                    xpoint=xpoint,
                    course=course,
                    speed=triangle.own_speed,
                    deviation=deviation,
                    valid=deviation <= 180.0,
                ))

        return found

    def fallback(self, triangle, tangents, maneuver_point):
        # 원과 만나지 않음: maneuver point 방향으로 선회
        course = bearing_between(triangle.p0_sub_own, maneuver_point)
        first = tangents[0]
        return ManeuverCandidate(
            kbr=first.kbr,
            tangent_point=first.point,
            xpoint=vector_add(triangle.p0_sub_own, polar_to_cartesian(course, triangle.travel)),
            course=course,
            speed=triangle.own_speed,
            deviation=WrapTo360(triangle.turn_side * (course - triangle.own_course)),
            valid=False,
        )


class SpeedChangeGeometry(ManeuverGeometry):
    """
    Own course 유지, speed 변경

    The locus of xpoints for all own speeds at the current course is the line
    p0_sub_own → sight[0]; the segment between them covers speeds 0 .. own
    speed. Each tangent line through sight[1] is intersected with it.
    """
    axis = ManeuverAxis.SPEED

    def __init__(self, segment_tolerance: float = 1e-9):
        self.segment_tolerance = segment_tolerance

    def candidates(self, triangle, tangents):
        found = []
        # own course 방향의 두 번째 점: own speed가 0이어도 locus가 정의됨
        locus_end = vector_add(triangle.p0_sub_own, unit_vector(triangle.own_course))

        for tangent in tangents:
            crossing = line_line_intersection(
                triangle.p0_sub_own, locus_end,
                triangle.sight1, vector_subtract(triangle.sight1, tangent.offset),
            )
            if crossing is None:
                continue

            speed = triangle.speed_to(crossing)
            on_segment = point_on_segment(triangle.p0_sub_own, triangle.sight0, crossing,
                                          self.segment_tolerance)

            found.append(ManeuverCandidate(
                kbr=tangent.kbr,
                tangent_point=tangent.point,
                xpoint=crossing,
                course=triangle.own_course,
                speed=speed,
                deviation=triangle.own_speed - speed,
                valid=on_segment and speed >= 0.0,
            ))

        return found

    def fallback(self, triangle, tangents, maneuver_point):
        # 정지 (speed = 0)
        first = tangents[0]
        return ManeuverCandidate(
            kbr=first.kbr,
            tangent_point=first.point,
            xpoint=triangle.p0_sub_own,
            course=triangle.own_course,
            speed=0.0,
            deviation=triangle.own_speed,
            valid=False,
        )


def geometry_for(axis: ManeuverAxis, segment_tolerance: float = 1e-9) -> ManeuverGeometry:
    if axis is ManeuverAxis.COURSE:
        return CourseChangeGeometry()
    return SpeedChangeGeometry(segment_tolerance)
