"""
Tests for the whole-plot pipeline.
"""

import pytest

from radarplot_core import (
    ErrorKind,
    ManeuverAxis,
    ManeuverError,
    ManeuverRequest,
    ManeuverSolved,
    ManeuverUnset,
    Observation,
    solve_plot,
)
from radarplot_core.motion import calculate_relative_from_true
from radarplot_core.utils import NR_TARGETS


@pytest.fixture
def two_targets(head_on_observations, beam_observations):
    return [head_on_observations, beam_observations]


@pytest.fixture
def course_request():
    return ManeuverRequest(target_index=0, axis=ManeuverAxis.COURSE, maneuver_distance=5.0, desired_cpa=2.0)


class TestSolvePlot:
    """Test suite for solve_plot."""

    def test_without_maneuver(self, two_targets, own_ship):
        solution = solve_plot(two_targets, own_ship)

        assert len(solution.targets) == NR_TARGETS
        assert [t.letter for t in solution.targets] == ['B', 'C', 'D', 'E', 'F']
        assert isinstance(solution.maneuver, ManeuverUnset)
        assert not solution.is_maneuver_solved
        assert solution.secondary == (None,) * NR_TARGETS

        assert solution.target('B').has_cpa
        assert solution.target('C').cpa.tcpa == pytest.approx(30.0)
        assert solution.target('D').error is ErrorKind.INPUT_INCOMPLETE

    def test_unknown_letter(self, two_targets, own_ship):
        with pytest.raises(KeyError):
            solve_plot(two_targets, own_ship).target('A')

    def test_too_many_targets(self, head_on_observations, own_ship):
        with pytest.raises(ValueError):
            solve_plot([head_on_observations] * (NR_TARGETS + 1), own_ship)

    def test_maneuver_and_secondary_targets(self, two_targets, own_ship, course_request):
        solution = solve_plot(two_targets, own_ship, course_request)

        assert solution.is_maneuver_solved
        maneuver = solution.maneuver
        assert maneuver.new_cpa == pytest.approx(2.0, abs=1e-6)

        assert solution.secondary[0] is None
        assert all(effect is None for effect in solution.secondary[2:])

        effect = solution.secondary[1]
        beam = solution.target('C')
        expected = calculate_relative_from_true(beam.true_motion.kb, beam.true_motion.vb,
                                                maneuver.required_course, own_ship.speed)
        assert effect.target_index == 1
        assert effect.new_kbr == pytest.approx(expected.kbr)
        assert effect.new_vbr == pytest.approx(expected.vbr)
        assert effect.new_kbr == pytest.approx(285.4, abs=0.1)
        assert effect.new_cpa is not None
        assert effect.new_cpa.cpa == pytest.approx(0.93, abs=0.02)
        assert effect.new_cpa.cpa_clock > maneuver.maneuver_clock

    def test_failed_maneuver_clears_secondary(self, two_targets, own_ship):
        request = ManeuverRequest(target_index=0, maneuver_distance=5.0, desired_cpa=6.0)
        solution = solve_plot(two_targets, own_ship, request)

        assert isinstance(solution.maneuver, ManeuverError)
        assert solution.maneuver.kind is ErrorKind.INFEASIBLE_GOAL
        assert solution.secondary == (None,) * NR_TARGETS
        # Target data survives a failed maneuver
        assert solution.target('B').has_cpa

    def test_maneuver_on_missing_target(self, two_targets, own_ship):
        request = ManeuverRequest(target_index=3, maneuver_distance=5.0, desired_cpa=2.0)
        assert isinstance(solve_plot(two_targets, own_ship, request).maneuver, ManeuverUnset)

    def test_secondary_target_without_cpa(self, head_on_observations, own_ship, course_request):
        receding = (
            Observation(time=0.0, bearing=300.0, distance=3.0),
            Observation(time=6.0, bearing=300.0, distance=4.0),
        )
        solution = solve_plot([head_on_observations, receding], own_ship, course_request)

        assert isinstance(solution.maneuver, ManeuverSolved)
        assert solution.secondary[1] is None

    def test_idempotent(self, two_targets, own_ship, course_request):
        first = solve_plot(two_targets, own_ship, course_request)
        second = solve_plot(two_targets, own_ship, course_request)
        assert first == second
