"""
Tests for CPA/TCPA and bow crossing resolution.
"""

import numpy as np
import pytest

from radarplot_core.geometry import Vector2, polar_to_cartesian, vector_magnitude
from radarplot_core.risk import calculate_bow_crossing, calculate_cpa


class TestCPA:
    """Test suite for the CPA resolver."""

    def test_direct_approach(self):
        current = polar_to_cartesian(45.0, 8.0)
        cpa = calculate_cpa(current, kbr=225.0, vbr=20.0, own_course=0.0, current_time=6.0)

        assert cpa.cpa == pytest.approx(0.0, abs=1e-9)
        assert cpa.tcpa == pytest.approx(24.0)
        assert cpa.cpa_clock == pytest.approx(30.0)

    def test_passing_ahead(self):
        cpa = calculate_cpa(Vector2(4.0, 3.0), kbr=270.0, vbr=10.0, own_course=90.0, current_time=60.0)

        assert cpa.cpa == pytest.approx(3.0)
        assert cpa.tcpa == pytest.approx(24.0)
        assert cpa.cpa_clock == pytest.approx(84.0)
        assert cpa.pcpa == pytest.approx(0.0, abs=1e-9)
        assert cpa.spcpa == pytest.approx(270.0)
        np.testing.assert_allclose(cpa.point, (0.0, 3.0), atol=1e-12)
        assert not cpa.is_past

    def test_receding_target_has_no_cpa(self):
        assert calculate_cpa(Vector2(4.0, 3.0), kbr=90.0, vbr=10.0, own_course=0.0, current_time=0.0) is None

    def test_past_cpa_when_allowed(self):
        cpa = calculate_cpa(Vector2(4.0, 3.0), kbr=90.0, vbr=10.0, own_course=0.0,
                            current_time=0.0, allow_past=True)
        assert cpa.tcpa == pytest.approx(-24.0)
        assert cpa.is_past

    def test_no_relative_motion(self):
        assert calculate_cpa(Vector2(4.0, 3.0), kbr=90.0, vbr=0.0, own_course=0.0, current_time=0.0) is None

    def test_cpa_never_exceeds_current_range(self):
        rng = np.random.default_rng(5)
        checked = 0
        for _ in range(100):
            current = polar_to_cartesian(rng.uniform(0, 360), rng.uniform(0.5, 12))
            cpa = calculate_cpa(current, rng.uniform(0, 360), rng.uniform(1, 30), 0.0, 0.0)
            if cpa is None:
                continue
            checked += 1
            assert cpa.cpa <= vector_magnitude(current) + 1e-12
            assert cpa.tcpa >= -1e-9
        assert checked > 0


class TestBowCrossing:
    """Test suite for the bow crossing resolver."""

    def test_crossing_ahead(self):
        crossing = calculate_bow_crossing(Vector2(4.0, 3.0), kbr=270.0, vbr=10.0,
                                          own_course=0.0, current_time=6.0)

        assert crossing.bcr == pytest.approx(3.0)
        assert crossing.bct == pytest.approx(24.0)
        assert crossing.bc_clock == pytest.approx(30.0)
        np.testing.assert_allclose(crossing.point, (0.0, 3.0), atol=1e-9)

    def test_crossing_astern(self):
        assert calculate_bow_crossing(Vector2(4.0, -3.0), kbr=270.0, vbr=10.0,
                                      own_course=0.0, current_time=0.0) is None

    def test_parallel_track(self):
        assert calculate_bow_crossing(Vector2(4.0, 3.0), kbr=0.0, vbr=10.0,
                                      own_course=0.0, current_time=0.0) is None

    def test_crossing_already_passed(self):
        assert calculate_bow_crossing(Vector2(-4.0, 3.0), kbr=270.0, vbr=10.0,
                                      own_course=0.0, current_time=0.0) is None

    def test_oblique_heading(self):
        # Own ship heading 045°, target crossing the heading line 5 nm ahead
        ahead = polar_to_cartesian(45.0, 5.0)
        start = Vector2(ahead.x + 2.0, ahead.y)
        crossing = calculate_bow_crossing(start, kbr=270.0, vbr=12.0, own_course=45.0, current_time=0.0)

        assert crossing.bcr == pytest.approx(5.0)
        assert crossing.bct == pytest.approx(10.0)
