"""
Shared radar plot scenarios.
"""

import numpy as np
import pytest

from radarplot_core import Observation, OwnShip, evaluate_target


@pytest.fixture
def own_ship():
    """Own ship on course 000°, 10 kn."""
    return OwnShip(course=0.0, speed=10.0)


@pytest.fixture
def head_on_observations():
    """Target closing straight down bearing 045°: 10 nm at 00:00, 8 nm at 00:06."""
    return (
        Observation(time=0.0, bearing=45.0, distance=10.0),
        Observation(time=6.0, bearing=45.0, distance=8.0),
    )


@pytest.fixture
def head_on_target(head_on_observations, own_ship):
    return evaluate_target(0, head_on_observations, own_ship)


@pytest.fixture
def beam_observations():
    """Target closing from the starboard beam: 6 nm at 00:00, 5 nm at 00:06."""
    return (
        Observation(time=0.0, bearing=90.0, distance=6.0),
        Observation(time=6.0, bearing=90.0, distance=5.0),
    )


@pytest.fixture
def overtaking_observations():
    """Target astern on course 010°, 20 kn, passing own ship on the starboard side."""
    return (
        Observation(time=0.0, bearing=180.0, distance=10.0),
        Observation(time=6.0, bearing=177.7975, distance=9.0371),
    )


@pytest.fixture
def crossing_observations():
    """Target crossing ahead from starboard: plotted at (5, 3) at 00:00 and (4, 3) at 00:06."""
    def plotted(x, y, time):
        return Observation(time=time, bearing=float(np.degrees(np.arctan2(x, y)) % 360.0),
                           distance=float(np.hypot(x, y)))

    return plotted(5.0, 3.0, 0.0), plotted(4.0, 3.0, 6.0)
