"""
Radarplot Core - Radar Plotting Aid for Collision Avoidance

Computes relative and true motion, CPA / TCPA and bow crossing data from two
radar observations per target, and solves the course or speed change that
achieves a desired CPA, reproducing the constructions of manual radar
plotting.
"""

from .errors import ErrorKind
from .motion import BearingType, Observation, OwnShip
from .target import TargetState, evaluate_target
from .maneuver import (
    ManeuverAxis,
    ManeuverRequest,
    ManeuverSolved,
    ManeuverError,
    ManeuverUnset,
    ManeuverSolver,
    ManeuverSolverParams,
)
from .plot import PlotSolution, solve_plot


__version__ = "0.1.0"
__author__ = "Maritime Robotics Lab"

__all__ = [
    # Main entry points
    "solve_plot",
    "evaluate_target",
    "ManeuverSolver",
    "ManeuverSolverParams",

    # Types and enums
    "BearingType",
    "Observation",
    "OwnShip",
    "TargetState",
    "ManeuverAxis",
    "ManeuverRequest",
    "ManeuverSolved",
    "ManeuverError",
    "ManeuverUnset",
    "PlotSolution",
    "ErrorKind",
]
