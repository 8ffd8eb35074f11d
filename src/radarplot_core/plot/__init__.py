"""
Plot Module

관측 입력 전체에 대한 계산 pipeline
"""

from .types import PlotSolution
from .pipeline import solve_plot

__all__ = [
    'PlotSolution',
    'solve_plot',
]
