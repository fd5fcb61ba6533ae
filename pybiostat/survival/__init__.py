"""
Survival analysis.

Public API:
    kaplan_meier(status, time) -> KMSolution
"""

from pybiostat.survival.solvers import kaplan_meier
from pybiostat.survival.design import SurvivalDesign
from pybiostat.survival._common import KMParams, TimePoint
from pybiostat.survival.solution import KMSolution

__all__ = [
    "kaplan_meier",
    "SurvivalDesign",
    "KMParams",
    "TimePoint",
    "KMSolution",
]
