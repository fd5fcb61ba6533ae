"""
Shared compute infrastructure for pybiostat.

IMPORTANT: This is NOT where domain algorithms live. Those go in
{domain}/_*.py. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers
    optimization: Grid search maximization
"""

from pybiostat.core.compute.timing import Timer
from pybiostat.core.compute.optimization import GridSearchResult, grid_maximize

__all__ = [
    # Timing
    "Timer",
    # Optimization
    "GridSearchResult",
    "grid_maximize",
]
