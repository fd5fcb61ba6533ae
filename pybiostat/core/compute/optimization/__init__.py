"""
Optimization utilities for pybiostat.

Currently a brute-force grid search used by likelihood estimators whose
precision is deliberately bounded by a fixed grid step.
"""

from pybiostat.core.compute.optimization.grid import (
    GridSearchResult,
    grid_maximize,
    make_grid,
)

__all__ = [
    "GridSearchResult",
    "grid_maximize",
    "make_grid",
]
