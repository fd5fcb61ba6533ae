"""
Multivariate utilities.

Public API:
    pc_approx(x, k)        - Rank-k PCA reconstruction in original units
    scale(x)               - Column center/scale, returns (z, ScaleTransform)
    unscale(z, transform)  - Inverse of scale()
"""

from pybiostat.multivariate.solvers import pc_approx, scale, unscale
from pybiostat.multivariate.design import PCADesign
from pybiostat.multivariate._scaling import ScaleTransform
from pybiostat.multivariate._common import PCAParams
from pybiostat.multivariate.solution import PCASolution

__all__ = [
    "pc_approx",
    "scale",
    "unscale",
    "PCADesign",
    "ScaleTransform",
    "PCAParams",
    "PCASolution",
]
