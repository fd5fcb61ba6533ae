"""
Sample size calculations.

Public API:
    minimum_n(x1, x2=None)   - Sample size from pilot data (80% power, alpha 0.05)
    sample_size_t_test(d)    - Sample size for a known Cohen's d
    cohens_d(x1, x2=None)    - Standardized effect size
"""

from pybiostat.power.solvers import minimum_n, sample_size_t_test, cohens_d
from pybiostat.power.design import SampleSizeDesign
from pybiostat.power._common import SampleSizeParams
from pybiostat.power.solution import SampleSizeSolution

__all__ = [
    "minimum_n",
    "sample_size_t_test",
    "cohens_d",
    "SampleSizeDesign",
    "SampleSizeParams",
    "SampleSizeSolution",
]
