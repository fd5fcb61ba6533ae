"""
pybiostat: statistical utilities for biostatistics coursework.

Independent, stateless functions sharing one Design -> Result -> Solution
convention.

Submodules:
    survival: Kaplan-Meier survival curves
    multivariate: PCA low-rank approximation, scale/unscale transforms
    likelihood: Grid-search maximum likelihood (Bernoulli)
    power: Minimum sample size for t-tests
"""

__version__ = "0.1.0"
__author__ = "pybiostat developers"

from pybiostat import survival
from pybiostat import multivariate
from pybiostat import likelihood
from pybiostat import power

__all__ = [
    "__version__",
    "survival",
    "multivariate",
    "likelihood",
    "power",
]
