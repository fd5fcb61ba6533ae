"""
Likelihood estimation.

Public API:
    bernoulli_mle(data)  - Bernoulli p by brute-force grid search
    bernoulli_log_likelihood(data, p)
"""

from pybiostat.likelihood.solvers import bernoulli_mle
from pybiostat.likelihood.design import BernoulliDesign
from pybiostat.likelihood._bernoulli import bernoulli_log_likelihood
from pybiostat.likelihood._common import BernoulliMLEParams
from pybiostat.likelihood.solution import BernoulliMLESolution

__all__ = [
    "bernoulli_mle",
    "bernoulli_log_likelihood",
    "BernoulliDesign",
    "BernoulliMLEParams",
    "BernoulliMLESolution",
]
