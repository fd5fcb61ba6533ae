"""
Bernoulli log-likelihood and its brute-force maximization.

    ℓ(p) = Σ [ x_i log p + (1 - x_i) log(1 - p) ]

evaluated on p ∈ {0, 0.001, ..., 1}. The closed-form maximizer is
mean(x); the grid estimate lies within one grid step of it.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy.special import xlogy

from pybiostat.core.compute.optimization import grid_maximize
from pybiostat.likelihood._common import BernoulliMLEParams


def bernoulli_log_likelihood(data: NDArray, p: float) -> float:
    """Log-likelihood of binary data at success probability p.

    Uses xlogy so that 0 * log(0) = 0: at p = 0 or p = 1 the value is
    -inf when the data contradict p, never NaN.
    """
    return float(np.sum(xlogy(data, p) + xlogy(1.0 - data, 1.0 - p)))


def bernoulli_mle_fit(
    data: NDArray,
    lower: float,
    upper: float,
    step: float,
) -> BernoulliMLEParams:
    """Grid-search the p maximizing the Bernoulli log-likelihood.

    Parameters
    ----------
    data : NDArray
        Validated binary vector with both classes present.
    lower, upper, step : float
        Grid bounds and spacing.

    Returns
    -------
    BernoulliMLEParams
    """
    search = grid_maximize(
        lambda p: bernoulli_log_likelihood(data, p),
        lower, upper, step,
    )

    return BernoulliMLEParams(
        p_hat=search.argmax,
        log_likelihood=search.max_value,
        closed_form=float(np.mean(data)),
        grid=search.grid,
        profile=search.values,
        grid_step=float(step),
        n=len(data),
        n_successes=int(data.sum()),
    )
