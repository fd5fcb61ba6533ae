"""
Parameter payloads for likelihood estimation results.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class BernoulliMLEParams:
    """Grid-search maximum likelihood estimate of a Bernoulli p."""

    p_hat: float                 # grid point maximizing the log-likelihood
    log_likelihood: float        # log-likelihood at p_hat
    closed_form: float           # mean(data), the exact MLE
    grid: NDArray                # (m,) candidate p values
    profile: NDArray             # (m,) log-likelihood at each candidate
    grid_step: float
    n: int
    n_successes: int
