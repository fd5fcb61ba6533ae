"""
Kaplan-Meier product-limit estimator.

Builds the survival table over every distinct observed time:
- Risk set: n_j = n_start - Σ_{i<j} (d_i + c_i)
- Hazard: h_j = d_j / n_j
- Survival: S(t_j) = ∏_{i<=j} (1 - h_i)

Tied observations are aggregated into one row. Censorings at t_j leave
S(t_j) untouched but shrink the risk set of t_{j+1}.

References:
    Kaplan, E. L., & Meier, P. (1958). Nonparametric estimation from
        incomplete observations. JASA, 53(282), 457-481.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pybiostat.survival._common import KMParams


def kaplan_meier_fit(status: NDArray, time: NDArray) -> KMParams:
    """Compute the Kaplan-Meier survival table.

    Parameters
    ----------
    status : NDArray
        (n,) event indicator (1=event, 0=censored). Validated.
    time : NDArray
        (n,) time to event or censoring. Validated.

    Returns
    -------
    KMParams
    """
    n_start = len(time)

    # Group by distinct time; np.unique sorts ascending
    unique_times, group = np.unique(time, return_inverse=True)
    group = group.ravel()
    m = len(unique_times)

    n_total = np.bincount(group, minlength=m).astype(np.int64)
    n_events = np.bincount(group, weights=status, minlength=m).astype(np.int64)
    n_censored = n_total - n_events

    # One-step-lagged cumulative sum, seeded with n_start
    removed_before = np.concatenate(([0], np.cumsum(n_total)[:-1]))
    n_at_risk = n_start - removed_before

    # n_at_risk == 0 cannot occur for validated input; leave it NaN if it does
    hazard = np.full(m, np.nan)
    at_risk = n_at_risk > 0
    hazard[at_risk] = n_events[at_risk] / n_at_risk[at_risk]

    survival = np.cumprod(1.0 - hazard)

    for arr in (unique_times, n_events, n_censored, n_total, n_at_risk, hazard, survival):
        arr.setflags(write=False)

    return KMParams(
        time=unique_times,
        n_events=n_events,
        n_censored=n_censored,
        n_total=n_total,
        n_at_risk=n_at_risk,
        hazard=hazard,
        survival=survival,
        n_observations=n_start,
        n_events_total=int(n_events.sum()),
    )
