"""
Power of one- and two-sample t-tests and its inversion for n.

Matches R's pwr::pwr.t.test():

    nu  = (n - 1) * tsample           tsample = 2 for two samples, else 1
    ncp = sqrt(n / tsample) * d
    two.sided:  q = qt(1 - α/2, nu);  power = P(T' > q) + P(T' < -q)
    greater:    q = qt(1 - α, nu);    power = P(T' > q)
    less:       q = qt(α, nu);        power = P(T' < q)

where T' ~ noncentral t(nu, ncp). n is per group.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from scipy import optimize
from scipy import stats as sp_stats

from pybiostat.core.exceptions import NumericalError
from pybiostat.power._common import SampleSizeParams

# Smallest design with a defined t statistic, as in pwr
N_LOWER = 2 + 1e-10
N_UPPER = 1e9


def cohens_d_one_sample(x: NDArray, mu: float = 0.0) -> float:
    """(mean(x) - mu) / sd(x)."""
    return float((np.mean(x) - mu) / np.std(x, ddof=1))


def cohens_d_two_sample(x: NDArray, y: NDArray) -> float:
    """(mean(x) - mean(y)) / pooled sd."""
    n1, n2 = len(x), len(y)
    var1, var2 = np.var(x, ddof=1), np.var(y, ddof=1)
    pooled = np.sqrt(((n1 - 1) * var1 + (n2 - 1) * var2) / (n1 + n2 - 2))
    return float((np.mean(x) - np.mean(y)) / pooled)


def t_test_power(
    n: float,
    d: float,
    sig_level: float,
    tsample: int,
    alternative: str,
) -> float:
    """Power of a t-test with n subjects per group and effect size d."""
    nu = (n - 1) * tsample
    ncp = math.sqrt(n / tsample) * d

    if alternative == "two.sided":
        q = sp_stats.t.isf(sig_level / 2, nu)
        return float(
            sp_stats.nct.sf(q, nu, ncp) + sp_stats.nct.cdf(-q, nu, ncp)
        )
    if alternative == "greater":
        q = sp_stats.t.isf(sig_level, nu)
        return float(sp_stats.nct.sf(q, nu, ncp))
    q = sp_stats.t.ppf(sig_level, nu)
    return float(sp_stats.nct.cdf(q, nu, ncp))


def sample_size_fit(
    d: float,
    sig_level: float,
    power: float,
    type: str,
    alternative: str,
) -> tuple[SampleSizeParams, list[str]]:
    """Solve t_test_power(n) = power for n by Brent's method.

    The upper end of the bracket is found by doubling from 10, which keeps
    the noncentrality parameter moderate at every evaluation.
    """
    tsample = 2 if type == "two.sample" else 1
    if alternative == "two.sided":
        d = abs(d)
    warnings_list: list[str] = []

    def excess(n: float) -> float:
        return t_test_power(n, d, sig_level, tsample, alternative) - power

    if excess(N_LOWER) >= 0:
        n = N_LOWER
        warnings_list.append(
            f"effect size d={d:.4g} attains the target power at the smallest "
            f"possible design"
        )
    else:
        upper = 10.0
        while True:
            gap = excess(upper)
            if math.isnan(gap):
                raise NumericalError(
                    f"power is undefined at n={upper:g} for d={d:.4g}"
                )
            if gap >= 0:
                break
            if upper >= N_UPPER:
                raise NumericalError(
                    f"no sample size up to {N_UPPER:g} reaches power {power} "
                    f"for d={d:.4g}, alternative={alternative!r}"
                )
            upper = min(upper * 2, N_UPPER)
        n = optimize.brentq(excess, N_LOWER, upper, xtol=1e-10)

    n_required = int(math.ceil(n))

    return SampleSizeParams(
        n=float(n),
        n_required=n_required,
        d=float(d),
        sig_level=sig_level,
        power=power,
        achieved_power=t_test_power(n_required, d, sig_level, tsample, alternative),
        type=type,
        alternative=alternative,
    ), warnings_list
