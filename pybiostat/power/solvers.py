"""
Public API for sample size calculations.

    sample_size_t_test(d) → SampleSizeSolution
    minimum_n(x1, x2=None) → SampleSizeSolution
    cohens_d(x1, x2=None) → float
"""

from __future__ import annotations

import warnings

from numpy.typing import ArrayLike

from pybiostat.core.result import Result
from pybiostat.core.compute.timing import Timer
from pybiostat.power.design import SampleSizeDesign, pilot_effect_size
from pybiostat.power._t_test import sample_size_fit
from pybiostat.power.solution import SampleSizeSolution

# Below this |d| the required n runs into the tens of thousands
SMALL_EFFECT = 0.01


def _solve(design: SampleSizeDesign) -> SampleSizeSolution:
    timer = Timer()
    timer.start()

    with timer.section('root_finding'):
        params, warnings_list = sample_size_fit(
            design.d,
            sig_level=design.sig_level,
            power=design.power,
            type=design.type,
            alternative=design.alternative,
        )

    timer.stop()

    if abs(design.d) < SMALL_EFFECT:
        msg = (
            f"effect size d={design.d:.3g} is very small; "
            f"required n per group is {params.n_required}"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=3)

    result = Result(
        params=params,
        info={
            "method": f"{design.type} t test power calculation",
            "solver": "brentq",
        },
        timing=timer.result(),
        backend_name="cpu_nct",
        warnings=tuple(warnings_list),
    )
    return SampleSizeSolution(_result=result)


def sample_size_t_test(
    d: float,
    *,
    sig_level: float = 0.05,
    power: float = 0.8,
    type: str = "two.sample",
    alternative: str = "two.sided",
) -> SampleSizeSolution:
    """Sample size per group for a t-test. Matches R pwr.t.test(n=NULL).

    Parameters
    ----------
    d : float
        Cohen's d effect size.
    sig_level : float
        Type I error rate. Default 0.05.
    power : float
        Target power. Default 0.8.
    type : str
        "two.sample" (default), "one.sample" or "paired".
    alternative : str
        "two.sided" (default), "less" or "greater".

    Returns
    -------
    SampleSizeSolution

    Examples
    --------
    >>> sample_size_t_test(0.5).n_required
    64
    """
    design = SampleSizeDesign.for_t_test(
        d,
        sig_level=sig_level,
        power=power,
        type=type,
        alternative=alternative,
    )
    return _solve(design)


def minimum_n(
    x1: ArrayLike,
    x2: ArrayLike | None = None,
    *,
    sig_level: float = 0.05,
    power: float = 0.8,
    alternative: str = "two.sided",
) -> SampleSizeSolution:
    """Minimum sample size for a t-test from pilot data.

    With one sample, tests H0: mean(x1) = 0; with two samples,
    H0: mean(x1) = mean(x2). Cohen's d is estimated from the pilot data
    and the power equation is solved at 80% power and alpha = 0.05
    unless overridden.

    Returns
    -------
    SampleSizeSolution
        n_required is per group for the two-sample test.
    """
    design = SampleSizeDesign.from_pilot(
        x1, x2,
        sig_level=sig_level,
        power=power,
        alternative=alternative,
    )
    return _solve(design)


def cohens_d(x1: ArrayLike, x2: ArrayLike | None = None, *, mu: float = 0.0) -> float:
    """Cohen's d: one-sample against mu, or two-sample with pooled sd.

    Raises
    ------
    ValidationError
        Non-numeric or non-finite data, fewer than 2 values per sample.
    DegenerateInputError
        Constant pilot data, so the standard deviation is zero.
    """
    d, _ = pilot_effect_size(x1, x2, mu=mu)
    return d
