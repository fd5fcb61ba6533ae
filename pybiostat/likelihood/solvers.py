"""
Public API for likelihood estimation.

    bernoulli_mle(data) → BernoulliMLESolution
"""

from __future__ import annotations

import warnings

from numpy.typing import ArrayLike

from pybiostat.core.exceptions import ValidationError
from pybiostat.core.result import Result
from pybiostat.core.compute.timing import Timer
from pybiostat.core.compute.tolerances import CPU_FP64, DEFAULT_GRID_STEP
from pybiostat.likelihood.design import BernoulliDesign
from pybiostat.likelihood._bernoulli import bernoulli_mle_fit
from pybiostat.likelihood.solution import BernoulliMLESolution


def bernoulli_mle(
    data: ArrayLike | BernoulliDesign,
    *,
    lower: float = 0.0,
    upper: float = 1.0,
    step: float = DEFAULT_GRID_STEP,
) -> BernoulliMLESolution:
    """Maximum likelihood estimate of a Bernoulli p by grid search.

    The log-likelihood is evaluated at every p in {lower, lower + step,
    ..., upper} and the first maximizer is returned. The answer is the
    closed-form mean(data) rounded to the grid; precision is bounded by
    step by construction.

    Parameters
    ----------
    data : array-like or BernoulliDesign
        Binary vector of 0's and 1's containing both values.
    lower, upper : float
        Search bounds within [0, 1]. Default [0, 1].
    step : float
        Grid spacing. Default 0.001 (1001 points).

    Returns
    -------
    BernoulliMLESolution

    Raises
    ------
    InvalidInputError
        Values other than 0 and 1.
    DegenerateInputError
        Only one class present.
    ValidationError
        Invalid grid bounds or step.

    Examples
    --------
    >>> bernoulli_mle([1, 1, 1, 1, 0]).p_hat
    0.8
    """
    if isinstance(data, BernoulliDesign):
        design = data
    else:
        design = BernoulliDesign.for_bernoulli(data)

    if not 0.0 <= lower < upper <= 1.0:
        raise ValidationError(
            f"grid bounds must satisfy 0 <= lower < upper <= 1, "
            f"got lower={lower}, upper={upper}"
        )

    timer = Timer()
    timer.start()

    with timer.section('grid_search'):
        params = bernoulli_mle_fit(design.data, lower, upper, step)

    timer.stop()

    warnings_list = []
    gap = abs(params.p_hat - params.closed_form)
    if gap > step + CPU_FP64.atol:
        msg = (
            f"grid estimate {params.p_hat:g} is {gap:.3g} from mean(data) "
            f"{params.closed_form:g}; the grid is coarser than the data "
            f"resolution or does not cover it"
        )
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    result = Result(
        params=params,
        info={
            "method": "grid search",
            "n_grid": len(params.grid),
            "bounds": (float(lower), float(upper)),
        },
        timing=timer.result(),
        backend_name="cpu_grid",
        warnings=tuple(warnings_list),
    )

    return BernoulliMLESolution(_result=result)
