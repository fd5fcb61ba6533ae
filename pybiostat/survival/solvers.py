"""
Public API for survival analysis.

    kaplan_meier(status, time) → KMSolution

Validates inputs, creates a SurvivalDesign, runs the product-limit
kernel, and wraps the Result in a Solution.
"""

from __future__ import annotations

import warnings

from pybiostat.core.result import Result
from pybiostat.core.compute.timing import Timer
from pybiostat.survival.design import SurvivalDesign
from pybiostat.survival._km import kaplan_meier_fit
from pybiostat.survival.solution import KMSolution


def kaplan_meier(status, time) -> KMSolution:
    """Kaplan-Meier survival curve estimation.

    Every distinct observed time (event or censoring) gets one row.
    Censored subjects leave the risk set without lowering S(t).

    Parameters
    ----------
    status : array-like
        Event indicator (1=event, 0=censored). Booleans are accepted.
    time : array-like
        Time to event or censoring, same length as status.

    Returns
    -------
    KMSolution

    Raises
    ------
    InvalidInputError
        Empty or mismatched inputs, status outside {0, 1}, negative or
        non-finite times.

    Examples
    --------
    >>> km = kaplan_meier([1, 1, 0, 0], [1, 1, 2, 2])
    >>> km.survival
    array([0.5, 0.5])
    """
    design = SurvivalDesign.for_survival(status, time)

    timer = Timer()
    timer.start()

    params = kaplan_meier_fit(design.status, design.time)

    timer.stop()

    warnings_list = []
    if params.n_events_total == 0:
        msg = "no events observed; survival remains 1.0 at every time"
        warnings_list.append(msg)
        warnings.warn(msg, UserWarning, stacklevel=2)

    result = Result(
        params=params,
        info={
            "method": "Kaplan-Meier",
            "n_times": len(params.time),
            "n_tied_times": int((params.n_total > 1).sum()),
            "reaches_zero": bool(params.survival[-1] == 0.0),
        },
        timing=timer.result(),
        backend_name="cpu_km",
        warnings=tuple(warnings_list),
    )

    return KMSolution(_result=result)
