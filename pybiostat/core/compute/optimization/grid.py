"""
Brute-force maximization over a discretized one-dimensional domain.

The objective is evaluated at every point of an evenly spaced grid and
the first grid point attaining the maximum is returned. Precision is
bounded by the grid step; this is an intentional approximation, not a
search that refines the optimum.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pybiostat.core.exceptions import NumericalError, ValidationError


@dataclass(frozen=True)
class GridSearchResult:
    """Outcome of grid_maximize()."""

    argmax: float                # grid point achieving the maximum
    max_value: float             # objective at argmax
    index: int                   # position of argmax in grid
    grid: NDArray                # (m,) evaluated points, ascending
    values: NDArray              # (m,) objective at each grid point

    @property
    def step(self) -> float:
        """Spacing between consecutive grid points."""
        if len(self.grid) < 2:
            return 0.0
        return float(self.grid[1] - self.grid[0])


def make_grid(lower: float, upper: float, step: float) -> NDArray[np.floating[Any]]:
    """Build the grid lower, lower + step, ..., upper.

    Raises
    ------
    ValidationError
        If the bounds are not finite and increasing, the step is not
        positive, or (upper - lower) is not a whole number of steps.
    """
    lower = float(lower)
    upper = float(upper)
    step = float(step)

    if not (np.isfinite(lower) and np.isfinite(upper) and np.isfinite(step)):
        raise ValidationError(
            f"grid bounds and step must be finite, got "
            f"lower={lower}, upper={upper}, step={step}"
        )
    if step <= 0:
        raise ValidationError(f"step must be positive, got {step}")
    if lower >= upper:
        raise ValidationError(
            f"lower must be less than upper, got lower={lower}, upper={upper}"
        )

    n_steps = (upper - lower) / step
    n_whole = int(round(n_steps))
    if n_whole < 1 or abs(n_steps - n_whole) > 1e-9 * max(1.0, n_steps):
        raise ValidationError(
            f"(upper - lower) must be a whole number of steps: "
            f"({upper} - {lower}) / {step} = {n_steps}"
        )

    # linspace keeps both endpoints exact; lower + k*step would drift
    return np.linspace(lower, upper, n_whole + 1)


def grid_maximize(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    step: float,
) -> GridSearchResult:
    """Maximize f(p) over an evenly spaced grid on [lower, upper].

    Parameters
    ----------
    f : callable
        Objective, called once per grid point with a Python float.
        May return -inf (e.g. a log-likelihood at the boundary) or NaN;
        NaN values are never selected.
    lower, upper : float
        Inclusive domain bounds.
    step : float
        Grid spacing.

    Returns
    -------
    GridSearchResult
        Ties are resolved by first occurrence, i.e. the smallest argument.

    Raises
    ------
    ValidationError
        If the grid bounds or step are invalid.
    NumericalError
        If f is NaN at every grid point.
    """
    grid = make_grid(lower, upper, step)
    values = np.array([f(float(p)) for p in grid], dtype=np.float64)

    if np.all(np.isnan(values)):
        raise NumericalError(
            f"objective is NaN at all {len(grid)} grid points on "
            f"[{lower}, {upper}]"
        )

    # nanargmax returns the first index attaining the maximum
    index = int(np.nanargmax(values))

    return GridSearchResult(
        argmax=float(grid[index]),
        max_value=float(values[index]),
        index=index,
        grid=grid,
        values=values,
    )
