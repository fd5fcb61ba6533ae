"""
SurvivalDesign: immutable container for time-to-event data.

Wraps the parallel event-status and time arrays. Validates inputs at
construction time; all downstream code trusts clean data.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pybiostat.core.exceptions import (
    DimensionError,
    InvalidInputError,
    ValidationError,
)
from pybiostat.core.validation import (
    check_array,
    check_binary,
    check_consistent_length,
    check_nonnegative,
)


def _as_observation_vector(values, name: str) -> NDArray:
    """Convert one of the parallel observation arrays to 1D float64."""
    try:
        arr = check_array(values, name)
    except ValidationError as e:
        raise InvalidInputError(str(e), parameter=name) from e

    if arr.ndim > 1:
        if arr.ndim == 2 and 1 in arr.shape:
            arr = arr.ravel()
        else:
            raise InvalidInputError(
                f"{name} must be 1D, got shape {arr.shape}",
                parameter=name,
            )
    # astype copies, so freezing the result never touches the caller's array
    return np.atleast_1d(arr).astype(np.float64)


@dataclass(frozen=True)
class SurvivalDesign:
    """Immutable survival data container.

    Parameters
    ----------
    status : NDArray
        Event indicator: 1 = event observed, 0 = censored.
    time : NDArray
        Time to event or censoring. Non-negative, finite.
    """

    status: NDArray
    time: NDArray

    @classmethod
    def for_survival(cls, status, time) -> SurvivalDesign:
        """Create and validate survival data.

        Parameters
        ----------
        status : array-like
            Event indicator (0/1 or False/True).
        time : array-like
            Time to event or censoring, arbitrary units.

        Returns
        -------
        SurvivalDesign

        Raises
        ------
        InvalidInputError
            If the arrays are empty, differ in length, or contain values
            outside their domain (status not in {0, 1}, negative or
            non-finite time).
        """
        status = _as_observation_vector(status, "status")
        time = _as_observation_vector(time, "time")

        n = len(time)

        if n == 0 or len(status) == 0:
            raise InvalidInputError(
                "status and time must contain at least one observation"
            )

        try:
            check_consistent_length(status, time, names=("status", "time"))
        except DimensionError as e:
            raise InvalidInputError(
                f"status and time must have the same length: {e}"
            ) from e

        if not np.all(np.isfinite(time)):
            raise InvalidInputError(
                f"time: contains {int(np.sum(~np.isfinite(time)))} "
                f"non-finite value(s)",
                parameter="time",
            )

        check_nonnegative(time, "time")
        check_binary(status, "status")

        status.setflags(write=False)
        time.setflags(write=False)

        return cls(status=status, time=time)

    @property
    def n(self) -> int:
        """Number of observations (study enrollment)."""
        return len(self.time)

    @property
    def n_events(self) -> int:
        """Number of observed events."""
        return int(np.sum(self.status))

    @property
    def n_censored(self) -> int:
        """Number of censored observations."""
        return self.n - self.n_events
