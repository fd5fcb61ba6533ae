"""
Parameter payloads for survival analysis results.

Each dataclass is a frozen payload carried inside a Result[P] envelope.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class TimePoint:
    """One row of the Kaplan-Meier table: a distinct observed time."""

    time: float
    n_events: int                # status == 1 at this time
    n_censored: int              # status == 0 at this time
    n_total: int                 # n_events + n_censored
    n_at_risk: int               # alive and uncensored just before this time
    hazard: float                # n_events / n_at_risk
    survival: float              # cumulative product of (1 - hazard)

    @property
    def has_censoring(self) -> bool:
        """True when at least one subject was censored at this time."""
        return self.n_censored > 0


@dataclass(frozen=True)
class KMParams:
    """Kaplan-Meier survival table.

    One entry per distinct observed time (event or censoring), ascending.
    """

    time: NDArray                # (m,) distinct observed times
    n_events: NDArray            # (m,) events at each time
    n_censored: NDArray          # (m,) censorings at each time
    n_total: NDArray             # (m,) events + censorings
    n_at_risk: NDArray           # (m,) risk set just before each time
    hazard: NDArray              # (m,) n_events / n_at_risk
    survival: NDArray            # (m,) S(t) at each time
    n_observations: int          # n_start, total enrollment
    n_events_total: int          # total events
