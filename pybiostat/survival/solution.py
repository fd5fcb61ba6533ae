"""
Solution wrappers for survival analysis results.

Each Solution wraps a Result[Params] and exposes user-friendly properties
with R-style summary() methods.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pybiostat.core.result import Result
from pybiostat.survival._common import KMParams, TimePoint


class KMSolution:
    """Kaplan-Meier survival curve solution.

    One row per distinct observed time, ascending.
    """

    __slots__ = ('_result',)

    def __init__(self, _result: Result[KMParams]) -> None:
        self._result = _result

    # -- Properties delegating to KMParams --

    @property
    def params(self) -> KMParams:
        return self._result.params

    @property
    def time(self):
        """Distinct observed times."""
        return self._result.params.time

    @property
    def n_events(self):
        """Number of events at each time."""
        return self._result.params.n_events

    @property
    def n_censored(self):
        """Number censored at each time."""
        return self._result.params.n_censored

    @property
    def n_total(self):
        """Events plus censorings at each time."""
        return self._result.params.n_total

    @property
    def n_at_risk(self):
        """Number at risk just before each time."""
        return self._result.params.n_at_risk

    @property
    def hazard(self):
        """Estimated hazard n_events / n_at_risk at each time."""
        return self._result.params.hazard

    @property
    def survival(self):
        """S(t) at each time."""
        return self._result.params.survival

    @property
    def has_censoring(self):
        """Boolean flag per time: at least one censoring occurred there."""
        return self._result.params.n_censored > 0

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def n_events_total(self) -> int:
        return self._result.params.n_events_total

    @property
    def n_censored_total(self) -> int:
        return self.n_observations - self.n_events_total

    @property
    def median_survival(self) -> float | None:
        """Median survival time (smallest t where S(t) <= 0.5)."""
        idx = self.survival <= 0.5
        if not idx.any():
            return None
        return float(self.time[idx][0])

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self):
        return self._result.timing

    # -- Derived views --

    def survival_at(self, t: float) -> float:
        """Evaluate the step function S(t).

        S(t) is 1.0 before the first observed time and right-continuous:
        at an observed time it already includes that time's events.
        """
        idx = int(np.searchsorted(self.time, t, side='right')) - 1
        if idx < 0:
            return 1.0
        return float(self.survival[idx])

    def time_points(self) -> tuple[TimePoint, ...]:
        """The survival table as immutable per-time records."""
        p = self._result.params
        return tuple(
            TimePoint(
                time=float(p.time[i]),
                n_events=int(p.n_events[i]),
                n_censored=int(p.n_censored[i]),
                n_total=int(p.n_total[i]),
                n_at_risk=int(p.n_at_risk[i]),
                hazard=float(p.hazard[i]),
                survival=float(p.survival[i]),
            )
            for i in range(len(p.time))
        )

    def plot_data(self) -> list[dict[str, Any]]:
        """Rows for a step-plot renderer.

        Each row is {'x': time, 'y': survival, 'marker': has_censoring};
        a renderer draws the step function through (x, y) and a censoring
        mark wherever marker is True.
        """
        return [
            {'x': float(t), 'y': float(s), 'marker': bool(c)}
            for t, s, c in zip(self.time, self.survival, self.has_censoring)
        ]

    def summary(self) -> str:
        """R-style summary of Kaplan-Meier fit."""
        lines = []
        lines.append("Call: kaplan_meier()")
        lines.append("")
        lines.append(
            f"  n={self.n_observations}, "
            f"events={self.n_events_total}, "
            f"censored={self.n_censored_total}"
        )
        lines.append("")

        median = self.median_survival
        median_str = f"{median:.4g}" if median is not None else "NA"
        lines.append(f"  median survival = {median_str}")
        lines.append("")

        lines.append(
            f"  {'time':>8s}  {'n.risk':>8s}  {'n.event':>8s}  "
            f"{'n.censor':>8s}  {'hazard':>10s}  {'survival':>10s}"
        )

        # Show up to 20 rows
        m = len(self.time)
        show = min(m, 20)
        for i in range(show):
            lines.append(
                f"  {self.time[i]:8.4g}  {self.n_at_risk[i]:8d}  "
                f"{self.n_events[i]:8d}  {self.n_censored[i]:8d}  "
                f"{self.hazard[i]:10.6f}  {self.survival[i]:10.6f}"
            )
        if m > 20:
            lines.append(f"  ... ({m - 20} more rows)")

        for w in self.warnings:
            lines.append(f"  Warning: {w}")

        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.time)

    def __repr__(self) -> str:
        return (
            f"KMSolution(n={self.n_observations}, "
            f"events={self.n_events_total}, "
            f"median={self.median_survival})"
        )
