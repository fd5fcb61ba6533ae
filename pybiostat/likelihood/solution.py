"""
Solution wrapper for likelihood estimation results.
"""

from __future__ import annotations

from typing import Any

from numpy.typing import NDArray

from pybiostat.core.result import Result
from pybiostat.likelihood._common import BernoulliMLEParams


class BernoulliMLESolution:
    """Grid-search Bernoulli maximum likelihood estimate."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[BernoulliMLEParams]) -> None:
        self._result = _result

    @property
    def p_hat(self) -> float:
        """Grid point maximizing the log-likelihood."""
        return self._result.params.p_hat

    @property
    def log_likelihood(self) -> float:
        return self._result.params.log_likelihood

    @property
    def closed_form(self) -> float:
        """Exact MLE, mean(data), for comparison."""
        return self._result.params.closed_form

    @property
    def grid(self) -> NDArray:
        return self._result.params.grid

    @property
    def profile(self) -> NDArray:
        """Log-likelihood at each grid point."""
        return self._result.params.profile

    @property
    def grid_step(self) -> float:
        return self._result.params.grid_step

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def n_successes(self) -> int:
        return self._result.params.n_successes

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def timing(self):
        return self._result.timing

    def summary(self) -> str:
        lines = [
            "Call: bernoulli_mle()",
            "",
            f"  n={self.n}, successes={self.n_successes}",
            f"  grid: {len(self.grid)} points, step={self.grid_step:g}",
            "",
            f"  p_hat          = {self.p_hat:.6g}",
            f"  log-likelihood = {self.log_likelihood:.6f}",
            f"  mean(data)     = {self.closed_form:.6g}",
        ]
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"BernoulliMLESolution(p_hat={self.p_hat:g}, n={self.n})"
