"""
Solution wrapper for sample size results.
"""

from __future__ import annotations

from typing import Any

from pybiostat.core.result import Result
from pybiostat.power._common import SampleSizeParams


class SampleSizeSolution:
    """Minimum sample size for a t-test."""

    __slots__ = ('_result',)

    def __init__(self, _result: Result[SampleSizeParams]) -> None:
        self._result = _result

    @property
    def n(self) -> float:
        """Fractional n per group solving the power equation."""
        return self._result.params.n

    @property
    def n_required(self) -> int:
        """Minimum whole sample size per group, ceil(n)."""
        return self._result.params.n_required

    @property
    def d(self) -> float:
        return self._result.params.d

    @property
    def sig_level(self) -> float:
        return self._result.params.sig_level

    @property
    def power(self) -> float:
        return self._result.params.power

    @property
    def achieved_power(self) -> float:
        """Power actually attained with n_required per group."""
        return self._result.params.achieved_power

    @property
    def type(self) -> str:
        return self._result.params.type

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

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
        per_group = " in each group" if self.type == "two.sample" else ""
        label = {
            "one.sample": "1-sample",
            "two.sample": "2-sample",
            "paired": "paired",
        }[self.type]
        title = {
            "one.sample": "One sample",
            "two.sample": "Two-sample",
            "paired": "Paired",
        }[self.type]
        lines = [
            f"     {title} t test power calculation",
            "",
            f"              n = {self.n:.6g}",
            f"              d = {self.d:.6g}",
            f"      sig.level = {self.sig_level:g}",
            f"          power = {self.power:g}",
            f"    alternative = {self.alternative}",
            "",
            f"  Minimum sample size required for {label} t-test: "
            f"n = {self.n_required}{per_group}",
        ]
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SampleSizeSolution(n_required={self.n_required}, "
            f"d={self.d:.4g}, type={self.type!r})"
        )
