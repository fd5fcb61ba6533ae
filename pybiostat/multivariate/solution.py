"""
Solution wrapper for PCA approximation results.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pybiostat.core.result import Result
from pybiostat.multivariate._common import PCAParams
from pybiostat.multivariate._scaling import ScaleTransform


class PCASolution:
    """Rank-k PCA approximation of a data matrix."""

    __slots__ = ('_result', '_columns')

    def __init__(
        self,
        _result: Result[PCAParams],
        _columns: tuple[str, ...] | None = None,
    ) -> None:
        self._result = _result
        self._columns = _columns

    @property
    def approximation(self) -> NDArray:
        """(n, p) approximation in the units of the input."""
        return self._result.params.approximation

    @property
    def scores(self) -> NDArray:
        """(n, k) standardized data projected onto the retained directions."""
        return self._result.params.scores

    @property
    def rotation(self) -> NDArray:
        """(p, k) retained principal directions (columns)."""
        return self._result.params.rotation

    @property
    def eigenvalues(self) -> NDArray:
        """(p,) eigenvalues of the correlation matrix, descending."""
        return self._result.params.eigenvalues

    @property
    def explained_variance_ratio(self) -> NDArray:
        """(k,) share of total standardized variance per retained component."""
        ev = self.eigenvalues
        return ev[:self.k] / ev.sum()

    @property
    def transform(self) -> ScaleTransform:
        return self._result.params.transform

    @property
    def k(self) -> int:
        return self._result.params.k

    @property
    def full_rank(self) -> bool:
        return self.k == len(self.eigenvalues)

    @property
    def columns(self) -> tuple[str, ...] | None:
        return self._columns

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
        n, p = self.approximation.shape
        lines = [
            "Call: pc_approx()",
            "",
            f"  n={n}, p={p}, k={self.k}",
            "",
            f"  {'PC':>4s}  {'eigenvalue':>10s}  {'prop.var':>8s}  {'cum.prop':>8s}",
        ]
        props = self.eigenvalues / self.eigenvalues.sum()
        cum = np.cumsum(props)
        for i, (ev, pr, cp) in enumerate(zip(self.eigenvalues, props, cum)):
            mark = "*" if i < self.k else " "
            lines.append(f"  {i + 1:>3d}{mark}  {ev:10.4f}  {pr:8.4f}  {cp:8.4f}")
        lines.append("")
        lines.append("  (* retained)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        n, p = self.approximation.shape
        return f"PCASolution(n={n}, p={p}, k={self.k})"
