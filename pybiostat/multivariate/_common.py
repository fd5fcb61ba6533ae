"""
Parameter payloads for multivariate results.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray

from pybiostat.multivariate._scaling import ScaleTransform


@dataclass(frozen=True)
class PCAParams:
    """Rank-k PCA approximation of a data matrix."""

    approximation: NDArray       # (n, p) reconstruction in original units
    scores: NDArray              # (n, k) standardized data projected on rotation
    rotation: NDArray            # (p, k) retained principal directions
    eigenvalues: NDArray         # (p,) all eigenvalues, descending
    transform: ScaleTransform    # column mu / sigma used to standardize
    k: int
