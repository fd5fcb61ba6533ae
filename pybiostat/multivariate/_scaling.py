"""
Column centering and scaling as an explicit, invertible transform.

ScaleTransform carries the per-column {mu, sigma} used to standardize a
matrix, so the inverse can be applied to any matrix with the same columns
(e.g. a low-rank approximation) without attaching metadata to the data.

Conventions match R's scale():
    center=True,  scale=True   -> mu = column mean, sigma = column sd (n - 1)
    center=False, scale=True   -> mu = 0, sigma = sqrt(Σ x² / (n - 1))
    center=True,  scale=False  -> mu = column mean, sigma = 1
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybiostat.core.exceptions import DimensionError, ValidationError
from pybiostat.core.validation import (
    check_array,
    check_finite,
    check_min_samples,
)


def _as_columns(x: ArrayLike, name: str) -> tuple[NDArray[np.floating[Any]], bool]:
    """Return x as a 2D float array and whether it was 1D."""
    arr = check_array(x, name)
    if arr.ndim == 1:
        return arr.reshape(-1, 1), True
    if arr.ndim != 2:
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {arr.ndim}D with shape {arr.shape}"
        )
    return arr, False


@dataclass(frozen=True)
class ScaleTransform:
    """Paired center/scale transform with its exact inverse.

    Attributes
    ----------
    mu : NDArray
        (p,) values subtracted from each column.
    sigma : NDArray
        (p,) values each centered column is divided by.
    """

    mu: NDArray
    sigma: NDArray

    @classmethod
    def fit(cls, x: ArrayLike, *, center: bool = True, scale: bool = True) -> ScaleTransform:
        """Learn mu and sigma from the columns of x.

        Raises
        ------
        ValidationError
            Non-numeric or non-finite data, fewer than 2 rows when scaling,
            or a column whose scale is zero.
        """
        arr, _ = _as_columns(x, "x")
        check_finite(arr, "x")
        check_min_samples(arr, 1, "x")

        n, p = arr.shape
        mu = arr.mean(axis=0) if center else np.zeros(p)

        if scale:
            check_min_samples(arr, 2, "x")
            centered = arr - mu
            sigma = np.sqrt(np.sum(centered ** 2, axis=0) / (n - 1))
            zero_scale = sigma == 0
            if center:
                zero_scale |= np.ptp(arr, axis=0) == 0
            zero = np.where(zero_scale)[0]
            if len(zero) > 0:
                raise ValidationError(
                    f"x: columns {zero.tolist()} have zero scale and cannot be standardized"
                )
        else:
            sigma = np.ones(p)

        mu.setflags(write=False)
        sigma.setflags(write=False)
        return cls(mu=mu, sigma=sigma)

    @property
    def n_features(self) -> int:
        return len(self.mu)

    def _check_columns(self, arr: NDArray, name: str) -> None:
        if arr.shape[1] != self.n_features:
            raise DimensionError(
                f"{name}: transform was fit on {self.n_features} column(s), "
                f"got {arr.shape[1]}"
            )

    def transform(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """(x - mu) / sigma, column-wise."""
        arr, was_1d = _as_columns(x, "x")
        self._check_columns(arr, "x")
        z = (arr - self.mu) / self.sigma
        return z.ravel() if was_1d else z

    def inverse_transform(self, z: ArrayLike) -> NDArray[np.floating[Any]]:
        """z * sigma + mu, column-wise."""
        arr, was_1d = _as_columns(z, "z")
        self._check_columns(arr, "z")
        x = arr * self.sigma + self.mu
        return x.ravel() if was_1d else x
