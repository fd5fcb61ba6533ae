"""
PCADesign: validated data matrix and component count for pc_approx().
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybiostat.core.exceptions import DimensionError, ValidationError
from pybiostat.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_min_samples,
    check_no_zero_variance_columns,
)


@dataclass(frozen=True)
class PCADesign:
    """Immutable PCA input.

    Do not construct directly; use PCADesign.for_pca().
    """

    x: NDArray
    k: int
    columns: tuple[str, ...] | None

    @classmethod
    def for_pca(cls, x: ArrayLike, k) -> PCADesign:
        """Validate the data matrix and the number of retained components.

        Parameters
        ----------
        x : array-like
            (n, p) numeric matrix. A pandas DataFrame is accepted; its
            column names are kept for display.
        k : int
            Number of principal components to retain, 1 <= k <= p.

        Raises
        ------
        ValidationError
            Non-numeric or non-finite data, fewer than 2 rows, constant
            columns, or k not an integer.
        DimensionError
            x not 2D, or k outside [1, p].
        """
        columns = None
        if hasattr(x, 'columns') and hasattr(x, 'values'):
            columns = tuple(str(c) for c in x.columns)
            x = x.values

        arr = check_array(x, "x")
        check_2d(arr, "x")
        check_finite(arr, "x")
        check_min_samples(arr, 2, "x")
        check_no_zero_variance_columns(arr, "x")

        if isinstance(k, bool) or not isinstance(k, Integral):
            raise ValidationError(f"k must be an integer, got {k!r}")

        p = arr.shape[1]
        k = int(k)
        if not 1 <= k <= p:
            raise DimensionError(
                f"k must be between 1 and the number of columns ({p}), got {k}"
            )

        arr = arr.astype(np.float64)
        arr.setflags(write=False)
        return cls(x=arr, k=k, columns=columns)

    @property
    def n(self) -> int:
        return self.x.shape[0]

    @property
    def p(self) -> int:
        return self.x.shape[1]
