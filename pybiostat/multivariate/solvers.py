"""
Public API for multivariate utilities.

    pc_approx(x, k)          → PCASolution
    scale(x)                 → (z, ScaleTransform)
    unscale(z, transform)    → x
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybiostat.core.exceptions import ValidationError
from pybiostat.core.result import Result
from pybiostat.core.compute.timing import Timer
from pybiostat.multivariate.design import PCADesign
from pybiostat.multivariate._pca import pca_approx_fit
from pybiostat.multivariate._scaling import ScaleTransform
from pybiostat.multivariate.solution import PCASolution


def pc_approx(x: ArrayLike | PCADesign, k: int | None = None) -> PCASolution:
    """Approximate x from its first k principal components.

    The data are standardized column-wise, projected onto the k leading
    eigenvectors of their correlation matrix, back-projected, and returned
    to the original units. With k equal to the number of columns the
    result reproduces x.

    Parameters
    ----------
    x : array-like or PCADesign
        (n, p) numeric matrix, or a pre-built PCADesign.
    k : int
        Number of principal components retained (1 <= k <= p). Ignored
        when x is a PCADesign.

    Returns
    -------
    PCASolution

    Raises
    ------
    DimensionError
        k outside [1, p] or x not 2D.
    ValidationError
        Invalid data (non-numeric, non-finite, constant columns, < 2 rows).
    """
    if isinstance(x, PCADesign):
        design = x
    else:
        if k is None:
            raise ValidationError("k is required")
        design = PCADesign.for_pca(x, k)

    timer = Timer()
    timer.start()

    with timer.section('pca'):
        params = pca_approx_fit(design.x, design.k)

    timer.stop()

    result = Result(
        params=params,
        info={
            "method": "PCA approximation",
            "n_components": design.k,
            "full_rank": design.k == design.p,
        },
        timing=timer.result(),
        backend_name="cpu_eigh",
    )

    return PCASolution(_result=result, _columns=design.columns)


def scale(
    x: ArrayLike,
    *,
    center: bool = True,
    scale: bool = True,
) -> tuple[NDArray[np.floating[Any]], ScaleTransform]:
    """Center and/or scale the columns of x. Matches R scale().

    Returns
    -------
    (z, transform)
        The transformed data and the ScaleTransform needed to undo it.
    """
    transform = ScaleTransform.fit(x, center=center, scale=scale)
    return transform.transform(x), transform


def unscale(z: ArrayLike, transform: ScaleTransform) -> NDArray[np.floating[Any]]:
    """Reverse a centering/scaling: z * sigma + mu.

    Parameters
    ----------
    z : array-like
        Data on the standardized scale; 1D input is treated as one column.
    transform : ScaleTransform
        The transform returned by scale() (or ScaleTransform.fit()).

    Raises
    ------
    ValidationError
        If transform is not a ScaleTransform.
    DimensionError
        If z's column count differs from the fitted transform.
    """
    if not isinstance(transform, ScaleTransform):
        raise ValidationError(
            f"transform must be a ScaleTransform, got {type(transform).__name__}"
        )
    return transform.inverse_transform(z)
