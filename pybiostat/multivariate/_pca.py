"""
Low-rank approximation through principal components.

    Z     = (X - mu) / sigma                 standardize
    C     = Z'Z / (n - 1)                    correlation matrix
    C     = V Λ V'                           eigendecomposition, Λ descending
    Z_k   = Z V_k V_k'                       project and back-project
    X_k   = Z_k * sigma + mu                 return to original units

With k = p, V V' = I and the reconstruction is exact up to rounding.
Equivalent to R's prcomp(scale(x)) followed by x_scaled %*% PCs %*% t(PCs).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pybiostat.multivariate._common import PCAParams
from pybiostat.multivariate._scaling import ScaleTransform


def principal_directions(z: NDArray) -> tuple[NDArray, NDArray]:
    """Eigenvalues (descending) and unit eigenvectors of cov(z).

    Each eigenvector's sign is fixed so its largest-magnitude loading is
    positive; eigh's sign is otherwise arbitrary.
    """
    n = z.shape[0]
    cov = (z.T @ z) / (n - 1)
    eigenvalues, eigenvectors = np.linalg.eigh(cov)

    order = np.argsort(eigenvalues)[::-1]
    eigenvalues = np.clip(eigenvalues[order], 0.0, None)
    eigenvectors = eigenvectors[:, order]

    pivot = np.argmax(np.abs(eigenvectors), axis=0)
    signs = np.sign(eigenvectors[pivot, np.arange(eigenvectors.shape[1])])
    signs[signs == 0] = 1.0
    return eigenvalues, eigenvectors * signs


def pca_approx_fit(x: NDArray, k: int) -> PCAParams:
    """Reconstruct x from its first k principal components.

    Parameters
    ----------
    x : NDArray
        (n, p) validated data matrix.
    k : int
        Number of retained components, 1 <= k <= p.

    Returns
    -------
    PCAParams
    """
    transform = ScaleTransform.fit(x)
    z = transform.transform(x)

    eigenvalues, eigenvectors = principal_directions(z)
    rotation = eigenvectors[:, :k]

    scores = z @ rotation
    z_hat = scores @ rotation.T
    approximation = transform.inverse_transform(z_hat)

    return PCAParams(
        approximation=approximation,
        scores=scores,
        rotation=rotation,
        eigenvalues=eigenvalues,
        transform=transform,
        k=k,
    )
