"""
Input validation utilities for pybiostat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes and
      bool -> float for indicator vectors)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pybiostat.core.exceptions import (
    DimensionError,
    InvalidInputError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to a float64 numpy array. Rejects
    inputs that result in object dtype (indicating mixed types or
    non-numeric data). Boolean arrays are accepted and mapped to 0.0/1.0.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        return result.astype(np.float64)

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    # Ensure floating point for numerical stability
    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_no_zero_variance_columns(X: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify matrix has no constant (zero-variance) columns.

    Constant columns cannot be standardized (their standard deviation
    is zero) and typically indicate data problems.

    Raises:
        ValidationError: If any column has zero variance
    """
    # ptp is exactly 0 for a constant column; var may not be
    spans = np.ptp(X, axis=0)
    zero_var_cols = np.where(spans == 0)[0]

    if len(zero_var_cols) > 0:
        raise ValidationError(
            f"{name}: columns {zero_var_cols.tolist()} have zero variance (constant)"
        )


def check_binary(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every value is exactly 0 or 1.

    Values such as 0.5 or 2 are rejected, not rounded.

    Raises:
        InvalidInputError: If any value is outside {0, 1}
    """
    bad = ~np.isin(array, (0.0, 1.0))
    if np.any(bad):
        offending = tuple(np.unique(array[bad]).tolist())
        raise InvalidInputError(
            f"{name}: must contain only 0 and 1, got {offending}",
            parameter=name,
            invalid_values=offending,
        )


def check_nonnegative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every value is >= 0.

    Raises:
        InvalidInputError: If any value is negative
    """
    negative = array < 0
    if np.any(negative):
        offending = tuple(np.unique(array[negative]).tolist())
        raise InvalidInputError(
            f"{name}: must be non-negative, got {int(np.sum(negative))} "
            f"negative value(s) {offending}",
            parameter=name,
            invalid_values=offending,
        )
