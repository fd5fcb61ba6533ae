"""
BernoulliDesign: validated binary data for likelihood estimation.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybiostat.core.exceptions import (
    DegenerateInputError,
    InvalidInputError,
    ValidationError,
)
from pybiostat.core.validation import check_array, check_binary


@dataclass(frozen=True)
class BernoulliDesign:
    """Binary vector containing both classes.

    Do not construct directly; use BernoulliDesign.for_bernoulli().
    """

    data: NDArray

    @classmethod
    def for_bernoulli(cls, data: ArrayLike) -> BernoulliDesign:
        """Validate a binary vector of 0's and 1's.

        Raises
        ------
        InvalidInputError
            Non-numeric data, or any value other than 0 or 1.
        DegenerateInputError
            Only one of the two classes is present (including empty input).
        """
        try:
            arr = check_array(data, "data")
        except ValidationError as e:
            raise InvalidInputError(str(e), parameter="data") from e

        arr = np.atleast_1d(arr).ravel().astype(np.float64)
        check_binary(arr, "data")

        present = np.unique(arr)
        if len(present) != 2:
            raise DegenerateInputError(
                f"data must contain both 0 and 1 to have an interior maximum, "
                f"got only {present.tolist()}"
            )

        arr.setflags(write=False)
        return cls(data=arr)

    @property
    def n(self) -> int:
        return len(self.data)

    @property
    def n_successes(self) -> int:
        return int(self.data.sum())
