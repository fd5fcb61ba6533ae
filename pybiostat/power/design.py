"""
SampleSizeDesign: validated inputs for t-test sample size calculations.

Built either from a known effect size (for_t_test) or from pilot data
whose Cohen's d is estimated (from_pilot).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pybiostat.core.exceptions import DegenerateInputError, ValidationError
from pybiostat.core.validation import check_array, check_finite, check_min_samples
from pybiostat.power._common import VALID_ALTERNATIVES, VALID_TYPES
from pybiostat.power._t_test import cohens_d_one_sample, cohens_d_two_sample


def _validate_probability(value: float, name: str) -> float:
    """Validate a level/power is in (0, 1)."""
    if not (0.0 < value < 1.0):
        raise ValidationError(f"{name} must be in (0, 1), got {value}")
    return float(value)


def _to_pilot_sample(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Convert pilot data to a finite 1D float64 vector with >= 2 values."""
    arr = np.atleast_1d(check_array(x, name)).ravel()
    check_finite(arr, name)
    check_min_samples(arr, 2, name)
    return arr


def pilot_effect_size(
    x1: ArrayLike,
    x2: ArrayLike | None = None,
    *,
    mu: float = 0.0,
) -> tuple[float, str]:
    """Cohen's d from pilot data and the t-test type it implies.

    Raises
    ------
    ValidationError
        Non-numeric or non-finite data, fewer than 2 values per sample.
    DegenerateInputError
        The standard deviation of the pilot data is zero.
    """
    a = _to_pilot_sample(x1, "x1")
    if x2 is None:
        if np.ptp(a) == 0:
            raise DegenerateInputError("x1 is constant; Cohen's d is undefined")
        return cohens_d_one_sample(a, mu), "one.sample"

    b = _to_pilot_sample(x2, "x2")
    if np.ptp(a) == 0 and np.ptp(b) == 0:
        raise DegenerateInputError(
            "x1 and x2 are both constant; Cohen's d is undefined"
        )
    return cohens_d_two_sample(a, b), "two.sample"


@dataclass(frozen=True)
class SampleSizeDesign:
    """Effect size and test settings for sample size calculation."""

    d: float
    sig_level: float
    power: float
    type: str
    alternative: str

    @classmethod
    def for_t_test(
        cls,
        d: float,
        *,
        sig_level: float = 0.05,
        power: float = 0.8,
        type: str = "two.sample",
        alternative: str = "two.sided",
    ) -> SampleSizeDesign:
        """Build design from a known Cohen's d.

        Raises
        ------
        ValidationError
            sig_level or power outside (0, 1), unknown type/alternative,
            non-finite d, or a one-sided alternative whose direction
            contradicts the sign of d.
        DegenerateInputError
            d == 0: no finite sample size detects a null effect.
        """
        sig_level = _validate_probability(sig_level, "sig_level")
        power = _validate_probability(power, "power")

        if type not in VALID_TYPES:
            raise ValidationError(f"type must be one of {VALID_TYPES}, got {type!r}")
        if alternative not in VALID_ALTERNATIVES:
            raise ValidationError(
                f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
            )

        d = float(d)
        if not np.isfinite(d):
            raise ValidationError(f"d must be finite, got {d}")
        if d == 0.0:
            raise DegenerateInputError(
                "effect size d is 0; no sample size detects a null effect"
            )
        if (alternative == "greater" and d < 0) or (alternative == "less" and d > 0):
            raise ValidationError(
                f"alternative={alternative!r} cannot reach power {power} "
                f"with d={d:.4g}; the effect points the other way"
            )
        if power <= sig_level:
            raise ValidationError(
                f"power ({power}) must exceed sig_level ({sig_level})"
            )

        return cls(
            d=d,
            sig_level=sig_level,
            power=power,
            type=type,
            alternative=alternative,
        )

    @classmethod
    def from_pilot(
        cls,
        x1: ArrayLike,
        x2: ArrayLike | None = None,
        *,
        mu: float = 0.0,
        sig_level: float = 0.05,
        power: float = 0.8,
        alternative: str = "two.sided",
    ) -> SampleSizeDesign:
        """Estimate Cohen's d from pilot data and build the design.

        One sample (x2 None): d = (mean(x1) - mu) / sd(x1), type "one.sample".
        Two samples: d = (mean(x1) - mean(x2)) / pooled sd, type "two.sample".

        Raises
        ------
        ValidationError
            Non-numeric or non-finite data, fewer than 2 values per sample.
        DegenerateInputError
            Constant pilot data (sd is 0) or a zero mean difference.
        """
        d, test_type = pilot_effect_size(x1, x2, mu=mu)

        return cls.for_t_test(
            d,
            sig_level=sig_level,
            power=power,
            type=test_type,
            alternative=alternative,
        )
