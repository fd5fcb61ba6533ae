"""
Parameter payloads for sample size calculations.
"""

from __future__ import annotations

from dataclasses import dataclass

VALID_TYPES = ("one.sample", "two.sample", "paired")
VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class SampleSizeParams:
    """Solution of the t-test power equation for n."""

    n: float                     # fractional n per group solving power(n) = target
    n_required: int              # ceil(n)
    d: float                     # Cohen's d used
    sig_level: float
    power: float                 # target power
    achieved_power: float        # power at n_required
    type: str                    # "one.sample", "two.sample" or "paired"
    alternative: str
