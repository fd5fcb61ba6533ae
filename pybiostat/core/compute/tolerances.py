"""
Tolerance tiers for numerical validation.

Defines precision expectations for the different kinds of result:
- CPU FP64 (closed-form / exact arithmetic): machine precision
- Reconstruction: matrix round trips through an eigendecomposition
- Grid resolution: brute-force searches on a 0.001 grid

The test suite compares results against these tiers; bernoulli_mle uses
CPU_FP64 as the rounding slack when comparing its grid estimate with
mean(data).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact arithmetic on small integers (KM counts, cumulative products)
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Standardize -> project -> back-project -> unstandardize round trips
RECONSTRUCTION = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='reconstruction',
    description='Full-rank PCA reconstruction through eigh',
)

# Default grid for the Bernoulli likelihood search
DEFAULT_GRID_STEP = 0.001

GRID_RESOLUTION = ToleranceTier(
    rtol=0.0,
    atol=DEFAULT_GRID_STEP,
    name='grid_resolution',
    description='Brute-force search on a 0.001 grid',
)
