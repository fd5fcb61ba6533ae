"""
Core infrastructure for pybiostat.

This module provides shared abstractions and utilities used by all
domain-specific submodules (survival, multivariate, likelihood, power).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, grid search
"""

from pybiostat.core.result import Result
from pybiostat.core.exceptions import (
    PyBiostatError,
    ValidationError,
    InvalidInputError,
    DimensionError,
    DegenerateInputError,
    NumericalError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyBiostatError",
    "ValidationError",
    "InvalidInputError",
    "DimensionError",
    "DegenerateInputError",
    "NumericalError",
]
