"""
Exception hierarchy for pybiostat.

All exceptions inherit from PyBiostatError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyBiostatError(Exception):
    """Base exception for all pybiostat errors."""
    pass


class ValidationError(PyBiostatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidInputError(ValidationError):
    """
    Input values are outside their allowed domain.

    Raised for mismatched parallel arrays, empty input, or values that
    are not permitted (e.g. an event status other than 0 or 1, a negative
    survival time). Never silently corrected.

    Attributes:
        parameter: Name of the offending parameter, if known
        invalid_values: The distinct offending values, if known
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        invalid_values: tuple | None = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.invalid_values = invalid_values


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when
    multiple arrays have inconsistent shapes, or when a requested number
    of components is outside what the data supports.
    """
    pass


class DegenerateInputError(ValidationError):
    """
    Input is valid in form but carries no information for the estimate.

    Raised e.g. for a binary vector containing only one class, where a
    likelihood has no interior maximum, or for a zero effect size, where
    no finite sample size exists.
    """
    pass


class NumericalError(PyBiostatError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation,
    e.g. a root finder that cannot bracket a solution or an objective
    that is undefined everywhere on its domain.
    """
    pass
