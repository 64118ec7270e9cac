"""
Exception hierarchy for pyhtest.

All exceptions inherit from PyHTestError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyHTestError(Exception):
    """Base exception for all pyhtest errors."""
    pass


class ValidationError(PyHTestError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty
    samples, negative counts, unknown alternatives or methods.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when paired samples differ in length, when observed and
    expected frequencies differ in length, or when a contingency table
    has the wrong shape.
    """
    pass


class DegenerateInputError(PyHTestError):
    """
    The null model cannot be evaluated for this input.

    Raised when the input is well-formed but the test statistic is
    undefined, e.g. a contingency table with a zero expected frequency
    or a t-test on constant data.

    Attributes:
        reason: Short machine-readable description of the degeneracy
    """

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.reason = reason
