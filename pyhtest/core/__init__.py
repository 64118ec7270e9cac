"""
Core infrastructure for pyhtest.

Shared abstractions used by the hypothesis-testing engine.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pyhtest.core.result import Result
from pyhtest.core.exceptions import (
    PyHTestError,
    ValidationError,
    DimensionError,
    DegenerateInputError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyHTestError",
    "ValidationError",
    "DimensionError",
    "DegenerateInputError",
]
