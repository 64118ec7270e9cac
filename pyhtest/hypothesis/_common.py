"""
Common types for hypothesis testing.

Defines HTestParams (maps to R's htest class), the TestResult pair and the
enums shared by every test: Alternative, NullDistribution, Significance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


DEFAULT_SIGNIFICANCE_LEVEL = 0.05

# Rank tests switch to the normal approximation above this sample size.
# Lower bounds follow Gravetter & Wallnau, "Statistics for the behavioral
# sciences" (2006).
EXACT_MAX_N = 20

# Expected counts below this trigger the chi-squared approximation warning.
SMALL_EXPECTED_COUNT = 5.0


class Alternative(str, Enum):
    """Direction of the alternative hypothesis."""
    LESS = "less"
    GREATER = "greater"
    TWO_SIDED = "two.sided"


VALID_ALTERNATIVES = tuple(a.value for a in Alternative)


class NullDistribution(str, Enum):
    """Null distribution a rank test evaluated its statistic against."""
    EXACT = "exact"
    APPROXIMATE = "approximate"


class Significance(str, Enum):
    """Verdict returned by run_test()."""
    SIGNIFICANT = "significant"
    NOT_SIGNIFICANT = "not significant"


class TestResult(NamedTuple):
    """The (statistic, p-value) pair every test reduces to."""
    __test__ = False  # not a pytest class

    statistic: float
    p_value: float


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Maps directly to R's htest structure. Every hypothesis test returns
    this same structure; test-specific extras go in the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("t", "X-squared", "U", "W", "S").
    parameter : dict or None
        Distribution parameters, e.g. {"df": 9} or {"trials": 5}.
        None for rank tests evaluated on an exact null distribution.
    p_value : float
        p-value of the test, in [0, 1].
    estimate : dict or None
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    null_value : dict or None
        Hypothesized value under H0, e.g. {"difference in means": 0}.
    alternative : Alternative
        Direction of the alternative hypothesis.
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    null_distribution : NullDistribution or None
        Exact or approximate null distribution (rank tests only).
    extras : dict or None
        Test-specific additional outputs (e.g. observed/expected/residuals
        for chi-squared tests, U1/U2 for Mann-Whitney).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    estimate: dict[str, float] | None
    null_value: dict[str, float] | None
    alternative: Alternative
    method: str
    data_name: str
    null_distribution: NullDistribution | None = None
    extras: dict[str, Any] | None = None
