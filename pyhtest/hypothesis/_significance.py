"""
Significance gate: turn a test's p-value into a verdict.
"""

from __future__ import annotations

from typing import Callable, Iterable

from pyhtest.core.exceptions import ValidationError
from pyhtest.hypothesis._common import DEFAULT_SIGNIFICANCE_LEVEL, Significance


def run_test(
    test: Callable[[], Iterable[float]],
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
) -> Significance:
    """
    Assess a statistical test at the given significance level.

    Parameters
    ----------
    test : callable
        Zero-argument callable returning a (statistic, p_value) pair, e.g.
        ``lambda: t_one_sample(x, mu=1.0)``. The statistic is ignored.
    significance_level : float
        Threshold in [0, 1]. Default 0.05.

    Returns
    -------
    Significance
        ``NOT_SIGNIFICANT`` when ``p_value <= significance_level``,
        ``SIGNIFICANT`` otherwise.

    Notes
    -----
    The labels are inverted relative to the usual reading: a p-value at or
    below the threshold is reported as NOT_SIGNIFICANT. Callers depend on
    this contract, so it is kept as is.
    """
    if not 0.0 <= significance_level <= 1.0:
        raise ValidationError(
            f"significance_level must be in [0, 1], got {significance_level}"
        )

    _statistic, p_value = test()
    if p_value <= significance_level:
        return Significance.NOT_SIGNIFICANT
    return Significance.SIGNIFICANT
