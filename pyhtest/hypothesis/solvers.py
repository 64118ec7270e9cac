"""
Solver dispatch for hypothesis tests.

One public function per test: t_one_sample(), t_two_sample_independent(),
t_two_sample_paired(), chisq_goodness_of_fit(), chisq_independence(),
mann_whitney_u(), wilcoxon_one_sample(), wilcoxon_paired(),
sign_one_sample(), sign_paired().

Also re-exports p_adjust() and run_test() for convenience.
"""

from __future__ import annotations

from typing import Any, Callable
from numpy.typing import ArrayLike

from pyhtest.hypothesis._common import Alternative
from pyhtest.hypothesis.design import HypothesisDesign
from pyhtest.hypothesis.solution import HTestSolution
from pyhtest.hypothesis.backends.cpu import CPUHypothesisBackend
from pyhtest.hypothesis._p_adjust import p_adjust  # re-export
from pyhtest.hypothesis._significance import run_test  # re-export


def _solve(design: HypothesisDesign) -> HTestSolution:
    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


# --- Student's t ---

def t_one_sample(
    x: ArrayLike | HypothesisDesign,
    *,
    mu: float = 0.0,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> HTestSolution:
    """
    One-sample Student's t-test.

    Evaluates the null hypothesis that the mean of a normally distributed
    variable equals `mu`.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample data, at least 2 finite observations.
    mu : float
        Hypothesized mean. Default 0.
    alternative : Alternative or str
        "two.sided" (default), "less", or "greater".

    Returns
    -------
    HTestSolution
        Test result with statistic (t), p_value, parameter {"df": n - 1}.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_one_sample(
            x, mu=mu, alternative=alternative,
        )
    return _solve(design)


def t_two_sample_independent(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    equal_variance: bool = True,
    mu: float = 0.0,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> HTestSolution:
    """
    Two-sample t-test for independent samples.

    Evaluates the null hypothesis that the difference of means of two
    independent normally distributed populations equals `mu`.

    Parameters
    ----------
    x, y : array-like
        Samples, at least 2 finite observations each.
    equal_variance : bool
        If True (default), use the pooled variance (Student's t).
        If False, use Welch's approximation with Welch-Satterthwaite
        degrees of freedom.
    mu : float
        Hypothesized difference in means. Default 0.
    alternative : Alternative or str
        "two.sided" (default), "less", or "greater".
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_two_sample(
            x, y,
            equal_variance=equal_variance,
            mu=mu,
            alternative=alternative,
        )
    return _solve(design)


def t_two_sample_paired(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    mu: float = 0.0,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> HTestSolution:
    """
    Paired two-sample t-test.

    One-sample t-test on the differences x - y against `mu`. x and y must
    have equal length (DimensionError otherwise).
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_paired(
            x, y, mu=mu, alternative=alternative,
        )
    return _solve(design)


# --- Chi-squared ---

def chisq_goodness_of_fit(
    observed: ArrayLike | HypothesisDesign,
    expected: ArrayLike | None = None,
    *,
    ddof: int = 0,
) -> HTestSolution:
    """
    Pearson's chi-squared goodness-of-fit test.

    Parameters
    ----------
    observed : array-like or HypothesisDesign
        Observed counts.
    expected : array-like or None
        Expected counts, same length as observed. If None, every cell
        expects sum(observed) / len(observed).
    ddof : int
        Extra degrees of freedom to subtract, e.g. for parameters
        estimated from the data. df = len(observed) - 1 - ddof.
    """
    if isinstance(observed, HypothesisDesign):
        design = observed
    else:
        design = HypothesisDesign.for_chisq_gof(observed, expected, ddof=ddof)
    return _solve(design)


def chisq_independence(
    table: ArrayLike | HypothesisDesign,
    *,
    correction: bool = True,
) -> HTestSolution:
    """
    Pearson's chi-squared test of independence on a contingency table.

    Parameters
    ----------
    table : 2D array-like or HypothesisDesign
        Non-negative counts, at least one row and one column.
    correction : bool
        Apply Yates' continuity correction when the table has exactly one
        degree of freedom. Default True.

    Returns
    -------
    HTestSolution
        Statistic (X-squared), p_value, and extras (observed, expected,
        residuals). A table with a single row or column yields (0, 1).

    Raises
    ------
    DegenerateInputError
        If any expected frequency is zero.
    """
    if isinstance(table, HypothesisDesign):
        design = table
    else:
        design = HypothesisDesign.for_chisq_independence(
            table, correction=correction,
        )
    return _solve(design)


# --- Rank and sign tests ---

def mann_whitney_u(
    x: Any,
    y: Any = None,
    *,
    alternative: Alternative | str = Alternative.TWO_SIDED,
    correction: bool = True,
    exact: bool | None = None,
    key: Callable[[Any], Any] | None = None,
) -> HTestSolution:
    """
    Mann-Whitney U test (Wilcoxon rank sum test).

    Non-parametric test of the null hypothesis that two independent
    samples come from populations with equal medians.

    Parameters
    ----------
    x, y : sequence
        Independent samples of numbers or any totally ordered items.
    alternative : Alternative or str
        "two.sided" (default), "less", or "greater".
    correction : bool
        Continuity correction for the normal approximation. Default True.
    exact : bool or None
        None (default) picks the exact null distribution for samples
        without ties unless both exceed 20 observations. True forces
        enumeration of all C(n1 + n2, min(n1, n2)) subsets, which is
        exponential in the sample size and not capped. False forces the
        normal approximation.
    key : callable or None
        Function mapping items to the value they are ranked by.

    Returns
    -------
    HTestSolution
        Statistic U = min(U1, U2) and p_value; extras hold U1 and U2.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_mann_whitney(
            x, y,
            alternative=alternative,
            correction=correction,
            exact=exact,
            key=key,
        )
    return _solve(design)


def wilcoxon_paired(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative | str = Alternative.TWO_SIDED,
    correction: bool = True,
    exact: bool | None = None,
) -> HTestSolution:
    """
    Wilcoxon paired signed rank test.

    Evaluates the null hypothesis that two related samples have equal
    medians. Assumes the differences y - x are symmetric about their
    median. Zero differences are dropped before ranking.

    Parameters
    ----------
    x, y : array-like
        Paired samples of equal, non-zero length.
    alternative : Alternative or str
        "two.sided" (default), "less", or "greater".
    correction : bool
        Continuity correction for the normal approximation. Default True.
    exact : bool or None
        None (default) uses the exact distribution over all 2**nz sign
        assignments only when there are no ties, no zero differences and
        at most 20 pairs. True forces it; the distribution is built as a
        table of distinct rank sums, so memory grows as nz**2, not 2**nz.
        False forces the normal approximation.

    Returns
    -------
    HTestSolution
        Statistic W = min(W+, W-) and p_value.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_wilcoxon(
            x, y,
            alternative=alternative,
            correction=correction,
            exact=exact,
        )
    return _solve(design)


def wilcoxon_one_sample(
    x: ArrayLike | HypothesisDesign,
    *,
    shift: float = 0.0,
    alternative: Alternative | str = Alternative.TWO_SIDED,
    correction: bool = True,
    exact: bool | None = None,
) -> HTestSolution:
    """
    Wilcoxon signed rank test of the null hypothesis that the median of
    `x` equals `shift`. Assumes x - shift is symmetrically distributed.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_wilcoxon_one_sample(
            x,
            shift=shift,
            alternative=alternative,
            correction=correction,
            exact=exact,
        )
    return _solve(design)


def sign_paired(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> HTestSolution:
    """
    Dependent samples sign test.

    Evaluates the null hypothesis that the median difference between
    observations of two related samples is zero. The statistic is the
    number of positive differences y - x.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_sign(x, y, alternative=alternative)
    return _solve(design)


def sign_one_sample(
    x: ArrayLike | HypothesisDesign,
    *,
    shift: float = 0.0,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> HTestSolution:
    """Sign test of the null hypothesis that the median of `x` equals `shift`."""
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_sign_one_sample(
            x, shift=shift, alternative=alternative,
        )
    return _solve(design)
