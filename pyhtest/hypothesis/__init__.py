"""
Hypothesis testing module.

Computes a test statistic and p-value under a named null hypothesis, picks
between exact and normal-approximation null distributions for the rank
tests, and adjusts batches of p-values for multiple comparisons.

Public API:
    t_one_sample(x)                  - One-sample Student's t-test
    t_two_sample_independent(x, y)   - Two-sample t-test (pooled or Welch)
    t_two_sample_paired(x, y)        - Paired t-test
    chisq_goodness_of_fit(observed)  - Chi-squared goodness-of-fit test
    chisq_independence(table)        - Chi-squared test of independence
    mann_whitney_u(x, y)             - Mann-Whitney U (rank sum) test
    wilcoxon_paired(x, y)            - Wilcoxon signed rank test
    wilcoxon_one_sample(x)           - Wilcoxon signed rank test vs shift
    sign_paired(x, y)                - Sign test
    sign_one_sample(x)               - Sign test vs shift
    run_test(fn)                     - Significance gate
    p_adjust(p)                      - Multiple testing correction (Holm, BH)
"""

from pyhtest.hypothesis.solvers import (
    t_one_sample,
    t_two_sample_independent,
    t_two_sample_paired,
    chisq_goodness_of_fit,
    chisq_independence,
    mann_whitney_u,
    wilcoxon_paired,
    wilcoxon_one_sample,
    sign_paired,
    sign_one_sample,
)
from pyhtest.hypothesis._p_adjust import p_adjust, AdjustmentMethod
from pyhtest.hypothesis._significance import run_test
from pyhtest.hypothesis._ranks import rank
from pyhtest.hypothesis.design import HypothesisDesign
from pyhtest.hypothesis._common import (
    Alternative,
    HTestParams,
    NullDistribution,
    Significance,
    TestResult,
)
from pyhtest.hypothesis.solution import HTestSolution

__all__ = [
    "t_one_sample",
    "t_two_sample_independent",
    "t_two_sample_paired",
    "chisq_goodness_of_fit",
    "chisq_independence",
    "mann_whitney_u",
    "wilcoxon_paired",
    "wilcoxon_one_sample",
    "sign_paired",
    "sign_one_sample",
    "run_test",
    "p_adjust",
    "rank",
    "AdjustmentMethod",
    "Alternative",
    "NullDistribution",
    "Significance",
    "TestResult",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
]
