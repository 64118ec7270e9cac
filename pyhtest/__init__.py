"""
pyhtest: statistical hypothesis testing for Python.

Student's t, chi-squared, Mann-Whitney U, Wilcoxon signed rank and sign
tests with exact or normal-approximation null distributions, plus Holm and
Benjamini-Hochberg multiple-comparison adjustment.

Submodules:
    hypothesis: Test functions, significance gate, p-value adjustment
    core: Result envelope, exceptions, validation, timing
"""

__version__ = "0.1.0"

from pyhtest import hypothesis
from pyhtest.hypothesis import (
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
    run_test,
    p_adjust,
    Alternative,
    AdjustmentMethod,
    Significance,
)

__all__ = [
    "__version__",
    "hypothesis",
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
    "Alternative",
    "AdjustmentMethod",
    "Significance",
]
