"""
Sign test for paired samples (or one sample against a shift).

The statistic is the number of positive differences y - x; zero
differences are dropped. Under H0 it follows Binomial(n_nonzero, 0.5).
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np
from scipy import stats as sp_stats

from pyhtest.hypothesis._common import Alternative, HTestParams

if TYPE_CHECKING:
    from pyhtest.hypothesis.design import HypothesisDesign


def sign_test(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    """Sign test on paired differences y - x."""
    alternative = design.alternative
    warnings_list: list[str] = []

    d = design.y - design.x
    pi_plus = int(np.count_nonzero(d > 0))
    pi_minus = int(np.count_nonzero(d < 0))
    trials = pi_plus + pi_minus

    if trials == 0:
        warnings_list.append("all differences are zero")

    # The two-sided value pairs P(S <= s) with P(S >= s); both tails
    # include the observed count.
    lower = float(sp_stats.binom.cdf(pi_plus, trials, 0.5))
    upper = 1.0 - float(sp_stats.binom.cdf(pi_plus - 1, trials, 0.5))

    if alternative is Alternative.LESS:
        p_value = lower
    elif alternative is Alternative.GREATER:
        p_value = upper
    else:
        p_value = 2.0 * min(lower, upper)

    return HTestParams(
        statistic=float(pi_plus),
        statistic_name="S",
        parameter={"trials": float(trials)},
        p_value=min(1.0, p_value),
        estimate=None,
        null_value={"median difference": design.mu},
        alternative=alternative,
        method="Sign test",
        data_name=design.data_name,
        extras={"n_positive": pi_plus, "n_negative": pi_minus},
    ), warnings_list
