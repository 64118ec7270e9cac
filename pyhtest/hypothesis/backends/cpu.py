"""
CPU reference backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from pyhtest.core.result import Result
from pyhtest.core.compute.timing import Timer
from pyhtest.hypothesis._common import HTestParams
from pyhtest.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "t_one_sample":
                from pyhtest.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_type == "t_two_sample":
                from pyhtest.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "t_paired":
                from pyhtest.hypothesis.backends._t_test import t_paired
                params, warnings_list = t_paired(design)
            elif test_type == "chisq_independence":
                from pyhtest.hypothesis.backends._chisq_test import chisq_independence
                params, warnings_list = chisq_independence(design)
            elif test_type == "chisq_gof":
                from pyhtest.hypothesis.backends._chisq_test import chisq_gof
                params, warnings_list = chisq_gof(design)
            elif test_type == "wilcox_rank_sum":
                from pyhtest.hypothesis.backends._wilcox_test import mann_whitney_u
                params, warnings_list = mann_whitney_u(design)
            elif test_type == "wilcox_signed_rank":
                from pyhtest.hypothesis.backends._wilcox_test import wilcox_signed_rank
                params, warnings_list = wilcox_signed_rank(design)
            elif test_type == "sign_test":
                from pyhtest.hypothesis.backends._sign_test import sign_test
                params, warnings_list = sign_test(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        info = {'test_type': test_type}
        if params.null_distribution is not None:
            info['null_distribution'] = params.null_distribution.value

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
