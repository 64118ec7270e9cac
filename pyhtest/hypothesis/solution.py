"""
User-facing result of a hypothesis test.

HTestSolution wraps Result[HTestParams]. It reads like R's htest object
(summary() mirrors print.htest) and unpacks like the bare
(statistic, p_value) pair, so it can go straight into run_test().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
from numpy.typing import NDArray

from pyhtest.core.result import Result
from pyhtest.hypothesis._common import (
    Alternative,
    HTestParams,
    NullDistribution,
    TestResult,
)

if TYPE_CHECKING:
    from pyhtest.hypothesis.design import HypothesisDesign


_RELATIONS = {
    Alternative.TWO_SIDED: "is not equal to",
    Alternative.LESS: "is less than",
    Alternative.GREATER: "is greater than",
}


@dataclass
class HTestSolution:
    """
    Outcome of one hypothesis test.

    Unpacks as ``(statistic, p_value)``::

        stat, p = t_one_sample([1.0, 2.0, 4.0], mu=1.0)

    and prints like R via ``summary()``.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    @property
    def params(self) -> HTestParams:
        return self._result.params

    @property
    def statistic(self) -> float:
        return self.params.statistic

    @property
    def statistic_name(self) -> str:
        """'t', 'X-squared', 'U', 'W' or 'S'."""
        return self.params.statistic_name

    @property
    def p_value(self) -> float:
        return self.params.p_value

    @property
    def parameter(self) -> dict[str, float] | None:
        """Null distribution parameters: {'df': ...} or {'trials': ...}."""
        return self.params.parameter

    @property
    def estimate(self) -> dict[str, float] | None:
        return self.params.estimate

    @property
    def null_value(self) -> dict[str, float] | None:
        return self.params.null_value

    @property
    def alternative(self) -> Alternative:
        return self.params.alternative

    @property
    def method(self) -> str:
        return self.params.method

    @property
    def data_name(self) -> str:
        return self.params.data_name

    @property
    def null_distribution(self) -> NullDistribution | None:
        """EXACT or APPROXIMATE for the rank tests, None elsewhere."""
        return self.params.null_distribution

    @property
    def result(self) -> TestResult:
        return TestResult(self.statistic, self.p_value)

    def __iter__(self) -> Iterator[float]:
        return iter(self.result)

    # Extras: chi-squared tables, U1/U2, W+/W-, z scores ...

    @property
    def extras(self) -> dict[str, Any] | None:
        return self.params.extras

    def _extra(self, key: str) -> Any:
        return (self.params.extras or {}).get(key)

    @property
    def observed(self) -> NDArray | None:
        return self._extra('observed')

    @property
    def expected(self) -> NDArray | None:
        """Expected counts under H0 (chi-squared tests)."""
        return self._extra('expected')

    @property
    def residuals(self) -> NDArray | None:
        """Pearson residuals (O - E) / sqrt(E) (chi-squared tests)."""
        return self._extra('residuals')

    # Envelope metadata

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """
        R print.htest style report, e.g.::

                    Wilcoxon signed rank exact test

            data:  x
            W = 6, p-value = 0.8125
            alternative hypothesis: true location shift is not equal to 3
        """
        p = self.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]
        lines.append(_statistic_line(p))

        if p.null_value:
            what, value = next(iter(p.null_value.items()))
            lines.append(
                f"alternative hypothesis: true {what} "
                f"{_RELATIONS[p.alternative]} {value:g}"
            )

        if p.estimate:
            lines.append("sample estimates:")
            lines.append(" ".join(f"{k:>14s}" for k in p.estimate))
            lines.append(" ".join(f"{v:14.7g}" for v in p.estimate.values()))

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


def _statistic_line(p: HTestParams) -> str:
    """'t = -3, df = 8, p-value = 0.01707'"""
    fields = [(p.statistic_name, f"{p.statistic:.5g}")]
    fields += [(k, f"{v:.5g}") for k, v in (p.parameter or {}).items()]
    fields.append(("p-value", _format_pvalue(p.p_value)))
    return ", ".join(f"{k} = {v}" for k, v in fields)


def _format_pvalue(p: float) -> str:
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
