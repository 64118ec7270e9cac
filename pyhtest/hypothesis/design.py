"""
Per-call configuration for a hypothesis test.

One for_*() factory per test; `test_type` tells the backend which test to
run and which fields are set. Immutable after construction, so a design is
the complete per-call configuration: required samples plus the documented
defaults for alternative, correction, equal_variance and mu/shift.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pyhtest.core.exceptions import DimensionError, ValidationError
from pyhtest.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_nonnegative,
)
from pyhtest.hypothesis._common import Alternative, VALID_ALTERNATIVES


def _validate_alternative(alternative: Alternative | str) -> Alternative:
    """Validate and return the alternative hypothesis."""
    try:
        return Alternative(alternative)
    except ValueError:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        ) from None


def _to_float64_1d(x: ArrayLike, name: str = "x") -> NDArray[np.floating[Any]]:
    """Convert to a finite 1D float64 array (a private copy)."""
    arr = np.array(check_array(x, name), dtype=np.float64)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


def _to_ordered_sample(x: Any, name: str = "x") -> NDArray[np.floating[Any]] | tuple:
    """
    Numeric input becomes a float64 array; anything else (strings, dates,
    custom orderable objects) is frozen into a tuple.
    """
    arr = np.asarray(x)
    if arr.dtype != object and np.issubdtype(arr.dtype, np.number):
        return _to_float64_1d(arr, name)
    return tuple(x)


def _check_orderable(x: Any, y: Any, key: Callable[[Any], Any] | None) -> None:
    """Require every item of x and y to compare against every other."""
    if not (isinstance(x, tuple) or isinstance(y, tuple)):
        return
    try:
        sorted([*x, *y], key=key)
    except TypeError as e:
        raise ValidationError(
            f"x and y: items cannot be ordered against each other: {e}"
        ) from e


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Validated inputs and options for one test call.

    Build through the for_*() classmethods, which check every input before
    a design exists; the backend can then trust what it receives.
    """
    test_type: str

    # Samples
    _x: NDArray[np.floating[Any]] | tuple | None = None
    _y: NDArray[np.floating[Any]] | tuple | None = None

    # Test configuration
    _mu: float = 0.0
    _alternative: Alternative = Alternative.TWO_SIDED
    _equal_variance: bool = True
    _correct: bool = True

    # Rank tests
    _exact: bool | None = None
    _key: Callable[[Any], Any] | None = None

    # Chi-squared
    _table: NDArray[np.floating[Any]] | None = None
    _expected: NDArray[np.floating[Any]] | None = None
    _ddof: int = 0

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | tuple | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | tuple | None:
        return self._y

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def expected(self) -> NDArray[np.floating[Any]] | None:
        return self._expected

    @property
    def ddof(self) -> int:
        return self._ddof

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alternative(self) -> Alternative:
        return self._alternative

    @property
    def equal_variance(self) -> bool:
        return self._equal_variance

    @property
    def correct(self) -> bool:
        return self._correct

    @property
    def exact(self) -> bool | None:
        return self._exact

    @property
    def key(self) -> Callable[[Any], Any] | None:
        return self._key

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods: Student's t ---

    @classmethod
    def for_t_one_sample(
        cls,
        x: ArrayLike,
        *,
        mu: float = 0.0,
        alternative: Alternative | str = Alternative.TWO_SIDED,
    ) -> HypothesisDesign:
        """Build design for t_one_sample()."""
        alternative = _validate_alternative(alternative)
        x_arr = _to_float64_1d(x, "x")
        check_min_samples(x_arr, 2, "x")

        return cls(
            test_type="t_one_sample",
            _x=x_arr,
            _mu=float(mu),
            _alternative=alternative,
            _data_name="x",
        )

    @classmethod
    def for_t_two_sample(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        equal_variance: bool = True,
        mu: float = 0.0,
        alternative: Alternative | str = Alternative.TWO_SIDED,
    ) -> HypothesisDesign:
        """Build design for t_two_sample_independent()."""
        alternative = _validate_alternative(alternative)
        x_arr = _to_float64_1d(x, "x")
        y_arr = _to_float64_1d(y, "y")
        check_min_samples(x_arr, 2, "x")
        check_min_samples(y_arr, 2, "y")

        return cls(
            test_type="t_two_sample",
            _x=x_arr,
            _y=y_arr,
            _mu=float(mu),
            _equal_variance=bool(equal_variance),
            _alternative=alternative,
            _data_name="x and y",
        )

    @classmethod
    def for_t_paired(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        mu: float = 0.0,
        alternative: Alternative | str = Alternative.TWO_SIDED,
    ) -> HypothesisDesign:
        """
        Build design for t_two_sample_paired().

        The paired test is the one-sample test on x - y, so the design
        stores the differences in `x`.
        """
        alternative = _validate_alternative(alternative)
        x_arr = _to_float64_1d(x, "x")
        y_arr = _to_float64_1d(y, "y")
        check_consistent_length(x_arr, y_arr, names=("x", "y"))

        diffs = x_arr - y_arr
        check_min_samples(diffs, 2, "x - y")

        return cls(
            test_type="t_paired",
            _x=diffs,
            _mu=float(mu),
            _alternative=alternative,
            _data_name="x and y",
        )

    # --- Factory classmethods: chi-squared ---

    @classmethod
    def for_chisq_gof(
        cls,
        observed: ArrayLike,
        expected: ArrayLike | None = None,
        *,
        ddof: int = 0,
    ) -> HypothesisDesign:
        """
        Build design for chisq_goodness_of_fit().

        If `expected` is None the expected frequencies are uniform:
        sum(observed) / n in every cell.
        """
        obs = _to_float64_1d(observed, "observed")
        check_min_samples(obs, 1, "observed")
        check_nonnegative(obs, "observed")

        n = len(obs)
        if expected is None:
            exp = np.full(n, np.sum(obs) / n)
        else:
            exp = _to_float64_1d(expected, "expected")
            check_consistent_length(obs, exp, names=("observed", "expected"))

        if np.any(exp <= 0):
            raise ValidationError(
                "expected: all expected frequencies must be positive"
            )

        df = n - 1 - int(ddof)
        if df < 1:
            raise ValidationError(
                f"degrees of freedom must be >= 1, got {df} "
                f"({n} categories, ddof={ddof})"
            )

        return cls(
            test_type="chisq_gof",
            _x=obs,
            _expected=exp,
            _ddof=int(ddof),
            _data_name="observed",
        )

    @classmethod
    def for_chisq_independence(
        cls,
        table: ArrayLike,
        *,
        correction: bool = True,
    ) -> HypothesisDesign:
        """Build design for chisq_independence()."""
        tab = np.array(check_array(table, "table"), dtype=np.float64)
        check_2d(tab, "table")
        if tab.shape[0] < 1 or tab.shape[1] < 1:
            raise DimensionError(
                f"table: contingency table must have at least 1 row and "
                f"1 column, got shape {tab.shape}"
            )
        check_finite(tab, "table")
        check_nonnegative(tab, "table")

        return cls(
            test_type="chisq_independence",
            _table=tab,
            _correct=bool(correction),
            _data_name="table",
        )

    # --- Factory classmethods: rank and sign tests ---

    @classmethod
    def for_mann_whitney(
        cls,
        x: Any,
        y: Any,
        *,
        alternative: Alternative | str = Alternative.TWO_SIDED,
        correction: bool = True,
        exact: bool | None = None,
        key: Callable[[Any], Any] | None = None,
    ) -> HypothesisDesign:
        """
        Build design for mann_whitney_u().

        Samples may hold any totally ordered items; `key` maps items to
        the value they are compared by.
        """
        alternative = _validate_alternative(alternative)
        x_s = _to_ordered_sample(x, "x")
        y_s = _to_ordered_sample(y, "y")
        check_min_samples(x_s, 1, "x")
        check_min_samples(y_s, 1, "y")
        _check_orderable(x_s, y_s, key)

        return cls(
            test_type="wilcox_rank_sum",
            _x=x_s,
            _y=y_s,
            _alternative=alternative,
            _correct=bool(correction),
            _exact=exact,
            _key=key,
            _data_name="x and y",
        )

    @classmethod
    def for_wilcoxon(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: Alternative | str = Alternative.TWO_SIDED,
        correction: bool = True,
        exact: bool | None = None,
    ) -> HypothesisDesign:
        """Build design for wilcoxon_paired(). Differences are y - x."""
        return cls._paired(
            "wilcox_signed_rank", x, y,
            alternative=alternative, correction=correction, exact=exact,
            data_name="x and y",
        )

    @classmethod
    def for_wilcoxon_one_sample(
        cls,
        x: ArrayLike,
        *,
        shift: float = 0.0,
        alternative: Alternative | str = Alternative.TWO_SIDED,
        correction: bool = True,
        exact: bool | None = None,
    ) -> HypothesisDesign:
        """Build design for wilcoxon_one_sample(): x paired against shift."""
        x_arr = _to_float64_1d(x, "x")
        return cls._paired(
            "wilcox_signed_rank", np.full(len(x_arr), float(shift)), x_arr,
            alternative=alternative, correction=correction, exact=exact,
            mu=float(shift), data_name="x",
        )

    @classmethod
    def for_sign(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: Alternative | str = Alternative.TWO_SIDED,
    ) -> HypothesisDesign:
        """Build design for sign_paired(). Differences are y - x."""
        return cls._paired(
            "sign_test", x, y, alternative=alternative, data_name="x and y",
        )

    @classmethod
    def for_sign_one_sample(
        cls,
        x: ArrayLike,
        *,
        shift: float = 0.0,
        alternative: Alternative | str = Alternative.TWO_SIDED,
    ) -> HypothesisDesign:
        """Build design for sign_one_sample(): x paired against shift."""
        x_arr = _to_float64_1d(x, "x")
        return cls._paired(
            "sign_test", np.full(len(x_arr), float(shift)), x_arr,
            alternative=alternative, mu=float(shift), data_name="x",
        )

    @classmethod
    def _paired(
        cls,
        test_type: str,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: Alternative | str,
        correction: bool = True,
        exact: bool | None = None,
        mu: float = 0.0,
        data_name: str,
    ) -> HypothesisDesign:
        alternative = _validate_alternative(alternative)
        x_arr = _to_float64_1d(x, "x")
        y_arr = _to_float64_1d(y, "y")
        check_min_samples(x_arr, 1, "x")
        check_consistent_length(x_arr, y_arr, names=("x", "y"))

        return cls(
            test_type=test_type,
            _x=x_arr,
            _y=y_arr,
            _mu=mu,
            _alternative=alternative,
            _correct=bool(correction),
            _exact=exact,
            _data_name=data_name,
        )

    def __repr__(self) -> str:
        n_x = len(self._x) if self._x is not None else 0
        n_y = len(self._y) if self._y is not None else 0
        if self._table is not None:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"table={self._table.shape})"
            )
        if n_y > 0:
            return (
                f"HypothesisDesign(test_type={self.test_type!r}, "
                f"n_x={n_x}, n_y={n_y})"
            )
        return (
            f"HypothesisDesign(test_type={self.test_type!r}, n={n_x})"
        )
