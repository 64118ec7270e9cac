"""
Multiple testing correction.

Implements Holm's step-down method (family-wise error rate),
Benjamini-Hochberg step-up (false discovery rate) and plain Bonferroni.

This is a standalone utility function (no Design/Backend pipeline).
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray, ArrayLike

from pyhtest.core.exceptions import ValidationError
from pyhtest.core.validation import check_1d, check_array, check_unit_interval


class AdjustmentMethod(str, Enum):
    """Multiple-comparison procedure."""
    HOLM_BONFERRONI = "holm"
    BENJAMINI_HOCHBERG = "BH"
    BONFERRONI = "bonferroni"


_ALIASES = {"fdr": AdjustmentMethod.BENJAMINI_HOCHBERG}

VALID_METHODS = tuple(m.value for m in AdjustmentMethod) + tuple(_ALIASES)


def p_adjust(
    p: ArrayLike,
    method: AdjustmentMethod | str = AdjustmentMethod.HOLM_BONFERRONI,
) -> NDArray[np.floating]:
    """
    Adjust p-values for multiple comparisons.

    Parameters
    ----------
    p : array-like
        Vector of raw p-values, each in [0, 1]. Position carries the
        caller's identity for each hypothesis.
    method : AdjustmentMethod or str
        "holm" (default), "BH" (alias "fdr") or "bonferroni".

    Returns
    -------
    ndarray
        A new array of adjusted p-values in the same positional order as
        the input, clipped to [0, 1].
    """
    how = _resolve_method(method)

    p_arr = check_array(p, "p").astype(np.float64)
    check_1d(p_arr, "p")
    if len(p_arr) == 0:
        return np.array([], dtype=np.float64)
    check_unit_interval(p_arr, "p")

    if how is AdjustmentMethod.HOLM_BONFERRONI:
        return _holm(p_arr)
    if how is AdjustmentMethod.BENJAMINI_HOCHBERG:
        return _bh(p_arr)
    return np.minimum(p_arr * len(p_arr), 1.0)


def _resolve_method(method: AdjustmentMethod | str) -> AdjustmentMethod:
    if method in _ALIASES:
        return _ALIASES[method]
    try:
        return AdjustmentMethod(method)
    except ValueError:
        raise ValidationError(
            f"method must be one of {VALID_METHODS}, got {method!r}"
        ) from None


def _holm(pv: NDArray) -> NDArray:
    """Holm's step-down method (controls FWER, no assumptions)."""
    m = len(pv)
    order = np.argsort(pv, kind="stable")
    sorted_p = pv[order]

    # Multiply the i-th smallest (0-based) by m - i
    adjusted_sorted = np.minimum(sorted_p * np.arange(m, 0, -1, dtype=np.float64), 1.0)

    # Enforce monotonicity (cumulative max)
    adjusted_sorted = np.maximum.accumulate(adjusted_sorted)

    # Unsort
    result = np.empty(m, dtype=np.float64)
    result[order] = adjusted_sorted
    return result


def _bh(pv: NDArray) -> NDArray:
    """Benjamini-Hochberg (controls FDR, needs independence/PRDS)."""
    m = len(pv)
    order = np.argsort(-pv, kind="stable")  # descending
    sorted_p = pv[order]

    # The i-th largest (0-based) is scaled by m / (m - i)
    ranks = np.arange(m, 0, -1, dtype=np.float64)
    adjusted_sorted = np.minimum(sorted_p * m / ranks, 1.0)

    # Enforce monotonicity (cumulative min going from largest to smallest)
    adjusted_sorted = np.minimum.accumulate(adjusted_sorted)

    # Unsort
    result = np.empty(m, dtype=np.float64)
    result[order] = adjusted_sorted
    return result
