"""
Input checks shared by the design factories.

Every check raises on the first problem it finds and names the offending
parameter. Nothing is coerced beyond np.asarray and promotion to float.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyhtest.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert a numeric array-like to a floating numpy array.

    Args:
        array: Sample, counts or p-values as supplied by the caller
        name: Parameter name for error messages

    Returns:
        Floating-point ndarray (integer input is promoted to float64)

    Raises:
        ValidationError: If the input is ragged, mixed or non-numeric
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype == object:
        raise ValidationError(
            f"{name}: mixed or ragged input (object dtype), expected numbers"
        )
    if not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected numbers"
        )
    if np.issubdtype(arr.dtype, np.floating):
        return arr
    return arr.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """Reject NaN and +/-Inf."""
    finite = np.isfinite(array)
    if not finite.all():
        n_nan = int(np.isnan(array).sum())
        n_inf = int(np.size(array) - finite.sum()) - n_nan
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Require exactly `ndim` dimensions.

    Raises:
        DimensionError: On any other dimensionality
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D "
            f"with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    check_ndim(array, 2, name)


def check_consistent_length(*arrays: Any, names: tuple[str, ...]) -> None:
    """
    Require equal lengths, e.g. for paired samples or observed/expected.

    Args:
        *arrays: Sequences to compare
        names: One parameter name per sequence

    Raises:
        ValueError: If names and sequences do not pair up (caller bug)
        DimensionError: If the lengths differ
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"got {len(arrays)} arrays but {len(names)} names"
        )
    lengths = [len(arr) for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{n}={k}" for n, k in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: Any, min_samples: int, name: str) -> None:
    """Require at least `min_samples` observations (works on any sequence)."""
    n = len(array)
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_nonnegative(array: NDArray[np.floating[Any]], name: str) -> None:
    """Reject negative entries, as in frequency counts."""
    n_negative = int(np.count_nonzero(np.asarray(array) < 0))
    if n_negative:
        raise ValidationError(
            f"{name}: all entries must be non-negative, "
            f"found {n_negative} negative value(s)"
        )


def check_unit_interval(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Require every entry in [0, 1], as for p-values.

    Raises:
        ValidationError: If any entry is NaN or outside [0, 1]
    """
    inside = (array >= 0.0) & (array <= 1.0)
    if not inside.all():
        bad = array[~inside]
        raise ValidationError(
            f"{name}: values must lie in [0, 1], got {bad[:5].tolist()}"
        )
