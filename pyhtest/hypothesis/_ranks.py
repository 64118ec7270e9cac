"""
Average ranks with tie statistics for the rank-based tests.

rank() returns the conventional tie term sum(t^3 - t) alongside the ranks,
which is what the normal-approximation variance corrections consume.
"""

from __future__ import annotations

from itertools import groupby
from typing import Any, Callable, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats


def rank(
    values: Sequence[Any] | NDArray,
    key: Callable[[Any], Any] | None = None,
) -> tuple[float, NDArray[np.floating]]:
    """
    Rank a sequence, resolving ties with average ranks.

    Parameters
    ----------
    values : sequence
        Numeric array or any sequence of totally ordered items.
    key : callable or None
        Optional function applied to every item before comparison,
        e.g. ``abs`` to rank by magnitude.

    Returns
    -------
    tie_term : float
        sum(t**3 - t) over groups of t tied items; 0.0 without ties.
    ranks : ndarray
        1-based float ranks in input order.
    """
    if len(values) == 0:
        return 0.0, np.array([], dtype=np.float64)

    if key is None and isinstance(values, np.ndarray) and values.dtype.kind in "iuf":
        ranks = sp_stats.rankdata(values, method="average")
        _, counts = np.unique(values, return_counts=True)
        return _tie_term(counts), ranks.astype(np.float64)

    keyed = [item if key is None else key(item) for item in values]
    order = sorted(range(len(keyed)), key=keyed.__getitem__)

    ranks = np.empty(len(keyed), dtype=np.float64)
    counts = []
    position = 0
    for _, group in groupby(order, key=keyed.__getitem__):
        members = list(group)
        t = len(members)
        # ranks position+1 .. position+t share their mean
        ranks[members] = position + (t + 1) / 2.0
        counts.append(t)
        position += t

    return _tie_term(np.asarray(counts)), ranks


def _tie_term(counts: NDArray) -> float:
    counts = counts.astype(np.float64)
    return float(np.sum(counts ** 3 - counts))
