"""Rank/percentile engine: percentile ranks and interpolated percentiles."""
from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence

import numpy as np

from .types import Accessor, Number, PercentileEntry
from .utils import extract, is_empty, ordered_values, sorted_values


def _check_percentile(percentile: float) -> float:
    p = float(percentile)
    if not 0.0 <= p <= 100.0:
        raise ValueError(f"Percentile must be in [0, 100], got {percentile!r}")
    return p


def percentiles(
    data: Optional[Sequence[Any]],
    flatten: bool = False,
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> List[PercentileEntry]:
    """Percentile rank of every element in the sample.

    The element at 0-indexed position ``i`` of the ``n`` sorted values gets
    ``100 * (i + 0.5) / n``. Entries come back in ascending value order.

    With ``flatten`` a run of equal values collapses to its last entry, so
    each distinct value keeps only its highest percentile. Only the
    previously emitted entry is compared, which is enough because the values
    are sorted.

    Example::

        >>> [round(e.percentile, 2) for e in percentiles([1, 3, 5, 7, 9, 9, 14])]
        [7.14, 21.43, 35.71, 50.0, 64.29, 78.57, 92.86]
    """
    if is_empty(data):
        return []
    values = ordered_values(data, sorted, accessor)
    n = len(values)

    centiles: List[PercentileEntry] = []
    for index, item in enumerate(values):
        p = 100.0 * ((index + 1) - 0.5) / n
        if flatten and centiles and centiles[-1].value == item:
            centiles.pop()
        centiles.append(PercentileEntry(item, p))
    return centiles


centiles = percentiles


def percentile(
    data: Optional[Sequence[Any]],
    percentile: float,
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> Optional[float]:
    """Value below which ``percentile`` percent of observations fall.

    Linear interpolation between the closest ranks produced by
    :func:`percentiles`; targets outside the first/last rank clamp to the
    smallest/largest value. Returns None for an empty sample.
    """
    p = _check_percentile(percentile)
    if is_empty(data):
        return None
    arr = sorted_values(data, sorted, accessor)
    return _interpolate(arr, p)


centile = percentile


def _interpolate(arr: np.ndarray, p: float) -> float:
    """Closest-ranks interpolation over an already sorted array."""
    n = len(arr)
    pos = p / 100.0 * n - 0.5
    if pos <= 0:
        return float(arr[0])
    if pos >= n - 1:
        return float(arr[-1])
    j = int(math.floor(pos))
    f = pos - j
    return float(arr[j] + f * (arr[j + 1] - arr[j]))


def nearest_rank(
    data: Optional[Sequence[Any]],
    percentile: float,
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> Optional[float]:
    """Smallest sample value whose ordinal rank covers ``percentile``."""
    p = _check_percentile(percentile)
    if is_empty(data):
        return None
    arr = sorted_values(data, sorted, accessor)
    n = len(arr)
    rank = min(max(int(math.ceil(p * n / 100.0)), 1), n)
    return float(arr[rank - 1])


def percentile_rank(
    data: Optional[Sequence[Any]],
    value: Number,
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> Optional[float]:
    """Percentage of the sample that is the same as or lower than ``value``."""
    if is_empty(data):
        return None
    # Counting needs no ordering; a sorted sample allows a binary search.
    arr = np.asarray(extract(data, accessor), dtype=float)
    if sorted:
        at_or_below = int(np.searchsorted(arr, value, side="right"))
    else:
        at_or_below = int(np.count_nonzero(arr <= value))
    return 100.0 * at_or_below / len(arr)


centile_rank = percentile_rank
