"""Central tendency: mean, truncated mean, midrange, median, mode, quartiles.

Every function treats its sample as read-only. When an accessor is given it
is applied once per element and the extracted values are what get sorted;
the input itself is never reordered. ``sorted=True`` is a caller promise that
the (extracted) values are already ascending and skips the sort entirely.
"""
from __future__ import annotations

import math
from collections import Counter
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from . import rank
from .types import Accessor, Number
from .utils import extract, is_empty, is_whole, normalize_truncation, sorted_values


def mean(data: Optional[Sequence[Any]], accessor: Optional[Accessor] = None) -> float:
    """Arithmetic mean. Empty sample -> 0."""
    if is_empty(data):
        return 0.0
    return float(np.mean(np.asarray(extract(data, accessor), dtype=float)))


def truncated_mean(
    data: Optional[Sequence[Any]],
    truncation: Optional[float] = None,
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
    precision: int = 1,
    tolerance: float = 1e-9,
) -> float:
    """Mean after trimming ``truncation`` of the values from each tail.

    ``truncation`` is a percentage (10 -> 10%) or, below 1, a proportion
    (0.1 -> 10%), rounded to ``precision`` decimal places. It must be below
    50% or ValueError is raised.

    Without a truncation the single lowest and highest values are dropped;
    samples of fewer than three values then give 0.

    When ``truncation / 100 * n`` is not a whole number of elements the
    result is interpolated between the means trimmed at the neighbouring
    whole counts. For 20 values at 12.5% the trim is 2.5 elements, so the
    result sits halfway between the 2-trimmed and 3-trimmed means.
    """
    pct = None if truncation is None else normalize_truncation(truncation, precision)
    if is_empty(data):
        return 0.0

    arr = sorted_values(data, sorted, accessor)
    n = len(arr)
    if pct is None:
        if n < 3:
            return 0.0
        return _trimmed_slice_mean(arr, 1)

    trim = pct / 100.0 * n
    if is_whole(trim, tolerance):
        return _trimmed_slice_mean(arr, int(round(trim)))

    k = int(math.floor(trim))
    frac = trim - k
    outer = _trimmed_slice_mean(arr, k)
    # Trimming k + 1 from each end would leave nothing.
    if n - 2 * (k + 1) <= 0:
        return outer
    inner = _trimmed_slice_mean(arr, k + 1)
    return inner + (outer - inner) * (1 - frac)


def _trimmed_slice_mean(arr: np.ndarray, k: int) -> float:
    return float(np.mean(arr[k:len(arr) - k]))


def midrange(
    data: Optional[Sequence[Any]],
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> float:
    """Halfway point between the smallest and largest value."""
    if is_empty(data):
        return 0.0
    arr = sorted_values(data, sorted, accessor)
    return float((arr[0] + arr[-1]) / 2.0)


def median(
    data: Optional[Sequence[Any]],
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> float:
    """Middle value; the average of the two middle values for even sizes."""
    if is_empty(data):
        return 0.0
    arr = sorted_values(data, sorted, accessor)
    return _median_of_sorted(arr)


def _median_of_sorted(arr: np.ndarray) -> float:
    n = len(arr)
    mid = n // 2
    if n % 2 == 1:
        return float(arr[mid])
    return float((arr[mid - 1] + arr[mid]) / 2.0)


def mode(data: Optional[Sequence[Any]], accessor: Optional[Accessor] = None) -> List[Number]:
    """All values tied for the highest frequency, in order of first appearance.

    A sample with no repeated values returns every value.
    """
    if is_empty(data):
        return []
    counts = Counter(extract(data, accessor))
    top = max(counts.values())
    return [value for value, count in counts.items() if count == top]


# --- Quartiles ---
#
# Median of halves: the first and third quartiles are the 50th percentiles
# of the lower and upper n // 2 values. For odd n the middle value belongs
# to neither half.


def _halves(arr: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    n = len(arr)
    h = n // 2
    if h == 0:
        return arr, arr
    return arr[:h], arr[n - h:]


def first_quartile(
    data: Optional[Sequence[Any]],
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> Optional[float]:
    """25th percentile, or None for an empty sample."""
    if is_empty(data):
        return None
    lower, _ = _halves(sorted_values(data, sorted, accessor))
    return rank.percentile(lower, 50, sorted=True)


def second_quartile(
    data: Optional[Sequence[Any]],
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> Optional[float]:
    """50th percentile, or None for an empty sample."""
    if is_empty(data):
        return None
    return rank.percentile(sorted_values(data, sorted, accessor), 50, sorted=True)


def third_quartile(
    data: Optional[Sequence[Any]],
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> Optional[float]:
    """75th percentile, or None for an empty sample."""
    if is_empty(data):
        return None
    _, upper = _halves(sorted_values(data, sorted, accessor))
    return rank.percentile(upper, 50, sorted=True)


lower_quartile = first_quartile
upper_quartile = third_quartile
