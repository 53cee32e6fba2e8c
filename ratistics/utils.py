"""Sample preparation helpers shared by both engines."""
from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional, Sized

import numpy as np

from .types import Accessor, Number


def is_empty(data: Optional[Sized]) -> bool:
    return data is None or len(data) == 0


def extract(data: Iterable[Any], accessor: Optional[Accessor] = None) -> List[Number]:
    """Apply the accessor once per element. Never mutates ``data``."""
    if accessor is None:
        return list(data)
    return [accessor(item) for item in data]


def sorted_values(
    data: Iterable[Any],
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> np.ndarray:
    """Extracted values as a float array in ascending order.

    Sorting happens on a copy and only when ``sorted`` is false. A true
    ``sorted`` flag is trusted as-is; it is not verified.
    """
    arr = np.asarray(extract(data, accessor), dtype=float)
    if sorted:
        return arr
    return np.sort(arr)


def ordered_values(
    data: Iterable[Any],
    sorted: bool = False,
    accessor: Optional[Accessor] = None,
) -> List[Number]:
    """Extracted values in ascending order, keeping their original types."""
    values = extract(data, accessor)
    if sorted:
        return values
    order = np.argsort(np.asarray(values, dtype=float), kind="stable")
    return [values[i] for i in order]


def normalize_truncation(truncation: float, precision: int = 1) -> float:
    """Convert a truncation to a percentage rounded to ``precision`` places.

    Values below 1 are read as proportions (0.1 -> 10.0), values from 1 up
    as percentages. Raises ValueError when the result is not in [0, 50).
    """
    pct = float(truncation)
    if pct < 1:
        pct *= 100.0
    pct = round(pct, precision)
    if pct < 0 or pct >= 50:
        raise ValueError(f"Truncation must be in [0, 50) percent, got {truncation!r}")
    return pct


def is_whole(x: float, tolerance: float = 1e-9) -> bool:
    return math.isclose(x, round(x), rel_tol=0.0, abs_tol=tolerance)
