"""Shared dataclasses, named tuples and type aliases."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Union

Number = Union[int, float]

# Extracts the numeric value of a composite sample element.
Accessor = Callable[[Any], Number]


class PercentileEntry(NamedTuple):
    """One ranked value: the value itself and its percentile in (0, 100]."""
    value: Number
    percentile: float


@dataclass
class SampleSummary:
    """Descriptive statistics for a single sample."""
    count: int = 0
    mean: float = 0.0
    truncated_mean: float = 0.0
    midrange: float = 0.0
    median: float = 0.0
    mode: List[Number] = field(default_factory=list)
    min_val: Optional[float] = None
    max_val: Optional[float] = None
    first_quartile: Optional[float] = None
    second_quartile: Optional[float] = None
    third_quartile: Optional[float] = None

    def to_dict(self, round_digits: Optional[int] = None) -> Dict[str, Any]:
        d = asdict(self)
        if round_digits is None:
            return d
        return {
            k: round(v, round_digits) if isinstance(v, float) else v
            for k, v in d.items()
        }
