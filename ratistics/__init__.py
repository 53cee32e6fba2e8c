"""Ratistics: descriptive statistics over arbitrary samples."""

__version__ = "0.1.0"

from .central_tendency import (
    first_quartile,
    lower_quartile,
    mean,
    median,
    midrange,
    mode,
    second_quartile,
    third_quartile,
    truncated_mean,
    upper_quartile,
)
from .rank import (
    centile,
    centile_rank,
    centiles,
    nearest_rank,
    percentile,
    percentile_rank,
    percentiles,
)
from .summary import summarize
from .types import PercentileEntry, SampleSummary
