"""One-call descriptive summary of a sample."""
from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from . import central_tendency as ct
from .config import StatsConfig, validate_config
from .logging_utils import log_computation
from .types import Accessor, SampleSummary
from .utils import extract, is_empty


def summarize(
    data: Optional[Sequence[Any]],
    config: Optional[StatsConfig] = None,
    accessor: Optional[Accessor] = None,
) -> SampleSummary:
    """Compute every central tendency and quartile statistic at once.

    The accessor runs once per element; all statistics are then computed from
    the same extracted array, sorted once unless ``config.sorted`` is set.
    """
    config = config or StatsConfig()
    validate_config(config)
    if is_empty(data):
        summary = SampleSummary()
    else:
        values = extract(data, accessor)
        arr = np.asarray(values, dtype=float)
        if not config.sorted:
            arr = np.sort(arr)
        summary = SampleSummary(
            count=len(arr),
            mean=float(np.mean(arr)),
            truncated_mean=ct.truncated_mean(
                arr,
                config.truncation,
                sorted=True,
                precision=config.truncation_precision,
                tolerance=config.tolerance,
            ),
            midrange=ct.midrange(arr, sorted=True),
            median=ct.median(arr, sorted=True),
            mode=ct.mode(values),
            min_val=float(arr[0]),
            max_val=float(arr[-1]),
            first_quartile=ct.first_quartile(arr, sorted=True),
            second_quartile=ct.second_quartile(arr, sorted=True),
            third_quartile=ct.third_quartile(arr, sorted=True),
        )

    # Falls back to set_log_path / RATISTICS_CALC_LOG when log_path is unset.
    log_computation(
        {"kind": "summary", **summary.to_dict(config.round_digits)}, path=config.log_path
    )
    return summary
