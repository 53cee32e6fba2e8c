"""JSONL computation logger for audit/reproducibility.

Disabled unless a path is set explicitly or through RATISTICS_CALC_LOG.
"""
from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


_LOG_PATH: Optional[str] = None


def _get_log_path() -> Optional[str]:
    if _LOG_PATH is not None:
        return _LOG_PATH
    return os.environ.get("RATISTICS_CALC_LOG") or None


def set_log_path(path: Optional[str]) -> None:
    global _LOG_PATH
    _LOG_PATH = path


def log_computation(entry: Dict[str, Any], path: Optional[str] = None) -> bool:
    """Append a JSON entry to the computation log. Returns False when disabled."""
    path = path or _get_log_path()
    if path is None:
        return False
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    record = dict(entry)
    record["timestamp"] = datetime.now(timezone.utc).isoformat()
    with open(path, "a") as f:
        f.write(json.dumps(record) + "\n")
    return True
