"""YAML-backed dataclass configuration with validation."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class StatsConfig:
    truncation: Optional[float] = None  # percent (>= 1) or proportion (< 1); None drops min and max
    truncation_precision: int = 1
    tolerance: float = 1e-9
    sorted: bool = False
    round_digits: Optional[int] = None
    log_path: Optional[str] = None


def _config_from_dict(d: Dict[str, Any]) -> StatsConfig:
    """Build a StatsConfig, ignoring unknown keys."""
    names = {f.name for f in dataclasses.fields(StatsConfig)}
    return StatsConfig(**{k: v for k, v in d.items() if k in names})


def load_config(path: str) -> StatsConfig:
    """Load StatsConfig from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)
    return _config_from_dict(raw or {})


def save_config(config: StatsConfig, path: str) -> None:
    """Save config to YAML for reproducibility."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(dataclasses.asdict(config), f, default_flow_style=False, sort_keys=False)


def validate_config(config: StatsConfig) -> None:
    """Validate config constraints."""
    if config.truncation is not None:
        pct = config.truncation * 100 if config.truncation < 1 else config.truncation
        pct = round(pct, config.truncation_precision)
        assert 0.0 <= pct < 50.0, f"truncation must be in [0, 50) percent, got {config.truncation}"
    assert config.truncation_precision >= 0, "truncation_precision must be >= 0"
    assert config.tolerance > 0, "tolerance must be > 0"
    if config.round_digits is not None:
        assert config.round_digits >= 0, "round_digits must be >= 0"
