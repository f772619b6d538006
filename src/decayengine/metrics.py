# src/decayengine/metrics.py
from typing import Iterable, Tuple
from datetime import datetime

import numpy as np

from .config import DEFAULTS
from .types import SeriesPoint


def round_level(level: float, decimals: int = DEFAULTS.display_decimals) -> float:
    """Round a level for display only; computations keep full precision."""
    return round(float(level), decimals)

def _arrays(series: Iterable[SeriesPoint]) -> Tuple[list[datetime], np.ndarray, np.ndarray]:
    points = list(series)
    instants = [p.instant for p in points]
    t_h = np.asarray([p.instant.timestamp() / 3600.0 for p in points], dtype=float)
    level = np.asarray([p.level for p in points], dtype=float)
    return instants, t_h, level

def peak(series: Iterable[SeriesPoint]) -> Tuple[float, datetime]:
    """Highest sampled level (mg) and the instant it occurs."""
    instants, _, level = _arrays(series)
    idx = int(np.argmax(level))
    return float(level[idx]), instants[idx]

def trough(series: Iterable[SeriesPoint]) -> Tuple[float, datetime]:
    """Lowest sampled level (mg) and the instant it occurs."""
    instants, _, level = _arrays(series)
    idx = int(np.argmin(level))
    return float(level[idx]), instants[idx]

def auc_trapz(series: Iterable[SeriesPoint]) -> float:
    """Area under the sampled curve via the trapezoidal rule (mg*h)."""
    _, t_h, level = _arrays(series)
    if t_h.size == 0:
        raise ValueError("auc_trapz() needs at least one sample.")
    return float(np.trapezoid(level, t_h))
