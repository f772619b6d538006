# src/decayengine/calculator.py
from datetime import datetime

from .aggregate import active_level
from .sampling import DecaySeries, sample_series
from .store import DoseStore
from .types import DecayConfig


def current_level(store: DoseStore, half_life_hours: float, now: datetime | None = None) -> float:
    """
    High-level wrapper: active level of everything in the store at `now` (default: current time).
    """
    return active_level(store.doses, DecayConfig(half_life_hours, evaluation_instant=now))

def chart_series(store: DoseStore, half_life_hours: float, now: datetime | None = None) -> DecaySeries:
    """
    High-level wrapper: the plot series for the store's current doses.
    The series captures the dose tuple, so later store writes do not change it.
    """
    return sample_series(store.doses, half_life_hours, now=now)
