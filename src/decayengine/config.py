# src/decayengine/config.py
"""
Default values shared by the engine and the viewer.
"""

from dataclasses import dataclass


@dataclass
class DefaultConfig:
    """Defaults for the calculator; nothing here is persisted."""
    half_life_hours: float = 200.0
    future_half_lives: float = 5.0   # chart extends this many half-lives past now
    grid_intervals: int = 100        # evenly spaced chart samples (+1 for the end point)
    display_decimals: int = 2
    time_format: str = "%Y-%m-%d %H:%M"


DEFAULTS = DefaultConfig()
