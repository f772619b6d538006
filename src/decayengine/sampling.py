# src/decayengine/sampling.py
import logging
from datetime import datetime
from typing import Iterator, Sequence

import numpy as np
from dateutil import tz

from .aggregate import active_level, now_local, validate_half_life
from .config import DEFAULTS
from .metrics import round_level
from .types import DecayConfig, Dose, SeriesPoint

logger = logging.getLogger(__name__)


class DecaySeries:
    """
    Chart-ready (instant, level) samples for a fixed set of doses.

    The sample instants are chosen up front; levels are computed lazily on
    iteration, and every new iteration starts over from the first instant.
    """

    def __init__(self, doses: Sequence[Dose], half_life_hours: float,
                 instants: Sequence[datetime], time_format: str = DEFAULTS.time_format,
                 decimals: int = DEFAULTS.display_decimals):
        self.doses = tuple(doses)
        self.half_life_hours = half_life_hours
        self.instants = tuple(instants)
        self.time_format = time_format
        self.decimals = decimals

    def __iter__(self) -> Iterator[SeriesPoint]:
        for instant in self.instants:
            level = active_level(self.doses, DecayConfig(self.half_life_hours, evaluation_instant=instant))
            yield SeriesPoint(
                time=instant.astimezone(tz.tzlocal()).strftime(self.time_format),
                instant=instant,
                level=round_level(level, self.decimals),
            )

    def __len__(self) -> int:
        return len(self.instants)


def sample_instants(doses: Sequence[Dose], half_life_hours: float, now: datetime,
                    future_half_lives: float = DEFAULTS.future_half_lives,
                    grid_intervals: int = DEFAULTS.grid_intervals) -> list[datetime]:
    """
    Evaluation instants for the chart: every dose time plus an even grid.

    The grid runs from min(earliest dose, now) to now + future_half_lives * half-life,
    split into `grid_intervals` equal steps (both ends included). Duplicates are
    dropped and the result is sorted ascending.
    """
    h = validate_half_life(half_life_hours)
    if not doses:
        return []

    dose_s = np.asarray([d.timestamp.timestamp() for d in doses], dtype=float)
    now_s = now.timestamp()
    start_s = min(float(dose_s.min()), now_s)
    end_s = now_s + future_half_lives * h * 3600.0

    grid_s = np.linspace(start_s, end_s, grid_intervals + 1)
    # Unique, sorted
    times_s = np.unique(np.concatenate([dose_s, grid_s]))

    local = tz.tzlocal()
    return [datetime.fromtimestamp(float(s), local) for s in times_s]


def sample_series(doses: Sequence[Dose], half_life_hours: float, now: datetime | None = None,
                  future_half_lives: float = DEFAULTS.future_half_lives,
                  grid_intervals: int = DEFAULTS.grid_intervals) -> DecaySeries:
    """
    Build the plot series for `doses`.

    Raises InvalidConfiguration right away for a bad half-life.
    An empty dose collection gives an empty series.
    """
    if now is None:
        now = now_local()
    instants = sample_instants(doses, half_life_hours, now,
                               future_half_lives=future_half_lives, grid_intervals=grid_intervals)
    logger.debug("Sampling %d instants for %d doses", len(instants), len(doses))
    return DecaySeries(doses, half_life_hours, instants)
