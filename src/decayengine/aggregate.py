# src/decayengine/aggregate.py
import logging
import math
from datetime import datetime
from typing import Iterable, Sequence

import numpy as np
from dateutil import tz

from .errors import InvalidConfiguration
from .types import DecayConfig, Dose
from .units import to_base_unit

logger = logging.getLogger(__name__)

SECONDS_PER_HOUR = 3600.0


def now_local() -> datetime:
    """Current wall-clock instant, aware in the local time zone."""
    return datetime.now(tz.tzlocal())


def validate_half_life(half_life_hours: float) -> float:
    """Return half-life as float, or raise InvalidConfiguration if it is not a positive finite number."""
    try:
        h = float(half_life_hours)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"half_life_hours must be a number (got {half_life_hours!r}).") from None
    if not (h > 0) or not math.isfinite(h):
        logger.warning("Rejected half-life %r", half_life_hours)
        raise InvalidConfiguration(f"half_life_hours must be > 0 (got {half_life_hours}).")
    return h


def active_level(doses: Iterable[Dose], config: DecayConfig) -> float:
    """
    Total remaining amount (mg-equivalent) of all doses at the evaluation instant.

    Each dose decays independently:
      remaining = amount_mg * 0.5 ** (elapsed_h / half_life_h)
    Doses taken after the evaluation instant contribute nothing.
    """
    evaluation = config.evaluation_instant if config.evaluation_instant is not None else now_local()
    half_life_h = validate_half_life(config.half_life_hours)

    eval_s = evaluation.timestamp()
    total = 0.0
    for d in doses:
        elapsed_h = (eval_s - d.timestamp.timestamp()) / SECONDS_PER_HOUR
        if elapsed_h < 0:
            continue
        total += to_base_unit(d.amount, d.unit) * 0.5 ** (elapsed_h / half_life_h)
    return total


def active_levels(doses: Sequence[Dose], half_life_hours: float,
                  instants: Sequence[datetime]) -> np.ndarray:
    """
    Vectorized active_level over many evaluation instants.

    Returns an array aligned with `instants` (mg-equivalent).
    """
    half_life_h = validate_half_life(half_life_hours)
    t_eval = np.asarray([t.timestamp() for t in instants], dtype=float)
    if len(doses) == 0:
        return np.zeros_like(t_eval)

    t_dose = np.asarray([d.timestamp.timestamp() for d in doses], dtype=float)
    amount_mg = np.asarray([to_base_unit(d.amount, d.unit) for d in doses], dtype=float)

    # rows: instants, cols: doses
    elapsed_h = (t_eval[:, None] - t_dose[None, :]) / SECONDS_PER_HOUR
    factor = np.where(elapsed_h >= 0, np.power(0.5, np.maximum(elapsed_h, 0.0) / half_life_h), 0.0)
    return factor @ amount_mg
