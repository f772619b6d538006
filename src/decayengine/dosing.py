# src/decayengine/dosing.py
from __future__ import annotations

import logging
import math
import uuid
from datetime import datetime, timedelta

from dateutil import parser as date_parser
from dateutil import tz

from .aggregate import validate_half_life
from .errors import InvalidConfiguration, InvalidInput
from .types import Dose, Unit
from .units import MG_PER_UNIT

logger = logging.getLogger(__name__)

# Spellings accepted from the unit selector / free text, mapped to `Unit`.
UNIT_ALIASES: dict[str, Unit] = {
    "mg": "mg",
    "g": "g",
    "ug": "ug",
    "μg": "ug",  # greek mu
    "µg": "ug",  # micro sign
    "mcg": "ug",
    "iu": "iu",
}

# (days ago, amount in ug) for the example history shown on first launch.
# Zero-amount days are skipped days.
SEED_SCHEDULE: tuple[tuple[int, float], ...] = (
    (16, 93.75), (15, 93.75), (14, 93.75), (13, 93.75), (12, 0.0),
    (11, 93.75), (10, 125.0), (9, 0.0), (8, 125.0), (7, 125.0),
    (6, 125.0), (5, 125.0), (4, 0.0), (3, 0.0), (2, 125.0),
    (1, 93.75), (0, 125.0),
)


def parse_amount(text: str | float) -> float:
    """
    Parse a user-entered dose amount.
    Must be a positive, finite real number; anything else raises InvalidInput.
    """
    try:
        amount = float(str(text).strip())
    except ValueError:
        logger.warning("Rejected dose amount %r", text)
        raise InvalidInput(f"Please enter a valid amount (got {text!r}).") from None
    if not math.isfinite(amount) or not (amount > 0):
        logger.warning("Rejected dose amount %r", text)
        raise InvalidInput(f"Please enter a valid amount (got {text!r}).")
    return amount


def parse_unit(text: str) -> Unit:
    """Map a unit label (mg, μg, ug, mcg, g, IU; any case) onto `Unit`."""
    key = str(text).strip()
    unit = UNIT_ALIASES.get(key) or UNIT_ALIASES.get(key.lower())
    if unit is None:
        logger.warning("Rejected dose unit %r", text)
        raise InvalidInput(f"unit must be one of {', '.join(MG_PER_UNIT)} (got {text!r}).")
    return unit


def parse_timestamp(text: str | datetime) -> datetime:
    """
    Parse a local date-time such as '2024-05-01T08:30' (ISO 8601).
    Values without an offset are taken to be in the local time zone.
    """
    if isinstance(text, datetime):
        dt = text
    else:
        try:
            dt = date_parser.isoparse(str(text).strip())
        except (ValueError, OverflowError):
            logger.warning("Rejected dose time %r", text)
            raise InvalidInput(f"time must be an ISO date-time like 2024-05-01T08:30 (got {text!r}).") from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz.tzlocal())
    return dt


def parse_half_life(text: str | float) -> float:
    """Parse the half-life field (hours). Raises InvalidConfiguration if not a positive number."""
    try:
        value = float(str(text).strip())
    except ValueError:
        raise InvalidConfiguration(f"half_life_hours must be a number (got {text!r}).") from None
    return validate_half_life(value)


def new_dose_id() -> str:
    return uuid.uuid4().hex


def make_dose(amount: str | float, unit: str, timestamp: str | datetime, dose_id: str | None = None) -> Dose:
    """
    Validate user input and build a Dose.
    Example: make_dose("100", "mg", "2024-05-01T08:30")
    dose_id : pass an explicit id, otherwise a fresh unique one is generated
    """
    return Dose(
        dose_id=dose_id if dose_id is not None else new_dose_id(),
        amount=parse_amount(amount),
        unit=parse_unit(unit),
        timestamp=parse_timestamp(timestamp),
    )


def seed_history(now: datetime) -> tuple[Dose, ...]:
    """
    The example dose history: one dose per day at the time of `now`,
    going back 16 days, in micrograms, oldest first.
    """
    doses: list[Dose] = []
    for days_ago, amount_ug in SEED_SCHEDULE:
        if amount_ug <= 0:
            continue
        doses.append(Dose(dose_id=f"default-{len(doses)}", amount=amount_ug, unit="ug",
                          timestamp=now - timedelta(days=days_ago)))
    return tuple(doses)
