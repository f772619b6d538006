# src/decayengine/store.py
import logging
from datetime import datetime

from .dosing import make_dose
from .types import Dose

logger = logging.getLogger(__name__)


class DoseStore:
    """
    The session's dose collection.

    `doses` is an immutable tuple kept sorted by timestamp. Every write builds
    a new tuple and swaps it in; readers holding the old tuple are unaffected.
    """

    def __init__(self, doses=()):
        self._doses: tuple[Dose, ...] = _sorted(doses)

    @property
    def doses(self) -> tuple[Dose, ...]:
        return self._doses

    def __len__(self) -> int:
        return len(self._doses)

    def __iter__(self):
        return iter(self._doses)

    def add(self, dose: Dose) -> Dose:
        self._doses = _sorted(self._doses + (dose,))
        logger.info("Added dose %s: %s %s at %s", dose.dose_id, dose.amount, dose.unit, dose.timestamp.isoformat())
        return dose

    def submit(self, amount, unit, timestamp: str | datetime) -> Dose:
        """
        Validate raw form input and add the resulting dose.
        On InvalidInput the collection is left untouched and the error propagates.
        """
        return self.add(make_dose(amount, unit, timestamp))

    def remove(self, dose_id: str) -> bool:
        """Drop the dose with `dose_id`. Returns False (no change) if it is not present."""
        kept = tuple(d for d in self._doses if d.dose_id != dose_id)
        if len(kept) == len(self._doses):
            return False
        self._doses = kept
        logger.info("Removed dose %s", dose_id)
        return True

    def clear(self) -> None:
        self._doses = ()
        logger.info("Cleared all doses")


def _sorted(doses) -> tuple[Dose, ...]:
    return tuple(sorted(doses, key=lambda d: d.timestamp.timestamp()))
