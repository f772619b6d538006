# src/decayengine/units.py
from .errors import InvalidInput
from .types import Unit

# Milligrams per one unit. Extend together with `Unit` when adding a unit.
# IU has no defined mass equivalence; it is treated as already normalized.
MG_PER_UNIT: dict[Unit, float] = {
    "mg": 1.0,
    "g": 1000.0,
    "ug": 1e-3,
    "iu": 1.0,
}


def to_base_unit(amount: float, unit: Unit) -> float:
    """Convert `amount` in `unit` to milligrams (the base unit)."""
    try:
        factor = MG_PER_UNIT[unit]
    except KeyError:
        raise InvalidInput(f"unknown unit {unit!r} (expected one of {', '.join(MG_PER_UNIT)}).") from None
    return float(amount) * factor
