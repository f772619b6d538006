# src/decayengine/types.py
from dataclasses import dataclass
from datetime import datetime
from typing import Literal

# All amounts are normalized to MILLIGRAMS before any arithmetic.
# "ug" is micrograms; "iu" has no mass equivalence and is passed through as-is.
Unit = Literal["mg", "ug", "g", "iu"]

@dataclass(frozen=True)
class Dose:
    """
    A single recorded intake of the substance.

    dose_id   : opaque unique identifier (assigned when the dose is submitted)
    amount    : dose size in `unit`, always > 0
    unit      : one of mg, ug, g, iu
    timestamp : when the dose was taken (naive values are local time)
    """
    dose_id: str
    amount: float
    unit: Unit
    timestamp: datetime


@dataclass(frozen=True)
class DecayConfig:
    """
    Parameters for one active-level computation.

    half_life_hours    : elimination half-life in hours (must be > 0)
    evaluation_instant : when to evaluate; None means "now"
    """
    half_life_hours: float
    evaluation_instant: datetime | None = None


@dataclass(frozen=True)
class SeriesPoint:
    """One chart sample: display label, raw instant, and level rounded for display (mg)."""
    time: str
    instant: datetime
    level: float
