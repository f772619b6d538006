import math
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from decayengine.metrics import auc_trapz, peak, round_level, trough
from decayengine.sampling import DecaySeries, sample_series
from decayengine.types import Dose

T = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_round_level_is_display_only():
    assert round_level(149.99999) == 150.0
    assert round_level(0.125, 1) == 0.1


def test_peak_and_trough_of_single_dose():
    doses = [Dose(dose_id="a", amount=80.0, unit="mg", timestamp=T)]
    series = sample_series(doses, 12.0, now=T + timedelta(hours=6))

    level, when = peak(series)
    assert level == 80.0
    assert when == T

    low, low_when = trough(series)
    assert low_when == series.instants[-1]
    assert low < level


def test_auc_matches_integral():
    """
    AUC of A * 0.5**(t/h) from 0 to 20h is A*h/ln2 * (1 - 0.5**(20/h)).
    """
    doses = [Dose(dose_id="a", amount=100.0, unit="mg", timestamp=T)]
    instants = [T + timedelta(hours=float(t)) for t in np.linspace(0.0, 20.0, 2001)]
    series = DecaySeries(doses, 2.0, instants)

    expected = 100.0 * 2.0 / math.log(2.0) * (1.0 - 0.5 ** 10)
    assert auc_trapz(series) == pytest.approx(expected, rel=1e-3)


def test_metrics_on_empty_series_raise():
    empty = sample_series([], 12.0, now=T)
    with pytest.raises(ValueError):
        auc_trapz(empty)
    with pytest.raises(ValueError):
        peak(empty)
