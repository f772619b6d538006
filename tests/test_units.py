import pytest

from decayengine.errors import InvalidInput
from decayengine.units import MG_PER_UNIT, to_base_unit


def test_micrograms_milligrams_grams_agree():
    """1000 ug == 1 mg == 0.001 g."""
    assert to_base_unit(1000.0, "ug") == pytest.approx(1.0)
    assert to_base_unit(1.0, "mg") == 1.0
    assert to_base_unit(0.001, "g") == pytest.approx(1.0)


def test_iu_is_passed_through():
    assert to_base_unit(250.0, "iu") == 250.0


def test_table_covers_every_unit():
    assert set(MG_PER_UNIT) == {"mg", "ug", "g", "iu"}


def test_unknown_unit_rejected():
    with pytest.raises(InvalidInput):
        to_base_unit(1.0, "kg")
