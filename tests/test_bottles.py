"""Tests for bottle distribution and the dual-bottle split."""

import pytest

from ridefuel.core.bottles import bottles_needed, per_bottle, split_bottles
from ridefuel.core.hydration import compute_trace_electrolytes
from ridefuel.core.params import InvalidParameterError


def test_bottles_round_up() -> None:
    """1334 ml in 750 ml bottles needs two bottles."""
    assert bottles_needed(1334.0, 750.0) == 2


def test_exact_multiple_does_not_add_bottle() -> None:
    """1500 ml fits exactly in two 750 ml bottles."""
    assert bottles_needed(1500.0, 750.0) == 2


def test_at_least_one_bottle() -> None:
    """Tiny fluid needs still take one bottle."""
    assert bottles_needed(10.0, 750.0) == 1
    assert bottles_needed(0.0, 750.0) == 1


def test_bottles_reject_zero_capacity() -> None:
    """Bottle capacity must be positive."""
    with pytest.raises(InvalidParameterError):
        bottles_needed(1000.0, 0.0)


def test_per_bottle_rounds_to_one_decimal() -> None:
    """Totals are divided evenly and rounded to 0.1."""
    assert per_bottle(10.0, 3) == 3.3
    assert per_bottle(120.0, 2, 0) == 60.0


def test_per_bottle_rounds_halves_up() -> None:
    """Exact halves round up rather than to the even neighbour."""
    assert per_bottle(105.0, 2, 0) == 53.0
    assert per_bottle(0.25, 1) == pytest.approx(0.3)


def test_per_bottle_rejects_zero_bottles() -> None:
    """Distribution needs at least one bottle."""
    with pytest.raises(ValueError, match="bottles"):
        per_bottle(10.0, 0)


def _sample_split():
    return split_bottles(
        water_ml=750.0,
        maltodextrin_grams=20.0,
        fructose_grams=10.0,
        sodium_citrate_grams=2.0,
        citric_acid_grams=1.0,
        caffeine_mg=60.0,
    )


def test_hydration_bottle_contents() -> None:
    """Hydration bottle has boosted sodium, half the acid, no carbs or caffeine."""
    hydration, _ = _sample_split()
    assert hydration.water_ml == 750.0
    assert hydration.sodium_citrate_grams == pytest.approx(2.4)
    assert hydration.citric_acid_grams == pytest.approx(0.5)
    assert hydration.maltodextrin_grams == 0.0
    assert hydration.fructose_grams == 0.0
    assert hydration.caffeine_mg == 0
    assert hydration.osmolality_mosm_per_kg == 9600


def test_fueling_bottle_contents() -> None:
    """Fueling bottle doubles carbs, takes all caffeine and no sodium."""
    _, fueling = _sample_split()
    assert fueling.water_ml == 750.0
    assert fueling.maltodextrin_grams == pytest.approx(40.0)
    assert fueling.fructose_grams == pytest.approx(20.0)
    assert fueling.citric_acid_grams == pytest.approx(1.5)
    assert fueling.caffeine_mg == 60
    assert fueling.sodium_citrate_grams == 0.0
    assert fueling.osmolality_mosm_per_kg == 400


def test_split_without_trace_has_no_minerals() -> None:
    """Minerals stay unset when trace electrolytes are not mixed in."""
    hydration, fueling = _sample_split()
    assert hydration.potassium_mg is None
    assert fueling.magnesium_mg is None


def test_trace_electrolytes_go_to_hydration_bottle() -> None:
    """Trace minerals are boosted 1.2x in the hydration bottle and counted in its osmolality."""
    hydration, fueling = split_bottles(
        water_ml=750.0,
        maltodextrin_grams=20.0,
        fructose_grams=10.0,
        sodium_citrate_grams=2.0,
        citric_acid_grams=1.0,
        caffeine_mg=60.0,
        trace=compute_trace_electrolytes(750.0),
    )
    assert (hydration.potassium_mg, hydration.calcium_mg, hydration.magnesium_mg) == (
        90,
        45,
        27,
    )
    # 9600 from sodium citrate plus 162 mg * 0.5 / 0.75 l.
    assert hydration.osmolality_mosm_per_kg == 9708
    assert (fueling.potassium_mg, fueling.calcium_mg, fueling.magnesium_mg) == (0, 0, 0)
    assert fueling.osmolality_mosm_per_kg == 400


def test_fueling_caffeine_rounds_half_up() -> None:
    """52.5 mg of caffeine in the fueling bottle is reported as 53 mg."""
    _, fueling = split_bottles(750.0, 20.0, 10.0, 2.0, 1.0, 52.5)
    assert fueling.caffeine_mg == 53
