"""Tests for duration/temperature profiles and temperature sensitivity."""

import pandas as pd
import pytest

from ridefuel.core.params import Level, RideParameters
from ridefuel.core.sensitivity import (
    DEFAULT_DURATIONS,
    PROFILE_COLUMNS,
    compute_duration_profile,
    compute_temperature_profile,
    compute_temperature_sensitivity,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _sample_params(temperature: float = 20.0) -> RideParameters:
    return RideParameters(
        duration_hours=3.0,
        temperature_celsius=temperature,
        sweat_rate=Level.MEDIUM,
        intensity=Level.MEDIUM,
        bottle_capacity_ml=750.0,
    )


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


def test_default_duration_profile_shape() -> None:
    """One row per default duration with the documented columns."""
    profile = compute_duration_profile(_sample_params())
    assert isinstance(profile, pd.DataFrame)
    assert len(profile) == len(DEFAULT_DURATIONS)
    assert list(profile.columns) == list(PROFILE_COLUMNS)


def test_duration_profile_bottles_non_decreasing() -> None:
    """Longer rides never need fewer bottles."""
    profile = compute_duration_profile(_sample_params())
    assert profile["bottles_needed"].is_monotonic_increasing
    assert profile["total_fluid_required_ml"].is_monotonic_increasing


def test_duration_profile_custom_grid() -> None:
    """A custom grid is evaluated in order."""
    profile = compute_duration_profile(_sample_params(), [1.0, 2.0, 4.0])
    assert profile["duration_hours"].tolist() == [1.0, 2.0, 4.0]
    assert profile["total_carb_grams"].tolist() == pytest.approx([45.0, 105.0, 195.0])


def test_temperature_profile_fluid_rises_in_heat() -> None:
    """Fluid need grows with temperature above 25 °C."""
    profile = compute_temperature_profile(_sample_params(), [20.0, 25.0, 30.0, 35.0])
    fluid = profile["total_fluid_required_ml"].tolist()
    assert fluid[0] == pytest.approx(fluid[1])
    assert fluid[1] < fluid[2] < fluid[3]


# ---------------------------------------------------------------------------
# Sensitivity
# ---------------------------------------------------------------------------


def test_carb_sensitivity_in_heat() -> None:
    """At 30 °C three hours lose 2.7 g of carbs per degree."""
    slope = compute_temperature_sensitivity(_sample_params(30.0), "carb_grams")
    assert slope == pytest.approx(-2.7)


def test_carb_sensitivity_in_mild_conditions() -> None:
    """Below the heat threshold temperature has no effect on carbs."""
    slope = compute_temperature_sensitivity(_sample_params(15.0), "carb_grams")
    assert slope == pytest.approx(0.0)


def test_fluid_sensitivity_in_heat() -> None:
    """At 30 °C fluid rises by 33.3 ml/h per degree."""
    slope = compute_temperature_sensitivity(_sample_params(30.0), "fluid_ml")
    assert slope == pytest.approx(99.9)


def test_sensitivity_rejects_unknown_quantity() -> None:
    """Only RideTotals fields can be differentiated."""
    with pytest.raises(ValueError, match="Unknown quantity"):
        compute_temperature_sensitivity(_sample_params(), "potassium_mg")


def test_sensitivity_rejects_bad_delta() -> None:
    """The temperature step must be positive."""
    with pytest.raises(ValueError, match="delta"):
        compute_temperature_sensitivity(_sample_params(), "fluid_ml", delta=0.0)
