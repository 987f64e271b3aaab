"""Tests for the hydration and electrolyte calculator."""

import pytest

from ridefuel.core.hydration import (
    compute_hydration,
    compute_sodium_and_acid,
    compute_trace_electrolytes,
    fluid_rate_ml_per_hour,
    sodium_temperature_factor,
)
from ridefuel.core.params import Level


def test_base_fluid_rate() -> None:
    """Temperate conditions need 667 ml per hour."""
    assert fluid_rate_ml_per_hour(20.0, Level.MEDIUM) == pytest.approx(667.0)


def test_fluid_rate_scales_with_heat() -> None:
    """Rate rises linearly from 25 °C to 1000 ml/h at 35 °C."""
    assert fluid_rate_ml_per_hour(30.0, Level.MEDIUM) == pytest.approx(833.5)
    assert fluid_rate_ml_per_hour(35.0, Level.MEDIUM) == pytest.approx(1000.0)
    assert fluid_rate_ml_per_hour(42.0, Level.MEDIUM) == pytest.approx(1000.0)


def test_sweat_rate_multipliers() -> None:
    """Low and high sweat rates scale by 0.85 and 1.15."""
    assert fluid_rate_ml_per_hour(20.0, Level.LOW) == pytest.approx(667.0 * 0.85)
    assert fluid_rate_ml_per_hour(20.0, Level.HIGH) == pytest.approx(667.0 * 1.15)


def test_two_hour_temperate_ride() -> None:
    """Two temperate hours need 1334 ml."""
    assert compute_hydration(20.0, Level.MEDIUM, 2.0) == pytest.approx(1334.0)


def test_hot_heavy_sweater() -> None:
    """35 °C, high sweat rate, 3 h: 1150 ml/h for 3450 ml."""
    assert compute_hydration(35.0, Level.HIGH, 3.0) == pytest.approx(3450.0)


def test_sodium_temperature_factor() -> None:
    """Sodium boost is 2.5 % per degree above 25 °C, capped at 25 %."""
    assert sodium_temperature_factor(20.0) == 1.0
    assert sodium_temperature_factor(30.0) == pytest.approx(1.125)
    assert sodium_temperature_factor(40.0) == pytest.approx(1.25)


def test_sodium_citrate_per_litre() -> None:
    """One litre in temperate conditions needs 3.8 g sodium citrate."""
    sodium, _ = compute_sodium_and_acid(20.0, 1000.0, 0.0)
    assert sodium == pytest.approx(3.8)


def test_sodium_citrate_in_heat() -> None:
    """Heat raises sodium citrate by up to a quarter."""
    sodium, _ = compute_sodium_and_acid(35.0, 2000.0, 0.0)
    assert sodium == pytest.approx(3.8 * 2.0 * 1.25)


def test_citric_acid_follows_carbs() -> None:
    """One gram of citric acid per 30 g of carbohydrate."""
    _, citric = compute_sodium_and_acid(20.0, 1000.0, 90.0)
    assert citric == pytest.approx(3.0)


def test_trace_electrolytes_per_litre() -> None:
    """Potassium, calcium and magnesium are dosed at 100/50/30 mg per litre."""
    trace = compute_trace_electrolytes(1000.0)
    assert trace.potassium_mg == pytest.approx(100.0)
    assert trace.calcium_mg == pytest.approx(50.0)
    assert trace.magnesium_mg == pytest.approx(30.0)
    assert trace.total_mg == pytest.approx(180.0)


def test_trace_electrolytes_round_half_up() -> None:
    """A 750 ml bottle holds 75/37.5/22.5 mg, shown as 75/38/23 mg."""
    assert compute_trace_electrolytes(750.0).rounded() == (75, 38, 23)


def test_trace_electrolytes_scaling() -> None:
    """Scaling can apply to every mineral or to potassium alone."""
    trace = compute_trace_electrolytes(1000.0)
    assert trace.scaled(2.0).total_mg == pytest.approx(360.0)
    potassium_only = trace.scaled(2.0, potassium_only=True)
    assert potassium_only.potassium_mg == pytest.approx(200.0)
    assert potassium_only.calcium_mg == pytest.approx(50.0)
