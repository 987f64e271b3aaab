"""Hydration and electrolyte calculator for the Ride Fuel formula engine."""

from __future__ import annotations

from dataclasses import dataclass

from ridefuel.core.params import Level
from ridefuel.core.rounding import round_half_up

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BASE_FLUID_ML_PER_HOUR: float = 667.0  # one litre every 1.5 hours
HEAT_FLUID_BONUS_ML_PER_HOUR: float = 333.0  # reaches 1000 ml/h at 35 °C
HEAT_THRESHOLD_C: float = 25.0
HEAT_RAMP_DEGREES: float = 10.0

SWEAT_RATE_MULTIPLIER: dict[Level, float] = {
    Level.LOW: 0.85,
    Level.MEDIUM: 1.0,
    Level.HIGH: 1.15,
}

SODIUM_CITRATE_G_PER_LITRE: float = 3.8
_SODIUM_HEAT_PER_DEGREE: float = 0.025
_SODIUM_MAX_HEAT_BONUS: float = 0.25

CARB_GRAMS_PER_CITRIC_GRAM: float = 30.0

# Trace electrolytes, mg per litre of mixed water.
POTASSIUM_MG_PER_LITRE: float = 100.0
CALCIUM_MG_PER_LITRE: float = 50.0
MAGNESIUM_MG_PER_LITRE: float = 30.0


@dataclass(frozen=True)
class TraceElectrolytes:
    """Potassium, calcium and magnesium in mg."""

    potassium_mg: float
    calcium_mg: float
    magnesium_mg: float

    @property
    def total_mg(self) -> float:
        return self.potassium_mg + self.calcium_mg + self.magnesium_mg

    def rounded(self) -> tuple[int, int, int]:
        """Whole-mg ``(potassium, calcium, magnesium)``, halves rounding up."""
        return (
            int(round_half_up(self.potassium_mg)),
            int(round_half_up(self.calcium_mg)),
            int(round_half_up(self.magnesium_mg)),
        )

    def scaled(self, factor: float, potassium_only: bool = False) -> TraceElectrolytes:
        """Return a copy scaled by *factor* (only potassium if *potassium_only*)."""
        if potassium_only:
            return TraceElectrolytes(
                self.potassium_mg * factor, self.calcium_mg, self.magnesium_mg
            )
        return TraceElectrolytes(
            self.potassium_mg * factor,
            self.calcium_mg * factor,
            self.magnesium_mg * factor,
        )


def fluid_rate_ml_per_hour(temperature_celsius: float, sweat_rate: Level) -> float:
    """Hourly fluid need in ml, after heat and sweat-rate scaling.

    Above 25 °C the base rate rises linearly to 1000 ml/h at 35 °C and
    stays there for hotter conditions.
    """
    rate = BASE_FLUID_ML_PER_HOUR
    if temperature_celsius > HEAT_THRESHOLD_C:
        heat = min(1.0, (temperature_celsius - HEAT_THRESHOLD_C) / HEAT_RAMP_DEGREES)
        rate = BASE_FLUID_ML_PER_HOUR + HEAT_FLUID_BONUS_ML_PER_HOUR * heat
    return rate * SWEAT_RATE_MULTIPLIER.get(sweat_rate, 1.0)


def compute_hydration(
    temperature_celsius: float,
    sweat_rate: Level,
    duration_hours: float,
) -> float:
    """Total fluid need for the whole ride, in ml."""
    return fluid_rate_ml_per_hour(temperature_celsius, sweat_rate) * duration_hours


def sodium_temperature_factor(temperature_celsius: float) -> float:
    """Sodium boost multiplier in ``[1.0, 1.25]`` for hot rides."""
    if temperature_celsius <= HEAT_THRESHOLD_C:
        return 1.0
    excess = temperature_celsius - HEAT_THRESHOLD_C
    return 1.0 + min(_SODIUM_MAX_HEAT_BONUS, excess * _SODIUM_HEAT_PER_DEGREE)


def compute_sodium_and_acid(
    temperature_celsius: float,
    total_fluid_required_ml: float,
    total_carb_grams: float,
) -> tuple[float, float]:
    """Whole-ride sodium citrate and citric acid, in grams.

    Sodium citrate is dosed at 3.8 g per litre of fluid, boosted by up to
    25 % in the heat.  Citric acid balances flavour and pH at 1 g per 30 g
    of carbohydrate.

    Returns:
        ``(sodium_citrate_grams, citric_acid_grams)``.
    """
    litres = total_fluid_required_ml / 1000.0
    sodium_citrate = (
        SODIUM_CITRATE_G_PER_LITRE * litres * sodium_temperature_factor(temperature_celsius)
    )
    citric_acid = total_carb_grams / CARB_GRAMS_PER_CITRIC_GRAM
    return sodium_citrate, citric_acid


def compute_trace_electrolytes(water_ml: float) -> TraceElectrolytes:
    """Trace electrolytes for *water_ml* of mixed drink.

    Dosed at 100 mg/L potassium, 50 mg/L calcium and 30 mg/L magnesium.
    """
    litres = water_ml / 1000.0
    return TraceElectrolytes(
        potassium_mg=POTASSIUM_MG_PER_LITRE * litres,
        calcium_mg=CALCIUM_MG_PER_LITRE * litres,
        magnesium_mg=MAGNESIUM_MG_PER_LITRE * litres,
    )
