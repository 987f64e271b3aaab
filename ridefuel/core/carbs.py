"""Carbohydrate calculator for the Ride Fuel formula engine.

Carbohydrate need follows a progressive fueling ramp: riders cannot absorb
a full hourly load straight away, so the first hour delivers at most half
to three quarters of the hourly rate and the second hour three quarters to
the full rate.  From the third hour on every hour takes the full rate.

Hot weather derates the hourly rate linearly from 25 °C, reaching a 20 %
reduction at 35 °C.
"""

from __future__ import annotations

from ridefuel.core.params import CarbRatioMode, Level

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CARBS_PER_HOUR: dict[Level, float] = {
    Level.LOW: 45.0,
    Level.MEDIUM: 60.0,
    Level.HIGH: 75.0,
}

HEAT_THRESHOLD_C: float = 25.0
_DERATE_PER_DEGREE: float = 0.02
_MAX_DERATE: float = 0.2

MALTODEXTRIN_DOMINANT_SHARE: float = 0.56
BALANCED_SHARE: float = 0.5
FRUCTOSE_DOMINANT_SHARE: float = 0.33


def hourly_carb_rate(intensity: Level) -> float:
    """Return the base carbohydrate rate in g/h for *intensity*."""
    return CARBS_PER_HOUR.get(intensity, CARBS_PER_HOUR[Level.MEDIUM])


def carb_temperature_factor(temperature_celsius: float) -> float:
    """Return the heat derate multiplier in ``[0.8, 1.0]``."""
    if temperature_celsius <= HEAT_THRESHOLD_C:
        return 1.0
    excess = temperature_celsius - HEAT_THRESHOLD_C
    return 1.0 - min(_MAX_DERATE, excess * _DERATE_PER_DEGREE)


def compute_carbs(
    duration_hours: float,
    intensity: Level,
    temperature_celsius: float,
    advanced: bool = False,
    carb_adaptation: Level = Level.MEDIUM,
) -> float:
    """Total carbohydrate need for the ride, in grams.

    For rides up to two hours the ramp factors scale with the time actually
    spent in each hour::

        hour_1 = rate * (0.5  + min(1, d) / 4)     * min(1, d)
        hour_2 = rate * (0.75 + min(1, d - 1) / 4) * min(1, d - 1)   (d > 1)

    Longer rides use fixed factors 0.5 and 0.75 for the first two hours
    and the full rate for the remaining ``d - 2`` hours.  ``rate`` already
    includes the heat derate.  The total is not capped.

    Args:
        duration_hours: Ride duration in hours (> 0).
        intensity: Planned intensity.
        temperature_celsius: Ambient temperature.
        advanced: Accepted for signature compatibility; unused.
        carb_adaptation: Accepted for signature compatibility; the
            duration-based rate is not modulated by gut training.

    Returns:
        Total carbohydrates in grams.
    """
    rate = hourly_carb_rate(intensity) * carb_temperature_factor(temperature_celsius)

    if duration_hours <= 2.0:
        first = min(1.0, duration_hours)
        total = rate * (0.5 + first / 4.0) * first
        if duration_hours > 1.0:
            second = min(1.0, duration_hours - 1.0)
            total += rate * (0.75 + second / 4.0) * second
        return total

    return rate * 0.5 + rate * 0.75 + rate * (duration_hours - 2.0)


def maltodextrin_share(advanced: bool, carb_ratio_mode: CarbRatioMode) -> float:
    """Fraction of carbohydrates supplied as maltodextrin."""
    if not advanced:
        return MALTODEXTRIN_DOMINANT_SHARE
    if carb_ratio_mode is CarbRatioMode.BALANCED:
        return BALANCED_SHARE
    if carb_ratio_mode is CarbRatioMode.FRUCTOSE_DOMINANT:
        return FRUCTOSE_DOMINANT_SHARE
    return MALTODEXTRIN_DOMINANT_SHARE


def split_carbs(
    total_carbs: float,
    advanced: bool = False,
    carb_ratio_mode: CarbRatioMode = CarbRatioMode.MALTODEXTRIN_DOMINANT,
) -> tuple[float, float]:
    """Split *total_carbs* into ``(maltodextrin, fructose)`` grams."""
    share = maltodextrin_share(advanced, carb_ratio_mode)
    maltodextrin = total_carbs * share
    return maltodextrin, total_carbs - maltodextrin
