"""Caffeine calculator for the Ride Fuel formula engine."""

from __future__ import annotations

from ridefuel.core.params import Level

BASE_CAFFEINE_MG_PER_HOUR: float = 60.0
MAX_RIDE_CAFFEINE_MG: float = 400.0  # whole-ride safety ceiling

CAFFEINE_MG_PER_HOUR: dict[Level, float] = {
    Level.LOW: 40.0,
    Level.MEDIUM: 60.0,
    Level.HIGH: 80.0,
}


def caffeine_rate_mg_per_hour(advanced: bool, caffeine_tolerance: Level) -> float:
    """Hourly caffeine dose.  Tolerance only applies in advanced mode."""
    if not advanced:
        return BASE_CAFFEINE_MG_PER_HOUR
    return CAFFEINE_MG_PER_HOUR.get(caffeine_tolerance, BASE_CAFFEINE_MG_PER_HOUR)


def compute_caffeine(
    duration_hours: float,
    advanced: bool = False,
    caffeine_tolerance: Level = Level.MEDIUM,
) -> float:
    """Total caffeine for the ride in mg, never above 400 mg."""
    rate = caffeine_rate_mg_per_hour(advanced, caffeine_tolerance)
    return min(rate * duration_hours, MAX_RIDE_CAFFEINE_MG)
