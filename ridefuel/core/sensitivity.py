"""Profile and sensitivity analysis for the Ride Fuel formula engine.

These helpers evaluate :func:`calculate_formula` over a grid of ride
durations or temperatures and tabulate the results as pandas DataFrames.
They also estimate how sensitive a whole-ride total is to temperature
using a central difference on the unrounded totals.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

import numpy as np
import pandas as pd

from ridefuel.core.formula import FormulaResult, calculate_formula, compute_totals
from ridefuel.core.params import RideParameters

DEFAULT_DURATIONS: np.ndarray = np.arange(0.5, 8.0 + 1e-9, 0.5)

PROFILE_COLUMNS: tuple[str, ...] = (
    "duration_hours",
    "temperature_celsius",
    "bottles_needed",
    "total_fluid_required_ml",
    "total_carb_grams",
    "total_caffeine_mg",
    "maltodextrin_grams",
    "fructose_grams",
    "sodium_citrate_grams",
    "citric_acid_grams",
    "caffeine_mg",
    "total_calories_per_bottle",
)

_TOTAL_FIELDS: tuple[str, ...] = (
    "carb_grams",
    "maltodextrin_grams",
    "fructose_grams",
    "fluid_ml",
    "sodium_citrate_grams",
    "citric_acid_grams",
    "caffeine_mg",
)

# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


def _profile_row(params: RideParameters, result: FormulaResult) -> dict[str, float]:
    return {
        "duration_hours": params.duration_hours,
        "temperature_celsius": params.temperature_celsius,
        "bottles_needed": result.bottles_needed,
        "total_fluid_required_ml": result.total_fluid_required_ml,
        "total_carb_grams": result.totals.carb_grams,
        "total_caffeine_mg": result.totals.caffeine_mg,
        "maltodextrin_grams": result.maltodextrin_grams,
        "fructose_grams": result.fructose_grams,
        "sodium_citrate_grams": result.sodium_citrate_grams,
        "citric_acid_grams": result.citric_acid_grams,
        "caffeine_mg": result.caffeine_mg,
        "total_calories_per_bottle": result.total_calories_per_bottle,
    }


def compute_duration_profile(
    base: RideParameters,
    durations: Iterable[float] | None = None,
) -> pd.DataFrame:
    """Evaluate the formula for *base* at each duration in *durations*.

    Args:
        base: Ride parameters; only ``duration_hours`` is varied.
        durations: Durations in hours (> 0).  Defaults to 0.5 h steps
            from 0.5 h to 8 h.

    Returns:
        DataFrame with one row per duration and :data:`PROFILE_COLUMNS`.
    """
    grid = DEFAULT_DURATIONS if durations is None else np.asarray(list(durations))
    rows = []
    for duration in grid:
        params = replace(base, duration_hours=float(duration))
        rows.append(_profile_row(params, calculate_formula(params)))
    return pd.DataFrame(rows, columns=list(PROFILE_COLUMNS))


def compute_temperature_profile(
    base: RideParameters,
    temperatures: Iterable[float],
) -> pd.DataFrame:
    """Evaluate the formula for *base* at each temperature (°C)."""
    rows = []
    for temperature in np.asarray(list(temperatures), dtype=float):
        params = replace(base, temperature_celsius=float(temperature))
        rows.append(_profile_row(params, calculate_formula(params)))
    return pd.DataFrame(rows, columns=list(PROFILE_COLUMNS))


# ---------------------------------------------------------------------------
# Sensitivity
# ---------------------------------------------------------------------------


def compute_temperature_sensitivity(
    base: RideParameters,
    quantity: str = "carb_grams",
    delta: float = 0.5,
) -> float:
    """Central-difference derivative of a whole-ride total w.r.t. temperature.

    ::

        sensitivity = (total(T + delta) - total(T - delta)) / (2 * delta)

    Args:
        base: Ride parameters at the evaluation point.
        quantity: Name of a :class:`RideTotals` field, e.g.
            ``"carb_grams"``, ``"fluid_ml"`` or ``"sodium_citrate_grams"``.
        delta: Temperature step in °C (> 0).

    Returns:
        Change of *quantity* per °C.

    Raises:
        ValueError: If *quantity* is unknown or *delta* is not positive.
    """
    if quantity not in _TOTAL_FIELDS:
        raise ValueError(f"Unknown quantity '{quantity}'.")
    if delta <= 0.0:
        raise ValueError("delta must be > 0.")

    plus = replace(base, temperature_celsius=base.temperature_celsius + delta)
    minus = replace(base, temperature_celsius=base.temperature_celsius - delta)
    value_plus = getattr(compute_totals(plus), quantity)
    value_minus = getattr(compute_totals(minus), quantity)
    return (value_plus - value_minus) / (2.0 * delta)
