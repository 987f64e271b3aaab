"""Bottle distribution and dual-bottle split for the Ride Fuel engine.

Every whole-ride total is spread evenly over the bottles needed to carry
the ride's fluid, so each prepared bottle has the same concentration.  A
partially drunk last bottle simply delivers a proportionally smaller dose.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ridefuel.core.hydration import TraceElectrolytes
from ridefuel.core.osmolality import estimate_osmolality
from ridefuel.core.params import InvalidParameterError
from ridefuel.core.rounding import round_half_up

# Dual-bottle tuning multipliers.
HYDRATION_SODIUM_MULTIPLIER: float = 1.2
HYDRATION_CITRIC_MULTIPLIER: float = 0.5
HYDRATION_TRACE_MULTIPLIER: float = 1.2
FUELING_CARB_MULTIPLIER: float = 2.0
FUELING_CITRIC_MULTIPLIER: float = 1.5


@dataclass(frozen=True)
class BottleMix:
    """Contents of one bottle in a hydration/fueling split.

    Attributes:
        water_ml: Water volume.
        sodium_citrate_grams: Sodium citrate (0.0 in the fueling bottle).
        citric_acid_grams: Citric acid.
        maltodextrin_grams: Maltodextrin (0.0 in the hydration bottle).
        fructose_grams: Fructose (0.0 in the hydration bottle).
        caffeine_mg: Caffeine (0 in the hydration bottle).
        osmolality_mosm_per_kg: Osmolality of this bottle alone.
        potassium_mg: Potassium, only when trace electrolytes are mixed in
            (0 in the fueling bottle).
        calcium_mg: Calcium, as for ``potassium_mg``.
        magnesium_mg: Magnesium, as for ``potassium_mg``.
    """

    water_ml: float
    sodium_citrate_grams: float
    citric_acid_grams: float
    maltodextrin_grams: float
    fructose_grams: float
    caffeine_mg: int
    osmolality_mosm_per_kg: int
    potassium_mg: int | None = None
    calcium_mg: int | None = None
    magnesium_mg: int | None = None


def bottles_needed(total_fluid_required_ml: float, bottle_capacity_ml: float) -> int:
    """Number of bottles needed to carry the ride's fluid (at least 1)."""
    if bottle_capacity_ml <= 0.0:
        raise InvalidParameterError("bottle_capacity_ml must be > 0.")
    return max(1, math.ceil(total_fluid_required_ml / bottle_capacity_ml))


def per_bottle(total_amount: float, bottles: int, ndigits: int = 1) -> float:
    """Evenly distribute *total_amount* over *bottles*, rounded half up."""
    if bottles < 1:
        raise ValueError("bottles must be >= 1.")
    return round_half_up(total_amount / bottles, ndigits)


def split_bottles(
    water_ml: float,
    maltodextrin_grams: float,
    fructose_grams: float,
    sodium_citrate_grams: float,
    citric_acid_grams: float,
    caffeine_mg: float,
    trace: TraceElectrolytes | None = None,
) -> tuple[BottleMix, BottleMix]:
    """Split a single-bottle formula into hydration and fueling bottles.

    The hydration bottle carries 1.2x the sodium citrate and half the
    citric acid, with no carbohydrate or caffeine.  The fueling bottle
    carries twice the carbohydrate, 1.5x the citric acid and all the
    caffeine, with no sodium citrate.  Trace electrolytes, when given, go
    into the hydration bottle at 1.2x.  Each osmolality is computed from
    that bottle's own unrounded contents.

    Args:
        water_ml: Water per bottle.
        maltodextrin_grams: Per-bottle maltodextrin (unrounded).
        fructose_grams: Per-bottle fructose (unrounded).
        sodium_citrate_grams: Per-bottle sodium citrate (unrounded).
        citric_acid_grams: Per-bottle citric acid (unrounded).
        caffeine_mg: Per-bottle caffeine (unrounded).
        trace: Per-bottle trace electrolytes, or ``None`` when not used.

    Returns:
        ``(hydration_bottle, fueling_bottle)``.
    """
    hyd_sodium = sodium_citrate_grams * HYDRATION_SODIUM_MULTIPLIER
    hyd_citric = citric_acid_grams * HYDRATION_CITRIC_MULTIPLIER
    hyd_trace = trace.scaled(HYDRATION_TRACE_MULTIPLIER) if trace is not None else None
    hyd_k, hyd_ca, hyd_mg = hyd_trace.rounded() if hyd_trace is not None else (None,) * 3
    hydration = BottleMix(
        water_ml=water_ml,
        sodium_citrate_grams=round_half_up(hyd_sodium, 1),
        citric_acid_grams=round_half_up(hyd_citric, 1),
        maltodextrin_grams=0.0,
        fructose_grams=0.0,
        caffeine_mg=0,
        osmolality_mosm_per_kg=estimate_osmolality(
            0.0,
            0.0,
            hyd_sodium,
            water_ml,
            hyd_trace.total_mg if hyd_trace is not None else 0.0,
        ),
        potassium_mg=hyd_k,
        calcium_mg=hyd_ca,
        magnesium_mg=hyd_mg,
    )

    fuel_malto = maltodextrin_grams * FUELING_CARB_MULTIPLIER
    fuel_fructose = fructose_grams * FUELING_CARB_MULTIPLIER
    fuel_trace = 0 if trace is not None else None
    fueling = BottleMix(
        water_ml=water_ml,
        sodium_citrate_grams=0.0,
        citric_acid_grams=round_half_up(citric_acid_grams * FUELING_CITRIC_MULTIPLIER, 1),
        maltodextrin_grams=round_half_up(fuel_malto, 1),
        fructose_grams=round_half_up(fuel_fructose, 1),
        caffeine_mg=int(round_half_up(caffeine_mg)),
        osmolality_mosm_per_kg=estimate_osmolality(
            fuel_malto, fuel_fructose, 0.0, water_ml
        ),
        potassium_mg=fuel_trace,
        calcium_mg=fuel_trace,
        magnesium_mg=fuel_trace,
    )
    return hydration, fueling
