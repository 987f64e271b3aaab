"""Formula assembly for the Ride Fuel engine.

:func:`calculate_formula` is the single entry point callers need.  It runs
the carbohydrate, hydration/electrolyte and caffeine stages, spreads the
whole-ride totals across the bottles required and, in advanced mode,
adds an osmolality estimate and an optional hydration/fueling split.

The function is pure: identical parameters always give an identical
result, and nothing is cached or shared between calls.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from ridefuel.core.bottles import BottleMix, bottles_needed, per_bottle, split_bottles
from ridefuel.core.caffeine import compute_caffeine
from ridefuel.core.carbs import compute_carbs, split_carbs
from ridefuel.core.hydration import (
    TraceElectrolytes,
    compute_hydration,
    compute_sodium_and_acid,
    compute_trace_electrolytes,
)
from ridefuel.core.osmolality import estimate_osmolality, tonicity_scale_factors
from ridefuel.core.params import RideParameters
from ridefuel.core.rounding import round_half_up

logger = logging.getLogger(__name__)

KCAL_PER_GRAM_CARB: float = 4.0

_OPTIONAL_FIELDS: tuple[str, ...] = (
    "osmolality_mosm_per_kg",
    "hydration_bottle",
    "fueling_bottle",
    "potassium_mg",
    "calcium_mg",
    "magnesium_mg",
)

# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RideTotals:
    """Unrounded whole-ride quantities, before bottle distribution."""

    carb_grams: float
    maltodextrin_grams: float
    fructose_grams: float
    fluid_ml: float
    sodium_citrate_grams: float
    citric_acid_grams: float
    caffeine_mg: float


@dataclass(frozen=True)
class FormulaResult:
    """Per-bottle mixing formula for a ride.

    Ingredient amounts are for one bottle.  Grams are rounded to one
    decimal and milligrams to whole numbers, halves rounding up.

    Attributes:
        water_amount_ml: Water per bottle (the bottle capacity).
        sodium_citrate_grams: Sodium citrate per bottle.
        citric_acid_grams: Citric acid per bottle.
        maltodextrin_grams: Maltodextrin per bottle.
        fructose_grams: Fructose per bottle.
        caffeine_mg: Caffeine per bottle.
        combined_carb_grams: Maltodextrin plus fructose per bottle.
        total_ride_hours: Echo of the ride duration.
        total_calories_per_bottle: Carbohydrate calories per bottle.
        bottles_needed: Bottles required to carry the ride's fluid.
        total_fluid_required_ml: Fluid need for the whole ride.
        totals: Unrounded whole-ride totals.
        osmolality_mosm_per_kg: Estimated osmolality, advanced mode only.
        hydration_bottle: Electrolyte bottle, advanced split mode only.
        fueling_bottle: Carbohydrate bottle, advanced split mode only.
        potassium_mg: Potassium per bottle, trace electrolytes only.
        calcium_mg: Calcium per bottle, trace electrolytes only.
        magnesium_mg: Magnesium per bottle, trace electrolytes only.
    """

    water_amount_ml: float
    sodium_citrate_grams: float
    citric_acid_grams: float
    maltodextrin_grams: float
    fructose_grams: float
    caffeine_mg: int
    combined_carb_grams: float
    total_ride_hours: float
    total_calories_per_bottle: int
    bottles_needed: int
    total_fluid_required_ml: float
    totals: RideTotals
    osmolality_mosm_per_kg: int | None = None
    hydration_bottle: BottleMix | None = None
    fueling_bottle: BottleMix | None = None
    potassium_mg: int | None = None
    calcium_mg: int | None = None
    magnesium_mg: int | None = None

    @property
    def is_split(self) -> bool:
        """True when the formula was split into two bottles."""
        return self.hydration_bottle is not None and self.fueling_bottle is not None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form.  Optional fields that were not computed are omitted."""
        data = asdict(self)
        for key in _OPTIONAL_FIELDS:
            if data[key] is None:
                del data[key]
        for key in ("hydration_bottle", "fueling_bottle"):
            bottle = data.get(key)
            if bottle is not None:
                data[key] = {k: v for k, v in bottle.items() if v is not None}
        return data


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def compute_totals(params: RideParameters) -> RideTotals:
    """Run the carbohydrate, fluid, electrolyte and caffeine stages."""
    carbs = compute_carbs(
        params.duration_hours,
        params.intensity,
        params.temperature_celsius,
        params.advanced,
        params.carb_adaptation,
    )
    maltodextrin, fructose = split_carbs(carbs, params.advanced, params.carb_ratio_mode)
    fluid = compute_hydration(
        params.temperature_celsius, params.sweat_rate, params.duration_hours
    )
    sodium_citrate, citric_acid = compute_sodium_and_acid(
        params.temperature_celsius, fluid, carbs
    )
    caffeine = compute_caffeine(
        params.duration_hours, params.advanced, params.caffeine_tolerance
    )
    return RideTotals(
        carb_grams=carbs,
        maltodextrin_grams=maltodextrin,
        fructose_grams=fructose,
        fluid_ml=fluid,
        sodium_citrate_grams=sodium_citrate,
        citric_acid_grams=citric_acid,
        caffeine_mg=caffeine,
    )


def calculate_formula(params: RideParameters) -> FormulaResult:
    """Compute the per-bottle drink formula for a ride.

    Args:
        params: Validated ride parameters.  Invalid durations or bottle
            capacities are rejected when :class:`RideParameters` is built.

    Returns:
        A complete :class:`FormulaResult`.  ``osmolality_mosm_per_kg`` is
        set only in advanced mode; the hydration and fueling bottles only
        when ``advanced`` and ``separate_bottles`` are both set; the trace
        electrolytes only when ``advanced`` and ``trace_electrolytes`` are
        both set.  An advanced ``target_tonicity`` rescales carbohydrate or
        sodium citrate and potassium before anything is reported, and the
        osmolality is then estimated from the rescaled mix.
    """
    totals = compute_totals(params)
    water_ml = params.bottle_capacity_ml
    bottles = bottles_needed(totals.fluid_ml, water_ml)
    logger.debug(
        "Ride %.2f h: %.1f g carbs, %.0f ml fluid, %.0f mg caffeine over %d bottle(s)",
        params.duration_hours,
        totals.carb_grams,
        totals.fluid_ml,
        totals.caffeine_mg,
        bottles,
    )

    maltodextrin = totals.maltodextrin_grams / bottles
    fructose = totals.fructose_grams / bottles
    sodium_citrate = totals.sodium_citrate_grams / bottles
    citric_acid = totals.citric_acid_grams / bottles
    caffeine = totals.caffeine_mg / bottles

    carb_scale = electrolyte_scale = 1.0
    trace: TraceElectrolytes | None = None
    osmolality: int | None = None
    hydration_bottle: BottleMix | None = None
    fueling_bottle: BottleMix | None = None
    if params.advanced:
        if params.trace_electrolytes:
            trace = compute_trace_electrolytes(water_ml)
        osmolality = _bottle_osmolality(
            maltodextrin, fructose, sodium_citrate, water_ml, trace
        )
        carb_scale, electrolyte_scale = tonicity_scale_factors(
            osmolality, params.target_tonicity
        )
        if carb_scale != 1.0 or electrolyte_scale != 1.0:
            logger.debug(
                "Targeting %s: carb x%.3f, electrolyte x%.3f (was %d mOsm/kg)",
                params.target_tonicity.value,
                carb_scale,
                electrolyte_scale,
                osmolality,
            )
            maltodextrin *= carb_scale
            fructose *= carb_scale
            sodium_citrate *= electrolyte_scale
            if trace is not None:
                trace = trace.scaled(electrolyte_scale, potassium_only=True)
            osmolality = _bottle_osmolality(
                maltodextrin, fructose, sodium_citrate, water_ml, trace
            )
        if params.separate_bottles:
            hydration_bottle, fueling_bottle = split_bottles(
                water_ml,
                maltodextrin,
                fructose,
                sodium_citrate,
                citric_acid,
                caffeine,
                trace,
            )

    potassium, calcium, magnesium = trace.rounded() if trace is not None else (None,) * 3
    maltodextrin_out = per_bottle(totals.maltodextrin_grams * carb_scale, bottles)
    fructose_out = per_bottle(totals.fructose_grams * carb_scale, bottles)

    return FormulaResult(
        water_amount_ml=water_ml,
        sodium_citrate_grams=per_bottle(
            totals.sodium_citrate_grams * electrolyte_scale, bottles
        ),
        citric_acid_grams=per_bottle(totals.citric_acid_grams, bottles),
        maltodextrin_grams=maltodextrin_out,
        fructose_grams=fructose_out,
        caffeine_mg=int(per_bottle(totals.caffeine_mg, bottles, 0)),
        combined_carb_grams=round_half_up(maltodextrin_out + fructose_out, 1),
        total_ride_hours=params.duration_hours,
        total_calories_per_bottle=int(
            round_half_up((maltodextrin_out + fructose_out) * KCAL_PER_GRAM_CARB)
        ),
        bottles_needed=bottles,
        total_fluid_required_ml=totals.fluid_ml,
        totals=totals,
        osmolality_mosm_per_kg=osmolality,
        hydration_bottle=hydration_bottle,
        fueling_bottle=fueling_bottle,
        potassium_mg=potassium,
        calcium_mg=calcium,
        magnesium_mg=magnesium,
    )


def _bottle_osmolality(
    maltodextrin: float,
    fructose: float,
    sodium_citrate: float,
    water_ml: float,
    trace: TraceElectrolytes | None,
) -> int:
    trace_mg = trace.total_mg if trace is not None else 0.0
    return estimate_osmolality(maltodextrin, fructose, sodium_citrate, water_ml, trace_mg)
