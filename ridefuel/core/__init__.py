"""Core calculation modules for the Ride Fuel engine."""

from ridefuel.core.bottles import BottleMix, bottles_needed, per_bottle, split_bottles
from ridefuel.core.caffeine import MAX_RIDE_CAFFEINE_MG, compute_caffeine
from ridefuel.core.carbs import compute_carbs, split_carbs
from ridefuel.core.formula import (
    FormulaResult,
    RideTotals,
    calculate_formula,
    compute_totals,
)
from ridefuel.core.hydration import (
    TraceElectrolytes,
    compute_hydration,
    compute_sodium_and_acid,
    compute_trace_electrolytes,
)
from ridefuel.core.osmolality import (
    classify_osmolality,
    estimate_osmolality,
    tonicity_scale_factors,
)
from ridefuel.core.params import (
    CarbRatioMode,
    InvalidParameterError,
    Level,
    RideParameters,
    Tonicity,
    parse_carb_ratio_mode,
    parse_flag,
    parse_level,
    parse_tonicity,
)
from ridefuel.core.rounding import round_half_up
from ridefuel.core.sensitivity import (
    compute_duration_profile,
    compute_temperature_profile,
    compute_temperature_sensitivity,
)

__all__ = [
    "BottleMix",
    "CarbRatioMode",
    "FormulaResult",
    "InvalidParameterError",
    "Level",
    "MAX_RIDE_CAFFEINE_MG",
    "RideParameters",
    "RideTotals",
    "Tonicity",
    "TraceElectrolytes",
    "bottles_needed",
    "calculate_formula",
    "classify_osmolality",
    "compute_caffeine",
    "compute_carbs",
    "compute_duration_profile",
    "compute_hydration",
    "compute_sodium_and_acid",
    "compute_temperature_profile",
    "compute_temperature_sensitivity",
    "compute_totals",
    "compute_trace_electrolytes",
    "estimate_osmolality",
    "parse_carb_ratio_mode",
    "parse_flag",
    "parse_level",
    "parse_tonicity",
    "per_bottle",
    "round_half_up",
    "split_bottles",
    "split_carbs",
    "tonicity_scale_factors",
]
