"""Osmolality estimate for a mixed bottle.

The estimate is an empirical approximation, not a laboratory model: every
gram of carbohydrate contributes 5 units, every gram of sodium citrate
3000 units and every milligram of trace mineral 0.5 units, normalised to
the bottle's water volume.
"""

from __future__ import annotations

from ridefuel.core.params import InvalidParameterError, Tonicity
from ridefuel.core.rounding import round_half_up

CARB_OSMOTIC_FACTOR: float = 5.0
SODIUM_CITRATE_OSMOTIC_FACTOR: float = 3.0
TRACE_MINERAL_OSMOTIC_FACTOR: float = 0.5

ISOTONIC_LOW: int = 270
ISOTONIC_HIGH: int = 290


def estimate_osmolality(
    maltodextrin_grams: float,
    fructose_grams: float,
    sodium_citrate_grams: float,
    water_ml: float,
    trace_minerals_mg: float = 0.0,
) -> int:
    """Estimate the osmolality of a bottle in mOsm/kg.

    Formula::

        carbs       = (maltodextrin + fructose) * 5
        electrolyte = sodium_citrate * 1000 * 3 + trace_minerals_mg * 0.5
        osmolality  = round((carbs + electrolyte) / water_ml * 1000)

    Halves round up.  *trace_minerals_mg* is the summed potassium, calcium
    and magnesium and defaults to none.

    Raises:
        InvalidParameterError: If *water_ml* is not positive.
    """
    if water_ml <= 0.0:
        raise InvalidParameterError("water_ml must be > 0.")
    carb_part = (maltodextrin_grams + fructose_grams) * CARB_OSMOTIC_FACTOR
    electrolyte_part = (
        sodium_citrate_grams * 1000.0 * SODIUM_CITRATE_OSMOTIC_FACTOR
        + trace_minerals_mg * TRACE_MINERAL_OSMOTIC_FACTOR
    )
    return int(round_half_up((carb_part + electrolyte_part) / water_ml * 1000.0))


def classify_osmolality(osmolality: float) -> Tonicity:
    """Label an osmolality value.  270 and 290 are both isotonic."""
    if osmolality < ISOTONIC_LOW:
        return Tonicity.HYPOTONIC
    if osmolality > ISOTONIC_HIGH:
        return Tonicity.HYPERTONIC
    return Tonicity.ISOTONIC


def tonicity_scale_factors(
    osmolality: float, target: Tonicity | None
) -> tuple[float, float]:
    """Scale factors that move a mix toward *target*.

    Returns ``(carb_scale, electrolyte_scale)``.  Carbohydrate is reduced
    when the mix is above the target band; sodium citrate and potassium
    are raised when an isotonic target is undershot.  Hypertonic targets,
    no target and a zero estimate leave the mix unchanged.
    """
    if target is None or osmolality <= 0:
        return 1.0, 1.0
    if target is Tonicity.HYPOTONIC and osmolality > ISOTONIC_LOW:
        return ISOTONIC_LOW / osmolality, 1.0
    if target is Tonicity.ISOTONIC:
        if osmolality > ISOTONIC_HIGH:
            return ISOTONIC_HIGH / osmolality, 1.0
        if osmolality < ISOTONIC_LOW:
            return 1.0, ISOTONIC_LOW / osmolality
    return 1.0, 1.0
