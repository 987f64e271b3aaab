"""CLI entrypoint for the Ride Fuel formula engine."""

from __future__ import annotations

import logging
import sys

from ridefuel import __version__
from ridefuel.config import load_presets
from ridefuel.core.formula import FormulaResult, calculate_formula
from ridefuel.core.osmolality import classify_osmolality

DEFAULT_PRESET: str = "Endurance"


def _print_ingredients(result: FormulaResult) -> None:
    print(f"  {'Ingredient':<16}  {'Per bottle':>12}")
    print(f"  {'-' * 16}  {'-' * 12}")
    print(f"  {'Water':<16}  {result.water_amount_ml:>9.0f} ml")
    print(f"  {'Maltodextrin':<16}  {result.maltodextrin_grams:>10.1f} g")
    print(f"  {'Fructose':<16}  {result.fructose_grams:>10.1f} g")
    print(f"  {'Sodium citrate':<16}  {result.sodium_citrate_grams:>10.1f} g")
    print(f"  {'Citric acid':<16}  {result.citric_acid_grams:>10.1f} g")
    print(f"  {'Caffeine':<16}  {result.caffeine_mg:>9d} mg")
    if result.potassium_mg is not None:
        print(f"  {'Potassium':<16}  {result.potassium_mg:>9d} mg")
        print(f"  {'Calcium':<16}  {result.calcium_mg:>9d} mg")
        print(f"  {'Magnesium':<16}  {result.magnesium_mg:>9d} mg")


def main(argv: list[str] | None = None) -> int:
    """Print the drink formula for a named ride preset."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = sys.argv[1:] if argv is None else argv
    preset_name = " ".join(args) if args else DEFAULT_PRESET

    print(f"Ride Fuel Formula Engine v{__version__}")
    print("=" * 56)

    # -- Load presets ---------------------------------------------------------
    presets = load_presets()
    print(f"\n{len(presets)} ride presets loaded")
    for i, name in enumerate(presets, start=1):
        print(f"  P{i:02d}: {name}")

    if preset_name not in presets:
        print(f"\nUnknown preset '{preset_name}'.")
        return 1

    params = presets[preset_name]
    result = calculate_formula(params)

    print(f"\nPreset      : {preset_name}")
    print(f"Duration    : {params.duration_hours:g} h")
    print(f"Temperature : {params.temperature_celsius:g} °C")
    print(f"Intensity   : {params.intensity.value}")
    print(f"Sweat rate  : {params.sweat_rate.value}")
    if params.advanced and params.target_tonicity is not None:
        print(f"Target      : {params.target_tonicity.value}")
    print("-" * 56)

    print(
        f"\nFluid needed: {result.total_fluid_required_ml:.0f} ml "
        f"in {result.bottles_needed} x {result.water_amount_ml:.0f} ml bottle(s)\n"
    )
    _print_ingredients(result)
    print(
        f"\n  Carbs {result.combined_carb_grams:.1f} g, "
        f"{result.total_calories_per_bottle} kcal per bottle"
    )

    if result.osmolality_mosm_per_kg is not None:
        tonicity = classify_osmolality(result.osmolality_mosm_per_kg)
        print(
            f"  Osmolality ~{result.osmolality_mosm_per_kg} mOsm/kg ({tonicity.value})"
        )

    if result.hydration_bottle is not None and result.fueling_bottle is not None:
        hyd = result.hydration_bottle
        fuel = result.fueling_bottle
        print("\nSplit bottles:")
        print(
            f"  Hydration: {hyd.sodium_citrate_grams:.1f} g sodium citrate, "
            f"{hyd.citric_acid_grams:.1f} g citric acid, "
            f"~{hyd.osmolality_mosm_per_kg} mOsm/kg"
        )
        print(
            f"  Fueling  : {fuel.maltodextrin_grams:.1f} g maltodextrin, "
            f"{fuel.fructose_grams:.1f} g fructose, {fuel.caffeine_mg} mg caffeine, "
            f"{fuel.citric_acid_grams:.1f} g citric acid, "
            f"~{fuel.osmolality_mosm_per_kg} mOsm/kg"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
