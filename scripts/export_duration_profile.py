#!/usr/bin/env python
"""Export a ride preset's duration profile to CSV.

The formula is evaluated every half hour from 0.5 h to 8 h for the chosen
preset and the table is written to ``results/duration_profile_<preset>.csv``.

Usage
-----
::

    python scripts/export_duration_profile.py "Gran Fondo"

Requirements
------------
- ``pandas>=2.0.0``, ``numpy>=1.26`` and ``pyyaml>=6.0`` must be installed.
"""

from __future__ import annotations

import os
import sys

# Ensure the project root is on the import path when running as a script.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from ridefuel.config import load_preset  # noqa: E402
from ridefuel.core.sensitivity import (  # noqa: E402
    compute_duration_profile,
    compute_temperature_sensitivity,
)

RESULTS_DIR: str = os.path.join(_project_root, "results")
DEFAULT_PRESET: str = "Endurance"


def _output_path(preset: str) -> str:
    slug = "_".join(preset.lower().split())
    return os.path.join(RESULTS_DIR, f"duration_profile_{slug}.csv")


def main() -> None:
    """Write the duration profile CSV and print a short summary."""
    preset = " ".join(sys.argv[1:]) or DEFAULT_PRESET

    print(f"[1/2] Loading preset '{preset}'")
    params = load_preset(preset)
    profile = compute_duration_profile(params)
    print(f"      {len(profile)} durations evaluated.")
    print()

    print("[2/2] Saving results")
    os.makedirs(RESULTS_DIR, exist_ok=True)
    output_path = _output_path(preset)
    profile.to_csv(output_path, index=False)
    print(f"      Results saved to {output_path}")
    print()

    carb_slope = compute_temperature_sensitivity(params, "carb_grams")
    fluid_slope = compute_temperature_sensitivity(params, "fluid_ml")
    print(f"Carbs  vs temperature: {carb_slope:+.2f} g/°C")
    print(f"Fluid  vs temperature: {fluid_slope:+.1f} ml/°C")
    print(f"Max bottles over grid: {int(profile['bottles_needed'].max())}")


if __name__ == "__main__":
    main()
