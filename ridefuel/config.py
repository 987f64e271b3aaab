"""Configuration loader for the Ride Fuel formula engine.

Ride presets live in a YAML file.  Loading one yields a
:class:`RideParameters` that the caller passes to ``calculate_formula``;
the engine itself never reads configuration.
"""

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from ridefuel.core.params import InvalidParameterError, RideParameters

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
PRESETS_PATH: Path = DATA_DIR / "ride_presets.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = ("name", "duration", "temperature")

_NUMERIC_FIELDS: tuple[str, ...] = ("duration", "temperature", "bottleSize")


def parameters_from_settings(settings: Mapping[str, Any]) -> RideParameters:
    """Build ride parameters from a stored settings mapping.

    Accepts the camelCase keys written by earlier releases as well as
    snake_case field names.

    Raises:
        InvalidParameterError: If the mapping cannot produce valid parameters.
    """
    return RideParameters.from_mapping(settings)


def load_presets(path: Path | None = None) -> dict[str, RideParameters]:
    """Load named ride presets from a YAML file.

    Args:
        path: Optional override for the presets file path.

    Returns:
        Mapping from preset name to :class:`RideParameters`, in file order.

    Raises:
        FileNotFoundError: If the presets file does not exist.
        ValueError: If any entry is missing fields, has non-numeric values,
            duplicates a name or holds invalid parameters.
    """
    presets_path = path or PRESETS_PATH
    if not presets_path.exists():
        raise FileNotFoundError(f"Presets file not found: {presets_path}")

    with open(presets_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    entries: list[dict] = data.get("presets") or []
    presets: dict[str, RideParameters] = {}

    for idx, entry in enumerate(entries):
        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Preset entry {idx} ({entry.get('name', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        name = str(entry["name"]).strip()
        if not name:
            raise ValueError(f"Preset entry {idx} has an empty name")
        if name in presets:
            raise ValueError(f"Preset entry {idx}: duplicate name '{name}'")

        # --- Validate numeric fields ---
        for field in _NUMERIC_FIELDS:
            if field not in entry:
                continue
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Preset entry {idx} ({name}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )

        try:
            presets[name] = parameters_from_settings(entry)
        except InvalidParameterError as exc:
            raise ValueError(f"Preset entry {idx} ({name}): {exc}") from exc

    logger.info("Loaded %d ride preset(s) from %s", len(presets), presets_path)
    return presets


def load_preset(name: str, path: Path | None = None) -> RideParameters:
    """Return a single preset by name.

    Raises:
        KeyError: If no preset has that name.
    """
    presets = load_presets(path)
    if name not in presets:
        available = ", ".join(presets) or "<none>"
        raise KeyError(f"Unknown preset '{name}'. Available: {available}")
    return presets[name]
