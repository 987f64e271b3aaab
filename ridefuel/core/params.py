"""Ride parameter model for the Ride Fuel formula engine.

A single canonical, duration-based parameter schema.  Enum-valued fields
are tolerant: unknown or missing values fall back to a documented default
so that parameter sets stored by older releases keep working.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)

SCHEMA_VERSION: int = 2


class InvalidParameterError(ValueError):
    """Raised when a ride parameter cannot produce a formula."""


class Level(str, Enum):
    """Three-step scale shared by sweat rate, intensity and tolerances."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class CarbRatioMode(str, Enum):
    """Maltodextrin to fructose split."""

    MALTODEXTRIN_DOMINANT = "maltodextrin_dominant"
    BALANCED = "balanced"
    FRUCTOSE_DOMINANT = "fructose_dominant"


class Tonicity(str, Enum):
    """Tonicity relative to blood plasma."""

    HYPOTONIC = "hypotonic"
    ISOTONIC = "isotonic"
    HYPERTONIC = "hypertonic"


# ---------------------------------------------------------------------------
# Lenient enum parsing
# ---------------------------------------------------------------------------


def _normalise_token(value: Any) -> str:
    return str(value).strip().lower().replace("-", "_").replace(" ", "_")


def parse_level(value: Any, field: str = "level") -> Level:
    """Coerce *value* into a :class:`Level`, defaulting to ``MEDIUM``.

    Args:
        value: Enum member, string (any case) or ``None``.
        field: Field name used in the fallback warning.

    Returns:
        The matching level, or ``Level.MEDIUM`` if unrecognised.
    """
    if isinstance(value, Level):
        return value
    if value is None or value == "":
        return Level.MEDIUM
    try:
        return Level(_normalise_token(value))
    except ValueError:
        logger.warning("Unrecognised %s %r, falling back to 'medium'", field, value)
        return Level.MEDIUM


def parse_carb_ratio_mode(value: Any) -> CarbRatioMode:
    """Coerce *value* into a :class:`CarbRatioMode`.

    Hyphenated spellings (``"maltodextrin-dominant"``) are accepted.
    Unknown values fall back to ``MALTODEXTRIN_DOMINANT``.
    """
    if isinstance(value, CarbRatioMode):
        return value
    if value is None or value == "":
        return CarbRatioMode.MALTODEXTRIN_DOMINANT
    try:
        return CarbRatioMode(_normalise_token(value))
    except ValueError:
        logger.warning(
            "Unrecognised carb_ratio_mode %r, falling back to 'maltodextrin_dominant'",
            value,
        )
        return CarbRatioMode.MALTODEXTRIN_DOMINANT


_TRUE_TOKENS: frozenset[str] = frozenset({"true", "1", "yes", "on"})
_FALSE_TOKENS: frozenset[str] = frozenset({"false", "0", "no", "off"})


def parse_tonicity(value: Any) -> Tonicity | None:
    """Coerce *value* into a target :class:`Tonicity`, or ``None`` for no target.

    ``None``, empty strings and ``"none"`` mean no target.  Unknown values
    also mean no target and are logged.
    """
    if value is None or isinstance(value, Tonicity):
        return value
    token = _normalise_token(value)
    if token in ("", "none"):
        return None
    try:
        return Tonicity(token)
    except ValueError:
        logger.warning("Unrecognised target_tonicity %r, ignoring it", value)
        return None


def parse_flag(value: Any, field: str = "flag") -> bool:
    """Coerce *value* into a bool.

    Strings are matched case-insensitively against ``true/1/yes/on`` and
    ``false/0/no/off``; ``None`` and empty strings are ``False``.
    Unrecognised strings are logged and treated as ``False``.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    token = str(value).strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS or token == "":
        return False
    logger.warning("Unrecognised %s %r, treating it as false", field, value)
    return False


# ---------------------------------------------------------------------------
# Parameter model
# ---------------------------------------------------------------------------

# Stored settings keys (historical camelCase) -> dataclass field names.
_KEY_ALIASES: dict[str, str] = {
    "duration": "duration_hours",
    "durationHours": "duration_hours",
    "temperature": "temperature_celsius",
    "temperatureCelsius": "temperature_celsius",
    "sweatRate": "sweat_rate",
    "bottleSize": "bottle_capacity_ml",
    "bottleCapacityMl": "bottle_capacity_ml",
    "isAdvanced": "advanced",
    "carbRatio": "carb_ratio_mode",
    "carbRatioMode": "carb_ratio_mode",
    "carbAdaptation": "carb_adaptation",
    "caffeineTolerance": "caffeine_tolerance",
    "separateBottles": "separate_bottles",
    "traceElectrolytes": "trace_electrolytes",
    "formulaType": "target_tonicity",
    "targetTonicity": "target_tonicity",
    "schemaVersion": "schema_version",
}

_FIELDS: tuple[str, ...] = (
    "duration_hours",
    "temperature_celsius",
    "sweat_rate",
    "intensity",
    "bottle_capacity_ml",
    "advanced",
    "carb_ratio_mode",
    "carb_adaptation",
    "caffeine_tolerance",
    "separate_bottles",
    "trace_electrolytes",
    "target_tonicity",
    "schema_version",
)


@dataclass(frozen=True)
class RideParameters:
    """Immutable description of a planned ride.

    Attributes:
        duration_hours: Total planned ride time in hours (> 0).
        temperature_celsius: Ambient temperature.  Any real value.
        sweat_rate: Rider sweat rate.
        intensity: Planned ride intensity.
        bottle_capacity_ml: Volume of one bottle in ml (> 0).
        advanced: Enables the extended options below plus osmolality.
        carb_ratio_mode: Maltodextrin/fructose split (advanced only).
        carb_adaptation: Gut training level.  Stored for compatibility;
            it does not modulate the duration-based carbohydrate rate.
        caffeine_tolerance: Caffeine tolerance (advanced only).
        separate_bottles: Split into hydration and fueling bottles
            (advanced only).
        trace_electrolytes: Add potassium, calcium and magnesium
            (advanced only).
        target_tonicity: Rescale the mix toward a tonicity target
            (advanced only; ``None`` leaves the mix untouched).
        schema_version: Parameter schema revision.
    """

    duration_hours: float
    temperature_celsius: float
    sweat_rate: Level = Level.MEDIUM
    intensity: Level = Level.MEDIUM
    bottle_capacity_ml: float = 750.0
    advanced: bool = False
    carb_ratio_mode: CarbRatioMode = CarbRatioMode.MALTODEXTRIN_DOMINANT
    carb_adaptation: Level = Level.MEDIUM
    caffeine_tolerance: Level = Level.MEDIUM
    separate_bottles: bool = False
    trace_electrolytes: bool = False
    target_tonicity: Tonicity | None = None
    schema_version: int = SCHEMA_VERSION

    def __post_init__(self) -> None:
        """Validate numeric fields and normalise enum fields."""
        if not _is_finite_number(self.duration_hours) or self.duration_hours <= 0.0:
            raise InvalidParameterError(
                f"duration_hours must be > 0, got {self.duration_hours!r}."
            )
        if (
            not _is_finite_number(self.bottle_capacity_ml)
            or self.bottle_capacity_ml <= 0.0
        ):
            raise InvalidParameterError(
                f"bottle_capacity_ml must be > 0, got {self.bottle_capacity_ml!r}."
            )
        if not _is_finite_number(self.temperature_celsius):
            raise InvalidParameterError(
                f"temperature_celsius must be a real number, "
                f"got {self.temperature_celsius!r}."
            )

        object.__setattr__(self, "sweat_rate", parse_level(self.sweat_rate, "sweat_rate"))
        object.__setattr__(self, "intensity", parse_level(self.intensity, "intensity"))
        object.__setattr__(
            self, "carb_adaptation", parse_level(self.carb_adaptation, "carb_adaptation")
        )
        object.__setattr__(
            self,
            "caffeine_tolerance",
            parse_level(self.caffeine_tolerance, "caffeine_tolerance"),
        )
        object.__setattr__(
            self, "carb_ratio_mode", parse_carb_ratio_mode(self.carb_ratio_mode)
        )
        object.__setattr__(self, "target_tonicity", parse_tonicity(self.target_tonicity))
        for name in ("advanced", "separate_bottles", "trace_electrolytes"):
            object.__setattr__(self, name, parse_flag(getattr(self, name), name))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RideParameters:
        """Build parameters from a stored settings mapping.

        Both snake_case field names and the camelCase keys written by
        earlier releases are accepted.  Unknown keys are ignored.

        Raises:
            InvalidParameterError: If duration or temperature is missing,
                or if the mapping uses the retired distance-based schema.
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in _FIELDS:
                kwargs[name] = value

        if "duration_hours" not in kwargs:
            if "distance" in data:
                raise InvalidParameterError(
                    "Distance-based settings are no longer supported; "
                    "provide 'duration' in hours."
                )
            raise InvalidParameterError("Settings are missing 'duration'.")
        if "temperature_celsius" not in kwargs:
            raise InvalidParameterError("Settings are missing 'temperature'.")

        for name in ("duration_hours", "temperature_celsius", "bottle_capacity_ml"):
            if name in kwargs:
                kwargs[name] = _to_float(kwargs[name], name)
        kwargs.pop("schema_version", None)
        return cls(**kwargs)

    def to_mapping(self) -> dict[str, Any]:
        """Return the snake_case dict form with enum values as strings."""
        out: dict[str, Any] = {}
        for name in _FIELDS:
            value = getattr(self, name)
            out[name] = value.value if isinstance(value, Enum) else value
        return out


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _to_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name} must be numeric, got {value!r}.") from exc
