"""Ride Fuel: a deterministic sports-drink formula engine for cyclists."""

from ridefuel.core.formula import FormulaResult, calculate_formula
from ridefuel.core.params import InvalidParameterError, RideParameters

__version__ = "0.2.0"

__all__ = [
    "FormulaResult",
    "InvalidParameterError",
    "RideParameters",
    "__version__",
    "calculate_formula",
]
