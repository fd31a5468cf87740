from kappa.functions.factories import make_adder, make_multiplier, get_shipping_cost_calculator
from kappa.functions.validators import ValidatorRegistry, get_validator_for, default_registry
from kappa.functions.curry import curry, compose, Curried

__all__ = [
    "make_adder",
    "make_multiplier",
    "get_shipping_cost_calculator",
    "ValidatorRegistry",
    "get_validator_for",
    "default_registry",
    "curry",
    "compose",
    "Curried",
]
