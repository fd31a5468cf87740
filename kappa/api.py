"""Flat import surface for the whole library."""

from kappa.collections import (
    filter_items,
    map_items,
    map_not_none,
    first_or_none,
    for_each,
    as_list,
    as_sequence,
    join_to_string,
    join_to_string_nullable,
)
from kappa.functions import (
    make_adder,
    make_multiplier,
    get_validator_for,
    get_shipping_cost_calculator,
    ValidatorRegistry,
    curry,
    compose,
)
from kappa.scope import let, run, also, apply, with_, take_if, take_unless, ScopeMixin
from kappa.control import returning, for_each_labeled
from kappa.resources import use, using

__all__ = [
    "filter_items",
    "map_items",
    "map_not_none",
    "first_or_none",
    "for_each",
    "as_list",
    "as_sequence",
    "join_to_string",
    "join_to_string_nullable",
    "make_adder",
    "make_multiplier",
    "get_validator_for",
    "get_shipping_cost_calculator",
    "ValidatorRegistry",
    "curry",
    "compose",
    "let",
    "run",
    "also",
    "apply",
    "with_",
    "take_if",
    "take_unless",
    "ScopeMixin",
    "returning",
    "for_each_labeled",
    "use",
    "using",
]
