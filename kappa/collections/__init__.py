"""Collection combinators: eager list helpers, lazy sequences and string joining."""

from kappa.collections.eager import (
    filter_items,
    map_items,
    map_not_none,
    first_or_none,
    for_each,
    as_list,
    EagerList,
)
from kappa.collections.sequence import Sequence, as_sequence
from kappa.collections.join import join_to_string, join_to_string_nullable, default_transform

__all__ = [
    "filter_items",
    "map_items",
    "map_not_none",
    "first_or_none",
    "for_each",
    "as_list",
    "EagerList",
    "Sequence",
    "as_sequence",
    "join_to_string",
    "join_to_string_nullable",
    "default_transform",
]
