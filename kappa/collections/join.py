"""joinToString in two shapes: a transform with a default value, and a
nullable transform that falls back to the same default."""

from __future__ import annotations
from typing import Iterable, Optional

from kappa import Transform, Value
from kappa.config import get_join_separator
from kappa.errors import require_callable


def default_transform(item: Value) -> str:
    return str(item).upper()


def join_to_string(
    items: Iterable[Value],
    separator: Optional[str] = None,
    transform: Transform = default_transform,
    prefix: str = "",
    postfix: str = "",
) -> str:
    """Join `transform(item)` for each item with `separator`.

    A separator of None means the configured default (", " unless
    KAPPA_JOIN_SEPARATOR says otherwise).
    """
    require_callable(transform, "transform")
    sep = get_join_separator() if separator is None else separator
    parts = [str(transform(item)) for item in items]
    return prefix + sep.join(parts) + postfix


def join_to_string_nullable(
    items: Iterable[Value],
    separator: Optional[str] = None,
    transform: Optional[Transform] = None,
    prefix: str = "",
    postfix: str = "",
) -> str:
    # None stands in for "no function supplied"
    if transform is None:
        transform = default_transform
    return join_to_string(items, separator, transform, prefix, postfix)
