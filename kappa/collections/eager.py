"""Eager collection combinators.

Every function here walks its input once, in order, and returns a fresh list.
Inputs are never mutated. If a predicate or transform raises, the error
propagates as-is and no partial result is returned.
"""

from __future__ import annotations
from typing import Iterable, Optional

from kappa import Predicate, Transform, Value
from kappa.collections.join import join_to_string_nullable
from kappa.errors import require_callable


def filter_items(items: Iterable[Value], predicate: Predicate) -> list[Value]:
    require_callable(predicate, "predicate")
    result = []
    for item in items:
        if predicate(item):
            result.append(item)
    return result


def map_items(items: Iterable[Value], transform: Transform) -> list[Value]:
    require_callable(transform, "transform")
    result = []
    for item in items:
        result.append(transform(item))
    return result


def map_not_none(items: Iterable[Value], transform: Transform) -> list[Value]:
    """Like map_items, dropping results that are None."""
    require_callable(transform, "transform")
    result = []
    for item in items:
        value = transform(item)
        if value is not None:
            result.append(value)
    return result


def first_or_none(items: Iterable[Value], predicate: Optional[Predicate] = None) -> Value | None:
    if predicate is not None:
        require_callable(predicate, "predicate")
    for item in items:
        if predicate is None or predicate(item):
            return item
    return None


def for_each(items: Iterable[Value], action: Transform) -> None:
    """Call `action` on every item. A plain `return` inside the action only ends that call."""
    require_callable(action, "action")
    for item in items:
        action(item)


class EagerList:
    """A list-backed pipeline where each stage runs to completion before the next.

    `.filter` and `.map` build the full intermediate list at the call site.
    """

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Value]):
        self.items: list[Value] = list(items)

    def filter(self, predicate: Predicate) -> EagerList:
        return EagerList(filter_items(self.items, predicate))

    def map(self, transform: Transform) -> EagerList:
        return EagerList(map_items(self.items, transform))

    def first(self, predicate: Optional[Predicate] = None) -> Value | None:
        return first_or_none(self.items, predicate)

    def to_list(self) -> list[Value]:
        return list(self.items)

    def join_to_string(self, separator: Optional[str] = None, transform: Optional[Transform] = None,
                       prefix: str = "", postfix: str = "") -> str:
        return join_to_string_nullable(self.items, separator, transform, prefix, postfix)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"EagerList({self.items!r})"


def as_list(items: Iterable[Value]) -> EagerList:
    return EagerList(items)
