"""Lazy sequences.

A Sequence is a description of a pipeline over a source iterable: a tuple of
(kind, fn) stages. Building one with `.filter` / `.map` does no work at all.
Terminal operations (`to_list`, `join_to_string`, `first`, iteration) pull
source elements one at a time through every stage, so for each element the
filter runs and, if it passes, the map runs, before the next element is read.

Usage:
    seq = as_sequence([10, 12, 31, 1, 4]).filter(lambda x: x % 2 == 0).map(show)
    # nothing printed yet
    seq.join_to_string()   # show(10), show(12), show(4) run here
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from kappa import Predicate, Transform, Value
from kappa.collections.join import join_to_string_nullable
from kappa.errors import require_callable

logger = logging.getLogger(__name__)

_FILTER = "filter"
_MAP = "map"

# Marks an element dropped by a filter stage
_SKIP = object()


class Sequence:
    """An immutable, deferred pipeline over `source`."""

    __slots__ = ("source", "stages")

    def __init__(self, source: Iterable[Value], stages: tuple[tuple[str, Transform], ...] = ()):
        self.source: Iterable[Value] = source
        self.stages: tuple[tuple[str, Transform], ...] = stages

    # --- Intermediate operations (deferred) ---
    def filter(self, predicate: Predicate) -> Sequence:
        require_callable(predicate, "predicate")
        return Sequence(self.source, self.stages + ((_FILTER, predicate),))

    def map(self, transform: Transform) -> Sequence:
        require_callable(transform, "transform")
        return Sequence(self.source, self.stages + ((_MAP, transform),))

    # --- Evaluation ---
    def _push(self, item: Value) -> Value:
        """Run one element through every stage; return _SKIP if a filter rejects it."""
        for kind, fn in self.stages:
            if kind == _FILTER:
                if not fn(item):
                    return _SKIP
            else:
                item = fn(item)
        return item

    def __iter__(self) -> Iterator[Value]:
        logger.debug("forcing sequence with %d stage(s)", len(self.stages))
        for item in self.source:
            out = self._push(item)
            if out is not _SKIP:
                yield out

    # --- Terminal operations ---
    def to_list(self) -> list[Value]:
        return list(self)

    def first(self, predicate: Optional[Predicate] = None) -> Value | None:
        """Return the first surviving element (matching `predicate` if given), or None.

        Stops pulling from the source as soon as a match is found.
        """
        if predicate is not None:
            require_callable(predicate, "predicate")
        for item in self:
            if predicate is None or predicate(item):
                return item
        return None

    def join_to_string(self, separator: Optional[str] = None, transform: Optional[Transform] = None,
                       prefix: str = "", postfix: str = "") -> str:
        return join_to_string_nullable(iter(self), separator, transform, prefix, postfix)

    def __repr__(self) -> str:
        kinds = " -> ".join(kind for kind, _ in self.stages) or "identity"
        return f"<Sequence {kinds}>"


def as_sequence(items: Iterable[Value]) -> Sequence:
    return Sequence(items)
