"""Method forms of the scope combinators, for classes that want `obj.run(...)` style calls."""

from __future__ import annotations
from typing import Optional

from kappa import Predicate, ScopeBlock, Value
from kappa.scope import combinators


class ScopeMixin:
    """Adds let/run/also/apply/take_if/take_unless as methods bound to `self`."""

    __slots__ = ()

    def let(self, block: ScopeBlock) -> Value:
        return combinators.let(self, block)

    def run(self, block: ScopeBlock, label: Optional[str] = None) -> Value:
        return combinators.run(self, block, label)

    def also(self, block: ScopeBlock):
        return combinators.also(self, block)

    def apply(self, block: ScopeBlock, label: Optional[str] = None):
        return combinators.apply(self, block, label)

    def take_if(self, predicate: Predicate):
        return combinators.take_if(self, predicate)

    def take_unless(self, predicate: Predicate):
        return combinators.take_unless(self, predicate)
