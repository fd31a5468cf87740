from kappa.scope.combinators import let, run, also, apply, with_, take_if, take_unless
from kappa.scope.mixin import ScopeMixin

__all__ = ["let", "run", "also", "apply", "with_", "take_if", "take_unless", "ScopeMixin"]
