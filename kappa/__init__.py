# Core type aliases for Kappa's function-type vocabulary.
# Values flowing through combinators are plain Python objects; these aliases only
# name the role a callable plays at a given seam.
#
# Naming guidance:
# - Transform: one value in, one value out. May have side effects (logging, tracing).
# - Predicate: one value in, truthiness out. Used by filters and validators.
# - ScopeBlock: the body handed to a scope combinator.

from typing import Any, Callable

Value = Any

Transform = Callable[[Value], Value]
Predicate = Callable[[Value], bool]
ScopeBlock = Callable[..., Value]
