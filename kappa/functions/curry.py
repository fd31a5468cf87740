"""Currying and composition.

`curry(fn)` returns a Curried callable that accumulates positional arguments
across calls. While fewer than `arity` arguments have been supplied, each call
returns a new Curried closing over what it has so far; once the count is met
`fn` is invoked. Supplying more than `arity` arguments raises KappaArityError.

    add3 = curry(lambda a, b, c: a + b + c)
    add3(1)(2)(3) == add3(1, 2)(3) == add3(1, 2, 3) == 6
"""

from __future__ import annotations

import inspect
from typing import Callable, Optional

from kappa import Value
from kappa.errors import KappaArityError, KappaTypeError, require_callable

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def required_arity(fn: Callable) -> int:
    """Number of positional parameters without defaults."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        raise KappaTypeError(f"Cannot infer arity of {fn!r}; pass arity explicitly")
    return sum(1 for p in params if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty)


class Curried:
    __slots__ = ("fn", "arity", "args")

    def __init__(self, fn: Callable, arity: int, args: tuple = ()):
        self.fn: Callable = fn
        self.arity: int = arity
        self.args: tuple = args

    def __call__(self, *more: Value) -> Value:
        args = self.args + more
        if len(args) > self.arity:
            extra = list(args[self.arity:])
            raise KappaArityError(f"Too many arguments: {extra}")
        if len(args) < self.arity:
            return Curried(self.fn, self.arity, args)
        return self.fn(*args)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", repr(self.fn))
        return f"<Curried {name} {len(self.args)}/{self.arity}>"


def curry(fn: Callable, arity: Optional[int] = None) -> Curried:
    require_callable(fn, "fn")
    if arity is None:
        arity = required_arity(fn)
    if arity < 0:
        raise KappaArityError(f"Arity must be non-negative, got {arity}")
    return Curried(fn, arity)


def compose(*fns: Callable) -> Callable[[Value], Value]:
    """compose(f, g, h)(x) == f(g(h(x))). With no functions, the identity."""
    for fn in fns:
        require_callable(fn, "composed function")

    def composed(value: Value) -> Value:
        for fn in reversed(fns):
            value = fn(value)
        return value
    return composed
