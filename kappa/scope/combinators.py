"""Scope combinators.

| Combinator | Block receives              | Returns        |
|------------|-----------------------------|----------------|
| also       | the value                   | the value      |
| apply      | a ScopeHandle for the value | the value      |
| let        | the value                   | block's result |
| run        | a ScopeHandle for the value | block's result |
| with_      | a ScopeHandle for the value | block's result |

`with_` is `run` with the argument order of a free function call; the trailing
underscore avoids the keyword. Errors raised by a block propagate untouched,
and `also`/`apply` never return the receiver after a failed block.
"""

from __future__ import annotations
from typing import Optional

from kappa import Predicate, ScopeBlock, Value
from kappa.errors import require_callable
from kappa.types.scope_handle import ScopeHandle


def let(value: Value, block: ScopeBlock) -> Value:
    require_callable(block, "block")
    return block(value)


def also(value: Value, block: ScopeBlock) -> Value:
    require_callable(block, "block")
    block(value)
    return value


def run(value: Value, block: ScopeBlock, label: Optional[str] = None) -> Value:
    require_callable(block, "block")
    return block(ScopeHandle(value, label))


def with_(value: Value, block: ScopeBlock, label: Optional[str] = None) -> Value:
    return run(value, block, label)


def apply(value: Value, block: ScopeBlock, label: Optional[str] = None) -> Value:
    require_callable(block, "block")
    block(ScopeHandle(value, label))
    return value


def take_if(value: Value, predicate: Predicate) -> Value | None:
    require_callable(predicate, "predicate")
    return value if predicate(value) else None


def take_unless(value: Value, predicate: Predicate) -> Value | None:
    require_callable(predicate, "predicate")
    return None if predicate(value) else value
