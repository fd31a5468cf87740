"""Early exit from blocks applied across a traversal.

Two flavours:

- Non-local: `returning(body)` hands `body` a return function `ret`. Calling
  `ret(v)` anywhere below, including inside a callback passed to a traversal,
  unwinds the traversal and makes `returning` produce `v`:

      returning(lambda ret: for_each(people, lambda p: p.name == "Alice" and ret(p)))

- Local (labelled): `for_each_labeled(items, block)` calls `block(item, label)`.
  `label.exit()` ends work on the current element only; the traversal moves on
  to the next element. A plain `return` from the block behaves the same way.

Both are implemented with private exceptions caught at the owning boundary,
in the same way as escape continuations: the signal carries the identity of the
boundary that raised it, and boundaries re-raise signals that are not theirs.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from kappa import Value
from kappa.errors import KappaEscapeError, require_callable

logger = logging.getLogger(__name__)


class NonLocalReturn(Exception):
    """Internal signal: return `value` from the `returning` call that owns `boundary`."""

    def __init__(self, boundary: Any, value: Value):
        super().__init__("Non-local return")
        self.boundary: Any = boundary
        self.value: Value = value


class LocalReturn(Exception):
    """Internal signal: stop processing the current element of `label`'s traversal."""

    def __init__(self, label: Label):
        super().__init__(f"Local return@{label.name}")
        self.label: Label = label


class _Boundary:
    __slots__ = ("active",)

    def __init__(self):
        self.active = True


def returning(body: Callable[[Callable[..., None]], Value]) -> Value:
    """Run `body(ret)`; `ret(value)` returns `value` from this call immediately.

    If `body` completes normally its result is returned. Calling `ret` after
    this call has finished raises KappaEscapeError.
    """
    require_callable(body, "body")
    boundary = _Boundary()

    def ret(value: Value = None) -> None:
        if not boundary.active:
            raise KappaEscapeError("return function used outside its boundary")
        raise NonLocalReturn(boundary, value)

    try:
        return body(ret)
    except NonLocalReturn as ex:
        if ex.boundary is boundary:
            logger.debug("non-local return caught at boundary with %r", ex.value)
            return ex.value
        raise
    finally:
        boundary.active = False


class Label:
    """A named traversal. `exit()` abandons the current element of that traversal."""

    __slots__ = ("name", "active")

    def __init__(self, name: str):
        self.name = name
        self.active = True

    def exit(self) -> None:
        if not self.active:
            raise KappaEscapeError(f"exit@{self.name} used after its traversal finished")
        raise LocalReturn(self)

    def __repr__(self) -> str:
        return f"Label({self.name!r})"


def for_each_labeled(items: Iterable[Value], block: Callable[[Value, Label], Any], label: str = "forEach") -> None:
    require_callable(block, "block")
    lbl = Label(label)
    try:
        for item in items:
            try:
                block(item, lbl)
            except LocalReturn as ex:
                if ex.label is not lbl:
                    raise
                logger.debug("local return@%s on %r", label, item)
    finally:
        lbl.active = False
