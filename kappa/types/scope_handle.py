"""Scope handles: explicit stand-ins for implicit receivers.

A ScopeHandle is bound to one receiver value and optionally to an `outer`
handle, forming a chain like nested `this` contexts. Attribute access on a
handle resolves against the innermost receiver that has the member, climbing
outward when it does not. A member shadowed by an inner receiver is reached
through its label:

    def outer_block(o):
        def inner_block(i):
            return i.name, i.at("outer").name
        return o.run(child, inner_block, label="inner")

    run(parent, outer_block, label="outer")

Handle-level names (`receiver`, `label`, `outer`, `at`, `run`, `apply`,
`with_`) take precedence over receiver members of the same name; use
`handle.receiver.<name>` to reach those.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from kappa import ScopeBlock, Value
from kappa.errors import KappaUnboundLabel, KappaUnboundMember, require_callable

_MISSING = object()


def _member(obj: Value, name: str) -> Value:
    return getattr(obj, name, _MISSING)


class ScopeHandle:
    """A receiver value plus the chain of enclosing receivers."""

    __slots__ = ("receiver", "label", "outer")

    def __init__(self, receiver: Value, label: Optional[str] = None, outer: Optional[ScopeHandle] = None):
        object.__setattr__(self, "receiver", receiver)
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "outer", outer)

    def _find(self, name: str) -> ScopeHandle | None:
        """Return the innermost handle whose receiver has member `name`, or None."""
        handle = self
        while handle is not None:
            if _member(handle.receiver, name) is not _MISSING:
                return handle
            handle = handle.outer
        return None

    def at(self, label: str) -> Value:
        """Labelled receiver reference: the receiver of the enclosing scope named `label`."""
        handle = self
        while handle is not None:
            if handle.label == label:
                return handle.receiver
            handle = handle.outer
        raise KappaUnboundLabel(f"No enclosing scope labelled {label!r}")

    # Only reached when normal attribute lookup on the handle fails
    def __getattr__(self, name: str) -> Value:
        if name.startswith("__"):
            raise AttributeError(name)
        handle = self._find(name)
        if handle is None:
            raise KappaUnboundMember(f"No receiver in scope has member {name!r}")
        return getattr(handle.receiver, name)

    def __setattr__(self, name: str, value: Value) -> None:
        if name in ScopeHandle.__slots__:
            raise AttributeError(f"ScopeHandle.{name} is read-only")
        handle = self._find(name)
        target = handle.receiver if handle is not None else self.receiver
        setattr(target, name, value)

    # --- Nested scopes ---
    def _nest(self, value: Value, label: Optional[str]) -> ScopeHandle:
        return ScopeHandle(value, label, outer=self)

    def run(self, value: Value, block: ScopeBlock, label: Optional[str] = None) -> Value:
        require_callable(block, "block")
        return block(self._nest(value, label))

    def with_(self, value: Value, block: ScopeBlock, label: Optional[str] = None) -> Value:
        return self.run(value, block, label)

    def apply(self, value: Value, block: ScopeBlock, label: Optional[str] = None) -> Value:
        require_callable(block, "block")
        block(self._nest(value, label))
        return value

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<ScopeHandle chain: ")
            chain = []
            handle = self
            while handle is not None:
                name = handle.label if handle.label is not None else "_"
                chain.append(f"{name}={handle.receiver!r}")
                handle = handle.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
