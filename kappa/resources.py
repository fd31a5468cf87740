"""Scoped resources: acquire, use, and always release.

`use(resource, block)` calls `block(resource)` and then `resource.close()`
exactly once, whether the block returned or raised. When the block raised and
`close()` raises too, the block's error is the one propagated and the close
failure is attached to it as `__context__`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Protocol

from kappa import Value
from kappa.errors import KappaTypeError, require_callable

logger = logging.getLogger(__name__)


class Closeable(Protocol):
    def close(self) -> None: ...


def _check_closeable(resource: Value) -> None:
    if not callable(getattr(resource, "close", None)):
        raise KappaTypeError(f"{type(resource).__name__} has no close() method")


def use(resource: Closeable, block: Callable[[Closeable], Value]) -> Value:
    _check_closeable(resource)
    require_callable(block, "block")
    try:
        result = block(resource)
    except BaseException as block_error:
        try:
            resource.close()
        except Exception:
            logger.debug("close() failed after block error on %r", resource)
            raise block_error
        raise
    resource.close()
    logger.debug("released %r", resource)
    return result


@contextmanager
def using(resource: Closeable) -> Iterator[Closeable]:
    """Context-manager form of `use`."""
    _check_closeable(resource)
    try:
        yield resource
    finally:
        resource.close()
        logger.debug("released %r", resource)
