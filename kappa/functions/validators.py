"""Tagged validator dispatch.

A ValidatorRegistry maps a variant tag to exactly one predicate. Lookups are
total: an unknown tag resolves to a predicate that is always False, it never
raises.
"""

from __future__ import annotations

import logging
from typing import Iterator

from kappa import Predicate, Value
from kappa.errors import KappaTypeError, require_callable
from kappa.types.blocks import TextBlock, ImageBlock

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = ".jpg"


def always_false(_: Value) -> bool:
    return False


def _tag_of(key) -> str | None:
    # accept either a tag string or a variant class carrying `tag`
    return key if isinstance(key, str) else getattr(key, "tag", None)


class ValidatorRegistry:
    """Mapping from discriminator tag to predicate with a constant-False default."""

    __slots__ = ("_validators",)

    def __init__(self):
        self._validators: dict[str, Predicate] = {}

    def register(self, tag, predicate: Predicate) -> None:
        require_callable(predicate, "predicate")
        tag = _tag_of(tag)
        if tag is None:
            raise KappaTypeError("validator tag must be a string or a variant class with a tag")
        if tag in self._validators:
            logger.debug("replacing validator for tag %r", tag)
        self._validators[tag] = predicate

    def validator_for(self, tag) -> Predicate:
        tag = _tag_of(tag)
        predicate = self._validators.get(tag) if isinstance(tag, str) else None
        if predicate is None:
            logger.debug("no validator for tag %r, using default", tag)
            return always_false
        return predicate

    def validate(self, value: Value) -> bool:
        """Dispatch on `value.tag`; values without a tag are invalid."""
        tag = getattr(value, "tag", None)
        if tag is None:
            return False
        return bool(self.validator_for(tag)(value))

    def tags(self) -> list[str]:
        return list(self._validators)

    def __contains__(self, tag) -> bool:
        return _tag_of(tag) in self._validators

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)


def is_valid_text(block: TextBlock) -> bool:
    # a validator only accepts its own variant
    if not isinstance(block, TextBlock):
        return False
    return block.text.strip() != ""


def is_valid_image(block: ImageBlock) -> bool:
    if not isinstance(block, ImageBlock):
        return False
    return block.url.endswith(IMAGE_SUFFIX)


default_registry = ValidatorRegistry()
default_registry.register(TextBlock, is_valid_text)
default_registry.register(ImageBlock, is_valid_image)


def get_validator_for(tag) -> Predicate:
    return default_registry.validator_for(tag)
