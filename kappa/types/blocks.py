"""Block variants used as example payloads for tagged validator dispatch.

Each variant carries a class-level `tag`; the validator registry is keyed by it.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class TextBlock:
    text: str
    tag: ClassVar[str] = "text"


@dataclass(frozen=True)
class ImageBlock:
    url: str
    tag: ClassVar[str] = "image"


Block = Union[TextBlock, ImageBlock]
