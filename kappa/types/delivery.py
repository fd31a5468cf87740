from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Delivery(Enum):
    STANDARD = "standard"
    EXPEDITED = "expedited"


@dataclass(frozen=True)
class Order:
    item_count: int
