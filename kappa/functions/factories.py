"""Function factories: functions that build and return other functions."""

from __future__ import annotations
from typing import Callable

from kappa.types.delivery import Delivery, Order


def make_adder(base: int) -> Callable[[int], int]:
    # `base` is bound at call time; each adder keeps its own value
    def adder(n: int) -> int:
        return base + n
    return adder


def make_multiplier(factor):
    def multiplier(n):
        return factor * n
    return multiplier


def _standard_cost(order: Order) -> float:
    return 1.2 * order.item_count


def _expedited_cost(order: Order) -> float:
    return 6 + 2.1 * order.item_count


def get_shipping_cost_calculator(delivery: Delivery) -> Callable[[Order], float]:
    """Pick a cost strategy for the delivery kind.

    STANDARD:  1.2 per item
    EXPEDITED: 6 flat plus 2.1 per item
    """
    if delivery is Delivery.EXPEDITED:
        return _expedited_cost
    return _standard_cost
