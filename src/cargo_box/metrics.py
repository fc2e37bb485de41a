from __future__ import annotations

from typing import Iterable, Optional

from cargo_box.models import Item


def total_weight(items: Iterable[Item]) -> int:
    return sum(item.weight_in_grammes for item in items)


def average_weight(items: Iterable[Item]) -> float:
    """Mean weight in grammes; -1.0 when there are no items."""
    weights = [item.weight_in_grammes for item in items]
    if not weights:
        return -1.0
    return sum(weights) / len(weights)


def heaviest(items: Iterable[Item]) -> Optional[Item]:
    """First item of maximal weight, or None for no items."""
    greatest: Optional[Item] = None
    for item in items:
        if greatest is None or item > greatest:
            greatest = item
    return greatest
