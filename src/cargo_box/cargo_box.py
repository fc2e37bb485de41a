"""CargoBox: a growable collection of Items with aggregate queries and weight filters."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from cargo_box.metrics import average_weight, heaviest, total_weight
from cargo_box.models import Item

logger = logging.getLogger(__name__)


class PreconditionViolation(ValueError):
    """Raised when a caller passes None where a batch is required."""


class CargoBox:
    """
    Holds zero or more Items and answers queries about them.

    Items can be added during the lifetime of a box, the box can be emptied,
    filtered in place, or copied with only the Items up to a certain weight.

    Invariant: the internal list never contains None. Absent items passed
    to the constructor, add() or add_all() are skipped, never stored.
    """

    def __init__(self, items: Optional[Iterable[Optional[Item]]] = None) -> None:
        self._items: list[Item] = []
        if items is not None:
            self.add_all(items)

    # Modifiers

    def add(self, item: Optional[Item]) -> bool:
        """Append item if it is not None. Returns True if it was added."""
        if item is None:
            logger.debug("Skipped absent item")
            return False
        self._items.append(item)
        return True

    def add_all(self, items: Iterable[Optional[Item]]) -> bool:
        """
        Add every non-None element of items, in order.

        Returns True if at least one element was added.
        """
        if items is None:
            raise PreconditionViolation("items must not be None (it may contain None)")

        added_any = False
        for item in items:
            if self.add(item):
                added_any = True
        return added_any

    def empty(self) -> None:
        self._items = []

    def keep_only_items_with(self, max_item_weight_in_grammes: int) -> None:
        """Keep exactly the Items weighing at most max_item_weight_in_grammes."""
        kept = [i for i in self._items if i.weight_in_grammes <= max_item_weight_in_grammes]
        dropped = len(self._items) - len(kept)
        if dropped:
            logger.debug("Dropped %d item(s) heavier than %dg", dropped, max_item_weight_in_grammes)
        self._items = kept

    # Accessors

    def number_of_items(self) -> int:
        return len(self._items)

    def total_weight_in_grammes(self) -> int:
        return total_weight(self._items)

    def average_weight_in_grammes(self) -> float:
        """
        Average weight of the Items in this box, or -1.0 if it holds none.

        For a box with ("clock", 400) and ("textbook", 395) the result is 397.5.
        """
        return average_weight(self._items)

    def greatest_item(self) -> Optional[Item]:
        """
        Greatest Item according to the natural ordering of Item (by weight).

        Returns None for an empty box. Among equally heavy Items the one
        added first is returned.
        """
        return heaviest(self._items)

    def make_new_cargo_box_with(self, max_item_weight_in_grammes: int) -> CargoBox:
        """New box with the Items weighing at most max_item_weight_in_grammes. Does not modify this box."""
        new_box = CargoBox()
        for item in self._items:
            if item.weight_in_grammes <= max_item_weight_in_grammes:
                new_box.add(item)
        return new_box

    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __str__(self) -> str:
        # e.g. "[(Pen, 15g), (Letter, 20g), (Pen, 15g)]", "[]" when empty
        return "[" + ", ".join(str(item) for item in self._items) + "]"

    def __repr__(self) -> str:
        return f"CargoBox({self._items!r})"

    # Class methods

    @staticmethod
    def heaviest_cargo_box(boxes: Iterable[Optional[CargoBox]]) -> Optional[CargoBox]:
        """
        Return the CargoBox with the highest total weight.

        Entries may be None and are ignored. An empty box weighs 0 and still
        beats no box at all. Among boxes of equal weight the first one wins.
        Returns None if there is no non-None entry.
        """
        if boxes is None:
            raise PreconditionViolation("boxes must not be None (it may contain None)")

        heaviest_box: Optional[CargoBox] = None
        max_weight = 0
        for box in boxes:
            if box is None:
                logger.debug("Skipped absent cargo box")
                continue
            weight = box.total_weight_in_grammes()
            if heaviest_box is None or weight > max_weight:
                heaviest_box = box
                max_weight = weight
        return heaviest_box
