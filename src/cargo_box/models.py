from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .cargo_box import CargoBox


class Item(BaseModel):
    """Item model with a name and a weight (in grammes).

    Natural ordering is given by weight only; equality stays field-based.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the item")
    weight_in_grammes: int = Field(description="Weight of the item in grammes")

    def compare_to(self, other: Item) -> int:
        """Negative, zero or positive as this item is lighter, equal or heavier."""
        return (self.weight_in_grammes > other.weight_in_grammes) - (
            self.weight_in_grammes < other.weight_in_grammes
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"({self.name}, {self.weight_in_grammes}g)"


class CargoBoxReport(BaseModel):
    """Snapshot of the aggregate queries of one CargoBox."""

    box_id: str = Field(description="Identifier of the reported box")
    number_of_items: int = Field(ge=0)
    total_weight_in_grammes: int
    # -1.0 when the box holds no items
    average_weight_in_grammes: float
    greatest_item: Optional[Item] = None
    rendered: str = Field(description="Text rendering of the box contents")

    @classmethod
    def from_box(cls, box_id: str, box: CargoBox) -> CargoBoxReport:
        return cls(
            box_id=box_id,
            number_of_items=box.number_of_items(),
            total_weight_in_grammes=box.total_weight_in_grammes(),
            average_weight_in_grammes=box.average_weight_in_grammes(),
            greatest_item=box.greatest_item(),
            rendered=str(box),
        )
