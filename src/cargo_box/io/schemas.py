"""Data schemas for the cargo manifest file."""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, model_validator

from cargo_box.cargo_box import CargoBox
from cargo_box.models import Item


class ItemSchema(BaseModel):
    """Schema for an item."""
    name: str = Field(description="Name of the item")
    # strict: rejects true/false and numeric strings
    weight_in_grammes: StrictInt = Field(description="Weight of the item in grammes")

    def to_item(self) -> Item:
        return Item(name=self.name, weight_in_grammes=self.weight_in_grammes)


class CargoBoxSchema(BaseModel):
    """Schema for a cargo box; null items are allowed and skipped."""
    id: str = Field(description="Identifier of the box")
    items: List[Optional[ItemSchema]] = Field(default_factory=list)

    def to_cargo_box(self) -> CargoBox:
        return CargoBox(None if i is None else i.to_item() for i in self.items)


class ManifestSchema(BaseModel):
    """Schema for a manifest; null boxes are allowed, box ids must be unique."""
    boxes: List[Optional[CargoBoxSchema]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_box_ids(self) -> "ManifestSchema":
        seen: set[str] = set()
        for box in self.boxes:
            if box is None:
                continue
            if box.id in seen:
                raise ValueError(f"Duplicate box id '{box.id}'")
            seen.add(box.id)
        return self
