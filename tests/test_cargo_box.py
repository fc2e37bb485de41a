from __future__ import annotations

import logging

import pytest

from cargo_box.cargo_box import CargoBox, PreconditionViolation
from cargo_box.models import Item

PEN = Item(name="Pen", weight_in_grammes=15)
LETTER = Item(name="Letter", weight_in_grammes=20)
CLOCK = Item(name="clock", weight_in_grammes=400)
TEXTBOOK = Item(name="textbook", weight_in_grammes=395)


def weights(box: CargoBox) -> list[int]:
    return [item.weight_in_grammes for item in box]


def test_empty_box_queries() -> None:
    """Test the sentinels of an empty box."""
    box = CargoBox()

    assert box.number_of_items() == 0
    assert len(box) == 0
    assert box.total_weight_in_grammes() == 0
    assert box.average_weight_in_grammes() == -1.0
    assert box.greatest_item() is None
    assert str(box) == "[]"


def test_batch_constructor_skips_none() -> None:
    """Test the Pen/Letter/None/Pen example."""
    items = [PEN, LETTER, None, PEN]
    box = CargoBox(items)

    assert box.number_of_items() == 3
    assert str(box) == "[(Pen, 15g), (Letter, 20g), (Pen, 15g)]"
    assert None not in box.items()


def test_batch_constructor_does_not_alias_input() -> None:
    """Test that later changes to the batch do not leak into the box."""
    items = [PEN, LETTER]
    box = CargoBox(items)

    items.append(CLOCK)
    items[0] = None

    assert items == [None, LETTER, CLOCK]
    assert box.items() == (PEN, LETTER)


def test_add_returns_whether_item_was_stored() -> None:
    box = CargoBox()

    assert box.add(PEN) is True
    assert box.add(None) is False
    assert box.number_of_items() == 1


def test_add_all_reports_any_added() -> None:
    """Test add_all returns True iff at least one non-None element exists."""
    box = CargoBox()

    assert box.add_all([None, None]) is False
    assert box.add_all([]) is False
    assert box.add_all([None, PEN, None, LETTER]) is True
    assert box.items() == (PEN, LETTER)


def test_add_all_rejects_none_batch() -> None:
    with pytest.raises(PreconditionViolation):
        CargoBox().add_all(None)


def test_add_all_accepts_generators() -> None:
    box = CargoBox(item for item in (PEN, None, CLOCK))
    assert box.items() == (PEN, CLOCK)


def test_count_tracks_adds_and_removals() -> None:
    """Test count equals present items added minus those filtered or emptied."""
    box = CargoBox()
    for item in [PEN, None, LETTER, None, CLOCK, TEXTBOOK]:
        box.add(item)
    assert box.number_of_items() == 4

    box.keep_only_items_with(100)
    assert box.number_of_items() == 2

    box.empty()
    assert box.number_of_items() == 0


def test_empty_is_idempotent() -> None:
    box = CargoBox([PEN, LETTER])

    box.empty()
    assert box.number_of_items() == 0
    box.empty()
    assert box.number_of_items() == 0
    assert str(box) == "[]"


def test_empty_does_not_affect_derived_boxes() -> None:
    box = CargoBox([PEN, LETTER, CLOCK])
    light = box.make_new_cargo_box_with(20)

    box.empty()

    assert light.items() == (PEN, LETTER)


def test_total_and_average_weight() -> None:
    """Test the clock/textbook example."""
    box = CargoBox([CLOCK, TEXTBOOK])

    assert box.total_weight_in_grammes() == 795
    assert box.average_weight_in_grammes() == 397.5
    assert isinstance(box.average_weight_in_grammes(), float)


def test_negative_weights_are_summed() -> None:
    box = CargoBox([PEN, Item(name="Balloon", weight_in_grammes=-5)])

    assert box.total_weight_in_grammes() == 10
    assert box.average_weight_in_grammes() == 5.0


def test_greatest_item() -> None:
    box = CargoBox([PEN, CLOCK, LETTER, TEXTBOOK])
    assert box.greatest_item() is CLOCK


def test_greatest_item_tie_returns_first_added() -> None:
    """Test the deterministic tie break of greatest_item."""
    ink = Item(name="Ink", weight_in_grammes=20)
    box = CargoBox([PEN, LETTER, ink])

    assert box.greatest_item() is LETTER


def test_keep_only_items_with_keeps_ordered_subsequence() -> None:
    """Test in-place filtering keeps items <= max weight, in order."""
    box = CargoBox([CLOCK, PEN, TEXTBOOK, LETTER, PEN])

    box.keep_only_items_with(395)

    assert box.items() == (PEN, TEXTBOOK, LETTER, PEN)
    assert weights(box) == [15, 395, 20, 15]


def test_keep_only_items_with_can_drop_everything() -> None:
    box = CargoBox([CLOCK, TEXTBOOK])

    box.keep_only_items_with(0)

    assert box.number_of_items() == 0
    assert box.average_weight_in_grammes() == -1.0


def test_make_new_cargo_box_with_does_not_mutate() -> None:
    """Test the copy filter leaves the source box unchanged."""
    box = CargoBox([CLOCK, PEN, TEXTBOOK, LETTER])

    for threshold in (-1, 0, 15, 20, 395, 400, 10_000):
        new_box = box.make_new_cargo_box_with(threshold)
        assert new_box is not box
        assert box.number_of_items() == 4
        assert all(item.weight_in_grammes <= threshold for item in new_box)

    assert str(box) == "[(clock, 400g), (Pen, 15g), (textbook, 395g), (Letter, 20g)]"
    assert box.make_new_cargo_box_with(20).items() == (PEN, LETTER)


def test_new_box_is_independent() -> None:
    box = CargoBox([PEN, LETTER])
    new_box = box.make_new_cargo_box_with(100)

    new_box.add(CLOCK)

    assert box.number_of_items() == 2
    assert new_box.number_of_items() == 3


def test_box_shares_item_references() -> None:
    """Test that boxes reference, not copy, the same Items."""
    first = CargoBox([PEN])
    second = CargoBox(first)

    assert second.items()[0] is PEN


def test_iteration_is_a_snapshot() -> None:
    box = CargoBox([PEN, LETTER])

    for item in box:
        box.add(item)

    assert box.number_of_items() == 4


def test_repr_lists_items() -> None:
    assert repr(CargoBox()) == "CargoBox([])"
    assert repr(CargoBox([PEN])).startswith("CargoBox([Item(")


def test_skipped_items_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="cargo_box.cargo_box"):
        CargoBox([None, PEN])

    assert "Skipped absent item" in caplog.text
