from __future__ import annotations

from cargo_box.cargo_box import CargoBox
from cargo_box.models import Item


def run_case(label: str, box: CargoBox) -> None:
    print("\n" + "=" * 60)
    print(f"📦 CARGO BOX {label}: {box}")

    greatest = box.greatest_item()

    print("\n📊 WEIGHTS:")
    print(f"  Items          : {box.number_of_items()}")
    print(f"  Total weight   : {box.total_weight_in_grammes()}g")
    print(f"  Average weight : {box.average_weight_in_grammes():.2f}g")
    print(f"  Greatest item  : {greatest if greatest is not None else '(none)'}")


def main() -> None:
    pen = Item(name="Pen", weight_in_grammes=15)
    letter = Item(name="Letter", weight_in_grammes=20)

    boxes = {
        "A": CargoBox([pen, letter, None, pen]),
        "B": CargoBox([
            Item(name="clock", weight_in_grammes=400),
            Item(name="textbook", weight_in_grammes=395),
        ]),
        "C": CargoBox(),
    }

    for label, box in boxes.items():
        run_case(label, box)

    light = boxes["B"].make_new_cargo_box_with(399)
    run_case("B (<= 399g)", light)

    heaviest = CargoBox.heaviest_cargo_box([*boxes.values(), None])
    print("\n🏋️ Heaviest box:", heaviest)


if __name__ == "__main__":
    main()
