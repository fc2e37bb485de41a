from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from cargo_box.cargo_box import CargoBox
from cargo_box.io.schemas import ManifestSchema
from cargo_box.models import CargoBoxReport
from cargo_box.settings import configure_logging

logger = logging.getLogger(__name__)


def load_input(path: Path) -> list[tuple[Optional[str], Optional[CargoBox]]]:
    """
    Load a manifest file into (box_id, CargoBox) pairs.

    Null box entries are kept as (None, None) so that heaviest_cargo_box
    sees the batch as it was written.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict) or "boxes" not in data:
        raise ValueError("Input must include a 'boxes' array")

    manifest = ManifestSchema.model_validate(data)

    boxes: list[tuple[Optional[str], Optional[CargoBox]]] = []
    for entry in manifest.boxes:
        if entry is None:
            boxes.append((None, None))
            continue
        box = entry.to_cargo_box()
        logger.info("Loaded box %s with %d item(s)", entry.id, box.number_of_items())
        boxes.append((entry.id, box))
    return boxes


def apply_weight_filter(
    boxes: list[tuple[Optional[str], Optional[CargoBox]]],
    max_weight: int,
    in_place: bool = False,
) -> list[tuple[Optional[str], Optional[CargoBox]]]:
    """Restrict every present box to items weighing at most max_weight."""
    filtered: list[tuple[Optional[str], Optional[CargoBox]]] = []
    for box_id, box in boxes:
        if box is None:
            filtered.append((box_id, None))
        elif in_place:
            box.keep_only_items_with(max_weight)
            filtered.append((box_id, box))
        else:
            filtered.append((box_id, box.make_new_cargo_box_with(max_weight)))
    return filtered


def build_report(
    boxes: list[tuple[Optional[str], Optional[CargoBox]]],
    max_weight: Optional[int] = None,
) -> dict[str, Any]:
    reports = [
        CargoBoxReport.from_box(box_id, box).model_dump()
        for box_id, box in boxes
        if box is not None
    ]

    heaviest = CargoBox.heaviest_cargo_box(box for _, box in boxes)
    heaviest_id = None
    for box_id, box in boxes:
        if box is not None and box is heaviest:
            heaviest_id = box_id
            break

    return {
        "boxes": reports,
        "heaviest_box": heaviest_id,
        "max_weight": max_weight,
    }


def describe_validation_error(exc: ValidationError) -> str:
    """One-line summary of a manifest validation failure."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "manifest"
    return f"{exc.error_count()} validation error(s); first at {location}: {first['msg']}"


def write_report(report: dict, path: str) -> None:
    """Write the report as JSON, creating parent folders and overwriting the file."""
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Writing report to %s", output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, sort_keys=True)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="CargoBox report CLI")
    parser.add_argument("--input", required=True, help="Input manifest JSON file")
    parser.add_argument("--output", help="Optional output report JSON file")
    parser.add_argument(
        "--max-weight",
        type=int,
        default=None,
        help="Only report items weighing at most this many grammes",
    )
    parser.add_argument(
        "--keep-only",
        action="store_true",
        help="Filter the loaded boxes in place instead of deriving new boxes",
    )
    args = parser.parse_args(argv)
    if args.keep_only and args.max_weight is None:
        parser.error("--keep-only requires --max-weight")

    configure_logging()

    try:
        boxes = load_input(Path(args.input))
    except ValidationError as exc:
        print(f"error: {describe_validation_error(exc)}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.max_weight is not None:
        boxes = apply_weight_filter(boxes, args.max_weight, in_place=args.keep_only)

    report = build_report(boxes, args.max_weight)
    print(json.dumps(report, indent=2, sort_keys=True))

    if args.output:
        try:
            write_report(report, args.output)
        except OSError as exc:
            print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
