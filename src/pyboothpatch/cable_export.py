"""Cable schedule CSV: one row per cable with both endpoints spelled out."""

import csv as _csv
import os
from collections.abc import Sequence

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.core import Cable, PlacedItem
from pyboothpatch.system.connections import describe_end

UNMANAGED = "UNMANAGED"

CSV_COLUMNS = [
    "cable_des",
    "category",
    "comp_des_1",
    "manufacturer_1",
    "model_1",
    "pin_1",
    "label_1",
    "gender_1",
    "comp_des_2",
    "manufacturer_2",
    "model_2",
    "pin_2",
    "label_2",
    "gender_2",
]

_EMPTY_END = {
    "manufacturer_2": "",
    "model_2": "",
    "pin_2": "",
    "label_2": "",
    "gender_2": "",
}


def _end_columns(end, n: int) -> dict:
    return {
        f"comp_des_{n}": end.instance_id,
        f"manufacturer_{n}": end.manufacturer,
        f"model_{n}": end.model,
        f"pin_{n}": end.port_id,
        f"label_{n}": end.label,
        f"gender_{n}": end.gender,
    }


def export_cable_csv(
    cables: Sequence[Cable],
    items: Sequence[PlacedItem],
    output_path: str,
    catalog: Catalog | None = None,
) -> tuple[str, int]:
    """Write a cable schedule for ``cables``.

    Each end is listed with its device manufacturer and model, port id,
    panel label and socket gender. Cables ending at an unmanaged sink have
    ``UNMANAGED`` as their destination designation and blank destination
    columns.

    Args:
        cables: Cables to list, in order.
        items: Placed items, used to resolve each endpoint's device.
        output_path: Path for the output CSV file.
        catalog: Catalog to resolve devices and ports against.

    Returns:
        (csv_path, cable_count)
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    items_by_id = {item.instance_id: item for item in items}

    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)

    with open(output_path, "w", newline="") as f:
        writer = _csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for cable in cables:
            row = {"cable_des": cable.id, "category": cable.category}
            origin = describe_end(
                cable.from_instance_id, cable.from_port_id, items_by_id, catalog
            )
            row.update(_end_columns(origin, 1))
            if cable.to_instance_id is None:
                row["comp_des_2"] = UNMANAGED
                row.update(_EMPTY_END)
            else:
                destination = describe_end(
                    cable.to_instance_id, cable.to_port_id or "", items_by_id, catalog
                )
                row.update(_end_columns(destination, 2))
            writer.writerow(row)

    return output_path, len(cables)
