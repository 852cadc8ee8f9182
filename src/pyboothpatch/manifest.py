"""Bill of materials for a booth: one row per device model and cable type."""

from __future__ import annotations

from collections.abc import Sequence

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.constants import (
    CableCategory,
    ConnectorKind,
    ManifestCategory,
    ManifestNames,
)
from pyboothpatch.model.core import Cable, ManifestRow, PlacedItem


def _is_xlr_run(cable: Cable, items_by_id: dict[str, PlacedItem], catalog: Catalog) -> bool:
    """An audio cable is XLR when its origin port is; anything unresolvable is RCA."""
    origin = items_by_id.get(cable.from_instance_id)
    definition = catalog.find(origin.device_id) if origin else None
    if definition is None:
        return False
    port = definition.find_port(cable.from_port_id)
    return port is not None and port.kind == ConnectorKind.XLR


def generate_manifest(
    items: Sequence[PlacedItem],
    cables: Sequence[Cable],
    catalog: Catalog | None = None,
) -> list[ManifestRow]:
    """
    Aggregate devices and cables into manifest rows.

    Devices are grouped by model name in first-seen order (unknown devices
    are listed under their id); their details carry the manufacturer. Cable
    rows follow in a fixed order: power, data, RCA pairs, XLR, ground.
    Rows with a zero count are omitted.

    Args:
        items: Placed items.
        cables: Cables, typically from ``generate_cables()``.
        catalog: Catalog to resolve devices and ports against.

    Returns:
        Manifest rows.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    rows: list[ManifestRow] = []

    device_counts: dict[str, int] = {}
    manufacturers: dict[str, str] = {}
    for item in items:
        definition = catalog.find(item.device_id)
        name = definition.model if definition else item.device_id
        device_counts[name] = device_counts.get(name, 0) + 1
        manufacturers.setdefault(name, definition.manufacturer if definition else "")
    for name, count in device_counts.items():
        rows.append(
            ManifestRow(name, count, ManifestCategory.DEVICE, manufacturers[name])
        )

    items_by_id = {item.instance_id: item for item in items}
    power = data = rca = xlr = ground = 0
    for cable in cables:
        if cable.category == CableCategory.POWER:
            power += 1
        elif cable.category == CableCategory.DATA:
            data += 1
        elif cable.category == CableCategory.GROUND:
            ground += 1
        elif cable.category == CableCategory.AUDIO:
            if _is_xlr_run(cable, items_by_id, catalog):
                xlr += 1
            else:
                rca += 1

    for name, count in (
        (ManifestNames.POWER, power),
        (ManifestNames.DATA, data),
        (ManifestNames.RCA, rca),
        (ManifestNames.XLR, xlr),
        (ManifestNames.GROUND, ground),
    ):
        if count > 0:
            rows.append(ManifestRow(name, count, ManifestCategory.CABLE))

    return rows
