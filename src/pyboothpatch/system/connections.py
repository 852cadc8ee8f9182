"""
Sound-check connection list.

Resolves both ends of every cable to the device model, manufacturer, panel
label and socket gender, so a crew can check each run against the rig.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.constants import (
    UNKNOWN_DEVICE,
    UNKNOWN_MANUFACTURER,
    ConnectorGender,
    ConnectorKind,
    GenderKeywords,
    StandardPorts,
)
from pyboothpatch.model.core import Cable, PlacedItem, Port

_STRIP_OUTLET = re.compile(rf"^{re.escape(StandardPorts.STRIP_OUTLET_PREFIX)}\d+$")


def connector_gender(port: Port | None) -> str:
    """
    Gender of the socket a port presents on the panel.

    - XLR: outputs (OUT, THRU, MASTER, MAIN, BOOTH, SEND) are male, inputs
      (IN, RETURN, MIC) female; unlabelled XLR defaults to male.
    - RCA: always female.
    - Power: outlets (``OUT`` label or a strip ``ac-<n>`` socket) are
      female, inlets male.
    - Everything else is neutral.

    Output words are tested first, so ``MAIN L`` is male even though it
    contains ``IN``.
    """
    if port is None:
        return ConnectorGender.NEUTRAL
    label = port.label.upper()

    if port.kind == ConnectorKind.XLR:
        if any(word in label for word in GenderKeywords.XLR_MALE):
            return ConnectorGender.MALE
        if any(word in label for word in GenderKeywords.XLR_FEMALE):
            return ConnectorGender.FEMALE
        return ConnectorGender.MALE
    if port.kind == ConnectorKind.RCA:
        return ConnectorGender.FEMALE
    if port.kind == ConnectorKind.POWER:
        if _STRIP_OUTLET.match(port.id) or any(
            word in label for word in GenderKeywords.POWER_OUTLET
        ):
            return ConnectorGender.FEMALE
        return ConnectorGender.MALE
    return ConnectorGender.NEUTRAL


@dataclass(frozen=True)
class ConnectionEnd:
    """
    One resolved end of a cable.

    Attributes:
        instance_id: Placed item the end plugs into.
        model: Device model, the device id when the catalog lacks it, or
            ``UNKNOWN_DEVICE`` when the item is gone.
        manufacturer: Device manufacturer, ``UNKNOWN_MANUFACTURER`` if unknown.
        port_id: Port the end plugs into.
        label: Panel label, falling back to the port id.
        gender: A ``ConnectorGender`` value.
    """

    instance_id: str
    model: str
    manufacturer: str
    port_id: str
    label: str
    gender: str


@dataclass(frozen=True)
class Connection:
    cable: Cable
    origin: ConnectionEnd
    destination: ConnectionEnd | None


def describe_end(
    instance_id: str,
    port_id: str,
    items_by_id: dict[str, PlacedItem],
    catalog: Catalog,
) -> ConnectionEnd:
    item = items_by_id.get(instance_id)
    if item is None:
        return ConnectionEnd(
            instance_id,
            UNKNOWN_DEVICE,
            UNKNOWN_MANUFACTURER,
            port_id,
            port_id,
            ConnectorGender.NEUTRAL,
        )

    definition = catalog.find(item.device_id)
    if definition is None:
        return ConnectionEnd(
            instance_id,
            item.device_id,
            UNKNOWN_MANUFACTURER,
            port_id,
            port_id,
            ConnectorGender.NEUTRAL,
        )

    port = definition.find_port(port_id)
    return ConnectionEnd(
        instance_id=instance_id,
        model=definition.model,
        manufacturer=definition.manufacturer,
        port_id=port_id,
        label=(port.label if port else "") or port_id,
        gender=connector_gender(port),
    )


def build_connection_list(
    cables: Sequence[Cable],
    items: Sequence[PlacedItem],
    catalog: Catalog | None = None,
) -> list[Connection]:
    """
    Resolve every cable into a sound-check connection.

    Connections are sorted by cable category, then by origin instance id,
    keeping each device's runs together. Unmanaged cables have no
    destination.

    Args:
        cables: Cables, typically from ``generate_cables()``.
        items: Placed items.
        catalog: Catalog to resolve devices against.

    Returns:
        The connection list.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    items_by_id = {item.instance_id: item for item in items}

    connections = []
    for cable in sorted(cables, key=lambda c: (c.category, c.from_instance_id)):
        destination = None
        if cable.to_instance_id is not None:
            destination = describe_end(
                cable.to_instance_id, cable.to_port_id or "", items_by_id, catalog
            )
        connections.append(
            Connection(
                cable=cable,
                origin=describe_end(
                    cable.from_instance_id, cable.from_port_id, items_by_id, catalog
                ),
                destination=destination,
            )
        )
    return connections
