"""
Topology inference: derive the cable graph of a booth.

Given the placed items, ``infer_topology()`` synthesises every cable the
booth needs from device roles and the physical ports each device exposes:

- power: every powered device feeds the power strip (6 outlets, in
  encounter order) or, without a strip or once it is full, the mains;
- sources: player *i* (sorted by x) feeds hub input *i*, resolved through
  ``HUB_INPUT_PORTS`` or the mixer's ``CH{n}`` labels;
- PA: the hub's master L/R feed the subs, tops chain off the subs' thru
  ports, or take master L/R directly when there are no subs;
- data: a controller hub gets a USB run to the host computer.

Lookups never raise. Anything that cannot be resolved is skipped and
recorded as an ``Omission`` on the result, so callers always get a
best-effort cable list.

Usage example::

    from pyboothpatch.system.topology import infer_topology

    result = infer_topology(items)
    result.cables      # tuple[Cable, ...]
    result.omissions   # tuple[Omission, ...]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.constants import (
    HUB_INPUT_PORTS,
    POWER_STRIP_OUTLETS,
    CableCategory,
    ConnectorKind,
    DeviceType,
    StandardDeviceIds,
    StandardLabels,
    StandardPorts,
)
from pyboothpatch.model.core import Cable, DeviceDefinition, PlacedItem, Port
from pyboothpatch.system.roles import BoothRoles, by_x, resolve_roles

logger = logging.getLogger(__name__)

CableIdFactory = Callable[[int], str]
"""Maps the 1-based emission index of a cable to its id."""


class OmissionReason:
    MISSING_DEFINITION = "missing_definition"
    MISSING_PORT = "missing_port"
    UNMAPPED_HUB_MODEL = "unmapped_hub_model"
    CAPACITY_EXCEEDED = "capacity_exceeded"


@dataclass(frozen=True)
class Omission:
    """
    A cable the engine wanted to emit but could not resolve.

    Attributes:
        reason: An ``OmissionReason`` value.
        instance_id: The item the skipped cable belongs to.
        detail: Human-readable explanation.
    """

    reason: str
    instance_id: str
    detail: str = ""


@dataclass(frozen=True)
class TopologyResult:
    cables: tuple[Cable, ...]
    omissions: tuple[Omission, ...] = ()

    def by_category(self, category: str) -> list[Cable]:
        return [c for c in self.cables if c.category == category]


def default_cable_id(index: int) -> str:
    return f"W{index:03d}"


class _CableCollector:
    """Accumulates cables and omissions while the rules run."""

    def __init__(self, id_factory: CableIdFactory):
        self._id_factory = id_factory
        self.cables: list[Cable] = []
        self.omissions: list[Omission] = []

    def add(
        self,
        from_item: PlacedItem,
        from_port: str,
        category: str,
        to_item: PlacedItem | None = None,
        to_port: str | None = None,
    ) -> None:
        self.cables.append(
            Cable(
                id=self._id_factory(len(self.cables) + 1),
                from_instance_id=from_item.instance_id,
                from_port_id=from_port,
                category=category,
                to_instance_id=to_item.instance_id if to_item else None,
                to_port_id=to_port if to_item else None,
            )
        )

    def skip(self, reason: str, item: PlacedItem, detail: str) -> None:
        logger.debug("Skipping cable for %s (%s): %s", item.instance_id, reason, detail)
        self.omissions.append(Omission(reason, item.instance_id, detail))

    def result(self) -> TopologyResult:
        return TopologyResult(tuple(self.cables), tuple(self.omissions))


# ---------------------------------------------------------------------------
# Port resolution
# ---------------------------------------------------------------------------


def find_power_port(definition: DeviceDefinition) -> Port | None:
    return definition.first_port(ConnectorKind.POWER)


def find_audio_output(definition: DeviceDefinition) -> Port | None:
    """A player's line output: an RCA port named ``rca`` or ``*out*``."""
    for port in definition.ports:
        if port.kind == ConnectorKind.RCA and ("out" in port.id or port.id == "rca"):
            return port
    return None


def find_master_outputs(
    definition: DeviceDefinition,
) -> tuple[Port | None, Port | None]:
    """Return the hub's master (L, R) outputs, matched by panel label."""
    return (
        definition.find_port_by_label(*StandardLabels.MASTER_L),
        definition.find_port_by_label(*StandardLabels.MASTER_R),
    )


def resolve_hub_input(
    hub: DeviceDefinition,
    index: int,
    hub_inputs: Mapping[str, Sequence[str]] = HUB_INPUT_PORTS,
) -> tuple[str | None, str | None]:
    """
    Resolve the hub input port for source channel ``index`` (0-based).

    Hub models listed in ``hub_inputs`` use their fixed slot order. Other
    mixers resolve ``CH{index + 1}`` by RCA port label.

    Args:
        hub: Hub device definition.
        index: Zero-based source index (player order by x).
        hub_inputs: Hub id -> ordered input port ids.

    Returns:
        ``(port_id, None)`` on success, ``(None, OmissionReason)`` otherwise.
    """
    slots = hub_inputs.get(hub.id)
    if slots is not None:
        if index < len(slots):
            return slots[index], None
        return None, OmissionReason.CAPACITY_EXCEEDED

    if hub.type == DeviceType.MIXER:
        label = StandardLabels.CHANNEL_FORMAT.format(n=index + 1)
        port = hub.find_port_by_label(label, kind=ConnectorKind.RCA)
        if port is not None:
            return port.id, None
        return None, OmissionReason.CAPACITY_EXCEEDED

    return None, OmissionReason.UNMAPPED_HUB_MODEL


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _wire_power(
    items: Sequence[PlacedItem],
    roles: BoothRoles,
    catalog: Catalog,
    out: _CableCollector,
) -> None:
    strip = roles.power_strip
    used_outlets = 0

    for item in items:
        # Strips feed from the wall, never from another strip
        if item.device_id == StandardDeviceIds.POWER_STRIP:
            continue
        definition = catalog.find(item.device_id)
        if definition is None:
            out.skip(
                OmissionReason.MISSING_DEFINITION,
                item,
                f"unknown device '{item.device_id}'",
            )
            continue
        power = find_power_port(definition)
        if power is None:
            continue

        if strip is not None and used_outlets < POWER_STRIP_OUTLETS:
            used_outlets += 1
            outlet = f"{StandardPorts.STRIP_OUTLET_PREFIX}{used_outlets}"
            out.add(item, power.id, CableCategory.POWER, strip, outlet)
        else:
            out.add(item, power.id, CableCategory.POWER)

    if strip is not None:
        out.add(strip, StandardPorts.STRIP_INLET, CableCategory.POWER)


def _wire_sources(
    hub_item: PlacedItem,
    hub: DeviceDefinition,
    players: Sequence[PlacedItem],
    catalog: Catalog,
    hub_inputs: Mapping[str, Sequence[str]],
    out: _CableCollector,
) -> None:
    for index, player in enumerate(players):
        # Players only ever come from known definitions
        definition = catalog.get(player.device_id)
        source = find_audio_output(definition)
        hub_input, reason = resolve_hub_input(hub, index, hub_inputs)
        if source is None:
            out.skip(
                OmissionReason.MISSING_PORT,
                player,
                f"'{definition.model}' has no audio output",
            )
        elif hub_input is None:
            out.skip(
                reason,
                player,
                f"no input on '{hub.model}' for source {index + 1}",
            )
        else:
            out.add(player, source.id, CableCategory.AUDIO, hub_item, hub_input)

        if definition.supports_vinyl:
            ground = definition.first_port(ConnectorKind.GROUND)
            if ground is None:
                out.skip(
                    OmissionReason.MISSING_PORT,
                    player,
                    f"'{definition.model}' has no ground terminal",
                )
            else:
                out.add(player, ground.id, CableCategory.GROUND)


def _wire_pa(
    hub_item: PlacedItem,
    hub: DeviceDefinition,
    roles: BoothRoles,
    out: _CableCollector,
) -> None:
    master_l, master_r = find_master_outputs(hub)
    tops = by_x(roles.tops)
    subs = by_x(roles.subs)

    if master_l is None or master_r is None:
        out.skip(
            OmissionReason.MISSING_PORT,
            hub_item,
            f"'{hub.model}' is missing a master output",
        )

    def feed(master: Port | None, target: PlacedItem, port_id: str) -> None:
        if master is not None:
            out.add(hub_item, master.id, CableCategory.AUDIO, target, port_id)

    if subs:
        for i, sub in enumerate(subs):
            if i % 2 == 0:
                feed(master_l, sub, StandardPorts.SUB_IN_L)
            if i % 2 == 1 or len(subs) == 1:
                # A lone sub takes both sides
                feed(master_r, sub, StandardPorts.SUB_IN_R)

        # Daisy chain tops from the subs' thru outputs
        for i, top in enumerate(tops):
            source_sub = subs[i % len(subs)]
            thru = StandardPorts.SUB_THRU_L if i % 2 == 0 else StandardPorts.SUB_THRU_R
            out.add(source_sub, thru, CableCategory.AUDIO, top, StandardPorts.TOP_IN)
    else:
        for i, top in enumerate(tops):
            feed(master_l if i % 2 == 0 else master_r, top, StandardPorts.TOP_IN)

    # House-system handoff when no PA is modelled
    if not tops and not subs:
        for master in (master_l, master_r):
            if master is not None:
                out.add(hub_item, master.id, CableCategory.AUDIO)


def _wire_data(
    hub_item: PlacedItem, hub: DeviceDefinition, out: _CableCollector
) -> None:
    if hub.type != DeviceType.CONTROLLER:
        return
    usb = None
    for port in hub.ports:
        if port.label == StandardLabels.USB:
            usb = port
            break
    if usb is None:
        out.skip(OmissionReason.MISSING_PORT, hub_item, f"'{hub.model}' has no USB port")
        return
    out.add(hub_item, usb.id, CableCategory.DATA)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def infer_topology(
    items: Sequence[PlacedItem],
    catalog: Catalog | None = None,
    hub_inputs: Mapping[str, Sequence[str]] | None = None,
    id_factory: CableIdFactory = default_cable_id,
) -> TopologyResult:
    """
    Synthesise the full cable list for ``items``.

    Cables are emitted in rule order: power, then per player its audio
    cable followed by its ground wire, then the PA feed, then data.

    Args:
        items: Placed items, in booth order. The first hub-like item is
            the hub.
        catalog: Catalog to resolve devices against.
        hub_inputs: Hub id -> ordered input port ids. Defaults to
            ``HUB_INPUT_PORTS``; pass an extended mapping to support new
            hub models.
        id_factory: Builds each cable id from its 1-based emission index.

    Returns:
        A ``TopologyResult``. Never raises for unknown devices or ports.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    hub_inputs = HUB_INPUT_PORTS if hub_inputs is None else hub_inputs
    out = _CableCollector(id_factory)
    roles = resolve_roles(items, catalog)

    _wire_power(items, roles, catalog, out)

    hub_item = roles.hub
    if hub_item is not None:
        hub = catalog.find(hub_item.device_id)
        _wire_sources(hub_item, hub, by_x(roles.players), catalog, hub_inputs, out)
        _wire_pa(hub_item, hub, roles, out)
        _wire_data(hub_item, hub, out)

    result = out.result()
    logger.debug(
        "Inferred %d cables for %d items (%d omissions)",
        len(result.cables),
        len(items),
        len(result.omissions),
    )
    return result


def generate_cables(
    items: Sequence[PlacedItem],
    catalog: Catalog | None = None,
    id_factory: CableIdFactory = default_cable_id,
) -> list[Cable]:
    """Shorthand for ``infer_topology(...).cables`` as a list."""
    return list(infer_topology(items, catalog, id_factory=id_factory).cables)
