"""
Role resolution for placed items.

Topology inference and auto-arrange both need to know which item is the
hub, which items are sources and how the PA splits into tops and subs.
Items whose device is unknown to the catalog get no role.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.constants import DeviceType, StandardDeviceIds
from pyboothpatch.model.core import DeviceDefinition, PlacedItem


@dataclass(frozen=True)
class BoothRoles:
    """
    Items grouped by role.

    Attributes:
        hubs: Mixer / all-in-one / controller items, in list order.
        players: Player items, in list order.
        tops: Non-subwoofer speakers, in list order.
        subs: Subwoofer speakers, in list order.
        others: Everything else, including unknown devices.
        power_strip: First item that is the power strip, or ``None``.
    """

    hubs: tuple[PlacedItem, ...]
    players: tuple[PlacedItem, ...]
    tops: tuple[PlacedItem, ...]
    subs: tuple[PlacedItem, ...]
    others: tuple[PlacedItem, ...]
    power_strip: PlacedItem | None

    @property
    def hub(self) -> PlacedItem | None:
        """The first hub-like item in list order."""
        return self.hubs[0] if self.hubs else None

    @property
    def speakers(self) -> tuple[PlacedItem, ...]:
        return self.tops + self.subs


def by_x(items: Sequence[PlacedItem]) -> tuple[PlacedItem, ...]:
    """Stable ascending sort on x; fixes logical channel order."""
    return tuple(sorted(items, key=lambda i: i.x))


def resolve_roles(
    items: Sequence[PlacedItem], catalog: Catalog | None = None
) -> BoothRoles:
    """
    Partition ``items`` into role groups, preserving list order.

    Args:
        items: Placed items.
        catalog: Catalog to resolve device ids against.

    Returns:
        The role groups.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    groups: dict[str, list[PlacedItem]] = {
        "hub": [],
        "player": [],
        "top": [],
        "sub": [],
        "other": [],
    }
    power_strip = None

    for item in items:
        if power_strip is None and item.device_id == StandardDeviceIds.POWER_STRIP:
            power_strip = item
        groups[_group_for(catalog.find(item.device_id))].append(item)

    return BoothRoles(
        hubs=tuple(groups["hub"]),
        players=tuple(groups["player"]),
        tops=tuple(groups["top"]),
        subs=tuple(groups["sub"]),
        others=tuple(groups["other"]),
        power_strip=power_strip,
    )


def _group_for(definition: DeviceDefinition | None) -> str:
    if definition is None:
        return "other"
    if definition.is_hub:
        return "hub"
    if definition.type == DeviceType.PLAYER:
        return "player"
    if definition.type == DeviceType.SPEAKER:
        return "sub" if definition.is_subwoofer else "top"
    return "other"
