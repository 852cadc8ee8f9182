"""
Readiness analysis for a booth.

``analyze_setup()`` evaluates aggregate rules over the placed items (no
cable graph is built) and reports a status, capability tags and the
requirements that are still missing. It is cheap enough to run after
every change to the item list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.constants import (
    POWER_DISTRO_ITEM_THRESHOLD,
    XZ_EXTERNAL_DECK_LIMIT,
    AccessoryRole,
    Capabilities,
    DeviceType,
    MissingTags,
    SetupStatus,
    StandardDeviceIds,
)
from pyboothpatch.model.core import PlacedItem, ReadinessResult


@dataclass
class _Counts:
    players: int = 0
    mixers: int = 0
    all_in_ones: int = 0
    controllers: int = 0
    turntables: int = 0
    tops: int = 0
    subs: int = 0
    headphones: int = 0
    power_distros: int = 0

    @property
    def hubs(self) -> int:
        return self.mixers + self.all_in_ones + self.controllers


def _count(items: Sequence[PlacedItem], catalog: Catalog) -> _Counts:
    counts = _Counts()
    for item in items:
        d = catalog.find(item.device_id)
        if d is None:
            continue
        if d.type == DeviceType.PLAYER:
            counts.players += 1
        elif d.type == DeviceType.MIXER:
            counts.mixers += 1
        elif d.type == DeviceType.ALL_IN_ONE:
            counts.all_in_ones += 1
        elif d.type == DeviceType.CONTROLLER:
            counts.controllers += 1
        elif d.type == DeviceType.SPEAKER:
            if d.is_subwoofer:
                counts.subs += 1
            else:
                counts.tops += 1

        if d.supports_vinyl:
            counts.turntables += 1
        if d.accessory_role == AccessoryRole.HEADPHONES:
            counts.headphones += 1
        elif d.accessory_role == AccessoryRole.POWER_DISTRIBUTION:
            counts.power_distros += 1
    return counts


def analyze_setup(
    items: Sequence[PlacedItem], catalog: Catalog | None = None
) -> ReadinessResult:
    """
    Evaluate how ready a booth is to play.

    Status precedence: no hub-like device makes the booth incomplete; a
    mixer with no sources is incomplete; an XDJ-XZ with more than two
    external players is a warning. Otherwise the booth is ready, downgraded
    to a warning that names only the first missing requirement.

    Args:
        items: Placed items.
        catalog: Catalog to resolve devices against. Unknown devices are
            ignored.

    Returns:
        The readiness result.
    """
    if not items:
        return ReadinessResult(SetupStatus.EMPTY, "Booth is empty.")

    catalog = DEFAULT_CATALOG if catalog is None else catalog
    counts = _count(items, catalog)

    capabilities: list[str] = []
    missing: list[str] = []
    status = SetupStatus.READY
    message = "Setup Ready"

    if counts.turntables > 0:
        capabilities.append(Capabilities.VINYL)
    if counts.all_in_ones > 0:
        capabilities.append(Capabilities.STANDALONE)
    if counts.controllers > 0:
        capabilities.append(Capabilities.LAPTOP)
    if counts.players > 0:
        capabilities.append(Capabilities.DIGITAL)
    if counts.tops > 0 or counts.subs > 0:
        capabilities.append(
            Capabilities.PA_FORMAT.format(tops=counts.tops, subs=counts.subs)
        )

    if counts.headphones == 0 and counts.hubs > 0:
        missing.append(MissingTags.HEADPHONES)
    if counts.power_distros == 0 and len(items) > POWER_DISTRO_ITEM_THRESHOLD:
        missing.append(MissingTags.POWER)

    if counts.hubs == 0:
        status = SetupStatus.INCOMPLETE
        message = "No Audio Mixer/Hub"
        missing.append(MissingTags.HUB)
    else:
        if counts.mixers > 0 and counts.players == 0 and counts.hubs == counts.mixers:
            status = SetupStatus.INCOMPLETE
            message = "No Audio Sources"
            missing.append(MissingTags.SOURCES)

        if any(i.device_id == StandardDeviceIds.XDJ_XZ for i in items):
            capabilities.append(Capabilities.XZ_DECKS)
            if counts.players > XZ_EXTERNAL_DECK_LIMIT:
                status = SetupStatus.WARNING
                message = "XZ limited to 2 ext decks"

    if status == SetupStatus.READY and missing:
        status = SetupStatus.WARNING
        message = f"Missing: {missing[0]}"

    return ReadinessResult(status, message, tuple(capabilities), tuple(missing))
