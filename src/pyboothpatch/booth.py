"""
Booth class -- the command layer for PyBoothPatch.

The Booth owns the item list, the global face, and the current cables and
manifest. The presentation layer drives it with synchronous commands;
each command replaces whole lists rather than patching them, and the
readiness analysis is recomputed after every change to the items.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.exceptions import ItemNotFoundError
from pyboothpatch.layout.arrange import ViewFit, auto_arrange
from pyboothpatch.layout.routing import RoutedCable, route_cables
from pyboothpatch.manifest import generate_manifest
from pyboothpatch.model.constants import (
    PLACEMENT,
    ROUTING,
    Face,
    PlacementConfig,
    RoutingConfig,
)
from pyboothpatch.model.core import (
    Cable,
    ManifestRow,
    PlacedItem,
    ReadinessResult,
    flip_face,
)
from pyboothpatch.system.connections import Connection, build_connection_list
from pyboothpatch.system.readiness import analyze_setup
from pyboothpatch.system.topology import TopologyResult, infer_topology

logger = logging.getLogger(__name__)


class Booth:
    """Mutable session holding one booth design.

    Booth is an intentional mutable builder, like a drawing project: it
    accumulates placed items and regenerates derived data on request.

    Example::

        booth = Booth()
        mixer = booth.add_item("djm-900")
        booth.add_item("cdj-3000")
        booth.add_item("cdj-3000")
        cables, manifest = booth.generate_cables()
        booth.readiness.status   # "warning" (no headphones)
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        placement: PlacementConfig = PLACEMENT,
        routing: RoutingConfig = ROUTING,
    ):
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog
        self._placement = placement
        self._routing = routing
        self._items: list[PlacedItem] = []
        self._face = Face.FRONT
        self._instance_counter = 0
        self._cables: list[Cable] = []
        self._manifest: list[ManifestRow] = []
        self._last_topology: TopologyResult | None = None
        self.setup_acknowledged = True
        self._readiness = analyze_setup(self._items, self.catalog)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[PlacedItem, ...]:
        return tuple(self._items)

    @property
    def cables(self) -> tuple[Cable, ...]:
        return tuple(self._cables)

    @property
    def manifest(self) -> tuple[ManifestRow, ...]:
        return tuple(self._manifest)

    @property
    def face(self) -> str:
        return self._face

    @property
    def readiness(self) -> ReadinessResult:
        return self._readiness

    @property
    def last_topology(self) -> TopologyResult | None:
        """Full result of the last cable generation, including omissions."""
        return self._last_topology

    def get_item(self, instance_id: str) -> PlacedItem:
        for item in self._items:
            if item.instance_id == instance_id:
                return item
        raise ItemNotFoundError(instance_id)

    # ------------------------------------------------------------------
    # Item commands
    # ------------------------------------------------------------------

    def _set_items(self, items: list[PlacedItem]) -> None:
        self._items = items
        self._readiness = analyze_setup(self._items, self.catalog)

    def add_item(self, device_id: str) -> PlacedItem:
        """
        Place a new device at the next default slot.

        Raises:
            DeviceNotFoundError: If ``device_id`` is not in the catalog.
        """
        self.catalog.get(device_id)
        self._instance_counter += 1
        item = PlacedItem(
            instance_id=f"dev-{self._instance_counter}",
            device_id=device_id,
            x=self._placement.start_x + len(self._items) * self._placement.step_x,
            y=self._placement.start_y,
            face=self._face,
        )
        self._set_items(self._items + [item])
        logger.debug("Added %s as %s", device_id, item.instance_id)
        return item

    def remove_item(self, instance_id: str) -> None:
        """Remove an item. Cables are left as they are until regenerated."""
        self.get_item(instance_id)
        self._set_items([i for i in self._items if i.instance_id != instance_id])

    def move_item(self, instance_id: str, x: float, y: float) -> PlacedItem:
        """Reposition an item without touching the cables."""
        moved = replace(self.get_item(instance_id), x=x, y=y)
        self._set_items(
            [moved if i.instance_id == instance_id else i for i in self._items]
        )
        return moved

    def auto_arrange(self, viewport: tuple[float, float] | None = None) -> ViewFit | None:
        """Rearrange every item into zones and return the suggested view fit."""
        result = auto_arrange(self._items, self.catalog, viewport=viewport)
        self._set_items(result.items)
        return result.view_fit

    def set_face(self, face: str) -> None:
        """Show ``face`` on every item at once."""
        if face not in (Face.FRONT, Face.BACK):
            raise ValueError(f"Unknown face '{face}', expected 'front' or 'back'")
        self._face = face
        self._set_items([replace(i, face=face) for i in self._items])

    def toggle_face(self) -> str:
        self.set_face(flip_face(self._face))
        return self._face

    # ------------------------------------------------------------------
    # Cable commands
    # ------------------------------------------------------------------

    def generate_cables(self) -> tuple[list[Cable], list[ManifestRow]]:
        """
        Regenerate the cable list and manifest from the current items.

        Marks the setup as awaiting acknowledgement; the caller confirms
        with ``acknowledge_setup()`` once the manifest has been shown.
        """
        self._last_topology = infer_topology(self._items, self.catalog)
        self._cables = list(self._last_topology.cables)
        self._manifest = generate_manifest(self._items, self._cables, self.catalog)
        self.setup_acknowledged = False
        logger.info(
            "Generated %d cables and %d manifest rows",
            len(self._cables),
            len(self._manifest),
        )
        return list(self._cables), list(self._manifest)

    def acknowledge_setup(self) -> None:
        self.setup_acknowledged = True

    def clear_cables(self) -> None:
        self._cables = []
        self._last_topology = None

    def routed_cables(self) -> list[RoutedCable]:
        """Per-cable geometry for the render layer, in lane order."""
        return route_cables(self._items, self._cables, self.catalog, self._routing)

    def sound_check(self) -> list[Connection]:
        """Current cables resolved to labelled, gendered connections."""
        return build_connection_list(self._cables, self._items, self.catalog)
