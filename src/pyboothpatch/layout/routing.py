"""
Cable routing geometry.

Turns abstract cables into rectilinear paths for the rear-view canvas.
Key features include:
- Straight vertical drops for aligned endpoints
- A shared horizontal channel below both endpoints, offset per lane so
  parallel runs do not overlap
- Quarter-round corners on runs wide enough to take them
- Face-aware port positions and a stable lane order (power, audio,
  data, ground) for a whole cable list
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.constants import (
    CABLE_CATEGORY_ORDER,
    ROUTING,
    Face,
    RoutingConfig,
)
from pyboothpatch.model.core import Cable, PlacedItem, Point


@dataclass(frozen=True)
class PathCommand:
    """One path command: ``M``/``L`` take one point, ``Q`` a control and an end point."""

    op: str
    points: tuple[Point, ...]


@dataclass(frozen=True)
class CableGeometry:
    segments: tuple[PathCommand, ...]
    label: Point
    is_vertical: bool = False

    def to_svg_path(self) -> str:
        """Render the segments as an SVG path ``d`` attribute."""
        parts = []
        for cmd in self.segments:
            coords = " ".join(f"{_fmt(p.x)} {_fmt(p.y)}" for p in cmd.points)
            parts.append(f"{cmd.op} {coords}")
        return " ".join(parts)


def _fmt(value: float) -> str:
    return f"{value:g}"


def _move(p: Point) -> PathCommand:
    return PathCommand("M", (p,))


def _line(p: Point) -> PathCommand:
    return PathCommand("L", (p,))


def _quad(control: Point, end: Point) -> PathCommand:
    return PathCommand("Q", (control, end))


def calculate_cable_geometry(
    start: Point,
    end: Point,
    lane_index: int,
    config: RoutingConfig = ROUTING,
) -> CableGeometry:
    """
    Route one cable from ``start`` to ``end``.

    Correct lane separation relies on the caller passing the cable's index
    in a stably sorted cable list (see ``sort_cables_for_routing()``).

    Args:
        start: Absolute start point.
        end: Absolute end point.
        lane_index: Position of the cable in the sorted cable list.
        config: Routing parameters.

    Returns:
        The path and its label anchor.
    """
    dx = end.x - start.x

    if abs(dx) < config.vertical_tolerance and end.y > start.y + config.vertical_min_drop:
        label_dx, label_dy = config.vertical_label_offset
        return CableGeometry(
            segments=(_move(start), _line(Point(start.x, end.y))),
            label=start.offset(label_dx, label_dy),
            is_vertical=True,
        )

    lane_offset = (lane_index % config.lane_count) * config.lane_height
    channel_y = max(start.y, end.y) + config.base_clearance + lane_offset
    label = Point((start.x + end.x) / 2, channel_y)
    r = config.corner_radius

    if abs(dx) < r * 2:
        return CableGeometry(
            segments=(
                _move(start),
                _line(Point(start.x, channel_y)),
                _line(Point(end.x, channel_y)),
                _line(end),
            ),
            label=label,
        )

    dir_x = 1 if end.x > start.x else -1
    return CableGeometry(
        segments=(
            _move(start),
            _line(Point(start.x, channel_y - r)),
            _quad(Point(start.x, channel_y), Point(start.x + r * dir_x, channel_y)),
            _line(Point(end.x - r * dir_x, channel_y)),
            _quad(Point(end.x, channel_y), Point(end.x, channel_y - r)),
            _line(end),
        ),
        label=label,
    )


# ---------------------------------------------------------------------------
# Cable list routing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PortLocation:
    point: Point
    on_back: bool
    resolved: bool = True


@dataclass(frozen=True)
class RoutedCable:
    """
    A cable together with its drawn path.

    Attributes:
        cable: The routed cable.
        start: Absolute origin point.
        end: Absolute destination point.
        geometry: Path and label anchor.
        phantom: True when an endpoint is not on the back panel; drawn dashed.
    """

    cable: Cable
    start: Point
    end: Point
    geometry: CableGeometry
    phantom: bool


def sort_cables_for_routing(cables: Sequence[Cable]) -> list[Cable]:
    """Stable sort by category: power, audio, data, ground."""
    rank = {category: i for i, category in enumerate(CABLE_CATEGORY_ORDER)}
    return sorted(cables, key=lambda c: rank.get(c.category, len(rank)))


def port_position(
    item: PlacedItem, port_id: str, catalog: Catalog | None = None
) -> PortLocation:
    """
    Absolute position of a port, honouring the item's current face.

    A port is drawn at its panel offset when its own face is shown. When the
    opposite face is shown it snaps to the device's top edge, where cables
    leave the device.

    Args:
        item: The placed item.
        port_id: Port on the item's device.
        catalog: Catalog to resolve the device against.

    Returns:
        The location; unknown devices or ports resolve to the item origin.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    definition = catalog.find(item.device_id)
    origin = Point(item.x, item.y)
    if definition is None:
        return PortLocation(origin, on_back=False, resolved=False)

    for ports, own_face, on_back in (
        (definition.back_ports, Face.BACK, True),
        (definition.front_ports, Face.FRONT, False),
    ):
        for port in ports:
            if port.id != port_id:
                continue
            dy = port.position.y if item.face == own_face else 0.0
            return PortLocation(origin.offset(port.position.x, dy), on_back)

    return PortLocation(origin, on_back=False, resolved=False)


def route_cables(
    items: Sequence[PlacedItem],
    cables: Sequence[Cable],
    catalog: Catalog | None = None,
    config: RoutingConfig = ROUTING,
) -> list[RoutedCable]:
    """
    Route every cable of a booth.

    Cables are sorted into lane order first; each one is routed with its
    index in that order. A cable whose destination is unmanaged (or cannot
    be resolved) drops ``config.unmanaged_drop`` below its origin. Cables
    whose origin item is gone are skipped.

    Args:
        items: Placed items.
        cables: Cables to route.
        catalog: Catalog to resolve devices against.
        config: Routing parameters.

    Returns:
        Routed cables in lane order.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    items_by_id = {item.instance_id: item for item in items}
    routed = []

    for index, cable in enumerate(sort_cables_for_routing(cables)):
        from_item = items_by_id.get(cable.from_instance_id)
        if from_item is None:
            continue
        start = port_position(from_item, cable.from_port_id, catalog)
        end = PortLocation(start.point.offset(0, config.unmanaged_drop), on_back=False)

        to_item = items_by_id.get(cable.to_instance_id) if cable.to_instance_id else None
        if to_item is not None and cable.to_port_id:
            end = port_position(to_item, cable.to_port_id, catalog)

        routed.append(
            RoutedCable(
                cable=cable,
                start=start.point,
                end=end.point,
                geometry=calculate_cable_geometry(start.point, end.point, index, config),
                phantom=not (start.on_back and end.on_back),
            )
        )

    return routed
