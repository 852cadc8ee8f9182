"""
Auto-arrange layout for a booth.

Places items into functional zones: the hub block centered on the table
row, players fanned out left and right of it, PA tops beyond the players,
subwoofers on the floor row beneath them, and leftover gear to the far
right. Only positions change; cables are left untouched.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

from pyboothpatch.catalog import DEFAULT_CATALOG, Catalog
from pyboothpatch.model.constants import LAYOUT, VIEW_FIT, LayoutConfig, ViewFitConfig
from pyboothpatch.model.core import PlacedItem
from pyboothpatch.system.roles import resolve_roles


@dataclass(frozen=True)
class ViewFit:
    """Scale and pan that fit every item into the viewport."""

    scale: float
    pan_x: float
    pan_y: float


@dataclass(frozen=True)
class ArrangeResult:
    items: list[PlacedItem]
    view_fit: ViewFit | None


def _split_outward(
    items: Sequence[PlacedItem],
    widths: dict[str, float],
    left: float,
    right: float,
    y: float,
    spacing: float,
) -> tuple[dict[str, tuple[float, float]], float]:
    """
    Put the first ceil(n/2) items left of ``left``, the rest right of ``right``.

    Returns the positions and the right bound after placement.
    """
    positions = {}
    mid = math.ceil(len(items) / 2)
    for item in items[:mid]:
        x = left - widths[item.instance_id]
        positions[item.instance_id] = (x, y)
        left = x - spacing
    for item in items[mid:]:
        positions[item.instance_id] = (right, y)
        right += widths[item.instance_id] + spacing
    return positions, right


def arrange_positions(
    items: Sequence[PlacedItem],
    catalog: Catalog | None = None,
    config: LayoutConfig = LAYOUT,
) -> dict[str, tuple[float, float]]:
    """
    Compute new ``(x, y)`` positions keyed by instance id.

    Items whose device is unknown are not positioned.

    Args:
        items: Placed items.
        catalog: Catalog to resolve device widths against.
        config: Zone parameters.

    Returns:
        Instance id -> new position.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    roles = resolve_roles(items, catalog)
    widths = {}
    for item in items:
        definition = catalog.find(item.device_id)
        if definition is not None:
            widths[item.instance_id] = definition.width

    positions: dict[str, tuple[float, float]] = {}
    left_bound = right_bound = config.center_x

    if roles.hubs:
        main = roles.hubs[0]
        start_x = config.center_x - widths[main.instance_id] / 2
        positions[main.instance_id] = (start_x, config.table_y)
        left_bound = start_x - config.spacing
        right_bound = start_x + widths[main.instance_id] + config.spacing
        for hub in roles.hubs[1:]:
            positions[hub.instance_id] = (right_bound, config.table_y)
            right_bound += widths[hub.instance_id] + config.spacing

    for idx, player in enumerate(roles.players):
        width = widths[player.instance_id]
        if idx % 2 == 0:
            x = left_bound - width
            left_bound = x - config.spacing
        else:
            x = right_bound
            right_bound = x + width + config.spacing
        positions[player.instance_id] = (x, config.table_y)

    pa_left = left_bound - config.pa_offset
    pa_right = right_bound + config.pa_offset
    top_positions, _ = _split_outward(
        roles.tops,
        widths,
        pa_left,
        pa_right,
        config.table_y - config.top_lift,
        config.spacing,
    )
    positions.update(top_positions)

    sub_positions, sub_right = _split_outward(
        roles.subs, widths, pa_left, pa_right, config.floor_y, config.sub_spacing
    )
    positions.update(sub_positions)

    # Leftover gear starts past the right sub stack
    other_x = sub_right + config.other_gap
    for other in roles.others:
        if other.instance_id not in widths:
            continue
        positions[other.instance_id] = (other_x, config.table_y)
        other_x += widths[other.instance_id] + config.spacing

    return positions


def fit_to_view(
    items: Sequence[PlacedItem],
    viewport: tuple[float, float] | None = None,
    catalog: Catalog | None = None,
    config: ViewFitConfig = VIEW_FIT,
) -> ViewFit | None:
    """
    Compute a scale and pan that show every item with padding.

    Args:
        items: Placed items.
        viewport: ``(width, height)`` of the view; defaults from ``config``.
        catalog: Catalog to resolve device sizes against.
        config: Padding, scale clamp and default viewport.

    Returns:
        The view fit, or ``None`` if no item can be measured.
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    view_w, view_h = viewport or (config.viewport_width, config.viewport_height)

    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for item in items:
        definition = catalog.find(item.device_id)
        if definition is None:
            continue
        min_x = min(min_x, item.x)
        min_y = min(min_y, item.y)
        max_x = max(max_x, item.x + definition.width)
        max_y = max(max_y, item.y + definition.face_height(item.face))

    if min_x == math.inf:
        return None

    content_w = max_x - min_x + config.padding * 2
    content_h = max_y - min_y + config.padding * 2
    if content_w <= 0 or content_h <= 0:
        return None

    scale = min(view_w / content_w, view_h / content_h)
    scale = min(max(scale, config.min_scale), config.max_scale)

    center_x = (min_x + max_x) / 2
    center_y = (min_y + max_y) / 2
    return ViewFit(
        scale=scale,
        pan_x=view_w / 2 - center_x * scale,
        pan_y=view_h / 2 - center_y * scale,
    )


def auto_arrange(
    items: Sequence[PlacedItem],
    catalog: Catalog | None = None,
    config: LayoutConfig = LAYOUT,
    viewport: tuple[float, float] | None = None,
    view_config: ViewFitConfig = VIEW_FIT,
) -> ArrangeResult:
    """
    Reposition ``items`` into zones and fit the view around them.

    Args:
        items: Placed items.
        catalog: Catalog to resolve devices against.
        config: Zone parameters.
        viewport: ``(width, height)`` for the view fit.
        view_config: View fit parameters.

    Returns:
        The repositioned items, in input order, and the view fit (``None``
        for an empty booth).
    """
    if not items:
        return ArrangeResult(items=[], view_fit=None)

    positions = arrange_positions(items, catalog, config)
    arranged = []
    for item in items:
        if item.instance_id in positions:
            x, y = positions[item.instance_id]
            item = replace(item, x=x, y=y)
        arranged.append(item)

    return ArrangeResult(
        items=arranged,
        view_fit=fit_to_view(arranged, viewport, catalog, view_config),
    )
