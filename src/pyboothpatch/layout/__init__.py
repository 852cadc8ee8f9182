"""
Geometry for the booth canvas: zone-based auto-arrange and cable routing.
"""

from .arrange import ArrangeResult, ViewFit, auto_arrange, fit_to_view
from .routing import (
    CableGeometry,
    PathCommand,
    RoutedCable,
    calculate_cable_geometry,
    port_position,
    route_cables,
    sort_cables_for_routing,
)
