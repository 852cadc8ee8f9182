"""
PyBoothPatch Library.
"""

from .booth import Booth
from .cable_export import export_cable_csv
from .catalog import DEFAULT_CATALOG, DEVICES, Catalog, create_speaker
from .exceptions import (
    BoothError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    ItemNotFoundError,
)
from .layout.arrange import ArrangeResult, ViewFit, auto_arrange, fit_to_view
from .layout.routing import (
    CableGeometry,
    RoutedCable,
    calculate_cable_geometry,
    port_position,
    route_cables,
    sort_cables_for_routing,
)
from .manifest import generate_manifest
from .model.constants import (
    HUB_INPUT_PORTS,
    LAYOUT,
    PLACEMENT,
    ROUTING,
    VIEW_FIT,
    AccessoryRole,
    CableCategory,
    ConnectorGender,
    ConnectorKind,
    DeviceType,
    Face,
    LayoutConfig,
    ManifestCategory,
    PlacementConfig,
    RoutingConfig,
    SetupStatus,
    StandardDeviceIds,
    ViewFitConfig,
)
from .model.core import (
    Cable,
    DeviceDefinition,
    ManifestRow,
    PlacedItem,
    Point,
    Port,
    ReadinessResult,
)
from .system.connections import (
    Connection,
    ConnectionEnd,
    build_connection_list,
    connector_gender,
)
from .system.readiness import analyze_setup
from .system.roles import BoothRoles, resolve_roles
from .system.topology import (
    Omission,
    OmissionReason,
    TopologyResult,
    default_cable_id,
    generate_cables,
    infer_topology,
)
from .utils.export_utils import export_manifest_csv, export_manifest_excel
