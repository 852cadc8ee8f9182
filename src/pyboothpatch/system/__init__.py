"""
Rule engines over a booth's placed items.

Role resolution, topology inference (cable synthesis), readiness
analysis and the sound-check connection list.
"""

from .connections import (
    Connection,
    ConnectionEnd,
    build_connection_list,
    connector_gender,
)
from .readiness import analyze_setup
from .roles import BoothRoles, resolve_roles
from .topology import (
    Omission,
    OmissionReason,
    TopologyResult,
    generate_cables,
    infer_topology,
)
