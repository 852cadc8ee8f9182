"""
Global constants for the booth patching library.
All geometric, layout and rule-table parameters should be defined here.
Vocabularies (device types, connector kinds, cable categories) are plain
string constants grouped in classes, like the tag prefixes they replace.
"""
from dataclasses import dataclass
from typing import Tuple


# Vocabularies

class DeviceType:
    """Catalog categories."""
    PLAYER = "PLAYER"  # CDJs, turntables
    MIXER = "MIXER"
    ALL_IN_ONE = "ALL_IN_ONE"
    FX = "FX"
    CONTROLLER = "CONTROLLER"
    SPEAKER = "SPEAKER"
    ACCESSORY = "ACCESSORY"

    HUBS = (MIXER, ALL_IN_ONE, CONTROLLER)


class ConnectorKind:
    """Physical connector kinds a port may carry."""
    POWER = "power"
    RCA = "rca"
    XLR = "xlr"
    DATA = "data"
    GROUND = "ground"
    VISUAL = "visual"  # drawn on the panel, never cabled


class ConnectorGender:
    """Gender of the socket on the device panel."""
    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"  # terminals, USB, panel-only features


class AccessoryRole:
    HEADPHONES = "headphones"
    POWER_DISTRIBUTION = "power_distribution"


class Face:
    FRONT = "front"
    BACK = "back"


class CableCategory:
    POWER = "power"
    AUDIO = "audio"
    DATA = "data"
    GROUND = "ground"


# Lane order for routing: power, audio, data, ground
CABLE_CATEGORY_ORDER = (
    CableCategory.POWER,
    CableCategory.AUDIO,
    CableCategory.DATA,
    CableCategory.GROUND,
)


class ManifestCategory:
    DEVICE = "device"
    CABLE = "cable"


class SetupStatus:
    EMPTY = "empty"
    INCOMPLETE = "incomplete"
    READY = "ready"
    WARNING = "warning"


# Rule tables

class StandardDeviceIds:
    """Catalog ids that the rule engines recognise by identity."""
    POWER_STRIP = "pwr-strip"
    XDJ_XZ = "xdj-xz"
    XDJ_RX3 = "xdj-rx3"
    TRAKTOR_S4 = "traktor-s4"


class StandardPorts:
    """Port ids shared by families of devices."""
    STRIP_INLET = "ac-in"
    STRIP_OUTLET_PREFIX = "ac-"
    SUB_IN_L = "xlr-in-l"
    SUB_IN_R = "xlr-in-r"
    SUB_THRU_L = "xlr-out-l"
    SUB_THRU_R = "xlr-out-r"
    TOP_IN = "xlr-in-1"


class StandardLabels:
    """Panel labels the topology engine searches for."""
    MASTER_L = ("MASTER L", "MAIN L")
    MASTER_R = ("MASTER R", "MAIN R")
    USB = "USB"
    CHANNEL_FORMAT = "CH{n}"


POWER_STRIP_OUTLETS = 6


class GenderKeywords:
    """Panel-label words that decide an XLR or power socket's gender."""
    XLR_MALE = ("OUT", "THRU", "MASTER", "MAIN", "BOOTH", "SEND")
    XLR_FEMALE = ("IN", "RETURN", "MIC")
    POWER_OUTLET = ("OUT",)


UNKNOWN_DEVICE = "Unknown Device"
UNKNOWN_MANUFACTURER = "Unknown"


# Hub model -> ordered input ports, one per source channel.
# Generic mixers without an entry resolve "CH{n}" by panel label.
HUB_INPUT_PORTS: dict[str, Tuple[str, ...]] = {
    StandardDeviceIds.XDJ_XZ: ("rca-in-3", "rca-in-4"),
    StandardDeviceIds.TRAKTOR_S4: ("rca-in-1", "rca-in-2", "rca-in-3", "rca-in-4"),
    StandardDeviceIds.XDJ_RX3: ("rca-in-1", "rca-in-2"),
}

XZ_EXTERNAL_DECK_LIMIT = 2
POWER_DISTRO_ITEM_THRESHOLD = 3  # more items than this want a distro


class Capabilities:
    VINYL = "Vinyl Playback"
    STANDALONE = "Standalone Mode"
    LAPTOP = "Laptop Control"
    DIGITAL = "Digital Playback"
    PA_FORMAT = "PA System ({tops} Tops, {subs} Subs)"
    XZ_DECKS = "4-Deck Support (2 External)"


class MissingTags:
    HEADPHONES = "Headphones"
    POWER = "Power Extension / Distro"
    HUB = "Mixer or All-In-One unit"
    SOURCES = "CDJs or Turntables"


class ManifestNames:
    POWER = "IEC Power Cable"
    DATA = "USB A-to-B Cable"
    RCA = "RCA Audio Stereo Pair"
    XLR = "XLR Cable"
    GROUND = "Ground Wire"


# Configuration


@dataclass(frozen=True)
class RoutingConfig:
    """
    Cable routing geometry parameters, in canvas units.

    Attributes:
        vertical_tolerance: Max |dx| for a straight vertical drop.
        vertical_min_drop: Min downward dy for a straight vertical drop.
        base_clearance: Distance from the lower endpoint to lane 0.
        lane_height: Distance between adjacent lanes.
        lane_count: Number of reusable lanes before wrapping.
        corner_radius: Radius of the quarter-round corners.
        vertical_label_offset: Label offset from the start of a vertical drop.
        unmanaged_drop: Length of a cable running to an unmanaged sink.
    """
    vertical_tolerance: float = 5.0
    vertical_min_drop: float = 100.0
    base_clearance: float = 100.0
    lane_height: float = 12.0
    lane_count: int = 8
    corner_radius: float = 15.0
    vertical_label_offset: Tuple[float, float] = (8.0, 80.0)
    unmanaged_drop: float = 300.0


@dataclass(frozen=True)
class LayoutConfig:
    """
    Auto-arrange zone parameters.

    Attributes:
        center_x: Horizontal center of the hub block.
        table_y: Row of the DJ table (hubs, players, other gear).
        floor_y: Row of the subwoofers.
        spacing: Gap between devices on the table row.
        pa_offset: Gap between the table block and the PA stacks.
        top_lift: How far the tops sit above the table row.
        sub_spacing: Gap between adjacent subwoofers.
        other_gap: Gap between the right sub stack and leftover gear.
    """
    center_x: float = 800.0
    table_y: float = 150.0
    floor_y: float = 600.0
    spacing: float = 20.0
    pa_offset: float = 150.0
    top_lift: float = 50.0
    sub_spacing: float = 5.0
    other_gap: float = 100.0


@dataclass(frozen=True)
class ViewFitConfig:
    padding: float = 150.0
    min_scale: float = 0.2
    max_scale: float = 1.0
    viewport_width: float = 1280.0
    viewport_height: float = 800.0


@dataclass(frozen=True)
class PlacementConfig:
    """Where ``Booth.add_item`` drops new devices."""
    start_x: float = 100.0
    start_y: float = 100.0
    step_x: float = 360.0


ROUTING = RoutingConfig()
LAYOUT = LayoutConfig()
VIEW_FIT = ViewFitConfig()
PLACEMENT = PlacementConfig()
