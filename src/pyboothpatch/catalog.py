"""
Equipment catalog.

The catalog is a static, read-only table of ``DeviceDefinition`` entries
queryable by id. ``DEFAULT_CATALOG`` holds the stock equipment list; every
engine falls back to it when no catalog is passed.

Usage example::

    from pyboothpatch.catalog import DEFAULT_CATALOG

    mixer = DEFAULT_CATALOG.get("djm-900")
    mixer.find_port("rca-in-1").label   # "CH1"
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pyboothpatch.exceptions import DeviceNotFoundError, DuplicateDeviceError
from pyboothpatch.model.constants import (
    AccessoryRole,
    ConnectorKind,
    DeviceType,
    StandardDeviceIds,
)
from pyboothpatch.model.core import DeviceDefinition, Point, Port


class Catalog:
    """Ordered, id-indexed collection of device definitions."""

    def __init__(self, definitions: Iterable[DeviceDefinition]):
        self._definitions: dict[str, DeviceDefinition] = {}
        for definition in definitions:
            if definition.id in self._definitions:
                raise DuplicateDeviceError(definition.id)
            self._definitions[definition.id] = definition

    def get(self, device_id: str) -> DeviceDefinition:
        """
        Look up a definition, raising if it is unknown.

        Raises:
            DeviceNotFoundError: If ``device_id`` is not in the catalog.
        """
        try:
            return self._definitions[device_id]
        except KeyError:
            raise DeviceNotFoundError(device_id, self.ids()) from None

    def find(self, device_id: str) -> DeviceDefinition | None:
        """Look up a definition, returning ``None`` if it is unknown."""
        return self._definitions.get(device_id)

    def ids(self) -> list[str]:
        return list(self._definitions)

    def by_type(self, device_type: str) -> list[DeviceDefinition]:
        return [d for d in self._definitions.values() if d.type == device_type]

    def __contains__(self, device_id: object) -> bool:
        return device_id in self._definitions

    def __iter__(self) -> Iterator[DeviceDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


def _port(port_id: str, kind: str, x: float, y: float, label: str = "") -> Port:
    return Port(port_id, kind, Point(x, y), label)


# ---------------------------------------------------------------------------
# Speaker factory
# ---------------------------------------------------------------------------

# size -> (width, height)
_TOP_SIZES = {
    "8": (250, 400),
    "10": (300, 500),
    "12": (360, 600),
    "15": (430, 700),
    "column": (350, 800),
}
_SUB_SIZES = {
    "12": (400, 450),
    "15": (500, 550),
    "18": (600, 650),
}


def create_speaker(
    device_id: str,
    model: str,
    manufacturer: str,
    size: str,
    is_sub: bool = False,
) -> DeviceDefinition:
    """
    Build a powered PA speaker or subwoofer definition.

    Tops carry two mix inputs and a thru; subs carry stereo inputs and a
    stereo pass-thru so tops can be daisy-chained from them.

    Args:
        device_id: Catalog id.
        model: Display model name.
        manufacturer: Manufacturer name.
        size: Driver size in inches (``"8"`` .. ``"18"``) or ``"column"``.
        is_sub: Whether the speaker is a subwoofer.

    Returns:
        The speaker definition.
    """
    sizes = _SUB_SIZES if is_sub else _TOP_SIZES
    width, height = sizes.get(size, (350, 600))

    back_ports = [_port("ac", ConnectorKind.POWER, width / 2 - 20, height - 50, "AC IN")]
    if is_sub:
        back_ports += [
            _port("xlr-in-l", ConnectorKind.XLR, 60, 100, "IN L"),
            _port("xlr-in-r", ConnectorKind.XLR, 110, 100, "IN R"),
            _port("xlr-out-l", ConnectorKind.XLR, 60, 160, "OUT L"),
            _port("xlr-out-r", ConnectorKind.XLR, 110, 160, "OUT R"),
        ]
        description = f"{size}-inch Active Subwoofer."
    else:
        back_ports += [
            _port("xlr-in-1", ConnectorKind.XLR, 60, 100, "IN 1"),
            _port("xlr-in-2", ConnectorKind.XLR, 60, 150, "IN 2"),
            _port("xlr-out", ConnectorKind.XLR, 60, 200, "THRU"),
        ]
        description = f"{size}-inch Powered PA Speaker."

    return DeviceDefinition(
        id=device_id,
        model=model,
        manufacturer=manufacturer,
        type=DeviceType.SPEAKER,
        width=width,
        height=height,
        rear_height=height,
        description=description,
        back_ports=tuple(back_ports),
        is_subwoofer=is_sub,
    )


# ---------------------------------------------------------------------------
# DJ equipment
# ---------------------------------------------------------------------------

CDJ_3000 = DeviceDefinition(
    id="cdj-3000",
    model="CDJ-3000",
    manufacturer="Pioneer DJ",
    type=DeviceType.PLAYER,
    width=329,
    height=453,
    rear_height=120,
    description="Professional DJ Multi Player with 9-inch touch screen.",
    front_ports=(_port("usb", ConnectorKind.DATA, 280, 30, "USB"),),
    back_ports=(
        _port("pwr", ConnectorKind.POWER, 20, 60, "AC IN"),
        _port("rca", ConnectorKind.RCA, 100, 60, "AUDIO OUT"),
        _port("digital", ConnectorKind.RCA, 140, 60, "DIGITAL"),
        _port("link", ConnectorKind.DATA, 200, 60, "LINK"),
    ),
)

DJM_900 = DeviceDefinition(
    id="djm-900",
    model="DJM-900NXS2",
    manufacturer="Pioneer DJ",
    type=DeviceType.MIXER,
    width=333,
    height=414,
    rear_height=120,
    description="4-channel professional mixer with 64-bit mixing processor.",
    back_ports=(
        _port("xlr-out-l", ConnectorKind.XLR, 40, 70, "MAIN L"),
        _port("xlr-out-r", ConnectorKind.XLR, 80, 70, "MAIN R"),
        _port("ac-in", ConnectorKind.POWER, 280, 70, "AC"),
        _port("rca-in-1", ConnectorKind.RCA, 40, 30, "CH1"),
        _port("rca-in-2", ConnectorKind.RCA, 100, 30, "CH2"),
        _port("rca-in-3", ConnectorKind.RCA, 160, 30, "CH3"),
        _port("rca-in-4", ConnectorKind.RCA, 220, 30, "CH4"),
    ),
)

TECH_1200 = DeviceDefinition(
    id="sl-1200",
    model="SL-1210MK7",
    manufacturer="Technics",
    type=DeviceType.PLAYER,
    width=453,
    height=353,
    rear_height=100,
    description="Direct Drive Turntable.",
    back_ports=(
        _port("rca-out", ConnectorKind.RCA, 200, 50, "PHONO"),
        _port("gnd", ConnectorKind.GROUND, 230, 50, "GND"),
        _port("ac", ConnectorKind.POWER, 50, 50, "AC"),
    ),
    supports_vinyl=True,
)

XDJ_XZ = DeviceDefinition(
    id=StandardDeviceIds.XDJ_XZ,
    model="XDJ-XZ",
    manufacturer="Pioneer DJ",
    type=DeviceType.ALL_IN_ONE,
    width=878,
    height=466,
    rear_height=140,
    description="Professional All-in-One.",
    back_ports=(
        _port("ac", ConnectorKind.POWER, 50, 80),
        _port("rca-in-3", ConnectorKind.RCA, 300, 80, "CH3"),
        _port("rca-in-4", ConnectorKind.RCA, 350, 80, "CH4"),
        _port("xlr-out-l", ConnectorKind.XLR, 600, 80, "MAIN L"),
        _port("xlr-out-r", ConnectorKind.XLR, 640, 80, "MAIN R"),
    ),
)

XDJ_RX3 = DeviceDefinition(
    id=StandardDeviceIds.XDJ_RX3,
    model="XDJ-RX3",
    manufacturer="Pioneer DJ",
    type=DeviceType.ALL_IN_ONE,
    width=728,
    height=469,
    rear_height=140,
    description="2-Channel All-in-One.",
    back_ports=(
        _port("ac", ConnectorKind.POWER, 40, 80),
        _port("rca-in-1", ConnectorKind.RCA, 200, 80),
        _port("rca-in-2", ConnectorKind.RCA, 240, 80),
        _port("xlr-out-l", ConnectorKind.XLR, 400, 80, "MAIN L"),
        _port("xlr-out-r", ConnectorKind.XLR, 440, 80, "MAIN R"),
    ),
)

TRAKTOR_S4 = DeviceDefinition(
    id=StandardDeviceIds.TRAKTOR_S4,
    model="Kontrol S4 MK3",
    manufacturer="Native Instruments",
    type=DeviceType.CONTROLLER,
    width=542,
    height=339,
    rear_height=100,
    description="4-Channel DJ Controller.",
    back_ports=(
        _port("usb", ConnectorKind.DATA, 40, 50, "USB"),
        _port("rca-in-1", ConnectorKind.RCA, 150, 50),
        _port("xlr-out-l", ConnectorKind.XLR, 350, 50, "MAIN L"),
        _port("xlr-out-r", ConnectorKind.XLR, 380, 50, "MAIN R"),
        _port("ac", ConnectorKind.POWER, 500, 50),
    ),
)

HD25 = DeviceDefinition(
    id="senn-hd25",
    model="HD-25",
    manufacturer="Sennheiser",
    type=DeviceType.ACCESSORY,
    width=180,
    height=180,
    rear_height=50,
    description="Industry Standard Monitoring Headphones.",
    front_ports=(_port("cups", ConnectorKind.VISUAL, 90, 90, "PHONES"),),
    accessory_role=AccessoryRole.HEADPHONES,
)

PWR_STRIP = DeviceDefinition(
    id=StandardDeviceIds.POWER_STRIP,
    model="Power Strip",
    manufacturer="Generic",
    type=DeviceType.ACCESSORY,
    width=400,
    height=60,
    rear_height=60,
    description="6-Way Power Distribution Unit.",
    front_ports=(_port("switch", ConnectorKind.VISUAL, 30, 20, "I/O"),),
    back_ports=(
        _port("ac-in", ConnectorKind.POWER, 380, 30, "MAINS"),
        *(_port(f"ac-{n}", ConnectorKind.POWER, 50 * n, 30) for n in range(1, 7)),
    ),
    accessory_role=AccessoryRole.POWER_DISTRIBUTION,
)

# ---------------------------------------------------------------------------
# PA speakers and subs
# ---------------------------------------------------------------------------

# (id, model, manufacturer, size, is_sub)
_SPEAKERS = [
    # JBL
    ("jbl-irx112", "IRX112BT", "JBL", "12", False),
    ("jbl-irx115", "IRX115", "JBL", "15", False),
    ("jbl-eon710", "EON710", "JBL", "10", False),
    ("jbl-eon715", "EON715", "JBL", "15", False),
    ("jbl-prx815xlf", "PRX815XLF", "JBL", "15", True),
    ("jbl-prx818xlf", "PRX818XLF", "JBL", "18", True),
    ("jbl-srx818sp", "SRX818SP", "JBL", "18", True),
    ("jbl-prx908", "PRX908", "JBL", "8", False),
    ("jbl-prx915", "PRX915", "JBL", "15", False),
    ("jbl-eon712", "EON712", "JBL", "12", False),
    # QSC
    ("qsc-cp12", "CP12", "QSC", "12", False),
    ("qsc-k12-2", "K12.2", "QSC", "12", False),
    ("qsc-k10-2", "K10.2", "QSC", "10", False),
    ("qsc-cp8", "CP8", "QSC", "8", False),
    ("qsc-k8-2", "K8.2", "QSC", "8", False),
    ("qsc-cp15", "CP15", "QSC", "15", False),
    ("qsc-kw153", "KW153", "QSC", "15", False),
    ("qsc-ks118", "KS118", "QSC", "18", True),
    ("qsc-ks112", "KS112", "QSC", "12", True),
    # Electro-Voice
    ("ev-zlx12p", "ZLX-12P", "Electro-Voice", "12", False),
    ("ev-zlx15p", "ZLX-15P", "Electro-Voice", "15", False),
    ("ev-elx200-12p", "ELX200-12P", "Electro-Voice", "12", False),
    ("ev-elx200-15p", "ELX200-15P", "Electro-Voice", "15", False),
    ("ev-ekx12p", "EKX-12P", "Electro-Voice", "12", False),
    ("ev-ekx15p", "EKX-15P", "Electro-Voice", "15", False),
    ("ev-etx12p", "ETX-12P", "Electro-Voice", "12", False),
    ("ev-evolve50", "Evolve 50", "Electro-Voice", "column", False),
    ("ev-elx200-18sp", "ELX200-18SP", "Electro-Voice", "18", True),
    ("ev-etx18sp", "ETX-18SP", "Electro-Voice", "18", True),
    # Yamaha
    ("yam-dbr12", "DBR12", "Yamaha", "12", False),
    ("yam-dbr10", "DBR10", "Yamaha", "10", False),
    ("yam-dbr15", "DBR15", "Yamaha", "15", False),
    ("yam-dxr12", "DXR12mkII", "Yamaha", "12", False),
    ("yam-dxr10", "DXR10mkII", "Yamaha", "10", False),
    ("yam-dzr12", "DZR12", "Yamaha", "12", False),
    ("yam-dzr10", "DZR10", "Yamaha", "10", False),
    ("yam-dxs18", "DXS18", "Yamaha", "18", True),
    ("yam-dxs12", "DXS12mkII", "Yamaha", "12", True),
    # RCF
    ("rcf-art912", "ART 912-A", "RCF", "12", False),
    ("rcf-art915", "ART 915-A", "RCF", "15", False),
    ("rcf-evox12", "EVOX 12", "RCF", "column", False),
    ("rcf-sub8004", "SUB 8004-AS II", "RCF", "18", True),
    # Wharfedale
    ("wharf-delta18", "Delta 18A", "Wharfedale", "18", True),
    ("wharf-titan18", "Titan 18A", "Wharfedale", "18", True),
    ("wharf-evp18s", "EVP-18S", "Wharfedale", "18", True),
    # LD Systems & Bose
    ("ld-sub18", "SUB 18DF", "LD Systems", "18", True),
    ("ld-maui28", "MAUI 28 G2 Sub", "LD Systems", "12", True),
    ("bose-f1", "F1 Subwoofer", "Bose", "12", True),
    ("bose-l1", "L1 Pro Sub1", "Bose", "12", True),
]

DEVICES: list[DeviceDefinition] = [
    CDJ_3000,
    DJM_900,
    TECH_1200,
    XDJ_XZ,
    XDJ_RX3,
    TRAKTOR_S4,
    HD25,
    PWR_STRIP,
    *(create_speaker(*spec) for spec in _SPEAKERS),
]

DEFAULT_CATALOG = Catalog(DEVICES)
