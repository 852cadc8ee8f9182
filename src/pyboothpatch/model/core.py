"""
Core value types for booth modelling.

Device definitions, placed items, cables and the derived result rows are
all frozen dataclasses. Engines never mutate them; a move or a face toggle
produces a new ``PlacedItem`` via ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyboothpatch.model.constants import DeviceType, Face


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Port:
    """
    A named connector on one face of a device.

    Attributes:
        id: Identifier, unique within the device (e.g. ``"rca-in-1"``).
        kind: A ``ConnectorKind`` value. Only ``id`` and ``kind`` drive
            the engines; the rest is rendering metadata.
        position: Offset relative to the device origin on its face.
        label: Optional panel label (e.g. ``"CH1"``, ``"MAIN L"``).
    """

    id: str
    kind: str
    position: Point
    label: str = ""


@dataclass(frozen=True)
class DeviceDefinition:
    """
    Immutable catalog entry for a piece of equipment.

    Attributes:
        id: Catalog identifier (e.g. ``"cdj-3000"``).
        model: Display model name, used for manifest grouping.
        manufacturer: Manufacturer name.
        type: A ``DeviceType`` value.
        width: Footprint width in canvas units.
        height: Front (top-down) face height.
        rear_height: Back panel height, ``None`` when equal to ``height``.
        description: Free-text description.
        front_ports: Ports on the front face, in panel order.
        back_ports: Ports on the back face, in panel order.
        is_subwoofer: Speaker sits at the bottom of a PA stack.
        supports_vinyl: Player is a turntable with a ground terminal.
        accessory_role: An ``AccessoryRole`` value, or ``None``.
    """

    id: str
    model: str
    manufacturer: str
    type: str
    width: float
    height: float
    rear_height: float | None = None
    description: str = ""
    front_ports: tuple[Port, ...] = ()
    back_ports: tuple[Port, ...] = ()
    is_subwoofer: bool = False
    supports_vinyl: bool = False
    accessory_role: str | None = None

    @property
    def ports(self) -> tuple[Port, ...]:
        """All ports, back face first."""
        return self.back_ports + self.front_ports

    @property
    def is_hub(self) -> bool:
        return self.type in DeviceType.HUBS

    def find_port(self, port_id: str) -> Port | None:
        for port in self.ports:
            if port.id == port_id:
                return port
        return None

    def first_port(self, kind: str) -> Port | None:
        """Return the first port of ``kind``, searching the back face first."""
        for port in self.ports:
            if port.kind == kind:
                return port
        return None

    def find_port_by_label(self, *needles: str, kind: str | None = None) -> Port | None:
        """Return the first port whose label contains any of ``needles``."""
        for port in self.ports:
            if kind is not None and port.kind != kind:
                continue
            if any(n in port.label for n in needles):
                return port
        return None

    def face_height(self, face: str) -> float:
        if face == Face.BACK and self.rear_height:
            return self.rear_height
        return self.height


@dataclass(frozen=True)
class PlacedItem:
    """
    One placement of a catalog device on the canvas.

    Attributes:
        instance_id: Unique per placement (e.g. ``"dev-3"``).
        device_id: Catalog id of the placed device.
        x: Canvas x of the device origin.
        y: Canvas y of the device origin.
        face: Face currently shown; shared by every item in a booth.
    """

    instance_id: str
    device_id: str
    x: float
    y: float
    face: str = Face.FRONT


@dataclass(frozen=True)
class Cable:
    """
    A cable between two ports.

    A cable without a destination terminates at an unmanaged sink
    (house mains, snake, floor run, host computer).
    """

    id: str
    from_instance_id: str
    from_port_id: str
    category: str
    to_instance_id: str | None = None
    to_port_id: str | None = None

    @property
    def is_unmanaged(self) -> bool:
        return self.to_instance_id is None


@dataclass(frozen=True)
class ManifestRow:
    name: str
    quantity: int
    category: str
    details: str = ""


@dataclass(frozen=True)
class ReadinessResult:
    """
    Derived readiness of a booth.

    Attributes:
        status: A ``SetupStatus`` value.
        message: One human-readable line. When the status is downgraded
            because of missing items only the first missing tag is shown;
            the full list stays in ``missing``.
        capabilities: Capability tags, in evaluation order.
        missing: Missing-requirement tags, in evaluation order.
    """

    status: str
    message: str
    capabilities: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


def flip_face(face: str) -> str:
    return Face.BACK if face == Face.FRONT else Face.FRONT
