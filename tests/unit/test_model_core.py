from dataclasses import FrozenInstanceError, replace

import pytest

from pyboothpatch.catalog import DEFAULT_CATALOG
from pyboothpatch.model.constants import ConnectorKind, Face
from pyboothpatch.model.core import Cable, PlacedItem, Point, flip_face


class TestPoint:
    def test_offset(self):
        assert Point(1, 2).offset(10, 20) == Point(11, 22)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            Point(0, 0).x = 5


class TestDeviceDefinition:
    def test_ports_back_first(self):
        cdj = DEFAULT_CATALOG.get("cdj-3000")
        assert cdj.ports[0].id == "pwr"
        assert cdj.ports[-1].id == "usb"

    def test_find_port(self):
        mixer = DEFAULT_CATALOG.get("djm-900")
        assert mixer.find_port("rca-in-2").label == "CH2"
        assert mixer.find_port("nope") is None

    def test_first_port_by_kind(self):
        mixer = DEFAULT_CATALOG.get("djm-900")
        assert mixer.first_port(ConnectorKind.POWER).id == "ac-in"
        assert mixer.first_port(ConnectorKind.GROUND) is None

    def test_find_port_by_label_any_needle(self):
        mixer = DEFAULT_CATALOG.get("djm-900")
        assert mixer.find_port_by_label("MASTER L", "MAIN L").id == "xlr-out-l"

    def test_find_port_by_label_kind_filter(self):
        mixer = DEFAULT_CATALOG.get("djm-900")
        assert mixer.find_port_by_label("CH3", kind=ConnectorKind.XLR) is None
        assert mixer.find_port_by_label("CH3", kind=ConnectorKind.RCA).id == "rca-in-3"

    def test_is_hub(self):
        assert DEFAULT_CATALOG.get("traktor-s4").is_hub
        assert not DEFAULT_CATALOG.get("cdj-3000").is_hub


class TestPlacedItem:
    def test_default_face(self):
        assert PlacedItem("dev-1", "djm-900", 0, 0).face == Face.FRONT

    def test_replace_makes_new_item(self):
        item = PlacedItem("dev-1", "djm-900", 0, 0)
        moved = replace(item, x=10)
        assert item.x == 0
        assert moved.x == 10


def test_cable_unmanaged():
    assert Cable("W001", "dev-1", "ac", "power").is_unmanaged
    assert not Cable("W002", "dev-1", "rca", "audio", "dev-2", "rca-in-1").is_unmanaged


def test_flip_face():
    assert flip_face(Face.FRONT) == Face.BACK
    assert flip_face(Face.BACK) == Face.FRONT
