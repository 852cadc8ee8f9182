"""Tests for manifest (bill of materials) generation."""

from pyboothpatch.catalog import Catalog
from pyboothpatch.manifest import generate_manifest
from pyboothpatch.model.constants import CableCategory, ManifestCategory, ManifestNames
from pyboothpatch.model.core import Cable, ManifestRow
from pyboothpatch.system.topology import generate_cables


def _cable(n, from_item, port, category, to_item=None, to_port=None):
    return Cable(
        id=f"W{n:03d}",
        from_instance_id=from_item.instance_id,
        from_port_id=port,
        category=category,
        to_instance_id=to_item.instance_id if to_item else None,
        to_port_id=to_port,
    )


class TestDeviceRows:
    def test_groups_by_model(self, place):
        rows = generate_manifest([place("cdj-3000") for _ in range(3)], [])
        assert rows == [
            ManifestRow("CDJ-3000", 3, ManifestCategory.DEVICE, "Pioneer DJ")
        ]

    def test_first_seen_order(self, place):
        items = [place("djm-900"), place("cdj-3000"), place("djm-900")]
        rows = generate_manifest(items, [])
        assert [(r.name, r.quantity) for r in rows] == [
            ("DJM-900NXS2", 2),
            ("CDJ-3000", 1),
        ]

    def test_unknown_device_listed_by_id(self, place):
        rows = generate_manifest([place("mystery-box")], [])
        assert rows == [ManifestRow("mystery-box", 1, ManifestCategory.DEVICE)]

    def test_details_carry_manufacturer(self, place):
        items = [place("djm-900"), place("sl-1200"), place("mystery-box")]
        rows = generate_manifest(items, [])
        assert [r.details for r in rows] == ["Pioneer DJ", "Technics", ""]

    def test_empty_catalog_lists_items_by_id(self, place):
        rows = generate_manifest([place("djm-900")], [], Catalog([]))
        assert rows == [ManifestRow("djm-900", 1, ManifestCategory.DEVICE)]

    def test_empty(self):
        assert generate_manifest([], []) == []


class TestCableRows:
    def test_fixed_cable_order(self, place):
        mixer = place("djm-900")
        deck = place("sl-1200")
        top = place("jbl-irx112")
        s4 = place("traktor-s4")
        cables = [
            _cable(1, deck, "gnd", CableCategory.GROUND),
            _cable(2, mixer, "xlr-out-l", CableCategory.AUDIO, top, "xlr-in-1"),
            _cable(3, deck, "rca-out", CableCategory.AUDIO, mixer, "rca-in-1"),
            _cable(4, s4, "usb", CableCategory.DATA),
            _cable(5, mixer, "ac-in", CableCategory.POWER),
            _cable(6, deck, "ac", CableCategory.POWER),
        ]
        rows = generate_manifest([mixer, deck, top, s4], cables)
        cable_rows = [r for r in rows if r.category == ManifestCategory.CABLE]

        assert [(r.name, r.quantity) for r in cable_rows] == [
            (ManifestNames.POWER, 2),
            (ManifestNames.DATA, 1),
            (ManifestNames.RCA, 1),
            (ManifestNames.XLR, 1),
            (ManifestNames.GROUND, 1),
        ]

    def test_devices_before_cables(self, place):
        mixer = place("djm-900")
        rows = generate_manifest([mixer], [_cable(1, mixer, "ac-in", CableCategory.POWER)])
        assert [r.category for r in rows] == [
            ManifestCategory.DEVICE,
            ManifestCategory.CABLE,
        ]

    def test_zero_counts_omitted(self, place):
        mixer = place("djm-900")
        rows = generate_manifest([mixer], [_cable(1, mixer, "ac-in", CableCategory.POWER)])
        names = [r.name for r in rows]
        assert ManifestNames.XLR not in names
        assert ManifestNames.GROUND not in names

    def test_unresolvable_audio_counts_as_rca(self, place):
        ghost = place("mystery-box")
        mixer = place("djm-900")
        cables = [
            _cable(1, ghost, "out", CableCategory.AUDIO, mixer, "rca-in-1"),
            _cable(2, mixer, "no-such-port", CableCategory.AUDIO),
        ]
        rows = generate_manifest([ghost, mixer], cables)
        assert ManifestRow(ManifestNames.RCA, 2, ManifestCategory.CABLE) in rows

    def test_generated_booth(self, place):
        items = [
            place("pwr-strip"),
            place("djm-900", x=600),
            place("cdj-3000", x=100),
            place("sl-1200", x=200),
            place("jbl-prx818xlf", x=0),
            place("jbl-irx112", x=0),
        ]
        rows = generate_manifest(items, generate_cables(items))
        counts = {r.name: r.quantity for r in rows if r.category == ManifestCategory.CABLE}

        # 5 powered devices plus the strip's own inlet
        assert counts[ManifestNames.POWER] == 6
        assert counts[ManifestNames.RCA] == 2
        # master L + R into the sub, thru into the top
        assert counts[ManifestNames.XLR] == 3
        assert counts[ManifestNames.GROUND] == 1
        assert ManifestNames.DATA not in counts
