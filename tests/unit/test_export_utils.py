"""
Tests for pyboothpatch.utils.export_utils.

Covers the manifest writers:
- export_manifest_csv
- export_manifest_excel (read back with openpyxl)
"""

import csv

import pytest

from pyboothpatch.model.constants import ManifestCategory
from pyboothpatch.model.core import ManifestRow
from pyboothpatch.utils.export_utils import (
    MANIFEST_HEADERS,
    export_manifest_csv,
    export_manifest_excel,
)


@pytest.fixture
def rows():
    return [
        ManifestRow("CDJ-3000", 2, ManifestCategory.DEVICE),
        ManifestRow("DJM-900NXS2", 1, ManifestCategory.DEVICE),
        ManifestRow("IEC Power Cable", 3, ManifestCategory.CABLE, "1.5 m"),
    ]


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


class TestManifestCsv:
    def test_header_and_rows(self, tmp_path, rows):
        path = export_manifest_csv(rows, str(tmp_path / "manifest.csv"))
        with open(path, newline="") as f:
            data = list(csv.reader(f))

        assert data[0] == MANIFEST_HEADERS
        assert data[1] == ["CDJ-3000", "device", "2", ""]
        assert data[3] == ["IEC Power Cable", "cable", "3", "1.5 m"]
        assert len(data) == 4

    def test_creates_parent_directory(self, tmp_path, rows):
        target = tmp_path / "out" / "nested" / "manifest.csv"
        export_manifest_csv(rows, str(target))
        assert target.exists()

    def test_empty_manifest_writes_header_only(self, tmp_path):
        path = export_manifest_csv([], str(tmp_path / "empty.csv"))
        with open(path, newline="") as f:
            assert list(csv.reader(f)) == [MANIFEST_HEADERS]


# ---------------------------------------------------------------------------
# Excel
# ---------------------------------------------------------------------------


class TestManifestExcel:
    def test_sheet_contents(self, tmp_path, rows):
        openpyxl = pytest.importorskip("openpyxl")
        path = export_manifest_excel(rows, str(tmp_path / "manifest.xlsx"))

        ws = openpyxl.load_workbook(path).active
        assert ws.title == "Manifest"
        assert [c.value for c in ws[1]] == MANIFEST_HEADERS
        assert [c.value for c in ws[2]][:3] == ["CDJ-3000", "device", 2]
        assert ws.cell(row=4, column=4).value == "1.5 m"
        assert ws.max_row == 4

    def test_header_is_bold(self, tmp_path, rows):
        openpyxl = pytest.importorskip("openpyxl")
        path = export_manifest_excel(rows, str(tmp_path / "manifest.xlsx"))
        ws = openpyxl.load_workbook(path).active
        assert ws.cell(row=1, column=1).font.bold
        assert not ws.cell(row=2, column=1).font.bold
