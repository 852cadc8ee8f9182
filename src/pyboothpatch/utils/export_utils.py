"""
Export utilities for manifest reports.

Writes the manifest (bill of materials) as CSV, or as an Excel workbook
via ``openpyxl`` with a bold, shaded header row.
"""

import csv
import os
from collections.abc import Sequence

from pyboothpatch.model.core import ManifestRow

MANIFEST_HEADERS = ["Item", "Category", "Qty", "Details"]


def _ensure_parent(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def export_manifest_csv(rows: Sequence[ManifestRow], filepath: str) -> str:
    """
    Export manifest rows to a CSV file.

    Args:
        rows: Manifest rows from ``generate_manifest()``.
        filepath: Path of the CSV file to write.

    Returns:
        The path written.
    """
    _ensure_parent(filepath)
    with open(filepath, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(MANIFEST_HEADERS)
        for row in rows:
            writer.writerow([row.name, row.category, row.quantity, row.details])
    return filepath


def export_manifest_excel(rows: Sequence[ManifestRow], filepath: str) -> str:
    """
    Export manifest rows to an Excel workbook with a single "Manifest" sheet.

    Args:
        rows: Manifest rows from ``generate_manifest()``.
        filepath: Path of the ``.xlsx`` file to write.

    Returns:
        The path written.
    """
    from openpyxl import Workbook
    from openpyxl.styles import Alignment, Font, PatternFill

    wb = Workbook()
    ws = wb.active
    ws.title = "Manifest"

    header_font = Font(bold=True)
    header_fill = PatternFill(start_color="D9D9D9", end_color="D9D9D9", fill_type="solid")
    for col, header in enumerate(MANIFEST_HEADERS, 1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="left")

    for row_idx, row in enumerate(rows, 2):
        ws.cell(row=row_idx, column=1, value=row.name)
        ws.cell(row=row_idx, column=2, value=row.category)
        ws.cell(row=row_idx, column=3, value=row.quantity).alignment = Alignment(horizontal="right")
        ws.cell(row=row_idx, column=4, value=row.details)

    ws.column_dimensions["A"].width = 30
    ws.column_dimensions["B"].width = 12
    ws.column_dimensions["C"].width = 8
    ws.column_dimensions["D"].width = 40

    _ensure_parent(filepath)
    wb.save(filepath)
    return filepath
