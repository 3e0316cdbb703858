"""
XLSX export for event reports.

Writes the combined crew/labour table to the configured sheet (header row,
one row per report row, bold TOTALS row) and the event-wide figures to a
second "Summary" sheet.
"""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from logistics_kernel.logging_config import get_logger
from logistics_reporting.models import REPORT_HEADERS, EventReport

logger = get_logger("reporting.xlsx")

# Excel sheet titles are limited to 31 characters
_MAX_SHEET_TITLE = 31
_HEADER_FILL = PatternFill(start_color="DCDCDC", end_color="DCDCDC", fill_type="solid")
_COLUMN_WIDTHS = (18, 22, 30, 12, 12, 30, 11, 13, 30, 12, 22)


def export_xlsx(report: EventReport, path: Path) -> Path:
    """Write ``report`` to ``path`` as an .xlsx workbook and return the path."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = report.metadata.sheet_name[:_MAX_SHEET_TITLE]

    sheet.append(list(REPORT_HEADERS))
    for cell in sheet[1]:
        cell.font = Font(bold=True)
        cell.fill = _HEADER_FILL

    for row in report.rows:
        sheet.append(row.as_cells())

    sheet.append(report.totals_cells())
    for cell in sheet[sheet.max_row]:
        cell.font = Font(bold=True)

    for idx, width in enumerate(_COLUMN_WIDTHS, start=1):
        sheet.column_dimensions[get_column_letter(idx)].width = width
    sheet.freeze_panes = "A2"

    summary = workbook.create_sheet("Summary")
    summary.append([report.metadata.title])
    summary["A1"].font = Font(bold=True, size=14)
    for line in report.metadata.summary_lines():
        summary.append([line])
    summary.append([])
    for label, value in report.summary_figures():
        summary.append([label, value])
    summary.column_dimensions["A"].width = 40

    path = Path(path)
    workbook.save(path)
    logger.info("xlsx_report_exported", extra={
        "path": str(path),
        "row_count": len(report.rows),
    })
    return path
