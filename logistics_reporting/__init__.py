"""
logistics_reporting -- flattened reports and XLSX / PDF export.

Consumes ``EventPlan`` and ``EventCalculation`` from the services layer;
never calls the engines itself.

Failure modes:
    - ``UnsupportedExportFormatError`` for formats other than xlsx / pdf.
"""

from __future__ import annotations

from pathlib import Path

from logistics_kernel.exceptions import UnsupportedExportFormatError
from logistics_reporting.models import (
    REPORT_HEADERS,
    EventReport,
    ReportMetadata,
    ReportRow,
)
from logistics_reporting.pdf_export import export_pdf
from logistics_reporting.rows import (
    build_report,
    build_report_rows,
    format_date_range,
    hotel_dates,
)
from logistics_reporting.xlsx_export import export_xlsx

EXPORTERS = {
    "xlsx": export_xlsx,
    "pdf": export_pdf,
}


def default_file_name(report: EventReport, export_format: str) -> str:
    """``<event>_<suffix>.<ext>``, e.g. ``Expo_Crew_Calculator.pdf``."""
    stem = report.metadata.file_stem.replace("/", "_").replace("\\", "_")
    return f"{stem}_{report.metadata.file_suffix}.{export_format}"


def export_report(report: EventReport, path: Path, export_format: str | None = None) -> Path:
    """
    Export ``report`` to ``path``; the format defaults to the file suffix.

    Raises:
        UnsupportedExportFormatError: If the format is not xlsx or pdf.
    """
    path = Path(path)
    fmt = (export_format or path.suffix.lstrip(".")).lower()
    exporter = EXPORTERS.get(fmt)
    if exporter is None:
        raise UnsupportedExportFormatError(fmt)
    return exporter(report, path)


__all__ = [
    "EXPORTERS",
    "REPORT_HEADERS",
    "EventReport",
    "ReportMetadata",
    "ReportRow",
    "build_report",
    "build_report_rows",
    "default_file_name",
    "export_pdf",
    "export_report",
    "export_xlsx",
    "format_date_range",
    "hotel_dates",
]
