"""PDF export for event reports."""

from __future__ import annotations

import functools
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from logistics_kernel.logging_config import get_logger
from logistics_reporting.models import REPORT_HEADERS, EventReport

logger = get_logger("reporting.pdf")

_COLUMN_WIDTHS = (45, 70, 110, 55, 55, 95, 45, 45, 110, 45, 70)
# Columns rendered as wrapping paragraphs rather than plain strings
_WRAPPED_COLUMNS = frozenset({1, 2, 5, 8})


class _NumberedCanvas(canvas.Canvas):
    """Canvas that defers page output so each footer can print "Page i of n"."""

    def __init__(self, *args, footer_text: str = "", **kwargs):
        super().__init__(*args, **kwargs)
        self._footer_text = footer_text
        self._saved_page_states: list[dict] = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_footer(total)
            super().showPage()
        super().save()

    def _draw_footer(self, total: int) -> None:
        width, _ = self._pagesize
        self.setFont("Helvetica", 8)
        self.drawString(28, 18, self._footer_text)
        self.drawRightString(width - 28, 18, f"Page {self._pageNumber} of {total}")


def _table_data(report: EventReport, cell_style) -> list[list]:
    header = [Paragraph(f"<b>{h}</b>", cell_style) for h in REPORT_HEADERS]
    data = [header]
    for row in report.rows:
        cells = row.as_cells()
        data.append([
            Paragraph(escape(str(v)), cell_style) if i in _WRAPPED_COLUMNS else str(v)
            for i, v in enumerate(cells)
        ])
    data.append([str(v) for v in report.totals_cells()])
    return data


def export_pdf(report: EventReport, path: Path) -> Path:
    """Render ``report`` to ``path`` as a landscape PDF and return the path."""
    path = Path(path)
    doc = SimpleDocTemplate(
        str(path),
        pagesize=landscape(A4),
        title=f"{report.metadata.event_name} - {report.metadata.title}",
        leftMargin=28,
        rightMargin=28,
        topMargin=28,
        bottomMargin=36,
    )
    styles = getSampleStyleSheet()
    cell_style = styles["BodyText"].clone("ReportCell", fontSize=7, leading=8)

    elements = [Paragraph(escape(report.metadata.title), styles["Heading1"])]
    for line in report.metadata.summary_lines():
        elements.append(Paragraph(escape(line), styles["BodyText"]))
    elements.append(Spacer(1, 12))

    table = Table(_table_data(report, cell_style), colWidths=_COLUMN_WIDTHS, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.Color(0.86, 0.86, 0.86)),
        ("BACKGROUND", (0, -1), (-1, -1), colors.Color(0.78, 0.78, 0.78)),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 1), (-1, -1), 7),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]))
    elements.append(table)
    elements.append(Spacer(1, 18))

    summary = Table(
        [[label, str(value)] for label, value in report.summary_figures()],
        colWidths=(160, 60),
    )
    summary.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
    ]))
    elements.append(summary)

    doc.build(
        elements,
        canvasmaker=functools.partial(
            _NumberedCanvas, footer_text=report.metadata.footer_text,
        ),
    )
    logger.info("pdf_report_exported", extra={
        "path": str(path),
        "row_count": len(report.rows),
    })
    return path
