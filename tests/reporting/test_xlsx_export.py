"""Tests for the XLSX exporter."""

from dataclasses import replace

from openpyxl import load_workbook

from logistics_reporting.models import REPORT_HEADERS
from logistics_reporting.xlsx_export import export_xlsx


class TestExportXlsx:

    def test_writes_main_sheet(self, sample_report, tmp_path):
        path = export_xlsx(sample_report, tmp_path / "expo.xlsx")
        workbook = load_workbook(path)
        sheet = workbook["Crew Calculator"]

        header = [cell.value for cell in sheet[1]]
        assert header == list(REPORT_HEADERS)
        assert sheet["B2"].value == "Loaders"
        assert sheet["B3"].value == "Riggers"
        assert sheet["A3"].value == "Crew"

    def test_totals_row_is_bold(self, sample_report, tmp_path):
        path = export_xlsx(sample_report, tmp_path / "expo.xlsx")
        sheet = load_workbook(path)["Crew Calculator"]
        last = sheet.max_row
        assert sheet.cell(row=last, column=1).value == "TOTALS"
        assert sheet.cell(row=last, column=7).value == 18
        assert sheet.cell(row=last, column=11).value == 4
        assert sheet.cell(row=last, column=1).font.bold

    def test_header_frozen(self, sample_report, tmp_path):
        path = export_xlsx(sample_report, tmp_path / "expo.xlsx")
        assert load_workbook(path)["Crew Calculator"].freeze_panes == "A2"

    def test_summary_sheet(self, sample_report, tmp_path):
        path = export_xlsx(sample_report, tmp_path / "expo.xlsx")
        summary = load_workbook(path)["Summary"]
        assert summary["A1"].value == "Crew Calculator"
        assert summary["A2"].value == "Project: Expo"
        values = {
            row[0]: row[1]
            for row in summary.iter_rows(min_row=6, values_only=True)
            if row[0] is not None
        }
        assert values["Cars Needed"] == 1
        assert values["Total Hotel Nights"] == 10

    def test_long_sheet_name_truncated(self, sample_report, tmp_path):
        metadata = replace(sample_report.metadata, sheet_name="A" * 40)
        report = replace(sample_report, metadata=metadata)
        path = export_xlsx(report, tmp_path / "long.xlsx")
        assert load_workbook(path).sheetnames[0] == "A" * 31
