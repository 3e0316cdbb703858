"""
Report Domain Models (``logistics_reporting.models``).

Frozen value objects representing a flattened logistics report: one
``ReportRow`` per frame (or per person), the report metadata, and the
``EventReport`` bundle the exporters render.

Invariants enforced
-------------------
* All models are ``frozen=True``.
* Labour rows never carry an inner-trip figure (``None``); crew rows never
  carry a mode label.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from logistics_kernel.domain.values import PersonnelType, TotalCalculation

REPORT_HEADERS: tuple[str, ...] = (
    "Type (Crew/Labour)",
    "Frame Name",
    "Names",
    "Outbound",
    "Inbound",
    "Mode",
    "Per Diems",
    "Hotel Nights",
    "Hotel Dates",
    "Inner Trips",
    "Outside/Transport Trips",
)

_TYPE_LABELS = {
    PersonnelType.CREW: "Crew",
    PersonnelType.LABOUR: "Labour",
}


@dataclass(frozen=True)
class ReportRow:
    """One line of the combined crew/labour table."""

    personnel_type: PersonnelType
    frame_name: str
    names: str
    outbound: str
    inbound: str
    mode: str
    per_diems: int
    hotel_nights: int
    hotel_dates: str
    inner_trips: int | None
    outside_transport_trips: int | None

    def as_cells(self) -> list[str | int]:
        """Cell values in ``REPORT_HEADERS`` order; absent figures are blank."""
        return [
            _TYPE_LABELS[self.personnel_type],
            self.frame_name,
            self.names,
            self.outbound,
            self.inbound,
            self.mode,
            self.per_diems,
            self.hotel_nights,
            self.hotel_dates,
            "" if self.inner_trips is None else self.inner_trips,
            "" if self.outside_transport_trips is None else self.outside_transport_trips,
        ]


@dataclass(frozen=True)
class ReportMetadata:
    """Header information printed above the table."""

    title: str
    event_name: str
    location_label: str
    generated_at: datetime
    sheet_name: str
    footer_text: str
    file_suffix: str
    file_stem: str

    def summary_lines(self) -> list[str]:
        return [
            f"Project: {self.event_name}",
            f"Location: {self.location_label}",
            f"Generated: {self.generated_at.strftime('%Y-%m-%d %H:%M')}",
        ]


@dataclass(frozen=True)
class EventReport:
    """Everything an exporter needs to render one event."""

    metadata: ReportMetadata
    rows: tuple[ReportRow, ...]
    totals: TotalCalculation

    def totals_cells(self) -> list[str | int]:
        """The TOTALS line, aligned with ``REPORT_HEADERS``."""
        return [
            "TOTALS", "", "", "", "", "",
            self.totals.total_per_diems,
            self.totals.total_hotel_nights,
            "",
            self.totals.total_inner_trips,
            self.totals.total_outside_transport_trips,
        ]

    def summary_figures(self) -> list[tuple[str, int]]:
        """Event-wide figures, including the shared car count."""
        return [
            ("Total Per Diems", self.totals.total_per_diems),
            ("Total Hotel Nights", self.totals.total_hotel_nights),
            ("Total Inner City Trips", self.totals.total_inner_trips),
            ("Total Outside City Trips", self.totals.total_outside_trips),
            ("Labour Transport Trips", self.totals.total_labour_trips),
            ("Cars Needed", self.totals.total_cars_needed),
        ]
