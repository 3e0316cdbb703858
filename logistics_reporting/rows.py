"""
Report row building (``logistics_reporting.rows``).

Pure transformations from an ``EventPlan`` and its ``EventCalculation``
into the flattened, date-sorted ``ReportRow`` set the exporters render.
Date display text is computed here; the engines never format dates.

Invariants enforced
-------------------
* Rows are crew frames then labour frames, stably sorted by outbound date;
  rows whose outbound date cannot be parsed sort last.
* Zero-count frames contribute no rows unless explicitly included.
* In per-person mode the column sums equal the per-frame figures: per-diems
  and hotel nights are split evenly and trip figures stay on the frame's
  first row.
"""

from __future__ import annotations

from datetime import date, timedelta

from logistics_config.schema import CalculatorConfig
from logistics_engines.dates import days_between, parse_event_date
from logistics_kernel.domain.clock import Clock, SystemClock
from logistics_kernel.domain.values import PersonnelType
from logistics_kernel.logging_config import get_logger
from logistics_reporting.models import EventReport, ReportMetadata, ReportRow
from logistics_services.calculation_service import EventCalculation
from logistics_services.event_plan import EventPlan

logger = get_logger("reporting.rows")


def hotel_dates(outbound: str, inbound: str, hotel_nights: int) -> str:
    """
    Comma-separated ISO dates of each night of stay.

    One date per night starting on the outbound date; the inbound date
    has no night attached.  Empty when no hotel nights accrue.
    """
    if hotel_nights <= 0:
        return ""
    start = parse_event_date(outbound)
    if start is None:
        return ""
    nights = max(days_between(outbound, inbound) - 1, 0)
    return ", ".join((start + timedelta(days=i)).isoformat() for i in range(nights))


def format_date(value: str) -> str:
    parsed = parse_event_date(value)
    if parsed is None:
        return value
    return parsed.strftime("%d %b %Y")


def format_date_range(outbound: str, inbound: str) -> str:
    """Display text for a frame's date range, e.g. "01 Mar 2025 - 03 Mar 2025"."""
    start = format_date(outbound)
    end = format_date(inbound)
    if start == end:
        return start
    return f"{start} - {end}"


def _person_labels(frame_name: str, names: tuple[str, ...], count: int) -> list[str]:
    labels = []
    for i in range(count):
        name = names[i].strip() if i < len(names) else ""
        labels.append(name or f"{frame_name} #{i + 1}")
    return labels


def _joined(names: tuple[str, ...]) -> str:
    return ", ".join(n.strip() for n in names if n.strip())


def _expand(
    row: ReportRow,
    count: int,
    names: tuple[str, ...],
    per_person: bool,
) -> list[ReportRow]:
    if not per_person or count <= 0:
        return [row]

    per_diems = row.per_diems // count
    nights = row.hotel_nights // count
    rows: list[ReportRow] = []
    for i, label in enumerate(_person_labels(row.frame_name, names, count)):
        first = i == 0
        rows.append(ReportRow(
            personnel_type=row.personnel_type,
            frame_name=row.frame_name,
            names=label,
            outbound=row.outbound,
            inbound=row.inbound,
            mode=row.mode,
            per_diems=per_diems,
            hotel_nights=nights,
            hotel_dates=row.hotel_dates,
            inner_trips=row.inner_trips if first else None,
            outside_transport_trips=row.outside_transport_trips if first else None,
        ))
    return rows


def _sort_key(row: ReportRow) -> tuple[bool, date]:
    parsed = parse_event_date(row.outbound)
    return (parsed is None, parsed or date.min)


def build_report_rows(
    plan: EventPlan,
    calculation: EventCalculation,
    config: CalculatorConfig,
    *,
    per_person: bool = False,
    include_empty_frames: bool = False,
) -> list[ReportRow]:
    """Flatten frames and their calculations into sorted report rows."""
    rows: list[ReportRow] = []

    for frame, calc in zip(plan.crew_frames, calculation.crew_calculations, strict=True):
        if frame.count <= 0 and not include_empty_frames:
            continue
        row = ReportRow(
            personnel_type=PersonnelType.CREW,
            frame_name=frame.name,
            names=_joined(frame.crew_names),
            outbound=frame.outbound,
            inbound=frame.inbound,
            mode="",
            per_diems=calc.per_diems,
            hotel_nights=calc.hotel_nights,
            hotel_dates=hotel_dates(frame.outbound, frame.inbound, calc.hotel_nights),
            inner_trips=calc.inner_trips,
            outside_transport_trips=calc.outside_trips,
        )
        rows.extend(_expand(row, frame.count, frame.crew_names, per_person))

    for frame, calc in zip(plan.labour_frames, calculation.labour_calculations, strict=True):
        if frame.count <= 0 and not include_empty_frames:
            continue
        row = ReportRow(
            personnel_type=PersonnelType.LABOUR,
            frame_name=frame.name,
            names=_joined(frame.labour_names),
            outbound=frame.outbound,
            inbound=frame.inbound,
            mode=config.labels.mode_label(frame.mode),
            per_diems=calc.per_diems,
            hotel_nights=calc.hotel_nights,
            hotel_dates=hotel_dates(frame.outbound, frame.inbound, calc.hotel_nights),
            inner_trips=None,
            outside_transport_trips=calc.transport_trips,
        )
        rows.extend(_expand(row, frame.count, frame.labour_names, per_person))

    rows.sort(key=_sort_key)
    return rows


def build_report(
    plan: EventPlan,
    calculation: EventCalculation,
    config: CalculatorConfig,
    clock: Clock | None = None,
    *,
    per_person: bool = False,
    include_empty_frames: bool = False,
) -> EventReport:
    """Assemble metadata, rows and totals for the exporters."""
    clock = clock or SystemClock()
    metadata = ReportMetadata(
        title=config.report.title,
        event_name=plan.event_name.strip() or config.report.untitled_event_name,
        location_label=config.labels.location_label(plan.location),
        generated_at=clock.now(),
        sheet_name=config.report.sheet_name,
        footer_text=config.report.footer_text,
        file_suffix=config.report.file_suffix,
        file_stem=plan.event_name.strip() or config.report.untitled_file_stem,
    )
    rows = build_report_rows(
        plan,
        calculation,
        config,
        per_person=per_person,
        include_empty_frames=include_empty_frames,
    )
    logger.info("event_report_built", extra={
        "row_count": len(rows),
        "per_person": per_person,
        "include_empty_frames": include_empty_frames,
    })
    return EventReport(metadata=metadata, rows=tuple(rows), totals=calculation.totals)
