#!/usr/bin/env python3
"""
Calculate per-diems, hotel nights and trips for an event description file.

Loads the YAML event file, prints one line per frame plus the event totals,
and optionally exports the combined report.

Usage:
    python3 scripts/calculate_event.py event.yaml
    python3 scripts/calculate_event.py event.yaml --xlsx out.xlsx --pdf out.pdf
    python3 scripts/calculate_event.py event.yaml --per-person --include-empty
    python3 scripts/calculate_event.py event.yaml --config my_config.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from logistics_config import get_active_config  # noqa: E402
from logistics_kernel.exceptions import LogisticsError  # noqa: E402
from logistics_kernel.logging_config import configure_logging  # noqa: E402
from logistics_reporting import build_report, export_report, format_date_range  # noqa: E402
from logistics_services import EventCalculationService, load_event_file  # noqa: E402


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.split("\n\n")[0])
    parser.add_argument("event_file", type=Path, help="YAML event description")
    parser.add_argument("--config", type=Path, default=None, help="YAML calculator config")
    parser.add_argument("--xlsx", type=Path, default=None, help="Write an Excel report")
    parser.add_argument("--pdf", type=Path, default=None, help="Write a PDF report")
    parser.add_argument("--per-person", action="store_true", help="One report row per person")
    parser.add_argument(
        "--include-empty", action="store_true", help="Keep zero-count frames in reports",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default WARNING)")
    return parser.parse_args(argv)


def _print_plan(plan, calculation, config, out) -> None:
    print(f"Event:    {plan.event_name or config.report.untitled_event_name}", file=out)
    print(f"Location: {config.labels.location_label(plan.location)}", file=out)
    print("", file=out)

    print("Crew frames", file=out)
    for frame, calc in zip(plan.crew_frames, calculation.crew_calculations):
        print(
            f"  {frame.name:<20} {format_date_range(frame.outbound, frame.inbound):<28}"
            f" count={frame.count:<3} per_diems={calc.per_diems:<4}"
            f" hotel_nights={calc.hotel_nights:<4} inner_trips={calc.inner_trips:<4}"
            f" outside_trips={calc.outside_trips}",
            file=out,
        )

    print("Labour frames", file=out)
    for frame, calc in zip(plan.labour_frames, calculation.labour_calculations):
        print(
            f"  {frame.name:<20} {format_date_range(frame.outbound, frame.inbound):<28}"
            f" count={frame.count:<3} per_diems={calc.per_diems:<4}"
            f" hotel_nights={calc.hotel_nights:<4} transport_trips={calc.transport_trips}"
            f" ({config.labels.mode_label(frame.mode)})",
            file=out,
        )

    totals = calculation.totals
    print("", file=out)
    print("Totals", file=out)
    print(f"  Per diems:              {totals.total_per_diems}", file=out)
    print(f"  Hotel nights:           {totals.total_hotel_nights}", file=out)
    print(f"  Inner city trips:       {totals.total_inner_trips}", file=out)
    print(f"  Outside city trips:     {totals.total_outside_trips}", file=out)
    print(f"  Labour transport trips: {totals.total_labour_trips}", file=out)
    print(f"  Cars needed:            {totals.total_cars_needed}", file=out)


def main(argv: list[str] | None = None, out=None) -> int:
    args = _parse_args(argv)
    out = out or sys.stdout
    configure_logging(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        config = get_active_config(args.config)
        plan = load_event_file(args.event_file, config)
    except (FileNotFoundError, LogisticsError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    calculation = EventCalculationService(config).calculate(plan)
    _print_plan(plan, calculation, config, out)

    if args.xlsx or args.pdf:
        report = build_report(
            plan,
            calculation,
            config,
            per_person=args.per_person,
            include_empty_frames=args.include_empty,
        )
        for path, fmt in ((args.xlsx, "xlsx"), (args.pdf, "pdf")):
            if path is not None:
                try:
                    export_report(report, path, fmt)
                except OSError as exc:
                    print(f"error: could not write {path}: {exc}", file=sys.stderr)
                    return 1
                print(f"Wrote {path}", file=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
