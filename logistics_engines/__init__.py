"""
Module: logistics_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure
    calculation engines.  This is the canonical import surface for the
    services and reporting layers.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import logistics_kernel (and sibling engine modules).
    MUST NOT import logistics_services or logistics_reporting.

Invariants enforced:
    - Purity: engines never read the clock; dates arrive on the frames.
    - Determinism: identical inputs always produce identical outputs.
    - Degenerate input (missing dates, zero counts, inverted ranges)
      yields zeros, never an exception.

Usage:
    from logistics_engines import CrewCalculator, LabourCalculator, TotalsCalculator
"""

from logistics_engines.crew import REMOTE_OUTSIDE_TRIPS, CrewCalculator
from logistics_engines.dates import days_between, parse_event_date
from logistics_engines.labour import LabourCalculator
from logistics_engines.totals import (
    TotalsCalculator,
    calculate_total_cars_needed,
    crew_headcount_by_date,
)
from logistics_engines.tracer import compute_input_fingerprint, traced_engine
from logistics_engines.vehicles import (
    CREW_CAR_CAPACITY,
    LABOUR_VAN_CAPACITY,
    vehicles_needed,
)

__all__ = [
    "CREW_CAR_CAPACITY",
    "LABOUR_VAN_CAPACITY",
    "REMOTE_OUTSIDE_TRIPS",
    "CrewCalculator",
    "LabourCalculator",
    "TotalsCalculator",
    "calculate_total_cars_needed",
    "compute_input_fingerprint",
    "crew_headcount_by_date",
    "days_between",
    "parse_event_date",
    "traced_engine",
    "vehicles_needed",
]
