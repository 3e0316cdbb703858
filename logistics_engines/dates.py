"""
Module: logistics_engines.dates
Responsibility:
    Inclusive day counting between two calendar dates.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - ``days_between(d, d) == 1`` (both endpoints are counted).
    - ``days_between(d1, d2) == 0`` whenever ``d2 < d1``.
    - Never raises: missing or unparseable dates count as zero days.

Usage:
    from logistics_engines.dates import days_between

    days_between("2025-03-01", "2025-03-03")  # 3
"""

from __future__ import annotations

from datetime import date, datetime

from logistics_kernel.logging_config import get_logger

logger = get_logger("engines.dates")

DateInput = str | date | None


def parse_event_date(value: DateInput) -> date | None:
    """
    Parse a frame date into a calendar date.

    Accepts ``date`` objects, ISO date strings ("2025-03-01") and ISO
    date-time strings, which are reduced to their date part.  Returns
    None for empty or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        logger.debug("event_date_unparseable", extra={"value": text})
        return None


def days_between(outbound: DateInput, inbound: DateInput) -> int:
    """
    Inclusive number of days from ``outbound`` to ``inbound``.

    Returns ``diff + 1`` when ``inbound`` is on or after ``outbound``,
    otherwise 0.  Missing dates also yield 0.
    """
    start = parse_event_date(outbound)
    end = parse_event_date(inbound)
    if start is None or end is None:
        return 0

    diff = (end - start).days
    return diff + 1 if diff >= 0 else 0
