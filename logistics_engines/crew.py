"""
Module: logistics_engines.crew
Responsibility:
    Derive per-diems, hotel nights, inner-city trips and outside-city trips
    for one crew frame.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import logistics_kernel domain values and sibling engines.

Invariants enforced:
    - ``count <= 0`` yields an all-zero result regardless of dates or flags.
    - Every figure is a non-negative integer.
    - Hotel nights only accrue for remote events.
    - Outside trips are a fixed 2 legs for any remote frame that spans at
      least one day, independent of headcount.

Trip model:
    Local events: every day is a home -> venue -> home round trip per
    person; a travel day removes that day's round trip.

    Remote events: legs run between hotel and venue.
        1 day   -- one leg per person, none if either day is a travel day.
        2 days  -- an arrival leg and a departure leg per person, each
                   dropped when its day is a travel day.
        3+ days -- arrival and departure legs as above, plus a round trip
                   per person for every day strictly in between.

Usage:
    from logistics_engines.crew import CrewCalculator

    calc = CrewCalculator().calculate(frame=frame, location=EventLocation.REMOTE)
"""

from __future__ import annotations

from logistics_engines.dates import days_between
from logistics_engines.tracer import traced_engine
from logistics_kernel.domain.values import CrewCalculation, CrewFrame, EventLocation
from logistics_kernel.logging_config import get_logger

logger = get_logger("engines.crew")

REMOTE_OUTSIDE_TRIPS = 2


class CrewCalculator:
    """
    Calculate logistics figures for crew frames.

    Contract:
        Pure functions -- no I/O.  Frames are read, never retained.
    Guarantees:
        - Identical (frame, location) pairs produce equal results.
        - Increasing ``count`` never decreases any figure.
    """

    @traced_engine("crew", "1.0", fingerprint_fields=("frame", "location"))
    def calculate(self, frame: CrewFrame, location: EventLocation) -> CrewCalculation:
        """Compute the crew figures for one frame at the given location."""
        if frame.count <= 0:
            return CrewCalculation.zero()

        total_days = days_between(frame.outbound, frame.inbound)
        count = frame.count

        per_diems = total_days * count

        if location == EventLocation.LOCAL:
            hotel_nights = 0
            inner_trips = self._local_inner_trips(frame, total_days)
            outside_trips = 0
        else:
            hotel_nights = max(total_days - 1, 0) * count
            inner_trips = self._remote_inner_trips(frame, total_days)
            outside_trips = REMOTE_OUTSIDE_TRIPS if total_days > 0 else 0

        logger.debug("crew_frame_calculated", extra={
            "frame_id": frame.id,
            "location": location.value,
            "total_days": total_days,
            "count": count,
            "per_diems": per_diems,
            "hotel_nights": hotel_nights,
            "inner_trips": inner_trips,
            "outside_trips": outside_trips,
        })

        return CrewCalculation(
            crew_count=count,
            per_diems=per_diems,
            hotel_nights=hotel_nights,
            inner_trips=inner_trips,
            outside_trips=outside_trips,
        )

    def _local_inner_trips(self, frame: CrewFrame, total_days: int) -> int:
        """Round trip per person per day, minus the travel days."""
        trips = total_days * 2 * frame.count
        if frame.outbound_travel_day:
            trips -= 2 * frame.count
        if frame.inbound_travel_day:
            trips -= 2 * frame.count
        return max(trips, 0)

    def _remote_inner_trips(self, frame: CrewFrame, total_days: int) -> int:
        """Hotel <-> venue legs, banded by the length of the stay."""
        count = frame.count

        if total_days <= 0:
            return 0

        if total_days == 1:
            if frame.outbound_travel_day or frame.inbound_travel_day:
                return 0
            return count

        arrival = 0 if frame.outbound_travel_day else count
        departure = 0 if frame.inbound_travel_day else count
        # Days strictly between arrival and departure (0 for a 2-day frame)
        middle = (total_days - 2) * 2 * count
        return max(arrival + departure + middle, 0)
