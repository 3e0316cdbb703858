"""
Module: logistics_engines.labour
Responsibility:
    Derive per-diems, hotel nights and van transport trips for one labour
    frame, branching on the labour transport mode.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - ``count <= 0`` yields an all-zero result.
    - Transport trips are counted per van, never per person.
    - Hotel nights accrue only when the frame asks for a hotel AND the
      event is remote AND the frame spans at least one day.
"""

from __future__ import annotations

from logistics_engines.dates import days_between
from logistics_engines.tracer import traced_engine
from logistics_engines.vehicles import LABOUR_VAN_CAPACITY, vehicles_needed
from logistics_kernel.domain.values import (
    EventLocation,
    LabourCalculation,
    LabourFrame,
    LabourMode,
)
from logistics_kernel.logging_config import get_logger

logger = get_logger("engines.labour")


class LabourCalculator:
    """
    Calculate logistics figures for labour frames.

    Contract:
        Pure functions -- no I/O.  ``van_capacity`` is fixed for the
        calculator instance, never per frame.
    """

    def __init__(self, van_capacity: int = LABOUR_VAN_CAPACITY) -> None:
        if van_capacity < 1:
            raise ValueError(f"van_capacity must be at least 1, got {van_capacity}")
        self._van_capacity = van_capacity

    @property
    def van_capacity(self) -> int:
        return self._van_capacity

    @traced_engine("labour", "1.0", fingerprint_fields=("frame", "location"))
    def calculate(self, frame: LabourFrame, location: EventLocation) -> LabourCalculation:
        """Compute the labour figures for one frame at the given location."""
        if frame.count <= 0:
            return LabourCalculation.zero()

        days = days_between(frame.outbound, frame.inbound)
        count = frame.count
        vans = vehicles_needed(count, self._van_capacity)

        per_diems = days * count
        transport_trips = self.transport_trips(frame.mode, days, vans)

        hotel_nights = 0
        if frame.hotel_required and location == EventLocation.REMOTE and days > 0:
            hotel_nights = (days - 1) * count

        logger.debug("labour_frame_calculated", extra={
            "frame_id": frame.id,
            "location": location.value,
            "mode": frame.mode.value,
            "days": days,
            "count": count,
            "vans": vans,
            "per_diems": per_diems,
            "hotel_nights": hotel_nights,
            "transport_trips": transport_trips,
        })

        return LabourCalculation(
            labour_count=count,
            per_diems=per_diems,
            hotel_nights=hotel_nights,
            transport_trips=transport_trips,
        )

    @staticmethod
    def transport_trips(mode: LabourMode, days: int, vans: int) -> int:
        """
        Van legs for a labour group.

        ROUND_TRIP  -- a leg in and a leg out every day, per van.
        ONE_WAY_OUT -- arrives with the truck, one leg out per van.
        NO_TRIP     -- arrives and leaves with the truck.
        """
        if mode == LabourMode.ROUND_TRIP:
            return days * 2 * vans
        if mode == LabourMode.ONE_WAY_OUT:
            return vans
        return 0
