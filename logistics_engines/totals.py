"""
Module: logistics_engines.totals
Responsibility:
    Reduce per-frame crew and labour calculations into event-wide totals,
    and allocate shared crew cars across frames leaving on the same date.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Per-diem and hotel-night totals sum BOTH crew and labour results;
      inner and outside trips are crew-only; labour trips are labour-only.
    - Car allocation groups crew frames by outbound date (string equality).
      Crews leaving on the same date share cars; crews on different dates
      never do.  Frames with ``count <= 0`` are excluded.
    - Car allocation is independent of the per-frame trip figures.

Failure modes:
    - CalculationAlignmentError when a frame list and its calculation list
      differ in length (calculation ``i`` must belong to frame ``i``).
"""

from __future__ import annotations

from collections.abc import Sequence

from logistics_engines.tracer import traced_engine
from logistics_engines.vehicles import CREW_CAR_CAPACITY, vehicles_needed
from logistics_kernel.domain.values import (
    CrewCalculation,
    CrewFrame,
    LabourCalculation,
    LabourFrame,
    PersonnelType,
    TotalCalculation,
)
from logistics_kernel.exceptions import CalculationAlignmentError
from logistics_kernel.logging_config import get_logger

logger = get_logger("engines.totals")


def crew_headcount_by_date(crew_frames: Sequence[CrewFrame]) -> dict[str, int]:
    """Sum of positive crew counts per outbound date, in first-seen order."""
    by_date: dict[str, int] = {}
    for frame in crew_frames:
        if frame.count > 0:
            by_date[frame.outbound] = by_date.get(frame.outbound, 0) + frame.count
    return by_date


def calculate_total_cars_needed(
    crew_frames: Sequence[CrewFrame],
    car_capacity: int = CREW_CAR_CAPACITY,
) -> int:
    """Cars needed when crews leaving on the same date share cars."""
    by_date = crew_headcount_by_date(crew_frames)
    total = sum(vehicles_needed(count, car_capacity) for count in by_date.values())

    logger.debug("crew_cars_allocated", extra={
        "dates": len(by_date),
        "car_capacity": car_capacity,
        "total_cars": total,
    })
    return total


class TotalsCalculator:
    """
    Aggregate per-frame results into a TotalCalculation.

    Contract:
        Pure functions -- no I/O.  ``car_capacity`` is fixed for the
        calculator instance.
    """

    def __init__(self, car_capacity: int = CREW_CAR_CAPACITY) -> None:
        if car_capacity < 1:
            raise ValueError(f"car_capacity must be at least 1, got {car_capacity}")
        self._car_capacity = car_capacity

    @traced_engine(
        "totals",
        "1.0",
        fingerprint_fields=(
            "crew_frames",
            "labour_frames",
            "crew_calculations",
            "labour_calculations",
        ),
    )
    def aggregate(
        self,
        crew_frames: Sequence[CrewFrame],
        labour_frames: Sequence[LabourFrame],
        crew_calculations: Sequence[CrewCalculation],
        labour_calculations: Sequence[LabourCalculation],
    ) -> TotalCalculation:
        """
        Sum the per-frame figures and allocate crew cars.

        Raises:
            CalculationAlignmentError: If a calculation list is not
                index-aligned with its frame list.
        """
        if len(crew_frames) != len(crew_calculations):
            raise CalculationAlignmentError(
                PersonnelType.CREW.value, len(crew_frames), len(crew_calculations),
            )
        if len(labour_frames) != len(labour_calculations):
            raise CalculationAlignmentError(
                PersonnelType.LABOUR.value, len(labour_frames), len(labour_calculations),
            )

        totals = TotalCalculation(
            total_crew_count=sum(c.crew_count for c in crew_calculations),
            total_labour_count=sum(c.labour_count for c in labour_calculations),
            total_per_diems=(
                sum(c.per_diems for c in crew_calculations)
                + sum(c.per_diems for c in labour_calculations)
            ),
            total_hotel_nights=(
                sum(c.hotel_nights for c in crew_calculations)
                + sum(c.hotel_nights for c in labour_calculations)
            ),
            total_inner_trips=sum(c.inner_trips for c in crew_calculations),
            total_outside_trips=sum(c.outside_trips for c in crew_calculations),
            total_labour_trips=sum(c.transport_trips for c in labour_calculations),
            total_cars_needed=calculate_total_cars_needed(
                crew_frames, self._car_capacity,
            ),
        )

        logger.info("event_totals_aggregated", extra={
            "crew_frames": len(crew_frames),
            "labour_frames": len(labour_frames),
            "total_per_diems": totals.total_per_diems,
            "total_hotel_nights": totals.total_hotel_nights,
            "total_cars_needed": totals.total_cars_needed,
        })
        return totals
