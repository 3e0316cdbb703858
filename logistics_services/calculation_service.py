"""
Calculation Service (``logistics_services.calculation_service``).

Responsibility
--------------
Runs the crew and labour rule evaluators over every frame of an
``EventPlan`` and aggregates the results.  This is the recomputation entry
point callers invoke after every plan change.

Invariants enforced
-------------------
* ``crew_calculations[i]`` belongs to ``plan.crew_frames[i]`` and
  ``labour_calculations[i]`` to ``plan.labour_frames[i]``.
* Recomputing an unchanged plan yields an equal ``EventCalculation``.
* Vehicle capacities come from configuration and are fixed per service.
* Every run binds a fresh ``correlation_id``; engine calls additionally
  bind the ``frame_id`` of the frame being evaluated.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from uuid import uuid4

from logistics_config.schema import CalculatorConfig
from logistics_engines.crew import CrewCalculator
from logistics_engines.labour import LabourCalculator
from logistics_engines.totals import TotalsCalculator
from logistics_kernel.domain.values import (
    CrewCalculation,
    LabourCalculation,
    TotalCalculation,
)
from logistics_kernel.logging_config import LogContext, get_logger
from logistics_services.event_plan import EventPlan

logger = get_logger("services.calculation")


@dataclass(frozen=True)
class EventCalculation:
    """Per-frame results, parallel to the plan's frames, plus totals."""

    crew_calculations: tuple[CrewCalculation, ...]
    labour_calculations: tuple[LabourCalculation, ...]
    totals: TotalCalculation


class EventCalculationService:
    """Recompute all figures for an event plan."""

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config or CalculatorConfig.with_defaults()
        self._crew = CrewCalculator()
        self._labour = LabourCalculator(
            van_capacity=self._config.vehicles.labour_van_capacity,
        )
        self._totals = TotalsCalculator(
            car_capacity=self._config.vehicles.crew_car_capacity,
        )

    def calculate(self, plan: EventPlan) -> EventCalculation:
        """Evaluate every frame of ``plan`` and aggregate the totals."""
        t0 = time.monotonic()
        with LogContext.bind(
            correlation_id=uuid4().hex,
            event_name=plan.event_name or None,
        ):
            crew_calculations: list[CrewCalculation] = []
            for frame in plan.crew_frames:
                with LogContext.bind(frame_id=frame.id):
                    crew_calculations.append(
                        self._crew.calculate(frame=frame, location=plan.location)
                    )
            labour_calculations: list[LabourCalculation] = []
            for frame in plan.labour_frames:
                with LogContext.bind(frame_id=frame.id):
                    labour_calculations.append(
                        self._labour.calculate(frame=frame, location=plan.location)
                    )
            totals = self._totals.aggregate(
                crew_frames=plan.crew_frames,
                labour_frames=plan.labour_frames,
                crew_calculations=crew_calculations,
                labour_calculations=labour_calculations,
            )

            duration_ms = round((time.monotonic() - t0) * 1000, 2)
            logger.info("event_calculation_completed", extra={
                "location": plan.location.value,
                "crew_frames": len(plan.crew_frames),
                "labour_frames": len(plan.labour_frames),
                "duration_ms": duration_ms,
            })

        return EventCalculation(
            crew_calculations=tuple(crew_calculations),
            labour_calculations=tuple(labour_calculations),
            totals=totals,
        )
