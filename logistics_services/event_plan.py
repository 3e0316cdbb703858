"""
Event Plan Service (``logistics_services.event_plan``).

Responsibility
--------------
Owns the editable state of an event -- name, location, crew frames and
labour frames -- as an immutable ``EventPlan`` snapshot, and provides the
editing operations that produce new snapshots.  Frame identity, default
frame values, headcount coercion and name-list fitting live here so that
the engines only ever see well-shaped frames.

Invariants enforced
-------------------
* Copy-on-write: every operation returns a new ``EventPlan``; the input
  plan and its frames are never mutated.
* A frame's name list always has exactly ``count`` entries after an update
  (padded with empty strings or truncated).
* Stored counts are non-negative integers.
* A plan keeps at least ``min_frames_per_type`` frames per category.

Failure modes
-------------
* ``FrameNotFoundError`` -- update/remove with an unknown frame id.
* ``LastFrameRemovalError`` -- removing a frame would go below the minimum.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any
from uuid import uuid4

from logistics_config.schema import CalculatorConfig
from logistics_kernel.domain.clock import Clock, SystemClock
from logistics_kernel.domain.values import (
    CrewFrame,
    EventLocation,
    LabourFrame,
    PersonnelType,
)
from logistics_kernel.exceptions import FrameNotFoundError, LastFrameRemovalError
from logistics_kernel.logging_config import get_logger

logger = get_logger("services.event_plan")


def coerce_count(value: Any) -> int:
    """
    Turn raw headcount input into a non-negative int.

    Numbers and numeric strings are truncated toward zero; anything else
    (None, blank, non-numeric text) and negatives become 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)


def fit_names(names: Iterable[str], count: int) -> tuple[str, ...]:
    """Pad with blanks or truncate so exactly ``count`` names remain."""
    fitted = [str(n) for n in names][: max(count, 0)]
    fitted.extend([""] * (max(count, 0) - len(fitted)))
    return tuple(fitted)


@dataclass(frozen=True)
class EventPlan:
    """Immutable snapshot of everything the calculation needs."""

    event_name: str
    location: EventLocation
    crew_frames: tuple[CrewFrame, ...] = ()
    labour_frames: tuple[LabourFrame, ...] = ()

    def crew_frame(self, frame_id: str) -> CrewFrame:
        for frame in self.crew_frames:
            if frame.id == frame_id:
                return frame
        raise FrameNotFoundError(frame_id, PersonnelType.CREW.value)

    def labour_frame(self, frame_id: str) -> LabourFrame:
        for frame in self.labour_frames:
            if frame.id == frame_id:
                return frame
        raise FrameNotFoundError(frame_id, PersonnelType.LABOUR.value)


def _default_id_factory() -> str:
    return uuid4().hex


class EventPlanner:
    """
    Editing operations over ``EventPlan`` snapshots.

    Constructor: ``config`` + ``clock`` + ``id_factory``.  The clock supplies
    the default frame dates; the id factory supplies frame identities.
    """

    def __init__(
        self,
        config: CalculatorConfig | None = None,
        clock: Clock | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._config = config or CalculatorConfig.with_defaults()
        self._clock = clock or SystemClock()
        self._id_factory = id_factory or _default_id_factory

    # ------------------------------------------------------------------
    # Frame factories
    # ------------------------------------------------------------------

    def new_crew_frame(self, position: int) -> CrewFrame:
        """Default crew frame; ``position`` is 1-based and used in the name."""
        today = self._clock.today().isoformat()
        return CrewFrame(
            id=self._id_factory(),
            name=self._config.frames.crew_name_template.format(n=position),
            outbound=today,
            inbound=today,
        )

    def new_labour_frame(self, position: int) -> LabourFrame:
        """Default labour frame; ``position`` is 1-based and used in the name."""
        today = self._clock.today().isoformat()
        return LabourFrame(
            id=self._id_factory(),
            name=self._config.frames.labour_name_template.format(n=position),
            outbound=today,
            inbound=today,
            mode=self._config.frames.default_labour_mode,
        )

    def new_plan(
        self,
        event_name: str = "",
        location: EventLocation = EventLocation.LOCAL,
    ) -> EventPlan:
        """A plan holding one default crew frame and one default labour frame."""
        plan = EventPlan(
            event_name=event_name,
            location=location,
            crew_frames=(self.new_crew_frame(1),),
            labour_frames=(self.new_labour_frame(1),),
        )
        logger.info("event_plan_created", extra={
            "event_name": event_name,
            "location": location.value,
        })
        return plan

    # ------------------------------------------------------------------
    # Event-level edits
    # ------------------------------------------------------------------

    def rename_event(self, plan: EventPlan, event_name: str) -> EventPlan:
        return replace(plan, event_name=event_name)

    def set_location(self, plan: EventPlan, location: EventLocation) -> EventPlan:
        logger.info("event_location_changed", extra={
            "from_location": plan.location.value,
            "to_location": location.value,
        })
        return replace(plan, location=location)

    # ------------------------------------------------------------------
    # Crew frames
    # ------------------------------------------------------------------

    def add_crew_frame(self, plan: EventPlan) -> EventPlan:
        frame = self.new_crew_frame(len(plan.crew_frames) + 1)
        logger.info("crew_frame_added", extra={"frame_id": frame.id})
        return replace(plan, crew_frames=plan.crew_frames + (frame,))

    def update_crew_frame(self, plan: EventPlan, frame: CrewFrame) -> EventPlan:
        """
        Replace the crew frame with the same id.

        The stored frame has its count coerced and its names fitted to it.

        Raises:
            FrameNotFoundError: If no crew frame has ``frame.id``.
        """
        plan.crew_frame(frame.id)
        count = coerce_count(frame.count)
        normalized = replace(
            frame,
            count=count,
            crew_names=fit_names(frame.crew_names, count),
        )
        frames = tuple(normalized if f.id == frame.id else f for f in plan.crew_frames)
        return replace(plan, crew_frames=frames)

    def remove_crew_frame(self, plan: EventPlan, frame_id: str) -> EventPlan:
        """
        Remove a crew frame by id.

        Raises:
            FrameNotFoundError: If no crew frame has ``frame_id``.
            LastFrameRemovalError: If removal would leave too few frames.
        """
        plan.crew_frame(frame_id)
        if len(plan.crew_frames) <= self._config.frames.min_frames_per_type:
            raise LastFrameRemovalError(frame_id, PersonnelType.CREW.value)
        logger.info("crew_frame_removed", extra={"frame_id": frame_id})
        return replace(
            plan,
            crew_frames=tuple(f for f in plan.crew_frames if f.id != frame_id),
        )

    # ------------------------------------------------------------------
    # Labour frames
    # ------------------------------------------------------------------

    def add_labour_frame(self, plan: EventPlan) -> EventPlan:
        frame = self.new_labour_frame(len(plan.labour_frames) + 1)
        logger.info("labour_frame_added", extra={"frame_id": frame.id})
        return replace(plan, labour_frames=plan.labour_frames + (frame,))

    def update_labour_frame(self, plan: EventPlan, frame: LabourFrame) -> EventPlan:
        """
        Replace the labour frame with the same id.

        Raises:
            FrameNotFoundError: If no labour frame has ``frame.id``.
        """
        plan.labour_frame(frame.id)
        count = coerce_count(frame.count)
        normalized = replace(
            frame,
            count=count,
            labour_names=fit_names(frame.labour_names, count),
        )
        frames = tuple(normalized if f.id == frame.id else f for f in plan.labour_frames)
        return replace(plan, labour_frames=frames)

    def remove_labour_frame(self, plan: EventPlan, frame_id: str) -> EventPlan:
        """
        Remove a labour frame by id.

        Raises:
            FrameNotFoundError: If no labour frame has ``frame_id``.
            LastFrameRemovalError: If removal would leave too few frames.
        """
        plan.labour_frame(frame_id)
        if len(plan.labour_frames) <= self._config.frames.min_frames_per_type:
            raise LastFrameRemovalError(frame_id, PersonnelType.LABOUR.value)
        logger.info("labour_frame_removed", extra={"frame_id": frame_id})
        return replace(
            plan,
            labour_frames=tuple(f for f in plan.labour_frames if f.id != frame_id),
        )
