"""
Value objects for event logistics.

Responsibility:
    Frozen records describing the event inputs (location, crew and labour
    frames) and the derived per-frame and event-wide calculation records.

Architecture position:
    Kernel > Domain -- pure data definitions, zero I/O.  Consumed by the
    engines (read-only) and produced fresh by them on every calculation.

Invariants enforced:
    - All records are ``frozen=True``; updates go through
      ``dataclasses.replace`` and produce new objects.
    - Frames are permissive: degenerate values (empty dates, negative
      counts) are representable so the engines can absorb them as zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Self


class EventLocation(str, Enum):
    """Location class of the event."""

    LOCAL = "local"  # No hotel stays, daily home <-> venue trips
    REMOTE = "remote"  # Hotel nights accrue, venue <-> hotel legs


class LabourMode(str, Enum):
    """How a labour group gets to and from the venue."""

    ROUND_TRIP = "round_trip"  # Van in and van out every day
    ONE_WAY_OUT = "one_way_out"  # Arrives with the truck, leaves by van
    NO_TRIP = "no_trip"  # Arrives and leaves with the truck


class PersonnelType(str, Enum):
    """Category of personnel a frame describes."""

    CREW = "crew"
    LABOUR = "labour"


@dataclass(frozen=True)
class CrewFrame:
    """
    One crew attendance window.

    ``outbound``/``inbound`` are ISO date strings.  A travel-day flag means
    the crew spends that day in transit and does not visit the venue.
    """

    id: str
    name: str
    outbound: str
    inbound: str
    count: int = 0
    crew_names: tuple[str, ...] = ()
    outbound_travel_day: bool = False
    inbound_travel_day: bool = False


@dataclass(frozen=True)
class LabourFrame:
    """
    One labour attendance window.

    ``hotel_required`` only has an effect for remote events.
    """

    id: str
    name: str
    outbound: str
    inbound: str
    count: int = 0
    labour_names: tuple[str, ...] = ()
    mode: LabourMode = LabourMode.ROUND_TRIP
    hotel_required: bool = False


@dataclass(frozen=True)
class CrewCalculation:
    """Derived figures for one crew frame."""

    crew_count: int
    per_diems: int
    hotel_nights: int
    inner_trips: int
    outside_trips: int

    @classmethod
    def zero(cls) -> Self:
        return cls(crew_count=0, per_diems=0, hotel_nights=0, inner_trips=0, outside_trips=0)


@dataclass(frozen=True)
class LabourCalculation:
    """Derived figures for one labour frame."""

    labour_count: int
    per_diems: int
    hotel_nights: int
    transport_trips: int

    @classmethod
    def zero(cls) -> Self:
        return cls(labour_count=0, per_diems=0, hotel_nights=0, transport_trips=0)


@dataclass(frozen=True)
class TotalCalculation:
    """
    Event-wide totals.

    ``total_cars_needed`` is derived from date-grouped crew headcounts and
    is independent of the per-frame trip figures.
    """

    total_crew_count: int
    total_labour_count: int
    total_per_diems: int
    total_hotel_nights: int
    total_inner_trips: int
    total_outside_trips: int
    total_labour_trips: int
    total_cars_needed: int

    @property
    def total_outside_transport_trips(self) -> int:
        """Crew outside trips plus labour transport trips."""
        return self.total_outside_trips + self.total_labour_trips
