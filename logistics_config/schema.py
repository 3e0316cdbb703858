"""
CalculatorConfig schema.

Defines the reviewable configuration for the logistics calculator: vehicle
capacities, display labels, defaults for new frames, and report text.  YAML
files are parsed into these types by the loader; callers obtain the active
instance through ``logistics_config.get_active_config()``.

All types are frozen.  Label maps are stored as tuples of pairs so the
whole configuration is hashable and comparable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from logistics_engines.vehicles import CREW_CAR_CAPACITY, LABOUR_VAN_CAPACITY
from logistics_kernel.domain.values import EventLocation, LabourMode

# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VehicleConfig:
    """Seats per shared vehicle."""

    crew_car_capacity: int = CREW_CAR_CAPACITY
    labour_van_capacity: int = LABOUR_VAN_CAPACITY


DEFAULT_LOCATION_LABELS: tuple[tuple[EventLocation, str], ...] = (
    (EventLocation.LOCAL, "Dubai"),
    (EventLocation.REMOTE, "Outside Dubai"),
)

DEFAULT_LABOUR_MODE_LABELS: tuple[tuple[LabourMode, str], ...] = (
    (LabourMode.ROUND_TRIP, "Labour Transport (2-way)"),
    (LabourMode.ONE_WAY_OUT, "Truck In, Labour Transport Out"),
    (LabourMode.NO_TRIP, "Truck (No Trip)"),
)


@dataclass(frozen=True)
class LabelConfig:
    """Display labels for locations and labour modes."""

    locations: tuple[tuple[EventLocation, str], ...] = DEFAULT_LOCATION_LABELS
    labour_modes: tuple[tuple[LabourMode, str], ...] = DEFAULT_LABOUR_MODE_LABELS

    def location_label(self, location: EventLocation) -> str:
        return dict(self.locations).get(location, location.value)

    def mode_label(self, mode: LabourMode) -> str:
        return dict(self.labour_modes).get(mode, mode.value)

    def parse_location(self, value: str | EventLocation) -> EventLocation:
        """
        Resolve an enum value or a configured label to an EventLocation.

        Raises:
            ValueError: If ``value`` matches neither.
        """
        if isinstance(value, EventLocation):
            return value
        text = str(value).strip()
        for location, label in self.locations:
            if text.lower() in (location.value, label.lower()):
                return location
        raise ValueError(f"Unknown event location: {value!r}")

    def parse_mode(self, value: str | LabourMode) -> LabourMode:
        """
        Resolve an enum value or a configured label to a LabourMode.

        Raises:
            ValueError: If ``value`` matches neither.
        """
        if isinstance(value, LabourMode):
            return value
        text = str(value).strip()
        for mode, label in self.labour_modes:
            if text.lower() in (mode.value, label.lower()):
                return mode
        raise ValueError(f"Unknown labour mode: {value!r}")


@dataclass(frozen=True)
class FrameDefaults:
    """Defaults applied to frames created by the event planner."""

    crew_name_template: str = "Crew Frame {n}"
    labour_name_template: str = "Labour Frame {n}"
    default_labour_mode: LabourMode = LabourMode.ROUND_TRIP
    min_frames_per_type: int = 1


@dataclass(frozen=True)
class ReportConfig:
    """Text used by the XLSX and PDF exports."""

    title: str = "Crew Calculator"
    untitled_event_name: str = "Untitled Project"
    sheet_name: str = "Crew Calculator"
    footer_text: str = "Generated by Crew Calculator"
    file_suffix: str = "Crew_Calculator"
    untitled_file_stem: str = "Project"


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CalculatorConfig:
    """Complete calculator configuration."""

    config_id: str = "default"
    version: int = 1
    vehicles: VehicleConfig = field(default_factory=VehicleConfig)
    labels: LabelConfig = field(default_factory=LabelConfig)
    frames: FrameDefaults = field(default_factory=FrameDefaults)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with the built-in defaults."""
        return cls()
