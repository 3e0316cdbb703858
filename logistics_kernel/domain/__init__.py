from logistics_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from logistics_kernel.domain.values import (
    CrewCalculation,
    CrewFrame,
    EventLocation,
    LabourCalculation,
    LabourFrame,
    LabourMode,
    PersonnelType,
    TotalCalculation,
)

__all__ = [
    "Clock",
    "DeterministicClock",
    "SystemClock",
    "CrewCalculation",
    "CrewFrame",
    "EventLocation",
    "LabourCalculation",
    "LabourFrame",
    "LabourMode",
    "PersonnelType",
    "TotalCalculation",
]
