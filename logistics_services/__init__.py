"""
logistics_services -- event plan editing and recalculation.

Sits above ``logistics_engines`` and ``logistics_config``; the reporting
layer and the CLI consume what these services return.
"""

from logistics_services.calculation_service import (
    EventCalculation,
    EventCalculationService,
)
from logistics_services.event_file import load_event_file, parse_event
from logistics_services.event_plan import (
    EventPlan,
    EventPlanner,
    coerce_count,
    fit_names,
)

__all__ = [
    "EventCalculation",
    "EventCalculationService",
    "EventPlan",
    "EventPlanner",
    "coerce_count",
    "fit_names",
    "load_event_file",
    "parse_event",
]
