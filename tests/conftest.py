"""
Pytest fixtures for the logistics calculator test suite.

Provides:
- Default calculator configuration
- Deterministic clock and frame id factory
- Event planner and calculation service wired to the above
- Logging state reset between tests
"""

import itertools
from datetime import datetime, timezone

import pytest

from logistics_config.schema import CalculatorConfig
from logistics_kernel.domain.clock import DeterministicClock
from logistics_kernel.logging_config import LogContext, reset_logging
from logistics_services.calculation_service import EventCalculationService
from logistics_services.event_plan import EventPlanner


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def config() -> CalculatorConfig:
    return CalculatorConfig.with_defaults()


@pytest.fixture
def deterministic_clock() -> DeterministicClock:
    return DeterministicClock(datetime(2025, 3, 1, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def id_factory():
    """Sequential frame ids: frame-1, frame-2, ..."""
    counter = itertools.count(1)
    return lambda: f"frame-{next(counter)}"


@pytest.fixture
def planner(config, deterministic_clock, id_factory) -> EventPlanner:
    return EventPlanner(config=config, clock=deterministic_clock, id_factory=id_factory)


@pytest.fixture
def calculation_service(config) -> EventCalculationService:
    return EventCalculationService(config)
