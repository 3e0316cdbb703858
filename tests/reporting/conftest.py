"""
Reporting-specific test fixtures.

Provides:
- A remote event plan with two crew frames and two labour frames
- Its calculation and the flattened report built from it
"""

from dataclasses import replace

import pytest

from logistics_kernel.domain.values import EventLocation, LabourMode
from logistics_reporting.rows import build_report


@pytest.fixture
def sample_plan(planner):
    """
    Remote event "Expo":
        Riggers  -- crew, 2025-03-02..2025-03-04, 2 people (Ana, Ben)
        Sound    -- crew, 2025-03-01..2025-03-01, 0 people
        Loaders  -- labour, 2025-03-01..2025-03-02, 6 people, one-way, hotel
    """
    plan = planner.new_plan("Expo", EventLocation.REMOTE)
    plan = planner.add_crew_frame(plan)
    riggers, sound = plan.crew_frames
    plan = planner.update_crew_frame(
        plan,
        replace(
            riggers,
            name="Riggers",
            outbound="2025-03-02",
            inbound="2025-03-04",
            count=2,
            crew_names=("Ana", "Ben"),
        ),
    )
    plan = planner.update_crew_frame(
        plan,
        replace(sound, name="Sound", outbound="2025-03-01", inbound="2025-03-01", count=0),
    )
    loaders = plan.labour_frames[0]
    plan = planner.update_labour_frame(
        plan,
        replace(
            loaders,
            name="Loaders",
            outbound="2025-03-01",
            inbound="2025-03-02",
            count=6,
            mode=LabourMode.ONE_WAY_OUT,
            hotel_required=True,
        ),
    )
    return plan


@pytest.fixture
def sample_calculation(sample_plan, calculation_service):
    return calculation_service.calculate(sample_plan)


@pytest.fixture
def sample_report(sample_plan, sample_calculation, config, deterministic_clock):
    return build_report(sample_plan, sample_calculation, config, deterministic_clock)
