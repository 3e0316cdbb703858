"""
Tests for the event calculation service.

Covers:
- Index alignment between frames and calculations
- End-to-end figures for a mixed local and remote event
- Recalculation after location change
- Configured vehicle capacities
- Event-scoped log context with per-run and per-frame ids
"""

import json
import logging
from dataclasses import replace
from io import StringIO

from logistics_config.schema import CalculatorConfig, VehicleConfig
from logistics_kernel.domain.values import EventLocation, LabourMode
from logistics_kernel.logging_config import LogContext, configure_logging
from logistics_services.calculation_service import EventCalculationService


def _build_plan(planner):
    plan = planner.new_plan("Expo", EventLocation.LOCAL)
    plan = planner.add_crew_frame(plan)
    crew_a, crew_b = plan.crew_frames
    plan = planner.update_crew_frame(
        plan, replace(crew_a, outbound="2025-03-01", inbound="2025-03-03", count=3),
    )
    plan = planner.update_crew_frame(
        plan, replace(crew_b, outbound="2025-03-01", inbound="2025-03-01", count=4),
    )
    labour = plan.labour_frames[0]
    plan = planner.update_labour_frame(
        plan,
        replace(
            labour,
            outbound="2025-03-01",
            inbound="2025-03-02",
            count=12,
            mode=LabourMode.ROUND_TRIP,
            hotel_required=True,
        ),
    )
    return plan


class TestEventCalculationService:
    """Recompute all figures for a plan."""

    def test_calculations_align_with_frames(self, planner, calculation_service):
        plan = _build_plan(planner)
        result = calculation_service.calculate(plan)
        assert len(result.crew_calculations) == len(plan.crew_frames)
        assert len(result.labour_calculations) == len(plan.labour_frames)
        assert result.crew_calculations[0].crew_count == 3
        assert result.crew_calculations[1].crew_count == 4

    def test_local_event_figures(self, planner, calculation_service):
        result = calculation_service.calculate(_build_plan(planner))
        totals = result.totals
        # crew 9 + 4, labour 24
        assert totals.total_per_diems == 37
        # local: hotel_required has no effect
        assert totals.total_hotel_nights == 0
        # 3 days * 2 * 3 + 1 day * 2 * 4
        assert totals.total_inner_trips == 26
        assert totals.total_outside_trips == 0
        assert totals.total_labour_trips == 12
        # 7 crew leaving 2025-03-01
        assert totals.total_cars_needed == 4

    def test_remote_event_figures(self, planner, calculation_service):
        plan = planner.set_location(_build_plan(planner), EventLocation.REMOTE)
        totals = calculation_service.calculate(plan).totals
        # crew 2 * 3 + labour 1 * 12
        assert totals.total_hotel_nights == 18
        assert totals.total_outside_trips == 4
        # crew a: 3 + 3 + 1 * 2 * 3, crew b: 4
        assert totals.total_inner_trips == 16

    def test_recalculation_is_deterministic(self, planner, calculation_service):
        plan = _build_plan(planner)
        assert calculation_service.calculate(plan) == calculation_service.calculate(plan)

    def test_default_plan_is_all_zero(self, planner, calculation_service):
        totals = calculation_service.calculate(planner.new_plan()).totals
        assert totals.total_per_diems == 0
        assert totals.total_cars_needed == 0

    def test_configured_capacities(self, planner):
        config = replace(
            CalculatorConfig.with_defaults(),
            vehicles=VehicleConfig(crew_car_capacity=4, labour_van_capacity=12),
        )
        totals = EventCalculationService(config).calculate(_build_plan(planner)).totals
        assert totals.total_cars_needed == 2
        # one van * 2 legs * 2 days
        assert totals.total_labour_trips == 4

    def test_default_config_when_none_given(self, planner):
        totals = EventCalculationService().calculate(_build_plan(planner)).totals
        assert totals.total_cars_needed == 4


class TestCalculationLogging:

    def test_completion_logged_with_event_name(self, planner, calculation_service):
        stream = StringIO()
        configure_logging(handler=logging.StreamHandler(stream))

        calculation_service.calculate(_build_plan(planner))

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        done = [r for r in records if r["message"] == "event_calculation_completed"]
        assert len(done) == 1
        assert done[0]["event_name"] == "Expo"
        assert done[0]["crew_frames"] == 2

    def test_context_restored_after_calculation(self, planner, calculation_service):
        calculation_service.calculate(_build_plan(planner))
        assert LogContext.get_all() == {}

    def test_engine_traces_carry_frame_and_run_ids(self, planner, calculation_service):
        stream = StringIO()
        configure_logging(handler=logging.StreamHandler(stream))
        plan = _build_plan(planner)

        calculation_service.calculate(plan)

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        traces = [
            r for r in records
            if r["message"] == "LOGISTICS_ENGINE_TRACE" and r["engine_name"] != "totals"
        ]
        expected = [f.id for f in plan.crew_frames] + [f.id for f in plan.labour_frames]
        assert [r["frame_id"] for r in traces] == expected
        done = next(r for r in records if r["message"] == "event_calculation_completed")
        assert "frame_id" not in done
        assert {r["correlation_id"] for r in traces} == {done["correlation_id"]}

    def test_each_run_gets_its_own_correlation_id(self, planner, calculation_service):
        stream = StringIO()
        configure_logging(handler=logging.StreamHandler(stream))
        plan = _build_plan(planner)

        calculation_service.calculate(plan)
        calculation_service.calculate(plan)

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        ids = [r["correlation_id"] for r in records if r["message"] == "event_calculation_completed"]
        assert len(ids) == 2
        assert ids[0] != ids[1]
