"""
Tests for event totals aggregation and shared crew car allocation.

Covers:
- Summation of crew and labour figures into the right totals
- Cars shared between crews leaving on the same date
- Alignment errors between frames and calculations
"""

import pytest

from logistics_engines.crew import CrewCalculator
from logistics_engines.labour import LabourCalculator
from logistics_engines.totals import (
    TotalsCalculator,
    calculate_total_cars_needed,
    crew_headcount_by_date,
)
from logistics_kernel.domain.values import (
    CrewCalculation,
    CrewFrame,
    EventLocation,
    LabourCalculation,
    LabourFrame,
    LabourMode,
)
from logistics_kernel.exceptions import CalculationAlignmentError


def _crew(frame_id, outbound, count, inbound="2025-03-03") -> CrewFrame:
    return CrewFrame(
        id=frame_id, name=frame_id, outbound=outbound, inbound=inbound, count=count,
    )


def _labour(frame_id, count, mode=LabourMode.ROUND_TRIP) -> LabourFrame:
    return LabourFrame(
        id=frame_id,
        name=frame_id,
        outbound="2025-03-01",
        inbound="2025-03-02",
        count=count,
        mode=mode,
    )


class TestCarAllocation:
    """Crews leaving on the same date share cars."""

    def test_same_date_crews_share_cars(self):
        frames = [
            _crew("a", "2025-03-01", 3),
            _crew("b", "2025-03-01", 4),
            _crew("c", "2025-03-02", 1),
        ]
        # ceil(7/2) + ceil(1/2)
        assert calculate_total_cars_needed(frames) == 5

    def test_separate_dates_do_not_share(self):
        frames = [_crew("a", "2025-03-01", 1), _crew("b", "2025-03-02", 1)]
        assert calculate_total_cars_needed(frames) == 2

    def test_zero_count_frames_excluded(self):
        frames = [_crew("a", "2025-03-01", 0), _crew("b", "2025-03-02", -2)]
        assert calculate_total_cars_needed(frames) == 0
        assert crew_headcount_by_date(frames) == {}

    def test_headcount_by_date(self):
        frames = [
            _crew("a", "2025-03-01", 3),
            _crew("b", "2025-03-02", 2),
            _crew("c", "2025-03-01", 4),
        ]
        assert crew_headcount_by_date(frames) == {"2025-03-01": 7, "2025-03-02": 2}

    def test_custom_capacity(self):
        frames = [_crew("a", "2025-03-01", 7)]
        assert calculate_total_cars_needed(frames, car_capacity=4) == 2

    def test_no_frames(self):
        assert calculate_total_cars_needed([]) == 0


class TestTotalsAggregation:
    """Per-frame results reduced into event totals."""

    def setup_method(self):
        self.totals = TotalsCalculator()
        self.crew_frames = [
            _crew("a", "2025-03-01", 4),
            _crew("b", "2025-03-01", 1, inbound="2025-03-01"),
        ]
        self.labour_frames = [
            _labour("x", 12),
            _labour("y", 6, mode=LabourMode.ONE_WAY_OUT),
        ]
        crew_calc = CrewCalculator()
        labour_calc = LabourCalculator()
        self.crew_calculations = [
            crew_calc.calculate(frame=f, location=EventLocation.REMOTE)
            for f in self.crew_frames
        ]
        self.labour_calculations = [
            labour_calc.calculate(frame=f, location=EventLocation.REMOTE)
            for f in self.labour_frames
        ]

    def _aggregate(self):
        return self.totals.aggregate(
            crew_frames=self.crew_frames,
            labour_frames=self.labour_frames,
            crew_calculations=self.crew_calculations,
            labour_calculations=self.labour_calculations,
        )

    def test_per_diems_sum_crew_and_labour(self):
        # crew 12 + 1, labour 24 + 12
        assert self._aggregate().total_per_diems == 49

    def test_hotel_nights_sum_crew_and_labour(self):
        # crew 8 + 0, labour has no hotel_required
        assert self._aggregate().total_hotel_nights == 8

    def test_trip_totals(self):
        totals = self._aggregate()
        # crew a: 4 + 4 + 1*2*4 = 16, crew b: 1 day, 1 person = 1
        assert totals.total_inner_trips == 17
        assert totals.total_outside_trips == 4
        # labour x: 3 vans * 2 * 2 days = 12, labour y: 2 vans
        assert totals.total_labour_trips == 14
        assert totals.total_outside_transport_trips == 18

    def test_headcounts(self):
        totals = self._aggregate()
        assert totals.total_crew_count == 5
        assert totals.total_labour_count == 18

    def test_cars_from_shared_outbound_date(self):
        assert self._aggregate().total_cars_needed == 3

    def test_empty_event(self):
        totals = self.totals.aggregate(
            crew_frames=[], labour_frames=[], crew_calculations=[], labour_calculations=[],
        )
        assert totals.total_per_diems == 0
        assert totals.total_cars_needed == 0


class TestTotalsAlignment:
    """Frame and calculation lists must line up."""

    def test_crew_length_mismatch(self):
        frames = [_crew("a", "2025-03-01", 1)]
        with pytest.raises(CalculationAlignmentError) as exc_info:
            TotalsCalculator().aggregate(
                crew_frames=frames,
                labour_frames=[],
                crew_calculations=[],
                labour_calculations=[],
            )
        assert exc_info.value.code == "CALCULATION_ALIGNMENT"

    def test_labour_length_mismatch(self):
        with pytest.raises(CalculationAlignmentError):
            TotalsCalculator().aggregate(
                crew_frames=[],
                labour_frames=[],
                crew_calculations=[],
                labour_calculations=[LabourCalculation.zero()],
            )

    def test_zero_capacity_rejected(self):
        with pytest.raises(ValueError):
            TotalsCalculator(car_capacity=0)

    def test_zero_records_aggregate_to_zero(self):
        frames = [_crew("a", "2025-03-01", 0)]
        totals = TotalsCalculator().aggregate(
            crew_frames=frames,
            labour_frames=[],
            crew_calculations=[CrewCalculation.zero()],
            labour_calculations=[],
        )
        assert totals.total_inner_trips == 0
        assert totals.total_cars_needed == 0
