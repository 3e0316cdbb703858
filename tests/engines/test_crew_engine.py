"""
Tests for the crew calculation engine.

Covers:
- Zero and negative headcount
- Local events: daily round trips and travel-day deductions
- Remote events: hotel nights, banded inner trips, fixed outside trips
- Inverted and missing dates
"""

import pytest

from logistics_engines.crew import REMOTE_OUTSIDE_TRIPS, CrewCalculator
from logistics_kernel.domain.values import CrewCalculation, CrewFrame, EventLocation


def _frame(outbound="2025-03-01", inbound="2025-03-03", count=1, **kwargs) -> CrewFrame:
    return CrewFrame(
        id="crew-1",
        name="Riggers",
        outbound=outbound,
        inbound=inbound,
        count=count,
        **kwargs,
    )


class TestCrewZeroHeadcount:
    """A frame with nobody in it contributes nothing."""

    def setup_method(self):
        self.calculator = CrewCalculator()

    @pytest.mark.parametrize("location", list(EventLocation))
    def test_zero_count_is_all_zero(self, location):
        frame = _frame(count=0, outbound_travel_day=True)
        assert self.calculator.calculate(frame=frame, location=location) == CrewCalculation.zero()

    def test_negative_count_is_all_zero(self):
        frame = _frame(count=-4)
        result = self.calculator.calculate(frame=frame, location=EventLocation.REMOTE)
        assert result == CrewCalculation.zero()


class TestCrewLocal:
    """Local events: home <-> venue round trips, no hotel."""

    def setup_method(self):
        self.calculator = CrewCalculator()

    def _calc(self, frame):
        return self.calculator.calculate(frame=frame, location=EventLocation.LOCAL)

    def test_three_days_four_people(self):
        result = self._calc(_frame(count=4))
        assert result.crew_count == 4
        assert result.per_diems == 12
        assert result.hotel_nights == 0
        assert result.inner_trips == 24
        assert result.outside_trips == 0

    def test_outbound_travel_day_removes_one_round_trip(self):
        result = self._calc(_frame(count=4, outbound_travel_day=True))
        assert result.inner_trips == 16

    def test_both_travel_days_remove_two_round_trips(self):
        result = self._calc(
            _frame(count=4, outbound_travel_day=True, inbound_travel_day=True),
        )
        assert result.inner_trips == 8

    def test_single_day_with_both_travel_days_clamps_to_zero(self):
        """Deductions never push trips below zero."""
        result = self._calc(
            _frame(
                outbound="2025-03-01",
                inbound="2025-03-01",
                count=3,
                outbound_travel_day=True,
                inbound_travel_day=True,
            ),
        )
        assert result.inner_trips == 0
        assert result.per_diems == 3

    def test_travel_days_do_not_change_per_diems(self):
        plain = self._calc(_frame(count=2))
        flagged = self._calc(_frame(count=2, outbound_travel_day=True))
        assert plain.per_diems == flagged.per_diems

    def test_inverted_dates(self):
        """Inbound before outbound: zero days, zero trips."""
        result = self._calc(_frame(outbound="2025-03-05", inbound="2025-03-01", count=4))
        assert result.per_diems == 0
        assert result.inner_trips == 0
        assert result.crew_count == 4


class TestCrewRemote:
    """Remote events: hotel stays and hotel <-> venue legs."""

    def setup_method(self):
        self.calculator = CrewCalculator()

    def _calc(self, frame):
        return self.calculator.calculate(frame=frame, location=EventLocation.REMOTE)

    def test_single_day_two_people(self):
        result = self._calc(_frame(outbound="2025-03-01", inbound="2025-03-01", count=2))
        assert result.inner_trips == 2
        assert result.outside_trips == 2
        assert result.hotel_nights == 0
        assert result.per_diems == 2

    @pytest.mark.parametrize(
        "flags",
        [
            {"outbound_travel_day": True},
            {"inbound_travel_day": True},
            {"outbound_travel_day": True, "inbound_travel_day": True},
        ],
    )
    def test_single_day_with_any_travel_day_has_no_inner_trips(self, flags):
        frame = _frame(outbound="2025-03-01", inbound="2025-03-01", count=2, **flags)
        assert self._calc(frame).inner_trips == 0

    def test_two_days_arrival_and_departure_legs(self):
        result = self._calc(_frame(outbound="2025-03-01", inbound="2025-03-02", count=3))
        assert result.inner_trips == 6
        assert result.hotel_nights == 3

    def test_two_days_with_outbound_travel_day(self):
        result = self._calc(
            _frame(outbound="2025-03-01", inbound="2025-03-02", count=3, outbound_travel_day=True),
        )
        assert result.inner_trips == 3

    def test_three_days_five_people_both_travel_days(self):
        result = self._calc(
            _frame(count=5, outbound_travel_day=True, inbound_travel_day=True),
        )
        assert result.inner_trips == 10
        assert result.hotel_nights == 10
        assert result.per_diems == 15

    def test_five_days_no_travel_days(self):
        result = self._calc(_frame(outbound="2025-03-01", inbound="2025-03-05", count=2))
        # 2 arrival + 2 departure + 3 middle days * 2 legs * 2 people
        assert result.inner_trips == 16
        assert result.hotel_nights == 8

    def test_outside_trips_fixed_regardless_of_headcount(self):
        small = self._calc(_frame(count=1))
        large = self._calc(_frame(count=40))
        assert small.outside_trips == REMOTE_OUTSIDE_TRIPS
        assert large.outside_trips == REMOTE_OUTSIDE_TRIPS

    def test_zero_day_frame_has_no_outside_trips(self):
        result = self._calc(_frame(outbound="2025-03-05", inbound="2025-03-01", count=3))
        assert result.outside_trips == 0
        assert result.hotel_nights == 0
        assert result.inner_trips == 0

    def test_missing_dates_contribute_nothing(self):
        result = self._calc(_frame(outbound="", inbound="", count=3))
        assert result.per_diems == 0
        assert result.outside_trips == 0


class TestCrewDeterminism:
    """Same inputs, same outputs."""

    def test_repeated_calls_are_equal(self):
        calculator = CrewCalculator()
        frame = _frame(count=6, inbound_travel_day=True)
        first = calculator.calculate(frame=frame, location=EventLocation.REMOTE)
        second = calculator.calculate(frame=frame, location=EventLocation.REMOTE)
        assert first == second

    def test_positional_arguments_accepted(self):
        calculator = CrewCalculator()
        frame = _frame(count=2)
        assert calculator.calculate(frame, EventLocation.LOCAL).inner_trips == 12
