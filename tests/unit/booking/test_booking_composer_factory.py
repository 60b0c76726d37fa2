import pytest

from bus_booking.booking.domain.entity import BookingComposer, SeatSelection
from bus_booking.booking.domain.enum import BookingState
from bus_booking.booking.domain.exception import SelectionCapacityExceededException
from bus_booking.booking.domain.factory import BookingComposerFactory


class TestBookingComposerFactory:
    def test_create_seeds_default_points(self, create_trip):
        trip = create_trip()

        composer = BookingComposerFactory().create(trip)

        assert composer.id == trip.id
        assert composer.boarding_point == "Majestic"
        assert composer.dropping_point == "Koyambedu"
        assert composer.state == BookingState.BROWSING

    def test_create_without_points(self, create_trip):
        trip = create_trip(boarding_points=(), dropping_points=())

        composer = BookingComposerFactory().create(trip)

        assert composer.boarding_point == ""
        assert composer.dropping_point == ""

    def test_composer_builds_its_own_selection(self, create_trip):
        """座席選択は集約が自分で生成し、外部から差し込めない"""
        trip = create_trip()

        with pytest.raises(TypeError):
            BookingComposer(trip, selection=SeatSelection(trip, limit=2))

        composer = BookingComposerFactory().create(trip)
        for seat in (1, 2, 5, 6, 7, 8):
            composer.toggle_seat(seat)
        with pytest.raises(SelectionCapacityExceededException):
            composer.toggle_seat(9)
        assert composer.seat_limit == 6
