from datetime import date

import pytest

from bus_booking.booking.applications.cancel_booking import CancelBookingService
from bus_booking.booking.applications.list_my_bookings import ListMyBookingsService
from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.domain.value_object import BookingSummary, ReservationId
from bus_booking.booking.handlers import my_bookings
from bus_booking.shared.auth import InMemorySessionProvider
from bus_booking.shared.domain import Money


def _summary(status: BookingStatus = BookingStatus.CONFIRMED) -> BookingSummary:
    return BookingSummary(
        reservation_id=ReservationId(value="res-001"),
        booking_reference="BK12345",
        bus_name="Volvo",
        from_city="Bangalore",
        to_city="Chennai",
        travel_date=date(2025, 1, 1),
        departure_time="21:30",
        arrival_time="05:45",
        seat_numbers=(1, 2),
        total_amount=Money.inr(1000),
        status=status,
    )


class TestMyBookingsHandler:
    @pytest.mark.asyncio
    async def test_list_bookings(self, mock_gateway, session_provider):
        mock_gateway.list_my_bookings.return_value = [_summary()]

        response = await my_bookings.list_bookings(
            ListMyBookingsService(mock_gateway, session_provider)
        )

        assert response["data"]["count"] == 1
        booking = response["data"]["bookings"][0]
        assert booking["booking_reference"] == "BK12345"
        assert booking["travel_date"] == "2025-01-01"
        assert booking["passenger_count"] == 2
        assert booking["cancellable"] is True

    @pytest.mark.asyncio
    async def test_list_requires_login(self, mock_gateway):
        response = await my_bookings.list_bookings(
            ListMyBookingsService(mock_gateway, InMemorySessionProvider())
        )

        assert response["error_code"] == "AUTHENTICATION_REQUIRED"

    @pytest.mark.asyncio
    async def test_cancel_booking_returns_refreshed_list(
        self, mock_gateway, session_provider
    ):
        mock_gateway.list_my_bookings.side_effect = [
            [_summary()],
            [_summary(status=BookingStatus.CANCELLED)],
        ]

        response = await my_bookings.cancel_booking(
            {"bookingId": "res-001"},
            CancelBookingService(mock_gateway, session_provider),
            ListMyBookingsService(mock_gateway, session_provider),
        )

        assert response["data"]["bookings"][0]["status"] == "cancelled"
        mock_gateway.cancel.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cancel_unknown_booking(self, mock_gateway, session_provider):
        mock_gateway.list_my_bookings.return_value = [_summary()]

        response = await my_bookings.cancel_booking(
            {"bookingId": "res-404"},
            CancelBookingService(mock_gateway, session_provider),
            ListMyBookingsService(mock_gateway, session_provider),
        )

        assert response["error_code"] == "BOOKING_NOT_FOUND"
