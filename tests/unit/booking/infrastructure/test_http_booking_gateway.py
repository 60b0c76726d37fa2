import json
from datetime import date
from decimal import Decimal

import httpx
import pytest

from bus_booking.booking.domain.enum import BookingStatus, Gender
from bus_booking.booking.domain.exception import BookingSubmissionException
from bus_booking.booking.domain.value_object import (
    BookingRequest,
    PassengerDetail,
    ReservationId,
)
from bus_booking.booking.infrastructure.http_booking_gateway import HttpBookingGateway
from bus_booking.shared.domain import TripId
from bus_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ServiceUnavailableException,
)
from bus_booking.shared.utils import create_http_client


def _gateway(handler) -> HttpBookingGateway:
    client = create_http_client(
        base_url="http://booking.test/api", transport=httpx.MockTransport(handler)
    )
    return HttpBookingGateway(client=client)


@pytest.fixture
def booking_request():
    return BookingRequest(
        trip_id=TripId(value="route-1"),
        passengers=(
            PassengerDetail(seat_number=7, name="Anil", age=34, gender=Gender.MALE),
            PassengerDetail(seat_number=2, name="Sunita", age=31, gender=Gender.FEMALE),
        ),
        boarding_point="Majestic",
        dropping_point="Koyambedu",
    )


class TestSubmit:
    @pytest.mark.asyncio
    async def test_posts_payload_and_returns_reservation_id(self, booking_request):
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(201, json={"data": {"_id": "res-001"}})

        reservation_id = await _gateway(handler).submit(booking_request, "token-abc")

        assert reservation_id == ReservationId(value="res-001")
        assert captured["method"] == "POST"
        assert captured["path"] == "/api/bookings"
        assert captured["auth"] == "Bearer token-abc"
        assert captured["body"] == {
            "routeId": "route-1",
            "passengerDetails": [
                {"seatNumber": 7, "name": "Anil", "age": 34, "gender": "Male"},
                {"seatNumber": 2, "name": "Sunita", "age": 31, "gender": "Female"},
            ],
            "boardingPoint": {"location": "Majestic"},
            "droppingPoint": {"location": "Koyambedu"},
            "paymentMethod": "credit_card",
        }

    @pytest.mark.asyncio
    async def test_rejection_carries_service_message(self, booking_request):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"message": "seat no longer available"})

        with pytest.raises(BookingSubmissionException) as exc_info:
            await _gateway(handler).submit(booking_request, "token-abc")

        assert exc_info.value.reason == "seat no longer available"

    @pytest.mark.asyncio
    async def test_rejection_without_message(self, booking_request):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="Internal Server Error")

        with pytest.raises(BookingSubmissionException) as exc_info:
            await _gateway(handler).submit(booking_request, "token-abc")

        assert exc_info.value.reason is None

    @pytest.mark.asyncio
    async def test_transport_error(self, booking_request):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(BookingSubmissionException) as exc_info:
            await _gateway(handler).submit(booking_request, "token-abc")

        assert exc_info.value.reason is None

    @pytest.mark.asyncio
    async def test_malformed_success_body(self, booking_request):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"data": {}})

        with pytest.raises(BookingSubmissionException):
            await _gateway(handler).submit(booking_request, "token-abc")


class TestMyBookings:
    @pytest.mark.asyncio
    async def test_list_my_bookings(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/bookings/my-bookings"
            return httpx.Response(
                200,
                json={
                    "data": [
                        {
                            "_id": "res-001",
                            "bookingReference": "BK12345",
                            "route": {
                                "bus": {"busName": "Volvo"},
                                "fromCity": "Bangalore",
                                "toCity": "Chennai",
                                "date": "2025-01-01T00:00:00.000Z",
                                "departureTime": "21:30",
                                "arrivalTime": "05:45",
                            },
                            "passengerDetails": [
                                {"seatNumber": 1, "name": "Anil", "age": 34},
                                {"seatNumber": 2, "name": "Sunita", "age": 31},
                            ],
                            "totalAmount": 1000,
                            "bookingStatus": "confirmed",
                        }
                    ]
                },
            )

        bookings = await _gateway(handler).list_my_bookings("token-abc")

        assert len(bookings) == 1
        booking = bookings[0]
        assert booking.reservation_id == ReservationId(value="res-001")
        assert booking.travel_date == date(2025, 1, 1)
        assert booking.seat_numbers == (1, 2)
        assert booking.total_amount.amount == Decimal("1000")
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.is_cancellable()

    @pytest.mark.asyncio
    async def test_list_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        with pytest.raises(ServiceUnavailableException):
            await _gateway(handler).list_my_bookings("token-abc")

    @pytest.mark.asyncio
    async def test_cancel(self):
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["path"] = request.url.path
            return httpx.Response(200, json={"data": {"_id": "res-001"}})

        await _gateway(handler).cancel(ReservationId(value="res-001"), "token-abc")

        assert captured == {"method": "PUT", "path": "/api/bookings/res-001/cancel"}

    @pytest.mark.asyncio
    async def test_cancel_refused(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"message": "Booking already cancelled"})

        with pytest.raises(BusinessRuleViolationException, match="already cancelled"):
            await _gateway(handler).cancel(ReservationId(value="res-001"), "token-abc")
