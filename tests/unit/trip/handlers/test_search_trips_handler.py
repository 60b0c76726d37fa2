from datetime import date
from unittest.mock import AsyncMock

import pytest

from bus_booking.shared.domain.exception import ServiceUnavailableException
from bus_booking.trip.applications.search_trips import SearchTripsService
from bus_booking.trip.handlers import search_trips


class TestSearchTripsHandler:
    @pytest.mark.asyncio
    async def test_returns_trip_summaries(self, create_trip):
        repository = AsyncMock()
        repository.search.return_value = [create_trip(booked_seats=(3, 4))]

        response = await search_trips.handle(
            {"from": "Bangalore", "to": "Chennai", "date": "2025-01-01"},
            service=SearchTripsService(repository),
        )

        assert response["status"] == "success"
        assert response["data"]["count"] == 1
        summary = response["data"]["trips"][0]
        assert summary["trip_id"] == "trip-123"
        assert summary["available_seats"] == 38
        assert summary["price_amount"] == "500"
        assert summary["departure_time"] == "2025-01-01T21:30:00"
        criteria = repository.search.await_args.args[0]
        assert criteria.travel_date == date(2025, 1, 1)

    @pytest.mark.asyncio
    async def test_missing_parameters(self):
        response = await search_trips.handle(
            {"from": "Bangalore"}, service=SearchTripsService(AsyncMock())
        )

        assert response["status"] == "error"
        assert response["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_service_unavailable(self):
        repository = AsyncMock()
        repository.search.side_effect = ServiceUnavailableException("down")

        response = await search_trips.handle(
            {"from": "Bangalore", "to": "Chennai", "date": "2025-01-01"},
            service=SearchTripsService(repository),
        )

        assert response == {
            "status": "error",
            "error_code": "SERVICE_UNAVAILABLE",
            "message": "Failed to search routes",
        }
