from unittest.mock import AsyncMock

import pytest

from bus_booking.booking.applications.start_booking import StartBookingService
from bus_booking.booking.domain.entity import BookingComposer
from bus_booking.booking.domain.factory import BookingComposerFactory
from bus_booking.shared.auth import InMemorySessionProvider
from bus_booking.shared.domain.exception import AuthenticationRequiredException
from bus_booking.trip.applications.get_trip import GetTripService
from bus_booking.trip.domain.exception import TripNotFoundException


class TestStartBookingService:
    """StartBookingService のテスト"""

    @pytest.mark.asyncio
    async def test_start_loads_trip_and_creates_composer(
        self, create_trip, session_provider, trip_id
    ):
        # Arrange
        repository = AsyncMock()
        repository.find_by_id.return_value = create_trip()
        service = StartBookingService(
            get_trip=GetTripService(repository),
            session_provider=session_provider,
            factory=BookingComposerFactory(),
        )

        # Act
        composer = await service.start(trip_id)

        # Assert
        assert isinstance(composer, BookingComposer)
        assert composer.trip.id == trip_id
        repository.find_by_id.assert_awaited_once_with(trip_id)

    @pytest.mark.asyncio
    async def test_requires_login_before_loading_trip(self, trip_id):
        """未ログインの場合は便を読み込む前に失敗する"""
        repository = AsyncMock()
        service = StartBookingService(
            get_trip=GetTripService(repository),
            session_provider=InMemorySessionProvider(),
            factory=BookingComposerFactory(),
        )

        with pytest.raises(AuthenticationRequiredException):
            await service.start(trip_id)

        repository.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_trip_not_found(self, session_provider, trip_id):
        repository = AsyncMock()
        repository.find_by_id.return_value = None
        service = StartBookingService(
            get_trip=GetTripService(repository),
            session_provider=session_provider,
            factory=BookingComposerFactory(),
        )

        with pytest.raises(TripNotFoundException):
            await service.start(trip_id)
