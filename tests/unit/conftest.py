from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from bus_booking.shared.auth import InMemorySessionProvider, UserSession
from bus_booking.shared.domain import IsoDateTime, Money, TripId
from bus_booking.trip.domain.entity import Trip
from bus_booking.trip.domain.value_object import StopPoint


@pytest.fixture
def trip_id():
    """全テスト共通の TripId フィクスチャ"""
    return TripId(value="trip-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_trip():
    """Trip を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        trip_id: str = "trip-123",
        total_seats: int = 40,
        booked_seats: tuple[int, ...] = (3, 4),
        price_amount: Decimal = Decimal("500"),
        departure_time: str = "2025-01-01T21:30:00",
        arrival_time: str = "2025-01-02T05:45:00",
        boarding_points: tuple[StopPoint, ...] = (
            StopPoint(location="Majestic", time="21:30"),
            StopPoint(location="Silk Board", time="22:00"),
        ),
        dropping_points: tuple[StopPoint, ...] = (
            StopPoint(location="Koyambedu", time="05:45"),
            StopPoint(location="Guindy", time="06:15"),
        ),
    ) -> Trip:
        return Trip(
            id=TripId(value=trip_id),
            bus_name="Volvo Multi-Axle Sleeper",
            origin="Bangalore",
            destination="Chennai",
            departure_time=IsoDateTime.from_string(departure_time),
            arrival_time=IsoDateTime.from_string(arrival_time),
            total_seats=total_seats,
            booked_seats=booked_seats,
            price=Money.inr(price_amount),
            boarding_points=boarding_points,
            dropping_points=dropping_points,
        )

    return _factory


@pytest.fixture
def user_session():
    return UserSession(user_id="user-1", name="Asha", auth_token="token-abc")


@pytest.fixture
def session_provider(user_session):
    """ログイン済みのセッションプロバイダ"""
    return InMemorySessionProvider(user_session)
