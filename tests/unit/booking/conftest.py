from unittest.mock import AsyncMock

import pytest

from bus_booking.booking.domain.entity import BookingComposer
from bus_booking.booking.domain.factory import BookingComposerFactory
from bus_booking.booking.domain.gateway import BookingGateway
from bus_booking.booking.domain.value_object import ReservationId


@pytest.fixture
def create_composer(create_trip):
    """BookingComposer を生成する Factory fixture"""

    def _factory(**trip_kwargs) -> BookingComposer:
        return BookingComposerFactory().create(create_trip(**trip_kwargs))

    return _factory


@pytest.fixture
def fill_passengers():
    """選択中の全座席の乗客情報を埋める"""

    def _fill(composer: BookingComposer) -> None:
        for record in composer.passengers:
            composer.update_passenger_field(
                record.seat_number, "name", f"Passenger {record.seat_number}"
            )
            composer.update_passenger_field(record.seat_number, "age", 30)

    return _fill


@pytest.fixture
def mock_gateway():
    """予約確定を返すゲートウェイのモック"""
    gateway = AsyncMock(spec=BookingGateway)
    gateway.submit.return_value = ReservationId(value="res-001")
    return gateway
