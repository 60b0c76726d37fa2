from dataclasses import dataclass

from bus_booking.booking.domain.enum import Gender
from bus_booking.shared.domain import TripId

DEFAULT_PAYMENT_METHOD = "credit_card"


@dataclass(frozen=True)
class PassengerDetail:
    """予約リクエストに載せる乗客1名分"""

    seat_number: int
    name: str
    age: int
    gender: Gender


@dataclass(frozen=True)
class BookingRequest:
    """予約サービスに送信する不変のペイロード

    passengers は座席の選択順。
    """

    trip_id: TripId
    passengers: tuple[PassengerDetail, ...]
    boarding_point: str
    dropping_point: str
    payment_method: str = DEFAULT_PAYMENT_METHOD

    @property
    def seat_numbers(self) -> tuple[int, ...]:
        return tuple(p.seat_number for p in self.passengers)
