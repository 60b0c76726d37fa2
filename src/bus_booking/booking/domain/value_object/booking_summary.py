from dataclasses import dataclass
from datetime import date
from typing import Optional

from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.shared.domain import Money

from .reservation_id import ReservationId


@dataclass(frozen=True)
class BookingSummary:
    """マイ予約一覧の1件"""

    reservation_id: ReservationId
    booking_reference: str
    bus_name: str
    from_city: str
    to_city: str
    travel_date: Optional[date]
    departure_time: str
    arrival_time: str
    seat_numbers: tuple[int, ...]
    total_amount: Money
    status: BookingStatus

    @property
    def passenger_count(self) -> int:
        return len(self.seat_numbers)

    def is_cancellable(self) -> bool:
        """確定済みの予約のみキャンセル可能"""
        return self.status == BookingStatus.CONFIRMED
