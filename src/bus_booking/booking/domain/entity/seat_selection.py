from bus_booking.booking.domain.enum import SeatToggle
from bus_booking.booking.domain.exception import (
    InvalidSeatException,
    SelectionCapacityExceededException,
)
from bus_booking.trip.domain.entity import Trip

MAX_SEATS_PER_BOOKING = 6


class SeatSelection:
    """選択中の座席集合

    - 選択順を保持する（乗客フォームの表示順と送信順を決める）
    - 予約済み座席は選択できない
    - 1予約あたり MAX_SEATS_PER_BOOKING 席まで
    """

    def __init__(self, trip: Trip, limit: int = MAX_SEATS_PER_BOOKING) -> None:
        self._trip = trip
        self._limit = limit
        self._seats: list[int] = []

    @property
    def seats(self) -> tuple[int, ...]:
        return tuple(self._seats)

    @property
    def limit(self) -> int:
        return self._limit

    def __len__(self) -> int:
        return len(self._seats)

    def __iter__(self):
        return iter(tuple(self._seats))

    def is_booked(self, seat_number: int) -> bool:
        return self._trip.is_booked(seat_number)

    def is_selected(self, seat_number: int) -> bool:
        return seat_number in self._seats

    def toggle(self, seat_number: int) -> SeatToggle:
        """座席の選択状態を切り替える

        Raises:
            InvalidSeatException: 座席番号が便の範囲外
            SelectionCapacityExceededException: 上限に達している（状態は変えない）
        """
        if not self._trip.has_seat(seat_number):
            raise InvalidSeatException(seat_number, self._trip.total_seats)

        if self.is_booked(seat_number):
            return SeatToggle.UNAVAILABLE

        if self.is_selected(seat_number):
            self._seats.remove(seat_number)
            return SeatToggle.DESELECTED

        if len(self._seats) >= self._limit:
            raise SelectionCapacityExceededException(self._limit)

        self._seats.append(seat_number)
        return SeatToggle.SELECTED
