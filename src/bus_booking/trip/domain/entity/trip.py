from typing import Optional

from bus_booking.shared.domain import Entity, IsoDateTime, Money, TripId
from bus_booking.shared.domain.exception import BusinessRuleViolationException
from bus_booking.trip.domain.value_object import StopPoint


class Trip(Entity[TripId]):
    """バスの便（読み取り専用）

    路線ディレクトリサービスから取得したスナップショット。
    予約ワークフロー中は変更しない。
    """

    def __init__(
        self,
        id: TripId,
        bus_name: str,
        origin: str,
        destination: str,
        departure_time: IsoDateTime,
        arrival_time: IsoDateTime,
        total_seats: int,
        booked_seats: tuple[int, ...],
        price: Money,
        boarding_points: tuple[StopPoint, ...] = (),
        dropping_points: tuple[StopPoint, ...] = (),
    ) -> None:
        super().__init__(id)

        self._bus_name = bus_name
        self._origin = origin
        self._destination = destination
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._total_seats = total_seats
        self._booked_seats = tuple(booked_seats)
        self._booked_seat_set = frozenset(self._booked_seats)
        self._price = price
        self._boarding_points = tuple(boarding_points)
        self._dropping_points = tuple(dropping_points)

        self._validate_seats()
        self._validate_schedule()

    def _validate_seats(self) -> None:
        """予約済み座席番号 ⊆ 1..total_seats"""
        if self._total_seats <= 0:
            raise BusinessRuleViolationException("Total seats must be positive")
        out_of_range = [s for s in self._booked_seats if not self.has_seat(s)]
        if out_of_range:
            raise BusinessRuleViolationException(
                f"Booked seats out of range 1..{self._total_seats}: {out_of_range}"
            )

    def _validate_schedule(self) -> None:
        """出発時刻 < 到着時刻"""
        if not self._departure_time.is_before(self._arrival_time):
            raise BusinessRuleViolationException(
                "Departure time must be before arrival time"
            )

    @property
    def bus_name(self) -> str:
        return self._bus_name

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._arrival_time

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def booked_seats(self) -> tuple[int, ...]:
        return self._booked_seats

    @property
    def price(self) -> Money:
        return self._price

    @property
    def boarding_points(self) -> tuple[StopPoint, ...]:
        return self._boarding_points

    @property
    def dropping_points(self) -> tuple[StopPoint, ...]:
        return self._dropping_points

    def has_seat(self, seat_number: int) -> bool:
        """座席番号がこの便の座席範囲内か"""
        return 1 <= seat_number <= self._total_seats

    def is_booked(self, seat_number: int) -> bool:
        """他の乗客により予約済みの座席か"""
        return seat_number in self._booked_seat_set

    def available_seat_count(self) -> int:
        return self._total_seats - len(self._booked_seat_set)

    def default_boarding_point(self) -> Optional[StopPoint]:
        """既定の乗車地点（一覧の先頭）"""
        return self._boarding_points[0] if self._boarding_points else None

    def default_dropping_point(self) -> Optional[StopPoint]:
        """既定の降車地点（一覧の先頭）"""
        return self._dropping_points[0] if self._dropping_points else None
