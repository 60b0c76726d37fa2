from dataclasses import dataclass

from bus_booking.shared.domain import TripId


@dataclass(frozen=True)
class BookingSubmitted:
    trip_id: TripId
    seat_numbers: tuple[int, ...]


@dataclass(frozen=True)
class BookingConfirmed:
    trip_id: TripId
    reservation_id: str
    seat_numbers: tuple[int, ...]


@dataclass(frozen=True)
class BookingRejected:
    trip_id: TripId
    reason: str
