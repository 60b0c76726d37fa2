from .booking_composer import BookingComposer as BookingComposer
from .seat_selection import MAX_SEATS_PER_BOOKING as MAX_SEATS_PER_BOOKING
from .seat_selection import SeatSelection as SeatSelection
