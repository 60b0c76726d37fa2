from .booking_state import BookingState as BookingState
from .booking_status import BookingStatus as BookingStatus
from .gender import Gender as Gender
from .passenger_field import PassengerField as PassengerField
from .seat_toggle import SeatToggle as SeatToggle
