from .booking_events import BookingConfirmed as BookingConfirmed
from .booking_events import BookingRejected as BookingRejected
from .booking_events import BookingSubmitted as BookingSubmitted
