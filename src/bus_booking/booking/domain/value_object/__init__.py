from .booking_request import DEFAULT_PAYMENT_METHOD as DEFAULT_PAYMENT_METHOD
from .booking_request import BookingRequest as BookingRequest
from .booking_request import PassengerDetail as PassengerDetail
from .booking_result import DEFAULT_REJECTION_REASON as DEFAULT_REJECTION_REASON
from .booking_result import BookingConfirmation as BookingConfirmation
from .booking_result import BookingRejection as BookingRejection
from .booking_result import BookingResult as BookingResult
from .booking_summary import BookingSummary as BookingSummary
from .passenger_record import PassengerRecord as PassengerRecord
from .price_summary import PriceSummary as PriceSummary
from .reservation_id import ReservationId as ReservationId
