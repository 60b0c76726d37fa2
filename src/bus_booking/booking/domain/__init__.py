from .enum import BookingState as BookingState
from .enum import BookingStatus as BookingStatus
from .enum import Gender as Gender
from .enum import PassengerField as PassengerField
from .enum import SeatToggle as SeatToggle
from .value_object import BookingConfirmation as BookingConfirmation
from .value_object import BookingRejection as BookingRejection
from .value_object import BookingRequest as BookingRequest
from .value_object import BookingSummary as BookingSummary
from .value_object import PassengerRecord as PassengerRecord
from .value_object import PriceSummary as PriceSummary
from .value_object import ReservationId as ReservationId
from .gateway import BookingGateway as BookingGateway
from .entity import BookingComposer as BookingComposer
from .entity import SeatSelection as SeatSelection
from .factory import BookingComposerFactory as BookingComposerFactory
