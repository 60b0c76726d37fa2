from dataclasses import dataclass
from typing import Union

from .reservation_id import ReservationId

DEFAULT_REJECTION_REASON = "Booking failed"


@dataclass(frozen=True)
class BookingConfirmation:
    """予約確定"""

    reservation_id: ReservationId


@dataclass(frozen=True)
class BookingRejection:
    """予約サービスによる却下（入力済みの下書きは保持される）"""

    reason: str = DEFAULT_REJECTION_REASON


BookingResult = Union[BookingConfirmation, BookingRejection]
