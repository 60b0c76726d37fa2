from enum import Enum


class BookingStatus(str, Enum):
    """予約サービス側の予約ステータス"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
