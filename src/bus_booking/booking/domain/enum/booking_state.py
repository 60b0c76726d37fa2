from enum import Enum


class BookingState(str, Enum):
    """予約セッションの状態

    BROWSING -> SELECTING -> COMPOSING -> VALIDATED -> SUBMITTING
    -> CONFIRMED。却下された場合は COMPOSING に戻る。
    """

    BROWSING = "browsing"
    SELECTING = "selecting"
    COMPOSING = "composing"
    VALIDATED = "validated"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
