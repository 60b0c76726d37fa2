from typing import Optional

from bus_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    ResourceNotFoundException,
)


class SelectionCapacityExceededException(BusinessRuleViolationException):
    """1予約あたりの座席上限を超えて選択しようとした場合"""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Maximum {limit} seats can be selected")
        self.limit = limit


class InvalidSeatException(BusinessRuleViolationException):
    """便の座席範囲外の座席番号"""

    def __init__(self, seat_number: int, total_seats: int) -> None:
        super().__init__(f"Seat {seat_number} is outside 1..{total_seats}")
        self.seat_number = seat_number


class BookingValidationException(BusinessRuleViolationException):
    """送信前バリデーションの失敗（ユーザーの入力で回復可能）"""

    pass


class EmptySelectionException(BookingValidationException):
    def __init__(self) -> None:
        super().__init__("Please select at least one seat")


class IncompletePassengerException(BookingValidationException):
    """氏名または年齢が未入力の乗客（選択順で最初のもの）"""

    def __init__(self, seat_number: int) -> None:
        super().__init__(f"Please fill all passenger details (seat {seat_number})")
        self.seat_number = seat_number


class NotValidatedException(DomainException):
    """validate() が成功していない状態でリクエストを組み立てようとした"""

    pass


class BookingLockedException(BusinessRuleViolationException):
    """送信中・確定後の予約セッションを変更しようとした"""

    pass


class SubmissionInProgressException(BookingLockedException):
    """送信中に再度送信しようとした"""

    pass


class BookingSubmissionException(DomainException):
    """予約サービスが予約を受け付けなかった場合（ゲートウェイが送出）"""

    def __init__(self, reason: Optional[str] = None) -> None:
        super().__init__(reason or "Booking submission failed")
        self.reason = reason


class BookingNotFoundException(ResourceNotFoundException):
    pass
