from abc import ABC, abstractmethod

from bus_booking.booking.domain.value_object import (
    BookingRequest,
    BookingSummary,
    ReservationId,
)


class BookingGateway(ABC):
    """予約サービスへのポート

    予約が受け付けられなかった場合は BookingSubmissionException を送出する。
    """

    @abstractmethod
    async def submit(self, request: BookingRequest, auth_token: str) -> ReservationId:
        """予約リクエストを1回送信し、確定した予約IDを返す"""
        raise NotImplementedError

    @abstractmethod
    async def list_my_bookings(self, auth_token: str) -> list[BookingSummary]:
        raise NotImplementedError

    @abstractmethod
    async def cancel(self, reservation_id: ReservationId, auth_token: str) -> None:
        raise NotImplementedError
