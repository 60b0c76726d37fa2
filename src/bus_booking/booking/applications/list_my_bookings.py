from bus_booking.booking.domain.gateway import BookingGateway
from bus_booking.booking.domain.value_object import BookingSummary
from bus_booking.shared.auth import SessionProvider


class ListMyBookingsService:
    """ログインユーザーの予約一覧取得サービス"""

    def __init__(self, gateway: BookingGateway, session_provider: SessionProvider) -> None:
        self._gateway = gateway
        self._session_provider = session_provider

    async def list_bookings(self) -> list[BookingSummary]:
        session = self._session_provider.require_session()
        return await self._gateway.list_my_bookings(session.auth_token)
