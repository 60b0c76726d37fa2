from aws_lambda_powertools import Logger

from bus_booking.booking.domain.exception import BookingNotFoundException
from bus_booking.booking.domain.gateway import BookingGateway
from bus_booking.booking.domain.value_object import BookingSummary, ReservationId
from bus_booking.shared.auth import SessionProvider
from bus_booking.shared.domain.exception import BusinessRuleViolationException

logger = Logger()


class CancelBookingService:
    """予約キャンセルサービス"""

    def __init__(self, gateway: BookingGateway, session_provider: SessionProvider) -> None:
        self._gateway = gateway
        self._session_provider = session_provider

    async def cancel(self, reservation_id: ReservationId) -> BookingSummary:
        """確定済みの予約をキャンセルする"""
        session = self._session_provider.require_session()
        bookings = await self._gateway.list_my_bookings(session.auth_token)
        booking = next(
            (b for b in bookings if b.reservation_id == reservation_id), None
        )
        if booking is None:
            raise BookingNotFoundException(f"Booking not found: {reservation_id}")
        if not booking.is_cancellable():
            raise BusinessRuleViolationException(
                f"Cannot cancel a booking in {booking.status.value} status"
            )

        await self._gateway.cancel(reservation_id, session.auth_token)
        logger.info("Booking cancelled", extra={"reservation_id": str(reservation_id)})
        return booking
