from aws_lambda_powertools import Logger

from bus_booking.booking.domain.entity import BookingComposer
from bus_booking.booking.domain.gateway import BookingGateway
from bus_booking.booking.domain.value_object import BookingResult
from bus_booking.shared.auth import SessionProvider

logger = Logger()


class SubmitBookingService:
    """予約送信ユースケース"""

    def __init__(self, gateway: BookingGateway, session_provider: SessionProvider) -> None:
        self._gateway = gateway
        self._session_provider = session_provider

    async def submit(self, composer: BookingComposer) -> BookingResult:
        """予約を送信する

        検証エラー（BookingValidationException）はそのまま送出する。
        """
        session = self._session_provider.require_session()
        try:
            return await composer.submit(self._gateway, session.auth_token)
        finally:
            for event in composer.flush_domain_events():
                logger.info(
                    type(event).__name__,
                    extra={"trip_id": str(composer.id), "event": repr(event)},
                )
