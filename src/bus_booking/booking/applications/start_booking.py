from aws_lambda_powertools import Logger

from bus_booking.booking.domain.entity import BookingComposer
from bus_booking.booking.domain.factory import BookingComposerFactory
from bus_booking.shared.auth import SessionProvider
from bus_booking.shared.domain import TripId
from bus_booking.trip.applications.get_trip import GetTripService

logger = Logger()


class StartBookingService:
    """予約セッション開始サービス

    ログイン済みであることを確認してから便を読み込み、
    Factory で予約組み立て集約を生成する。
    """

    def __init__(
        self,
        get_trip: GetTripService,
        session_provider: SessionProvider,
        factory: BookingComposerFactory,
    ) -> None:
        self._get_trip = get_trip
        self._session_provider = session_provider
        self._factory = factory

    async def start(self, trip_id: TripId) -> BookingComposer:
        """予約を開始する

        Raises:
            AuthenticationRequiredException: 未ログイン（便の読み込み前に判定）
            TripNotFoundException: 便が存在しない
            ServiceUnavailableException: 路線ディレクトリに到達できない
        """
        session = self._session_provider.require_session()
        trip = await self._get_trip.get(trip_id)
        composer = self._factory.create(trip)
        logger.info(
            "Booking session started",
            extra={"trip_id": str(trip_id), "user_id": session.user_id},
        )
        return composer
