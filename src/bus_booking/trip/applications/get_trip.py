from aws_lambda_powertools import Logger

from bus_booking.shared.domain import TripId
from bus_booking.trip.domain.entity import Trip
from bus_booking.trip.domain.exception import TripNotFoundException
from bus_booking.trip.domain.repository import TripRepository

logger = Logger()


class GetTripService:
    """便詳細取得サービス"""

    def __init__(self, repository: TripRepository) -> None:
        self._repository = repository

    async def get(self, trip_id: TripId) -> Trip:
        """便を取得する。存在しなければ TripNotFoundException"""
        trip = await self._repository.find_by_id(trip_id)
        if trip is None:
            logger.warning("Trip not found", extra={"trip_id": str(trip_id)})
            raise TripNotFoundException(trip_id)
        return trip
