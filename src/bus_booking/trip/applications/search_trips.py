from datetime import date

from aws_lambda_powertools import Logger

from bus_booking.trip.domain.entity import Trip
from bus_booking.trip.domain.repository import TripRepository
from bus_booking.trip.domain.value_object import SearchCriteria

logger = Logger()


class SearchTripsService:
    """便検索ユースケース"""

    def __init__(self, repository: TripRepository) -> None:
        self._repository = repository

    async def search(self, from_city: str, to_city: str, travel_date: date) -> list[Trip]:
        criteria = SearchCriteria(
            from_city=from_city.strip(),
            to_city=to_city.strip(),
            travel_date=travel_date,
        )
        trips = await self._repository.search(criteria)
        logger.info(
            "Trips found",
            extra={
                "from_city": criteria.from_city,
                "to_city": criteria.to_city,
                "travel_date": criteria.travel_date.isoformat(),
                "count": len(trips),
            },
        )
        return trips
