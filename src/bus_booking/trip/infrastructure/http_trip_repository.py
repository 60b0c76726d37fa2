from typing import Optional

import httpx
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from bus_booking.shared.domain import Currency, IsoDateTime, Money, TripId
from bus_booking.shared.domain.exception import ServiceUnavailableException
from bus_booking.shared.utils import create_http_client
from bus_booking.trip.domain.entity import Trip
from bus_booking.trip.domain.repository import TripRepository
from bus_booking.trip.domain.value_object import SearchCriteria, StopPoint
from bus_booking.trip.infrastructure.route_payload import RoutePayload

logger = Logger()


class HttpTripRepository(TripRepository):
    """路線ディレクトリ API を使用した TripRepository の具象実装"""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        currency: Optional[Currency] = None,
    ) -> None:
        self.client = client or create_http_client()
        self.currency = currency or Currency.inr()

    async def find_by_id(self, trip_id: TripId) -> Optional[Trip]:
        """便IDで検索"""
        response = await self._get(f"/routes/{trip_id}")
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        return self._to_entity(self._data(response))

    async def search(self, criteria: SearchCriteria) -> list[Trip]:
        """出発都市・到着都市・乗車日で便を検索する"""
        response = await self._get(
            "/routes/search",
            params={
                "fromCity": criteria.from_city,
                "toCity": criteria.to_city,
                "date": criteria.travel_date.isoformat(),
            },
        )
        self._raise_for_status(response)
        items = self._data(response)
        if not isinstance(items, list):
            raise ServiceUnavailableException("Malformed search response")
        return [self._to_entity(item) for item in items]

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        try:
            return await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning("Trip directory request failed", extra={"url": url})
            raise ServiceUnavailableException(
                f"Trip directory unavailable: {e}"
            ) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_error:
            raise ServiceUnavailableException(
                f"Trip directory returned HTTP {response.status_code}"
            )

    def _data(self, response: httpx.Response) -> object:
        """{"data": ...} エンベロープを剥がす"""
        try:
            body = response.json()
        except ValueError as e:
            raise ServiceUnavailableException("Malformed trip directory response") from e
        if not isinstance(body, dict) or "data" not in body:
            raise ServiceUnavailableException("Malformed trip directory response")
        return body["data"]

    def _to_entity(self, item: object) -> Trip:
        """API のアイテムをドメインエンティティに変換する"""
        try:
            payload = RoutePayload.model_validate(item)
        except ValidationError as e:
            raise ServiceUnavailableException(f"Malformed route payload: {e}") from e

        departure = IsoDateTime.combine(payload.travel_date, payload.departure_time)
        arrival = IsoDateTime.combine(payload.travel_date, payload.arrival_time)
        # 到着の時刻が出発以前なら翌日着
        if not arrival.is_after(departure):
            arrival = arrival.next_day()

        return Trip(
            id=TripId(value=payload.id),
            bus_name=payload.bus.bus_name,
            origin=payload.from_city,
            destination=payload.to_city,
            departure_time=departure,
            arrival_time=arrival,
            total_seats=payload.bus.total_seats,
            booked_seats=tuple(payload.booked_seats),
            price=Money(amount=payload.price, currency=self.currency),
            boarding_points=tuple(
                StopPoint(location=p.location, time=p.time)
                for p in payload.boarding_points
            ),
            dropping_points=tuple(
                StopPoint(location=p.location, time=p.time)
                for p in payload.dropping_points
            ),
        )
