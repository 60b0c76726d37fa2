from typing import Optional

import httpx
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from bus_booking.booking.domain.exception import BookingSubmissionException
from bus_booking.booking.domain.gateway import BookingGateway
from bus_booking.booking.domain.value_object import (
    BookingRequest,
    BookingSummary,
    ReservationId,
)
from bus_booking.booking.infrastructure.booking_payload import (
    BookingRecordPayload,
    CreateBookingPayload,
    CreatedBookingPayload,
)
from bus_booking.shared.domain import Currency, Money
from bus_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ServiceUnavailableException,
)
from bus_booking.shared.utils import bearer, create_http_client, error_message

logger = Logger()


class HttpBookingGateway(BookingGateway):
    """予約 API を使用した BookingGateway の具象実装"""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        currency: Optional[Currency] = None,
    ) -> None:
        self.client = client or create_http_client()
        self.currency = currency or Currency.inr()

    async def submit(self, request: BookingRequest, auth_token: str) -> ReservationId:
        """予約リクエストを送信する（リトライしない）"""
        payload = CreateBookingPayload.from_request(request)
        try:
            response = await self.client.post(
                "/bookings", json=payload.to_wire(), headers=bearer(auth_token)
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Booking request failed in transport",
                extra={"trip_id": str(request.trip_id), "error": str(e)},
            )
            raise BookingSubmissionException() from e

        if response.is_error:
            reason = error_message(response)
            logger.info(
                "Booking rejected by service",
                extra={"status_code": response.status_code, "reason": reason},
            )
            raise BookingSubmissionException(reason)

        try:
            created = CreatedBookingPayload.model_validate(self._data(response))
        except (ValueError, ValidationError) as e:
            logger.warning("Malformed booking response")
            raise BookingSubmissionException() from e

        return ReservationId(value=created.id)

    async def list_my_bookings(self, auth_token: str) -> list[BookingSummary]:
        try:
            response = await self.client.get(
                "/bookings/my-bookings", headers=bearer(auth_token)
            )
        except httpx.HTTPError as e:
            raise ServiceUnavailableException("Failed to load bookings") from e

        if response.is_error:
            raise ServiceUnavailableException(
                error_message(response) or "Failed to load bookings"
            )

        try:
            items = self._data(response)
            records = [BookingRecordPayload.model_validate(item) for item in items]
        except (TypeError, ValueError, ValidationError) as e:
            raise ServiceUnavailableException("Malformed bookings response") from e

        return [self._to_summary(record) for record in records]

    async def cancel(self, reservation_id: ReservationId, auth_token: str) -> None:
        try:
            response = await self.client.put(
                f"/bookings/{reservation_id}/cancel", headers=bearer(auth_token)
            )
        except httpx.HTTPError as e:
            raise ServiceUnavailableException("Failed to cancel booking") from e

        if response.is_error:
            raise BusinessRuleViolationException(
                error_message(response) or "Failed to cancel booking"
            )

    async def aclose(self) -> None:
        await self.client.aclose()

    def _data(self, response: httpx.Response) -> object:
        """{"data": ...} エンベロープを剥がす"""
        body = response.json()
        if not isinstance(body, dict) or "data" not in body:
            raise ValueError("Response has no data envelope")
        return body["data"]

    def _to_summary(self, record: BookingRecordPayload) -> BookingSummary:
        return BookingSummary(
            reservation_id=ReservationId(value=record.id),
            booking_reference=record.booking_reference,
            bus_name=record.route.bus.bus_name,
            from_city=record.route.from_city,
            to_city=record.route.to_city,
            travel_date=record.route.travel_date,
            departure_time=record.route.departure_time,
            arrival_time=record.route.arrival_time,
            seat_numbers=tuple(p.seat_number for p in record.passenger_details),
            total_amount=Money(amount=record.total_amount, currency=self.currency),
            status=record.booking_status,
        )
