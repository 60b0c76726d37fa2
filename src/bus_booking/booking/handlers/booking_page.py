from __future__ import annotations

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from bus_booking.booking.applications.start_booking import StartBookingService
from bus_booking.booking.applications.submit_booking import SubmitBookingService
from bus_booking.booking.domain.entity import BookingComposer
from bus_booking.booking.domain.value_object import BookingConfirmation, BookingResult
from bus_booking.booking.handlers.error_mapping import (
    domain_error_response,
    error_response,
    validation_error_response,
)
from bus_booking.booking.handlers.request_models import (
    SelectPointRequest,
    ToggleSeatRequest,
    UpdatePassengerRequest,
)
from bus_booking.booking.handlers.response_models import (
    BookingResultData,
    SuccessResponse,
    to_page_data,
)
from bus_booking.shared.domain import TripId
from bus_booking.shared.domain.exception import (
    DomainException,
    ServiceUnavailableException,
)

logger = Logger()


class BookingPageHandler:
    """予約画面ハンドラ

    表示層から受け取った入力イベント（dict）を Pydantic で検証して
    BookingComposer に渡し、画面データまたは ErrorResponse を dict で返す。
    """

    def __init__(
        self, composer: BookingComposer, submit_service: SubmitBookingService
    ) -> None:
        self._composer = composer
        self._submit_service = submit_service

    @property
    def composer(self) -> BookingComposer:
        return self._composer

    @classmethod
    async def open(
        cls,
        trip_id: str,
        start_service: StartBookingService,
        submit_service: SubmitBookingService,
    ) -> tuple[BookingPageHandler | None, dict]:
        """予約画面を開く

        失敗した場合は (None, ErrorResponse) を返す。
        """
        logger.info("Opening booking page", extra={"trip_id": trip_id})
        try:
            composer = await start_service.start(TripId(value=trip_id))
        except ValueError as e:
            return None, error_response("VALIDATION_ERROR", str(e), redirect="/")
        except ServiceUnavailableException as e:
            logger.exception("Failed to load route details")
            return None, domain_error_response(e, redirect="/")
        except DomainException as e:
            return None, domain_error_response(e)

        handler = cls(composer, submit_service)
        return handler, handler.view()

    def view(self) -> dict:
        return SuccessResponse(data=to_page_data(self._composer)).model_dump()

    def toggle_seat(self, event: dict) -> dict:
        try:
            request = ToggleSeatRequest.model_validate(event)
            self._composer.toggle_seat(request.seat_number)
        except ValidationError as e:
            return validation_error_response(e)
        except DomainException as e:
            logger.info("Seat toggle rejected", extra={"reason": str(e)})
            return domain_error_response(e)
        return self.view()

    def update_passenger(self, event: dict) -> dict:
        try:
            request = UpdatePassengerRequest.model_validate(event)
            self._composer.update_passenger_field(
                request.seat_number, request.field, request.value
            )
        except ValidationError as e:
            return validation_error_response(e)
        except DomainException as e:
            return domain_error_response(e)
        return self.view()

    def set_boarding_point(self, event: dict) -> dict:
        try:
            request = SelectPointRequest.model_validate(event)
            self._composer.set_boarding_point(request.location)
        except ValidationError as e:
            return validation_error_response(e)
        except DomainException as e:
            return domain_error_response(e)
        return self.view()

    def set_dropping_point(self, event: dict) -> dict:
        try:
            request = SelectPointRequest.model_validate(event)
            self._composer.set_dropping_point(request.location)
        except ValidationError as e:
            return validation_error_response(e)
        except DomainException as e:
            return domain_error_response(e)
        return self.view()

    async def submit(self) -> dict:
        """予約を送信する（「Proceed to Payment」）"""
        logger.info(
            "Received submit booking request",
            extra={"seats": list(self._composer.selected_seats)},
        )
        try:
            result = await self._submit_service.submit(self._composer)
        except DomainException as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Failed to submit booking")
            return error_response("INTERNAL_ERROR", str(e))
        return _to_result_response(result)


def _to_result_response(result: BookingResult) -> dict:
    if isinstance(result, BookingConfirmation):
        reservation_id = str(result.reservation_id)
        return SuccessResponse(
            data=BookingResultData(
                reservation_id=reservation_id,
                confirmation_path=f"/booking-confirmation/{reservation_id}",
            )
        ).model_dump()
    return error_response("BOOKING_REJECTED", result.reason)
