from aws_lambda_powertools import Logger
from pydantic import ValidationError

from bus_booking.booking.applications.cancel_booking import CancelBookingService
from bus_booking.booking.applications.list_my_bookings import ListMyBookingsService
from bus_booking.booking.domain.value_object import ReservationId
from bus_booking.booking.handlers.error_mapping import (
    domain_error_response,
    validation_error_response,
)
from bus_booking.booking.handlers.request_models import CancelBookingRequest
from bus_booking.booking.handlers.response_models import (
    MyBookingsData,
    SuccessResponse,
    to_summary_data,
)
from bus_booking.shared.domain.exception import DomainException

logger = Logger()


async def list_bookings(service: ListMyBookingsService) -> dict:
    """マイ予約一覧ハンドラ"""
    try:
        bookings = await service.list_bookings()
    except DomainException as e:
        logger.warning("Failed to load bookings", extra={"reason": str(e)})
        return domain_error_response(e)

    summaries = [to_summary_data(b) for b in bookings]
    return SuccessResponse(
        data=MyBookingsData(bookings=summaries, count=len(summaries))
    ).model_dump()


async def cancel_booking(
    event: dict,
    cancel_service: CancelBookingService,
    list_service: ListMyBookingsService,
) -> dict:
    """予約キャンセルハンドラ

    キャンセル後の一覧を返す。
    """
    try:
        request = CancelBookingRequest.model_validate(event)
        await cancel_service.cancel(ReservationId(value=request.booking_id))
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return domain_error_response(e)

    return await list_bookings(list_service)
