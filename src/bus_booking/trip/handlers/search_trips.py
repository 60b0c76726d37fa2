from typing import Optional

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from bus_booking.shared.domain.exception import (
    DomainException,
    ServiceUnavailableException,
)
from bus_booking.trip.applications.search_trips import SearchTripsService
from bus_booking.trip.domain.entity import Trip
from bus_booking.trip.handlers.request_models import SearchTripsRequest
from bus_booking.trip.handlers.response_models import (
    ErrorResponse,
    SearchResultData,
    SuccessResponse,
    to_trip_summary,
)
from bus_booking.trip.infrastructure.http_trip_repository import HttpTripRepository

logger = Logger()

_service: Optional[SearchTripsService] = None


def _default_service() -> SearchTripsService:
    global _service
    if _service is None:
        _service = SearchTripsService(repository=HttpTripRepository())
    return _service


async def handle(event: dict, service: Optional[SearchTripsService] = None) -> dict:
    """便検索ハンドラ

    検索画面から受け取ったクエリを SearchTripsRequest で検証し、
    検索結果（または ErrorResponse）を dict で返す。
    """
    logger.info("Received search trips request")
    service = service or _default_service()

    try:
        request = SearchTripsRequest.model_validate(event)
    except ValidationError as e:
        return _error_response(
            "VALIDATION_ERROR", "Invalid search parameters", e.errors()
        )

    try:
        trips = await service.search(
            from_city=request.from_city,
            to_city=request.to_city,
            travel_date=request.travel_date,
        )
    except ValueError as e:
        return _error_response("VALIDATION_ERROR", str(e))
    except ServiceUnavailableException:
        logger.exception("Trip directory unavailable")
        return _error_response("SERVICE_UNAVAILABLE", "Failed to search routes")
    except DomainException as e:
        return _error_response("SEARCH_FAILED", str(e))

    return _to_response(trips)


def _to_response(trips: list[Trip]) -> dict:
    """Entity をレスポンス形式に変換"""
    summaries = [to_trip_summary(trip) for trip in trips]
    return SuccessResponse(
        data=SearchResultData(trips=summaries, count=len(summaries))
    ).model_dump()


def _error_response(
    error_code: str, message: str, details: Optional[list] = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
