from typing import Optional

from pydantic import ValidationError

from bus_booking.booking.domain.exception import (
    BookingLockedException,
    BookingNotFoundException,
    EmptySelectionException,
    IncompletePassengerException,
    InvalidSeatException,
    SelectionCapacityExceededException,
)
from bus_booking.booking.handlers.response_models import ErrorResponse
from bus_booking.shared.domain.exception import (
    AuthenticationRequiredException,
    BusinessRuleViolationException,
    DomainException,
    ServiceUnavailableException,
)
from bus_booking.trip.domain.exception import TripNotFoundException

# (例外クラス, エラーコード, 遷移先)。上から順に評価する
_ERROR_CODES: list[tuple[type[DomainException], str, Optional[str]]] = [
    (SelectionCapacityExceededException, "SEAT_LIMIT_EXCEEDED", None),
    (InvalidSeatException, "INVALID_SEAT", None),
    (EmptySelectionException, "EMPTY_SELECTION", None),
    (IncompletePassengerException, "INCOMPLETE_PASSENGER", None),
    (BookingLockedException, "BOOKING_LOCKED", None),
    (AuthenticationRequiredException, "AUTHENTICATION_REQUIRED", "/login"),
    (TripNotFoundException, "TRIP_NOT_FOUND", "/"),
    (ServiceUnavailableException, "SERVICE_UNAVAILABLE", None),
    (BookingNotFoundException, "BOOKING_NOT_FOUND", None),
    (BusinessRuleViolationException, "BUSINESS_RULE_VIOLATION", None),
]


def error_response(
    error_code: str,
    message: str,
    details: Optional[list] = None,
    redirect: Optional[str] = None,
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
        redirect=redirect,
    ).model_dump(exclude_none=True)


def domain_error_response(e: DomainException, redirect: Optional[str] = None) -> dict:
    """ドメイン例外をユーザー向けのエラーレスポンスに変換する"""
    if isinstance(e, IncompletePassengerException):
        return error_response(
            "INCOMPLETE_PASSENGER",
            "Please fill all passenger details",
            details=[{"seat_number": e.seat_number}],
        )

    for exc_type, code, default_redirect in _ERROR_CODES:
        if isinstance(e, exc_type):
            return error_response(code, str(e), redirect=redirect or default_redirect)
    return error_response("DOMAIN_ERROR", str(e), redirect=redirect)


def validation_error_response(e: ValidationError) -> dict:
    return error_response(
        "VALIDATION_ERROR",
        "Invalid input",
        details=[
            {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
        ],
    )
