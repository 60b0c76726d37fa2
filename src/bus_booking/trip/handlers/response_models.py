from pydantic import BaseModel

from bus_booking.trip.domain.entity import Trip


class TripSummaryData(BaseModel):
    """検索結果1件分のレスポンスモデル"""

    trip_id: str
    bus_name: str
    from_city: str
    to_city: str
    departure_time: str
    arrival_time: str
    price_amount: str
    price_currency: str
    available_seats: int


class SearchResultData(BaseModel):
    trips: list[TripSummaryData]
    count: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: SearchResultData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def to_trip_summary(trip: Trip) -> TripSummaryData:
    return TripSummaryData(
        trip_id=str(trip.id),
        bus_name=trip.bus_name,
        from_city=trip.origin,
        to_city=trip.destination,
        departure_time=str(trip.departure_time),
        arrival_time=str(trip.arrival_time),
        price_amount=str(trip.price.amount),
        price_currency=str(trip.price.currency),
        available_seats=trip.available_seat_count(),
    )
