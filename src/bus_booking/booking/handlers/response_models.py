from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

from bus_booking.booking.domain.entity import BookingComposer
from bus_booking.booking.domain.value_object import BookingSummary, PassengerRecord

ROW_WIDTH = 4


class SeatData(BaseModel):
    """座席マップの1席（行・列は座席番号から導出する表示用の値）"""

    seat_number: int
    row: int
    column: int
    status: str


class PassengerData(BaseModel):
    seat_number: int
    name: str
    age: Optional[int]
    gender: str


class PriceSummaryData(BaseModel):
    seat_count: int
    per_seat_price: str
    total: str
    currency: str


class BookingPageData(BaseModel):
    """予約画面の表示データ"""

    trip_id: str
    bus_name: str
    from_city: str
    to_city: str
    departure_time: str
    arrival_time: str
    state: str
    max_seats: int
    seats: list[SeatData]
    selected_seats: list[int]
    passengers: list[PassengerData]
    boarding_point: str
    dropping_point: str
    boarding_points: list[str]
    dropping_points: list[str]
    price: PriceSummaryData
    last_rejection: Optional[str] = None


class BookingResultData(BaseModel):
    """予約確定結果"""

    reservation_id: str
    confirmation_path: str


class BookingSummaryData(BaseModel):
    booking_id: str
    booking_reference: str
    bus_name: str
    from_city: str
    to_city: str
    travel_date: Optional[str]
    departure_time: str
    arrival_time: str
    seat_numbers: list[int]
    passenger_count: int
    total_amount: str
    status: str
    cancellable: bool


class MyBookingsData(BaseModel):
    bookings: list[BookingSummaryData]
    count: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: Union[BookingPageData, BookingResultData, MyBookingsData]


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル

    redirect は画面遷移が必要な場合の遷移先（ログイン画面・トップ画面）。
    """

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None
    redirect: str | None = None


def seat_status(composer: BookingComposer, seat_number: int) -> str:
    if composer.is_booked(seat_number):
        return "booked"
    if composer.is_selected(seat_number):
        return "selected"
    return "available"


def build_seat_map(composer: BookingComposer) -> list[SeatData]:
    """座席マップを組み立てる（1行 ROW_WIDTH 席）"""
    return [
        SeatData(
            seat_number=n,
            row=(n - 1) // ROW_WIDTH,
            column=(n - 1) % ROW_WIDTH,
            status=seat_status(composer, n),
        )
        for n in range(1, composer.trip.total_seats + 1)
    ]


def to_passenger_data(record: PassengerRecord) -> PassengerData:
    return PassengerData(
        seat_number=record.seat_number,
        name=record.name,
        age=record.age,
        gender=record.gender.value,
    )


def to_page_data(composer: BookingComposer) -> BookingPageData:
    trip = composer.trip
    summary = composer.price_summary()
    rejection = composer.last_rejection
    return BookingPageData(
        trip_id=str(trip.id),
        bus_name=trip.bus_name,
        from_city=trip.origin,
        to_city=trip.destination,
        departure_time=str(trip.departure_time),
        arrival_time=str(trip.arrival_time),
        state=composer.state.value,
        max_seats=composer.seat_limit,
        seats=build_seat_map(composer),
        selected_seats=list(composer.selected_seats),
        passengers=[to_passenger_data(p) for p in composer.passengers],
        boarding_point=composer.boarding_point,
        dropping_point=composer.dropping_point,
        boarding_points=[str(p) for p in trip.boarding_points],
        dropping_points=[str(p) for p in trip.dropping_points],
        price=PriceSummaryData(
            seat_count=summary.seat_count,
            per_seat_price=str(summary.per_seat_price.amount),
            total=str(summary.total.amount),
            currency=str(summary.per_seat_price.currency),
        ),
        last_rejection=rejection.reason if rejection else None,
    )


def to_summary_data(booking: BookingSummary) -> BookingSummaryData:
    return BookingSummaryData(
        booking_id=str(booking.reservation_id),
        booking_reference=booking.booking_reference,
        bus_name=booking.bus_name,
        from_city=booking.from_city,
        to_city=booking.to_city,
        travel_date=booking.travel_date.isoformat() if booking.travel_date else None,
        departure_time=booking.departure_time,
        arrival_time=booking.arrival_time,
        seat_numbers=list(booking.seat_numbers),
        passenger_count=booking.passenger_count,
        total_amount=str(booking.total_amount.amount),
        status=booking.status.value,
        cancellable=booking.is_cancellable(),
    )
