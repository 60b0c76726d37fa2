from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bus_booking.booking.domain.enum import BookingStatus
from bus_booking.booking.domain.value_object import BookingRequest
from bus_booking.shared.utils import to_amount


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PassengerPayload(_WireModel):
    seat_number: int = Field(..., alias="seatNumber")
    name: str = ""
    age: Optional[int] = None
    gender: str = "Male"


class PointPayload(_WireModel):
    location: str


class CreateBookingPayload(_WireModel):
    """POST /bookings の送信ボディ"""

    route_id: str = Field(..., alias="routeId")
    passenger_details: list[PassengerPayload] = Field(..., alias="passengerDetails")
    boarding_point: PointPayload = Field(..., alias="boardingPoint")
    dropping_point: PointPayload = Field(..., alias="droppingPoint")
    payment_method: str = Field(..., alias="paymentMethod")

    @classmethod
    def from_request(cls, request: BookingRequest) -> "CreateBookingPayload":
        return cls(
            route_id=str(request.trip_id),
            passenger_details=[
                PassengerPayload(
                    seat_number=p.seat_number,
                    name=p.name,
                    age=p.age,
                    gender=p.gender.value,
                )
                for p in request.passengers
            ],
            boarding_point=PointPayload(location=request.boarding_point),
            dropping_point=PointPayload(location=request.dropping_point),
            payment_method=request.payment_method,
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class CreatedBookingPayload(_WireModel):
    """POST /bookings 成功時の data"""

    id: str = Field(..., min_length=1, alias="_id")


class BusRefPayload(_WireModel):
    bus_name: str = Field(default="", alias="busName")


class RouteRefPayload(_WireModel):
    bus: BusRefPayload = Field(default_factory=BusRefPayload)
    from_city: str = Field(default="", alias="fromCity")
    to_city: str = Field(default="", alias="toCity")
    travel_date: Optional[date] = Field(default=None, alias="date")
    departure_time: str = Field(default="", alias="departureTime")
    arrival_time: str = Field(default="", alias="arrivalTime")

    @field_validator("travel_date", mode="before")
    @classmethod
    def truncate_to_date(cls, v):
        if isinstance(v, str) and v:
            return date.fromisoformat(v[:10])
        return v or None


class BookingRecordPayload(_WireModel):
    """GET /bookings/my-bookings の1件"""

    id: str = Field(..., min_length=1, alias="_id")
    booking_reference: str = Field(default="", alias="bookingReference")
    route: RouteRefPayload = Field(default_factory=RouteRefPayload)
    passenger_details: list[PassengerPayload] = Field(
        default_factory=list, alias="passengerDetails"
    )
    total_amount: Decimal = Field(default=Decimal("0"), ge=0, alias="totalAmount")
    booking_status: BookingStatus = Field(
        default=BookingStatus.PENDING, alias="bookingStatus"
    )

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return to_amount(v)
