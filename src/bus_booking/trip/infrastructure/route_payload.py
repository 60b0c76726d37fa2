from datetime import date, time
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bus_booking.shared.utils import to_amount


class StopPointPayload(BaseModel):
    """乗降地点のワイヤ形式"""

    location: str = Field(..., min_length=1)
    time: str = ""


class BusPayload(BaseModel):
    """バス情報のワイヤ形式"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    bus_name: str = Field(default="", alias="busName")
    total_seats: int = Field(..., gt=0, alias="totalSeats")


class RoutePayload(BaseModel):
    """路線ディレクトリ API が返す便（route）のワイヤ形式

    例:
        {"_id": "r1", "bus": {"busName": "Volvo", "totalSeats": 40},
         "fromCity": "Bangalore", "toCity": "Chennai", "date": "2025-01-01",
         "departureTime": "21:30", "arrivalTime": "05:45", "price": 500,
         "bookedSeats": [3, 4], "boardingPoints": [...], "droppingPoints": [...]}
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, alias="_id")
    bus: BusPayload
    from_city: str = Field(..., alias="fromCity")
    to_city: str = Field(..., alias="toCity")
    travel_date: date = Field(..., alias="date")
    departure_time: time = Field(..., alias="departureTime")
    arrival_time: time = Field(..., alias="arrivalTime")
    price: Decimal = Field(..., ge=0)
    booked_seats: list[int] = Field(default_factory=list, alias="bookedSeats")
    boarding_points: list[StopPointPayload] = Field(
        default_factory=list, alias="boardingPoints"
    )
    dropping_points: list[StopPointPayload] = Field(
        default_factory=list, alias="droppingPoints"
    )

    @field_validator("travel_date", mode="before")
    @classmethod
    def truncate_to_date(cls, v):
        """"2025-01-01T00:00:00.000Z" 形式も日付部分だけを使う"""
        if isinstance(v, str):
            return date.fromisoformat(v[:10])
        return v

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_amount(v)
