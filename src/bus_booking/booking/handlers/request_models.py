from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bus_booking.booking.domain.enum import Gender, PassengerField


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ToggleSeatRequest(_Request):
    """座席クリックのリクエストスキーマ"""

    seat_number: int = Field(..., gt=0, alias="seatNumber", examples=[12])


class UpdatePassengerRequest(_Request):
    """乗客フォーム入力のリクエストスキーマ

    value はフィールドに応じて変換する。
    - name: 文字列
    - age: 空文字は未入力（None）、それ以外は整数
    - gender: Male / Female / Other
    """

    seat_number: int = Field(..., gt=0, alias="seatNumber")
    field: PassengerField
    value: Union[str, int, None] = None

    @model_validator(mode="after")
    def coerce_value(self) -> "UpdatePassengerRequest":
        if self.field == PassengerField.AGE:
            self.value = _parse_age(self.value)
        elif self.field == PassengerField.GENDER:
            self.value = Gender(self.value)
        else:
            self.value = "" if self.value is None else str(self.value)
        return self


class SelectPointRequest(_Request):
    """乗車地点 / 降車地点選択のリクエストスキーマ"""

    location: str = Field(..., min_length=1, examples=["Majestic"])


class CancelBookingRequest(_Request):
    booking_id: str = Field(..., min_length=1, alias="bookingId")


def _parse_age(value: object) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValueError(f"Age must be a whole number: {value!r}")
