from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from bus_booking.booking.domain.enum import Gender, PassengerField


@dataclass(frozen=True)
class PassengerRecord:
    """座席1つ分の乗客情報

    座席が選択された瞬間に既定値で生成され、選択解除で破棄される。
    更新は with_field で新しいインスタンスを返す（コピーオンライト）。
    """

    seat_number: int
    name: str = ""
    age: Optional[int] = None
    gender: Gender = Gender.MALE

    def with_field(self, field: PassengerField | str, value: object) -> PassengerRecord:
        """1フィールドだけ差し替えたレコードを返す"""
        field = PassengerField(field)

        if field == PassengerField.NAME:
            if not isinstance(value, str):
                raise ValueError(f"Passenger name must be a string: {value!r}")
            return replace(self, name=value)

        if field == PassengerField.AGE:
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"Passenger age must be an integer: {value!r}")
            return replace(self, age=value)

        return replace(self, gender=Gender(value))

    def is_complete(self) -> bool:
        """氏名が空でなく、年齢が正の整数であれば入力完了"""
        return bool(self.name.strip()) and self.age is not None and self.age > 0
