from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)"""

    value: datetime

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def combine(cls, day: date, clock: time) -> IsoDateTime:
        """乗車日と "HH:MM" の時刻から生成"""
        return cls(value=datetime.combine(day, clock))

    def __str__(self) -> str:
        return self.value.isoformat()

    def is_before(self, other: IsoDateTime) -> bool:
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        return self.value > other.value

    def next_day(self) -> IsoDateTime:
        return IsoDateTime(value=self.value + timedelta(days=1))
