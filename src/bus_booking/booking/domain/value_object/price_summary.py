from dataclasses import dataclass

from bus_booking.shared.domain import Money


@dataclass(frozen=True)
class PriceSummary:
    """料金サマリ（座席単価 × 座席数の定額計算）"""

    seat_count: int
    per_seat_price: Money

    @property
    def total(self) -> Money:
        return self.per_seat_price.multiply(self.seat_count)
