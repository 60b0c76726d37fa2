from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class SearchCriteria:
    """便検索条件（出発都市・到着都市・乗車日）"""

    from_city: str
    to_city: str
    travel_date: date

    def __post_init__(self) -> None:
        if not self.from_city.strip() or not self.to_city.strip():
            raise ValueError("Both from_city and to_city are required")
        if self.from_city.strip().lower() == self.to_city.strip().lower():
            raise ValueError("from_city and to_city must be different")
