from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class SearchTripsRequest(BaseModel):
    """便検索リクエストスキーマ（検索画面のクエリパラメータ）"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [{"from": "Bangalore", "to": "Chennai", "date": "2025-01-01"}]
        },
    )

    from_city: str = Field(..., min_length=1, alias="from", description="出発都市")
    to_city: str = Field(..., min_length=1, alias="to", description="到着都市")
    travel_date: date = Field(..., alias="date", description="乗車日（ISO 8601）")
