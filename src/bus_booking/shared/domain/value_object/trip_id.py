from dataclasses import dataclass


@dataclass(frozen=True)
class TripId:
    """便（路線スケジュール）ID

    路線ディレクトリの route の _id。API のパス（/routes/{id}）に
    埋め込むため、空白のみの値や "/" を含む値は受け付けない。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("TripId cannot be empty")
        if "/" in self.value:
            raise ValueError(f"TripId must not contain '/': {self.value}")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
