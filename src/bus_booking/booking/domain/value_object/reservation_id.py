from dataclasses import dataclass


@dataclass(frozen=True)
class ReservationId:
    """予約サービスが払い出した予約ID（確認画面への遷移に使う）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ReservationId cannot be empty")

    def __str__(self) -> str:
        return self.value
