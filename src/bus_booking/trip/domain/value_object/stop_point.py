from dataclasses import dataclass


@dataclass(frozen=True)
class StopPoint:
    """乗車地点 / 降車地点

    例: StopPoint(location="Majestic", time="21:30")
    """

    location: str
    time: str = ""

    def __post_init__(self) -> None:
        if not self.location:
            raise ValueError("StopPoint location cannot be empty")

    def __str__(self) -> str:
        if not self.time:
            return self.location
        return f"{self.location} - {self.time}"
