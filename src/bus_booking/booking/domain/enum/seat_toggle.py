from enum import Enum


class SeatToggle(str, Enum):
    """座席クリックの結果"""

    SELECTED = "selected"
    DESELECTED = "deselected"
    # 予約済み座席のクリック。状態は変わらない
    UNAVAILABLE = "unavailable"
