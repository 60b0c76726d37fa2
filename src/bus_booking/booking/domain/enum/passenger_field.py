from enum import Enum


class PassengerField(str, Enum):
    """乗客レコードの更新可能なフィールド"""

    NAME = "name"
    AGE = "age"
    GENDER = "gender"
