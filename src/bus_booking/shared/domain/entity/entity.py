from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """識別子で同一性を判定する Entity 基底クラス

    Trip と BookingComposer はどちらも TripId を識別子に持つため、
    同一性は「同じ型かつ同じ識別子」で判定する。
    """

    def __init__(self, id: ID) -> None:
        if id is None:
            raise ValueError(f"{type(self).__name__} requires an id")
        self._id = id

    @property
    def id(self) -> ID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
